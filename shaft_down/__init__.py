"""
Shaft Down - fall through a scrolling shaft, dodge spikes, grab power-ups.
"""
