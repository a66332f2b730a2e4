"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# FIELD
# =============================================================================
CELL_SIZE = 16        # pixels per cell
WIDTH = 18            # cells, walls excluded
HEIGHT = 30           # cells
FLOOR_WIDTH = 5       # cells per generated floor run

# Pixel layout of the shaft (one wall cell on the left)
FIELD_LEFT = CELL_SIZE
FIELD_RIGHT = FIELD_LEFT + CELL_SIZE * WIDTH - 1
FIELD_TOP = 0
FIELD_BOTTOM = FIELD_TOP + CELL_SIZE * HEIGHT

# =============================================================================
# PROBABILITIES (percent, compared with <= against randrange(100))
# =============================================================================
HAZARD_PERCENT = 30
ITEM_PERCENT = 15
ITEM_INVULN_MAX = 33      # roll <= 33 -> invulnerability
ITEM_PARACHUTE_MAX = 66   # roll <= 66 -> parachute, otherwise weight

# =============================================================================
# TIMING (all in milliseconds)
# =============================================================================
FALL = 40
FALL_PARA = 60
FALL_WEIGHT = 20
WALK = 83
DAMAGE = 10               # one life point per tick (life=100)
PLAYER_FLASH = 80
INVULN_FLASH = 40
GAUGE_FLASH = 60
HAZARD_BREAK = 140
GAMEOVER = 3400
FPS_WINDOW = 1000

INVULN_TIME = 4000        # length of the invulnerability jingle
WEIGHT_CUTOFF = 0.8       # weight drops at this fraction of INVULN_TIME

# =============================================================================
# PLAYER
# =============================================================================
MAX_LIFE = 100
INVULN_SPRITES = 4        # shimmer cycles sprite_index through 0..3

# =============================================================================
# SCORES
# =============================================================================
HIGHSCORES = 10

# =============================================================================
# SOUNDS / MUSIC
# =============================================================================
SOUND_DAMAGE = "damage.wav"
SOUND_INVULN = "muteki.wav"
SOUND_PARACHUTE = "getpara.wav"
SOUND_WEIGHT = "getomori.wav"
SOUND_IMPACT = "spank.wav"
SOUND_BREAK = "break.wav"
SOUND_FOOT = "foot.wav"
SOUND_GAMEOVER = "gameover.wav"

MUSIC_HALT = "halt"
MUSIC_PAUSE = "pause"
MUSIC_RESUME = "resume"
