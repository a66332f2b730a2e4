"""
Tests for floor and power-up generation.
"""
import random

import pytest
from shaft_down.gameplay.floor import FloorGenerator, FloorRun, roll
from shaft_down.gameplay.grid import Grid, CellKind
from shaft_down.gameplay.constants import WIDTH, HEIGHT, FLOOR_WIDTH

from helpers import ScriptedRandom


def make_generator(values):
    grid = Grid(WIDTH, HEIGHT)
    return FloorGenerator(grid, ScriptedRandom(values)), grid


class TestRoll:
    """Tests for the percentage roll."""

    def test_inclusive_comparison(self):
        """A draw equal to the threshold still succeeds."""
        assert roll(ScriptedRandom([30]), 30)
        assert not roll(ScriptedRandom([31]), 30)


class TestGenerateFloor:
    """Tests for FloorGenerator.generate_floor."""

    def test_ground_run(self):
        """A high hazard draw yields solid ground across the run."""
        gen, grid = make_generator([10, 99])
        run = gen.generate_floor()

        assert run == FloorRun(start=5, kind=CellKind.SOLID_GROUND)
        bottom = grid.row(grid.bottom)
        assert bottom[5:10] == (CellKind.SOLID_GROUND,) * FLOOR_WIDTH
        assert set(bottom[:5] + bottom[10:]) == {CellKind.EMPTY}

    def test_hazard_run(self):
        """A draw at or below the threshold yields a hazard run."""
        gen, grid = make_generator([10, 30])
        assert gen.generate_floor().kind is CellKind.HAZARD

    def test_start_clamped_left(self):
        """Draws below FLOOR_WIDTH clamp the run to column 0."""
        gen, _ = make_generator([0, 99])
        assert gen.generate_floor().start == 0

    def test_start_clamped_right(self):
        """The largest draw clamps the run against the right wall."""
        gen, _ = make_generator([WIDTH + FLOOR_WIDTH - 1, 99])
        assert gen.generate_floor().start == WIDTH - FLOOR_WIDTH

    @pytest.mark.parametrize("seed", range(20))
    def test_runs_fit_and_are_uniform(self, seed):
        """Every run fits the field and is entirely one kind."""
        grid = Grid(WIDTH, HEIGHT)
        gen = FloorGenerator(grid, random.Random(seed))
        for _ in range(50):
            grid.clear_row(grid.bottom)
            run = gen.generate_floor()
            assert 0 <= run.start <= WIDTH - FLOOR_WIDTH
            cells = grid.row(grid.bottom)[run.start:run.start + FLOOR_WIDTH]
            assert set(cells) == {run.kind}
            assert sum(1 for c in grid.row(grid.bottom) if c is not CellKind.EMPTY) == FLOOR_WIDTH


class TestPlacePowerUp:
    """Tests for FloorGenerator.place_power_up."""

    @pytest.mark.parametrize("draw,expected", [
        (0, CellKind.POWER_UP_INVULN),
        (33, CellKind.POWER_UP_INVULN),
        (34, CellKind.POWER_UP_PARACHUTE),
        (66, CellKind.POWER_UP_PARACHUTE),
        (67, CellKind.POWER_UP_WEIGHT),
        (99, CellKind.POWER_UP_WEIGHT),
    ])
    def test_item_split(self, draw, expected):
        """The kind draw splits three ways at 33 and 66."""
        gen, grid = make_generator([15, draw])
        run = FloorRun(start=4, kind=CellKind.SOLID_GROUND)
        assert gen.place_power_up(run) is expected
        assert grid.get(4 + FLOOR_WIDTH // 2, grid.bottom - 1) is expected

    def test_failed_roll_places_nothing(self):
        """Above the item threshold nothing is placed."""
        gen, grid = make_generator([16])
        assert gen.place_power_up(FloorRun(start=0, kind=CellKind.SOLID_GROUND)) is None
        assert list(grid.iter_cells()) == []

    def test_never_on_hazard(self):
        """Hazard runs never get items, but still consume the item roll."""
        rng = ScriptedRandom([0, 0])
        grid = Grid(WIDTH, HEIGHT)
        gen = FloorGenerator(grid, rng)
        assert gen.place_power_up(FloorRun(start=0, kind=CellKind.HAZARD)) is None
        assert rng.values == [0]
        assert list(grid.iter_cells()) == []

    @pytest.mark.parametrize("seed", range(10))
    def test_items_sit_on_fresh_ground(self, seed):
        """Any placed item is directly above a solid-ground cell of the new run."""
        grid = Grid(WIDTH, HEIGHT)
        gen = FloorGenerator(grid, random.Random(seed))
        for _ in range(100):
            grid.clear_row(grid.bottom)
            grid.clear_row(grid.bottom - 1)
            run = gen.generate_floor()
            item = gen.place_power_up(run)
            if item is None:
                continue
            x = gen.run_item_column(run)
            assert grid.get(x, grid.bottom - 1) is item
            assert grid.get(x, grid.bottom) is CellKind.SOLID_GROUND
