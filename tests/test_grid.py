"""Grid model: walkability, layouts, obstacle generation."""

import random

import pytest

from core.errors import ConfigurationError, ObstaclePlacementError
from world.grid import CellKind, Grid


# --------------------------------------------------------------------------
# Walkability
# --------------------------------------------------------------------------

class TestWalkable:
    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (7, 0), (0, 5), (100, 100), (-3, -3)])
    def test_out_of_bounds_is_not_walkable(self, open_grid, x, y):
        assert open_grid.walkable(x, y) is False

    def test_out_of_bounds_kind_is_obstacle(self, open_grid):
        assert open_grid.kind(-1, 2) == CellKind.OBSTACLE

    def test_empty_cells_walkable(self, open_grid):
        assert open_grid.walkable(0, 0)
        assert open_grid.walkable(5, 4)

    def test_goal_not_walkable(self, open_grid):
        for y in range(5):
            assert not open_grid.walkable(6, y)
            assert open_grid.is_goal(6, y)

    def test_obstacle_not_walkable(self):
        grid = Grid.from_layout([
            "..#...C",
            "......C",
        ])
        assert not grid.walkable(2, 0)
        assert grid.walkable(2, 1)


# --------------------------------------------------------------------------
# Layouts
# --------------------------------------------------------------------------

class TestLayout:
    def test_goal_on_right(self, open_grid):
        assert open_grid.goal_column == 6
        assert open_grid.advance == 1
        assert open_grid.spawn_column == 0
        assert open_grid.goal_edge == 600.0

    def test_goal_on_left_mirrors_board(self):
        grid = Grid.from_layout(["C.....", "C....."], cell_size=50)
        assert grid.goal_column == 0
        assert grid.advance == -1
        assert grid.spawn_column == 5
        assert grid.goal_edge == 50.0
        assert grid.past_goal_edge(50.0)
        assert not grid.past_goal_edge(50.5)

    def test_unknown_char_rejected(self):
        with pytest.raises(ConfigurationError):
            Grid.from_layout(["..x..C"])

    def test_missing_goal_column_rejected(self):
        with pytest.raises(ConfigurationError):
            Grid.from_layout(["......", "......"])

    def test_partial_goal_column_rejected(self):
        with pytest.raises(ConfigurationError):
            Grid.from_layout([".....C", "......"])

    def test_goal_column_must_be_on_edge(self):
        with pytest.raises(ConfigurationError):
            Grid.from_layout(["..C...", "..C..."])

    def test_ragged_rows_rejected(self):
        with pytest.raises(ConfigurationError):
            Grid.from_layout(["......C", "....C"])

    def test_cell_conversions(self, open_grid):
        assert open_grid.cell_at((150.0, 249.9)) == (1, 2)
        center = open_grid.cell_center((1, 2))
        assert (center.x, center.y) == (150.0, 250.0)

    def test_contains_point(self, open_grid):
        assert open_grid.contains_point(0, 0)
        assert open_grid.contains_point(699, 499)
        assert not open_grid.contains_point(700, 10)
        assert not open_grid.contains_point(10, 500)
        assert not open_grid.contains_point(-1, 10)


# --------------------------------------------------------------------------
# Generation
# --------------------------------------------------------------------------

class TestGenerate:
    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
    def test_reference_board(self, seed):
        grid = Grid.generate(5, 7, 5, random.Random(seed))

        assert grid.goal_column == 6
        assert all(grid.is_goal(6, y) for y in range(5))
        assert sum(row.count(CellKind.GOAL) for row in grid.cells) == 5
        assert grid.obstacle_count == 5

        obstacles = [
            (x, y) for y, row in enumerate(grid.cells)
            for x, kind in enumerate(row) if kind == CellKind.OBSTACLE
        ]
        for x, y in obstacles:
            # two columns nearest the castle stay open
            assert x <= 4
            assert not grid.is_goal(x, y)

    def test_same_seed_same_board(self):
        a = Grid.generate(5, 7, 5, random.Random(99))
        b = Grid.generate(5, 7, 5, random.Random(99))
        assert a.cells == b.cells

    def test_left_goal_keeps_margin(self):
        grid = Grid.generate(5, 7, 8, random.Random(3), goal_column=0)
        assert grid.goal_column == 0
        assert grid.obstacle_count == 8
        assert all(
            x >= 2 for row in grid.cells
            for x, kind in enumerate(row) if kind == CellKind.OBSTACLE
        )

    def test_region_can_be_filled_exactly(self):
        grid = Grid.generate(2, 4, 4, random.Random(5), max_attempts=10_000)
        assert grid.obstacle_count == 4

    def test_too_many_obstacles_fails_loudly(self):
        # 5 rows x 5 columns available
        with pytest.raises(ObstaclePlacementError):
            Grid.generate(5, 7, 26, random.Random(0))

    def test_attempt_budget_is_bounded(self):
        class Stuck(random.Random):
            def randint(self, a, b):
                return a

        with pytest.raises(ObstaclePlacementError):
            Grid.generate(5, 7, 2, Stuck(), max_attempts=50)

    def test_bad_goal_column(self):
        with pytest.raises(ConfigurationError):
            Grid.generate(5, 7, 0, random.Random(0), goal_column=3)

    def test_zero_obstacles(self):
        grid = Grid.generate(3, 4, 0, random.Random(0))
        assert grid.obstacle_count == 0
