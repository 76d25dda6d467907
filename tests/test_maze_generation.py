import random

import numpy as np
import pytest

from snackmaze.errors import InvalidConfigurationError
from snackmaze.generators.maze import (
    CellCoord, Direction, Maze, find_path, generate_maze, reachable_cells, solution_path,
)


def _has_cycle(maze: Maze) -> bool:
    """Union-find over carved passages; a repeated root means a loop."""
    parent = {}

    def find(c):
        while parent.setdefault(c, c) != c:
            c = parent[c]
        return c

    for cell in maze.iter_cells():
        coord = cell.coord
        for direction in (Direction.RIGHT, Direction.DOWN):
            other = coord.neighbor(direction)
            if maze.in_bounds(other) and not cell.has_wall(direction):
                ra, rb = find(coord), find(other)
                if ra == rb:
                    return True
                parent[ra] = rb
    return False


def test_two_by_two_maze_has_three_passages():
    maze = generate_maze(2, 2, seed=0)

    assert maze.carved_edge_count() == 3
    assert len(reachable_cells(maze)) == 4
    assert maze.start == CellCoord(0, 0)
    assert maze.goal == CellCoord(1, 1)
    assert maze.cell(0, 0).is_start
    assert maze.cell(1, 1).is_goal
    assert not maze.cell(0, 1).is_start and not maze.cell(0, 1).is_goal


@pytest.mark.parametrize("rows,cols", [(2, 2), (2, 7), (5, 3), (7, 7), (13, 13), (20, 31)])
@pytest.mark.parametrize("seed", [0, 1, 42])
def test_generated_maze_is_spanning_tree(rows, cols, seed):
    maze = generate_maze(rows, cols, seed=seed)

    assert maze.carved_edge_count() == rows * cols - 1
    assert len(reachable_cells(maze)) == rows * cols
    assert not _has_cycle(maze)


@pytest.mark.parametrize("seed", range(5))
def test_walls_are_symmetric(seed):
    maze = generate_maze(9, 11, seed=seed)

    for cell in maze.iter_cells():
        for direction in Direction:
            other = cell.coord.neighbor(direction)
            if maze.in_bounds(other):
                assert cell.has_wall(direction) == maze.cell(other.row, other.col).has_wall(direction.opposite())


def test_outer_border_stays_closed():
    maze = generate_maze(6, 8, seed=3)

    assert maze.walls[0, :, Direction.UP.wall_index].all()
    assert maze.walls[-1, :, Direction.DOWN.wall_index].all()
    assert maze.walls[:, 0, Direction.LEFT.wall_index].all()
    assert maze.walls[:, -1, Direction.RIGHT.wall_index].all()


def test_single_path_between_start_and_goal():
    maze = generate_maze(8, 8, seed=11)

    path = solution_path(maze)
    assert path[0] == maze.start
    assert path[-1] == maze.goal
    # Consecutive cells are adjacent and joined by a passage
    for a, b in zip(path, path[1:]):
        assert b in maze.open_neighbors(a)
    # Removing any step of a tree path disconnects start from goal
    assert len(set(path)) == len(path)


def test_same_seed_same_maze():
    a = generate_maze(10, 10, seed=7)
    b = generate_maze(10, 10, seed=7)
    c = generate_maze(10, 10, seed=8)

    assert np.array_equal(a.walls, b.walls)
    assert not np.array_equal(a.walls, c.walls)


def test_injected_rng_is_used():
    a = generate_maze(6, 6, rng=random.Random(5))
    b = generate_maze(6, 6, rng=random.Random(5))

    assert np.array_equal(a.walls, b.walls)


def test_seed_is_recorded_when_drawn():
    maze = generate_maze(4, 4)

    assert maze.seed is not None
    assert np.array_equal(generate_maze(4, 4, seed=maze.seed).walls, maze.walls)


@pytest.mark.parametrize("rows,cols", [(1, 5), (5, 1), (0, 0), (-3, 4)])
def test_too_small_grid_is_rejected(rows, cols):
    with pytest.raises(InvalidConfigurationError):
        generate_maze(rows, cols, seed=0)


def test_maze_constructor_rejects_small_grid():
    with pytest.raises(InvalidConfigurationError):
        Maze(1, 1)


def test_carve_outside_grid_is_rejected():
    maze = Maze(2, 2)
    with pytest.raises(InvalidConfigurationError):
        maze.carve(CellCoord(0, 0), Direction.UP)


def test_find_path_unreachable_returns_empty():
    maze = Maze(2, 2)
    assert find_path(maze, CellCoord(0, 0), CellCoord(1, 1)) == []


def test_to_rows_matches_grid_shape():
    maze = generate_maze(3, 5, seed=2)
    rows = maze.to_rows()

    assert len(rows) == 3
    assert all(len(row) == 5 for row in rows)
    assert rows[2][4].is_goal
