import pytest

from snackmaze.engine.movement import REJECTED, MoveResult, try_move
from snackmaze.generators.maze import CellCoord, Direction, generate_maze


def test_open_side_allows_move(small_maze):
    result = try_move(small_maze, CellCoord(0, 0), Direction.RIGHT)

    assert result.allowed
    assert result.to_cell == CellCoord(0, 1)
    assert result


def test_wall_blocks_move(small_maze):
    result = try_move(small_maze, CellCoord(0, 0), Direction.DOWN)

    assert not result.allowed
    assert result.to_cell is None
    assert result == REJECTED


def test_border_blocks_move(small_maze):
    assert not try_move(small_maze, CellCoord(0, 0), Direction.UP)
    assert not try_move(small_maze, CellCoord(0, 0), Direction.LEFT)
    assert not try_move(small_maze, CellCoord(1, 1), Direction.DOWN)


def test_border_blocks_move_even_without_wall_flag(small_maze):
    # Out-of-bounds destinations are rejected on bounds alone
    small_maze.walls[0, 0, Direction.UP.wall_index] = False
    assert not try_move(small_maze, CellCoord(0, 0), Direction.UP)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_never_allows_destination_outside_grid(seed):
    maze = generate_maze(5, 6, seed=seed)

    for cell in maze.iter_cells():
        for direction in Direction:
            result = try_move(maze, cell.coord, direction)
            if result.allowed:
                assert 0 <= result.to_cell.row < maze.rows
                assert 0 <= result.to_cell.col < maze.cols


def test_source_flag_agrees_with_destination_flag():
    maze = generate_maze(7, 7, seed=4)

    for cell in maze.iter_cells():
        for direction in Direction:
            result = try_move(maze, cell.coord, direction)
            if result.allowed:
                back = try_move(maze, result.to_cell, direction.opposite())
                assert back.to_cell == cell.coord


def test_move_result_defaults():
    assert MoveResult(allowed=False).to_cell is None
    assert bool(MoveResult(allowed=True, to_cell=CellCoord(0, 1)))


@pytest.mark.parametrize("name,expected", [
    ("up", Direction.UP), ("Down", Direction.DOWN), (" LEFT ", Direction.LEFT), (Direction.RIGHT, Direction.RIGHT),
])
def test_direction_parse(name, expected):
    assert Direction.parse(name) is expected
