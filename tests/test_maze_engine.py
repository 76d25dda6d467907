import random

import pytest

from snackmaze.config import EngineSettings
from snackmaze.engine import MazeEngine, SessionStatus
import snackmaze.engine.maze_engine as maze_engine_module
from snackmaze.engine.movement import try_move
from snackmaze.errors import InvalidConfigurationError
from snackmaze.generators.difficulty import DifficultyLevel
from snackmaze.generators.maze import CellCoord, Direction, Maze
from snackmaze.validation import ValidationError

from conftest import path_directions


def _win(engine):
    for direction in path_directions(engine.solution_path()):
        engine.move(direction)


def _tick(engine, token=None):
    engine.countdown.ticked.emit(engine.session.token if token is None else token)


def _first_step(engine):
    return path_directions(engine.solution_path())[0]


def test_initial_session(engine):
    view = engine.snapshot()

    assert view.status == SessionStatus.PLAYING
    assert view.difficulty == DifficultyLevel.EASY
    assert view.position == CellCoord(0, 0)
    assert view.moves == 0
    assert not view.timer_enabled
    assert (view.maze.rows, view.maze.cols) == (7, 7)
    assert not engine.countdown.is_active


def test_select_difficulty_regenerates(engine):
    engine.move(_first_step(engine))
    assert engine.snapshot().moves == 1

    view = engine.select_difficulty(DifficultyLevel.HARD)

    assert (view.maze.rows, view.maze.cols) == (11, 11)
    assert view.position == CellCoord(0, 0)
    assert view.moves == 0
    assert view.status == SessionStatus.PLAYING
    assert view.difficulty == DifficultyLevel.HARD


def test_select_difficulty_by_name(engine):
    view = engine.select_difficulty("expert")

    assert (view.maze.rows, view.maze.cols) == (13, 13)


def test_request_new_maze_resets(engine):
    first = engine.snapshot().maze
    engine.move(_first_step(engine))

    view = engine.request_new_maze()

    assert view.maze is not first
    assert view.moves == 0
    assert view.position == CellCoord(0, 0)
    assert view.difficulty == DifficultyLevel.EASY


def test_each_session_gets_new_token(engine):
    token = engine.session.token
    engine.request_new_maze()
    assert engine.session.token != token


def test_walking_the_solution_wins(engine):
    won = []
    engine.game_won.connect(won.append)
    steps = len(path_directions(engine.solution_path()))

    _win(engine)

    view = engine.snapshot()
    assert view.status == SessionStatus.WON
    assert view.position == view.maze.goal
    assert view.moves == steps
    assert len(won) == 1
    assert won[0].status == SessionStatus.WON


def test_moves_after_win_change_nothing(engine):
    _win(engine)
    before = engine.snapshot()

    for direction in ("up", "left", "down", "right"):
        engine.move(direction)

    after = engine.snapshot()
    assert after.position == before.position
    assert after.moves == before.moves
    assert after.status == SessionStatus.WON


def test_rejected_move_emits_nothing(engine):
    changes = []
    engine.session_changed.connect(changes.append)

    # (0, 0) always has its outer top wall
    view = engine.move("up")

    assert view.moves == 0
    assert changes == []


def test_move_accepts_direction_names(engine):
    step = _first_step(engine)

    view = engine.move(step.value.upper())

    assert view.moves == 1


def test_unknown_direction_raises(engine):
    with pytest.raises(InvalidConfigurationError):
        engine.move("sideways")


def test_timer_mode_times_out_after_limit(timed_engine):
    expired = []
    timed_engine.timed_out.connect(expired.append)
    assert timed_engine.snapshot().time_remaining == 60
    assert timed_engine.countdown.is_active

    for _ in range(59):
        _tick(timed_engine)
    assert timed_engine.snapshot().time_remaining == 1
    assert timed_engine.snapshot().status == SessionStatus.PLAYING

    _tick(timed_engine)

    view = timed_engine.snapshot()
    assert view.time_remaining == 0
    assert view.status == SessionStatus.TIMED_OUT
    assert len(expired) == 1
    assert not timed_engine.countdown.is_active


def test_no_moves_after_timeout(timed_engine):
    for _ in range(60):
        _tick(timed_engine)

    view = timed_engine.move(_first_step(timed_engine))

    assert view.moves == 0
    assert view.position == CellCoord(0, 0)


def test_extra_ticks_never_go_negative(timed_engine):
    token = timed_engine.session.token
    for _ in range(65):
        _tick(timed_engine, token)

    assert timed_engine.snapshot().time_remaining == 0


def test_stale_tick_is_discarded(timed_engine):
    old_token = timed_engine.session.token
    _tick(timed_engine)
    timed_engine.request_new_maze()

    _tick(timed_engine, old_token)

    view = timed_engine.snapshot()
    assert view.time_remaining == 60
    assert timed_engine.countdown.bound_token == timed_engine.session.token


def test_win_cancels_countdown(timed_engine):
    _win(timed_engine)

    assert timed_engine.snapshot().status == SessionStatus.WON
    assert not timed_engine.countdown.is_active

    _tick(timed_engine)
    assert timed_engine.snapshot().status == SessionStatus.WON


def test_regeneration_restarts_countdown(timed_engine):
    for _ in range(10):
        _tick(timed_engine)

    view = timed_engine.select_difficulty("medium")

    assert view.time_remaining == 90
    assert timed_engine.countdown.bound_token == timed_engine.session.token


def test_set_timer_mode_off_cancels_countdown(timed_engine):
    view = timed_engine.set_timer_mode(False)

    assert not view.timer_enabled
    assert view.elapsed is None
    assert not timed_engine.countdown.is_active


def test_set_timer_mode_on_starts_countdown(engine):
    engine.move(_first_step(engine))

    view = engine.set_timer_mode(True)

    assert view.timer_enabled
    assert view.time_remaining == 60
    assert view.moves == 0
    assert engine.countdown.is_active


def test_invalid_difficulty_keeps_session(engine):
    before = engine.session

    with pytest.raises(InvalidConfigurationError):
        engine.select_difficulty("legendary")

    assert engine.session is before


def test_give_up_stops_clock_and_signals(timed_engine):
    requested = []
    timed_engine.give_up_requested.connect(lambda: requested.append(True))

    timed_engine.give_up()

    assert requested == [True]
    assert not timed_engine.countdown.is_active


def test_shutdown_cancels_and_ignores_input(timed_engine):
    timed_engine.shutdown()
    before = timed_engine.snapshot()

    _tick(timed_engine)
    timed_engine.move(_first_step(timed_engine))
    timed_engine.request_new_maze()

    after = timed_engine.snapshot()
    assert timed_engine.is_shut_down
    assert not timed_engine.countdown.is_active
    assert after == before


def test_seeded_engines_build_identical_mazes(qapp):
    a = MazeEngine(EngineSettings(), rng=random.Random(3))
    b = MazeEngine(EngineSettings(), rng=random.Random(3))
    try:
        assert (a.snapshot().maze.walls == b.snapshot().maze.walls).all()
    finally:
        a.shutdown()
        b.shutdown()


def test_settings_pick_initial_difficulty(qapp):
    eng = MazeEngine(EngineSettings(difficulty="hard", timer_enabled=True), rng=random.Random(0))
    try:
        view = eng.snapshot()
        assert view.difficulty == DifficultyLevel.HARD
        assert view.time_remaining == 120
    finally:
        eng.shutdown()


def test_unvalidated_generation_still_playable(qapp):
    eng = MazeEngine(EngineSettings(validate_mazes=False), rng=random.Random(8))
    try:
        assert eng.snapshot().maze.carved_edge_count() == 48
    finally:
        eng.shutdown()


def test_give_up_freezes_timed_session(timed_engine):
    timed_engine.give_up()

    assert timed_engine.is_abandoned
    _win(timed_engine)
    _tick(timed_engine)

    view = timed_engine.snapshot()
    assert view.status == SessionStatus.PLAYING
    assert view.moves == 0
    assert view.position == CellCoord(0, 0)
    assert view.time_remaining == 60


def test_new_maze_after_give_up_is_playable(timed_engine):
    timed_engine.give_up()

    timed_engine.request_new_maze()

    assert not timed_engine.is_abandoned
    assert timed_engine.countdown.is_active
    assert timed_engine.move(_first_step(timed_engine)).moves == 1


def test_moves_count_only_accepted_intents(engine):
    rng = random.Random(2024)
    accepted = rejected = 0

    for _ in range(200):
        session = engine.session
        if not session.is_playing:
            break
        direction = rng.choice(list(Direction))
        if try_move(session.maze, session.position, direction).allowed:
            accepted += 1
        else:
            rejected += 1
        engine.move(direction)

    assert accepted > 0 and rejected > 0
    assert engine.snapshot().moves == accepted


def test_rejected_maze_is_logged_and_keeps_session(engine, monkeypatch, caplog):
    before = engine.session
    monkeypatch.setattr(maze_engine_module, "generate_maze", lambda rows, cols, seed=None: Maze(rows, cols))

    with pytest.raises(ValidationError):
        engine.request_new_maze()

    assert engine.session is before
    assert "Cannot start easy session" in caplog.text
