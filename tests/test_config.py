from snackmaze.config import TICK_INTERVAL_MS, EngineSettings
from snackmaze.main import build_parser


def test_defaults():
    settings = EngineSettings.from_args(build_parser().parse_args([]))

    assert settings.difficulty == "easy"
    assert not settings.timer_enabled
    assert settings.seed is None
    assert settings.tick_interval_ms == TICK_INTERVAL_MS
    assert settings.validate_mazes


def test_command_line_options():
    args = build_parser().parse_args(
        ["--difficulty", "expert", "--timer", "--seed", "12", "--tick-ms", "100", "--no-validate"]
    )
    settings = EngineSettings.from_args(args)

    assert settings.difficulty == "expert"
    assert settings.timer_enabled
    assert settings.seed == 12
    assert settings.tick_interval_ms == 100
    assert not settings.validate_mazes


def test_from_args_tolerates_missing_attributes():
    class Bare:
        pass

    assert EngineSettings.from_args(Bare()) == EngineSettings()
