import pytest

from game_system import DifficultyConfig, GameConfig, GridConfig, TimingConfig
from memory_game import create_default_config


def test_defaults_match_the_classic_game():
    config = GameConfig()

    assert (config.grid.rows, config.grid.cols) == (4, 4)
    assert config.tile_count == 16
    assert config.timing.flash_duration_ms == 300
    assert config.timing.gap_ms == 150
    assert config.timing.post_delay_ms == 500
    assert config.timing.flash_step_ms == 450
    assert config.difficulty.max_sequence_length == 10
    assert config.target_fps == pytest.approx(60.0)


def test_default_config_validates():
    create_default_config().validate()
    GameConfig().validate()


@pytest.mark.parametrize("length, expected", [(1, 1.0), (2, 2.0), (5, 5.0), (10, 10.0)])
def test_time_limit_grows_one_second_per_round(length, expected):
    assert DifficultyConfig().time_limit_for(length) == expected


def test_custom_time_ramp():
    difficulty = DifficultyConfig(base_time_limit_s=2.0, time_increment_s=0.5)

    assert difficulty.time_limit_for(3) == 3.0


@pytest.mark.parametrize("config", [
    GameConfig(grid=GridConfig(rows=0, cols=4)),
    GameConfig(grid=GridConfig(rows=4, cols=-1)),
    GameConfig(frame_duration_ms=0),
    GameConfig(timing=TimingConfig(gap_ms=-1)),
    GameConfig(timing=TimingConfig(tick_interval_ms=0)),
    GameConfig(difficulty=DifficultyConfig(max_sequence_length=0)),
    GameConfig(difficulty=DifficultyConfig(base_time_limit_s=0)),
    GameConfig(difficulty=DifficultyConfig(time_increment_s=-0.5)),
])
def test_invalid_configs_are_rejected(config):
    with pytest.raises(ValueError):
        config.validate()
