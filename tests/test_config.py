import pytest

from gridsnake.config import ConfigError, GameConfig


def test_defaults_match_classic_board():
    config = GameConfig()
    assert config.grid_size == 20
    assert config.tick_ms == 150
    assert config.food_reward == 10
    assert config.start == (10, 10)
    assert config.start_direction == "RIGHT"


def test_start_defaults_to_grid_centre():
    assert GameConfig(grid_size=7).start == (3, 3)
    assert GameConfig(grid_size=1).start == (0, 0)


@pytest.mark.parametrize("kwargs", [
    {"grid_size": 0},
    {"grid_size": -4},
    {"tick_ms": 0},
    {"food_reward": -1},
    {"start_direction": "NORTH"},
    {"grid_size": 5, "start": (5, 0)},
    {"start": (-1, 3)},
])
def test_invalid_configuration_is_rejected(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(grid_size=0)


@pytest.mark.parametrize("kwargs", [
    {"grid_size": 20.0},
    {"grid_size": True},
    {"tick_ms": 150.5},
    {"food_reward": "10"},
    {"start": (1.0, 2)},
    {"start": (1, 2, 3)},
])
def test_non_integer_settings_are_rejected(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs)


def test_start_is_stored_as_a_tuple():
    config = GameConfig(grid_size=8, start=[1, 2])
    assert config.start == (1, 2)
    assert isinstance(config.start, tuple)
