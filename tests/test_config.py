import pytest

from classwork.config import AppConfig, ConfigError, load_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.toml"))
    assert cfg == AppConfig()
    assert cfg.tick_seconds == 1.0
    assert cfg.seed is True


def test_load_values(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('tick_seconds = 0.5\nseed = false\nmouse = false\nlog_level = "debug"\n', encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.tick_seconds == 0.5
    assert cfg.seed is False
    assert cfg.mouse is False
    assert cfg.log_level == "DEBUG"


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("tick_seconds = = 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_invalid_values_raise():
    with pytest.raises(ConfigError):
        AppConfig.from_toml({"tick_seconds": 0})
    with pytest.raises(ConfigError):
        AppConfig.from_toml({"tick_seconds": "fast"})
    with pytest.raises(ConfigError):
        AppConfig.from_toml({"log_level": "LOUD"})
