from pathlib import Path

import pytest

from managers.config_manager import ConfigManager
from models.enums import EffectID, LogLevel

SRC_DIR = Path(__file__).parent.parent / "src"


def write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def defaults(tmp_path):
    write(tmp_path / "config" / "factory_defaults.yaml", """
device:
  base_url: http://10.0.0.1
poller:
  interval_ms: 500
""")
    return tmp_path


def test_shipped_config_loads():
    config = ConfigManager(base_dir=SRC_DIR).load()

    assert config.device.base_url == "http://192.168.4.1"
    assert config.poller.interval_ms == 200
    assert config.poller.pressed_labels == ["0", "Pressionado"]
    assert config.matrix.default_color == "#ff0000"
    assert config.matrix.effect_intervals[EffectID.WAVE_EXPAND] == 300
    assert config.api.port == 8000
    assert config.logging.level == LogLevel.INFO


def test_include_files_are_merged(defaults):
    write(defaults / "config" / "config.yaml", "include:\n  - a.yaml\n  - b.yaml\n")
    write(defaults / "config" / "a.yaml", "device:\n  base_url: http://board.local/\n  timeout: 0.5\n")
    write(defaults / "config" / "b.yaml", "api:\n  port: 9001\n")

    config = ConfigManager(base_dir=defaults).load()

    assert config.device.base_url == "http://board.local"
    assert config.device.timeout == 0.5
    assert config.api.port == 9001
    # untouched sections keep their defaults
    assert config.poller.interval_ms == 200


def test_monolithic_config(defaults):
    write(defaults / "config" / "config.yaml", """
matrix:
  default_color: "#123abc"
  effect_intervals:
    fire: 80
    not_an_effect: 10
logging:
  level: debug
  use_colors: false
""")
    config = ConfigManager(base_dir=defaults).load()

    assert config.matrix.default_color == "#123abc"
    assert config.matrix.effect_intervals == {EffectID.FIRE: 80}
    assert config.logging.level == LogLevel.DEBUG
    assert config.logging.use_colors is False


def test_missing_config_falls_back_to_factory_defaults(defaults):
    config = ConfigManager(base_dir=defaults).load()

    assert config.device.base_url == "http://10.0.0.1"
    assert config.poller.interval_ms == 500


def test_missing_include_falls_back_to_factory_defaults(defaults):
    write(defaults / "config" / "config.yaml", "include:\n  - gone.yaml\n")
    config = ConfigManager(base_dir=defaults).load()
    assert config.device.base_url == "http://10.0.0.1"


def test_invalid_values_use_defaults(defaults, capsys):
    write(defaults / "config" / "config.yaml", """
matrix:
  default_color: purple
logging:
  level: LOUD
""")
    config = ConfigManager(base_dir=defaults).load()

    assert config.matrix.default_color == "#ff0000"
    assert config.logging.level == LogLevel.INFO
    assert "value: LOUD" in capsys.readouterr().out
