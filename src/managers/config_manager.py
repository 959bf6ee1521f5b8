"""
Config Manager

config/config.yaml either holds every section itself or lists section files
under `include:`. If anything in that chain is missing or unreadable, the
controller starts from config/factory_defaults.yaml instead. Missing keys
always fall back to the dataclass defaults in models.config.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from models.config import (
    ApiConfig,
    AppConfig,
    DeviceConfig,
    LoggingConfig,
    MatrixConfig,
    PollerConfig,
)
from models.enums import EffectID, LogLevel
from utils.colors import hex_to_rgb
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


def read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class ConfigManager:
    """
    Usage:
        config = ConfigManager().load()
        config.device.base_url      # "http://192.168.4.1"
        config.poller.interval_ms   # 200

    Paths are relative to base_dir, which defaults to src/.
    """

    def __init__(
        self,
        config_path: str = "config/config.yaml",
        defaults_path: str = "config/factory_defaults.yaml",
        base_dir: Optional[Path] = None
    ):
        self.base_dir = Path(base_dir) if base_dir else Path(__file__).resolve().parent.parent
        self.config_path = self.base_dir / config_path
        self.defaults_path = self.base_dir / defaults_path
        self.data: Dict[str, Any] = {}
        self.config: AppConfig = AppConfig()

    def load(self) -> AppConfig:
        try:
            self.data = self._read_main()
        except (OSError, yaml.YAMLError) as ex:
            log.error("Cannot load configuration", path=str(self.config_path), error=f"{type(ex).__name__}: {ex}")
            log.warn("Using factory defaults", path=str(self.defaults_path))
            self.data = read_yaml(self.defaults_path)

        self.config = self._build_config(self.data)
        log.info("Configuration loaded", sections=", ".join(sorted(self.data)) or "(none)")
        return self.config

    def _read_main(self) -> Dict[str, Any]:
        main = read_yaml(self.config_path)
        includes = main.pop("include", None)
        if not includes:
            return main
        return self._merge_includes(includes, self.config_path.parent)

    def _merge_includes(self, filenames: List[str], config_dir: Path) -> Dict[str, Any]:
        """Later files override earlier ones section by section"""
        merged: Dict[str, Any] = {}
        for filename in filenames:
            section = read_yaml(config_dir / filename)
            merged.update(section)
            log.debug("Included config file", file=filename, sections=", ".join(section))
        return merged

    # ===== Section builders =====

    def _build_config(self, data: Dict[str, Any]) -> AppConfig:
        return AppConfig(
            device=self._build_device(data.get("device") or {}),
            poller=self._build_poller(data.get("poller") or {}),
            matrix=self._build_matrix(data.get("matrix") or {}),
            api=self._build_api(data.get("api") or {}),
            logging=self._build_logging(data.get("logging") or {}),
        )

    def _build_device(self, section: Dict[str, Any]) -> DeviceConfig:
        defaults = DeviceConfig()
        return DeviceConfig(
            base_url=str(section.get("base_url", defaults.base_url)).rstrip("/"),
            timeout=float(section.get("timeout", defaults.timeout)),
        )

    def _build_poller(self, section: Dict[str, Any]) -> PollerConfig:
        defaults = PollerConfig()
        labels = section.get("pressed_labels", defaults.pressed_labels)
        return PollerConfig(
            interval_ms=int(section.get("interval_ms", defaults.interval_ms)),
            pressed_labels=[str(label) for label in labels],
        )

    def _build_matrix(self, section: Dict[str, Any]) -> MatrixConfig:
        defaults = MatrixConfig()
        intervals = {}
        for name, interval in (section.get("effect_intervals") or {}).items():
            try:
                intervals[EnumHelper.to_enum(EffectID, name)] = int(interval)
            except ValueError as ex:
                log.warn("Ignoring interval for unknown effect", effect=name, error=str(ex))

        default_color = str(section.get("default_color", defaults.default_color))
        try:
            hex_to_rgb(default_color)
        except ValueError:
            log.warn("Invalid default color, using default", color=default_color)
            default_color = defaults.default_color

        return MatrixConfig(
            default_color=default_color,
            effect_intervals=intervals,
        )

    def _build_api(self, section: Dict[str, Any]) -> ApiConfig:
        defaults = ApiConfig()
        return ApiConfig(
            host=str(section.get("host", defaults.host)),
            port=int(section.get("port", defaults.port)),
            cors_origins=list(section.get("cors_origins", defaults.cors_origins)),
        )

    def _build_logging(self, section: Dict[str, Any]) -> LoggingConfig:
        defaults = LoggingConfig()
        level_name = section.get("level")
        try:
            level = EnumHelper.to_enum(LogLevel, level_name) if level_name else defaults.level
        except ValueError:
            log.warn("Unknown log level, using default", value=level_name)
            level = defaults.level

        return LoggingConfig(
            level=level,
            use_colors=bool(section.get("use_colors", defaults.use_colors)),
        )
