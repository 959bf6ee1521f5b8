"""
Configuration models - typed views over the merged YAML data

ConfigManager builds these from config.yaml; every section is optional and
falls back to the defaults declared here.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from models.enums import EffectID, LogLevel

DEFAULT_PRESSED_LABELS = ["0", "Pressionado"]


@dataclass(frozen=True)
class DeviceConfig:
    """Where the board lives and how long one request may take"""
    base_url: str = "http://192.168.4.1"
    timeout: float = 2.0


@dataclass(frozen=True)
class PollerConfig:
    interval_ms: int = 200
    # Raw button values that mean "pressed" (numeric and localized label)
    pressed_labels: List[str] = field(default_factory=lambda: list(DEFAULT_PRESSED_LABELS))


@dataclass(frozen=True)
class MatrixConfig:
    default_color: str = "#ff0000"
    # Per-effect interval overrides; effects use their own default otherwise
    effect_intervals: Dict[EffectID, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"])


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    use_colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    """All sections together"""
    device: DeviceConfig = field(default_factory=DeviceConfig)
    poller: PollerConfig = field(default_factory=PollerConfig)
    matrix: MatrixConfig = field(default_factory=MatrixConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
