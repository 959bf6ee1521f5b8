"""
Temperature gauge math

Needle sweeps -90deg (0 C) to +90deg (100 C); the fill band is picked from the
raw, unclamped reading.
"""

from dataclasses import dataclass
from typing import Dict

from models.enums import TemperatureBand

GAUGE_MIN = 0.0
GAUGE_MAX = 100.0

BAND_COLORS: Dict[TemperatureBand, str] = {
    TemperatureBand.COOL: "#3b82f6",
    TemperatureBand.WARM: "#22c55e",
    TemperatureBand.HOT: "#f59e0b",
    TemperatureBand.VERY_HOT: "#ef4444",
}


@dataclass(frozen=True)
class GaugeReading:
    temperature: float
    angle: float
    band: TemperatureBand
    color: str


def needle_angle(temperature: float) -> float:
    clamped = max(GAUGE_MIN, min(GAUGE_MAX, temperature))
    return -90.0 + (clamped - GAUGE_MIN) / (GAUGE_MAX - GAUGE_MIN) * 180.0


def temperature_band(temperature: float) -> TemperatureBand:
    if temperature < 30:
        return TemperatureBand.COOL
    if temperature < 50:
        return TemperatureBand.WARM
    if temperature < 70:
        return TemperatureBand.HOT
    return TemperatureBand.VERY_HOT


def read_gauge(temperature: float) -> GaugeReading:
    band = temperature_band(temperature)
    return GaugeReading(
        temperature=temperature,
        angle=needle_angle(temperature),
        band=band,
        color=BAND_COLORS[band],
    )
