"""
Device schemas - OLED, buzzer and RGB LED commands, and the polled display state
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class OledTextRequest(BaseModel):
    text: str = Field(max_length=64, description="Line to show; blank text is ignored")

    class Config:
        json_schema_extra = {"example": {"text": "Hello BitDogLab"}}


class OledResponse(BaseModel):
    sent: bool = Field(description="False when the text was blank and nothing was sent")
    lines: List[str] = Field(description="Local preview, oldest first (max 8)")


class BuzzerRequest(BaseModel):
    freq: int = Field(ge=20, le=20000, description="Tone frequency (Hz)")
    dur: int = Field(gt=0, le=10000, description="Duration (ms)")
    channel: str = Field("A", min_length=1, max_length=8, description="Buzzer id on the board")

    class Config:
        json_schema_extra = {"example": {"freq": 440, "dur": 200, "channel": "A"}}


class RGBRequest(BaseModel):
    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    class Config:
        json_schema_extra = {"example": {"r": 255, "g": 128, "b": 0}}


class CommandResponse(BaseModel):
    queued: bool = Field(True, description="Command handed to the device client")


class ButtonView(BaseModel):
    pressed: bool
    label: str


class JoystickView(BaseModel):
    x: int = Field(description="Raw X (0-4095)")
    y: int = Field(description="Raw Y (0-4095)")
    button_pressed: bool
    button_label: str
    offset_x: float = Field(description="Widget offset from center (px)")
    offset_y: float = Field(description="Widget offset from center (px)")


class TemperatureView(BaseModel):
    value: float = Field(description="Raw reading (C)")
    angle: float = Field(description="Needle angle, -90..90 degrees")
    band: str = Field(description="COOL, WARM, HOT or VERY_HOT")
    color: str = Field(description="Gauge fill color")


class RGBView(BaseModel):
    r: int
    g: int
    b: int


class DisplayStateResponse(BaseModel):
    """Latest polled board state as display values"""
    buttons: Dict[str, ButtonView]
    joystick: JoystickView
    uptime: Optional[str] = None
    temperature: Optional[TemperatureView] = None
    rgb: Optional[RGBView] = None
    poller_running: bool = Field(description="State poller timer active")
