"""
Matrix schemas - request/response models for matrix, effect and preset endpoints
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class MatrixResponse(BaseModel):
    """Current logical matrix plus what is driving it"""
    cells: List[Optional[str]] = Field(
        description="25 logical cells, row-major from the top-left; '#rrggbb' or null when off"
    )
    selected_color: str = Field(description="Foreground color ('#rrggbb')")
    scheduler_state: str = Field(description="IDLE or RUNNING")
    active_effect: Optional[str] = Field(None, description="Running effect ID, if any")
    interval_ms: Optional[int] = Field(None, description="Tick interval of the running effect")

    class Config:
        json_schema_extra = {
            "example": {
                "cells": ["#ff0000", None, None, None, "#ff0000"] + [None] * 20,
                "selected_color": "#ff0000",
                "scheduler_state": "RUNNING",
                "active_effect": "WAVE_TOP_BOTTOM",
                "interval_ms": 200
            }
        }


class ColorSelectRequest(BaseModel):
    """Request to change the foreground color"""
    color: str = Field(
        pattern=r"^#?[0-9a-fA-F]{6}$",
        description="Hex color, with or without '#'"
    )

    class Config:
        json_schema_extra = {"example": {"color": "#00ff88"}}


class LedToggleResponse(BaseModel):
    index: int = Field(description="Logical LED index (0-24)")
    color: Optional[str] = Field(None, description="New cell color, null when switched off")


class SendResponse(BaseModel):
    """A frame was scheduled for transmission (delivery is not awaited)"""
    queued: bool = Field(True, description="Frame handed to the transmitter")


class EffectInfo(BaseModel):
    id: str = Field(description="Effect ID")
    display_name: str = Field(description="Human-readable name")
    interval_ms: int = Field(description="Default tick interval")
    randomized: bool = Field(description="True when frames are non-reproducible")


class EffectListResponse(BaseModel):
    effects: List[EffectInfo] = Field(description="Available effects")
    count: int = Field(description="Number of effects")
    active: Optional[str] = Field(None, description="Running effect ID, if any")


class EffectStartRequest(BaseModel):
    """Optional overrides for an effect run"""
    interval_ms: Optional[int] = Field(
        None,
        gt=0,
        le=10000,
        description="Tick interval; the effect's default when omitted"
    )

    class Config:
        json_schema_extra = {"example": {"interval_ms": 150}}


class PresetInfo(BaseModel):
    id: str = Field(description="Preset ID")
    cells: List[int] = Field(description="Lit logical indices")


class PresetListResponse(BaseModel):
    presets: List[PresetInfo] = Field(description="Available static patterns")
    count: int = Field(description="Number of presets")
