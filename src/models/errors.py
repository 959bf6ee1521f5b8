"""
Domain errors

Raised by the controller layer; the API maps them to JSON error bodies
(see api/middleware/error_handler.py).
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
        status_code: int = 400
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)


class EffectNotFoundError(DomainError):
    """Effect ID doesn't exist"""
    def __init__(self, effect_id: str):
        super().__init__(
            code="EFFECT_NOT_FOUND",
            message=f"Effect '{effect_id}' not found",
            details={"effect_id": effect_id},
            status_code=404
        )


class PresetNotFoundError(DomainError):
    """Preset ID doesn't exist"""
    def __init__(self, preset_id: str):
        super().__init__(
            code="PRESET_NOT_FOUND",
            message=f"Preset '{preset_id}' not found",
            details={"preset_id": preset_id},
            status_code=404
        )


class InvalidLedIndexError(DomainError):
    """LED index outside the 5x5 matrix"""
    def __init__(self, index: int):
        super().__init__(
            code="INVALID_LED_INDEX",
            message=f"LED index {index} is outside 0..24",
            details={"index": index},
            status_code=422
        )
