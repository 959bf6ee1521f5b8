"""
Error bodies returned by every endpoint
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    code: str = Field(description="Stable machine-readable code, e.g. EFFECT_NOT_FOUND")
    message: str
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ErrorResponse(BaseModel):
    error: ErrorDetail
    request_id: Optional[str] = Field(None, description="Also printed in the server log")

    class Config:
        json_schema_extra = {
            "example": {
                "error": {
                    "code": "PRESET_NOT_FOUND",
                    "message": "Preset 'TRIANGLE' not found",
                    "details": {"preset_id": "TRIANGLE"},
                    "timestamp": "2026-03-02T18:04:11Z"
                },
                "request_id": "5f0c2a9be1d4"
            }
        }


class FieldError(BaseModel):
    field: str = Field(description="Dotted path into the request, e.g. 'color.r'")
    message: str
    type: str


class ValidationErrorResponse(ErrorResponse):
    validation_errors: List[FieldError]

    class Config:
        json_schema_extra = {
            "example": {
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"error_count": 1},
                    "timestamp": "2026-03-02T18:04:11Z"
                },
                "validation_errors": [
                    {"field": "interval_ms", "message": "Input should be greater than 0", "type": "greater_than"}
                ],
                "request_id": "5f0c2a9be1d4"
            }
        }
