"""
Control API

REST facade over the matrix controller, device commands and polled state.

Structure:
- routes/     : Endpoint handlers
- schemas/    : Pydantic request/response models
- middleware/ : Error handling
"""

from api.main import create_app

__all__ = ["create_app"]
