"""Parsing enum members from YAML values and URL path segments"""

from enum import Enum
from typing import Any, Type, TypeVar

E = TypeVar("E", bound=Enum)


def member_key(text: str) -> str:
    """'wave-top-bottom ' -> 'WAVE_TOP_BOTTOM'"""
    return text.strip().upper().replace("-", "_")


class EnumHelper:

    @staticmethod
    def to_enum(enum_class: Type[E], value: Any) -> E:
        """
        Resolve a member by name, case-insensitively, with '-' standing in for '_'.
        Members of enum_class are returned unchanged.

        Raises:
            ValueError: no member with that name
            TypeError: value is neither str nor an enum_class member
        """
        if isinstance(value, enum_class):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Expected str or {enum_class.__name__}, got {type(value).__name__}")

        member = enum_class.__members__.get(member_key(value))
        if member is None:
            raise ValueError(f"Invalid enum value '{value}' for {enum_class.__name__}")
        return member
