"""OLED preview buffer - local mirror of the last lines sent to the display"""

from collections import deque
from typing import Deque, List, Optional

OLED_MAX_LINES = 8


class OledBuffer:
    """
    Rolling buffer of the most recent OLED lines (oldest dropped first)

    Text is stripped; blank text is rejected.
    """

    def __init__(self, max_lines: int = OLED_MAX_LINES):
        self._lines: Deque[str] = deque(maxlen=max_lines)

    def push(self, text: str) -> Optional[str]:
        """Append a line; returns the stored text, or None when text was blank"""
        line = (text or "").strip()
        if not line:
            return None
        self._lines.append(line)
        return line

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
