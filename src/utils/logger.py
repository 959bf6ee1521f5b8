"""
Structured console logger

One line per event, optional detail lines underneath:

    [14:23:45] ANIMATION ✓ Started effect
               ├─ effect: WAVE_TOP_BOTTOM
               └─ interval_ms: 200

Modules bind a category once at import time:

    log = get_logger().for_category(LogCategory.POLLER)
    log.debug("State poll failed", error="ConnectTimeout")
"""

import sys
from datetime import datetime
from typing import Dict, Iterable, Optional, TextIO, Tuple

from models.enums import LogLevel, LogCategory


class Colors:
    """ANSI escape codes"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS: Dict[LogCategory, str] = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.MATRIX: Colors.BRIGHT_GREEN,
    LogCategory.TRANSMIT: Colors.MAGENTA,
    LogCategory.DEVICE: Colors.BRIGHT_BLUE,
    LogCategory.POLLER: Colors.BRIGHT_CYAN,
    LogCategory.DISPLAY: Colors.BRIGHT_MAGENTA,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
    LogCategory.API: Colors.BLUE,
    LogCategory.SHUTDOWN: Colors.RED,
}

# level -> (symbol, color)
LEVEL_STYLES: Dict[LogLevel, Tuple[str, str]] = {
    LogLevel.DEBUG: ('·', Colors.DIM),
    LogLevel.INFO: ('✓', Colors.GREEN),
    LogLevel.WARN: ('⚠', Colors.YELLOW),
    LogLevel.ERROR: ('✗', Colors.RED),
}

LEVEL_ORDER = (LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR)

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Console logger shared by the whole process (see get_logger()).

    Args:
        min_level: Events below this level are dropped
        use_colors: ANSI colors on/off (off for files and pipes)
        stream: Output stream; None means the current sys.stdout
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def is_enabled(self, level: LogLevel) -> bool:
        return LEVEL_ORDER.index(level) >= LEVEL_ORDER.index(self.min_level)

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def _headline(self, category: LogCategory, level: LogLevel, message: str) -> str:
        symbol, level_color = LEVEL_STYLES[level]
        return " ".join((
            datetime.now().strftime('[%H:%M:%S]'),
            self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, Colors.WHITE)),
            self._paint(symbol, level_color),
            self._paint(message, level_color),
        ))

    def _detail_lines(self, details: Iterable[str]) -> Iterable[str]:
        details = list(details)
        for i, detail in enumerate(details):
            branch = "└─" if i == len(details) - 1 else "├─"
            yield f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {detail}"

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        /,
        **kwargs
    ):
        """
        Emit one event.

        Args:
            category: Subsystem the event belongs to
            message: Headline text
            level: DEBUG, INFO, WARN or ERROR
            details: Extra free-form detail lines
            **kwargs: Rendered as "key: value" detail lines, in order
        """
        if not self.is_enabled(level):
            return

        lines = [self._headline(category, level, message)]
        lines.extend(self._detail_lines(
            [*(details or []), *(f"{key}: {value}" for key, value in kwargs.items())]
        ))

        stream = self.stream or sys.stdout
        stream.write("\n".join(lines) + "\n")

    def debug(self, category: LogCategory, message: str, /, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, /, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, /, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, /, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Category-bound view of a Logger; level filtering stays with the Logger"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, /, **kw):
        self._base.log(self._category, message, level, **kw)

    def debug(self, message: str, /, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, /, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, /, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, /, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """
    Reconfigure the shared Logger in place.

    Bound loggers created at import time hold a reference to it, so changes
    made at startup reach every module.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
