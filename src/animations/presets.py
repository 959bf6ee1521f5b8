"""
Static matrix patterns

Indices are logical (row-major, row 0 = top). Presets are one-shot: the
controller stops any effect, paints the pattern once and sends it.
"""

from typing import Dict, Tuple

from models.color import Color, ColorBuffer, new_buffer
from models.enums import PresetID
from models.errors import PresetNotFoundError

PRESETS: Dict[PresetID, Tuple[int, ...]] = {
    PresetID.HEART: (1, 3, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16, 18, 22),
    PresetID.SMILE: (6, 8, 11, 13, 15, 19, 21, 22, 23),
    PresetID.X: (0, 4, 6, 8, 12, 16, 18, 20, 24),
    PresetID.CHECK: (4, 8, 12, 16, 20),
    PresetID.ARROW_UP: (2, 6, 7, 8, 12, 17, 22),
    PresetID.ARROW_DOWN: (2, 7, 12, 16, 17, 18, 22),
    PresetID.ARROW_LEFT: (2, 6, 10, 11, 12, 13, 14, 16, 22),
    PresetID.ARROW_RIGHT: (2, 8, 10, 11, 12, 13, 14, 18, 22),
    PresetID.SQUARE: (0, 1, 2, 3, 4, 5, 9, 10, 14, 15, 19, 20, 21, 22, 23, 24),
    PresetID.DIAMOND: (2, 6, 8, 10, 14, 16, 18, 22),
    PresetID.PLUS: (2, 7, 10, 11, 12, 13, 14, 17, 22),
}


def render_preset(preset_id: PresetID, color: Color) -> ColorBuffer:
    """Pattern cells in `color`, everything else off"""
    cells = PRESETS.get(preset_id)
    if cells is None:
        raise PresetNotFoundError(str(preset_id))

    frame = new_buffer()
    for index in cells:
        frame[index] = color
    return frame
