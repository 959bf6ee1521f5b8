"""
State parser - /state.shtml -> DeviceSnapshot

The board renders its live state as markup with one element per field, e.g.

    <span id="btna">1</span><span id="joyx">2051</span><span id="uptime">42</span>

Values are read by element id (text content, whitespace stripped). Missing or
malformed fields never raise: they fall back to defaults or stay None.
"""

from html.parser import HTMLParser
from typing import Dict, Iterable, List, Optional, Tuple

from models.config import DEFAULT_PRESSED_LABELS
from models.device import JOYSTICK_CENTER, DeviceSnapshot, JoystickState

# Element ids used by the firmware
FIELD_BUTTON_A = "btna"
FIELD_BUTTON_B = "btnb"
FIELD_JOY_X = "joyx"
FIELD_JOY_Y = "joyy"
FIELD_JOY_BUTTON = "joybtn"
FIELD_UPTIME = "uptime"
FIELD_TEMPERATURE = "temp"
FIELD_RGB = ("rgbr", "rgbg", "rgbb")

# joybtn reads "0" while pressed (pull-up); the firmware reports "1" at rest
JOY_BUTTON_PRESSED = "0"
JOY_BUTTON_DEFAULT = "1"

VOID_TAGS = {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}


class _FieldCollector(HTMLParser):
    """Collects the text content of every element carrying an id"""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.fields: Dict[str, str] = {}
        # (tag, id or None) for every open element
        self._open: List[Tuple[str, Optional[str]]] = []

    def handle_starttag(self, tag, attrs):
        element_id = dict(attrs).get("id")
        if element_id is not None:
            self.fields.setdefault(element_id, "")
        if tag not in VOID_TAGS:
            self._open.append((tag, element_id))

    def handle_startendtag(self, tag, attrs):
        element_id = dict(attrs).get("id")
        if element_id is not None:
            self.fields.setdefault(element_id, "")

    def handle_endtag(self, tag):
        for pos in range(len(self._open) - 1, -1, -1):
            if self._open[pos][0] == tag:
                del self._open[pos:]
                return

    def handle_data(self, data):
        for _, element_id in self._open:
            if element_id is not None:
                self.fields[element_id] += data


def extract_fields(document: str) -> Dict[str, str]:
    """Map element id -> stripped text content"""
    collector = _FieldCollector()
    collector.feed(document or "")
    collector.close()
    return {key: value.strip() for key, value in collector.fields.items()}


def _parse_int(raw: Optional[str], default: Optional[int]) -> Optional[int]:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        try:
            return int(float(raw))
        except ValueError:
            return default


def _parse_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except ValueError:
        return None


class StateParser:
    """
    Parses state documents into DeviceSnapshot

    Buttons count as pressed when their raw text equals one of
    `pressed_labels` (the firmware has reported both "0" and a localized
    "Pressionado" label).
    """

    def __init__(self, pressed_labels: Optional[Iterable[str]] = None):
        labels = DEFAULT_PRESSED_LABELS if pressed_labels is None else pressed_labels
        self.pressed_labels = frozenset(labels)

    def is_pressed(self, raw: Optional[str]) -> bool:
        return raw is not None and raw in self.pressed_labels

    def parse(self, document: str) -> DeviceSnapshot:
        fields = extract_fields(document)

        joystick = JoystickState(
            x=_parse_int(fields.get(FIELD_JOY_X), JOYSTICK_CENTER),
            y=_parse_int(fields.get(FIELD_JOY_Y), JOYSTICK_CENTER),
            button_pressed=fields.get(FIELD_JOY_BUTTON, JOY_BUTTON_DEFAULT) == JOY_BUTTON_PRESSED,
        )

        uptime = fields.get(FIELD_UPTIME) or None

        rgb = None
        channels = [_parse_int(fields.get(name), None) for name in FIELD_RGB]
        if all(value is not None for value in channels):
            rgb = tuple(max(0, min(255, value)) for value in channels)

        return DeviceSnapshot(
            button_a_pressed=self.is_pressed(fields.get(FIELD_BUTTON_A)),
            button_b_pressed=self.is_pressed(fields.get(FIELD_BUTTON_B)),
            joystick=joystick,
            uptime=uptime,
            temperature=_parse_float(fields.get(FIELD_TEMPERATURE)),
            rgb=rgb,
        )
