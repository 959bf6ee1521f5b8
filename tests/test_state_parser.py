import pytest

from models.device import JOYSTICK_CENTER
from services.state_parser import StateParser, extract_fields

FULL_DOCUMENT = """
<html><body>
  <p>Botao A: <span id="btna">0</span></p>
  <p>Botao B: <span id="btnb">1</span></p>
  <div id="joystick">
    X: <span id="joyx">3100</span>
    Y: <span id="joyy"> 900 </span>
    <span id="joybtn">0</span>
  </div>
  <span id="uptime">00:12:45</span>
  <span id="temp">27.5</span>
  <span id="rgbr">255</span><span id="rgbg">128</span><span id="rgbb">0</span>
</body></html>
"""


@pytest.fixture
def parser():
    return StateParser()


def test_extract_fields_reads_text_by_id():
    fields = extract_fields('<b id="a">hello</b><i id="b"> x <em>y</em> </i>')
    assert fields["a"] == "hello"
    assert fields["b"] == "x y"


def test_extract_fields_handles_void_tags():
    fields = extract_fields('<span id="a">1<br>2</span><input id="b"/>')
    assert fields["a"] == "12"
    assert fields["b"] == ""


def test_parse_full_document(parser):
    snapshot = parser.parse(FULL_DOCUMENT)

    assert snapshot.button_a_pressed is True
    assert snapshot.button_b_pressed is False
    assert snapshot.joystick.x == 3100
    assert snapshot.joystick.y == 900
    assert snapshot.joystick.button_pressed is True
    assert snapshot.uptime == "00:12:45"
    assert snapshot.temperature == pytest.approx(27.5)
    assert snapshot.rgb == (255, 128, 0)


def test_parse_empty_document_uses_defaults(parser):
    snapshot = parser.parse("")

    assert snapshot.button_a_pressed is False
    assert snapshot.button_b_pressed is False
    assert snapshot.joystick.x == JOYSTICK_CENTER
    assert snapshot.joystick.y == JOYSTICK_CENTER
    assert snapshot.joystick.button_pressed is False
    assert snapshot.uptime is None
    assert snapshot.temperature is None
    assert snapshot.rgb is None


@pytest.mark.parametrize("raw,pressed", [
    ("0", True),
    ("Pressionado", True),
    ("1", False),
    ("Solto", False),
    ("", False),
])
def test_button_labels(parser, raw, pressed):
    snapshot = parser.parse(f'<span id="btna">{raw}</span>')
    assert snapshot.button_a_pressed is pressed


def test_custom_pressed_labels():
    parser = StateParser(pressed_labels=["ON"])
    assert parser.parse('<span id="btnb">ON</span>').button_b_pressed is True
    assert parser.parse('<span id="btnb">0</span>').button_b_pressed is False


def test_malformed_joystick_falls_back_to_center(parser):
    snapshot = parser.parse('<span id="joyx">abc</span><span id="joyy">1500.7</span>')
    assert snapshot.joystick.x == JOYSTICK_CENTER
    assert snapshot.joystick.y == 1500


def test_joystick_button_released(parser):
    assert parser.parse('<span id="joybtn">1</span>').joystick.button_pressed is False


def test_blank_uptime_is_none(parser):
    assert parser.parse('<span id="uptime">  </span>').uptime is None


def test_malformed_temperature_is_none(parser):
    assert parser.parse('<span id="temp">--</span>').temperature is None


def test_partial_rgb_is_ignored(parser):
    assert parser.parse('<span id="rgbr">10</span><span id="rgbg">20</span>').rgb is None


def test_rgb_is_clamped(parser):
    doc = '<span id="rgbr">300</span><span id="rgbg">-5</span><span id="rgbb">7</span>'
    assert parser.parse(doc).rgb == (255, 0, 7)
