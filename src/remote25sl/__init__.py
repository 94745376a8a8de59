"""remote25sl: Decoder for Novation ReMOTE 25SL MIDI input."""

__version__ = "0.1.0"

# Decoder
from .decoder import Rejection, decode, decode_detailed, decode_message

# Controls
from .controls import (
    Axis,
    Button,
    ButtonRow,
    Control,
    Knob,
    Modulation,
    Pad,
    PageButton,
    PageDirection,
    Side,
    SideButton,
    Slider,
    SliderRow,
    Strip,
    TouchPad,
    Transport,
    TransportButton,
)

# Events
from .events import ButtonEvent, ControlEvent, Event, KeyEvent, PadEvent, PitchBendEvent, State
from .ports import InputPort

__all__ = [
    "Axis",
    "Button",
    "ButtonEvent",
    "ButtonRow",
    "Control",
    "ControlEvent",
    "Event",
    "InputPort",
    "KeyEvent",
    "Knob",
    "Modulation",
    "Pad",
    "PadEvent",
    "PageButton",
    "PageDirection",
    "PitchBendEvent",
    "Rejection",
    "Side",
    "SideButton",
    "Slider",
    "SliderRow",
    "State",
    "Strip",
    "TouchPad",
    "Transport",
    "TransportButton",
    "decode",
    "decode_detailed",
    "decode_message",
]
