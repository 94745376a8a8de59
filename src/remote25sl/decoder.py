"""
Decoding of raw ReMOTE 25SL MIDI messages into events.

Input Flow: Slider Move → Your Code
====================================

::

    Hardware slider moved
          ↓
    [MIDI bytes: B0 0A 40]   (Control Change, channel 1, CC 10, value 64)
          ↓
    ┌──────────────────────────────────────┐
    │  decode_detailed(raw, port)          │
    │                                      │
    │  1. validate bytes and length        │
    │  2. check channel == DEVICE_CHANNEL  │
    │  3. dispatch on status nibble        │
    └────────────┬─────────────────────────┘
                 │ looks up
                 ↓
    ┌──────────────────────────────────────┐
    │  mapping.lookup_control_change(10)   │
    │    → Slider(ROTARY, C)               │
    └──────────────────────────────────────┘
          ↓
    [ControlEvent(Slider(ROTARY, C), value=64)]

Key Concepts
------------

**Outcomes, not exceptions**: a MIDI stream is full of messages this device
has nothing to say about. Every message either becomes an event or a
``Rejection`` value (malformed, wrong channel, unrecognized). ``decode``
collapses the rejection to ``None``; ``decode_detailed`` keeps it for
diagnostics. Either way the rejection is logged at DEBUG.

**No masking**: data bytes are 7-bit. A byte with the high bit set in a data
position is malformed input, never ``value & 0x7F``.

**Release convention**: Note On with velocity 0 is a release, exactly like
Note Off. Control Change value 0 is a real value for continuous controls and
a release for buttons.
"""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Optional, Union

import mido

from .controls import CONTINUOUS_CONTROLS
from .events import ButtonEvent, ControlEvent, Event, KeyEvent, PadEvent, PitchBendEvent, State
from .mapping import DEVICE_CHANNEL, lookup_control_change, lookup_note
from .ports import InputPort
from .utils import format_bytes

logger = logging.getLogger(__name__)

# Status nibbles
NOTE_OFF = 0x8
NOTE_ON = 0x9
POLY_AFTERTOUCH = 0xA
CONTROL_CHANGE = 0xB
PROGRAM_CHANGE = 0xC
CHANNEL_AFTERTOUCH = 0xD
PITCH_BEND = 0xE
SYSTEM = 0xF

SYSEX_START = 0xF0

_CHANNEL_MESSAGE_LENGTHS = {
    NOTE_OFF: 3,
    NOTE_ON: 3,
    POLY_AFTERTOUCH: 3,
    CONTROL_CHANGE: 3,
    PROGRAM_CHANGE: 2,
    CHANNEL_AFTERTOUCH: 2,
    PITCH_BEND: 3,
}

# System common messages with data bytes; everything else in 0xF1-0xFF is a single byte
_SYSTEM_MESSAGE_LENGTHS = {
    0xF1: 2,  # MTC quarter frame
    0xF2: 3,  # Song position pointer
    0xF3: 2,  # Song select
}


class Rejection(str, Enum):
    """Why a raw message did not produce an event."""

    MALFORMED = "malformed"
    WRONG_CHANNEL = "wrong_channel"
    UNRECOGNIZED = "unrecognized"


def expected_length(status: int) -> int:
    """Total message length (status byte included) for a status byte."""
    kind = status >> 4
    if kind == SYSTEM:
        return _SYSTEM_MESSAGE_LENGTHS.get(status, 1)
    return _CHANNEL_MESSAGE_LENGTHS[kind]


def _is_byte(value) -> bool:
    return isinstance(value, int) and 0 <= value <= 0xFF


def decode_detailed(
    raw: Sequence[int], port: InputPort = InputPort.CONTROLS
) -> Union[Event, Rejection]:
    """
    Decode a raw MIDI message, reporting why no event was produced.

    Rejected messages are logged at DEBUG with their bytes.

    Args:
        raw: 1-3 MIDI bytes, status byte first
        port: Input port the message arrived on (an InputPort or its value,
            e.g. "keyboard")

    Returns:
        The decoded event, or the Rejection explaining why there is none

    Raises:
        ValueError: If port is not an InputPort or one of its values
    """
    port = InputPort(port)
    data = tuple(raw)
    result = _classify(data, port)
    if isinstance(result, Rejection):
        logger.debug(f"Ignoring MIDI message [{format_bytes(data)}] on {port.value} port: {result.value}")
    return result


def _classify(data: tuple, port: InputPort) -> Union[Event, Rejection]:
    # Malformed checks first, then system messages, channel and tables
    if not data or not all(_is_byte(byte) for byte in data):
        return Rejection.MALFORMED

    status = data[0]
    if status < 0x80:
        # Data byte in status position (running status is not supported)
        return Rejection.MALFORMED

    if status == SYSEX_START:
        return Rejection.UNRECOGNIZED

    if any(byte > 0x7F for byte in data[1:]):
        return Rejection.MALFORMED

    if len(data) != expected_length(status):
        return Rejection.MALFORMED

    kind = status >> 4
    if kind == SYSTEM:
        return Rejection.UNRECOGNIZED

    if status & 0x0F != DEVICE_CHANNEL:
        return Rejection.WRONG_CHANNEL

    if kind == CONTROL_CHANGE:
        return _decode_control_change(port, data[1], data[2])
    if kind in (NOTE_ON, NOTE_OFF):
        return _decode_note(port, kind == NOTE_ON, data[1], data[2])
    if kind == PITCH_BEND:
        return _decode_pitch_bend(port, data[1], data[2])

    # Program change and aftertouch are not part of the 25SL's event surface
    return Rejection.UNRECOGNIZED


def _decode_control_change(port: InputPort, number: int, value: int) -> Union[Event, Rejection]:
    control = lookup_control_change(port, number)
    if control is None:
        return Rejection.UNRECOGNIZED

    if isinstance(control, CONTINUOUS_CONTROLS):
        return ControlEvent(control=control, value=value)
    return ButtonEvent(control=control, state=State.from_value(value))


def _decode_note(port: InputPort, note_on: bool, note: int, velocity: int) -> Union[Event, Rejection]:
    # Note on with velocity 0 is actually note off
    state = State.PRESSED if note_on and velocity > 0 else State.RELEASED

    if port is InputPort.KEYBOARD:
        return KeyEvent(state=state, note=note, velocity=velocity)

    pad = lookup_note(port, note)
    if pad is None:
        return Rejection.UNRECOGNIZED
    return PadEvent(control=pad, state=state, velocity=velocity)


def _decode_pitch_bend(port: InputPort, lsb: int, msb: int) -> Union[Event, Rejection]:
    # The bender only ever sends coarse positions
    if port is not InputPort.KEYBOARD or lsb != 0:
        return Rejection.UNRECOGNIZED
    return PitchBendEvent(value=msb - 64)


def decode(raw: Sequence[int], port: InputPort = InputPort.CONTROLS) -> Optional[Event]:
    """
    Decode a raw MIDI message into a ReMOTE 25SL event.

    Args:
        raw: 1-3 MIDI bytes, status byte first
        port: Input port the message arrived on (default: controls port)

    Returns:
        Event, or None if the message is malformed, on another channel,
        or not something this device sends

    Raises:
        ValueError: If port is not an InputPort or one of its values

    Example:
        >>> decode([0xB0, 0x0A, 0x40])
        ControlEvent(control=Slider(row=<SliderRow.ROTARY: 'rotary'>, strip=<Strip.C: 2>), value=64)
    """
    result = decode_detailed(raw, port)
    if isinstance(result, Rejection):
        return None
    return result


def decode_message(msg: mido.Message, port: InputPort = InputPort.CONTROLS) -> Optional[Event]:
    """
    Decode a mido message into a ReMOTE 25SL event.

    Args:
        msg: MIDI message as delivered by a mido input port
        port: Input port the message arrived on

    Returns:
        Event, or None if the message should be ignored
    """
    return decode(msg.bytes(), port)
