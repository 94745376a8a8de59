"""
Fixed controller-number and note-number tables for the ReMOTE 25SL.

The tables describe the hardware's documented MIDI layout. They are built
once at import time and exposed read-only; nothing here is configurable.

Controls port (``ReMOTE SL 24:1``), channel 1 (status nibble 0)::

    CC  8 - 15       -> Slider rotary A-H
    CC 16 - 23       -> Slider vertical A-H
    CC 24 - 31       -> Button top-left A-H
    CC 32 - 39       -> Button bottom-left A-H
    CC 40 - 47       -> Button top-right A-H
    CC 48 - 55       -> Button bottom-right A-H
    CC 56 - 63       -> Knob A-H
    CC 68, 69        -> TouchPad X, Y
    CC 72 - 77       -> Transport previous, next, stop, play, record, loop
    CC 80 - 83       -> Side button left 0-3
    CC 85 - 87       -> Side button right 0-2
    CC 88 - 91       -> Page up/down left, page up/down right
    Note 36 - 43     -> Pad A-H

Keyboard port (``ReMOTE SL 24:0``)::

    CC  1            -> Modulation
    Note 0 - 127     -> keyboard keys
    Pitch bend       -> pitch bender
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

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
from .ports import InputPort

# The 25SL transmits everything on MIDI channel 1 (zero-based 0).
DEVICE_CHANNEL = 0

FAMILY_CONTROL_CHANGE = "control_change"
FAMILY_NOTE = "note"


def _strip_range(first: int, build) -> dict[int, Control]:
    """Map eight consecutive numbers starting at ``first`` to strips A-H."""
    return {first + strip: build(strip) for strip in Strip}


def _build_control_change_table() -> dict[int, Control]:
    table: dict[int, Control] = {}
    table.update(_strip_range(8, lambda s: Slider(row=SliderRow.ROTARY, strip=s)))
    table.update(_strip_range(16, lambda s: Slider(row=SliderRow.VERTICAL, strip=s)))
    table.update(_strip_range(24, lambda s: Button(row=ButtonRow.TOP_LEFT, strip=s)))
    table.update(_strip_range(32, lambda s: Button(row=ButtonRow.BOTTOM_LEFT, strip=s)))
    table.update(_strip_range(40, lambda s: Button(row=ButtonRow.TOP_RIGHT, strip=s)))
    table.update(_strip_range(48, lambda s: Button(row=ButtonRow.BOTTOM_RIGHT, strip=s)))
    table.update(_strip_range(56, lambda s: Knob(strip=s)))

    table[68] = TouchPad(axis=Axis.X)
    table[69] = TouchPad(axis=Axis.Y)

    transport_order = (
        Transport.PREVIOUS,
        Transport.NEXT,
        Transport.STOP,
        Transport.PLAY,
        Transport.RECORD,
        Transport.LOOP,
    )
    for offset, kind in enumerate(transport_order):
        table[72 + offset] = TransportButton(kind=kind)

    for position in range(4):
        table[80 + position] = SideButton(side=Side.LEFT, position=position)
    # CC 84 is not used
    for position in range(3):
        table[85 + position] = SideButton(side=Side.RIGHT, position=position)

    table[88] = PageButton(side=Side.LEFT, direction=PageDirection.UP)
    table[89] = PageButton(side=Side.LEFT, direction=PageDirection.DOWN)
    table[90] = PageButton(side=Side.RIGHT, direction=PageDirection.UP)
    table[91] = PageButton(side=Side.RIGHT, direction=PageDirection.DOWN)

    return table


CONTROL_CHANGE_TABLE: Mapping[int, Control] = MappingProxyType(_build_control_change_table())
NOTE_TABLE: Mapping[int, Pad] = MappingProxyType(_strip_range(36, lambda s: Pad(strip=s)))
KEYBOARD_CONTROL_CHANGE_TABLE: Mapping[int, Control] = MappingProxyType({1: Modulation()})


def lookup_control_change(port: InputPort, number: int) -> Optional[Control]:
    """
    Find the control sending a Control Change message.

    Args:
        port: Port the message arrived on
        number: Controller number (0-127)

    Returns:
        Control identity, or None if the number is not mapped on that port
    """
    if port is InputPort.CONTROLS:
        return CONTROL_CHANGE_TABLE.get(number)
    if port is InputPort.KEYBOARD:
        return KEYBOARD_CONTROL_CHANGE_TABLE.get(number)
    return None


def lookup_note(port: InputPort, number: int) -> Optional[Pad]:
    """
    Find the pad sending a note message on the controls port.

    Keyboard keys are not looked up here: every note on the keyboard port
    is a key.
    """
    if port is InputPort.CONTROLS:
        return NOTE_TABLE.get(number)
    return None


def chart(port: InputPort = InputPort.CONTROLS) -> Iterator[tuple[str, int, Control]]:
    """
    Iterate over the mapping table of a port in number order.

    Yields:
        (message family, controller or note number, control) tuples
    """
    if port is InputPort.CONTROLS:
        cc_table = CONTROL_CHANGE_TABLE
    elif port is InputPort.KEYBOARD:
        cc_table = KEYBOARD_CONTROL_CHANGE_TABLE
    else:
        return

    for number in sorted(cc_table):
        yield FAMILY_CONTROL_CHANGE, number, cc_table[number]

    if port is InputPort.CONTROLS:
        for number in sorted(NOTE_TABLE):
            yield FAMILY_NOTE, number, NOTE_TABLE[number]
