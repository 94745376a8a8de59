"""MIDI input ports exposed by the ReMOTE 25SL."""

from enum import Enum
from typing import Optional

MIDI_INPUT_PORT_0 = "ReMOTE SL 24:0"
MIDI_INPUT_PORT_1 = "ReMOTE SL 24:1"
MIDI_INPUT_PORT_2 = "ReMOTE SL 24:2"


class InputPort(Enum):
    """
    The three MIDI input ports on which the 25SL emits messages.

    The same controller number means different things depending on the port
    it arrived on, so the decoder needs to know which one a message came from.
    """

    KEYBOARD = "keyboard"  # Keys, pitch bend and modulation
    CONTROLS = "controls"  # Every other control on the surface
    PRESETS = "presets"  # Preset dumps, never decoded into events

    @property
    def port_name(self) -> str:
        """Port name as reported by the operating system's MIDI layer."""
        return {
            InputPort.KEYBOARD: MIDI_INPUT_PORT_0,
            InputPort.CONTROLS: MIDI_INPUT_PORT_1,
            InputPort.PRESETS: MIDI_INPUT_PORT_2,
        }[self]

    @classmethod
    def from_name(cls, name: str) -> Optional["InputPort"]:
        """
        Determine the input port from its name.

        Args:
            name: MIDI port name string

        Returns:
            Matching InputPort or None if the name is not a 25SL port
        """
        for port in cls:
            if port.port_name == name:
                return port
        return None
