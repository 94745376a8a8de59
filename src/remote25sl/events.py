"""Events decoded from ReMOTE 25SL MIDI input."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .controls import ContinuousControl, MomentaryControl, Pad

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


class State(str, Enum):
    """State of a momentary control or keyboard key."""

    PRESSED = "pressed"
    RELEASED = "released"

    @classmethod
    def from_value(cls, value: int) -> "State":
        """Nonzero value means pressed, zero means released."""
        return cls.PRESSED if value > 0 else cls.RELEASED


def encoder_delta(value: int) -> int:
    """
    Convert a relative encoder reading into a signed step.

    The encoders send 1-64 when turned clockwise and 65-127 when turned
    counter-clockwise, the latter meaning -(value - 64).

    Example:
        >>> encoder_delta(3)
        3
        >>> encoder_delta(66)
        -2
    """
    if value > 64:
        return -(value - 64)
    return value


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class ControlEvent(_Event):
    """A continuous control moved to a new value (0-127)."""

    control: ContinuousControl
    value: int = Field(ge=0, le=127, description="Raw controller value")

    @property
    def delta(self) -> int:
        """Signed step for relative encoders (only meaningful for Knob events)."""
        return encoder_delta(self.value)

    def __str__(self) -> str:
        return f"{self.control}: {self.value}"


class ButtonEvent(_Event):
    """A momentary control sent through Control Change was pressed or released."""

    control: MomentaryControl
    state: State

    @property
    def pressed(self) -> bool:
        return self.state is State.PRESSED

    def __str__(self) -> str:
        return f"{self.control} {self.state.value}"


class PadEvent(_Event):
    """A drum pad was hit or released."""

    control: Pad
    state: State
    velocity: int = Field(ge=0, le=127, description="Strike velocity")

    @property
    def pressed(self) -> bool:
        return self.state is State.PRESSED

    def __str__(self) -> str:
        if self.pressed:
            return f"{self.control} {self.state.value} (velocity {self.velocity})"
        return f"{self.control} {self.state.value}"


class KeyEvent(_Event):
    """A key on the keyboard was pressed or released."""

    state: State
    note: int = Field(ge=0, le=127, description="MIDI note number")
    velocity: int = Field(ge=0, le=127, description="Key velocity")

    @property
    def letter(self) -> str:
        """Note letter with sharps, e.g. 'C#'."""
        return NOTE_NAMES[self.note % 12]

    @property
    def octave(self) -> int:
        """Octave number, with note 60 being C4."""
        return self.note // 12 - 1

    @property
    def name(self) -> str:
        return f"{self.letter}{self.octave}"

    def __str__(self) -> str:
        return f"Key {self.name} {self.state.value} (velocity {self.velocity})"


class PitchBendEvent(_Event):
    """Position of the pitch bender, centred on 0."""

    value: int = Field(ge=-64, le=63)

    def __str__(self) -> str:
        return f"Pitch bend: {self.value:+d}"


Event = Union[ControlEvent, ButtonEvent, PadEvent, KeyEvent, PitchBendEvent]
