"""Physical controls on the ReMOTE 25SL surface.

Every control is a frozen, hashable model. The set of control families is
closed: the hardware has exactly these and no others.

Continuous controls report an absolute value (0-127):
    Slider, Knob, TouchPad, Modulation

Momentary controls report pressed/released:
    Button, SideButton, PageButton, TransportButton, Pad
"""

from abc import abstractmethod
from enum import Enum, IntEnum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Strip(IntEnum):
    """Most controls on the 25SL come in 8 strips, A (leftmost) to H."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7


class SliderRow(str, Enum):
    """The two rows of absolute (non-endless) sliders."""

    ROTARY = "rotary"
    VERTICAL = "vertical"


class ButtonRow(str, Enum):
    """The four rows on which strip buttons are placed."""

    TOP_LEFT = "top_left"
    BOTTOM_LEFT = "bottom_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"


class Axis(str, Enum):
    """Axes on which the touch pad reports positions."""

    X = "x"
    Y = "y"


class Side(str, Enum):
    """Left and right hand side of the controller."""

    LEFT = "left"
    RIGHT = "right"


class PageDirection(str, Enum):
    """Page up and page down."""

    UP = "up"
    DOWN = "down"


class Transport(str, Enum):
    """Media playback-style buttons."""

    PREVIOUS = "previous"
    NEXT = "next"
    STOP = "stop"
    PLAY = "play"
    RECORD = "record"
    LOOP = "loop"


def _words(value: str) -> str:
    return value.replace("_", "-")


class _Control(BaseModel):
    """Shared configuration for control identities."""

    model_config = ConfigDict(frozen=True)

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable name, as printed on the event stream."""

    def __str__(self) -> str:
        return self.label


class Slider(_Control):
    """An absolute slider (rotary pot or vertical fader)."""

    row: SliderRow
    strip: Strip

    @property
    def label(self) -> str:
        return f"{self.row.value.capitalize()} slider {self.strip.name}"


class Knob(_Control):
    """An endless rotary encoder above the rotary sliders."""

    strip: Strip

    @property
    def label(self) -> str:
        return f"Knob {self.strip.name}"


class TouchPad(_Control):
    """One axis of the X/Y touch pad."""

    axis: Axis

    @property
    def label(self) -> str:
        return f"Touch pad {self.axis.value.upper()}"


class Modulation(_Control):
    """The modulation bender next to the keyboard."""

    @property
    def label(self) -> str:
        return "Modulation"


class Button(_Control):
    """A strip button in one of the four button rows."""

    row: ButtonRow
    strip: Strip

    @property
    def label(self) -> str:
        return f"Button {_words(self.row.value)} {self.strip.name}"


class SideButton(_Control):
    """
    One of the buttons on the upper left or right hand side.

    There are four on the left and three on the right, counted from the top.
    """

    side: Side
    position: int = Field(ge=0, le=3)

    @field_validator("position")
    @classmethod
    def validate_position(cls, v: int, info: ValidationInfo) -> int:
        """Only the left side has a fourth button."""
        if info.data.get("side") is Side.RIGHT and v > 2:
            raise ValueError("Right side buttons are numbered 0-2")
        return v

    @property
    def label(self) -> str:
        return f"Side button {self.side.value} {self.position}"


class PageButton(_Control):
    """Page up/down buttons at the top left and right of the controller."""

    side: Side
    direction: PageDirection

    @property
    def label(self) -> str:
        return f"Page {self.direction.value} {self.side.value}"


class TransportButton(_Control):
    """One of the transport buttons; there is exactly one of each kind."""

    kind: Transport

    @property
    def label(self) -> str:
        return f"Transport {self.kind.value}"


class Pad(_Control):
    """A velocity sensitive drum pad."""

    strip: Strip

    @property
    def label(self) -> str:
        return f"Pad {self.strip.name}"


ContinuousControl = Union[Slider, Knob, TouchPad, Modulation]
MomentaryControl = Union[Button, SideButton, PageButton, TransportButton]
Control = Union[ContinuousControl, MomentaryControl, Pad]

CONTINUOUS_CONTROLS = (Slider, Knob, TouchPad, Modulation)
MOMENTARY_CONTROLS = (Button, SideButton, PageButton, TransportButton)
