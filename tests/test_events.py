"""Unit tests for event and control models."""

import pytest
from pydantic import ValidationError

from remote25sl import (
    Axis,
    Button,
    ButtonEvent,
    ButtonRow,
    ControlEvent,
    KeyEvent,
    Knob,
    Modulation,
    Pad,
    PadEvent,
    PageButton,
    PageDirection,
    PitchBendEvent,
    Side,
    SideButton,
    Slider,
    SliderRow,
    State,
    Strip,
    TouchPad,
    Transport,
    TransportButton,
)
from remote25sl.controls import _Control
from remote25sl.events import encoder_delta


class TestEncoderDelta:
    """Test relative encoder conversion."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (1, 1), (63, 63), (64, 64), (65, -1), (66, -2), (127, -63)],
    )
    def test_encoder_delta(self, value, expected):
        assert encoder_delta(value) == expected

    @pytest.mark.unit
    def test_delta_property(self):
        assert ControlEvent(control=Knob(strip=Strip.A), value=3).delta == 3
        assert ControlEvent(control=Knob(strip=Strip.A), value=70).delta == -6


class TestKeyNames:
    """Test note naming on key events."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "note,name",
        [(0, "C-1"), (21, "A0"), (60, "C4"), (61, "C#4"), (69, "A4"), (127, "G9")],
    )
    def test_names(self, note, name):
        event = KeyEvent(state=State.PRESSED, note=note, velocity=1)
        assert event.name == name

    @pytest.mark.unit
    def test_letter_and_octave(self):
        event = KeyEvent(state=State.RELEASED, note=70, velocity=0)

        assert event.letter == "A#"
        assert event.octave == 4


class TestLabels:
    """Test human-readable rendering."""

    @pytest.mark.unit
    def test_control_labels(self):
        assert str(Slider(row=SliderRow.ROTARY, strip=Strip.C)) == "Rotary slider C"
        assert str(Slider(row=SliderRow.VERTICAL, strip=Strip.H)) == "Vertical slider H"
        assert str(Knob(strip=Strip.B)) == "Knob B"
        assert str(TouchPad(axis=Axis.Y)) == "Touch pad Y"
        assert str(Modulation()) == "Modulation"
        assert str(Button(row=ButtonRow.BOTTOM_RIGHT, strip=Strip.D)) == "Button bottom-right D"
        assert str(SideButton(side=Side.LEFT, position=2)) == "Side button left 2"
        assert str(PageButton(side=Side.RIGHT, direction=PageDirection.DOWN)) == "Page down right"
        assert str(TransportButton(kind=Transport.PLAY)) == "Transport play"
        assert str(Pad(strip=Strip.E)) == "Pad E"

    @pytest.mark.unit
    def test_event_strings(self):
        slider = ControlEvent(control=Slider(row=SliderRow.ROTARY, strip=Strip.C), value=64)
        button = ButtonEvent(control=Button(row=ButtonRow.TOP_LEFT, strip=Strip.A), state=State.PRESSED)
        pad_on = PadEvent(control=Pad(strip=Strip.A), state=State.PRESSED, velocity=100)
        pad_off = PadEvent(control=Pad(strip=Strip.A), state=State.RELEASED, velocity=0)
        key = KeyEvent(state=State.PRESSED, note=60, velocity=100)

        assert str(slider) == "Rotary slider C: 64"
        assert str(button) == "Button top-left A pressed"
        assert str(pad_on) == "Pad A pressed (velocity 100)"
        assert str(pad_off) == "Pad A released"
        assert str(key) == "Key C4 pressed (velocity 100)"
        assert str(PitchBendEvent(value=-3)) == "Pitch bend: -3"
        assert str(PitchBendEvent(value=5)) == "Pitch bend: +5"


class TestValidation:
    """Test model constraints."""

    @pytest.mark.unit
    def test_value_range(self):
        with pytest.raises(ValidationError):
            ControlEvent(control=Knob(strip=Strip.A), value=128)
        with pytest.raises(ValidationError):
            PadEvent(control=Pad(strip=Strip.A), state=State.PRESSED, velocity=-1)
        with pytest.raises(ValidationError):
            PitchBendEvent(value=64)

    @pytest.mark.unit
    def test_side_button_position_range(self):
        with pytest.raises(ValidationError):
            SideButton(side=Side.LEFT, position=4)

    @pytest.mark.unit
    def test_right_side_has_three_buttons(self):
        assert SideButton(side=Side.RIGHT, position=2).label == "Side button right 2"
        assert SideButton(side=Side.LEFT, position=3).label == "Side button left 3"
        with pytest.raises(ValidationError):
            SideButton(side=Side.RIGHT, position=3)

    @pytest.mark.unit
    def test_control_base_is_abstract(self):
        """Only concrete control families can be built."""
        with pytest.raises(TypeError):
            _Control()

    @pytest.mark.unit
    def test_events_are_frozen(self):
        event = ControlEvent(control=Knob(strip=Strip.A), value=1)
        with pytest.raises(ValidationError):
            event.value = 2

    @pytest.mark.unit
    def test_controls_compare_by_value(self):
        assert Knob(strip=Strip.A) == Knob(strip=Strip.A)
        assert Knob(strip=Strip.A) != Pad(strip=Strip.A)
        assert hash(Modulation()) == hash(Modulation())

    @pytest.mark.unit
    def test_state_from_value(self):
        assert State.from_value(0) is State.RELEASED
        assert State.from_value(1) is State.PRESSED
        assert State.from_value(127) is State.PRESSED
