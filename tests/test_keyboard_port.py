"""Unit tests for decoding the keyboard and presets ports."""

import pytest

from remote25sl import (
    ControlEvent,
    InputPort,
    KeyEvent,
    Modulation,
    PitchBendEvent,
    Rejection,
    State,
    decode,
    decode_detailed,
)

KEYBOARD = InputPort.KEYBOARD


class TestKeys:
    """Test keyboard note messages."""

    @pytest.mark.unit
    def test_key_press(self):
        """Middle C pressed."""
        event = decode([0x90, 60, 100], KEYBOARD)

        assert event == KeyEvent(state=State.PRESSED, note=60, velocity=100)
        assert event.name == "C4"

    @pytest.mark.unit
    def test_key_release_forms_agree(self):
        """Note Off and zero-velocity Note On both release the key."""
        assert decode([0x80, 60, 0], KEYBOARD) == decode([0x90, 60, 0], KEYBOARD)
        assert decode([0x90, 60, 0], KEYBOARD).state is State.RELEASED

    @pytest.mark.unit
    def test_note_off_keeps_velocity(self):
        event = decode([0x80, 61, 40], KEYBOARD)

        assert event.state is State.RELEASED
        assert event.velocity == 40
        assert event.name == "C#4"

    @pytest.mark.unit
    def test_pad_notes_are_keys_on_keyboard_port(self):
        """Note 36 means a key here, not a pad."""
        event = decode([0x90, 36, 100], KEYBOARD)

        assert isinstance(event, KeyEvent)
        assert event.note == 36

    @pytest.mark.unit
    def test_every_note_is_a_key(self):
        for note in range(128):
            assert isinstance(decode([0x90, note, 1], KEYBOARD), KeyEvent)

    @pytest.mark.unit
    def test_wrong_channel(self):
        assert decode_detailed([0x91, 60, 100], KEYBOARD) is Rejection.WRONG_CHANNEL


class TestKeyboardControls:
    """Test modulation and pitch bend."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [0, 1, 64, 127])
    def test_modulation(self, value):
        event = decode([0xB0, 1, value], KEYBOARD)

        assert event == ControlEvent(control=Modulation(), value=value)

    @pytest.mark.unit
    def test_other_control_changes_unrecognized(self):
        """The controls-port table does not apply to the keyboard port."""
        assert decode_detailed([0xB0, 10, 64], KEYBOARD) is Rejection.UNRECOGNIZED
        assert decode_detailed([0xB0, 2, 64], KEYBOARD) is Rejection.UNRECOGNIZED

    @pytest.mark.unit
    def test_modulation_not_on_controls_port(self):
        assert decode([0xB0, 1, 64]) is None

    @pytest.mark.unit
    @pytest.mark.parametrize("msb,expected", [(0, -64), (63, -1), (64, 0), (65, 1), (127, 63)])
    def test_pitch_bend(self, msb, expected):
        event = decode([0xE0, 0, msb], KEYBOARD)

        assert event == PitchBendEvent(value=expected)

    @pytest.mark.unit
    def test_pitch_bend_with_fine_bits_unrecognized(self):
        assert decode_detailed([0xE0, 1, 64], KEYBOARD) is Rejection.UNRECOGNIZED

    @pytest.mark.unit
    def test_pitch_bend_high_bit_malformed(self):
        assert decode_detailed([0xE0, 0, 0xC0], KEYBOARD) is Rejection.MALFORMED


class TestPresetsPort:
    """The presets port carries nothing the decoder turns into events."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [[0xB0, 10, 64], [0x90, 36, 100], [0xE0, 0, 64], [0xB0, 1, 64]],
    )
    def test_nothing_is_decoded(self, raw):
        assert decode(raw, InputPort.PRESETS) is None
        assert decode_detailed(raw, InputPort.PRESETS) is Rejection.UNRECOGNIZED

    @pytest.mark.unit
    def test_malformed_still_malformed(self):
        assert decode_detailed([0xB0, 10], InputPort.PRESETS) is Rejection.MALFORMED
