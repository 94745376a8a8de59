"""Pytest fixtures for tests."""

import pytest

from remote25sl.mapping import CONTROL_CHANGE_TABLE, NOTE_TABLE


@pytest.fixture
def unmapped_control_numbers():
    """Controller numbers the controls port never sends."""
    return [n for n in range(128) if n not in CONTROL_CHANGE_TABLE]


@pytest.fixture
def unmapped_note_numbers():
    """Note numbers that are not drum pads."""
    return [n for n in range(128) if n not in NOTE_TABLE]


@pytest.fixture
def other_channels():
    """Every MIDI channel except the one the 25SL transmits on."""
    return list(range(1, 16))
