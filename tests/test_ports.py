"""Unit tests for InputPort."""

import pytest

from remote25sl import InputPort


class TestInputPort:
    """Test port-name recognition."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name,port",
        [
            ("ReMOTE SL 24:0", InputPort.KEYBOARD),
            ("ReMOTE SL 24:1", InputPort.CONTROLS),
            ("ReMOTE SL 24:2", InputPort.PRESETS),
        ],
    )
    def test_from_name(self, name, port):
        assert InputPort.from_name(name) is port
        assert port.port_name == name

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "ReMOTE SL 24:3", "remote sl 24:1", "Launchpad X"])
    def test_unknown_names(self, name):
        assert InputPort.from_name(name) is None

    @pytest.mark.unit
    def test_values(self):
        assert InputPort("controls") is InputPort.CONTROLS
        assert {port.value for port in InputPort} == {"keyboard", "controls", "presets"}
