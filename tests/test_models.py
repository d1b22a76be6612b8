"""Tests for request and destination validation."""

import pytest
from pydantic import ValidationError

from lanwake.models.destination import BroadcastMode, DestinationModel
from lanwake.models.wake_request import WakeRequestModel


class TestDestinationModel:
    def test_defaults(self):
        destination = DestinationModel()

        assert destination.address == "255.255.255.255"
        assert destination.port == 9
        assert destination.source is None
        assert destination.interface is None
        assert destination.broadcast == BroadcastMode.AUTO

    @pytest.mark.parametrize(
        "address, expected",
        [
            ("192.168.1.255", "192.168.1.255"),
            (" 10.0.0.1 ", "10.0.0.1"),
            ("<broadcast>", "255.255.255.255"),
            ("FE80::1", "fe80::1"),
            ("nas.local", "nas.local"),
        ],
    )
    def test_valid_addresses(self, address, expected):
        assert DestinationModel(address=address).address == expected

    @pytest.mark.parametrize("address", ["256.1.1.1", "1.2.3", "", "bad host", "::g", "-leading.dash"])
    def test_invalid_addresses(self, address):
        with pytest.raises(ValidationError):
            DestinationModel(address=address)

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_invalid_ports(self, port):
        with pytest.raises(ValidationError):
            DestinationModel(port=port)

    def test_source_must_be_ip(self):
        assert DestinationModel(source="192.168.1.5").source == "192.168.1.5"

        with pytest.raises(ValidationError):
            DestinationModel(source="eth0")

    @pytest.mark.parametrize("interface", ["eth/0", "a" * 16, "en 0"])
    def test_invalid_interfaces(self, interface):
        with pytest.raises(ValidationError):
            DestinationModel(interface=interface)

    def test_broadcast_mode_from_string(self):
        assert DestinationModel(broadcast="off").broadcast == BroadcastMode.OFF

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            DestinationModel(ttl=4)

    def test_endpoint(self):
        assert DestinationModel(address="10.0.0.255", port=7).endpoint == "10.0.0.255:7"
        assert DestinationModel(address="::1").endpoint == "[::1]:9"


class TestWakeRequestModel:
    def test_defaults(self):
        request = WakeRequestModel(mac="00:11:22:33:44:55")

        assert request.password is None
        assert request.destination == DestinationModel()

    def test_password_hidden_from_repr(self):
        request = WakeRequestModel(mac="00:11:22:33:44:55", password="de:ad:be:ef")

        assert "de:ad:be:ef" not in repr(request)

    def test_mac_required(self):
        with pytest.raises(ValidationError):
            WakeRequestModel()
