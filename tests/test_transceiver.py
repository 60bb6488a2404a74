"""Tests for Transceiver."""

import logging

import pytest

from pelcode.exceptions import (
    ChecksumError,
    MalformedFrameError,
    TransportError,
    UnexpectedResponseError,
)
from pelcode.protocol.commands import Command
from pelcode.protocol.constants import ResponseCode
from pelcode.transceiver import Transceiver
from pelcode.transport.mock import MockTransport


class TestTransceiver:
    """Tests for the lenient (default) exchange."""

    @pytest.fixture
    def mock_transport(self):
        """Create an open MockTransport."""
        transport = MockTransport()
        transport.open()
        return transport

    @pytest.fixture
    def transceiver(self, mock_transport):
        """Create a Transceiver over the mock transport."""
        return Transceiver(mock_transport)

    def test_exchange_sends_one_frame(self, transceiver, mock_transport):
        """Test that one request frame is written per exchange."""
        mock_transport.add_reply(1800, ResponseCode.PAN_STEPS)

        result = transceiver.exchange(Command.GET_PAN_STEPS)

        assert result == 1800
        mock_transport.assert_write_count(1)
        mock_transport.assert_written(bytes.fromhex("FF 01 00 51 00 00 52"))
        assert mock_transport.pending_responses == 0

    def test_exchange_with_value(self, transceiver, mock_transport):
        """Test that set-style commands carry their value."""
        mock_transport.add_reply(0, ResponseCode.SET_STEPS_ACK)

        transceiver.exchange(Command.SET_TILT_STEPS, 0x0100)

        mock_transport.assert_written(bytes.fromhex("FF 01 00 73 01 00 75"))

    def test_exchange_uses_address(self, mock_transport):
        """Test that the configured address is used in requests."""
        transceiver = Transceiver(mock_transport, address=0x05)
        mock_transport.add_reply(0)

        transceiver.exchange(Command.GET_VOLTAGE)

        mock_transport.assert_written(bytes.fromhex("FF 05 00 9B 00 00 A0"))

    def test_lenient_ignores_response_opcode(self, transceiver, mock_transport):
        """Test that lenient mode reads only the value field."""
        mock_transport.add_response(bytes.fromhex("00 00 00 00 01 2C 00"))
        assert transceiver.exchange(Command.GET_TILT_STEPS) == 300

    def test_short_reply_raises(self, transceiver, mock_transport):
        """Test that a short reply is a malformed frame."""
        mock_transport.add_response(bytes.fromhex("FF 01 00 61 00"))
        with pytest.raises(MalformedFrameError):
            transceiver.exchange(Command.GET_PAN_STEPS)

    def test_value_on_get_command_raises(self, transceiver, mock_transport):
        """Test that get-style commands refuse a value."""
        with pytest.raises(ValueError, match="GET_PAN_STEPS"):
            transceiver.exchange(Command.GET_PAN_STEPS, 5)
        mock_transport.assert_write_count(0)

    @pytest.mark.parametrize("value", [-1, 0x10000])
    def test_value_out_of_range_raises(self, transceiver, value):
        """Test that values outside 16 bits are refused."""
        with pytest.raises(ValueError):
            transceiver.exchange(Command.SET_PAN_STEPS, value)

    def test_non_integer_value_raises(self, transceiver, mock_transport):
        """Test that a float value is refused before anything is sent."""
        with pytest.raises(TypeError, match="float"):
            transceiver.exchange(Command.SET_PAN_STEPS, 10.0)
        mock_transport.assert_write_count(0)

    def test_invalid_address_raises(self, mock_transport):
        """Test address validation."""
        with pytest.raises(ValueError):
            Transceiver(mock_transport, address=256)

    def test_transport_property(self, transceiver, mock_transport):
        """Test transport property returns the transport."""
        assert transceiver.transport is mock_transport

    def test_repr(self, transceiver):
        """Test string representation."""
        assert "lenient" in repr(transceiver)


class TestTransceiverFailures:
    """Tests for transport failure propagation."""

    @pytest.fixture
    def mock_transport(self):
        transport = MockTransport()
        transport.open()
        return transport

    def test_send_failure_propagates(self, mock_transport):
        """Test that transport send errors surface unchanged."""
        mock_transport.add_write_error(TransportError("host unreachable"))
        with pytest.raises(TransportError, match="host unreachable"):
            Transceiver(mock_transport).exchange(Command.GET_PAN_STEPS)

    def test_raw_os_error_on_send_is_wrapped(self, mock_transport):
        """Test that OS errors from a transport become TransportError."""
        cause = OSError("network is down")
        mock_transport.add_write_error(cause)

        with pytest.raises(TransportError) as exc_info:
            Transceiver(mock_transport).exchange(Command.GET_PAN_STEPS)

        assert exc_info.value.__cause__ is cause

    def test_raw_os_error_on_receive_is_wrapped(self, mock_transport):
        """Test that receive-side OS errors become TransportError."""
        cause = ConnectionResetError("port unreachable")
        mock_transport.add_read_error(cause)

        with pytest.raises(TransportError) as exc_info:
            Transceiver(mock_transport).exchange(Command.GET_TEMPERATURE)

        assert exc_info.value.__cause__ is cause
        # The request still went out
        mock_transport.assert_write_count(1)

    def test_closed_transport_raises(self):
        """Test that exchanging over a closed transport fails."""
        with pytest.raises(TransportError):
            Transceiver(MockTransport()).exchange(Command.GET_PAN_STEPS)

    def test_no_retry_after_failure(self, mock_transport):
        """Test that a failed exchange is not retried."""
        mock_transport.add_read_error(TransportError("socket closed"))
        mock_transport.add_reply(7)

        with pytest.raises(TransportError):
            Transceiver(mock_transport).exchange(Command.GET_PAN_STEPS)

        mock_transport.assert_write_count(1)
        assert mock_transport.pending_responses == 1


class TestStrictTransceiver:
    """Tests for opt-in reply validation."""

    @pytest.fixture
    def mock_transport(self):
        transport = MockTransport()
        transport.open()
        return transport

    @pytest.fixture
    def transceiver(self, mock_transport):
        return Transceiver(mock_transport, strict=True)

    def test_matching_reply_accepted(self, transceiver, mock_transport):
        """Test that a correct reply passes validation."""
        mock_transport.add_reply(1230, ResponseCode.VOLTAGE)
        assert transceiver.exchange(Command.GET_VOLTAGE) == 1230

    def test_wrong_opcode_rejected(self, transceiver, mock_transport):
        """Test that a mismatched response opcode is rejected."""
        mock_transport.add_reply(1230, ResponseCode.TEMPERATURE)

        with pytest.raises(UnexpectedResponseError) as exc_info:
            transceiver.exchange(Command.GET_VOLTAGE)

        assert exc_info.value.expected == 0xAB
        assert exc_info.value.received == 0xA1

    def test_bad_checksum_rejected(self, transceiver, mock_transport):
        """Test that a corrupted reply is rejected."""
        mock_transport.add_response(bytes.fromhex("FF 01 00 61 00 2A 00"))
        with pytest.raises(ChecksumError):
            transceiver.exchange(Command.GET_PAN_STEPS)

    def test_set_acknowledgment_accepted(self, transceiver, mock_transport):
        """Test that both set commands accept the shared acknowledgment."""
        mock_transport.add_reply(0, ResponseCode.SET_STEPS_ACK)
        mock_transport.add_reply(0, ResponseCode.SET_STEPS_ACK)

        transceiver.exchange(Command.SET_PAN_STEPS, 10)
        transceiver.exchange(Command.SET_TILT_STEPS, 10)

        mock_transport.assert_write_count(2)

    def test_repr(self, transceiver):
        assert "strict" in repr(transceiver)

    def test_checksum_rejection_logged(self, transceiver, mock_transport, caplog):
        """Test that a rejected reply is logged at WARNING."""
        mock_transport.add_response(bytes.fromhex("FF 01 00 61 00 05 00"))

        with caplog.at_level(logging.WARNING, logger="pelcode.transceiver"):
            with pytest.raises(ChecksumError):
                transceiver.exchange(Command.GET_PAN_STEPS)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "FF 01 00 61 00 05 00" in caplog.records[0].getMessage()

    def test_bad_sync_rejection_logged(self, transceiver, mock_transport, caplog):
        """Test that a reply with a wrong sync byte is logged and rejected."""
        mock_transport.add_response(bytes.fromhex("FE 01 00 61 00 05 67"))

        with caplog.at_level(logging.WARNING, logger="pelcode.transceiver"):
            with pytest.raises(MalformedFrameError):
                transceiver.exchange(Command.GET_PAN_STEPS)

        assert any(r.levelno == logging.WARNING for r in caplog.records)
