"""Tests for MockTransport."""

import pytest

from pelcode.exceptions import TimeoutError, TransportError
from pelcode.transport.mock import MockTransport, ScriptedMockTransport


class TestMockTransport:
    """Tests for MockTransport class."""

    @pytest.fixture
    def transport(self):
        """Create a MockTransport instance."""
        return MockTransport()

    def test_open_close(self, transport):
        """Test opening and closing transport."""
        assert not transport.is_open
        transport.open()
        assert transport.is_open
        transport.close()
        assert not transport.is_open

    def test_double_open_raises(self, transport):
        """Test that opening twice raises error."""
        transport.open()
        with pytest.raises(TransportError):
            transport.open()

    def test_write_records_data(self, transport):
        """Test that write records data."""
        transport.open()
        transport.write(b"hello")
        transport.write(b"world")
        assert transport.written_data == [b"hello", b"world"]
        assert transport.last_written == b"world"

    def test_write_when_closed_raises(self, transport):
        """Test that writing to closed transport raises."""
        with pytest.raises(TransportError):
            transport.write(b"test")

    def test_read_returns_whole_response(self, transport):
        """Test that each read returns one queued response, like a datagram."""
        transport.open()
        transport.add_responses(b"\x01\x02\x03", b"\x04")
        assert transport.read_frame(7) == b"\x01\x02\x03"
        assert transport.read_frame(7) == b"\x04"

    def test_read_no_data_raises(self, transport):
        """Test that reading with no data raises timeout."""
        transport.open()
        with pytest.raises(TimeoutError):
            transport.read_frame(7)

    def test_add_reply_builds_frame(self, transport):
        """Test the well-formed reply helper."""
        transport.open()
        transport.add_reply(3600, 0x65)
        assert transport.read_frame(7) == bytes.fromhex("FF 01 00 65 0E 10 84")

    def test_injected_errors(self, transport):
        """Test read and write error injection."""
        transport.open()
        transport.add_write_error(TransportError("send failed"))
        transport.add_read_error(OSError("recv failed"))

        with pytest.raises(TransportError, match="send failed"):
            transport.write(b"x")
        with pytest.raises(OSError, match="recv failed"):
            transport.read_frame(7)
        assert transport.written_data == []

    def test_clear(self, transport):
        """Test clearing transport state."""
        transport.open()
        transport.write(b"test")
        transport.add_response(b"\x86")
        transport.clear()
        assert transport.written_data == []
        with pytest.raises(TimeoutError):
            transport.read_frame(7)

    def test_response_callback(self, transport):
        """Test dynamic response callback."""
        transport.open()

        def echo_callback(data: bytes) -> bytes | None:
            return data

        transport.set_response_callback(echo_callback)
        transport.write(b"\x86")
        assert transport.read_frame(7) == b"\x86"

    def test_context_manager(self):
        """Test context manager protocol."""
        with MockTransport() as transport:
            assert transport.is_open
            transport.add_response(b"\x86")
            assert transport.read_frame(7) == b"\x86"
        assert not transport.is_open

    def test_assert_written(self, transport):
        """Test assert_written helper."""
        transport.open()
        transport.write(b"test")
        transport.assert_written(b"test")
        transport.assert_written(b"test", 0)
        with pytest.raises(AssertionError):
            transport.assert_written(b"wrong")

    def test_assert_write_count(self, transport):
        """Test assert_write_count helper."""
        transport.open()
        transport.write(b"a")
        transport.write(b"b")
        transport.assert_write_count(2)
        with pytest.raises(AssertionError):
            transport.assert_write_count(3)


class TestScriptedMockTransport:
    """Tests for ScriptedMockTransport class."""

    @pytest.fixture
    def transport(self):
        """Create an open ScriptedMockTransport instance."""
        transport = ScriptedMockTransport()
        transport.open()
        return transport

    def test_scripted_responses(self, transport):
        """Test scripted request/response pairs."""
        transport.expect(response=b"\x86", request=b"request1")
        transport.expect(response=b"\x87", request=b"request2")

        transport.write(b"request1")
        assert transport.read_frame(7) == b"\x86"

        transport.write(b"request2")
        assert transport.read_frame(7) == b"\x87"
        assert transport.script_complete

    def test_scripted_any_request(self, transport):
        """Test scripted response for any request."""
        transport.expect(response=b"\x86")
        transport.write(b"anything")
        assert transport.read_frame(7) == b"\x86"

    def test_scripted_wrong_request_raises(self, transport):
        """Test that wrong request raises assertion."""
        transport.expect(response=b"\x86", request=b"expected")

        with pytest.raises(AssertionError) as exc_info:
            transport.write(b"wrong")
        assert "Script mismatch" in str(exc_info.value)

    def test_reset_script(self, transport):
        """Test resetting script to beginning."""
        transport.expect(response=b"\x86")
        transport.expect(response=b"\x87")

        transport.write(b"a")
        transport.read_frame(7)

        transport.reset_script()

        transport.write(b"b")
        assert transport.read_frame(7) == b"\x86"
