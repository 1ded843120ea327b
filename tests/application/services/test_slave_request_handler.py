"""Tests for SlaveRequestHandler service."""

from modbus_rw.application.services import SlaveRequestHandler
from modbus_rw.domain.interfaces import INonWordDataHandler
from modbus_rw.domain.messages import ExceptionResponse
from modbus_rw.domain.strategies import PayloadDecoder


class PackedByteHandler(INonWordDataHandler):
    """One register per payload byte."""

    def read_data(self, payload, reference, count):
        return list(payload)


class BrokenHandler(INonWordDataHandler):
    """Raises a lookup error for any payload."""

    def read_data(self, payload, reference, count):
        raise KeyError("register map")


class TestSlaveRequestHandler:
    """Test request PDU handling."""

    def test_read_request(self, slave):
        """Test a read-only request returns the stored values."""
        assert slave.handle(bytes.fromhex("17000000020000000000")).hex() == (
            "1704000a0014"
        )

    def test_read_write_request(self, slave, store):
        """Test the write is applied after the read."""
        pdu = bytes.fromhex("17000000040002000204" "00630063")
        assert slave.handle(pdu).hex() == "1708000a0014001e0028"
        assert store.values == [10, 20, 99, 99]

    def test_unsupported_function(self, slave):
        """Test other function codes get ILLEGAL_FUNCTION."""
        assert slave.handle(bytes.fromhex("0300000001")) == b"\x83\x01"

    def test_truncated_request(self, slave, store):
        """Test a truncated request gets ILLEGAL_DATA_VALUE."""
        pdu = bytes.fromhex("17000000040000000508") + b"\x00\x01"
        assert slave.handle(pdu) == b"\x97\x03"
        assert store.values == [10, 20, 30, 40]

    def test_empty_request(self, slave):
        """Test an empty PDU gets ILLEGAL_DATA_VALUE."""
        assert slave.handle(b"") == b"\x97\x03"

    def test_illegal_address(self, slave, store):
        """Test a write past the store gets ILLEGAL_DATA_ADDRESS."""
        pdu = bytes.fromhex("170000000100030002040001" "0002")
        assert slave.handle(pdu) == b"\x97\x02"
        assert store.values == [10, 20, 30, 40]

    def test_process_returns_message(self, slave):
        """Test process() exposes the response message."""
        response = slave.process(bytes.fromhex("0300000001"))
        assert isinstance(response, ExceptionResponse)
        assert response.original_function_code == 0x03

    def test_custom_payload_decoder(self, protocol, synthesizer, store):
        """Test the configured payload decoder interprets the write payload."""
        handler = SlaveRequestHandler(
            protocol, synthesizer, PayloadDecoder.custom(PackedByteHandler())
        )
        pdu = bytes.fromhex("17000000000001000202" "0708")
        assert handler.handle(pdu) == b"\x17\x00"
        assert store.values == [10, 7, 8, 40]

    def test_failing_payload_handler(self, protocol, synthesizer, store):
        """Test a custom handler error yields ILLEGAL_DATA_VALUE."""
        handler = SlaveRequestHandler(
            protocol, synthesizer, PayloadDecoder.custom(BrokenHandler())
        )
        pdu = bytes.fromhex("170000000100000001020007")
        assert handler.handle(pdu) == b"\x97\x03"
        assert store.values == [10, 20, 30, 40]

    def test_response_carries_frame_unit_id(self, slave):
        """Test a successful response answers with the frame's unit id."""
        response = slave.process(bytes.fromhex("17000000010000000000"), unit_id=9)
        assert response.unit_id == 9
        assert response.values == [10]

    def test_rejection_carries_frame_unit_id(self, slave):
        """Test decode failures answer with the frame's unit id."""
        illegal_function = slave.process(bytes.fromhex("0300000001"), unit_id=7)
        malformed = slave.process(b"\x17\x00", unit_id=8)
        assert illegal_function.unit_id == 7
        assert malformed.unit_id == 8
        assert malformed.exception_code == 3

    def test_headless_request(self, slave):
        """Test a headless frame is answered with a headless response."""
        response = slave.process(
            bytes.fromhex("17000000010000000000"), unit_id=2, headless=True
        )
        assert response.headless
        assert response.transaction_id is None
        assert response.unit_id == 2

    def test_headless_rejection(self, slave):
        """Test exception responses to headless frames stay headless."""
        response = slave.process(b"", unit_id=3, headless=True)
        assert isinstance(response, ExceptionResponse)
        assert response.headless
        assert response.unit_id == 3
