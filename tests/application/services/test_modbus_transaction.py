"""Tests for ModbusTransaction service."""

import asyncio
import logging

import pytest

from doubles import FakeTransport
from modbus_rw.application.services import ModbusTransaction
from modbus_rw.domain.entities import TransactionState
from modbus_rw.domain.exceptions import (
    MalformedMessageError,
    ModbusIOError,
    ModbusSlaveError,
    TruncatedMessageError,
)
from modbus_rw.domain.interfaces import ITransport
from modbus_rw.domain.messages import ExceptionResponse, ReadWriteMultipleRequest
from modbus_rw.infrastructure.protocol import ModbusPDUProtocol


class HangingTransport(ITransport):
    """Transport that never answers and ignores its timeout."""

    async def connect(self, address):
        return True

    async def disconnect(self):
        pass

    async def send(self, data, timeout=0.5):
        await asyncio.sleep(10)
        return b""

    @property
    def is_connected(self):
        return True


class BrokenDecodeProtocol(ModbusPDUProtocol):
    """Protocol whose response decoder has a bug."""

    def decode_response(self, pdu, request=None):
        raise KeyError("decoder table")


@pytest.fixture
def request_message():
    """Read four registers, write two at offset 2."""
    return ReadWriteMultipleRequest(
        unit_id=1, read_start=0, read_count=4, write_start=2, values=[99, 99]
    )


@pytest.fixture
async def fake_transport():
    """Connected fake transport without a slave."""
    transport = FakeTransport()
    await transport.connect("fake")
    return transport


class TestModbusTransaction:
    """Test single request/response exchange."""

    @pytest.mark.asyncio
    async def test_successful_exchange(self, slave, protocol, store, request_message):
        """Test a request answered by the slave yields the pre-write values."""
        transport = FakeTransport(handler=slave.handle)
        await transport.connect("fake")
        transaction = ModbusTransaction(transport, protocol, request_message)

        response = await transaction.execute()

        assert response.values == [10, 20, 30, 40]
        assert transaction.response is response
        assert transaction.state is TransactionState.COMPLETED
        assert store.values == [10, 20, 99, 99]
        assert transport.get_calls() == [protocol.build_request(request_message)]

    @pytest.mark.asyncio
    async def test_transaction_id_stamped(self, fake_transport, protocol, request_message):
        """Test the transaction id is written onto the request and response."""
        fake_transport.add_response(bytes.fromhex("1708000a0014001e0028"))
        transaction = ModbusTransaction(
            fake_transport, protocol, request_message, transaction_id=12
        )
        response = await transaction.execute()
        assert request_message.transaction_id == 12
        assert response.transaction_id == 12
        assert response.unit_id == 1

    @pytest.mark.asyncio
    async def test_headless_request_not_stamped(self, fake_transport, protocol):
        """Test headless requests keep no transaction id."""
        request = ReadWriteMultipleRequest(headless=True)
        fake_transport.add_response(b"\x17\x00")
        transaction = ModbusTransaction(
            fake_transport, protocol, request, transaction_id=12
        )
        response = await transaction.execute()
        assert request.transaction_id is None
        assert response.headless

    @pytest.mark.asyncio
    async def test_receive_timeout_in_seconds(self, fake_transport, protocol):
        """Test the millisecond receive timeout reaches the transport in seconds."""
        fake_transport.add_response(b"\x17\x00")
        transaction = ModbusTransaction(
            fake_transport, protocol, ReadWriteMultipleRequest(), receive_timeout=250
        )
        await transaction.execute()
        assert fake_transport.get_timeouts() == [0.25]

    @pytest.mark.asyncio
    async def test_timeout_is_io_error(self, fake_transport, protocol, request_message):
        """Test a transport timeout surfaces as ModbusIOError."""
        fake_transport.add_error(asyncio.TimeoutError())
        transaction = ModbusTransaction(fake_transport, protocol, request_message)

        with pytest.raises(ModbusIOError, match="timed out after 0.5s"):
            await transaction.execute()

        assert transaction.state is TransactionState.FAILED
        assert transaction.response is None

    @pytest.mark.asyncio
    async def test_unresponsive_transport_times_out(self, protocol, request_message):
        """Test the receive timeout bounds a transport that never answers."""
        transaction = ModbusTransaction(
            HangingTransport(), protocol, request_message, receive_timeout=10
        )
        with pytest.raises(ModbusIOError):
            await transaction.execute()

    @pytest.mark.asyncio
    async def test_connection_error_is_io_error(
        self, fake_transport, protocol, request_message
    ):
        """Test connection failures surface as ModbusIOError."""
        fake_transport.add_error(ConnectionResetError("reset by peer"))
        transaction = ModbusTransaction(fake_transport, protocol, request_message)
        with pytest.raises(ModbusIOError, match="reset by peer"):
            await transaction.execute()

    @pytest.mark.asyncio
    async def test_empty_reply_is_no_response(
        self, fake_transport, protocol, request_message, caplog
    ):
        """Test an empty reply completes without a response."""
        fake_transport.add_response(b"")
        transaction = ModbusTransaction(fake_transport, protocol, request_message)

        with caplog.at_level(logging.WARNING):
            assert await transaction.execute() is None

        assert transaction.state is TransactionState.COMPLETED
        assert "No response" in caplog.text

    @pytest.mark.asyncio
    async def test_exception_response_raises_slave_error(
        self, fake_transport, protocol, request_message
    ):
        """Test exception responses raise ModbusSlaveError by default."""
        fake_transport.add_response(b"\x97\x02")
        transaction = ModbusTransaction(fake_transport, protocol, request_message)

        with pytest.raises(ModbusSlaveError) as exc_info:
            await transaction.execute()

        assert exc_info.value.exception_code == 2
        assert exc_info.value.function_code == 0x17
        assert isinstance(transaction.response, ExceptionResponse)
        assert transaction.state is TransactionState.COMPLETED

    @pytest.mark.asyncio
    async def test_exception_response_returned_when_unchecked(
        self, fake_transport, protocol, request_message
    ):
        """Test exception responses are returned with check_exceptions off."""
        fake_transport.add_response(b"\x97\x02")
        transaction = ModbusTransaction(
            fake_transport, protocol, request_message, check_exceptions=False
        )
        response = await transaction.execute()
        assert isinstance(response, ExceptionResponse)
        assert response.exception_code == 2

    @pytest.mark.asyncio
    async def test_truncated_response(self, fake_transport, protocol, request_message):
        """Test a truncated response fails the transaction."""
        fake_transport.add_response(bytes.fromhex("1708000a"))
        transaction = ModbusTransaction(fake_transport, protocol, request_message)

        with pytest.raises(TruncatedMessageError):
            await transaction.execute()

        assert transaction.state is TransactionState.FAILED

    @pytest.mark.asyncio
    async def test_wrong_register_count(self, fake_transport, protocol, request_message):
        """Test a response with fewer registers than requested is malformed."""
        fake_transport.add_response(bytes.fromhex("1704000a0014"))
        transaction = ModbusTransaction(fake_transport, protocol, request_message)
        with pytest.raises(MalformedMessageError, match="requested 4"):
            await transaction.execute()

    @pytest.mark.asyncio
    async def test_execute_only_once(self, fake_transport, protocol):
        """Test a transaction cannot be executed twice."""
        fake_transport.add_response(b"\x17\x00")
        transaction = ModbusTransaction(
            fake_transport, protocol, ReadWriteMultipleRequest()
        )
        await transaction.execute()
        with pytest.raises(RuntimeError):
            await transaction.execute()

    @pytest.mark.asyncio
    async def test_unexpected_error_marks_failed(self, fake_transport, request_message):
        """Test a non-Modbus error still leaves the transaction failed."""
        fake_transport.add_response(bytes.fromhex("1708000a0014001e0028"))
        transaction = ModbusTransaction(
            fake_transport, BrokenDecodeProtocol(), request_message
        )

        with pytest.raises(KeyError):
            await transaction.execute()

        assert transaction.state is TransactionState.FAILED
        assert transaction.response is None
