"""Pytest configuration and fixtures for modbus_rw tests."""

import sys
from pathlib import Path

# Add parent directory to Python path so we can import modbus_rw
sys.path.insert(0, str(Path(__file__).parent.parent))
# Test doubles are imported as a top-level package
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from modbus_rw.application.services import ResponseSynthesizer, SlaveRequestHandler
from modbus_rw.infrastructure.process_image import SimpleRegisterStore
from modbus_rw.infrastructure.protocol import ModbusPDUProtocol


@pytest.fixture
def store() -> SimpleRegisterStore:
    """Four-register process image holding [10, 20, 30, 40]."""
    return SimpleRegisterStore([10, 20, 30, 40])


@pytest.fixture
def protocol() -> ModbusPDUProtocol:
    """PDU protocol instance."""
    return ModbusPDUProtocol()


@pytest.fixture
def synthesizer(store) -> ResponseSynthesizer:
    """Response synthesizer bound to the store fixture."""
    return ResponseSynthesizer(store)


@pytest.fixture
def slave(protocol, synthesizer) -> SlaveRequestHandler:
    """Slave-side handler answering from the store fixture."""
    return SlaveRequestHandler(protocol, synthesizer)
