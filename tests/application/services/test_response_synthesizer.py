"""Tests for ResponseSynthesizer service."""

import logging
import threading

from modbus_rw.application.services import ResponseSynthesizer
from modbus_rw.domain.messages import (
    ExceptionResponse,
    ReadWriteMultipleRequest,
    ReadWriteMultipleResponse,
)
from modbus_rw.infrastructure.process_image import SimpleRegisterStore


class TestResponseSynthesizer:
    """Test slave-side response synthesis."""

    def test_overlapping_ranges_return_pre_write_values(self, synthesizer, store):
        """Test the read snapshot is taken before the write is applied."""
        request = ReadWriteMultipleRequest(
            unit_id=1, read_start=0, read_count=4, write_start=2, values=[99, 99]
        )

        response = synthesizer.synthesize(request)

        assert isinstance(response, ReadWriteMultipleResponse)
        assert response.values == [10, 20, 30, 40]
        assert store.values == [10, 20, 99, 99]

    def test_response_mirrors_header(self, synthesizer):
        """Test the response carries the request's unit and transaction id."""
        request = ReadWriteMultipleRequest(unit_id=5, read_count=1)
        request.transaction_id = 300
        response = synthesizer.synthesize(request)
        assert response.unit_id == 5
        assert response.transaction_id == 300

    def test_read_only_is_idempotent(self, synthesizer, store):
        """Test repeating a request with no write returns the same values."""
        request = ReadWriteMultipleRequest(read_start=1, read_count=3)
        first = synthesizer.synthesize(request)
        second = synthesizer.synthesize(request)
        assert first.values == second.values == [20, 30, 40]
        assert store.values == [10, 20, 30, 40]

    def test_write_only(self, synthesizer, store):
        """Test a zero-length read still applies the write."""
        request = ReadWriteMultipleRequest(write_start=0, values=[-1])
        response = synthesizer.synthesize(request)
        assert response.values == []
        assert store.values == [0xFFFF, 20, 30, 40]

    def test_snapshot_independent_of_store(self, synthesizer, store):
        """Test later store writes do not change an earlier response."""
        response = synthesizer.synthesize(ReadWriteMultipleRequest(read_count=2))
        store.set_register(0, 1)
        assert response.values == [10, 20]

    def test_illegal_write_range(self, synthesizer, store, caplog):
        """Test a write range past the store is rejected without mutation."""
        request = ReadWriteMultipleRequest(
            read_start=0, read_count=1, write_start=3, values=[1, 2]
        )

        with caplog.at_level(logging.WARNING):
            response = synthesizer.synthesize(request)

        assert isinstance(response, ExceptionResponse)
        assert response.function_code == 0x97
        assert response.exception_code == 2
        assert store.values == [10, 20, 30, 40]
        assert "Rejected write range 0x0003+2" in caplog.text

    def test_illegal_read_range(self, synthesizer, store):
        """Test a read range past the store is rejected without mutation."""
        request = ReadWriteMultipleRequest(
            read_start=2, read_count=3, write_start=0, values=[5]
        )
        response = synthesizer.synthesize(request)
        assert isinstance(response, ExceptionResponse)
        assert response.exception_code == 2
        assert store.values == [10, 20, 30, 40]

    def test_empty_request(self):
        """Test an empty request against an empty store succeeds."""
        response = ResponseSynthesizer(SimpleRegisterStore()).synthesize(
            ReadWriteMultipleRequest()
        )
        assert response.values == []

    def test_store_property(self, synthesizer, store):
        """Test the synthesizer exposes its store."""
        assert synthesizer.store is store

    def test_concurrent_requests_never_tear(self):
        """Test concurrent full-range writes never produce a mixed snapshot."""
        rounds = 50
        size = 8
        synthesizer = ResponseSynthesizer(SimpleRegisterStore(size=size))
        snapshots = []
        lock = threading.Lock()

        def worker(marker):
            for _ in range(rounds):
                request = ReadWriteMultipleRequest(
                    read_count=size, values=[marker] * size
                )
                values = synthesizer.synthesize(request).values
                with lock:
                    snapshots.append(values)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(1, 5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(snapshots) == 4 * rounds
        assert all(len(set(values)) == 1 for values in snapshots)
        assert len(set(synthesizer.store.values)) == 1
