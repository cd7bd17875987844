"""Pytest fixtures for throttled_reader tests."""

import io

import pytest


class RecordingSource:
    """A readable source that counts every readinto-call it receives."""

    def __init__(self, data: bytes = b"", fail_with: BaseException = None):
        self._data = io.BytesIO(data)
        self.fail_with = fail_with
        self.calls = 0
        self.closed = False

    def readinto(self, b):
        self.calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return self._data.readinto(b)

    def read_rest(self) -> bytes:
        return self._data.read()

    def close(self):
        self.closed = True


class WouldBlockSource(RecordingSource):
    """A non-blocking source that never has data ready."""

    def readinto(self, b):
        self.calls += 1
        return None


@pytest.fixture
def make_source():
    """Factory for RecordingSource instances."""
    return RecordingSource


@pytest.fixture
def would_block_source():
    return WouldBlockSource()


@pytest.fixture
def buf():
    return bytearray(1)
