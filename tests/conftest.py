"""Pytest configuration and fixtures for the permission registry tests."""

import os
import tempfile
from pathlib import Path

import pytest

# settings are read once at import time
os.environ.setdefault("PERMISSIONS_ACCESS_LOG_ENABLED", "false")
os.environ.setdefault(
    "PERMISSIONS_ACCESS_LOG_PATH", str(Path(tempfile.gettempdir()) / "subuser-permissions" / "access.log")
)

from fastapi.testclient import TestClient  # noqa: E402

from subuser_permissions.app import create_app  # noqa: E402


class MemorySink:
    def __init__(self) -> None:
        self.payloads: list[dict] = []

    async def write(self, payload: dict) -> None:
        self.payloads.append(payload)


@pytest.fixture
def memory_sink():
    return MemorySink()


@pytest.fixture
def client(memory_sink):
    with TestClient(create_app(sink=memory_sink)) as test_client:
        yield test_client
