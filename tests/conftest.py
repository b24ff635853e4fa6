"""Test configuration and fixtures."""

from __future__ import annotations

import io

import pytest
from pathlib import Path


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def workspace_dir(tmp_path: Path) -> Path:
    """Create a temporary workspace directory for testing."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


# ============================================================================
# Channel Fixtures
# ============================================================================


@pytest.fixture
def sink() -> io.BytesIO:
    """In-memory sink capturing outbound bytes."""
    return io.BytesIO()


@pytest.fixture
def make_channel(sink):
    """Build an EventChannel reading the given lines and writing to ``sink``."""
    from plato_hook.ipc import EventChannel

    def _make(*lines: bytes, config=None) -> EventChannel:
        return EventChannel(sink, io.BytesIO(b"".join(lines)), config)

    return _make


@pytest.fixture
def channel(make_channel):
    """An EventChannel with an empty source."""
    return make_channel()
