"""Pytest configuration and fixtures for env package tests."""

import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from dataknobs_env import EnvSnapshot
from dataknobs_env.testing import RecordingTerminator


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def env():
    """In-memory environment snapshot."""
    return EnvSnapshot({})


@pytest.fixture
def terminator():
    """Terminator that records instead of exiting."""
    return RecordingTerminator()


@pytest.fixture
def write_env_file(temp_dir):
    """Helper to write an env file into temp_dir."""

    def _write(name: str, content: str) -> Path:
        path = temp_dir / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def isolated_environ():
    """Restore os.environ after the test, including variables loaded from files."""
    with patch.dict(os.environ):
        yield os.environ
