"""Tests for terminators."""

import pytest

from dataknobs_common import ValidationError

from dataknobs_env import (
    ConfigurationError,
    ConstraintDefinitionError,
    EnvError,
    EnvValidationError,
    EnvValidator,
    ProcessTerminator,
    RaisingTerminator,
    StringConstraint,
    Terminator,
)
from dataknobs_env.testing import RecordingTerminator


class TestTerminators:
    """Test the terminal actions."""

    def test_process_terminator_exits(self):
        """Test sys.exit is called with the status."""
        with pytest.raises(SystemExit) as exc_info:
            ProcessTerminator().terminate(1, ["boom"])
        assert exc_info.value.code == 1

    def test_raising_terminator(self):
        """Test the error carries the messages."""
        with pytest.raises(EnvValidationError) as exc_info:
            RaisingTerminator().terminate(1, ["a", "b"])
        assert exc_info.value.errors == ["a", "b"]
        assert exc_info.value.context == {"errors": ["a", "b"]}
        assert "2 errors" in str(exc_info.value)

    def test_raising_terminator_with_validator(self, env):
        """Test validation raises instead of exiting."""
        validator = EnvValidator(
            {"A": StringConstraint(required=True)},
            env=env,
            terminator=RaisingTerminator(),
            silent=True,
        )
        with pytest.raises(EnvValidationError, match="1 error"):
            validator.validate()

    def test_recording_terminator(self):
        """Test calls are recorded and reset."""
        terminator = RecordingTerminator()
        assert terminator.last_status is None
        terminator.terminate(1, ["x"])
        assert terminator.terminated
        assert terminator.calls[0].errors == ["x"]
        terminator.reset()
        assert not terminator.terminated

    def test_protocol(self):
        """Test implementations satisfy the protocol."""
        assert isinstance(ProcessTerminator(), Terminator)
        assert isinstance(RaisingTerminator(), Terminator)
        assert isinstance(RecordingTerminator(), Terminator)


class TestExceptionHierarchy:
    """Test the package exception base."""

    def test_package_errors_share_base(self):
        """Test package errors can be caught as EnvError."""
        with pytest.raises(EnvError):
            RaisingTerminator().terminate(1, ["x"])
        with pytest.raises(EnvError):
            StringConstraint(regex="(")

    def test_common_bases_kept(self):
        """Test package errors remain dataknobs_common errors."""
        assert issubclass(ConstraintDefinitionError, ConfigurationError)
        assert issubclass(EnvValidationError, ValidationError)
