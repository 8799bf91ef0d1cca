"""Test helpers for code that validates its environment.

Example:
    ```python
    from dataknobs_env import EnvValidator, NumberConstraint
    from dataknobs_env.testing import RecordingTerminator

    def test_startup_fails_without_port():
        terminator = RecordingTerminator()
        validator = EnvValidator(
            {"PORT": NumberConstraint(required=True)},
            env={},
            terminator=terminator,
        )
        validator.validate()
        assert terminator.terminated
        assert terminator.last_status == 1
    ```
"""

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class TerminationCall:
    """One recorded call to a terminator."""

    status: int
    errors: list[str]


@dataclass
class RecordingTerminator:
    """Terminator that records calls and returns instead of exiting."""

    calls: list[TerminationCall] = field(default_factory=list)

    def terminate(self, status: int, errors: Sequence[str]) -> None:
        self.calls.append(TerminationCall(status=status, errors=list(errors)))

    @property
    def terminated(self) -> bool:
        return bool(self.calls)

    @property
    def last_status(self) -> int | None:
        return self.calls[-1].status if self.calls else None

    def reset(self) -> None:
        self.calls.clear()
