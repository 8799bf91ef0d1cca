"""Terminal actions taken when validation fails with exit_on_error enabled."""

import logging
import sys
from typing import Protocol, Sequence, runtime_checkable

from .exceptions import EnvValidationError

logger = logging.getLogger(__name__)


@runtime_checkable
class Terminator(Protocol):
    """Capability that ends the process on unrecoverable validation failure.

    Implementations normally do not return. When one does return, the
    validator falls back to returning the error list.
    """

    def terminate(self, status: int, errors: Sequence[str]) -> None:
        """End the process.

        Args:
            status: Exit status code
            errors: Validation messages that caused termination
        """
        ...


class ProcessTerminator:
    """Exits the interpreter via ``sys.exit``."""

    def terminate(self, status: int, errors: Sequence[str]) -> None:
        logger.debug(f"Exiting with status {status} after {len(errors)} validation error(s)")
        sys.exit(status)


class RaisingTerminator:
    """Raises EnvValidationError instead of exiting.

    Useful when the caller wants to handle failure itself, for example to
    report it through an application's own error path.
    """

    def terminate(self, status: int, errors: Sequence[str]) -> None:
        raise EnvValidationError(errors)
