"""Custom exceptions for the env package.

This module defines exception types for the env package,
built on the common exception framework from dataknobs_common.

Validation failures themselves are not exceptions; they are accumulated as
messages by the validator. These types cover malformed definitions, invalid
options, and callers that opt into raising instead of exiting.
"""

from typing import Sequence

from dataknobs_common import (
    ConfigurationError,
    DataknobsError,
    ValidationError as BaseValidationError,
)


class EnvError(DataknobsError):
    """Base exception for the env package."""

    pass


class ConstraintDefinitionError(EnvError, ConfigurationError):
    """Raised when a constraint definition or definitions file is malformed."""

    pass


class EnvValidationError(EnvError, BaseValidationError):
    """Raised in place of process exit when validation errors were found.

    Attributes:
        errors: The validation messages, in emission order
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        super().__init__(
            f"Environment validation failed with {count} {noun}",
            context={"errors": self.errors},
        )


__all__ = [
    "ConfigurationError",
    "ConstraintDefinitionError",
    "EnvError",
    "EnvValidationError",
]
