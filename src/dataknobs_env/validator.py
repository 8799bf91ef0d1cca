"""Constraint validation for environment variables.

The validator walks a ConstraintSet in declaration order, checks each declared
variable against the current environment, and collects human-readable error
messages. Nothing here raises on a bad value; the outcome is either ``None``
(valid) or the list of messages, and optionally a call to the terminator.

Example:
    ```python
    from dataknobs_env import EnvValidator, EnumConstraint, NumberConstraint

    validator = EnvValidator(
        {
            "PORT": NumberConstraint(required=True, min=1, max=65535),
            "LOG_LEVEL": EnumConstraint(values=("debug", "info"), default="info"),
        },
        exit_on_error=False,
        apply_defaults=True,
    )
    errors = validator.validate()
    if errors:
        ...
    ```
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, MutableMapping

from .constraints import (
    BooleanConstraint,
    Constraint,
    EnumConstraint,
    NumberConstraint,
    StringConstraint,
    constraints_from_dict,
)
from .options import ValidationOptions
from .snapshot import EnvSnapshot, as_snapshot
from .terminator import ProcessTerminator, Terminator
from .values import format_number, format_value, parse_number

logger = logging.getLogger(__name__)

BOOLEAN_LITERALS = ("true", "false", "1", "0")
EXIT_STATUS = 1


class EnvValidator:
    """Validates environment variables against a set of typed constraints.

    Options that are not given take their defaults: the current working
    directory as base path, ``[".env"]`` as files, exit on error, no default
    injection, and logging enabled.
    """

    def __init__(
        self,
        constraints: Mapping[str, Constraint | Mapping[str, Any]],
        options: ValidationOptions | Mapping[str, Any] | None = None,
        *,
        env: MutableMapping[str, str] | None = None,
        terminator: Terminator | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the validator.

        Args:
            constraints: Mapping of variable name to constraint or definition
            options: Validation options, as an object or dict
            env: Environment to validate (default: the process environment)
            terminator: Action taken on failure when exit_on_error is set
            **overrides: Individual option values (e.g. ``exit_on_error=False``)
        """
        self._constraints = MappingProxyType(constraints_from_dict(constraints))
        self._options = ValidationOptions.resolve(options, **overrides)
        self._env = as_snapshot(env)
        self._terminator = terminator or ProcessTerminator()

    @property
    def constraints(self) -> Mapping[str, Constraint]:
        return self._constraints

    @property
    def options(self) -> ValidationOptions:
        return self._options

    @property
    def env(self) -> EnvSnapshot:
        return self._env

    def validate(self) -> list[str] | None:
        """Check every declared constraint against the environment.

        Returns:
            None when the environment is valid, otherwise the error messages
            in declaration order (unless the terminator ends the process)
        """
        errors: list[str] = []
        for name, constraint in self._constraints.items():
            errors.extend(self.check(name, constraint))
        return self.report(errors)

    def check(self, name: str, constraint: Constraint) -> list[str]:
        """Check one variable and return its error messages.

        The variable's value is read once, before any default is injected.
        A default written here therefore neither satisfies ``required`` nor
        gets checked against the constraint's own rules on this pass.

        Args:
            name: Environment variable name
            constraint: Constraint declared for it

        Returns:
            Error messages for this variable (possibly empty)
        """
        value = self._env.get(name)

        if value is None and constraint.default is not None and self._options.apply_defaults:
            self._env[name] = format_value(constraint.default)
            logger.debug(f"Applied default for {name}")

        if value is None:
            if constraint.required:
                return [f"Missing required environment variable: {name}"]
            return []

        match constraint:
            case NumberConstraint():
                return _check_number(name, value, constraint)
            case StringConstraint():
                return _check_string(name, value, constraint)
            case BooleanConstraint():
                return _check_boolean(name, value)
            case EnumConstraint():
                return _check_enum(name, value, constraint)
            case _:
                raise TypeError(f"Unsupported constraint for {name}: {constraint!r}")

    def report(self, errors: list[str]) -> list[str] | None:
        """Apply the reporting policy to collected errors.

        Logs each error unless silent, then either terminates (exit_on_error)
        or returns the list. An empty list yields None.

        Args:
            errors: Collected messages

        Returns:
            None for no errors, otherwise the messages
        """
        if not errors:
            return None

        if not self._options.silent:
            for error in errors:
                logger.error(error)

        if self._options.exit_on_error:
            self._terminator.terminate(EXIT_STATUS, errors)
        return errors


def _check_number(name: str, value: str, constraint: NumberConstraint) -> list[str]:
    number = parse_number(value)
    if number is None:
        return [f"Invalid number for environment variable: {name}"]

    errors = []
    if constraint.min is not None and number < constraint.min:
        errors.append(f"Value for {name} is below minimum: {format_number(constraint.min)}")
    if constraint.max is not None and number > constraint.max:
        errors.append(f"Value for {name} exceeds maximum: {format_number(constraint.max)}")
    return errors


def _check_string(name: str, value: str, constraint: StringConstraint) -> list[str]:
    pattern = constraint.pattern
    if pattern is not None and not pattern.search(value):
        return [f"Invalid value for environment variable: {name}"]
    return []


def _check_boolean(name: str, value: str) -> list[str]:
    if value not in BOOLEAN_LITERALS:
        return [f'Invalid boolean for environment variable: {name} (got "{value}")']
    return []


def _check_enum(name: str, value: str, constraint: EnumConstraint) -> list[str]:
    if value not in constraint.values:
        return [f'Invalid value for environment variable: {name} (got "{value}")']
    return []
