"""Validation options and their defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Sequence, Union

from .exceptions import ConfigurationError

FileList = Union[Sequence[str], Callable[[Mapping[str, str]], Sequence[str]]]

# Accepted spellings for option names in dict form
_ALIASES = {
    "basePath": "base_path",
    "exitOnError": "exit_on_error",
    "applyDefaults": "apply_defaults",
}


@dataclass(frozen=True)
class ValidationOptions:
    """Resolved options for loading and validating the environment.

    Attributes:
        base_path: Directory that env file names are joined to
        files: Env file names, or a function of the current environment
            returning them (evaluated once per load)
        exit_on_error: End the process when validation errors are found
        apply_defaults: Write declared defaults for absent variables
        silent: Suppress warning and error log output
    """

    base_path: str = field(default_factory=os.getcwd)
    files: FileList = (".env",)
    exit_on_error: bool = True
    apply_defaults: bool = False
    silent: bool = False

    def __post_init__(self) -> None:
        if not callable(self.files):
            if isinstance(self.files, str):
                raise ConfigurationError(
                    "files must be a sequence of file names, not a single string",
                    context={"files": self.files},
                )
            object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(self, "base_path", os.fspath(self.base_path))

    @classmethod
    def resolve(
        cls,
        options: ValidationOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ValidationOptions:
        """Merge caller options onto the defaults.

        Args:
            options: Existing options or a dict of option values. Dict keys
                may be snake_case or camelCase (``exitOnError``).
            **overrides: Option values that take precedence over ``options``

        Returns:
            Fully resolved options

        Raises:
            ConfigurationError: If an option name is not recognized
        """
        if isinstance(options, ValidationOptions):
            base = options
            values: dict[str, Any] = {}
        else:
            base = None
            values = _normalize(options or {})
        values.update(_normalize(overrides))

        if base is not None:
            return replace(base, **values) if values else base
        return cls(**values)

    def resolve_files(self, env: Mapping[str, str]) -> list[str]:
        """Return the env file names to load for the given environment."""
        if callable(self.files):
            return list(self.files(env))
        return list(self.files)


def _normalize(values: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(ValidationOptions)}
    result: dict[str, Any] = {}
    for key, value in values.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise ConfigurationError(
                f"Unknown validation option: {key}",
                context={"option": key},
            )
        if value is None:
            continue
        result[name] = value
    return result
