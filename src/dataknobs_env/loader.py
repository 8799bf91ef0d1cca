"""Loading ``.env`` files into the environment before validation.

Files are parsed with python-dotenv. Parsed keys are merged without
overwriting: a variable that is already set (in the process, or by an earlier
file in the list) keeps its value, the same rule as
``dotenv.load_dotenv(override=False)``.

Values are taken literally: ``${VAR}`` references are not expanded, since
expansion would read the process environment rather than the snapshot
being loaded.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, MutableMapping

from dotenv import dotenv_values

from .constraints import Constraint
from .options import ValidationOptions
from .validator import EnvValidator

logger = logging.getLogger(__name__)


def load_env_files(
    env: MutableMapping[str, str],
    options: ValidationOptions,
) -> list[str]:
    """Merge the configured env files into an environment.

    Args:
        env: Environment to populate
        options: Options supplying base_path, files and silent

    Returns:
        One ``Missing env file`` message per file that does not exist
    """
    errors: list[str] = []
    for file in options.resolve_files(env):
        path = os.path.join(options.base_path, file)
        if not os.path.exists(path):
            if not options.silent:
                logger.warning(f"Warning: Missing env file: {file}")
            errors.append(f"Missing env file: {file}")
            continue

        loaded = 0
        for key, value in dotenv_values(path, interpolate=False).items():
            if value is None or key in env:
                continue
            env[key] = value
            loaded += 1
        logger.debug(f"Loaded {loaded} variable(s) from {path}")
    return errors


class EnvLoader(EnvValidator):
    """Validator that first loads the configured env files.

    Example:
        ```python
        loader = EnvLoader(
            {"DATABASE_URL": StringConstraint(required=True)},
            files=lambda env: [".env", f".env.{env.get('APP_ENV', 'development')}"],
            exit_on_error=False,
        )
        errors = loader.load_and_validate()
        ```
    """

    def load(self) -> list[str]:
        """Load the configured env files into the environment.

        Returns:
            Missing-file messages, in file order
        """
        return load_env_files(self.env, self.options)

    def load_and_validate(self) -> list[str] | None:
        """Load env files, then validate.

        Loader messages come before validator messages. Termination, when
        enabled, happens inside validation and only for validator errors.

        Returns:
            None when nothing was reported, otherwise all messages
        """
        errors = self.load()
        result = self.validate()
        errors.extend(result or [])
        return errors or None


def load_and_validate(
    constraints: Mapping[str, Constraint | Mapping[str, Any]],
    env: MutableMapping[str, str] | None = None,
    **options: Any,
) -> list[str] | None:
    """Load env files and validate in one call.

    Args:
        constraints: Mapping of variable name to constraint or definition
        env: Environment to use (default: the process environment)
        **options: Validation options and ``terminator``

    Returns:
        None when nothing was reported, otherwise all messages
    """
    terminator = options.pop("terminator", None)
    loader = EnvLoader(constraints, env=env, terminator=terminator, **options)
    return loader.load_and_validate()
