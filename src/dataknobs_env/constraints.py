"""Typed constraints for environment variables.

A constraint is one of four variants, tagged by ``type`` in their definition
form:

    ```yaml
    PORT:
      type: number
      required: true
      min: 1
      max: 65535
    LOG_LEVEL:
      type: enum
      values: [debug, info, warning, error]
      default: info
    DEBUG:
      type: boolean
      default: false
    DATABASE_URL:
      type: string
      required: true
      regex: "^postgres(ql)?://"
    ```

A ConstraintSet is an ordered mapping of variable name to constraint; its
order is the order in which variables are validated and errors reported.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from .exceptions import ConstraintDefinitionError
from .values import format_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumberConstraint:
    """Numeric variable with optional inclusive bounds.

    Attributes:
        required: Whether the variable must be present
        min: Lowest accepted value, if any
        max: Highest accepted value, if any
        default: Value written when absent and defaults are applied
    """

    required: bool = False
    min: float | None = None
    max: float | None = None
    default: float | None = None

    type_name = "number"

    def __post_init__(self) -> None:
        for attr in ("min", "max"):
            bound = getattr(self, attr)
            if bound is not None and (
                isinstance(bound, bool) or not isinstance(bound, (int, float))
            ):
                raise ConstraintDefinitionError(
                    f"Number constraint {attr} must be numeric, got {bound!r}",
                    context={attr: bound},
                )


@dataclass(frozen=True)
class StringConstraint:
    """String variable with an optional pattern.

    The pattern is searched for anywhere in the value; anchor it with
    ``^``/``$`` to match the whole value.

    Attributes:
        required: Whether the variable must be present
        regex: Pattern string or compiled pattern, if any
        default: Value written when absent and defaults are applied
    """

    required: bool = False
    regex: re.Pattern[str] | str | None = None
    default: str | None = None

    type_name = "string"

    def __post_init__(self) -> None:
        if isinstance(self.regex, str):
            try:
                compiled = re.compile(self.regex)
            except re.error as e:
                raise ConstraintDefinitionError(
                    f"Invalid regex {self.regex!r}: {e}",
                    context={"regex": self.regex},
                ) from e
            object.__setattr__(self, "regex", compiled)
        elif self.regex is not None and not isinstance(self.regex, re.Pattern):
            raise ConstraintDefinitionError(
                f"String constraint regex must be a pattern, got {self.regex!r}",
                context={"regex": self.regex},
            )

    @property
    def pattern(self) -> re.Pattern[str] | None:
        """Compiled pattern, if one was declared."""
        return self.regex if isinstance(self.regex, re.Pattern) else None


@dataclass(frozen=True)
class BooleanConstraint:
    """Boolean variable accepting ``true``, ``false``, ``1`` or ``0``."""

    required: bool = False
    default: bool | None = None

    type_name = "boolean"


@dataclass(frozen=True)
class EnumConstraint:
    """Variable restricted to a fixed, ordered set of strings.

    Attributes:
        required: Whether the variable must be present
        values: Accepted values (exact match)
        default: Value written when absent and defaults are applied
    """

    required: bool = False
    values: tuple[str, ...] = field(default_factory=tuple)
    default: str | None = None

    type_name = "enum"

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if not values:
            raise ConstraintDefinitionError("Enum constraint requires at least one value")
        for value in values:
            if not isinstance(value, str):
                raise ConstraintDefinitionError(
                    f"Enum values must be strings, got {value!r}",
                    context={"values": list(values)},
                )
        object.__setattr__(self, "values", values)


Constraint = Union[NumberConstraint, StringConstraint, BooleanConstraint, EnumConstraint]
ConstraintSet = Mapping[str, Constraint]

CONSTRAINT_TYPES: dict[str, type] = {
    "number": NumberConstraint,
    "string": StringConstraint,
    "boolean": BooleanConstraint,
    "enum": EnumConstraint,
}

_ALLOWED_KEYS = {
    "number": {"type", "required", "min", "max", "default"},
    "string": {"type", "required", "regex", "default"},
    "boolean": {"type", "required", "default"},
    "enum": {"type", "required", "values", "default"},
}


def constraint_from_dict(data: Mapping[str, Any], name: str | None = None) -> Constraint:
    """Build a constraint from its definition.

    Args:
        data: Definition such as ``{"type": "number", "min": 1}``
        name: Variable name, used only in error context

    Returns:
        The constraint variant selected by ``type``

    Raises:
        ConstraintDefinitionError: If the definition is malformed
    """
    context = {"variable": name} if name else {}
    if not isinstance(data, Mapping):
        raise ConstraintDefinitionError(
            f"Constraint definition must be a mapping, got {type(data).__name__}",
            context=context,
        )

    type_name = data.get("type")
    if not isinstance(type_name, str) or type_name not in CONSTRAINT_TYPES:
        raise ConstraintDefinitionError(
            f"Unknown constraint type: {type_name!r}",
            context={**context, "type": type_name},
        )

    unknown = sorted(set(data) - _ALLOWED_KEYS[type_name])
    if unknown:
        raise ConstraintDefinitionError(
            f"Unknown keys for {type_name} constraint: {', '.join(unknown)}",
            context={**context, "keys": unknown},
        )

    kwargs = {key: value for key, value in data.items() if key != "type"}
    required = kwargs.get("required")
    if required is None:
        required = False
    elif not isinstance(required, bool):
        raise ConstraintDefinitionError(
            f"required must be true or false, got {required!r}",
            context={**context, "required": required},
        )
    kwargs["required"] = required
    if type_name == "enum":
        values = kwargs.get("values")
        if not isinstance(values, (list, tuple)):
            raise ConstraintDefinitionError(
                "Enum constraint requires a list of values",
                context=context,
            )
        kwargs["values"] = tuple(values)

    try:
        return CONSTRAINT_TYPES[type_name](**kwargs)
    except ConstraintDefinitionError as e:
        if name and "variable" not in e.context:
            e.context["variable"] = name
        raise


def constraints_from_dict(data: Mapping[str, Any]) -> dict[str, Constraint]:
    """Build a ConstraintSet from a mapping of names to definitions.

    Definitions that are already constraint objects are kept as-is.

    Args:
        data: Mapping of variable name to definition

    Returns:
        Ordered dict of variable name to constraint
    """
    if not isinstance(data, Mapping):
        raise ConstraintDefinitionError(
            f"Constraint set must be a mapping, got {type(data).__name__}"
        )

    constraints: dict[str, Constraint] = {}
    for name, definition in data.items():
        if isinstance(definition, tuple(CONSTRAINT_TYPES.values())):
            constraints[str(name)] = definition
        else:
            constraints[str(name)] = constraint_from_dict(definition, name=str(name))
    return constraints


def load_constraints(path: str | Path) -> dict[str, Constraint]:
    """Load a ConstraintSet from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

    Returns:
        Ordered dict of variable name to constraint

    Raises:
        ConstraintDefinitionError: If the file cannot be read or is malformed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConstraintDefinitionError(
            f"Failed to parse constraints file {path}: {e}",
            context={"path": str(path)},
        ) from e
    except OSError as e:
        raise ConstraintDefinitionError(
            f"Failed to read constraints file {path}: {e}",
            context={"path": str(path)},
        ) from e

    if data is None:
        logger.debug(f"Constraints file {path} is empty")
        return {}

    if not isinstance(data, dict):
        raise ConstraintDefinitionError(
            f"Constraints file must contain a mapping: {path}",
            context={"path": str(path)},
        )

    return constraints_from_dict(data)


def describe(constraint: Constraint) -> str:
    """Summarize a constraint's rules as a short string."""
    parts: list[str] = []
    match constraint:
        case NumberConstraint(min=low, max=high):
            if low is not None:
                parts.append(f"min={format_number(low)}")
            if high is not None:
                parts.append(f"max={format_number(high)}")
        case StringConstraint():
            if constraint.pattern is not None:
                parts.append(f"regex={constraint.pattern.pattern}")
        case EnumConstraint(values=values):
            parts.append(f"values={'|'.join(values)}")
        case BooleanConstraint():
            parts.append("true|false|1|0")
    return ", ".join(parts)
