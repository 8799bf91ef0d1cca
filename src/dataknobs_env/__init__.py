"""DataKnobs Env Package

Typed validation of environment variables, with optional loading of
``.env`` files beforehand.
"""

from .constraints import (
    BooleanConstraint,
    Constraint,
    ConstraintSet,
    EnumConstraint,
    NumberConstraint,
    StringConstraint,
    constraint_from_dict,
    constraints_from_dict,
    load_constraints,
)
from .exceptions import (
    ConfigurationError,
    ConstraintDefinitionError,
    EnvError,
    EnvValidationError,
)
from .loader import EnvLoader, load_and_validate, load_env_files
from .options import ValidationOptions
from .snapshot import EnvSnapshot
from .terminator import ProcessTerminator, RaisingTerminator, Terminator
from .validator import EnvValidator

__version__ = "0.1.0"
__all__ = [
    "BooleanConstraint",
    "ConfigurationError",
    "Constraint",
    "ConstraintDefinitionError",
    "ConstraintSet",
    "EnumConstraint",
    "EnvError",
    "EnvLoader",
    "EnvSnapshot",
    "EnvValidationError",
    "EnvValidator",
    "NumberConstraint",
    "ProcessTerminator",
    "RaisingTerminator",
    "StringConstraint",
    "Terminator",
    "ValidationOptions",
    "constraint_from_dict",
    "constraints_from_dict",
    "load_and_validate",
    "load_constraints",
    "load_env_files",
]
