# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Clip.

Two families of errors exist, with different propagation policies:

- `ArgumentDefinitionError` is raised while a host program wires up its
  `Registry`. These are developer mistakes in static configuration and are
  raised immediately from `Registry.add()` or the builder.
- `ResolutionError` is raised by `Registry.resolve()` / `parse()` when the
  user-supplied tokens do not fit the registry. Resolution stops at the first
  error and no partial result is returned.

Exception Hierarchy:
- ClipError
    ├── ArgumentDefinitionError
    │   ├── InvalidModeError
    │   ├── DuplicateArgumentError
    │   ├── DuplicateAliasError
    │   ├── MultipleVariadicError
    │   ├── ParameterOrderError
    │   ├── InvalidArityError
    │   └── BuilderConsumedError
    └── ResolutionError
        ├── UnknownArgumentError
        ├── ExpectedParameterError
        ├── MissingPositionalError
        └── ValueTypeError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clip.value_type import ValueType


class ClipError(Exception):
    """Base exception for Clip."""


class ArgumentDefinitionError(ClipError):
    """Exception raised when an argument definition is invalid."""


class InvalidModeError(ArgumentDefinitionError):
    """Exception raised when a positional or variadic argument has aliases or parameters."""


class DuplicateArgumentError(ArgumentDefinitionError):
    """Exception raised when an argument with the same name is already registered."""


class DuplicateAliasError(ArgumentDefinitionError):
    """Exception raised when an alias shadows another alias or an argument name."""


class MultipleVariadicError(ArgumentDefinitionError):
    """Exception raised when more than one variadic argument is registered."""


class ParameterOrderError(ArgumentDefinitionError):
    """Exception raised when an unbounded parameter is not the last parameter."""


class InvalidArityError(ArgumentDefinitionError):
    """Exception raised when a parameter arity is neither a positive int nor unbounded."""


class BuilderConsumedError(ArgumentDefinitionError):
    """Exception raised when an argument builder is used after `add()`."""


class ResolutionError(ClipError):
    """Exception raised when input tokens cannot be resolved against a registry."""


class UnknownArgumentError(ResolutionError):
    """Exception raised when a token matches no argument, alias or open slot."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown argument '{token}'")


class ExpectedParameterError(ResolutionError):
    """Exception raised when the token stream ends before a parameter is filled."""

    def __init__(self, argument: str, parameter: str) -> None:
        self.argument = argument
        self.parameter = parameter
        super().__init__(
            f"Argument '{argument}' expected a value for parameter '{parameter}'"
        )


class MissingPositionalError(ResolutionError):
    """Exception raised when a declared positional argument receives no token."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Missing positional argument '{argument}'")


class ValueTypeError(ResolutionError):
    """Exception raised when a captured token does not satisfy its declared type."""

    def __init__(self, argument: str, token: str, value_type: ValueType) -> None:
        self.argument = argument
        self.token = token
        self.value_type = value_type
        super().__init__(
            f"Invalid value '{token}' for '{argument}': expected {value_type}"
        )
