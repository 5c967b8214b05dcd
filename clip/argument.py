# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` and `Parameter` dataclasses used by `Registry` to
describe the shape of every registered command-line argument.

An `Argument` is in exactly one `ArgumentMode`:

- `FLAG`: triggered by its name or one of its aliases; consumes the tokens
  described by its ordered `parameters`.
- `POSITIONAL`: matched by position; consumes exactly one token checked
  against its own `value_type`.
- `VARIADIC`: matched by position once every positional is filled; consumes
  a run of tokens up to the next flag.

Key Attributes:
- `name`: Canonical name, used as the key in resolved `Input` records
- `aliases`: Alternate trigger tokens (flags only)
- `parameters`: Ordered `Parameter` slots (flags only)
- `mode`: `ArgumentMode` enum value
- `value_type`: `ValueType` for positional and variadic arguments
- `help`: Help text

Arguments are normally created through `create_arg()` and the fluent
`ArgumentBuilder`, then registered with `Registry.add()`, which validates
the mode-dependent rules.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from clip.exceptions import InvalidArityError
from clip.value_type import ValueType

UNBOUNDED = "*"


def validate_nargs(nargs: int | str) -> int | str:
    """Return `nargs` if it is a positive integer or `UNBOUNDED`."""
    if isinstance(nargs, bool):
        raise InvalidArityError(f"nargs must be a positive integer or '{UNBOUNDED}'")
    if isinstance(nargs, int):
        if nargs <= 0:
            raise InvalidArityError("nargs must be a positive integer")
        return nargs
    if nargs == UNBOUNDED:
        return nargs
    raise InvalidArityError(f"nargs must be a positive integer or '{UNBOUNDED}'")


class ArgumentMode(Enum):
    """
    Defines how an argument consumes tokens.

    Members:
        FLAG: Triggered by name or alias, consumes its parameter list.
        POSITIONAL: Consumes exactly one leftover token, in declaration order.
        VARIADIC: Consumes runs of leftover tokens. At most one per registry.
    """

    FLAG = "flag"
    POSITIONAL = "positional"
    VARIADIC = "variadic"

    @classmethod
    def _missing_(cls, value: object) -> ArgumentMode:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Parameter:
    """
    One named, typed slot in a flag's parameter list.

    Attributes:
        name (str): Parameter name, reported when the slot cannot be filled.
        nargs (int | str): A positive count, or `UNBOUNDED`.
        value_type (ValueType): Constraint for every captured token.
    """

    name: str
    nargs: int | str = 1
    value_type: ValueType = ValueType.STRING

    @property
    def is_unbounded(self) -> bool:
        return self.nargs == UNBOUNDED


@dataclass(frozen=True)
class Argument:
    """
    Represents a registered command-line argument.

    Attributes:
        name (str): The canonical name of the argument.
        aliases (tuple[str, ...]): Alternate trigger tokens.
        parameters (tuple[Parameter, ...]): Ordered parameter slots.
        mode (ArgumentMode): How the argument consumes tokens.
        value_type (ValueType): Token constraint for positional and variadic arguments.
        help (str): Help text for the argument.
    """

    name: str
    aliases: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    mode: ArgumentMode = ArgumentMode.FLAG
    value_type: ValueType = ValueType.ANY
    help: str = ""

    @property
    def is_flag(self) -> bool:
        return self.mode == ArgumentMode.FLAG

    @property
    def is_positional(self) -> bool:
        return self.mode == ArgumentMode.POSITIONAL

    @property
    def is_variadic(self) -> bool:
        return self.mode == ArgumentMode.VARIADIC

    @property
    def triggers(self) -> tuple[str, ...]:
        """Tokens that select this argument in a token stream."""
        if not self.is_flag:
            return ()
        return (self.name, *self.aliases)
