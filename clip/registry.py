# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Registry`, the owner of every argument definition a
host program declares.

The registry indexes arguments by canonical name, maps every alias to its
canonical name, and records positional arguments in declaration order. It is
built once at startup through `Registry.add()` (usually via
`ArgumentBuilder.add()`) and is read-only afterwards, so any number of
`resolve()` calls may share it.

Registration checks run in a fixed order and raise immediately:

1. `InvalidModeError`: positional or variadic argument with aliases or parameters.
2. `DuplicateArgumentError`: name already used by an argument or alias.
3. `DuplicateAliasError`: alias already used by an argument or alias.
4. `MultipleVariadicError`: a second variadic argument.
5. `InvalidArityError`: a parameter arity that is not positive or `UNBOUNDED`,
   then `ParameterOrderError`: an unbounded parameter that is not last.
6. `ArgumentDefinitionError`: a value type that is not a `ValueType`.

Public Interface:
- `add(argument)`: Validate and register an `Argument` or `ArgumentBuilder`.
- `resolve(tokens)`: Resolve pre-split tokens into `Input` records.
- `parse(line)`: Split a string on spaces, then resolve.
- `parse_env(argv=None)`: Resolve the process invocation tokens.

Example Usage:
    registry = Registry("cc")
    create_arg("--file").alias("-f").add_param("file", 1).add(registry)
    registry.parse("-f foo.rs")
    # [Input(name='--file', values=['foo.rs'])]
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from clip.argument import Argument, validate_nargs
from clip.builder import ArgumentBuilder
from clip.exceptions import (
    ArgumentDefinitionError,
    DuplicateAliasError,
    DuplicateArgumentError,
    InvalidModeError,
    MultipleVariadicError,
    ParameterOrderError,
)
from clip.logger import logger
from clip.parser_types import Input
from clip.resolver import Resolver
from clip.utils import get_env_tokens, get_program_invocation, split_tokens
from clip.value_type import ValueType


class Registry:
    """
    Registry of argument definitions and entry point for resolution.

    Attributes:
        program_name (str): Name of the program, used in diagnostics only.
        validate_types (bool): Check captured tokens against their `ValueType`.
    """

    def __init__(
        self,
        program_name: str | None = None,
        validate_types: bool = True,
    ) -> None:
        self.program_name: str = program_name or get_program_invocation()
        self.validate_types: bool = validate_types
        self._arguments: dict[str, Argument] = {}
        self._aliases: dict[str, str] = {}
        self._positional: list[str] = []
        self._variadic: str | None = None

    @property
    def arguments(self) -> Mapping[str, Argument]:
        return MappingProxyType(self._arguments)

    @property
    def aliases(self) -> Mapping[str, str]:
        return MappingProxyType(self._aliases)

    @property
    def positional(self) -> tuple[str, ...]:
        """Positional argument names in declaration order."""
        return tuple(self._positional)

    @property
    def variadic(self) -> str | None:
        """Name of the variadic argument, if one is registered."""
        return self._variadic

    def _validate_mode(self, argument: Argument) -> None:
        if argument.is_flag:
            return
        if argument.aliases:
            raise InvalidModeError(
                f"{argument.mode.value.capitalize()} argument '{argument.name}' "
                "cannot have aliases"
            )
        if argument.parameters:
            raise InvalidModeError(
                f"{argument.mode.value.capitalize()} argument '{argument.name}' "
                "cannot have parameters"
            )

    def _validate_name(self, argument: Argument) -> None:
        if not isinstance(argument.name, str) or not argument.name:
            raise ArgumentDefinitionError("Argument name must be a non-empty string")
        if argument.name in self._arguments:
            raise DuplicateArgumentError(
                f"Argument '{argument.name}' is already registered"
            )
        if argument.name in self._aliases:
            raise DuplicateArgumentError(
                f"Argument name '{argument.name}' is already an alias of "
                f"'{self._aliases[argument.name]}'"
            )

    def _validate_aliases(self, argument: Argument) -> None:
        seen: set[str] = {argument.name}
        for alias in argument.aliases:
            if not isinstance(alias, str) or not alias:
                raise ArgumentDefinitionError(
                    f"Aliases of '{argument.name}' must be non-empty strings"
                )
            if alias in self._arguments:
                raise DuplicateAliasError(
                    f"Alias '{alias}' of '{argument.name}' shadows an argument name"
                )
            if alias in self._aliases:
                raise DuplicateAliasError(
                    f"Alias '{alias}' is already used by '{self._aliases[alias]}'"
                )
            if alias in seen:
                raise DuplicateAliasError(
                    f"Alias '{alias}' is declared twice for '{argument.name}'"
                )
            seen.add(alias)

    def _validate_variadic(self, argument: Argument) -> None:
        if argument.is_variadic and self._variadic is not None:
            raise MultipleVariadicError(
                f"Cannot register variadic argument '{argument.name}': "
                f"'{self._variadic}' is already variadic"
            )

    def _validate_value_types(self, argument: Argument) -> None:
        if not isinstance(argument.value_type, ValueType):
            raise ArgumentDefinitionError(
                f"Value type of '{argument.name}' must be a ValueType, "
                f"got {type(argument.value_type).__name__}"
            )
        for parameter in argument.parameters:
            if not isinstance(parameter.value_type, ValueType):
                raise ArgumentDefinitionError(
                    f"Value type of parameter '{parameter.name}' of "
                    f"'{argument.name}' must be a ValueType, "
                    f"got {type(parameter.value_type).__name__}"
                )

    def _validate_parameters(self, argument: Argument) -> None:
        for index, parameter in enumerate(argument.parameters):
            validate_nargs(parameter.nargs)
            if parameter.is_unbounded and index != len(argument.parameters) - 1:
                raise ParameterOrderError(
                    f"Unbounded parameter '{parameter.name}' of '{argument.name}' "
                    "must be the last parameter"
                )

    def add(self, argument: Argument | ArgumentBuilder) -> Argument:
        """
        Validate and register an argument.

        Args:
            argument (Argument | ArgumentBuilder): The definition to register.
                A builder is consumed.

        Returns:
            Argument: The registered argument.

        Raises:
            ArgumentDefinitionError: If any registration check fails. The
                registry is left unchanged.
        """
        if isinstance(argument, ArgumentBuilder):
            return argument.add(self)
        if not isinstance(argument, Argument):
            raise ArgumentDefinitionError(
                f"Expected an Argument or ArgumentBuilder, got {type(argument).__name__}"
            )

        self._validate_mode(argument)
        self._validate_name(argument)
        self._validate_aliases(argument)
        self._validate_variadic(argument)
        self._validate_parameters(argument)
        self._validate_value_types(argument)

        self._arguments[argument.name] = argument
        for alias in argument.aliases:
            self._aliases[alias] = argument.name
        if argument.is_positional:
            self._positional.append(argument.name)
        elif argument.is_variadic:
            self._variadic = argument.name

        logger.debug(
            "Registered %s argument '%s' with %d alias(es) and %d parameter(s)",
            argument.mode,
            argument.name,
            len(argument.aliases),
            len(argument.parameters),
        )
        return argument

    def add_all(self, arguments: Iterable[Argument | ArgumentBuilder]) -> None:
        for argument in arguments:
            self.add(argument)

    def get_argument(self, name: str) -> Argument | None:
        """Return the argument registered under a canonical name."""
        return self._arguments.get(name)

    def canonical_name(self, token: str) -> str:
        """Rewrite an alias to its canonical name. Other tokens are returned as-is."""
        return self._aliases.get(token, token)

    def is_trigger(self, token: str) -> bool:
        """True if `token` is the name or alias of a flag argument."""
        argument = self._arguments.get(self.canonical_name(token))
        return argument is not None and argument.is_flag

    def resolve(self, tokens: Iterable[str]) -> list[Input]:
        """Resolve already split tokens. See `Resolver.resolve`."""
        return Resolver(self).resolve(tokens)

    def parse(self, line: str) -> list[Input]:
        """Split `line` on single spaces and resolve the tokens."""
        return self.resolve(split_tokens(line))

    def parse_env(self, argv: Sequence[str] | None = None) -> list[Input]:
        """Resolve the process invocation tokens, without the program path."""
        return self.resolve(get_env_tokens(argv))

    def __contains__(self, name: object) -> bool:
        return name in self._arguments

    def __len__(self) -> int:
        return len(self._arguments)

    def __repr__(self) -> str:
        return (
            f"Registry(program_name={self.program_name!r}, "
            f"arguments={list(self._arguments)!r})"
        )
