# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `create_arg()` and the fluent `ArgumentBuilder`.

Every builder method returns the builder so definitions read as one chain:

    create_arg("--file")
        .alias("-f")
        .add_param("file", UNBOUNDED, ValueType.FILE)
        .help("input files")
        .add(registry)

`add()` hands the finished `Argument` to `Registry.add()`, which runs all
registration checks. A builder can be added only once; any use afterwards
raises `BuilderConsumedError`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from clip.argument import Argument, ArgumentMode, Parameter, validate_nargs
from clip.exceptions import BuilderConsumedError
from clip.value_type import ValueType

if TYPE_CHECKING:
    from clip.registry import Registry


class ArgumentBuilder:
    """Incrementally describes an `Argument` before it is registered."""

    def __init__(self, name: str) -> None:
        self._name: str = name
        self._aliases: list[str] = []
        self._parameters: list[Parameter] = []
        self._mode: ArgumentMode = ArgumentMode.FLAG
        self._value_type: ValueType = ValueType.ANY
        self._help: str = ""
        self._consumed: bool = False

    @property
    def name(self) -> str:
        return self._name

    def _check_consumed(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(
                f"Argument '{self._name}' has already been added to a registry"
            )

    def alias(self, token: str) -> ArgumentBuilder:
        """Add an alternate trigger token."""
        self._check_consumed()
        self._aliases.append(token)
        return self

    def add_param(
        self,
        name: str,
        nargs: int | str = 1,
        value_type: ValueType = ValueType.STRING,
    ) -> ArgumentBuilder:
        """
        Append a parameter slot.

        Args:
            name (str): Parameter name, used in error messages.
            nargs (int | str): Number of tokens to consume, or `UNBOUNDED`.
            value_type (ValueType): Constraint for captured tokens.
        """
        self._check_consumed()
        nargs = validate_nargs(nargs)
        self._parameters.append(
            Parameter(name=name, nargs=nargs, value_type=value_type)
        )
        return self

    def positional(self, value_type: ValueType = ValueType.ANY) -> ArgumentBuilder:
        """Match this argument by position, consuming one token."""
        self._check_consumed()
        self._mode = ArgumentMode.POSITIONAL
        self._value_type = value_type
        return self

    def variadic(self, value_type: ValueType = ValueType.ANY) -> ArgumentBuilder:
        """Match this argument by position, consuming runs of tokens."""
        self._check_consumed()
        self._mode = ArgumentMode.VARIADIC
        self._value_type = value_type
        return self

    def help(self, text: str) -> ArgumentBuilder:
        self._check_consumed()
        self._help = text
        return self

    def build(self) -> Argument:
        """Return the `Argument` described so far, without validating it."""
        self._check_consumed()
        return Argument(
            name=self._name,
            aliases=tuple(self._aliases),
            parameters=tuple(self._parameters),
            mode=self._mode,
            value_type=self._value_type,
            help=self._help,
        )

    def add(self, registry: Registry) -> Argument:
        """
        Validate and register the argument, consuming the builder.

        Returns:
            Argument: The registered argument.

        Raises:
            ArgumentDefinitionError: If the argument violates a registration rule.
        """
        argument = self.build()
        registry.add(argument)
        self._consumed = True
        return argument

    def __repr__(self) -> str:
        return f"ArgumentBuilder(name={self._name!r}, mode={self._mode})"


def create_arg(name: str) -> ArgumentBuilder:
    """Start describing a new flag argument called `name`."""
    return ArgumentBuilder(name)
