# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Resolver`, the single-pass engine that turns a flat
token sequence into an ordered list of `Input` records using a built
`Registry`.

Resolution walks the tokens left to right with one token of lookahead:

- A trigger token (a flag name or alias) selects a flag argument. Its
  parameters are filled in declaration order. A fixed-arity parameter takes
  the next `n` tokens verbatim. An unbounded parameter takes tokens until the
  stream ends or the next token is itself a trigger.
- A dash-prefixed token that is neither a trigger nor a number is unknown.
- Any other token fills the next unfilled positional argument, in
  declaration order. Once every positional is filled, leftover tokens are
  captured in runs by the variadic argument, if one is registered. A run ends
  at the next trigger or unknown dash-prefixed token.

Because unbounded capture stops at the next trigger, a captured value can
never be a registered flag name or alias. Positional and variadic names are
not triggers, so they never end an unbounded capture.

The resolver keeps its cursor in local state, so one registry can serve
concurrent `resolve()` calls. Any error aborts the call with no partial
result.

Example Usage:
    resolver = Resolver(registry)
    inputs = resolver.resolve(["-f", "a.rs", "b.rs", "-o", "out.o"])
    # [Input("--file", ["a.rs", "b.rs"]), Input("--output", ["out.o"])]
"""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterable

from clip.argument import Argument
from clip.exceptions import (
    ExpectedParameterError,
    MissingPositionalError,
    ResolutionError,
    UnknownArgumentError,
    ValueTypeError,
)
from clip.logger import logger
from clip.parser_types import Input
from clip.utils import is_number
from clip.value_type import ValueType

if TYPE_CHECKING:
    from clip.registry import Registry


class Resolver:
    """Resolves token sequences against a read-only `Registry`."""

    def __init__(self, registry: Registry) -> None:
        self.registry: Registry = registry

    def _looks_like_flag(self, token: str) -> bool:
        return token.startswith("-") and len(token) > 1 and not is_number(token)

    def _check_type(
        self, argument: Argument, token: str, value_type: ValueType
    ) -> None:
        if not self.registry.validate_types:
            return
        try:
            value_type.validate(token)
        except ValueError as error:
            logger.debug("Type check failed for '%s': %s", argument.name, error)
            raise ValueTypeError(argument.name, token, value_type) from error

    def _consume_run(
        self, tokens: list[str], start: int, stop_at_unknown: bool = False
    ) -> int:
        """
        Return the index of the first trigger token at or after `start`.

        With `stop_at_unknown`, unknown dash-prefixed tokens also end the run.
        """
        i = start
        while i < len(tokens) and not self.registry.is_trigger(tokens[i]):
            if stop_at_unknown and self._looks_like_flag(tokens[i]):
                break
            i += 1
        return i

    def _consume_parameters(
        self, tokens: list[str], start: int, argument: Argument
    ) -> tuple[list[str], int]:
        values: list[str] = []
        i = start
        for parameter in argument.parameters:
            if parameter.is_unbounded:
                end = self._consume_run(tokens, i)
            else:
                assert isinstance(parameter.nargs, int)
                end = i + parameter.nargs
                if end > len(tokens):
                    raise ExpectedParameterError(argument.name, parameter.name)
            for token in tokens[i:end]:
                self._check_type(argument, token, parameter.value_type)
            values.extend(tokens[i:end])
            i = end
        return values, i

    def resolve(self, tokens: Iterable[str]) -> list[Input]:
        """
        Resolve tokens into matched argument records.

        Args:
            tokens (Iterable[str]): Already split input tokens.

        Returns:
            list[Input]: One record per matched argument occurrence, in input order.

        Raises:
            ResolutionError: On the first token that cannot be resolved.
        """
        tokens = list(tokens)
        registry = self.registry
        logger.debug("Resolving %d tokens for '%s'", len(tokens), registry.program_name)

        inputs: list[Input] = []
        pending_positional = deque(registry.positional)
        i = 0
        try:
            while i < len(tokens):
                token = tokens[i]
                if registry.is_trigger(token):
                    argument = registry.get_argument(registry.canonical_name(token))
                    assert argument is not None, "trigger without argument"
                    values, i = self._consume_parameters(tokens, i + 1, argument)
                    inputs.append(Input(name=argument.name, values=values))
                elif self._looks_like_flag(token):
                    raise UnknownArgumentError(token)
                elif pending_positional:
                    argument = registry.get_argument(pending_positional.popleft())
                    assert argument is not None, "positional without argument"
                    self._check_type(argument, token, argument.value_type)
                    inputs.append(Input(name=argument.name, values=[token]))
                    i += 1
                elif registry.variadic is not None:
                    argument = registry.get_argument(registry.variadic)
                    assert argument is not None, "variadic without argument"
                    end = self._consume_run(tokens, i, stop_at_unknown=True)
                    for value in tokens[i:end]:
                        self._check_type(argument, value, argument.value_type)
                    inputs.append(Input(name=argument.name, values=tokens[i:end]))
                    i = end
                else:
                    raise UnknownArgumentError(token)

            if pending_positional:
                raise MissingPositionalError(pending_positional[0])
        except ResolutionError as error:
            logger.debug("Resolution failed at token %d: %s", i, error)
            raise

        logger.debug("Resolved %d inputs", len(inputs))
        return inputs
