# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TypeKind` and `ValueType`, the closed set of constraints a captured
token must satisfy.

A `ValueType` is immutable and compared by structure, so two independently
built `ValueType.set("a", "b")` descriptors are equal. Its string form is used
in error messages:

    str(ValueType.INTEGER)          → "Integer"
    str(ValueType.set("a", "b"))    → "[a, b]"
    str(ValueType.range(1, 10))     → "[1-10]"

`ValueType.validate()` checks a raw token and returns the coerced value. The
resolver calls it right after a token is captured when type validation is
enabled on the registry.

Example:
    TypeKind("int")   → TypeKind.INTEGER (via alias)
    TypeKind("Path")  → TypeKind.FILE
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from clip.exceptions import ArgumentDefinitionError


class TypeKind(Enum):
    """
    Tag of a `ValueType`.

    Members:
        ANY: Any token.
        INTEGER: A base-10 integer.
        NUMBER: Any number parsable as a float.
        STRING: Any token.
        FILE: A non-empty path. Existence is not checked.
        SET: One of a fixed list of literal strings.
        RANGE: An integer between inclusive bounds.

    Aliases:
        - "int" → "integer"
        - "float" → "number"
        - "str" → "string"
        - "path" → "file"
        - "choice", "choices" → "set"
    """

    ANY = "any"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    FILE = "file"
    SET = "set"
    RANGE = "range"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "int": "integer",
            "float": "number",
            "str": "string",
            "path": "file",
            "choice": "set",
            "choices": "set",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> TypeKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValueType:
    """
    Describes the constraint a captured token must satisfy.

    Attributes:
        kind (TypeKind): The type tag.
        choices (tuple[str, ...]): Allowed literals, only for `TypeKind.SET`.
        lower (int | None): Inclusive lower bound, only for `TypeKind.RANGE`.
        upper (int | None): Inclusive upper bound, only for `TypeKind.RANGE`.
    """

    kind: TypeKind
    choices: tuple[str, ...] = ()
    lower: int | None = None
    upper: int | None = None

    ANY: ClassVar[ValueType]
    INTEGER: ClassVar[ValueType]
    NUMBER: ClassVar[ValueType]
    STRING: ClassVar[ValueType]
    FILE: ClassVar[ValueType]

    @classmethod
    def set(cls, *choices: str) -> ValueType:
        """Return a descriptor accepting only the given literals."""
        if not choices:
            raise ArgumentDefinitionError("A Set type needs at least one choice")
        for choice in choices:
            if not isinstance(choice, str):
                raise ArgumentDefinitionError(
                    f"Set choices must be strings, got {choice!r}"
                )
        return cls(TypeKind.SET, choices=tuple(choices))

    @classmethod
    def range(cls, lower: int, upper: int) -> ValueType:
        """Return a descriptor accepting integers in `lower..=upper`."""
        if not isinstance(lower, int) or not isinstance(upper, int):
            raise ArgumentDefinitionError("Range bounds must be integers")
        if lower > upper:
            raise ArgumentDefinitionError(
                f"Range lower bound {lower} is greater than upper bound {upper}"
            )
        return cls(TypeKind.RANGE, lower=lower, upper=upper)

    @classmethod
    def from_config(cls, value: Any) -> ValueType:
        """
        Build a descriptor from a configuration value.

        Accepts a kind name (`"integer"`), a mapping with a single `set` or
        `range` key, or an existing `ValueType`.

        Examples:
            "int"                              → ValueType.INTEGER
            {"set": ["read", "write"]}         → ValueType.set("read", "write")
            {"range": [1, 10]}                 → ValueType.range(1, 10)
            {"range": {"lower": 1, "upper": 10}}
        """
        if isinstance(value, ValueType):
            return value
        if isinstance(value, str):
            try:
                kind = TypeKind(value)
            except ValueError as error:
                raise ArgumentDefinitionError(str(error)) from error
            if kind in (TypeKind.SET, TypeKind.RANGE):
                raise ArgumentDefinitionError(
                    f"Type '{kind}' needs a payload, use a mapping like {{'{kind}': ...}}"
                )
            return cls(kind)
        if isinstance(value, dict) and len(value) == 1:
            key, payload = next(iter(value.items()))
            try:
                kind = TypeKind(key)
            except ValueError as error:
                raise ArgumentDefinitionError(str(error)) from error
            if kind == TypeKind.SET and isinstance(payload, (list, tuple)):
                return cls.set(*payload)
            if kind == TypeKind.RANGE:
                if isinstance(payload, (list, tuple)) and len(payload) == 2:
                    return cls.range(payload[0], payload[1])
                if isinstance(payload, dict):
                    return cls.range(payload.get("lower"), payload.get("upper"))
        raise ArgumentDefinitionError(f"Invalid value type definition: {value!r}")

    def validate(self, token: str) -> Any:
        """
        Check a raw token against this descriptor.

        Args:
            token (str): The captured token.

        Returns:
            Any: The token coerced to the described type.

        Raises:
            ValueError: If the token does not satisfy the descriptor.
        """
        if self.kind in (TypeKind.ANY, TypeKind.STRING):
            return token
        if self.kind == TypeKind.INTEGER:
            try:
                return int(token)
            except ValueError:
                raise ValueError(f"'{token}' is not an integer") from None
        if self.kind == TypeKind.NUMBER:
            try:
                return float(token)
            except ValueError:
                raise ValueError(f"'{token}' is not a number") from None
        if self.kind == TypeKind.FILE:
            if not token:
                raise ValueError("File path must not be empty")
            return Path(token)
        if self.kind == TypeKind.SET:
            if token not in self.choices:
                raise ValueError(f"'{token}' should be one of {self}")
            return token
        if self.kind == TypeKind.RANGE:
            assert self.lower is not None and self.upper is not None
            try:
                number = int(token)
            except ValueError:
                raise ValueError(f"'{token}' is not an integer") from None
            if not self.lower <= number <= self.upper:
                raise ValueError(f"{number} is outside of {self}")
            return number
        assert False, f"Unhandled type kind: {self.kind}"

    def __str__(self) -> str:
        if self.kind == TypeKind.SET:
            return f"[{', '.join(self.choices)}]"
        if self.kind == TypeKind.RANGE:
            return f"[{self.lower}-{self.upper}]"
        return self.kind.name.capitalize()


ValueType.ANY = ValueType(TypeKind.ANY)
ValueType.INTEGER = ValueType(TypeKind.INTEGER)
ValueType.NUMBER = ValueType(TypeKind.NUMBER)
ValueType.STRING = ValueType(TypeKind.STRING)
ValueType.FILE = ValueType(TypeKind.FILE)
