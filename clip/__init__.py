"""
Clip Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import UNBOUNDED, Argument, ArgumentMode, Parameter
from .builder import ArgumentBuilder, create_arg
from .exceptions import (
    ArgumentDefinitionError,
    ClipError,
    ExpectedParameterError,
    MissingPositionalError,
    ResolutionError,
    UnknownArgumentError,
    ValueTypeError,
)
from .parser_types import Input
from .registry import Registry
from .resolver import Resolver
from .value_type import TypeKind, ValueType

__all__ = [
    "Argument",
    "ArgumentBuilder",
    "ArgumentDefinitionError",
    "ArgumentMode",
    "ClipError",
    "ExpectedParameterError",
    "Input",
    "MissingPositionalError",
    "Parameter",
    "Registry",
    "ResolutionError",
    "Resolver",
    "TypeKind",
    "UNBOUNDED",
    "UnknownArgumentError",
    "ValueType",
    "ValueTypeError",
    "create_arg",
]
