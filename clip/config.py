# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads declarative argument definitions from YAML or TOML into a `Registry`.

Example `clip.yaml`:

    program: cc
    arguments:
      - name: --file
        aliases: [-f]
        help: input files
        params:
          - name: file
            nargs: "*"
            type: file
      - name: --level
        params:
          - name: level
            type: {range: [0, 3]}
      - name: mode
        mode: positional
        type: {set: [read, write, append]}

Definitions go through `ArgumentBuilder` and `Registry.add()`, so a file that
breaks a registration rule raises the same `ArgumentDefinitionError`.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from clip.argument import UNBOUNDED, ArgumentMode
from clip.builder import create_arg
from clip.exceptions import ArgumentDefinitionError
from clip.logger import logger
from clip.registry import Registry
from clip.value_type import ValueType


def _to_value_type(value: Any) -> ValueType:
    try:
        return ValueType.from_config(value)
    except ArgumentDefinitionError as error:
        raise ValueError(str(error)) from error


class ParameterConfig(BaseModel):
    """One parameter slot of a flag argument."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    nargs: int | str = 1
    type: ValueType = ValueType.STRING

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ValueType:
        return _to_value_type(value)

    @field_validator("nargs")
    @classmethod
    def validate_nargs(cls, value: int | str) -> int | str:
        if isinstance(value, int) and value > 0:
            return value
        if value == UNBOUNDED:
            return value
        raise ValueError(f"nargs must be a positive integer or '{UNBOUNDED}'")


class ArgumentConfig(BaseModel):
    """Raw argument definition for Clip configuration files."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    aliases: list[str] = Field(default_factory=list)
    params: list[ParameterConfig] = Field(default_factory=list)
    mode: ArgumentMode = ArgumentMode.FLAG
    type: ValueType = ValueType.ANY
    help: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ValueType:
        return _to_value_type(value)

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, value: Any) -> ArgumentMode:
        if isinstance(value, ArgumentMode):
            return value
        return ArgumentMode(value)

    def add_to(self, registry: Registry) -> None:
        builder = create_arg(self.name).help(self.help)
        for alias in self.aliases:
            builder.alias(alias)
        for param in self.params:
            builder.add_param(param.name, param.nargs, param.type)
        if self.mode == ArgumentMode.POSITIONAL:
            builder.positional(self.type)
        elif self.mode == ArgumentMode.VARIADIC:
            builder.variadic(self.type)
        builder.add(registry)


class RegistryConfig(BaseModel):
    """Clip configuration model."""

    program: str = "clip"
    validate_types: bool = True
    arguments: list[ArgumentConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> RegistryConfig:
        names = [argument.name for argument in self.arguments]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate argument names: {', '.join(duplicates)}")
        return self

    def to_registry(self) -> Registry:
        registry = Registry(self.program, validate_types=self.validate_types)
        for argument in self.arguments:
            argument.add_to(registry)
        return registry


def find_clip_config() -> Path | None:
    candidates = [
        Path.cwd() / "clip.yaml",
        Path.cwd() / "clip.toml",
        Path.cwd() / ".clip.yaml",
        Path.cwd() / ".clip.toml",
        Path(os.environ.get("CLIP_CONFIG", "clip.yaml")),
    ]
    return next((p for p in candidates if p.is_file()), None)


def loader(file_path: Path | str) -> Registry:
    """
    Load argument definitions from a YAML or TOML file.

    The file should contain a mapping with an `arguments` list. Each argument
    needs at least a `name`.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Registry: A registry holding every loaded argument.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is invalid.
        ArgumentDefinitionError: If a definition breaks a registration rule.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "program: 'cc'\n"
            "arguments:\n"
            "  - name: '--file'\n"
            "    aliases: ['-f']\n"
            "    params:\n"
            "      - name: 'file'\n"
            "        nargs: 1"
        )

    config = RegistryConfig.model_validate(raw_config)
    logger.debug("Loaded %d argument definitions from %s", len(config.arguments), path)
    return config.to_registry()
