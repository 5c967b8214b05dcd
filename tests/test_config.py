from pathlib import Path

import pytest
from pydantic import ValidationError

from clip import ArgumentMode, Input, ValueType
from clip.config import ArgumentConfig, RegistryConfig, find_clip_config, loader
from clip.exceptions import DuplicateAliasError, MultipleVariadicError

YAML_CONFIG = """\
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
"""

TOML_CONFIG = """\
program = "cc"
validate_types = false

[[arguments]]
name = "--output"
aliases = ["-o"]
help = "output file"

[[arguments.params]]
name = "output"
nargs = 1
type = "file"

[[arguments]]
name = "inputs"
mode = "variadic"
type = "file"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml(tmp_path):
    registry = loader(write(tmp_path, "clip.yaml", YAML_CONFIG))
    assert registry.program_name == "cc"
    assert registry.validate_types
    assert registry.positional == ("mode",)

    file_arg = registry.get_argument("--file")
    assert file_arg.aliases == ("-f",)
    assert file_arg.parameters[0].is_unbounded
    assert file_arg.parameters[0].value_type == ValueType.FILE

    level = registry.get_argument("--level")
    assert level.parameters[0].value_type == ValueType.range(0, 3)

    assert registry.parse("read -f a.rs b.rs --level 2") == [
        Input(name="mode", values=["read"]),
        Input(name="--file", values=["a.rs", "b.rs"]),
        Input(name="--level", values=["2"]),
    ]


def test_load_toml(tmp_path):
    registry = loader(write(tmp_path, "clip.toml", TOML_CONFIG))
    assert not registry.validate_types
    assert registry.variadic == "inputs"
    assert registry.get_argument("inputs").mode == ArgumentMode.VARIADIC
    assert registry.parse("a.c b.c -o a.out") == [
        Input(name="inputs", values=["a.c", "b.c"]),
        Input(name="--output", values=["a.out"]),
    ]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(write(tmp_path, "clip.json", "{}"))


def test_non_mapping_document(tmp_path):
    with pytest.raises(ValueError, match="must contain a dictionary"):
        loader(write(tmp_path, "clip.yaml", "- just\n- a list\n"))


def test_invalid_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_registration_errors_propagate(tmp_path):
    content = """\
arguments:
  - name: --force
    aliases: [-f]
  - name: --file
    aliases: [-f]
"""
    with pytest.raises(DuplicateAliasError):
        loader(write(tmp_path, "clip.yaml", content))

    content = """\
arguments:
  - name: a
    mode: variadic
  - name: b
    mode: variadic
"""
    with pytest.raises(MultipleVariadicError):
        loader(write(tmp_path, "clip.yaml", content))


def test_duplicate_names_rejected_by_model():
    with pytest.raises(ValidationError):
        RegistryConfig.model_validate(
            {"arguments": [{"name": "--file"}, {"name": "--file"}]}
        )


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "--file", "params": [{"name": "file", "nargs": 0}]},
        {"name": "--file", "params": [{"name": "file", "nargs": "+"}]},
        {"name": "--file", "params": [{"name": "file", "type": "decimal"}]},
        {"name": "--file", "mode": "optional"},
    ],
)
def test_invalid_argument_config(raw):
    with pytest.raises(ValidationError):
        ArgumentConfig.model_validate(raw)


def test_find_clip_config(tmp_path, monkeypatch):
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.delenv("CLIP_CONFIG", raising=False)
    assert find_clip_config() is None

    config_file = write(project, "clip.toml", TOML_CONFIG)
    assert find_clip_config().resolve() == config_file.resolve()

    env_file = write(tmp_path, "custom-definitions.yaml", YAML_CONFIG)
    config_file.unlink()
    monkeypatch.setenv("CLIP_CONFIG", str(env_file))
    assert find_clip_config().resolve() == env_file.resolve()
