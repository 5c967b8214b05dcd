import pytest

from clip import UNBOUNDED, Input, Registry, ValueType, create_arg
from clip.exceptions import UnknownArgumentError


@pytest.fixture
def registry():
    registry = Registry("foo")
    create_arg("--file").alias("-f").add_param("file", UNBOUNDED).help(
        "input file"
    ).add(registry)
    create_arg("--output").alias("-o").alias("--out").add_param("output", 1).help(
        "output file"
    ).add(registry)
    return registry


def test_unbounded_then_flag(registry):
    assert registry.parse("--file a.rs b.rs -o out.o") == [
        Input(name="--file", values=["a.rs", "b.rs"]),
        Input(name="--output", values=["out.o"]),
    ]


def test_unbounded_at_end(registry):
    assert registry.parse("-o out.o --file a.rs b.rs") == [
        Input(name="--output", values=["out.o"]),
        Input(name="--file", values=["a.rs", "b.rs"]),
    ]


def test_unbounded_in_middle_and_end_match():
    registry = Registry("foo")
    create_arg("--file").alias("-f").add_param("file", UNBOUNDED).add(registry)
    create_arg("--output").alias("-o").alias("--out").add_param("output", 1).add(
        registry
    )
    first = registry.parse("--file foo.rs bar.rs baz.rs -o out.o")
    second = registry.parse("-o out.o --file foo.rs bar.rs baz.rs")
    assert first == list(reversed(second))
    assert first[0].values == ["foo.rs", "bar.rs", "baz.rs"]


@pytest.mark.parametrize("stop", ["-o", "--out", "--output"])
def test_unbounded_stops_before_any_trigger(registry, stop):
    inputs = registry.resolve(["-f", "a.rs", stop, "out.o"])
    assert inputs[0] == Input(name="--file", values=["a.rs"])
    assert inputs[1] == Input(name="--output", values=["out.o"])


def test_unbounded_stops_at_start(registry):
    assert registry.parse("-f -o out.o") == [
        Input(name="--file", values=[]),
        Input(name="--output", values=["out.o"]),
    ]


def test_unbounded_captures_unknown_dash_tokens(registry):
    assert registry.parse("-f a.rs --not-a-flag") == [
        Input(name="--file", values=["a.rs", "--not-a-flag"]),
    ]


def test_variadic_argument_runs():
    registry = Registry("clip")
    create_arg("input files").variadic(ValueType.FILE).help("input files").add(
        registry
    )
    create_arg("--output").alias("-o").add_param("output", 1, ValueType.FILE).add(
        registry
    )
    assert registry.parse("input1 input2 --output a.out input3") == [
        Input(name="input files", values=["input1", "input2"]),
        Input(name="--output", values=["a.out"]),
        Input(name="input files", values=["input3"]),
    ]


def test_variadic_after_positionals():
    registry = Registry("cp")
    create_arg("dest").positional(ValueType.FILE).add(registry)
    create_arg("sources").variadic(ValueType.FILE).add(registry)
    create_arg("-r").add(registry)
    assert registry.parse("backup/ a.txt b.txt -r") == [
        Input(name="dest", values=["backup/"]),
        Input(name="sources", values=["a.txt", "b.txt"]),
        Input(name="-r", values=[]),
    ]


def test_variadic_name_is_not_a_trigger():
    registry = Registry("clip")
    create_arg("inputs").variadic().add(registry)
    assert registry.parse("inputs more") == [
        Input(name="inputs", values=["inputs", "more"]),
    ]


def test_variadic_does_not_start_on_unknown_flag():
    registry = Registry("clip")
    create_arg("inputs").variadic().add(registry)
    with pytest.raises(UnknownArgumentError):
        registry.parse("--bogus a b")


@pytest.mark.parametrize("line", ["a --bogus", "a b --bogus c"])
def test_variadic_run_stops_at_unknown_flag(line):
    registry = Registry("clip")
    create_arg("inputs").variadic().add(registry)
    with pytest.raises(UnknownArgumentError) as exc_info:
        registry.parse(line)
    assert exc_info.value.token == "--bogus"


def test_variadic_run_keeps_negative_numbers():
    registry = Registry("clip")
    create_arg("inputs").variadic().add(registry)
    assert registry.parse("a -1 -2.5") == [
        Input(name="inputs", values=["a", "-1", "-2.5"]),
    ]
