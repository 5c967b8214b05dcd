import pytest

from clip import UNBOUNDED, Input, Registry, ValueType, create_arg
from clip.exceptions import ValueTypeError


def build_registry(validate_types=True):
    registry = Registry("server", validate_types=validate_types)
    port_range = ValueType.range(1, 65535)
    create_arg("--port").alias("-p").add_param("port", 1, port_range).add(registry)
    create_arg("--ratio").add_param("ratio", 1, ValueType.NUMBER).add(registry)
    create_arg("--ids").add_param("ids", UNBOUNDED, ValueType.INTEGER).add(registry)
    create_arg("mode").positional(ValueType.set("dev", "prod")).add(registry)
    return registry


def test_valid_values_keep_raw_tokens():
    registry = build_registry()
    assert registry.parse("prod -p 8080 --ratio 0.5 --ids 1 2 3") == [
        Input(name="mode", values=["prod"]),
        Input(name="--port", values=["8080"]),
        Input(name="--ratio", values=["0.5"]),
        Input(name="--ids", values=["1", "2", "3"]),
    ]


def test_parameter_type_mismatch():
    registry = build_registry()
    with pytest.raises(ValueTypeError) as exc_info:
        registry.parse("prod --port 70000")
    error = exc_info.value
    assert error.argument == "--port"
    assert error.token == "70000"
    assert error.value_type == ValueType.range(1, 65535)
    assert "[1-65535]" in str(error)
    assert "70000" in str(error)


def test_unbounded_type_mismatch():
    registry = build_registry()
    with pytest.raises(ValueTypeError) as exc_info:
        registry.parse("dev --ids 1 two 3")
    assert exc_info.value.token == "two"
    assert exc_info.value.value_type == ValueType.INTEGER


def test_positional_type_mismatch():
    registry = build_registry()
    with pytest.raises(ValueTypeError) as exc_info:
        registry.parse("staging")
    assert exc_info.value.argument == "mode"
    assert "[dev, prod]" in str(exc_info.value)


def test_variadic_type_mismatch():
    registry = Registry("sum")
    create_arg("numbers").variadic(ValueType.NUMBER).add(registry)
    assert registry.parse("1 2.5 -3") == [
        Input(name="numbers", values=["1", "2.5", "-3"])
    ]
    with pytest.raises(ValueTypeError):
        registry.parse("1 x 3")


def test_validation_can_be_disabled():
    registry = build_registry(validate_types=False)
    assert registry.parse("staging --port http") == [
        Input(name="mode", values=["staging"]),
        Input(name="--port", values=["http"]),
    ]
