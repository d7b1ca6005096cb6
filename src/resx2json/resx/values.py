"""Resource value types and their resolution from ResX type names.

Defines the closed set of values a ResX entry may resolve to and the
rules for turning each of them into JSON:

    ResourceValue - Union of all resolvable value types
    JsonValue     - Union of values the JSON encoder receives
    classify_value - Map a ResourceValue to its ValueKind
    convert_primitive - Build a primitive from its invariant text form
    to_json_value - Apply the per-kind serialization rule

Serialization rules:
    STRING   -> JSON string
    BOOLEAN  -> true / false
    NUMBER   -> integer or number; Decimal goes through int or float,
                non-finite floats become the strings "NaN", "Infinity",
                "-Infinity"
    BINARY   -> array of byte values (0..255)
    NULL     -> null

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

from resx2json.enums import ValueKind

__all__ = [
    "PRIMITIVE_CONVERTERS",
    "JsonValue",
    "ResourceValue",
    "base_type_name",
    "classify_value",
    "convert_primitive",
    "to_json_value",
]

type ResourceValue = str | int | float | Decimal | bool | bytes | None
"""Value of a resolved ResX entry."""

type JsonValue = str | int | float | bool | list[int] | None
"""Value handed to the JSON encoder."""


def base_type_name(type_name: str) -> str:
    """Strip the assembly part from an assembly-qualified .NET type name.

    Example:
        >>> base_type_name("System.Int32, mscorlib, Version=4.0.0.0")
        'System.Int32'
        >>> base_type_name("System.String")
        'System.String'
    """
    return type_name.split(",", 1)[0].strip()


def _to_bool(text: str) -> bool:
    normalized = text.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    msg = f"'{text}' is not a valid Boolean"
    raise ValueError(msg)


def _to_char(text: str) -> str:
    if len(text) != 1:
        msg = f"'{text}' is not a single character"
        raise ValueError(msg)
    return text


def _int_in_range(low: int, high: int) -> Callable[[str], int]:
    def convert(text: str) -> int:
        value = int(text.strip())
        if not low <= value <= high:
            msg = f"{value} is outside [{low}, {high}]"
            raise ValueError(msg)
        return value

    return convert


def _to_float(text: str) -> float:
    return float(text.strip())


def _to_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        msg = f"'{text}' is not a valid Decimal"
        raise ValueError(msg) from e
    if not value.is_finite():
        msg = f"'{text}' is not a finite Decimal"
        raise ValueError(msg)
    return value


# Converters for the .NET primitives that resolve without custom types.
# Input is the invariant-culture text stored in <value>.
PRIMITIVE_CONVERTERS: MappingProxyType[str, Callable[[str], ResourceValue]] = (
    MappingProxyType({
        "System.Boolean": _to_bool,
        "System.Char": _to_char,
        "System.Byte": _int_in_range(0, 2**8 - 1),
        "System.SByte": _int_in_range(-(2**7), 2**7 - 1),
        "System.Int16": _int_in_range(-(2**15), 2**15 - 1),
        "System.UInt16": _int_in_range(0, 2**16 - 1),
        "System.Int32": _int_in_range(-(2**31), 2**31 - 1),
        "System.UInt32": _int_in_range(0, 2**32 - 1),
        "System.Int64": _int_in_range(-(2**63), 2**63 - 1),
        "System.UInt64": _int_in_range(0, 2**64 - 1),
        "System.Single": _to_float,
        "System.Double": _to_float,
        "System.Decimal": _to_decimal,
    })
)


def convert_primitive(type_name: str, text: str) -> ResourceValue:
    """Convert the text of a primitive-typed entry.

    Args:
        type_name: .NET type name, assembly-qualified or not
        text: Text content of the <value> element

    Returns:
        The converted value

    Raises:
        KeyError: If type_name is not a supported primitive
        ValueError: If text does not convert to the primitive
    """
    return PRIMITIVE_CONVERTERS[base_type_name(type_name)](text)


def classify_value(value: ResourceValue) -> ValueKind:
    """Return the ValueKind of a resolved value.

    bool is checked before int because bool is an int subclass.
    """
    match value:
        case None:
            return ValueKind.NULL
        case bool():
            return ValueKind.BOOLEAN
        case str():
            return ValueKind.STRING
        case int() | float() | Decimal():
            return ValueKind.NUMBER
        case bytes():
            return ValueKind.BINARY
    msg = f"Unsupported resource value type: {type(value).__name__}"
    raise TypeError(msg)


def _number_to_json(value: int | float | Decimal) -> int | float | str:
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


def to_json_value(value: ResourceValue) -> JsonValue:
    """Apply the serialization rule for the value's kind.

    Example:
        >>> to_json_value(b"\\x01\\xff")
        [1, 255]
        >>> to_json_value(Decimal("2.50"))
        2.5
        >>> to_json_value(float("inf"))
        'Infinity'
    """
    kind = classify_value(value)
    match kind:
        case ValueKind.NUMBER:
            return _number_to_json(value)  # type: ignore[arg-type]
        case ValueKind.BINARY:
            return list(value)  # type: ignore[arg-type]
        case _:
            return value  # type: ignore[return-value]
