"""Enumerations for resx2json type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ValueKind(StrEnum):
    """Kind of a resolved resource value.

    Every value read from a ResX file falls into exactly one of these
    kinds. The kind decides how the value is written to JSON.

    StrEnum provides automatic string conversion: str(ValueKind.STRING) == "string"
    """

    STRING = "string"
    """Text value: <data name="x"><value>Hello</value></data>"""

    NUMBER = "number"
    """Integer, floating-point or decimal primitive (System.Int32, System.Double, ...)"""

    BOOLEAN = "boolean"
    """System.Boolean primitive"""

    BINARY = "binary"
    """Opaque bytes: base64 byte arrays and non-text file references"""

    NULL = "null"
    """ResXNullRef or a string entry without a <value> element"""


__all__ = [
    "ValueKind",
]
