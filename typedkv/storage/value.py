"""
Typed Value Module

This module implements the value model of the store: a type tag plus the
canonical byte encoding for that tag.

Encoding rules:
    STRING -> raw UTF-8 bytes of the text (variable length)
    INT    -> 8 bytes, native-endian two's complement (signed 64-bit)
    FLOAT  -> 8 bytes, native-endian IEEE-754 double
    BOOL   -> 1 byte, 0x01 for true and 0x00 for false

INT and FLOAT payloads are both 8 bytes wide and carry no marker of their
own, so the tag is authoritative: every accessor checks the tag before it
looks at the bytes.
"""

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from ..errors import ValueDecodeError, ValueEncodeError

# Native byte order, standard sizes
_INT_FORMAT = struct.Struct("=q")
_FLOAT_FORMAT = struct.Struct("=d")

NUMERIC_WIDTH = 8

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class DataType(Enum):
    """Enumeration of supported value type tags."""
    STRING = 0
    INT = 1
    FLOAT = 2
    BOOL = 3

    @property
    def label(self) -> str:
        """Human readable tag name used in debug output."""
        return self.name.capitalize()


@dataclass(frozen=True)
class TypedValue:
    """
    One stored value: a type tag and its canonical byte encoding.

    Instances are immutable. Use the ``from_*`` constructors to build a
    value from a native Python object and the ``as_*`` accessors to read
    it back. An accessor whose type does not match the tag returns None.

    Attributes:
        tag: The DataType of the value
        data: The encoded payload
    """
    tag: DataType
    data: bytes

    # == Constructors ==

    @classmethod
    def from_string(cls, s: str) -> "TypedValue":
        """Create a STRING value from text."""
        return cls(tag=DataType.STRING, data=s.encode("utf-8"))

    @classmethod
    def from_int(cls, i: int) -> "TypedValue":
        """
        Create an INT value from a signed 64-bit integer.

        Raises:
            ValueEncodeError: If the integer does not fit in 64 bits
        """
        if not INT64_MIN <= i <= INT64_MAX:
            raise ValueEncodeError(f"integer out of 64-bit range: {i}")
        return cls(tag=DataType.INT, data=_INT_FORMAT.pack(i))

    @classmethod
    def from_float(cls, f: float) -> "TypedValue":
        """Create a FLOAT value from a double."""
        return cls(tag=DataType.FLOAT, data=_FLOAT_FORMAT.pack(f))

    @classmethod
    def from_bool(cls, b: bool) -> "TypedValue":
        """Create a BOOL value."""
        return cls(tag=DataType.BOOL, data=b"\x01" if b else b"\x00")

    # == Accessors ==

    def as_string(self) -> Optional[str]:
        """
        Decode the payload as text.

        Returns:
            The text if the tag is STRING, None otherwise

        Raises:
            ValueDecodeError: If the payload is not valid UTF-8
        """
        if self.tag != DataType.STRING:
            return None
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueDecodeError(f"malformed UTF-8 payload: {exc}") from exc

    def as_int(self) -> Optional[int]:
        """Return the integer if the tag is INT and the payload is 8 bytes."""
        if self.tag != DataType.INT or len(self.data) != NUMERIC_WIDTH:
            return None
        return _INT_FORMAT.unpack(self.data)[0]

    def as_float(self) -> Optional[float]:
        """Return the float if the tag is FLOAT and the payload is 8 bytes."""
        if self.tag != DataType.FLOAT or len(self.data) != NUMERIC_WIDTH:
            return None
        return _FLOAT_FORMAT.unpack(self.data)[0]

    def as_bool(self) -> Optional[bool]:
        """Return the boolean if the tag is BOOL and the payload is non-empty."""
        if self.tag != DataType.BOOL or not self.data:
            return None
        return self.data[0] != 0

    # == Rendering ==

    def render(self) -> str:
        """
        Render the value in its native textual form.

        The tag picks the rendering: text as-is, integers in decimal,
        floats as plain positional digits (no exponent, no
        trailing .0), booleans as true/false.

        Raises:
            ValueDecodeError: If the payload does not decode under its tag
        """
        if self.tag == DataType.STRING:
            return self.as_string()

        if self.tag == DataType.INT:
            value = self.as_int()
            if value is None:
                raise self._bad_width()
            return str(value)

        if self.tag == DataType.FLOAT:
            value = self.as_float()
            if value is None:
                raise self._bad_width()
            return _format_float(value)

        value = self.as_bool()
        if value is None:
            raise ValueDecodeError("empty BOOL payload")
        return "true" if value else "false"

    def debug_repr(self) -> str:
        """Diagnostic rendering showing the tag and raw payload bytes."""
        data = ", ".join(str(b) for b in self.data)
        return f"TypedValue(tag={self.tag.label}, data=[{data}])"

    def _bad_width(self) -> ValueDecodeError:
        return ValueDecodeError(
            f"{self.tag.name} payload must be {NUMERIC_WIDTH} bytes, got {len(self.data)}"
        )


def _format_float(value: float) -> str:
    """Shortest round-trip digits in plain positional notation, no exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        # Whole numbers drop the fraction: 1.0 -> 1, -0.0 -> -0
        text = text.rstrip("0").rstrip(".")
    return text
