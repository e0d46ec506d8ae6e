"""Conversion between cell text and typed Python values."""

from __future__ import annotations

import math
import re
from typing import Any

__all__ = [
    "ConversionError",
    "Converter",
    "StringConverter",
    "IntConverter",
    "FloatConverter",
    "BoolConverter",
    "CharConverter",
    "converter_for",
]

_UNSET: Any = object()

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<num>[+-]?(?:"
    r"(?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)"
    r"|(?P<special>inf(?:inity)?|nan(?:\([0-9a-z_]*\))?)"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?"
    r"))",
    re.IGNORECASE,
)


class ConversionError(ValueError):
    """Raised when cell text cannot be converted to the requested type."""


class Converter:
    """Converts cell text to values and back.

    The base class passes text through unchanged and formats values with
    ``str``. Subclass it and override :meth:`to_value` and :meth:`to_text`
    for custom conversions.

    When ``has_default`` is true, text that cannot be converted yields
    ``default`` instead of raising :class:`ConversionError`. When ``default``
    is omitted the class's own ``default_value`` is used.
    """

    default_value: Any = None

    def __init__(self, has_default: bool = False, default: Any = _UNSET) -> None:
        self.has_default = has_default
        self.default = type(self).default_value if default is _UNSET else default

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(has_default={self.has_default!r}, "
            f"default={self.default!r})"
        )

    def to_value(self, text: str) -> Any:
        """Return the value held by ``text``."""
        return text

    def to_text(self, value: Any) -> str:
        """Return the cell text for ``value``."""
        return str(value)

    def _fallback(self, error: ConversionError) -> Any:
        if not self.has_default:
            raise error
        return self.default


class StringConverter(Converter):
    """Keeps cell text as it is."""

    default_value = ""

    def to_value(self, text: str) -> str:
        return text

    def to_text(self, value: str) -> str:
        return value


class IntConverter(Converter):
    """Reads the leading decimal integer of a cell, ignoring what follows it."""

    default_value = 0

    def to_value(self, text: str) -> int:
        match = _INT_PREFIX.match(text)
        if match is None:
            return self._fallback(ConversionError(f"not an integer: {text!r}"))
        return int(match.group(1))

    def to_text(self, value: int) -> str:
        return str(int(value))


class FloatConverter(Converter):
    """Reads the leading floating-point number of a cell.

    Decimal, scientific, hexadecimal, infinity and NaN forms are accepted;
    a finite literal too large to represent is an error.
    """

    default_value = math.nan

    def to_value(self, text: str) -> float:
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            return self._fallback(ConversionError(f"not a number: {text!r}"))
        number = match.group("num")
        if match.group("special"):
            return float(number.split("(", 1)[0])
        try:
            result = float.fromhex(number) if match.group("hex") else float(number)
        except OverflowError:
            result = math.inf
        if math.isinf(result):
            return self._fallback(ConversionError(f"number out of range: {text!r}"))
        return result

    def to_text(self, value: float) -> str:
        return format(float(value), "g")


class BoolConverter(Converter):
    """Reads ``"true"`` as true and anything else as false; writes 1 or 0."""

    default_value = False

    def to_value(self, text: str) -> bool:
        return text == "true"

    def to_text(self, value: bool) -> str:
        return "1" if value else "0"


class CharConverter(Converter):
    """Reads the first character of a cell, or NUL for an empty cell."""

    default_value = "\0"

    def to_value(self, text: str) -> str:
        return text[0] if text else "\0"

    def to_text(self, value: str) -> str:
        return str(value)


_BY_TYPE: dict[type, type[Converter]] = {
    str: StringConverter,
    int: IntConverter,
    float: FloatConverter,
    bool: BoolConverter,
}


def converter_for(value_type: Any, has_default: bool = False) -> Converter:
    """Return a converter for ``value_type``.

    ``value_type`` is one of ``str``, ``int``, ``float`` or ``bool``, or a
    :class:`Converter` subclass to instantiate.
    """
    if isinstance(value_type, type) and issubclass(value_type, Converter):
        return value_type(has_default)
    try:
        converter_class = _BY_TYPE[value_type]
    except (KeyError, TypeError):
        raise TypeError(f"unsupported conversion datatype: {value_type!r}") from None
    return converter_class(has_default)