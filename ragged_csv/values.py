"""
Scalar value model and per-cell type inference for ragged-csv.

Every non-blank cell becomes exactly one of three variants:

- ``Integer``: signed 64-bit integer (``-?[0-9]+`` within int64 range).
- ``Float``: 64-bit float in plain decimal / exponent notation, plus
  ``inf`` / ``infinity`` / ``nan``.
- ``Text``: anything else, stored trimmed.

Blank cells have no variant at all: ``classify_value`` returns ``None``
and the row scanner leaves the field out of the row mapping.

Classification is strictly ordered Integer -> Float -> Text. Each step
only fails over to the next, looser type, so the classifier never raises.

The numeric grammars are matched with explicit ASCII regexes before
calling ``int()`` / ``float()``. Python's own parsers are more lenient
than we want (``int("+5")``, ``float("1_000")``, non-ASCII digits), and
those spellings must stay Text / Float exactly as the grammar says.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

import numpy as np

_INT64 = np.iinfo(np.int64)

# Unicode White_Space. str.strip() with no argument also drops \x1c-\x1f,
# which must stay usable as separators and as cell content.
WHITESPACE = (
    " \t\n\x0b\x0c\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_INTEGER_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Text:
    """A non-numeric cell, trimmed of surrounding whitespace."""
    value: str


@dataclass(frozen=True)
class Integer:
    """A cell holding a signed 64-bit integer."""
    value: int


@dataclass(frozen=True)
class Float:
    """A cell holding a 64-bit floating point number."""
    value: float


ScalarValue = Union[Text, Integer, Float]


def parse_integer(text: str) -> int | None:
    """Parse *text* as an int64, or return ``None``.

    Only an optional leading ``-`` followed by ASCII digits is accepted.
    Values outside the int64 range are rejected so they can fall through
    to ``Float``.
    """
    if not _INTEGER_RE.fullmatch(text):
        return None
    number = int(text)
    if number < _INT64.min or number > _INT64.max:
        return None
    return number


def parse_float(text: str) -> float | None:
    """Parse *text* as a float in standard notation, or return ``None``."""
    if not _FLOAT_RE.fullmatch(text):
        return None
    return float(text)


def classify_value(raw: str) -> ScalarValue | None:
    """Classify one raw cell substring.

    Args:
        raw: The cell text exactly as it appeared between separators.

    Returns:
        ``Integer``, ``Float`` or ``Text`` for a non-blank cell, ``None``
        for a blank or whitespace-only one.

    Examples::

        classify_value(" 42 ")   # Integer(42)
        classify_value("0.0")    # Float(0.0)
        classify_value("3e10")   # Float(30000000000.0)
        classify_value(" abc ")  # Text("abc")
        classify_value("   ")    # None
    """
    trimmed = raw.strip(WHITESPACE)
    if not trimmed:
        return None

    integer = parse_integer(trimmed)
    if integer is not None:
        return Integer(integer)

    number = parse_float(trimmed)
    if number is not None:
        return Float(number)

    return Text(trimmed)


def to_python(value: ScalarValue) -> str | int | float:
    """Unwrap a scalar into the plain Python value it carries."""
    return value.value
