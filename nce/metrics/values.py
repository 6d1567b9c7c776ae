"""Numeric coercion of status page values."""

from __future__ import annotations

import math
from collections.abc import Mapping

ReplacementValue = int | float | str


class UnconvertibleValueError(ValueError):
    """Raised when a value is neither numeric nor listed in the replacements."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Error when trying to convert {value!r}")
        self.value = value


def format_number(number: float) -> str:
    """Render a number the way the exposition format expects it.

    Integral values drop the fractional part (``42.0`` -> ``42``).
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if float(number).is_integer():
        return str(int(number))
    return repr(float(number))


def parse_number(text: str) -> float | None:
    """Parse *text* as a plain decimal or scientific number.

    Python's digit grouping (``1_000``) and non-ASCII digits are rejected.
    """
    if not text.isascii() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _format_replacement(value: ReplacementValue) -> str | None:
    if isinstance(value, str):
        number = parse_number(value.strip())
        return None if number is None else format_number(number)
    return format_number(value)


def to_metric_value(
    value: str,
    replacements: Mapping[str, ReplacementValue] | None = None,
) -> str:
    """Convert a raw status value into a metric value string.

    Numbers are accepted as-is.  Anything else is looked up verbatim
    (after trimming) in *replacements*, e.g. ``yes -> 1``.  A substitute
    that is not numeric itself is treated like a missing entry.
    """
    text = value.strip()
    number = parse_number(text)
    if number is not None:
        return format_number(number)
    if replacements and text in replacements:
        substitute = _format_replacement(replacements[text])
        if substitute is not None:
            return substitute
    raise UnconvertibleValueError(value)
