"""Normalization utilities for attribute matching."""

import math
import re

_LABEL_STRIP_RE = re.compile(r"[\s_]+")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def normalize_label(label: str | None) -> str:
    """
    Normalize an attribute label for matching.

    Lower-cases and removes whitespace and underscores, so that
    "Pixel Count", "pixel_count" and "PIXELCOUNT" compare equal.
    """
    if not label:
        return ""
    return _LABEL_STRIP_RE.sub("", label.lower())


def parse_int_value(value: object) -> int | None:
    """
    Parse an attribute value as a base-10 integer.

    Strings are parsed from their leading integer ("42", " 42 ", "42px").
    Floats are truncated. Returns None when no integer can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # Longer than the interpreter's integer-string limit
                return None
    return None
