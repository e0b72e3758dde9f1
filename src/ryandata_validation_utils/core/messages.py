"""Default error-message texts.

Numbers and patterns are rendered the way JavaScript renders them in
template strings, so default messages match the ones printed by
JavaScript tooling running the same checks over the same
configuration.
"""

from __future__ import annotations

import math
import re

# Flag letters in the order JavaScript prints them (alphabetical)
_FLAG_LETTERS: tuple[tuple[re.RegexFlag, str], ...] = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def format_number(value: float) -> str:
    """Render a number as JavaScript would in a template string.

    Examples:
        >>> format_number(4)
        '4'
        >>> format_number(4.0)
        '4'
        >>> format_number(2.5)
        '2.5'
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def pluralize(count: float, noun: str) -> str:
    """Return ``"<count> <noun>"`` with an ``s`` unless count is exactly 1."""
    suffix = "" if count == 1 else "s"
    return f"{format_number(count)} {noun}{suffix}"


def render_pattern(pattern: re.Pattern[str]) -> str:
    """Render a compiled pattern as a JavaScript regular-expression literal.

    Args:
        pattern: Compiled pattern to render.

    Returns:
        The ``/source/flags`` form, e.g. ``/^[0-9]+$/`` or ``/abc/i``.
    """
    source = _escape_source(pattern.pattern) or "(?:)"
    flags = "".join(letter for flag, letter in _FLAG_LETTERS if pattern.flags & flag)
    return f"/{source}/{flags}"


def _escape_source(source: str) -> str:
    escaped: list[str] = []
    in_class = False
    after_backslash = False
    for char in source:
        if after_backslash:
            escaped.append(char)
            after_backslash = False
            continue
        if char == "\\":
            after_backslash = True
        elif char == "[":
            in_class = True
        elif char == "]":
            in_class = False
        elif char == "/" and not in_class:
            escaped.append("\\/")
            continue
        elif char == "\n":
            escaped.append("\\n")
            continue
        elif char == "\r":
            escaped.append("\\r")
            continue
        escaped.append(char)
    return "".join(escaped)


# -----------------------------------------------------------------------------
# Default texts per validator kind
# -----------------------------------------------------------------------------


def array_min_text(bound: float) -> str:
    return f"must have at least {pluralize(bound, 'element')}"


def array_max_text(bound: float) -> str:
    return f"must have at most {pluralize(bound, 'element')}"


def string_min_text(bound: float) -> str:
    return f"must be at least {pluralize(bound, 'character')} long"


def string_max_text(bound: float) -> str:
    return f"must be at most {pluralize(bound, 'character')} long"


def number_min_text(bound: float) -> str:
    return f"must be at least {format_number(bound)}"


def number_max_text(bound: float) -> str:
    return f"must be at most {format_number(bound)}"


def missing_attribute_text(name: str) -> str:
    return f"missing mandatory attribute: {name}"


def unknown_attribute_text(name: str) -> str:
    return f"contains unknown attribute: {name}"


def pattern_mismatch_text(pattern: re.Pattern[str]) -> str:
    return f"must match regExp {render_pattern(pattern)}"


def compose(default: str, message: str | None = None, message_prefix: str | None = None) -> str:
    """Join the prefix with the custom message, or with the default text.

    Empty strings count as absent for both ``message`` and ``message_prefix``.
    """
    return (message_prefix or "") + (message or default)
