"""Low-level combinators reused by the HTML and Markdown builders."""

from __future__ import annotations

import re
from collections.abc import Callable

from fragmark.models import LinesLike, Scalar, Series, to_lines

# Ampersand goes first so the entities added below are not escaped again.
_ATTRIBUTE_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("[", "&#91;"),
    ("]", "&#93;"),
    ("(", "&#40;"),
    (")", "&#41;"),
    ("`", "&#96;"),
)

# \s covers Unicode whitespace on str; U+FEFF is added explicitly.
_EDGE_WHITESPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def escape_attribute(text: str) -> str:
    """Escape characters that can interfere with HTML and Markdown attributes.

    Only meant for HTML attribute values and Markdown link titles. Body
    content is never escaped by the toolkit.

    Args:
        text: Raw attribute text.

    Returns:
        The text with ampersands, angle brackets, double quotes, square
        brackets, parentheses and backticks replaced by HTML entities.
    """
    for char, entity in _ATTRIBUTE_ESCAPES:
        text = text.replace(char, entity)
    return text


def lines(items: LinesLike) -> str:
    """Combine the non-empty lines with a newline."""
    value = to_lines(items)
    if isinstance(value, Scalar):
        return value.text
    return "\n".join(item for item in value.items if item)


def join(items: LinesLike, sep: str = "\n") -> str:
    """Join every line, blank ones included, with ``sep``."""
    value = to_lines(items)
    if isinstance(value, Scalar):
        return value.text
    return sep.join(item or "" for item in value.items)


def trim(text: str) -> str:
    """Strip whitespace, Unicode spaces and BOM included, from the start and end."""
    return _EDGE_WHITESPACE.sub("", text)


def wrap(prefix: str = "", suffix: str = "", item: str | None = "") -> str:
    """Wrap ``item`` in ``prefix``/``suffix``, or return ``""`` when it is empty."""
    if item:
        return f"{prefix}{item}{suffix}"
    return ""


def wrap_each(prefix: str = "", suffix: str = "", items: LinesLike = "") -> list[str]:
    """Wrap every non-empty line.

    A single string always yields a one-element list, even when the wrapped
    result is empty; callers joining the result rely on that element count.
    """
    value = to_lines(items)
    if isinstance(value, Scalar):
        return [wrap(prefix, suffix, value.text)]
    return [wrap(prefix, suffix, item) for item in value.items if item]


def tag(name: str = "", item: str | None = "") -> str:
    """Wrap ``item`` in ``<name>...</name>``; an empty item omits the element."""
    return wrap(f"<{name}>", f"</{name}>", item)


def tag_each(name: str = "", items: LinesLike = "") -> list[str]:
    """Wrap every non-empty line in ``<name>...</name>``."""
    return wrap_each(f"<{name}>", f"</{name}>", items)


def i(condition: object, items: Callable[[], LinesLike]) -> str:
    """Render ``items()`` with :func:`lines` only when ``condition`` is truthy.

    The callable is not invoked at all when the condition is falsy, so it may
    reference data that only exists when the condition holds.
    """
    if condition:
        return lines(items())
    return ""


def t(items: LinesLike) -> str:
    """Join the non-empty phrases of inline text with a single space."""
    value = to_lines(items)
    if isinstance(value, Series):
        return " ".join(item for item in value.items if item)
    return value.text


def br() -> str:
    return "<br/>"
