"""Markdown element builders.

Block builders end with a newline so consecutive blocks can be concatenated
without a separator. Inline builders never add one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fragmark.links import require_link
from fragmark.models import Link, LinesLike
from fragmark.primitives import escape_attribute, join, lines, wrap, wrap_each

FENCE = "```"
UNORDERED_MARKER = "-   "
ORDERED_MARKER = "1.  "


def mp(items: LinesLike) -> str:
    return lines(items) + "\n"


def mh(level: int, item: str) -> str:
    """Render an ATX heading: ``level`` hashes, a space, the text, a newline."""
    return f"{'#' * level} {item}\n"


def mh1(item: str) -> str:
    return mh(1, item)


def mh2(item: str) -> str:
    return mh(2, item)


def mh3(item: str) -> str:
    return mh(3, item)


def mh4(item: str) -> str:
    return mh(4, item)


def mh5(item: str) -> str:
    return mh(5, item)


def mh6(item: str) -> str:
    return mh(6, item)


def mstrong(item: str) -> str:
    return f"**{item}**"


def mem(item: str) -> str:
    return f"_{item}_"


def mblockquote(items: LinesLike) -> str:
    """Prefix every non-empty line with ``> ``. No trailing newline is added."""
    return "\n".join(wrap_each("> ", "", items))


def _list(marker: str, items: LinesLike) -> str:
    content = "\n".join(wrap_each(marker, "", items))
    if content:
        return content + "\n"
    return ""


def mul(items: LinesLike) -> str:
    return _list(UNORDERED_MARKER, items)


def mol(items: LinesLike) -> str:
    """Render an ordered list; every item uses ``1.`` and renderers renumber."""
    return _list(ORDERED_MARKER, items)


def mcode(item: str) -> str:
    return f"`{item}`"


def mcodeblock(language: str, items: LinesLike) -> str:
    """Render a fenced code block.

    Args:
        language: Info string placed after the opening fence, or ``""``.
        items: Code lines, joined verbatim so blank lines are kept.

    Returns:
        The fenced block, or ``""`` when the joined code is empty.
    """
    header = f"{FENCE} {language}" if language else FENCE
    return wrap(header + "\n", "\n" + FENCE, join(items))


def ma(link: Link | Mapping[str, Any]) -> str:
    """Render ``[inner](url)``, adding ``"title"`` when a title is given.

    Raises:
        MissingLinkFieldError: If ``url`` or ``inner`` is empty or absent.
    """
    link = require_link(link)
    if link.title:
        return f'[{link.inner}]({link.url} "{escape_attribute(link.title)}")'
    return f"[{link.inner}]({link.url})"
