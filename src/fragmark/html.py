"""HTML element builders.

Every block builder groups its content with :func:`~fragmark.primitives.lines`
and wraps it in a tag, so empty content drops the element entirely.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fragmark.links import require_link
from fragmark.models import Link, LinesLike
from fragmark.primitives import escape_attribute, join, lines, tag, tag_each


def p(items: LinesLike) -> str:
    return tag("p", lines(items))


def h(level: int, item: str) -> str:
    """Render ``<hN>``. The level is not range-checked."""
    return tag(f"h{level}", item)


def h1(item: str) -> str:
    return h(1, item)


def h2(item: str) -> str:
    return h(2, item)


def h3(item: str) -> str:
    return h(3, item)


def h4(item: str) -> str:
    return h(4, item)


def h5(item: str) -> str:
    return h(5, item)


def h6(item: str) -> str:
    return h(6, item)


def strong(item: str) -> str:
    return tag("strong", item)


def em(item: str) -> str:
    return tag("em", item)


def blockquote(items: LinesLike) -> str:
    return tag("blockquote", lines(items))


def li(items: LinesLike) -> str:
    """Render each non-empty item as ``<li>``, one per line."""
    return "\n".join(tag_each("li", items))


def ul(items: LinesLike) -> str:
    return tag("ul", li(items))


def ol(items: LinesLike) -> str:
    return tag("ol", li(items))


def pre(items: LinesLike) -> str:
    """Render preformatted text.

    Lines are joined verbatim so blank lines survive. The content sits on its
    own lines inside the tag; empty content omits the element.
    """
    content = join(items)
    if not content:
        return ""
    return tag("pre", f"\n{content}\n")


def code(item: str) -> str:
    return tag("code", item)


def a(link: Link | Mapping[str, Any]) -> str:
    """Render an ``<a>`` element.

    Args:
        link: A :class:`Link` or a mapping with ``url``, ``inner`` and an
            optional ``title``.

    Returns:
        ``<a href="url">inner</a>``, with an escaped ``title`` attribute when
        a title is given.

    Raises:
        MissingLinkFieldError: If ``url`` or ``inner`` is empty or absent.
    """
    link = require_link(link)
    if link.title:
        return f'<a href="{link.url}" title="{escape_attribute(link.title)}">{link.inner}</a>'
    return f'<a href="{link.url}">{link.inner}</a>'
