"""HTML renderer implementation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fragmark import html
from fragmark.models import Link, LinesLike
from fragmark.primitives import lines
from fragmark.renderers.base import FragmentRenderer


class HtmlRenderer(FragmentRenderer):
    def paragraph(self, items: LinesLike) -> str:
        return html.p(items)

    def heading(self, level: int, item: str) -> str:
        return html.h(level, item)

    def strong(self, item: str) -> str:
        return html.strong(item)

    def em(self, item: str) -> str:
        return html.em(item)

    def blockquote(self, items: LinesLike) -> str:
        return html.blockquote(items)

    def unordered_list(self, items: LinesLike) -> str:
        return html.ul(items)

    def ordered_list(self, items: LinesLike) -> str:
        return html.ol(items)

    def code(self, item: str) -> str:
        return html.code(item)

    def code_block(self, items: LinesLike, language: str | None = None) -> str:
        # <pre> carries no attributes, so the language has nowhere to go.
        return html.pre(items)

    def link(self, link: Link | Mapping[str, Any]) -> str:
        return html.a(link)

    def document(self, *blocks: str) -> str:
        return lines(list(blocks))
