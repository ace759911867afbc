"""Markdown renderer implementation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fragmark import markdown
from fragmark.models import Link, LinesLike
from fragmark.renderers.base import FragmentRenderer


class MarkdownRenderer(FragmentRenderer):
    def paragraph(self, items: LinesLike) -> str:
        return markdown.mp(items)

    def heading(self, level: int, item: str) -> str:
        return markdown.mh(level, item)

    def strong(self, item: str) -> str:
        return markdown.mstrong(item)

    def em(self, item: str) -> str:
        return markdown.mem(item)

    def blockquote(self, items: LinesLike) -> str:
        return markdown.mblockquote(items)

    def unordered_list(self, items: LinesLike) -> str:
        return markdown.mul(items)

    def ordered_list(self, items: LinesLike) -> str:
        return markdown.mol(items)

    def code(self, item: str) -> str:
        return markdown.mcode(item)

    def code_block(self, items: LinesLike, language: str | None = None) -> str:
        if language is None:
            language = self.config.code_language
        return markdown.mcodeblock(language, items)

    def link(self, link: Link | Mapping[str, Any]) -> str:
        return markdown.ma(link)

    def document(self, *blocks: str) -> str:
        # Block builders already end with a newline.
        return "".join(block for block in blocks if block)
