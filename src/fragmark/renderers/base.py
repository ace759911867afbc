"""Contract shared by the HTML and Markdown renderers.

Callers that build the same document for more than one output format write
against :class:`FragmentRenderer` and pick the dialect at runtime.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from fragmark.config import RendererConfig
from fragmark.models import Link, LinesLike


class FragmentRenderer(ABC):
    def __init__(self, config: RendererConfig | None = None) -> None:
        self.config = config or RendererConfig()

    @abstractmethod
    def paragraph(self, items: LinesLike) -> str: ...  # pragma: no cover

    @abstractmethod
    def heading(self, level: int, item: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def strong(self, item: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def em(self, item: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def blockquote(self, items: LinesLike) -> str: ...  # pragma: no cover

    @abstractmethod
    def unordered_list(self, items: LinesLike) -> str: ...  # pragma: no cover

    @abstractmethod
    def ordered_list(self, items: LinesLike) -> str: ...  # pragma: no cover

    @abstractmethod
    def code(self, item: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def code_block(self, items: LinesLike, language: str | None = None) -> str: ...  # pragma: no cover

    @abstractmethod
    def link(self, link: Link | Mapping[str, Any]) -> str: ...  # pragma: no cover

    @abstractmethod
    def document(self, *blocks: str) -> str:
        """Assemble rendered blocks into one fragment, skipping empty ones."""
        ...  # pragma: no cover
