"""Renderer factory."""

from __future__ import annotations

import logging

from fragmark.config import RendererConfig
from fragmark.renderers.base import FragmentRenderer
from fragmark.renderers.html import HtmlRenderer
from fragmark.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)

RENDERERS: dict[str, type[FragmentRenderer]] = {"html": HtmlRenderer, "markdown": MarkdownRenderer}


def create_renderer(name: str, config: RendererConfig | None = None) -> FragmentRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    logger.debug("Creating %s renderer", name)
    return renderer_cls(config)


def create_renderer_from_config(config: RendererConfig) -> FragmentRenderer:
    return create_renderer(config.dialect, config)
