"""Dialect renderers and factory."""

from fragmark.renderers.base import FragmentRenderer
from fragmark.renderers.factory import create_renderer, create_renderer_from_config
from fragmark.renderers.html import HtmlRenderer
from fragmark.renderers.markdown import MarkdownRenderer

__all__ = [
    "FragmentRenderer",
    "HtmlRenderer",
    "MarkdownRenderer",
    "create_renderer",
    "create_renderer_from_config",
]
