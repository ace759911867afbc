"""Shared test fixtures for fragmark tests."""

from __future__ import annotations

import pytest

from fragmark.config import RendererConfig
from fragmark.models import Link


@pytest.fixture
def sample_link() -> Link:
    """A link with every field populated."""
    return Link(url="https://example.com/docs", inner="Docs", title='The "docs"')


@pytest.fixture
def python_config() -> RendererConfig:
    """Markdown config that fences code as Python by default."""
    return RendererConfig(dialect="markdown", code_language="python")
