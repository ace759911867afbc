"""Renderer configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from fragmark.exceptions import ConfigError


class RendererConfig(BaseModel):
    dialect: Literal["html", "markdown"] = "markdown"
    code_language: str = ""

    model_config = {"frozen": True, "extra": "forbid"}


def load_config(payload: Mapping[str, Any]) -> RendererConfig:
    """Validate a plain mapping into a :class:`RendererConfig`.

    Raises:
        ConfigError: If the mapping has unknown keys or invalid values.
    """
    try:
        return RendererConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
