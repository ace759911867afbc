"""Value types shared by the builders.

A *Lines* value is either a single string or an ordered sequence of strings.
It is modelled as two variants, :class:`Scalar` and :class:`Series`, so each
combinator decides explicitly what to do with either shape instead of sniffing
``str`` versus ``list`` at every call site.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from pydantic import BaseModel


@dataclass(frozen=True)
class Scalar:
    """A single string, passed through by most combinators untouched."""

    text: str


@dataclass(frozen=True)
class Series:
    """An ordered sequence of strings. ``None`` entries are kept as falsy."""

    items: tuple[str | None, ...]


Lines: TypeAlias = Scalar | Series
LinesLike: TypeAlias = str | Sequence[str | None] | Scalar | Series


def to_lines(value: LinesLike) -> Lines:
    """Normalize builder input into a :data:`Lines` variant.

    Args:
        value: A string, a sequence of strings, or an existing variant.

    Returns:
        The matching :class:`Scalar` or :class:`Series`.

    Raises:
        TypeError: If the value is neither a string nor a sequence of strings.
    """
    if isinstance(value, (Scalar, Series)):
        return value
    if isinstance(value, str):
        return Scalar(value)
    if isinstance(value, Sequence):
        for item in value:
            if item is not None and not isinstance(item, str):
                raise TypeError(f"Lines entries must be str, got {type(item).__name__}")
        return Series(tuple(value))
    raise TypeError(f"Expected str or sequence of str, got {type(value).__name__}")


class Link(BaseModel):
    """Hyperlink record consumed by the HTML and Markdown link builders.

    ``url`` and ``inner`` are optional here so that an absent field is reported
    by the builders as :class:`~fragmark.exceptions.MissingLinkFieldError`.
    """

    url: str | None = None
    inner: str | None = None
    title: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def coerce(cls, value: Link | Mapping[str, Any]) -> Link:
        if isinstance(value, Link):
            return value
        return cls.model_validate(dict(value))
