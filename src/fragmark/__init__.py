"""Public API surface for fragmark."""

__version__ = "0.1.0"

from fragmark.config import RendererConfig, load_config
from fragmark.exceptions import ConfigError, FragmarkError, MissingLinkFieldError
from fragmark.html import a, blockquote, code, em, h, h1, h2, h3, h4, h5, h6, li, ol, p, pre, strong, ul
from fragmark.markdown import (
    ma,
    mblockquote,
    mcode,
    mcodeblock,
    mem,
    mh,
    mh1,
    mh2,
    mh3,
    mh4,
    mh5,
    mh6,
    mol,
    mp,
    mstrong,
    mul,
)
from fragmark.models import Lines, LinesLike, Link, Scalar, Series, to_lines
from fragmark.primitives import br, escape_attribute, i, join, lines, t, tag, tag_each, trim, wrap, wrap_each
from fragmark.renderers import (
    FragmentRenderer,
    HtmlRenderer,
    MarkdownRenderer,
    create_renderer,
    create_renderer_from_config,
)

__all__ = [
    "ConfigError",
    "FragmarkError",
    "FragmentRenderer",
    "HtmlRenderer",
    "Lines",
    "LinesLike",
    "Link",
    "MarkdownRenderer",
    "MissingLinkFieldError",
    "RendererConfig",
    "Scalar",
    "Series",
    "a",
    "blockquote",
    "br",
    "code",
    "create_renderer",
    "create_renderer_from_config",
    "em",
    "escape_attribute",
    "h",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "i",
    "join",
    "li",
    "lines",
    "load_config",
    "ma",
    "mblockquote",
    "mcode",
    "mcodeblock",
    "mem",
    "mh",
    "mh1",
    "mh2",
    "mh3",
    "mh4",
    "mh5",
    "mh6",
    "mol",
    "mp",
    "mstrong",
    "mul",
    "ol",
    "p",
    "pre",
    "strong",
    "t",
    "tag",
    "tag_each",
    "to_lines",
    "trim",
    "ul",
    "wrap",
    "wrap_each",
]
