"""Validation shared by the HTML and Markdown link builders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fragmark.exceptions import MissingLinkFieldError
from fragmark.models import Link

logger = logging.getLogger(__name__)

LINK_FIELDS_MESSAGE = "Links must have both url and inner properties"


def require_link(value: Link | Mapping[str, Any]) -> Link:
    """Coerce ``value`` into a :class:`Link` that has both url and inner.

    Raises:
        MissingLinkFieldError: If ``url`` or ``inner`` is empty or absent.
    """
    link = Link.coerce(value)
    for field in ("url", "inner"):
        if not getattr(link, field):
            logger.debug("Rejecting link without %s: %r", field, link)
            raise MissingLinkFieldError(LINK_FIELDS_MESSAGE, field=field)
    return link
