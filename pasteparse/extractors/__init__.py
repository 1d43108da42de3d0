"""Extraction entry points.

Two conversions are exposed: building an entity from a whole document
(from_html) and building one from a sub-element (from_element). The
per-entity functions can also be called directly.

Whole-document policy per entity:

- ``paste``: a missing ".post-view" raises HTMLStructuralAssumptionException.
- ``user``: a missing ".user-view" yields a minimal User.
- ``archive``: a missing ".archive-table" yields an empty listing.
"""

from __future__ import annotations

from collections.abc import Callable

from pasteparse.common.data_models import ExtractedData
from pasteparse.context import ExtractionContext
from pasteparse.extractors.archive import archive_from_element, archive_page_from_html
from pasteparse.extractors.base import Node
from pasteparse.extractors.paste import (
    comment_from_element,
    get_csrftoken,
    is_burn,
    is_locked,
    paste_container_from_element,
    paste_from_html,
    paste_protection,
)
from pasteparse.extractors.user import (
    simple_user_from_element,
    user_from_html,
    user_paste_from_element,
)

Extractor = Callable[..., ExtractedData]

DOCUMENT_EXTRACTORS: dict[str, Extractor] = {
    "paste": paste_from_html,
    "user": user_from_html,
    "archive": archive_page_from_html,
    "protection": paste_protection,
}

ELEMENT_EXTRACTORS: dict[str, Extractor] = {
    "simple_user": simple_user_from_element,
    "paste_container": paste_container_from_element,
    "comment": comment_from_element,
    "user_paste": user_paste_from_element,
    "archive": archive_from_element,
}


def _lookup(table: dict[str, Extractor], kind: str, what: str) -> Extractor:
    try:
        return table[kind]
    except KeyError:
        known = ", ".join(sorted(table))
        raise KeyError(
            f"No {what} extractor for '{kind}' (known: {known})"
        ) from None


def from_html(
    kind: str, document: Node, context: ExtractionContext | None = None
) -> ExtractedData:
    """Build the entity *kind* from a whole parsed page.

    Raises:
        KeyError: If *kind* is not a document entity.
        HTMLStructuralAssumptionException: If a required anchor is missing.
    """
    return _lookup(DOCUMENT_EXTRACTORS, kind, "document")(document, context)


def from_element(
    kind: str, element: Node, context: ExtractionContext | None = None
) -> ExtractedData:
    """Build the entity *kind* from a sub-element of a page.

    Raises:
        KeyError: If *kind* is not an element entity.
        HTMLStructuralAssumptionException: If a required anchor is missing.
    """
    return _lookup(ELEMENT_EXTRACTORS, kind, "element")(element, context)


__all__ = [
    "DOCUMENT_EXTRACTORS",
    "ELEMENT_EXTRACTORS",
    "archive_from_element",
    "archive_page_from_html",
    "comment_from_element",
    "from_element",
    "from_html",
    "get_csrftoken",
    "is_burn",
    "is_locked",
    "paste_container_from_element",
    "paste_from_html",
    "paste_protection",
    "simple_user_from_element",
    "user_from_html",
    "user_paste_from_element",
]
