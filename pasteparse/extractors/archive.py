"""Extractors for the public archive listing."""

from __future__ import annotations

import logging

from pasteparse.common.checked_html import attr_of, none_if_empty, text_of
from pasteparse.common.scalars import format_from_href, paste_id_from_href, strip_prefix
from pasteparse.context import ExtractionContext
from pasteparse.extractors.base import (
    Node,
    as_checked,
    canonical_url,
    resolve_context,
    table_rows,
)
from pasteparse.models import Archive, ArchivePage

logger = logging.getLogger(__name__)


def archive_from_element(
    element: Node, context: ExtractionContext | None = None
) -> Archive:
    """Extract one listing row: title link, age, format link."""
    row = as_checked(element, resolve_context(context))
    id_link = row.first("cell_1_link")
    return Archive(
        id=paste_id_from_href(attr_of(id_link, "href")),
        title=text_of(id_link),
        age=row.text("cell_2"),
        format=format_from_href(row.attr("cell_3_link", "href")),
    )


def archive_page_from_html(
    document: Node, context: ExtractionContext | None = None
) -> ArchivePage:
    """Extract the archive listing.

    The format filter comes from the canonical URL ("<base>/archive/<format>").
    A page without the ".archive-table" block yields no rows rather than an
    error; the listing is legitimately empty at times.
    """
    context = resolve_context(context)
    root = as_checked(document, context)

    archive_format = none_if_empty(
        strip_prefix(canonical_url(root), context.archive_prefix).replace("/", "")
    )

    table = root.first("archive_table")
    if table is None:
        logger.warning("Archive page has no archive table; returning no rows")
        return ArchivePage(format=archive_format)

    rows = table_rows(table)
    return ArchivePage(
        format=archive_format,
        archives=tuple(archive_from_element(row, context) for row in rows),
    )
