"""Helpers shared by the entity extractors."""

from __future__ import annotations

from typing import Union

from lxml.etree import _ElementTree
from lxml.html import HtmlElement

from pasteparse.common.checked_html import CheckedHtmlElement, attr_of
from pasteparse.common.scalars import parse_date_or_epoch, parse_edit_date
from pasteparse.context import ExtractionContext, default_context

# What callers may hand to an extractor.
Node = Union[HtmlElement, _ElementTree, CheckedHtmlElement]


def resolve_context(context: ExtractionContext | None) -> ExtractionContext:
    return context if context is not None else default_context()


def as_checked(
    node: Node, context: ExtractionContext, source_url: str = ""
) -> CheckedHtmlElement:
    """Wrap *node* for named lookups against the context's registry.

    Already-wrapped elements are returned unchanged, element trees are
    unwrapped to their root.
    """
    if isinstance(node, CheckedHtmlElement):
        return node
    if isinstance(node, _ElementTree):
        node = node.getroot()
    return CheckedHtmlElement(node, context.registry, source_url)


def canonical_url(root: CheckedHtmlElement) -> str:
    """Content of the og:url meta tag, or ""."""
    return root.attr("meta_og_url", "content")


def date_or_epoch(title: str) -> int:
    """Timestamp from a date title attribute; 0 when the attribute is absent."""
    if not title:
        return 0
    return parse_date_or_epoch(title)


def edit_date_of(parent: CheckedHtmlElement) -> int | None:
    """Edit timestamp from the second date span, None when not edited."""
    span = parent.first("edit_date_span")
    if span is None:
        return None
    return parse_edit_date(attr_of(span, "title"))


def table_rows(parent: CheckedHtmlElement) -> list[CheckedHtmlElement]:
    """Data rows of the ".maintable" listing under *parent*.

    The first row holds the column headers and is dropped.
    """
    return parent.all("maintable_rows")[1:]
