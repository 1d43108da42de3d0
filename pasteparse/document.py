"""Turn decoded HTML text into lxml trees for extraction."""

from __future__ import annotations

from pathlib import Path

from lxml import html
from lxml.html import HtmlElement


def parse_document(content: str) -> HtmlElement:
    """Parse a full HTML page.

    Args:
        content: Decoded page text.

    Returns:
        The <html> root element.
    """
    return html.document_fromstring(content)


def parse_fragment(content: str) -> HtmlElement:
    """Parse an HTML snippet, wrapping multiple top-level nodes in a <div>."""
    return html.fragment_fromstring(content, create_parent="div")


def load_document(path: str | Path, encoding: str = "utf-8") -> HtmlElement:
    """Read and parse a saved page."""
    return parse_document(Path(path).read_text(encoding=encoding))
