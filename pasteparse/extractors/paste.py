"""Extractors for paste pages, their code blocks and their comments.

Structural anchors:

- ".post-view" on the document. Without it there is no paste to render
  and paste_from_html raises HTMLStructuralAssumptionException.
- ".highlighted-code" under the post view and under every comment.

Everything else is optional and falls back to a default.
"""

from __future__ import annotations

import logging

from pasteparse.common.checked_html import (
    CheckedHtmlElement,
    attr_of,
    raw_text_of,
    text_of,
)
from pasteparse.common.scalars import (
    COMMENT_FOR_MARKER,
    category_from_label,
    comment_for_from_href,
    format_from_href,
    parse_float,
    parse_number,
    parse_optional_number,
    report_id_from_href,
    size_from_label,
    strip_prefix,
)
from pasteparse.context import ExtractionContext
from pasteparse.extractors.base import (
    Node,
    as_checked,
    canonical_url,
    date_or_epoch,
    edit_date_of,
    resolve_context,
)
from pasteparse.extractors.user import simple_user_from_element
from pasteparse.models import (
    Comment,
    Paste,
    PasteContainer,
    PasteProtection,
)

logger = logging.getLogger(__name__)


def paste_container_from_element(
    element: Node, context: ExtractionContext | None = None
) -> PasteContainer:
    """Extract a ".highlighted-code" block.

    Args:
        element: The code block element.
        context: Extraction context; the process default if omitted.

    Returns:
        The container. Missing info-bar pieces fall back to defaults and
        a missing listing yields empty content.
    """
    block = as_checked(element, resolve_context(context))

    category = block.first("category")
    likes = block.first("likes")
    dislikes = block.first("dislikes")
    report = block.first("report_link")
    format_link = block.first("format_link")

    return PasteContainer(
        category=category_from_label(text_of(category))
        if category is not None
        else None,
        size=size_from_label(block.text("size_label")),
        likes=parse_optional_number(text_of(likes)) if likes is not None else None,
        dislikes=parse_optional_number(text_of(dislikes))
        if dislikes is not None
        else None,
        id=report_id_from_href(attr_of(report, "href"))
        if report is not None
        else None,
        format=format_from_href(attr_of(format_link, "href"))
        if format_link is not None
        else "text",
        format_name=text_of(format_link) if format_link is not None else "Plain Text",
        content=raw_text_of(block.first("source_listing")),
    )


def _code_block(
    parent: CheckedHtmlElement, context: ExtractionContext
) -> PasteContainer:
    block = parent.checked("highlighted_code", "highlighted code section")
    return paste_container_from_element(block, context)


def comment_from_element(
    element: Node, context: ExtractionContext | None = None
) -> Comment:
    """Extract one comment from its "<li>" element.

    Uses the same author, date and code block rules as a paste, evaluated
    relative to the comment.

    Raises:
        HTMLStructuralAssumptionException: If the comment has no code block.
    """
    context = resolve_context(context)
    item = as_checked(element, context)

    return Comment(
        author=simple_user_from_element(item, context),
        date=date_or_epoch(item.attr("date_span", "title")),
        edit_date=edit_date_of(item),
        container=_code_block(item, context),
        num_comments=parse_number(item.text("reply_count")),
    )


def _comment_for(view: CheckedHtmlElement) -> str | None:
    """Id of the parent paste, from the "This is comment for paste" notice."""
    for notice in view.all("notice"):
        first_child = notice.first("first_child")
        if text_of(first_child) != COMMENT_FOR_MARKER:
            continue
        paste_id = comment_for_from_href(notice.attr("link", "href"))
        if paste_id is not None:
            return paste_id
    return None


def paste_from_html(
    document: Node, context: ExtractionContext | None = None
) -> Paste:
    """Extract a paste page and its comments.

    Args:
        document: Parsed paste page.
        context: Extraction context; the process default if omitted.

    Returns:
        The paste.

    Raises:
        HTMLStructuralAssumptionException: If the post view, its code block
            or a comment's code block is missing.
    """
    context = resolve_context(context)
    root = as_checked(document, context)

    url = canonical_url(root)
    paste_id = strip_prefix(url, context.paste_prefix)

    # Re-bound so structural errors carry the page URL.
    view = CheckedHtmlElement(root.element, context.registry, url).checked(
        "post_view", "post view container"
    )

    title = view.first("title")
    tags = tuple(text_of(tag) for tag in view.all("tags"))
    container = _code_block(view, context)
    author = simple_user_from_element(view, context)

    date = date_or_epoch(view.attr("date_span", "title"))
    edit_date = edit_date_of(view)

    views = parse_number(view.text("visits"))
    rating = parse_float(view.text("rating"))
    expire = view.text("expire")

    comment_for = _comment_for(view)
    unlisted = view.exists("unlisted")

    counter = view.first("comment_count")
    num_comments = parse_number(text_of(counter)) if counter is not None else None

    comments = tuple(
        comment_from_element(item, context) for item in view.all("comment_items")
    )
    logger.debug("Extracted paste %r with %d comments", paste_id, len(comments))

    return Paste(
        id=paste_id,
        title=text_of(title) if title is not None else None,
        tags=tags,
        container=container,
        author=author,
        date=date,
        edit_date=edit_date,
        views=views,
        rating=rating,
        expire=expire,
        comment_for=comment_for,
        unlisted=unlisted,
        num_comments=num_comments,
        comments=comments,
        locked=num_comments is None,
    )


def get_csrftoken(
    document: Node, context: ExtractionContext | None = None
) -> str | None:
    """Content of the csrf-token meta tag, None when absent."""
    root = as_checked(document, resolve_context(context))
    token = root.first("csrf_token")
    if token is None:
        return None
    return token.get("content")


def is_locked(document: Node, context: ExtractionContext | None = None) -> bool:
    """True when the page asks for the paste password."""
    return as_checked(document, resolve_context(context)).exists("password_form")


def is_burn(document: Node, context: ExtractionContext | None = None) -> bool:
    """True when the page warns the paste burns after reading."""
    return as_checked(document, resolve_context(context)).exists("burn_marker")


def paste_protection(
    document: Node, context: ExtractionContext | None = None
) -> PasteProtection:
    """Evaluate the password, burn and csrf probes on the same tree."""
    context = resolve_context(context)
    root = as_checked(document, context)
    return PasteProtection(
        locked=is_locked(root, context),
        burn=is_burn(root, context),
        csrf_token=get_csrftoken(root, context),
    )
