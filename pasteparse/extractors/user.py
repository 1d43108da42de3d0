"""Extractors for authors and profile pages.

A profile page without its ".user-view" stats block is still worth
rendering, so user_from_html falls back to a minimal User carrying only
the username instead of raising.
"""

from __future__ import annotations

import logging

from pasteparse.common.checked_html import (
    CheckedHtmlElement,
    attr_of,
    none_if_empty,
    text_of,
)
from pasteparse.common.scalars import (
    format_from_href,
    parse_float,
    parse_number,
    paste_id_from_href,
    rewrite_icon_url,
    strip_prefix,
)
from pasteparse.context import ExtractionContext
from pasteparse.extractors.base import (
    Node,
    as_checked,
    canonical_url,
    date_or_epoch,
    resolve_context,
    table_rows,
)
from pasteparse.models import SimpleUser, User, UserPaste

logger = logging.getLogger(__name__)


def _icon_url(parent: CheckedHtmlElement) -> str:
    return rewrite_icon_url(parent.attr("user_icon", "src"))


def simple_user_from_element(
    element: Node, context: ExtractionContext | None = None
) -> SimpleUser:
    """Extract the author block found anywhere under *element*.

    Never fails: every missing piece becomes its empty default.
    """
    parent = as_checked(element, resolve_context(context))
    return SimpleUser(
        username=parent.text("username"),
        registered=parent.exists("username_link"),
        pro=parent.exists("pro_marker"),
        icon_url=_icon_url(parent),
    )


def user_paste_from_element(
    element: Node, context: ExtractionContext | None = None
) -> UserPaste:
    """Extract one row of a profile's paste table.

    Columns: title link, age, expiry, views, comments, format link.
    """
    row = as_checked(element, resolve_context(context))
    id_link = row.first("cell_1_link")
    return UserPaste(
        id=paste_id_from_href(attr_of(id_link, "href")),
        title=text_of(id_link),
        age=row.text("cell_2"),
        expires=row.text("cell_3"),
        views=parse_number(row.text("cell_4")),
        num_comments=parse_number(row.text("cell_5")),
        format=format_from_href(row.attr("cell_6_link", "href")),
    )


def user_from_html(
    document: Node, context: ExtractionContext | None = None
) -> User:
    """Extract a profile page.

    Args:
        document: Parsed profile page.
        context: Extraction context; the process default if omitted.

    Returns:
        The profile. When the ".user-view" block is missing, a User with
        only the username set.
    """
    context = resolve_context(context)
    root = as_checked(document, context)

    url = canonical_url(root)
    username = strip_prefix(url, context.user_prefix)

    view = root.first("user_view")
    if view is None:
        logger.warning(
            "Profile page for %r has no user view block; using defaults",
            username,
        )
        return User(username=username)

    website = view.first("website")
    location = view.first("location")

    return User(
        username=username,
        icon_url=_icon_url(view),
        website=none_if_empty(attr_of(website, "href")),
        location=text_of(location) if location is not None else None,
        profile_views=parse_number(view.text("profile_views")),
        paste_views=parse_number(view.text("paste_views")),
        rating=parse_float(view.text("rating")),
        date_joined=date_or_epoch(view.attr("date_joined", "title")),
        pro=view.exists("pro_marker"),
        pastes=tuple(
            user_paste_from_element(row, context) for row in table_rows(root)
        ),
    )
