"""Selector registry for the paste site's markup.

Every field the extractors read is bound to a logical name in
FIELD_SELECTORS. SelectorRegistry compiles the whole table once into
lxml CSSSelector objects; extraction code only ever looks selectors up by
name, so a markup change is fixed by editing one line of this table.

Example::

    registry = SelectorRegistry.build()
    for row in registry["maintable_rows"](tree):
        ...
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from cssselect import SelectorError
from lxml.cssselect import CSSSelector

from pasteparse.common.exceptions import SelectorDefinitionError

# libxml2 does not synthesize <tbody>, so table rows are matched both ways.
FIELD_SELECTORS: dict[str, str] = {
    # Document metadata
    "meta_og_url": "meta[property='og:url']",
    "csrf_token": "meta[name=csrf-token]",
    # Structural anchors
    "post_view": ".post-view",
    "user_view": ".user-view",
    "archive_table": ".archive-table",
    "highlighted_code": ".highlighted-code",
    # Paste container
    "category": "span[title=Category]",
    "size_label": ".left",
    "likes": ".-like",
    "dislikes": ".-dislike",
    "report_link": "a[href^='/report/']",
    "format_link": "a.h_800[href^='/archive/']",
    "source_listing": ".source>ol",
    # Author
    "username": ".username",
    "username_link": ".username>a",
    "pro_marker": ".pro",
    "user_icon": ".user-icon>img",
    # Dates
    "date_span": ".date>span",
    "edit_date_span": ".date>span:nth-child(2)",
    # Paste
    "title": ".info-top>h1",
    "tags": ".tags>a",
    "visits": ".visits",
    "rating": ".rating",
    "expire": ".expire",
    "notice": ".notice",
    "first_child": "*:first-child",
    "link": "a",
    "unlisted": ".unlisted",
    "comment_count": "div[title=Comments]>a",
    "comment_items": ".comments__list>ul>li",
    "reply_count": "a[href='#comments']",
    # Protection probes
    "password_form": "#postpasswordverificationform-password",
    "burn_marker": ".burn, .-burn",
    # User profile
    "website": ".web",
    "location": ".location",
    "profile_views": ".views:not(.-all)",
    "paste_views": ".views.-all",
    "date_joined": ".date-text",
    # Listing tables
    "maintable_rows": ".maintable>tbody>tr, .maintable>tr",
    "cell_1_link": "td:nth-child(1)>a",
    "cell_2": "td:nth-child(2)",
    "cell_3": "td:nth-child(3)",
    "cell_3_link": "td:nth-child(3)>a",
    "cell_4": "td:nth-child(4)",
    "cell_5": "td:nth-child(5)",
    "cell_6_link": "td:nth-child(6)>a",
}


class SelectorRegistry(Mapping[str, CSSSelector]):
    """Read-only mapping of field names to compiled CSS selectors.

    Build it once with SelectorRegistry.build() and share it; lookups never
    compile anything. Compiled lxml selectors are safe to evaluate from
    several threads at once.
    """

    def __init__(self, compiled: Mapping[str, CSSSelector]) -> None:
        self._compiled = MappingProxyType(dict(compiled))

    @classmethod
    def build(
        cls, selectors: Mapping[str, str] | None = None
    ) -> SelectorRegistry:
        """Compile a selector table into a registry.

        Args:
            selectors: Mapping of field name to CSS selector. Defaults to
                FIELD_SELECTORS.

        Returns:
            A new registry.

        Raises:
            SelectorDefinitionError: If any selector fails to compile.
        """
        table = FIELD_SELECTORS if selectors is None else selectors
        compiled: dict[str, CSSSelector] = {}
        for name, css in table.items():
            try:
                compiled[name] = CSSSelector(css, translator="html")
            except SelectorError as e:
                raise SelectorDefinitionError(name, css, str(e)) from e
        return cls(compiled)

    def __getitem__(self, name: str) -> CSSSelector:
        try:
            return self._compiled[name]
        except KeyError:
            raise KeyError(f"No selector registered for field '{name}'") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._compiled)

    def __len__(self) -> int:
        return len(self._compiled)

    def css(self, name: str) -> str:
        """Return the source CSS text of a registered selector."""
        return self[name].css
