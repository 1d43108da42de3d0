"""Checked HTML element wrapper and primitive accessors.

The module-level accessors (text_of, attr_of, first_match, all_matches) are
total: they turn "not found" into an empty or absent value and never raise.
CheckedHtmlElement binds an lxml element to a SelectorRegistry so
extractors can look fields up by name, and provides checked() for the
anchors whose absence is a structural failure.
"""

from __future__ import annotations

import logging
from typing import Protocol

from lxml.html import HtmlElement

from pasteparse.common.exceptions import HTMLStructuralAssumptionException
from pasteparse.common.selector_trace import get_active_trace
from pasteparse.common.selectors import SelectorRegistry

logger = logging.getLogger(__name__)


class _TextNode(Protocol):
    def text_content(self) -> str: ...


class _AttrNode(Protocol):
    def get(self, key: str, default: str | None = None) -> str | None: ...


class _Selector(Protocol):
    def __call__(self, element: HtmlElement) -> list: ...


def text_of(element: _TextNode | None) -> str:
    """Return the trimmed text of *element* and its descendants, or ""."""
    if element is None:
        return ""
    return element.text_content().strip()


def raw_text_of(element: _TextNode | None) -> str:
    """Return the untrimmed text of *element* and its descendants, or ""."""
    if element is None:
        return ""
    return element.text_content()


def attr_of(element: _AttrNode | None, name: str) -> str:
    """Return attribute *name* of *element*, or "" if either is absent."""
    if element is None:
        return ""
    return element.get(name) or ""


def all_matches(element: HtmlElement, selector: _Selector) -> list[HtmlElement]:
    """Return every descendant of *element* matching *selector*.

    Compiled CSS selectors evaluate against descendant-or-self, so the
    element itself is filtered out.
    """
    return [match for match in selector(element) if match is not element]


def first_match(element: HtmlElement, selector: _Selector) -> HtmlElement | None:
    """Return the first descendant of *element* matching *selector*, or None."""
    for match in selector(element):
        if match is not element:
            return match
    return None


def none_if_empty(value: str) -> str | None:
    return value or None


class CheckedHtmlElement:
    """Wrapper around HtmlElement with named field lookups.

    Lookups go through the bound SelectorRegistry and are reported to the
    active SelectorTrace, if any. Results are wrapped again so nested
    lookups stay relative to the element they were found in.

    Example::

        root = CheckedHtmlElement(tree, registry)
        view = root.checked("post_view", "post view container")
        title = view.text("title")
        for item in view.all("comment_items"):
            ...
    """

    def __init__(
        self,
        element: HtmlElement,
        registry: SelectorRegistry,
        source_url: str = "",
    ) -> None:
        """Initialize the checked element wrapper.

        Args:
            element: The lxml HtmlElement to wrap.
            registry: Compiled selectors to look fields up in.
            source_url: Optional URL for error context.
        """
        self._element = element
        self._registry = registry
        self._source_url = source_url

    @property
    def element(self) -> HtmlElement:
        """The wrapped lxml element."""
        return self._element

    @property
    def registry(self) -> SelectorRegistry:
        return self._registry

    def _wrap(self, element: HtmlElement) -> CheckedHtmlElement:
        return CheckedHtmlElement(element, self._registry, self._source_url)

    def _record(
        self, name: str, results: list[HtmlElement], required: bool = False
    ) -> None:
        trace = get_active_trace()
        if trace is not None:
            trace.record_lookup(
                field_name=name,
                selector=self._registry.css(name),
                results=results,
                parent_element=self._element,
                required=required,
            )

    def all(self, name: str) -> list[CheckedHtmlElement]:
        """Return every descendant matching field *name*, possibly none."""
        matches = all_matches(self._element, self._registry[name])
        self._record(name, matches)
        return [self._wrap(match) for match in matches]

    def first(self, name: str) -> CheckedHtmlElement | None:
        """Return the first descendant matching field *name*, or None."""
        match = first_match(self._element, self._registry[name])
        self._record(name, [match] if match is not None else [])
        if match is None:
            logger.debug("No match for field '%s'", name)
            return None
        return self._wrap(match)

    def exists(self, name: str) -> bool:
        """Return True if any descendant matches field *name*."""
        return self.first(name) is not None

    def text(self, name: str) -> str:
        """Return the trimmed text of the first match for *name*, or ""."""
        return text_of(self.first(name))

    def attr(self, name: str, attribute: str) -> str:
        """Return *attribute* of the first match for *name*, or ""."""
        return attr_of(self.first(name), attribute)

    def checked(
        self,
        name: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> CheckedHtmlElement:
        """Return the first match for a structurally required field.

        Args:
            name: Registry field name of the anchor.
            description: Human-readable description of the anchor.
            min_count: Minimum number of matches expected (default: 1).
            max_count: Maximum number of matches expected (None = unlimited).

        Returns:
            The first matching element, wrapped.

        Raises:
            HTMLStructuralAssumptionException: If the count doesn't match
                expectations.
        """
        matches = all_matches(self._element, self._registry[name])
        self._record(name, matches, required=True)

        actual_count = len(matches)
        if actual_count < max(min_count, 1) or (
            max_count is not None and actual_count > max_count
        ):
            raise HTMLStructuralAssumptionException(
                selector=self._registry.css(name),
                description=description,
                expected_min=min_count,
                expected_max=max_count,
                actual_count=actual_count,
                source_url=self._source_url,
            )
        return self._wrap(matches[0])

    def __getattr__(self, name: str):
        """Delegate all other attributes to the wrapped element.

        This keeps CheckedHtmlElement usable wherever an HtmlElement is
        expected (text_content(), get(), tag, ...).
        """
        return getattr(self._element, name)
