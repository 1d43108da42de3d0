"""Selector trace for debugging field lookups.

SelectorTrace is a context manager that records every registry lookup the
accessors perform while it is active. When the paste site changes its
markup, the trace shows which fields stopped matching.

Usage::

    from pasteparse.common.selector_trace import SelectorTrace

    with SelectorTrace() as trace:
        paste = paste_from_html(tree)

    print(trace.simple_tree())  # Human-readable tree
    print(trace.json())  # JSON for tooling
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lxml.html import HtmlElement

_active_trace: contextvars.ContextVar[SelectorTrace | None] = (
    contextvars.ContextVar("selector_trace", default=None)
)


@dataclass
class FieldLookup:
    """A single registry lookup."""

    field_name: str
    selector: str
    match_count: int
    required: bool
    sample_elements: list[str] = field(default_factory=list)
    children: list[FieldLookup] = field(default_factory=list)
    lookup_id: str | None = None
    parent_lookup_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "field_name": self.field_name,
            "selector": self.selector,
            "match_count": self.match_count,
            "required": self.required,
            "sample_elements": self.sample_elements,
            "children": [c.to_dict() for c in self.children],
            "lookup_id": self.lookup_id,
            "parent_lookup_id": self.parent_lookup_id,
        }


class SelectorTrace:
    """Collects field lookups made through the accessors.

    Lookups made on an element that was itself returned by an earlier
    lookup are nested under it. Repeated lookups of the same field under
    the same parent (one per table row, say) are merged, with match counts
    summed and samples accumulated.
    """

    def __init__(self, max_sample_length: int = 80, max_samples: int = 3):
        self.max_sample_length = max_sample_length
        self.max_samples = max_samples
        self.lookups: list[FieldLookup] = []
        self._counter = 0
        self._token: contextvars.Token[SelectorTrace | None] | None = None
        # Maps id() of a matched element to the lookup that produced it
        self._element_to_lookup: dict[int, FieldLookup] = {}
        self._dedup_index: dict[tuple[str | None, str], FieldLookup] = {}

    def __enter__(self) -> SelectorTrace:
        self._token = _active_trace.set(self)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if self._token is not None:
            _active_trace.reset(self._token)
            self._token = None

    def record_lookup(
        self,
        field_name: str,
        selector: str,
        results: list[HtmlElement],
        parent_element: HtmlElement | None = None,
        required: bool = False,
    ) -> None:
        """Record one lookup and the elements it matched.

        Args:
            field_name: Registry name of the selector.
            selector: CSS source of the selector.
            results: Elements the lookup returned.
            parent_element: Element the lookup was evaluated against.
            required: True when a miss is a structural failure.
        """
        parent_lookup_id: str | None = None
        if parent_element is not None:
            parent_lookup = self._element_to_lookup.get(id(parent_element))
            if parent_lookup is not None:
                parent_lookup_id = parent_lookup.lookup_id

        dedup_key = (parent_lookup_id, field_name)
        existing = self._dedup_index.get(dedup_key)
        if existing is not None:
            existing.match_count += len(results)
            missing = self.max_samples - len(existing.sample_elements)
            if missing > 0:
                existing.sample_elements.extend(
                    self._extract_samples(results[:missing])
                )
            for result in results:
                self._element_to_lookup[id(result)] = existing
            return

        self._counter += 1
        lookup = FieldLookup(
            field_name=field_name,
            selector=selector,
            match_count=len(results),
            required=required,
            sample_elements=self._extract_samples(results[: self.max_samples]),
            lookup_id=f"lookup_{self._counter}",
            parent_lookup_id=parent_lookup_id,
        )
        self._dedup_index[dedup_key] = lookup
        for result in results:
            self._element_to_lookup[id(result)] = lookup

        parent = (
            self._find(parent_lookup_id) if parent_lookup_id is not None else None
        )
        if parent is not None:
            parent.children.append(lookup)
        else:
            self.lookups.append(lookup)

    def missed(self) -> list[FieldLookup]:
        """Return every lookup, at any depth, that matched nothing."""
        found: list[FieldLookup] = []
        stack = list(self.lookups)
        while stack:
            lookup = stack.pop(0)
            if lookup.match_count == 0:
                found.append(lookup)
            stack.extend(lookup.children)
        return found

    def _find(self, lookup_id: str) -> FieldLookup | None:
        for lookup in self._dedup_index.values():
            if lookup.lookup_id == lookup_id:
                return lookup
        return None

    def _extract_samples(self, results: list[HtmlElement]) -> list[str]:
        samples = []
        for result in results:
            text = " ".join(result.text_content().split())
            if len(text) > self.max_sample_length:
                text = text[: self.max_sample_length] + "..."
            samples.append(text)
        return samples

    def simple_tree(self, indent: int = 0) -> str:
        """Generate a human-readable tree representation.

        Example output::

            - post_view ".post-view" ✓ (1 match)
              - title ".info-top>h1" ✓ (1 match)
                → "My paste"
              - unlisted ".unlisted" - (0 matches)
        """
        lines: list[str] = []
        for lookup in self.lookups:
            lines.extend(self._format_lookup(lookup, indent))
        return "\n".join(lines)

    def _format_lookup(self, lookup: FieldLookup, indent: int) -> list[str]:
        prefix = "  " * indent + "- "

        if lookup.match_count > 0:
            status = "✓"
        elif lookup.required:
            status = "✗"
        else:
            status = "-"

        match_text = f"{lookup.match_count} match" + (
            "es" if lookup.match_count != 1 else ""
        )
        if status == "✗":
            match_text += ", required"

        lines = [
            f'{prefix}{lookup.field_name} "{lookup.selector}" '
            f"{status} ({match_text})"
        ]
        if lookup.sample_elements and lookup.sample_elements[0]:
            lines.append(
                "  " * (indent + 1) + f'→ "{lookup.sample_elements[0]}"'
            )

        for child in lookup.children:
            lines.extend(self._format_lookup(child, indent + 1))
        return lines

    def json(self) -> list[dict[str, Any]]:
        """Generate a JSON-serializable representation."""
        return [lookup.to_dict() for lookup in self.lookups]


def get_active_trace() -> SelectorTrace | None:
    """Get the currently active SelectorTrace, if any."""
    return _active_trace.get()
