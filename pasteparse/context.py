"""Extraction context: the site base URL and the compiled selectors.

An ExtractionContext is built once and passed to every extractor call. It
is immutable, so one instance can serve any number of concurrent
extractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import quote

from pasteparse.common.selectors import SelectorRegistry

BASE_URL = "https://pastebin.com"


@dataclass(frozen=True)
class ExtractionContext:
    """Everything extraction needs besides the document itself.

    Attributes:
        base_url: Site origin without a trailing slash. Canonical URLs in
            page metadata are made relative by stripping it.
        registry: Compiled field selectors.
    """

    base_url: str
    registry: SelectorRegistry

    @classmethod
    def create(
        cls,
        base_url: str = BASE_URL,
        registry: SelectorRegistry | None = None,
    ) -> ExtractionContext:
        """Build a context, compiling a fresh registry if none is given."""
        return cls(
            base_url=base_url.rstrip("/"),
            registry=registry if registry is not None else SelectorRegistry.build(),
        )

    @property
    def paste_prefix(self) -> str:
        return f"{self.base_url}/"

    @property
    def user_prefix(self) -> str:
        return f"{self.base_url}/u/"

    @property
    def archive_prefix(self) -> str:
        return f"{self.base_url}/archive"

    def archive_url(self, format: str | None = None) -> str:
        """URL of the archive listing, optionally filtered by *format*.

        The format is quoted as a single path segment.
        """
        if not format:
            return self.archive_prefix
        return f"{self.archive_prefix}/{quote(format, safe='')}"


@lru_cache(maxsize=None)
def default_context(base_url: str = BASE_URL) -> ExtractionContext:
    """Return the process-wide context for *base_url*, building it once."""
    return ExtractionContext.create(base_url=base_url)
