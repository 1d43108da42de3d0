"""Exception types for extraction errors.

This module defines the exception hierarchy raised when a page does not look
the way the extractors assume. Structural errors mean a required anchor
element is missing; value format errors mean a scalar (a date, for example)
did not match the shape the site normally renders.
"""

from typing import Any


class ExtractionAssumptionException(Exception):
    """Base class for extraction assumption violations.

    Extractors make assumptions about the paste site's markup and the
    format of the values inside it. When these assumptions are violated,
    they raise clear, contextual exceptions that help diagnose which part
    of the markup changed.
    """

    def __init__(
        self,
        message: str,
        source_url: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the assumption violation.
            source_url: URL of the page being extracted, if known.
            context: Optional dict of additional context (selector, counts, etc).
        """
        self.message = message
        self.source_url = source_url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]
        if self.source_url:
            parts.append(f"URL: {self.source_url}")

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class HTMLStructuralAssumptionException(ExtractionAssumptionException):
    """Raised when a required anchor element is missing from the markup.

    The post view container, the comment code block and similar anchors
    exist on every well-formed page of their kind. A different match count
    usually means the site's HTML structure has changed.

    Attributes:
        selector: The CSS selector that was used.
        description: Human-readable name of the anchor.
        expected_min: Minimum number of elements expected.
        expected_max: Maximum number of elements expected (None = unlimited).
        actual_count: Number of elements found.
    """

    def __init__(
        self,
        selector: str,
        description: str,
        expected_min: int,
        expected_max: int | None,
        actual_count: int,
        source_url: str = "",
    ) -> None:
        """Initialize the exception.

        Args:
            selector: The CSS selector that was used.
            description: Human-readable description of what was being selected.
            expected_min: Minimum number of elements expected.
            expected_max: Maximum number of elements expected (None = unlimited).
            actual_count: Actual number of elements found.
            source_url: URL of the page being extracted, if known.
        """
        self.selector = selector
        self.description = description
        self.expected_min = expected_min
        self.expected_max = expected_max
        self.actual_count = actual_count

        if expected_max is None:
            expected_str = f"at least {expected_min}"
        elif expected_min == expected_max:
            expected_str = f"exactly {expected_min}"
        else:
            expected_str = f"between {expected_min} and {expected_max}"

        message = (
            f"HTML structure mismatch: Expected {expected_str} "
            f"elements for '{description}', but found {actual_count}"
        )

        context = {
            "selector": selector,
            "expected_min": expected_min,
            "expected_max": expected_max
            if expected_max is not None
            else "unlimited",
            "actual_count": actual_count,
        }

        super().__init__(message, source_url, context)


class ValueFormatException(ExtractionAssumptionException):
    """Raised when a scalar value does not match its expected format.

    Attributes:
        value: The raw text that failed to parse.
        expected_format: Description of the format that was expected.
        reason: Why the value was rejected.
    """

    def __init__(
        self,
        value: str,
        expected_format: str,
        reason: str,
        source_url: str = "",
    ) -> None:
        self.value = value
        self.expected_format = expected_format
        self.reason = reason

        message = f"Could not parse {value!r}: {reason}"
        context = {"value": value, "expected_format": expected_format}

        super().__init__(message, source_url, context)


class DateFormatException(ValueFormatException):
    """Raised when a long-form site date cannot be converted to a timestamp."""


class SelectorDefinitionError(ValueError):
    """Raised when a registry selector fails to compile.

    Registry selectors are static literals, so this is a programming error
    surfaced when the registry is built rather than during extraction.
    """

    def __init__(self, field_name: str, selector: str, reason: str) -> None:
        self.field_name = field_name
        self.selector = selector
        super().__init__(
            f"Invalid CSS selector for field '{field_name}': "
            f"{selector!r} ({reason})"
        )
