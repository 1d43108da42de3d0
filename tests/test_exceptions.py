"""Tests for the extraction exception hierarchy.

Tests cover:
1. ExtractionAssumptionException base class with context-aware messages
2. HTMLStructuralAssumptionException for missing anchors
3. ValueFormatException and DateFormatException for scalar values
"""

import pytest

from pasteparse.common.exceptions import (
    DateFormatException,
    ExtractionAssumptionException,
    HTMLStructuralAssumptionException,
    ValueFormatException,
)


class TestExtractionAssumptionException:
    """Tests for ExtractionAssumptionException base class."""

    def test_exception_has_required_attributes(self):
        """ExtractionAssumptionException shall have message, source_url, and context attributes."""
        exc = ExtractionAssumptionException(
            message="Test error",
            source_url="https://pastebin.com/abc123",
            context={"key": "value"},
        )

        assert exc.message == "Test error"
        assert exc.source_url == "https://pastebin.com/abc123"
        assert exc.context == {"key": "value"}

    def test_exception_defaults(self):
        """source_url defaults to empty and context to an empty dict."""
        exc = ExtractionAssumptionException(message="Test error")

        assert exc.source_url == ""
        assert exc.context == {}
        assert str(exc) == "Test error"

    def test_exception_formats_message_with_url(self):
        """The formatted message includes the URL when one is known."""
        exc = ExtractionAssumptionException(
            message="Test error",
            source_url="https://pastebin.com/abc123",
        )

        formatted = str(exc)
        assert "Test error" in formatted
        assert "URL: https://pastebin.com/abc123" in formatted

    def test_exception_formats_message_with_context(self):
        """The formatted message lists every context entry."""
        exc = ExtractionAssumptionException(
            message="Test error",
            context={"selector": ".post-view", "count": 0},
        )

        formatted = str(exc)
        assert "URL:" not in formatted
        assert "Context:" in formatted
        assert "selector: .post-view" in formatted
        assert "count: 0" in formatted


class TestHTMLStructuralAssumptionException:
    """Tests for HTMLStructuralAssumptionException."""

    def test_exception_has_required_attributes(self):
        """HTMLStructuralAssumptionException shall have all required attributes."""
        exc = HTMLStructuralAssumptionException(
            selector=".post-view",
            description="post view container",
            expected_min=1,
            expected_max=None,
            actual_count=0,
            source_url="https://pastebin.com/abc123",
        )

        assert exc.selector == ".post-view"
        assert exc.description == "post view container"
        assert exc.expected_min == 1
        assert exc.expected_max is None
        assert exc.actual_count == 0
        assert exc.source_url == "https://pastebin.com/abc123"

    def test_exception_is_extraction_assumption_exception(self):
        """HTMLStructuralAssumptionException shall inherit from the base class."""
        exc = HTMLStructuralAssumptionException(
            selector=".post-view",
            description="post view container",
            expected_min=1,
            expected_max=None,
            actual_count=0,
        )

        assert isinstance(exc, ExtractionAssumptionException)

    @pytest.mark.parametrize(
        ("expected_min", "expected_max", "phrase"),
        [
            (1, None, "at least 1"),
            (1, 1, "exactly 1"),
            (1, 3, "between 1 and 3"),
        ],
    )
    def test_message_describes_expected_count(
        self, expected_min, expected_max, phrase
    ):
        """The message states the expected count range."""
        exc = HTMLStructuralAssumptionException(
            selector=".highlighted-code",
            description="highlighted code section",
            expected_min=expected_min,
            expected_max=expected_max,
            actual_count=5,
        )

        message = str(exc)
        assert f"Expected {phrase} elements" in message
        assert "'highlighted code section'" in message
        assert "but found 5" in message

    def test_context_marks_unlimited_max(self):
        """An open upper bound is shown as "unlimited"."""
        exc = HTMLStructuralAssumptionException(
            selector=".post-view",
            description="post view container",
            expected_min=1,
            expected_max=None,
            actual_count=0,
        )

        assert exc.context["expected_max"] == "unlimited"
        assert exc.context["selector"] == ".post-view"


class TestValueFormatException:
    """Tests for scalar format errors."""

    def test_value_format_exception(self):
        exc = ValueFormatException("abc", "<integer>", "not a number")

        assert exc.value == "abc"
        assert exc.expected_format == "<integer>"
        assert exc.reason == "not a number"
        assert "Could not parse 'abc': not a number" in str(exc)
        assert "expected_format: <integer>" in str(exc)

    def test_date_format_exception_hierarchy(self):
        exc = DateFormatException("yesterday", "<date>", "missing marker")

        assert isinstance(exc, ValueFormatException)
        assert isinstance(exc, ExtractionAssumptionException)
