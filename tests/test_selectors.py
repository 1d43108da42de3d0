"""Tests for the field selector registry."""

import pytest
from lxml import html

from pasteparse.common.exceptions import SelectorDefinitionError
from pasteparse.common.selectors import FIELD_SELECTORS, SelectorRegistry


class TestSelectorRegistry:
    """Tests for building and reading the registry."""

    def test_default_build_compiles_every_field(self):
        """Every entry of the selector table compiles."""
        registry = SelectorRegistry.build()

        assert len(registry) == len(FIELD_SELECTORS)
        assert set(registry) == set(FIELD_SELECTORS)

    def test_css_returns_source_text(self):
        """css() gives back the selector as written in the table."""
        registry = SelectorRegistry.build()

        assert registry.css("post_view") == ".post-view"
        assert registry.css("burn_marker") == ".burn, .-burn"

    def test_custom_table(self):
        """A custom table replaces the default one entirely."""
        registry = SelectorRegistry.build({"heading": "h1"})

        tree = html.fromstring("<div><h1>Title</h1></div>")
        assert [el.text for el in registry["heading"](tree)] == ["Title"]
        assert "post_view" not in registry

    def test_invalid_selector_raises_at_build_time(self):
        """A selector that does not compile names the offending field."""
        with pytest.raises(SelectorDefinitionError) as exc_info:
            SelectorRegistry.build({"good": "div", "broken": "div[["})

        assert exc_info.value.field_name == "broken"
        assert exc_info.value.selector == "div[["
        assert "broken" in str(exc_info.value)

    def test_selector_definition_error_is_value_error(self):
        """SelectorDefinitionError can be caught as ValueError."""
        with pytest.raises(ValueError):
            SelectorRegistry.build({"broken": ">>>"})

    def test_unknown_field_raises_key_error(self):
        """Looking up an unregistered name raises KeyError."""
        registry = SelectorRegistry.build()

        with pytest.raises(KeyError, match="no_such_field"):
            registry["no_such_field"]

    def test_registry_is_read_only(self):
        """The registry cannot be modified after it is built."""
        registry = SelectorRegistry.build()

        with pytest.raises(TypeError):
            registry["post_view"] = None  # type: ignore[index]


class TestMaintableRows:
    """Table rows match with and without an explicit <tbody>."""

    def test_rows_with_tbody(self):
        registry = SelectorRegistry.build()
        tree = html.fromstring(
            '<div><table class="maintable"><tbody>'
            "<tr><th>h</th></tr><tr><td>a</td></tr>"
            "</tbody></table></div>"
        )

        assert len(registry["maintable_rows"](tree)) == 2

    def test_rows_without_tbody(self):
        registry = SelectorRegistry.build()
        tree = html.fromstring(
            '<div><table class="maintable">'
            "<tr><th>h</th></tr><tr><td>a</td></tr><tr><td>b</td></tr>"
            "</table></div>"
        )

        assert len(registry["maintable_rows"](tree)) == 3
