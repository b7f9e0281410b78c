"""Markdown renderer tests."""

import pytest

from pydgen import MarkdownRenderer, get_renderer


class TestMarkdownRenderer:
    def test_paragraph_has_trailing_newline(self):
        assert MarkdownRenderer().render("List *all* the **customers**") == (
            "<p>List <em>all</em> the <strong>customers</strong></p>\n"
        )

    def test_callable(self):
        assert MarkdownRenderer()("# Title") == "<h1>Title</h1>\n"

    def test_empty_string(self):
        assert MarkdownRenderer().render("") == ""

    def test_rejects_non_string(self):
        with pytest.raises(TypeError, match="got int"):
            MarkdownRenderer().render(5)

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="unknown markdown preset"):
            MarkdownRenderer("bogus")

    def test_gfm_tables(self):
        html = MarkdownRenderer("gfm-like").render("| a |\n| - |\n| 1 |")
        assert "<table>" in html

    def test_repr(self):
        assert repr(MarkdownRenderer("zero")) == "MarkdownRenderer(preset='zero')"


class TestGetRenderer:
    def test_default_is_commonmark(self):
        assert get_renderer().preset == "commonmark"

    def test_instances_are_shared(self):
        assert get_renderer("gfm-like") is get_renderer("gfm-like")

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Available"):
            get_renderer("nope")
