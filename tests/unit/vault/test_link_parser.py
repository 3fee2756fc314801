"""
Unit tests for LinkParser functionality.

Tests wiki link parsing into page name, heading fragment and alias, the
display label rule, and the slug strategies used for file names.
"""

import pytest

from mdlogger.vault import InvalidLinkSyntaxError, LinkParser, get_link_label


class TestLinkLabel:
    """Test the label shown for a wiki link."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Page", "Page"),
            ("  Page  ", "Page"),
            ("Page|Alias", "Alias"),
            ("Page | Alias ", "Alias"),
            ("Page|", "Page"),
            ("Page|   ", "Page"),
            ("Page#Heading", "Page#Heading"),
            ("Page#Heading|Alias", "Alias"),
            ("Page|Alias|More", "Alias|More"),
        ],
    )
    def test_label_rule(self, raw, expected):
        assert get_link_label(raw) == expected


class TestLinkParser:
    """Test suite for parsing wiki links."""

    @pytest.fixture
    def parser(self):
        return LinkParser()

    def test_parse_plain_page(self, parser):
        link = parser.parse("Simple Page")

        assert link.page_name == "Simple Page"
        assert link.alias is None
        assert link.heading_fragment is None
        assert link.display_label == "Simple Page"

    def test_parse_alias(self, parser):
        link = parser.parse("Project Plan|the plan")

        assert link.page_name == "Project Plan"
        assert link.alias == "the plan"
        assert link.display_label == "the plan"

    def test_parse_heading_fragment(self, parser):
        link = parser.parse("Project Plan#Milestones")

        assert link.page_name == "Project Plan"
        assert link.heading_fragment == "Milestones"
        assert link.alias is None

    def test_parse_heading_and_alias(self, parser):
        link = parser.parse("[[Project Plan#Milestones|dates]]")

        assert link.raw_text == "Project Plan#Milestones|dates"
        assert link.page_name == "Project Plan"
        assert link.heading_fragment == "Milestones"
        assert link.alias == "dates"
        assert link.display_label == "dates"
        assert str(link) == "[[Project Plan#Milestones|dates]]"

    def test_empty_alias_falls_back_to_page(self, parser):
        link = parser.parse("Page|")

        assert link.alias is None
        assert link.display_label == "Page"

    @pytest.mark.parametrize("raw", ["", "   ", "|alias", "#heading", "[[ ]]", " #x|y"])
    def test_empty_page_name_is_invalid(self, parser, raw):
        with pytest.raises(InvalidLinkSyntaxError):
            parser.parse(raw)


class TestSlugStrategies:
    """Test page name to file name transforms."""

    def test_passthrough_keeps_name(self):
        assert LinkParser("passthrough").transform_file_name(" My Page ") == "My Page"

    def test_kebab_case(self):
        parser = LinkParser("kebab-case")
        assert parser.transform_file_name("My  Great_Page") == "my-great-page"

    def test_snake_case(self):
        parser = LinkParser("snake_case")
        assert parser.transform_file_name("My Great-Page ") == "my_great_page"

    def test_non_ascii_is_kept(self):
        assert LinkParser("kebab-case").transform_file_name("日本語 ノート") == "日本語-ノート"

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            LinkParser("camelCase")
