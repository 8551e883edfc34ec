"""Tests for search term highlighting."""

from viewcache.core.highlighting import HIGHLIGHT_STYLE, highlight_text


def highlighted(text, patterns) -> list[str]:
    rich_text = highlight_text(text, patterns)
    return [rich_text.plain[span.start : span.end] for span in rich_text.spans if span.style == HIGHLIGHT_STYLE]


class TestHighlightText:
    def test_case_insensitive(self) -> None:
        assert highlighted("Apple and apple", ["apple"]) == ["Apple", "apple"]

    def test_regex_characters_are_literal(self) -> None:
        assert highlighted("cost (usd) 1.5", ["(usd)", "1.5"]) == ["(usd)", "1.5"]

    def test_blank_patterns_ignored(self) -> None:
        assert highlighted("anything", ["", "  "]) == []

    def test_plain_text_preserved(self) -> None:
        assert highlight_text("record 12", ["2"]).plain == "record 12"
