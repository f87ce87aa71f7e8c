"""Tests for document segmentation logic."""

import pytest
from l10ndiff.core.segmenter import (
    segment,
    _normalize_line,
    _regroup_block,
    _split_markdown_boundaries,
    BLOCKQUOTE_PREFIX,
)
from l10ndiff.core.models import SplitConfig, SplitMethod, ConfigurationError


DOUBLE_PLAIN = SplitConfig(SplitMethod.DOUBLE, markdown_aware=False)
DOUBLE_MD = SplitConfig(SplitMethod.DOUBLE, markdown_aware=True)
SINGLE_PLAIN = SplitConfig(SplitMethod.SINGLE, markdown_aware=False)
SINGLE_MD = SplitConfig(SplitMethod.SINGLE, markdown_aware=True)


class TestPlainSplit:
    """Tests for the delimiter-only path."""

    def test_double_splits_on_blank_lines(self):
        """Paragraphs separated by a blank line become separate blocks."""
        assert segment("one\ntwo\n\nthree", DOUBLE_PLAIN) == ["one\ntwo", "three"]

    def test_single_splits_on_every_line(self):
        """Every line break is a boundary."""
        assert segment("one\ntwo\n\nthree", SINGLE_PLAIN) == ["one", "two", "", "three"]

    def test_empty_pieces_are_kept(self):
        """Extra blank lines produce empty blocks rather than being dropped."""
        assert segment("a\n\n\n\nb", DOUBLE_PLAIN) == ["a", "", "b"]

    def test_empty_content_yields_single_empty_block(self):
        """Empty document splits into one empty block."""
        assert segment("", DOUBLE_PLAIN) == [""]
        assert segment("", SINGLE_PLAIN) == [""]

    def test_round_trip_reconstructs_content(self):
        """Joining double-split blocks with the delimiter restores the input."""
        content = "# Title\n\nIntro text.\n\n\n- a\n- b\n\n> quote\n"
        assert "\n\n".join(segment(content, DOUBLE_PLAIN)) == content

    def test_markdown_markers_untouched(self):
        """Without markdown awareness blockquote spacing is preserved."""
        assert segment(">a\n>  b", DOUBLE_PLAIN) == [">a\n>  b"]


class TestDoubleMarkdown:
    """Tests for the blank-line strategy with markdown refinement."""

    def test_blockquote_normalization(self):
        """Quoted paragraphs regroup with canonical markers."""
        assert segment("> a\n> b\n\n> c", DOUBLE_MD) == ["> a\n> b", "> c"]

    def test_inconsistent_marker_spacing_normalized(self):
        """Different marker spacing on each side yields identical blocks."""
        left = segment(">a\n>    b", DOUBLE_MD)
        right = segment("  > a\n> b  ", DOUBLE_MD)
        assert left == right == ["> a\n> b"]

    def test_empty_quote_line_splits_quote(self):
        """A bare '>' line separates two quoted paragraphs."""
        assert segment("> first\n>\n> second", DOUBLE_MD) == ["> first", "> second"]

    def test_list_block_kept_together(self):
        """List items in one paragraph stay in one block."""
        content = "para one\n\n- item a\n- item b"
        assert segment(content, DOUBLE_MD) == ["para one", "- item a\n- item b"]

    def test_non_quote_lines_kept_verbatim(self):
        """Indentation of ordinary lines is not stripped."""
        assert segment("  indented\ntext", DOUBLE_MD) == ["  indented\ntext"]

    def test_empty_blocks_not_emitted(self):
        """Runs of blank lines do not create empty blocks."""
        assert segment("a\n\n\n\nb", DOUBLE_MD) == ["a", "b"]

    def test_whitespace_only_line_kept(self):
        """A whitespace-only line is not a separator; it stays in the block."""
        assert segment("a\n   \nb", DOUBLE_MD) == ["a\n   \nb"]

    def test_whitespace_only_line_does_not_shift_indices(self):
        """Trailing-space blank lines leave block positions unchanged."""
        assert segment("a\n \nb\n\n> c", DOUBLE_MD) == ["a\n \nb", "> c"]

    def test_empty_document(self):
        """Empty document still yields a single empty block."""
        assert segment("", DOUBLE_MD) == [""]

    def test_mixed_quote_and_text(self):
        """Quote and text lines in one paragraph stay in one block."""
        assert segment("Note:\n>tip", DOUBLE_MD) == ["Note:\n> tip"]


class TestSingleMarkdown:
    """Tests for the line strategy with markdown refinement."""

    def test_lines_unchanged_after_line_split(self):
        """After a line split no piece has a newline left to cut on."""
        content = "text\n- a\n> q"
        assert segment(content, SINGLE_MD) == segment(content, SINGLE_PLAIN)

    def test_split_before_list_item_consumes_newline(self):
        """Newline before a list item is dropped."""
        assert _split_markdown_boundaries("text\n- a\n  - b") == ["text", "- a", "  - b"]

    def test_split_before_blockquote_keeps_newline(self):
        """Newline before a blockquote stays with the quote."""
        assert _split_markdown_boundaries("text\n> q") == ["text", "\n> q"]

    def test_leading_list_item_yields_empty_first_piece(self):
        """A boundary at the very start leaves an empty first piece."""
        assert _split_markdown_boundaries("\n- a") == ["", "- a"]

    def test_leading_blockquote_not_split(self):
        """No empty piece before a quote at the very start."""
        assert _split_markdown_boundaries("\n> q") == ["\n> q"]

    def test_plain_newline_not_a_boundary(self):
        """Ordinary line breaks stay inside the piece."""
        assert _split_markdown_boundaries("a\nb") == ["a\nb"]

    def test_dash_without_space_not_a_list_item(self):
        """'-x' is not a list marker."""
        assert _split_markdown_boundaries("a\n-x") == ["a\n-x"]


class TestNormalizeLine:
    """Tests for single-line normalization."""

    def test_blockquote_prefix_constant(self):
        """Canonical prefix is '> '."""
        assert BLOCKQUOTE_PREFIX == "> "

    def test_quote_payload_reprefixed(self):
        assert _normalize_line("   >   hello  ") == "> hello"

    def test_bare_marker_is_empty(self):
        assert _normalize_line(">") == ""

    def test_plain_line_verbatim(self):
        assert _normalize_line("  keep  ") == "  keep  "

    def test_whitespace_line_verbatim(self):
        assert _normalize_line("   ") == "   "

    def test_empty_line_is_empty(self):
        assert _normalize_line("") == ""

    def test_regroup_flushes_trailing_block(self):
        assert _regroup_block("a\nb") == ["a\nb"]


class TestConfigSpellings:
    """Tests for the accepted config arguments."""

    def test_method_string_with_flag(self):
        assert segment("a\n\nb", "double", False) == ["a", "b"]

    def test_method_enum_with_flag(self):
        assert segment("a\nb", SplitMethod.SINGLE, False) == ["a", "b"]

    def test_flag_overrides_config(self):
        """Explicit markdown flag wins over the config's own flag."""
        assert segment(">a", DOUBLE_MD, False) == [">a"]

    def test_default_is_double_markdown(self):
        assert segment(">a\n\n>b") == ["> a", "> b"]

    def test_invalid_method_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid split method"):
            segment("a", "regex")

    def test_deterministic(self):
        """Repeated calls return identical sequences."""
        content = "x\n\n> a\n>b\n\n- c\n- d"
        for cfg in (DOUBLE_PLAIN, DOUBLE_MD, SINGLE_PLAIN, SINGLE_MD):
            assert segment(content, cfg) == segment(content, cfg)
