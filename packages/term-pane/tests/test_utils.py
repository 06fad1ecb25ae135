"""Tests for term_pane.utils — display width helpers"""
import pytest

from term_pane.utils import char_width, pad_to_width, truncate_to_width, visible_width


class TestCharWidth:
    def test_ascii(self):
        assert char_width("a") == 1

    def test_cjk_is_double(self):
        assert char_width("中") == 2

    def test_fullwidth_latin_is_double(self):
        assert char_width("Ａ") == 2

    def test_combining_mark_is_zero(self):
        assert char_width("\u0301") == 0

    @pytest.mark.parametrize("ch", ["\n", "\t", "\x1b", "\x07"])
    def test_control_chars_are_zero(self, ch):
        assert char_width(ch) == 0


class TestVisibleWidth:
    def test_ascii(self):
        assert visible_width("hello") == 5

    def test_empty(self):
        assert visible_width("") == 0

    def test_unicode_cjk(self):
        assert visible_width("中文") == 4

    def test_mixed(self):
        assert visible_width("a中b") == 4

    def test_combining_sequence(self):
        assert visible_width("e\u0301") == 1

    def test_cached_result_is_stable(self):
        assert visible_width("日本語") == 6
        assert visible_width("日本語") == 6


class TestTruncateToWidth:
    def test_short_string_unchanged(self):
        assert truncate_to_width("hello", 10) == "hello"

    def test_truncates_with_ellipsis(self):
        result = truncate_to_width("hello world", 8)
        assert result == "hello..."

    def test_no_ellipsis(self):
        assert truncate_to_width("hello world", 5, "") == "hello"

    def test_wide_char_not_split(self):
        result = truncate_to_width("中文字", 3, "")
        assert result == "中"

    def test_ellipsis_too_wide_is_dropped(self):
        assert truncate_to_width("hello", 2) == "he"

    def test_zero_width(self):
        assert truncate_to_width("hello", 0) == ""


class TestPadToWidth:
    def test_pads_ascii(self):
        assert pad_to_width("ab", 4) == "ab  "

    def test_pads_by_display_width(self):
        assert pad_to_width("中", 4) == "中  "

    def test_never_cuts(self):
        assert pad_to_width("hello", 3) == "hello"
