"""Tests for term_pane.layout"""
import pytest

from term_pane.layout import compute_layout


class TestComputeLayout:
    def test_fits_without_scrolling(self):
        layout = compute_layout(["hello"], "> ", 5, 2)
        assert layout.visible_lines == ["hello", "> "]
        assert layout.scroll_offset == 0
        assert layout.input_line_start == 1
        assert layout.total_lines == 2

    def test_wrapped_output_pushes_input_start(self):
        layout = compute_layout(["abcdefgh", "xy"], "> ", 3, 10)
        assert layout.input_line_start == 4
        assert layout.visible_lines == ["abc", "def", "gh", "xy", "> "]

    def test_input_wraps_and_comes_last(self):
        layout = compute_layout([], "> abcdef", 4, 10)
        assert layout.input_line_start == 0
        assert layout.visible_lines == ["> ab", "cdef"]
        assert layout.input_line_count == 2

    def test_scrolls_to_show_most_recent(self):
        output = [f"line {i}" for i in range(10)]
        layout = compute_layout(output, "", 80, 3)
        assert layout.total_lines == 11
        assert layout.scroll_offset == 8
        assert layout.visible_lines == ["line 8", "line 9", ""]

    def test_visible_lines_never_exceed_height(self):
        output = [f"line {i}" for i in range(50)]
        for height in range(0, 60, 7):
            layout = compute_layout(output, "> ", 80, height)
            assert len(layout.visible_lines) <= height

    @pytest.mark.parametrize("count,height", [(0, 5), (3, 5), (4, 5), (5, 5), (12, 5)])
    def test_scroll_offset_formula(self, count, height):
        layout = compute_layout(["x"] * count, "> ", 80, height)
        assert layout.scroll_offset == max(0, count + 1 - height)

    def test_zero_height_shows_nothing(self):
        layout = compute_layout(["a", "b"], "> ", 80, 0)
        assert layout.visible_lines == []
        assert layout.scroll_offset == 3

    def test_negative_height_treated_as_zero(self):
        layout = compute_layout(["a"], "> ", 80, -4)
        assert layout.visible_lines == []
        assert layout.scroll_offset == 2

    def test_zero_width_gives_one_empty_line_per_logical_line(self):
        layout = compute_layout(["hello", "world"], "> typed", 0, 10)
        assert layout.visible_lines == ["", "", ""]
        assert layout.input_line_start == 2

    def test_accepts_any_iterable(self):
        layout = compute_layout(iter(["a", "b"]), "> ", 10, 5)
        assert layout.visible_lines == ["a", "b", "> "]

    def test_does_not_mutate_output(self):
        output = ("a" * 20,)
        compute_layout(output, "> ", 5, 2)
        assert output == ("a" * 20,)
