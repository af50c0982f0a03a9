"""
Tests for data models.
"""

import pytest
from pydantic import ValidationError

from responsive_srcset.models import BreakpointSet, SrcsetResult, TagOptions


def test_from_widths_sorts_ascending():
    """Explicit widths are sorted."""
    breakpoints = BreakpointSet.from_widths([800, 200, 400])
    assert breakpoints.widths == (200, 400, 800)


def test_from_widths_keeps_duplicates_and_non_positive():
    """Explicit widths are neither deduplicated nor validated."""
    widths = [300, 0, 300, -50, 100]
    breakpoints = BreakpointSet.from_widths(widths)

    assert breakpoints.widths == (-50, 0, 100, 300, 300)
    assert sorted(breakpoints.widths) == sorted(widths)


def test_from_range_single_image():
    breakpoints = BreakpointSet.from_range(100, 100, 1)
    assert breakpoints.widths == (100,)


def test_from_range_single_image_ignores_max():
    """With one image the step is never applied."""
    breakpoints = BreakpointSet.from_range(100, 900, 1)
    assert breakpoints.widths == (100,)


def test_from_range_even_steps():
    breakpoints = BreakpointSet.from_range(100, 500, 5)
    assert breakpoints.widths == (100, 200, 300, 400, 500)


def test_from_range_three_images():
    # step = 250 / 2 = 125
    breakpoints = BreakpointSet.from_range(50, 300, 3)
    assert breakpoints.widths == (50, 175, 300)


def test_from_range_rounds_step_to_nearest():
    # step = 100 / 3 = 33.33 -> 33
    breakpoints = BreakpointSet.from_range(100, 200, 4)
    assert breakpoints.widths == (100, 133, 166, 199)


def test_from_range_rounds_half_up():
    # step = 5 / 2 = 2.5 -> 3
    breakpoints = BreakpointSet.from_range(0, 5, 3)
    assert breakpoints.widths == (0, 3, 6)


def test_from_range_length_matches_count():
    for count in range(1, 10):
        assert len(BreakpointSet.from_range(320, 1920, count).widths) == count


def test_from_range_inverted_bounds_not_validated():
    """A descending range produces descending widths rather than an error."""
    breakpoints = BreakpointSet.from_range(500, 100, 3)
    assert breakpoints.widths == (500, 300, 100)


@pytest.mark.parametrize("count", [0, -1, -5])
def test_from_range_non_positive_count_is_empty(count):
    breakpoints = BreakpointSet.from_range(100, 500, count)
    assert breakpoints.widths == ()
    assert breakpoints.is_empty()


def test_sizes_defaults_to_false():
    assert not BreakpointSet.from_widths([100]).has_sizes()
    assert not BreakpointSet.from_range(100, 200, 2).has_sizes()


def test_with_sizes_returns_new_set():
    """Toggling sizes leaves the original set untouched."""
    original = BreakpointSet.from_widths([200, 400])
    with_sizes = original.with_sizes(True)

    assert with_sizes.has_sizes()
    assert not original.has_sizes()
    assert with_sizes.widths == original.widths
    assert not with_sizes.with_sizes(False).has_sizes()


def test_breakpoint_set_is_frozen():
    breakpoints = BreakpointSet.from_widths([200])
    with pytest.raises(ValidationError):
        breakpoints.sizes = True


def test_generate_sizes():
    breakpoints = BreakpointSet.from_widths([400, 200])
    assert breakpoints.generate_sizes() == "(max-width: 200px) 200px, (max-width: 400px) 400px"


def test_generate_sizes_empty():
    assert BreakpointSet().generate_sizes() == ""


def test_srcset_result_fields():
    result = SrcsetResult(srcset="a 100w", largest_url="a")
    assert result.srcset == "a 100w"
    assert result.largest_url == "a"


def test_tag_options_defaults():
    options = TagOptions()
    assert options.attributes == {}
    assert options.srcset is None


def test_tag_options_builders_copy():
    """Builder methods return new options and copy the attribute map."""
    attributes = {"alt": "A photo"}
    breakpoints = BreakpointSet.from_widths([200])

    options = TagOptions().with_attributes(attributes).with_srcset(breakpoints)
    attributes["alt"] = "changed"

    assert options.attributes == {"alt": "A photo"}
    assert options.srcset == breakpoints
    assert TagOptions().srcset is None
