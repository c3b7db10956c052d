"""Tests for grade normalization.

Both scales must be total (never raise), round-trip over their fixed
vocabulary and be strictly ordered.
"""

import pytest

from trainlog.metrics.grades import (
    BOULDER_COLORS,
    FRENCH_GRADES,
    BoulderGrade,
    RouteGrade,
    boulder_display_label,
    climb_grade,
    color_to_index,
    french_to_index,
    grade_label,
    grade_to_index,
    index_to_color,
    index_to_french,
    v_grade_to_index,
)


@pytest.mark.parametrize("color", BOULDER_COLORS)
def test_boulder_color_round_trip(color):
    """Every color maps to an index and back to itself."""
    assert index_to_color(color_to_index(color)) == color


@pytest.mark.parametrize("grade", FRENCH_GRADES)
def test_french_grade_round_trip(grade):
    """Every French grade maps to an index and back to itself."""
    assert index_to_french(french_to_index(grade)) == grade


def test_french_scale_has_35_grades():
    assert len(FRENCH_GRADES) == 35
    assert FRENCH_GRADES[0] == "4a"
    assert FRENCH_GRADES[-1] == "9c"


def test_unknown_and_null_grades_map_to_zero():
    """Lookups are total: null or unknown input gives index 0."""
    assert color_to_index(None) == 0
    assert color_to_index("not-a-color") == 0
    assert color_to_index("") == 0
    assert french_to_index(None) == 0
    assert french_to_index("10z") == 0
    assert french_to_index("") == 0


def test_out_of_range_index_gives_none():
    assert index_to_color(0) is None
    assert index_to_color(8) is None
    assert index_to_color(-1) is None
    assert index_to_french(0) is None
    assert index_to_french(36) is None


def test_boulder_colors_are_strictly_ordered():
    indices = [color_to_index(c) for c in ("white", "blue", "green", "yellow", "red", "purple", "black")]
    assert indices == [1, 2, 3, 4, 5, 6, 7]


def test_french_grades_are_strictly_ordered():
    indices = [french_to_index(g) for g in FRENCH_GRADES]
    assert all(a < b for a, b in zip(indices, indices[1:]))


def test_lookup_is_case_insensitive():
    assert color_to_index("RED") == 5
    assert color_to_index(" Purple ") == 6
    assert french_to_index("6A+") == french_to_index("6a+") == 14
    assert french_to_index(" 7b ") == 21


def test_boulder_display_label():
    assert boulder_display_label("red") == "Red (≈ 6b–6c)"
    assert boulder_display_label("BLACK") == "Black (≈ 7a–7b+)"
    assert boulder_display_label("orange") == "Orange"
    assert boulder_display_label(None) == "Unknown"
    assert boulder_display_label(" red ") == "Red (≈ 6b–6c)"
    assert boulder_display_label("  ") == "Unknown"


def test_grade_label_per_modality():
    assert grade_label(0, "boulder") == "-"
    assert grade_label(0, "rope") == "-"
    assert grade_label(5, "boulder") == "Red (≈ 6b–6c)"
    assert grade_label(13, "rope") == "6a"
    assert grade_label(13, "autobelay") == "6a"
    assert grade_label(99, "rope") == "-"


def test_v_grade_conversion():
    assert v_grade_to_index("V0") == french_to_index("4c")
    assert v_grade_to_index("v5") == french_to_index("6b+")
    assert v_grade_to_index("V17") == 0
    assert v_grade_to_index(None) == 0


def test_grade_to_index_by_system():
    """Color band wins; otherwise the grade system selects the table."""
    assert grade_to_index("7a", "french", color_band="green") == 3
    assert grade_to_index("7a", "french") == 19
    assert grade_to_index("7a", "font") == 19
    assert grade_to_index("V4", "v-grade") == french_to_index("6a+")
    assert grade_to_index("5.12", "yds") == 504
    assert grade_to_index("6b", None) == 15
    assert grade_to_index(None, "french") == 0
    assert grade_to_index("", None, None) == 0


def test_tagged_grades_compare_within_scale_only():
    """Indices of the two scales are not comparable."""
    assert BoulderGrade(3) < BoulderGrade(5)
    assert RouteGrade(20) > RouteGrade(10)
    assert BoulderGrade(3) != RouteGrade(3)
    with pytest.raises(TypeError):
        BoulderGrade(3) < RouteGrade(5)  # noqa: B015


def test_climb_grade_selects_scale_by_modality():
    assert climb_grade("red", "7a", "boulder") == BoulderGrade(5)
    assert climb_grade("red", "7a", "rope") == RouteGrade(19)
    assert climb_grade(None, None, "autobelay") == RouteGrade(0)
    assert not RouteGrade(0).graded
    assert BoulderGrade(5).label == "Red (≈ 6b–6c)"
    assert RouteGrade(19).label == "7a"
