"""Grade normalization.

Maps human-facing grades onto dense ordinal indices, one scale per
modality:

- Boulder: 7 gym color bands, index 1..7
- Route: French grades 4a..9c, index 1..35

Index 0 means "ungraded / unrecognized" on both scales and must be left out
of max and average computations. The two scales are not comparable; the
tagged BoulderGrade / RouteGrade wrappers refuse cross-scale ordering.

Every function here is total: bad or missing input yields 0 or None,
never an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from trainlog.metrics.constants import BOULDER_MODALITY

BOULDER_COLORS: tuple[str, ...] = ("white", "blue", "green", "yellow", "red", "purple", "black")

# Approximate French range per color band. Display only, never used as a
# numeric equivalence.
BOULDER_TO_FRENCH_RANGE: dict[str, str] = {
    "white": "4c–5b",
    "blue": "5b–5c+",
    "green": "5c–6a+",
    "yellow": "6a–6b",
    "red": "6b–6c",
    "purple": "6c–7a",
    "black": "7a–7b+",
}

FRENCH_GRADES: tuple[str, ...] = (
    "4a", "4a+", "4b", "4b+", "4c", "4c+",
    "5a", "5a+", "5b", "5b+", "5c", "5c+",
    "6a", "6a+", "6b", "6b+", "6c", "6c+",
    "7a", "7a+", "7b", "7b+", "7c", "7c+",
    "8a", "8a+", "8b", "8b+", "8c", "8c+",
    "9a", "9a+", "9b", "9b+", "9c",
)

V_TO_FRENCH: dict[str, str] = {
    "V0": "4c",
    "V1": "5a",
    "V2": "5b",
    "V3": "5c",
    "V4": "6a+",
    "V5": "6b+",
    "V6": "6c",
    "V7": "7a",
    "V8": "7a+",
    "V9": "7b",
    "V10": "7b+",
    "V11": "7c",
    "V12": "7c+",
    "V13": "8a",
    "V14": "8a+",
    "V15": "8b",
    "V16": "8b+",
}

UNGRADED_LABEL = "-"

_BOULDER_INDEX = {color: i + 1 for i, color in enumerate(BOULDER_COLORS)}
_FRENCH_INDEX = {grade: i + 1 for i, grade in enumerate(FRENCH_GRADES)}
_DIGITS = re.compile(r"\D")


@dataclass(frozen=True, order=True)
class BoulderGrade:
    """Index on the boulder color scale (0 = ungraded)."""

    index: int

    @property
    def graded(self) -> bool:
        return self.index > 0

    @property
    def label(self) -> str:
        return grade_label(self.index, BOULDER_MODALITY)


@dataclass(frozen=True, order=True)
class RouteGrade:
    """Index on the French route scale (0 = ungraded)."""

    index: int

    @property
    def graded(self) -> bool:
        return self.index > 0

    @property
    def label(self) -> str:
        return grade_label(self.index, "rope")


def color_to_index(color: str | None) -> int:
    """Return the 1-based boulder index of a color band, or 0 if unknown."""
    if not isinstance(color, str):
        return 0
    return _BOULDER_INDEX.get(color.strip().lower(), 0)


def index_to_color(index: int) -> str | None:
    """Return the color band for a boulder index, or None if out of range."""
    if not isinstance(index, int) or index < 1 or index > len(BOULDER_COLORS):
        return None
    return BOULDER_COLORS[index - 1]


def boulder_display_label(color: str | None) -> str:
    """Render a color with its approximate French range, e.g. "Red (≈ 6b–6c)"."""
    color_lower = color.strip().lower() if color else ""
    if not color_lower:
        return "Unknown"
    capitalized = color_lower.capitalize()
    french_range = BOULDER_TO_FRENCH_RANGE.get(color_lower)
    return f"{capitalized} (≈ {french_range})" if french_range else capitalized


def french_to_index(grade: str | None) -> int:
    """Return the 1-based index of a French grade, or 0 if unknown."""
    if not isinstance(grade, str):
        return 0
    return _FRENCH_INDEX.get(grade.strip().lower(), 0)


def index_to_french(index: int) -> str | None:
    """Return the French grade for a route index, or None if out of range."""
    if not isinstance(index, int) or index < 1 or index > len(FRENCH_GRADES):
        return None
    return FRENCH_GRADES[index - 1]


def v_grade_to_index(v_grade: str | None) -> int:
    """Convert a V-grade to its French-scale index (0 if unknown)."""
    if not isinstance(v_grade, str):
        return 0
    french = V_TO_FRENCH.get(v_grade.strip().upper())
    return french_to_index(french) if french else 0


def grade_to_index(grade_value: str | None, grade_system: str | None, color_band: str | None = None) -> int:
    """Resolve any recorded grade to an index.

    A color band always wins. Otherwise the grade system picks the table:
    french and font use the French table, v-grade converts through the
    V-to-French table, yds is approximated from its numeric part. Unknown
    systems fall back to the French table.
    """
    if not grade_value and not color_band:
        return 0
    if color_band:
        return color_to_index(color_band)

    system = (grade_system or "").lower()
    if system == "v-grade":
        return v_grade_to_index(grade_value)
    if system == "yds":
        digits = _DIGITS.sub("", grade_value or "")
        return max(0, int(digits) - 8) if digits else 0
    return french_to_index(grade_value)


def grade_label(index: int, modality: str) -> str:
    """Human label for an index on the scale selected by modality ("-" if ungraded)."""
    if index <= 0:
        return UNGRADED_LABEL
    if modality == BOULDER_MODALITY:
        color = index_to_color(index)
        return boulder_display_label(color) if color else UNGRADED_LABEL
    return index_to_french(index) or UNGRADED_LABEL


def climb_grade(color_band: str | None, grade_value: str | None, modality: str) -> BoulderGrade | RouteGrade:
    """Tagged grade of a climb for the given modality.

    Boulders are graded by color band, routes by their French grade.
    """
    if modality == BOULDER_MODALITY:
        return BoulderGrade(color_to_index(color_band))
    return RouteGrade(french_to_index(grade_value))
