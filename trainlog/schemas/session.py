"""Session and climb records as returned by the backend.

Field names follow the backend columns (snake_case). Records are read-only
inputs to the analytics engines; missing numeric fields stay None and are
defaulted where they are consumed.
"""

from datetime import date, datetime
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trainlog.errors import SessionParseError

Discipline = Literal["boulder", "route"]
SessionType = Literal["boulder", "rope", "hybrid", "training", "running"]
Modality = Literal["boulder", "autobelay", "rope"]


class ClimbRecord(BaseModel):
    """A single boulder problem or route logged within a session.

    Attributes:
        discipline: "boulder" (graded by color band) or "route" (French grade)
        color_band: Boulder color, meaningful only for boulders
        grade_value: Grade string, meaningful only for routes
        grade_system: Grade system of grade_value (french, v-grade, font, yds)
        sent: Climb was completed
        flash: Climb was completed on the first attempt
        attempts: Number of attempts

    flash => sent => attempts == 1 is expected from producers but never
    enforced here.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    session_id: str | None = None
    discipline: Discipline
    color_band: str | None = None
    grade_value: str | None = None
    grade_system: str | None = None
    sent: bool = False
    flash: bool = False
    attempts: int = 1

    @field_validator("sent", "flash", mode="before")
    @classmethod
    def null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("attempts", mode="before")
    @classmethod
    def null_attempts_is_one(cls, value: Any) -> Any:
        return 1 if value is None else value


class SessionRecord(BaseModel):
    """A single day's training activity.

    `date` is the only required temporal anchor. `session_type` is kept as a
    free string so legacy values (strength, hangboard, ...) still parse;
    the analytics only act on the known types.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    date: date
    session_type: str = "training"
    duration_min: int | None = None
    time_min: int | None = None  # legacy running duration column
    rpe_1_10: int | None = None
    distance_km: float | None = None
    elevation_gain_m: float | None = None
    climbs: list[ClimbRecord] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def truncate_to_day(cls, value: Any) -> Any:
        """Accept datetimes and ISO timestamps, keeping only the calendar day."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10 and value[10] in "T ":
            return value[:10]
        return value

    @field_validator("session_type", mode="before")
    @classmethod
    def normalize_session_type(cls, value: Any) -> Any:
        if value is None:
            return "training"
        if isinstance(value, str):
            return value.strip().lower() or "training"
        return value

    @field_validator("climbs", mode="before")
    @classmethod
    def null_climbs_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def effective_duration_min(self) -> int:
        """Recorded duration, falling back to the legacy time column, else 0."""
        return self.duration_min or self.time_min or 0


def parse_sessions(rows: list[dict[str, Any]], *, strict: bool = False) -> list[SessionRecord]:
    """Validate raw backend rows into session records.

    Args:
        rows: Raw rows (one dict per session, climbs nested under "climbs")
        strict: If True, the first invalid row raises SessionParseError.
                Otherwise invalid rows are logged and skipped.

    Returns:
        Valid session records, in input order
    """
    sessions: list[SessionRecord] = []
    skipped = 0

    for index, row in enumerate(rows):
        try:
            sessions.append(SessionRecord.model_validate(row))
        except ValidationError as e:
            if strict:
                raise SessionParseError(index, e.errors()) from e
            skipped += 1
            row_id = row.get("id") if isinstance(row, dict) else None
            logger.warning(f"Skipping invalid session row index={index} id={row_id}: {e.error_count()} error(s)")

    if skipped:
        logger.info(f"Parsed {len(sessions)} sessions, skipped {skipped} invalid rows")
    return sessions
