"""CLI for the training log analytics.

Developer CLI to run the analytics offline on a JSON export of session rows
(one object per session, climbs nested under "climbs"). Every command takes
an optional --now so reports are reproducible.
"""

import json
import sys
from datetime import date, datetime
from pathlib import Path

import typer
from loguru import logger
from pydantic import BaseModel
from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from trainlog.analysis.insights import generate_climb_insights, generate_running_insights
from trainlog.analysis.trends import compare_values
from trainlog.config.settings import settings
from trainlog.core.logger import setup_logger
from trainlog.errors import InvalidParameterError, TrainLogError
from trainlog.metrics.monthly_comparison import calculate_monthly_climb_metrics, calculate_monthly_running_metrics
from trainlog.metrics.training_load import LOAD_STATUS_DESCRIPTIONS, calculate_acwr_history, calculate_load_metrics
from trainlog.metrics.weekly_aggregation import calculate_climb_metrics, calculate_running_metrics
from trainlog.schemas.session import SessionRecord, parse_sessions
from trainlog.utils.rounding import round_half_up

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="trainlog",
    help="Training log analytics - climbing progression, running volume and training load",
    add_completion=False,
)

VALID_MODALITIES = ("boulder", "autobelay", "rope")
VALID_TABS = ("climb", "running")

STATUS_STYLES = {
    "optimal": "green",
    "caution": "yellow",
    "danger": "red",
    "undertraining": "blue",
}


def _setup_logging(debug: bool = False) -> None:
    setup_logger(debug=debug)


def _resolve_now(now: str | None) -> date:
    if not now:
        return datetime.now().date()
    try:
        return date.fromisoformat(now[:10])
    except ValueError as e:
        raise InvalidParameterError("now", now, "expected an ISO date (YYYY-MM-DD)") from e


def _load_sessions(path: Path) -> list[SessionRecord]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidParameterError("file", str(path), f"cannot be read ({e.strerror})") from e
    except json.JSONDecodeError as e:
        raise InvalidParameterError("file", str(path), f"is not valid JSON (line {e.lineno})") from e

    if isinstance(raw, dict) and isinstance(raw.get("sessions"), list):
        raw = raw["sessions"]
    if not isinstance(raw, list):
        raise InvalidParameterError("file", str(path), "expected a list of session rows")

    sessions = parse_sessions(raw)
    logger.info(f"Loaded {len(sessions)} sessions from {path}")
    return sessions


def _check_choice(name: str, value: str, choices: tuple[str, ...]) -> str:
    normalized = value.strip().lower()
    if normalized not in choices:
        raise InvalidParameterError(name, value, f"expected one of {', '.join(choices)}")
    return normalized


def _check_weeks(weeks: int | None) -> int:
    resolved = settings.weeks_back if weeks is None else weeks
    if resolved < 1:
        raise InvalidParameterError("weeks", resolved, "must be >= 1")
    return resolved


def _check_goal(goal: float | None) -> float:
    resolved = settings.weekly_goal_km if goal is None else goal
    if resolved < 0:
        raise InvalidParameterError("goal", resolved, "must be >= 0")
    return resolved


def _print_json(records: BaseModel | list[BaseModel] | dict) -> None:
    if isinstance(records, BaseModel):
        payload = records.model_dump(mode="json")
    elif isinstance(records, list):
        payload = [r.model_dump(mode="json") for r in records]
    else:
        payload = records
    console.print(JSON(json.dumps(payload)))


def _fail(error: TrainLogError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def climb(
    file: Path = typer.Argument(..., help="JSON export of session rows"),
    modality: str = typer.Option("boulder", "--modality", "-m", help="boulder, autobelay or rope"),
    weeks: int | None = typer.Option(None, "--weeks", "-w", help="Number of weeks (default: WEEKS_BACK)"),
    now: str | None = typer.Option(None, "--now", help="Reference date (YYYY-MM-DD), default today"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON records"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Weekly climbing progression for one modality."""
    _setup_logging(debug)
    try:
        modality = _check_choice("modality", modality, VALID_MODALITIES)
        metrics = calculate_climb_metrics(_load_sessions(file), modality, _resolve_now(now), _check_weeks(weeks))
    except TrainLogError as e:
        _fail(e)
        return

    if as_json:
        _print_json(metrics)
        return

    table = Table(title=f"Climbing - {modality}")
    for column in ("Week", "Max sent", "Max tried", "Avg", "Attempts", "Tops", "Flash", "Hard", "Min"):
        table.add_column(column)
    for m in metrics:
        table.add_row(
            m.week_label,
            m.max_sent_label,
            m.max_tried_label,
            m.avg_weighted_label,
            str(m.total_attempts),
            str(m.sent_count),
            str(m.flash_count),
            str(m.hard_attempts),
            str(m.total_duration_min),
        )
    console.print(table)


@app.command()
def running(
    file: Path = typer.Argument(..., help="JSON export of session rows"),
    goal: float | None = typer.Option(None, "--goal", "-g", help="Weekly goal in km (default: WEEKLY_GOAL_KM)"),
    weeks: int | None = typer.Option(None, "--weeks", "-w", help="Number of weeks (default: WEEKS_BACK)"),
    now: str | None = typer.Option(None, "--now", help="Reference date (YYYY-MM-DD), default today"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON records"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Weekly running volume, load and goal progress."""
    _setup_logging(debug)
    try:
        goal_km = _check_goal(goal)
        metrics = calculate_running_metrics(_load_sessions(file), goal_km, _resolve_now(now), _check_weeks(weeks))
    except TrainLogError as e:
        _fail(e)
        return

    if as_json:
        _print_json(metrics)
        return

    table = Table(title=f"Running - goal {goal_km:g} km")
    for column in ("Week", "Km", "Goal %", "Time", "D+ m", "Load", "Delta %", "Runs"):
        table.add_column(column)
    for m in metrics:
        table.add_row(
            m.week_label,
            f"{m.weekly_distance_km:.1f}",
            f"{round_half_up(m.goal_progress_pct)}%",
            f"{m.weekly_time_min // 60}h {m.weekly_time_min % 60}m",
            str(round_half_up(m.weekly_elevation_gain_m)),
            str(m.weekly_load),
            f"{m.distance_delta_pct:+.0f}",
            str(m.session_count),
        )
    console.print(table)


@app.command()
def load(
    file: Path = typer.Argument(..., help="JSON export of session rows"),
    history_weeks: int | None = typer.Option(None, "--history", help="Trend points (default: ACWR_HISTORY_WEEKS)"),
    now: str | None = typer.Option(None, "--now", help="Reference date (YYYY-MM-DD), default today"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON records"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Acute:chronic workload ratio, risk zone and history."""
    _setup_logging(debug)
    try:
        sessions = _load_sessions(file)
        reference = _resolve_now(now)
        points = history_weeks if history_weeks is not None else settings.acwr_history_weeks
        if points < 1:
            raise InvalidParameterError("history", points, "must be >= 1")
        metrics = calculate_load_metrics(sessions, reference)
        history = calculate_acwr_history(sessions, reference, points)
    except TrainLogError as e:
        _fail(e)
        return

    if as_json:
        _print_json({"current": metrics.model_dump(mode="json"), "history": [p.model_dump(mode="json") for p in history]})
        return

    style = STATUS_STYLES[metrics.status]
    console.print(
        Panel(
            f"ACWR [bold]{metrics.acwr:.2f}[/bold] - [{style}]{metrics.status}[/{style}] ({metrics.trend})\n"
            f"Acute {metrics.acute:.0f} | Chronic {metrics.chronic:.0f}\n"
            f"{LOAD_STATUS_DESCRIPTIONS[metrics.status]}",
            title="Training load",
        )
    )

    table = Table(title="ACWR history")
    for column in ("Week", "ACWR", "Acute", "Chronic"):
        table.add_column(column)
    for p in history:
        table.add_row(p.week_label, f"{p.acwr:.2f}", str(p.acute), str(p.chronic))
    console.print(table)


@app.command()
def insights(
    file: Path = typer.Argument(..., help="JSON export of session rows"),
    tab: str = typer.Option("climb", "--tab", "-t", help="climb or running"),
    modality: str = typer.Option("boulder", "--modality", "-m", help="boulder, autobelay or rope"),
    goal: float | None = typer.Option(None, "--goal", "-g", help="Weekly goal in km (default: WEEKLY_GOAL_KM)"),
    now: str | None = typer.Option(None, "--now", help="Reference date (YYYY-MM-DD), default today"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON records"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Guidance for the current week."""
    _setup_logging(debug)
    try:
        tab = _check_choice("tab", tab, VALID_TABS)
        sessions = _load_sessions(file)
        reference = _resolve_now(now)
        if tab == "climb":
            items = generate_climb_insights(sessions, _check_choice("modality", modality, VALID_MODALITIES), reference)
        else:
            items = generate_running_insights(sessions, _check_goal(goal), reference)
    except TrainLogError as e:
        _fail(e)
        return

    if as_json:
        _print_json(items)
        return

    styles = {"info": "dim", "warning": "yellow", "success": "green"}
    for item in items:
        console.print(f"[{styles[item.kind]}]- {item.text}[/{styles[item.kind]}]", soft_wrap=True)


@app.command()
def monthly(
    file: Path = typer.Argument(..., help="JSON export of session rows"),
    months: int = typer.Option(6, "--months", help="Number of calendar months"),
    now: str | None = typer.Option(None, "--now", help="Reference date (YYYY-MM-DD), default today"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON records"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Month-over-month climbing and running comparison."""
    _setup_logging(debug)
    try:
        if months < 1:
            raise InvalidParameterError("months", months, "must be >= 1")
        sessions = _load_sessions(file)
        reference = _resolve_now(now)
        climbing = calculate_monthly_climb_metrics(sessions, reference, months)
        runs = calculate_monthly_running_metrics(sessions, reference, months)
    except TrainLogError as e:
        _fail(e)
        return

    if as_json:
        _print_json({"climb": [m.model_dump(mode="json") for m in climbing], "running": [m.model_dump(mode="json") for m in runs]})
        return

    table = Table(title="Monthly comparison")
    for column in ("Month", "Boulder max", "Route max", "Climb sessions", "Km", "Runs", "Pace min/km"):
        table.add_column(column)
    for c, r in zip(climbing, runs, strict=True):
        table.add_row(
            c.month,
            c.boulder_max_sent_label,
            c.route_max_sent_label,
            str(c.climb_sessions),
            f"{r.total_km:.1f}",
            str(r.sessions),
            f"{r.avg_pace:.2f}" if r.avg_pace else "-",
        )
    console.print(table)

    if len(climbing) >= 2:
        console.print(
            f"Boulder: {compare_values(climbing[-1].boulder_max_sent, climbing[-2].boulder_max_sent)} | "
            f"Route: {compare_values(climbing[-1].route_max_sent, climbing[-2].route_max_sent)} | "
            f"Running: {compare_values(runs[-1].total_km, runs[-2].total_km)}"
        )


def main() -> None:
    """Console script entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
