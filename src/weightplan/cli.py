"""CLI interface using Typer."""

from __future__ import annotations

import json
import sqlite3
from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from weightplan.config import configure_logging, get_settings, reload_settings
from weightplan.db import get_db
from weightplan.tracking.models import Measurement, UserProfile
from weightplan.tracking.queries import MeasurementStore, ProfileStore

app = typer.Typer(
    help="Project weight change from a daily calorie balance",
    no_args_is_help=True,
)
console = Console()

# Subcommand groups
user_app = typer.Typer(help="Manage the user profile")
goal_app = typer.Typer(help="Manage daily habit goals")
log_app = typer.Typer(help="Log actual weight, calories and completed goals")
config_app = typer.Typer(help="Show or initialize configuration")

app.add_typer(user_app, name="user")
user_app.add_typer(goal_app, name="goal")
app.add_typer(log_app, name="log")
app.add_typer(config_app, name="config")

NO_PROFILE_HINT = (
    "Create one with: weightplan user create --age 30 --sex male --weight 200 "
    "--height-feet 5 --height-inches 10 --calories 1800 --goal 180"
)


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def ensure_tables() -> None:
    """Create the storage tables on first use."""
    get_db().ensure_schema()


def wants_json(flag: Optional[bool]) -> bool:
    """Resolve --json/--table, falling back to the configured output format."""
    if flag is not None:
        return flag
    return get_settings().defaults.output_format == "json"


def parse_date_option(value: Optional[str], command: str, json_output: bool) -> date:
    """Parse a YYYY-MM-DD option, defaulting to today."""
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        fail(command, f"Invalid date '{value}' (expected YYYY-MM-DD)", json_output)


def fail(
    command: str,
    message: str,
    json_output: bool,
    suggestion: Optional[str] = None,
) -> NoReturn:
    """Report an error in the requested format and exit with code 1."""
    if json_output:
        response = {"success": False, "command": command, "errors": [message]}
        if suggestion:
            response["suggestions"] = [suggestion]
        output_json(response)
    else:
        console.print(f"[red]{message}[/red]")
        if suggestion:
            console.print(suggestion)
    raise typer.Exit(1)


def require_profile(
    conn: sqlite3.Connection, command: str, json_output: bool
) -> UserProfile:
    """Load the stored profile or exit with a friendly message."""
    profile = ProfileStore.load(conn)
    if profile is None:
        fail(command, "No user profile found", json_output, NO_PROFILE_HINT)
    return profile


def format_weight(weight: Optional[float]) -> str:
    return f"{weight:.1f}" if weight is not None else "-"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events"),
) -> None:
    """Configure logging before any command runs."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.logging.level)


@user_app.callback()
def user_callback() -> None:
    """Ensure storage tables exist before any user command."""
    ensure_tables()


@log_app.callback()
def log_callback() -> None:
    """Ensure storage tables exist before any log command."""
    ensure_tables()


# ============================================================================
# User Profile Commands
# ============================================================================


@user_app.command("create")
def user_create(
    age: int = typer.Option(..., "--age", help="Age in years"),
    sex: str = typer.Option(..., "--sex", help="Sex (male/female)"),
    weight: float = typer.Option(..., "--weight", help="Current weight in lbs"),
    height_feet: int = typer.Option(..., "--height-feet", help="Height, feet part"),
    height_inches: int = typer.Option(0, "--height-inches", help="Height, inches part"),
    calories: float = typer.Option(..., "--calories", help="Calories eaten per day"),
    exercise: float = typer.Option(
        0, "--exercise", help="Calories burned by exercise per day"
    ),
    goal: float = typer.Option(..., "--goal", help="Goal weight in lbs"),
    start: Optional[str] = typer.Option(
        None, "--start", help="Start date (YYYY-MM-DD, default: today)"
    ),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Create (or replace) the user profile."""
    json_output = wants_json(json_output)
    start_date = parse_date_option(start, "user create", json_output)

    try:
        profile = UserProfile(
            age=age,
            weight_lbs=weight,
            height_feet=height_feet,
            height_inches=height_inches,
            sex=sex,  # type: ignore[arg-type]
            calories_eaten=calories,
            calories_burned_exercise=exercise,
            goal_weight_lbs=goal,
            start_date=start_date,
        )
    except ValueError as e:
        fail("user create", str(e), json_output)

    db = get_db()
    with db.get_connection() as conn:
        ProfileStore.save(conn, profile)

    if json_output:
        output_json({
            "success": True,
            "command": "user create",
            "data": profile.to_dict(),
            "human_summary": f"Created profile starting {start_date.isoformat()}",
        })
    else:
        console.print(
            f"[green]Created profile starting {start_date.isoformat()}[/green]"
        )


@user_app.command("show")
def user_show(
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Show the user profile."""
    from weightplan.projection import compute_bmr, compute_net_calories

    json_output = wants_json(json_output)

    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "user show", json_output)

    bmr = compute_bmr(profile)
    net = compute_net_calories(profile)

    if json_output:
        output_json({
            "success": True,
            "command": "user show",
            "data": {**profile.to_dict(), "bmr": bmr, "net_calories": net},
            "human_summary": (
                f"{profile.sex.value}, {profile.age}y, "
                f"{profile.height_feet}'{profile.height_inches}\", "
                f"{profile.weight_lbs}lbs -> {profile.goal_weight_lbs}lbs"
            ),
        })
    else:
        console.print("[bold]User Profile[/bold]")
        console.print(f"  Age: {profile.age}")
        console.print(f"  Sex: {profile.sex.value}")
        console.print(f"  Height: {profile.height_feet}'{profile.height_inches}\"")
        console.print(f"  Weight: {profile.weight_lbs} lbs")
        console.print(f"  Goal weight: {profile.goal_weight_lbs} lbs")
        console.print(f"  Calories eaten: {profile.calories_eaten:.0f} kcal/day")
        console.print(f"  Exercise: {profile.calories_burned_exercise:.0f} kcal/day")
        console.print(f"  Start date: {profile.start_date}")
        console.print(f"  BMR: {bmr} kcal/day")
        console.print(f"  Net: {net:+.0f} kcal/day")
        if profile.daily_goals:
            console.print(f"  Daily goals: {', '.join(profile.daily_goals)}")


@user_app.command("update")
def user_update(
    age: Optional[int] = typer.Option(None, "--age", help="Update age"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Update starting weight"),
    calories: Optional[float] = typer.Option(None, "--calories", help="Update calories eaten"),
    exercise: Optional[float] = typer.Option(None, "--exercise", help="Update exercise calories"),
    goal: Optional[float] = typer.Option(None, "--goal", help="Update goal weight"),
    start: Optional[str] = typer.Option(None, "--start", help="Update start date"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Update fields of the user profile."""
    json_output = wants_json(json_output)
    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "user update", json_output)

        if age is not None:
            profile.age = age
        if weight is not None:
            profile.weight_lbs = weight
        if calories is not None:
            profile.calories_eaten = calories
        if exercise is not None:
            profile.calories_burned_exercise = exercise
        if goal is not None:
            profile.goal_weight_lbs = goal
        if start is not None:
            profile.start_date = parse_date_option(start, "user update", json_output)

        ProfileStore.save(conn, profile)

    if json_output:
        output_json({
            "success": True,
            "command": "user update",
            "data": profile.to_dict(),
            "human_summary": "Profile updated",
        })
    else:
        console.print("[green]Profile updated[/green]")


@user_app.command("clear")
def user_clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Delete the user profile."""
    json_output = wants_json(json_output)
    if not yes and not json_output:
        typer.confirm("Delete the user profile?", abort=True)

    db = get_db()
    with db.get_connection() as conn:
        existed = ProfileStore.clear(conn)

    if json_output:
        output_json({
            "success": True,
            "command": "user clear",
            "data": {"deleted": existed},
            "human_summary": "Profile deleted" if existed else "No profile to delete",
        })
    elif existed:
        console.print("[green]Profile deleted[/green]")
    else:
        console.print("[yellow]No profile to delete[/yellow]")


@goal_app.command("add")
def goal_add(
    label: str = typer.Argument(..., help="Goal text, e.g. 'Drink 2L water'"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Add a daily goal."""
    json_output = wants_json(json_output)
    label = label.strip()
    if not label:
        fail("user goal add", "Goal text cannot be empty", json_output)

    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "user goal add", json_output)
        if label not in profile.daily_goals:
            profile.daily_goals.append(label)
            ProfileStore.save(conn, profile)

    if json_output:
        output_json({
            "success": True,
            "command": "user goal add",
            "data": {"daily_goals": profile.daily_goals},
            "human_summary": f"Added goal '{label}'",
        })
    else:
        console.print(f"[green]Added goal:[/green] {label}")


@goal_app.command("remove")
def goal_remove(
    label: str = typer.Argument(..., help="Goal text to remove"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Remove a daily goal."""
    json_output = wants_json(json_output)
    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "user goal remove", json_output)
        if label not in profile.daily_goals:
            fail("user goal remove", f"No daily goal named '{label}'", json_output)
        profile.daily_goals.remove(label)
        ProfileStore.save(conn, profile)

    if json_output:
        output_json({
            "success": True,
            "command": "user goal remove",
            "data": {"daily_goals": profile.daily_goals},
            "human_summary": f"Removed goal '{label}'",
        })
    else:
        console.print(f"[green]Removed goal:[/green] {label}")


# ============================================================================
# Projection Commands
# ============================================================================


@app.command()
def project(
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Show the weekly weight projection with logged actuals."""
    from weightplan.projection import compare_weeks, current_week, project_weight

    json_output = wants_json(json_output)

    ensure_tables()
    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "project", json_output)
        projections = project_weight(profile)
        comparisons = compare_weeks(
            profile,
            projections,
            lambda r: MeasurementStore.most_recent_weight_in_range(
                conn, r.start_date, r.end_date
            ),
        )

    this_week = current_week(profile, projections)

    if json_output:
        output_json({
            "success": True,
            "command": "project",
            "data": {
                "current_week": this_week,
                "weeks": [
                    {**proj.to_dict(), **cmp.to_dict()}
                    for proj, cmp in zip(projections, comparisons)
                ],
            },
            "human_summary": (
                f"{len(projections)} weeks, ending at "
                f"{projections[-1].end_weight:.1f} lbs"
            ),
        })
        return

    table = Table(title="Weekly Projection")
    table.add_column("Week", justify="right")
    table.add_column("Dates", style="cyan")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("", justify="right")

    for proj, cmp in zip(projections, comparisons):
        status = ""
        if cmp.on_track is True:
            status = f"[green]{cmp.difference:+.1f}[/green]"
        elif cmp.on_track is False:
            status = f"[red]{cmp.difference:+.1f}[/red]"

        week_label = str(proj.week)
        if proj.week == this_week:
            week_label = f"[bold]>{proj.week}[/bold]"

        table.add_row(
            week_label,
            f"{cmp.range.start_date.isoformat()} .. {cmp.range.end_date.isoformat()}",
            format_weight(proj.start_weight),
            format_weight(proj.end_weight),
            format_weight(cmp.actual_weight),
            status,
        )

    console.print(table)


@app.command()
def week(
    week_number: int = typer.Argument(..., min=1, help="Week number (1-based)"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Show the day-by-day projection for one week with logged actuals."""
    from weightplan.projection import project_daily

    json_output = wants_json(json_output)

    ensure_tables()
    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "week", json_output)
        days = project_daily(profile, week_number)
        actuals = {
            m.date: m
            for m in MeasurementStore.load_range(conn, days[0].date, days[-1].date)
        }

    if json_output:
        output_json({
            "success": True,
            "command": "week",
            "data": {
                "week": week_number,
                "days": [
                    {
                        **d.to_dict(),
                        "actual": (
                            actuals[d.date.isoformat()].to_dict()
                            if d.date.isoformat() in actuals
                            else None
                        ),
                    }
                    for d in days
                ],
            },
            "human_summary": (
                f"Week {week_number}: {days[0].weight:.1f} -> {days[-1].weight:.1f} lbs"
            ),
        })
        return

    table = Table(title=f"Week {week_number} - Daily Breakdown")
    table.add_column("Day", style="cyan")
    table.add_column("Date")
    table.add_column("Projected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Eaten", justify="right")
    table.add_column("Exercise", justify="right")
    if profile.daily_goals:
        table.add_column("Goals")

    for d in days:
        actual = actuals.get(d.date.isoformat())
        row = [
            d.day_name,
            d.date.isoformat(),
            format_weight(d.weight),
            format_weight(actual.weight_lbs if actual else None),
            f"{actual.calories_eaten:.0f}" if actual and actual.calories_eaten is not None else "-",
            (
                f"{actual.calories_burned_exercise:.0f}"
                if actual and actual.calories_burned_exercise is not None
                else "-"
            ),
        ]
        if profile.daily_goals:
            done = set(actual.completed_goals) if actual else set()
            row.append(f"{len(done & set(profile.daily_goals))}/{len(profile.daily_goals)}")
        table.add_row(*row)

    console.print(table)
    change = days[-1].weight - days[0].weight
    console.print(f"Expected change: {change:+.2f} lbs")


@app.command("range")
def week_range(
    week_number: int = typer.Argument(..., min=1, help="Week number (1-based)"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Show the date range covered by a week."""
    from weightplan.projection import resolve_week_range

    json_output = wants_json(json_output)

    ensure_tables()
    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "range", json_output)

    result = resolve_week_range(profile, week_number)

    if json_output:
        output_json({
            "success": True,
            "command": "range",
            "data": {"week": week_number, **result.as_dict(), "days": result.days},
            "human_summary": (
                f"Week {week_number}: {result.start_date.isoformat()} .. "
                f"{result.end_date.isoformat()}"
            ),
        })
    else:
        console.print(
            f"Week {week_number}: [cyan]{result.start_date.isoformat()}[/cyan] .. "
            f"[cyan]{result.end_date.isoformat()}[/cyan] ({result.days} days)"
        )


@app.command()
def summary(
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Show the overview: rate of change, expected end date and progress."""
    from weightplan.projection import summarize

    json_output = wants_json(json_output)

    ensure_tables()
    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "summary", json_output)

    result = summarize(profile)

    if result.goal_reached and result.expected_end_date:
        outlook = f"goal by {result.expected_end_date.isoformat()}"
    else:
        outlook = f"goal not reached within {result.weeks} weeks"

    if json_output:
        output_json({
            "success": True,
            "command": "summary",
            "data": result.to_dict(),
            "human_summary": f"{result.pounds_per_day * 7:+.2f} lbs/week, {outlook}",
        })
        return

    lines = [
        f"Starting weight: {profile.weight_lbs:.1f} lbs",
        f"Goal weight: {profile.goal_weight_lbs:.1f} lbs",
        f"BMR: {result.bmr} kcal/day",
        f"Total burned: {result.total_burned:.0f} kcal/day",
        f"Net: {result.net_calories:+.0f} kcal/day "
        f"({result.pounds_per_day * 7:+.2f} lbs/week)",
    ]
    if result.days_per_pound:
        lines.append(f"Days per pound: {result.days_per_pound:.1f}")
    lines.append(f"Calorie progress: {result.calorie_progress:.0%}")
    if result.goal_reached:
        lines.append(f"Expected: {outlook} (week {result.weeks})")
    else:
        lines.append(f"[yellow]{outlook.capitalize()}[/yellow]")
    if result.current_week:
        lines.append(f"Current week: {result.current_week}")

    console.print(Panel("\n".join(lines), title="Overview"))


# ============================================================================
# Measurement Log Commands
# ============================================================================


@log_app.command("add")
def log_add(
    date_str: Optional[str] = typer.Argument(None, help="Date (YYYY-MM-DD, default: today)"),
    weight: Optional[float] = typer.Option(None, "--weight", "-w", help="Weight in lbs"),
    calories: Optional[float] = typer.Option(None, "--calories", "-c", help="Calories eaten"),
    exercise: Optional[float] = typer.Option(None, "--exercise", "-e", help="Exercise calories"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Log actuals for a day (merged with anything already logged)."""
    json_output = wants_json(json_output)
    day = parse_date_option(date_str, "log add", json_output)

    if weight is None and calories is None and exercise is None:
        fail(
            "log add",
            "Nothing to log",
            json_output,
            "Pass at least one of --weight, --calories, --exercise",
        )
    for name, value in (("weight", weight), ("calories", calories), ("exercise", exercise)):
        if value is not None and value <= 0:
            fail("log add", f"{name} must be positive", json_output)

    db = get_db()
    with db.get_connection() as conn:
        merged = MeasurementStore.save(
            conn,
            Measurement(
                date=day,
                weight_lbs=weight,
                calories_eaten=calories,
                calories_burned_exercise=exercise,
            ),
        )

    if json_output:
        output_json({
            "success": True,
            "command": "log add",
            "data": merged.to_dict(),
            "human_summary": f"Logged {merged.date}",
        })
    else:
        console.print(f"[green]Logged {merged.date}[/green]")
        if merged.weight_lbs is not None:
            console.print(f"  Weight: {merged.weight_lbs:.1f} lbs")
        if merged.calories_eaten is not None:
            console.print(f"  Eaten: {merged.calories_eaten:.0f} kcal")
        if merged.calories_burned_exercise is not None:
            console.print(f"  Exercise: {merged.calories_burned_exercise:.0f} kcal")


@log_app.command("list")
def log_list(
    start: Optional[str] = typer.Option(None, "--from", help="First date (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--to", help="Last date (YYYY-MM-DD)"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """List logged measurements."""
    json_output = wants_json(json_output)
    db = get_db()
    with db.get_connection() as conn:
        if start or end:
            first = parse_date_option(start, "log list", json_output) if start else date.min
            last = parse_date_option(end, "log list", json_output) if end else date.max
            entries = MeasurementStore.load_range(conn, first, last)
        else:
            entries = MeasurementStore.load_all(conn)

    if json_output:
        output_json({
            "success": True,
            "command": "log list",
            "data": {"entries": [e.to_dict() for e in entries]},
            "human_summary": f"{len(entries)} entries",
        })
        return

    if not entries:
        console.print("No measurements logged")
        return

    table = Table(title="Logged Measurements")
    table.add_column("Date", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Eaten", justify="right")
    table.add_column("Exercise", justify="right")
    table.add_column("Completed goals")

    for e in entries:
        table.add_row(
            e.date,
            format_weight(e.weight_lbs),
            f"{e.calories_eaten:.0f}" if e.calories_eaten is not None else "-",
            (
                f"{e.calories_burned_exercise:.0f}"
                if e.calories_burned_exercise is not None
                else "-"
            ),
            ", ".join(e.completed_goals),
        )

    console.print(table)


@log_app.command("delete")
def log_delete(
    date_str: str = typer.Argument(..., help="Date (YYYY-MM-DD)"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Delete the measurement logged for a day."""
    json_output = wants_json(json_output)
    day = parse_date_option(date_str, "log delete", json_output)

    db = get_db()
    with db.get_connection() as conn:
        existed = MeasurementStore.delete(conn, day)

    if not existed:
        fail("log delete", f"No measurement logged for {day.isoformat()}", json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "log delete",
            "data": {"date": day.isoformat()},
            "human_summary": f"Deleted {day.isoformat()}",
        })
    else:
        console.print(f"[green]Deleted {day.isoformat()}[/green]")


@log_app.command("clear")
def log_clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Delete every logged measurement."""
    json_output = wants_json(json_output)
    if not yes and not json_output:
        typer.confirm("Delete all logged measurements?", abort=True)

    db = get_db()
    with db.get_connection() as conn:
        removed = MeasurementStore.clear(conn)

    if json_output:
        output_json({
            "success": True,
            "command": "log clear",
            "data": {"deleted": removed},
            "human_summary": f"Deleted {removed} entries",
        })
    else:
        console.print(f"[green]Deleted {removed} entries[/green]")


@log_app.command("goal")
def log_goal(
    date_str: str = typer.Argument(..., help="Date (YYYY-MM-DD)"),
    label: str = typer.Argument(..., help="Daily goal to mark done (or undo)"),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Toggle completion of a daily goal on a day."""
    json_output = wants_json(json_output)
    day = parse_date_option(date_str, "log goal", json_output)

    db = get_db()
    with db.get_connection() as conn:
        profile = require_profile(conn, "log goal", json_output)
        if label not in profile.daily_goals:
            fail(
                "log goal",
                f"No daily goal named '{label}'",
                json_output,
                "Add it with: weightplan user goal add '<text>'",
            )
        updated = MeasurementStore.toggle_goal(conn, day, label)

    done = label in updated.completed_goals
    if json_output:
        output_json({
            "success": True,
            "command": "log goal",
            "data": updated.to_dict(),
            "human_summary": f"'{label}' {'done' if done else 'not done'} on {updated.date}",
        })
    else:
        mark = "[green]done[/green]" if done else "[yellow]not done[/yellow]"
        console.print(f"{label}: {mark} on {updated.date}")


# ============================================================================
# Configuration Commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Show the active configuration."""
    json_output = wants_json(json_output)
    settings = get_settings()

    if json_output:
        output_json({
            "success": True,
            "command": "config show",
            "data": settings.to_dict(),
        })
    else:
        data = settings.to_dict()
        for section, values in data.items():
            console.print(f"[bold]{section}[/bold]")
            for key, value in values.items():
                console.print(f"  {key}: {value}")


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(
        None, "--path", help="Where to write config.yaml (default: ~/.weightplan)"
    ),
    json_output: Optional[bool] = typer.Option(
        None, "--json/--table", help="Output as JSON (default: config output_format)"
    ),
) -> None:
    """Write the current configuration to config.yaml."""
    json_output = wants_json(json_output)
    written = get_settings().save(path)
    reload_settings(written)

    if json_output:
        output_json({
            "success": True,
            "command": "config init",
            "data": {"path": str(written)},
        })
    else:
        console.print(f"[green]Wrote {written}[/green]")


if __name__ == "__main__":
    app()
