"""Plain text rendering of the session for the ``watch`` command."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sncf_departures.application.app import App

BLINK_PERIOD_SECONDS = 0.5


def format_hhmmss(duration: timedelta) -> str:
    """Format a non-negative duration as ``HH:MM:SS``."""
    secs = max(0, int(duration.total_seconds()))
    h, rest = divmod(secs, 3600)
    m, s = divmod(rest, 60)
    return f"{h:02}:{m:02}:{s:02}"


def is_countdown_visible(zero_reached_at: float | None, now: float) -> bool:
    """Blink the countdown once it has reached zero."""
    if zero_reached_at is None:
        return True
    return int((now - zero_reached_at) / BLINK_PERIOD_SECONDS) % 2 == 0


def render_journey_table(app: App) -> list[str]:
    """One line per journey: date, duration, transfers, departure time."""
    if app.journeys_loading:
        return ["Loading..."]
    if not app.journeys:
        return ["No journeys"]

    lines = [f"  {'Date':<12}{'Dur':<6}{'Changes':<9}Dep at"]
    for index, journey in enumerate(app.journeys):
        marker = "▶ " if index == app.journeys_selected else "  "
        lines.append(
            f"{marker}{journey.display_date:<12}"
            f"{journey.duration_seconds // 60:>3}m  "
            f"{journey.transfer_count:<9}"
            f"{journey.departure:%H:%M:%S}"
        )
    return lines


def render_timer_frame(app: App, now: float) -> str:
    """Single status line: route, selected departure and countdown."""
    parts = []
    if app.route is not None:
        parts.append(f"{app.route.start.name} → {app.route.destination.name}")

    journey = app.selected_journey
    if app.journeys_loading:
        parts.append("loading journeys...")
    elif journey is None:
        parts.append("no journey")
    else:
        parts.append(f"dep {journey.departure:%H:%M}")
        remaining = app.timer.remaining_at(now)
        visible = is_countdown_visible(app.timer.zero_reached_at, now)
        parts.append(format_hhmmss(remaining) if visible else " " * 8)

    if app.status_message:
        parts.append(app.status_message)
    return " | ".join(parts)
