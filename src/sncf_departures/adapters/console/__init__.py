"""Console output adapters."""

from sncf_departures.adapters.console.formatter import (
    format_hhmmss,
    is_countdown_visible,
    render_journey_table,
    render_timer_frame,
)

__all__ = [
    "format_hhmmss",
    "is_countdown_visible",
    "render_journey_table",
    "render_timer_frame",
]
