"""Main entry point for the SNCF departures countdown."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, TextIO

import aiohttp

from sncf_departures.adapters.config import AppConfig, TomlRouteConfigStore
from sncf_departures.adapters.console import render_timer_frame
from sncf_departures.adapters.navitia_api import (
    NavitiaHttpClient,
    NavitiaJourneyRepository,
    NavitiaPlaceRepository,
)
from sncf_departures.adapters.system_clock import SystemClock
from sncf_departures.application import App
from sncf_departures.application.services import DebouncedSearchController

if TYPE_CHECKING:
    from sncf_departures.domain.contracts.clock import ClockProtocol

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Configure root logging once per process.

    Logs go to ``config.log_file`` when set so they do not garble the
    countdown line, otherwise to stderr.
    """
    if config.log_file:
        logging.basicConfig(
            level=config.log_level,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            filename=config.log_file,
        )
    else:
        logging.basicConfig(
            level=config.log_level,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            stream=sys.stderr,
        )


def build_app(
    config: AppConfig, session: aiohttp.ClientSession, clock: ClockProtocol | None = None
) -> App:
    """Wire the Navitia adapters, the route store and the clock into an App."""
    clock = clock or SystemClock()
    http_client = NavitiaHttpClient(
        session,
        api_key=config.sncf_api_key,
        base_url=config.sncf_api_base_url,
        timeout_seconds=config.api_timeout_seconds,
    )
    place_repository = NavitiaPlaceRepository(http_client)
    search_controller = DebouncedSearchController(
        place_repository,
        clock,
        debounce_seconds=config.search_debounce_seconds,
        min_query_len=config.min_query_length,
    )
    return App(
        place_repository=place_repository,
        journey_repository=NavitiaJourneyRepository(http_client, count=config.journeys_count),
        config_store=TomlRouteConfigStore(config.route_config_file),
        clock=clock,
        search_controller=search_controller,
        refresh_interval_seconds=config.refresh_interval_seconds,
        fetch_timeout_seconds=config.api_timeout_seconds,
        channel_capacity=config.channel_capacity,
    )


@asynccontextmanager
async def open_app(config: AppConfig) -> AsyncIterator[App]:
    """Create an App with its HTTP session and tear both down on exit."""
    if not config.sncf_api_key:
        logger.warning("SNCF_API_KEY is not set, API calls will be rejected")
    async with aiohttp.ClientSession() as session:
        app = build_app(config, session)
        try:
            yield app
        finally:
            await app.stop()


async def run_live_session(
    app: App,
    tick_seconds: float,
    out: TextIO = sys.stdout,
    max_ticks: int | None = None,
) -> None:
    """Refresh journeys in the background and redraw the countdown each tick."""
    await app.start_refresh()
    ticks = 0
    try:
        while max_ticks is None or ticks < max_ticks:
            await app.tick()
            out.write("\r" + render_timer_frame(app, app.clock.monotonic()) + "\x1b[K")
            out.flush()
            ticks += 1
            await asyncio.sleep(tick_seconds)
    finally:
        out.write("\n")
        await app.stop()


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config)
    logger.info("Application starting")

    async with open_app(config) as app:
        if app.route is None:
            logger.error("No saved route. Run 'sncf-departures configure START DEST' first.")
            sys.exit(1)
        try:
            await run_live_session(app, config.tick_interval_seconds)
        except asyncio.CancelledError:
            logger.info("Shutting down...")
    logger.info("Application ending")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted")
