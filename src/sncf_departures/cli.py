"""Command line for searching stations, saving a route and watching departures."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import TYPE_CHECKING

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.console import render_journey_table
from sncf_departures.application import Mode
from sncf_departures.domain.errors import RemoteLookupError, StationNotFoundError
from sncf_departures.main import configure_logging, open_app, run_live_session

if TYPE_CHECKING:
    from sncf_departures.application import App
    from sncf_departures.domain.models import Place


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sncf-departures",
        description="Live countdown to your next SNCF train",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations
  sncf-departures search "Grenoble"

  # Save the route, taking the second match for the destination
  sncf-departures configure "Grenoble" "Lyon" --dest-index 1

  # Show the next journeys once
  sncf-departures journeys

  # Live countdown (Ctrl-C to quit)
  sncf-departures watch
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    journeys_parser = subparsers.add_parser("journeys", help="Show journeys for the saved route")
    journeys_parser.add_argument("--json", action="store_true", help="Output as JSON")

    configure_parser = subparsers.add_parser("configure", help="Choose and save the route")
    configure_parser.add_argument("start", help="Search text for the start station")
    configure_parser.add_argument("destination", help="Search text for the destination station")
    configure_parser.add_argument(
        "--start-index", type=int, default=0, help="Which start suggestion to pick (default: 0)"
    )
    configure_parser.add_argument(
        "--dest-index", type=int, default=0, help="Which destination suggestion to pick (default: 0)"
    )

    subparsers.add_parser("watch", help="Live countdown to the selected departure")
    return parser


async def pick_place(app: App, query: str, index: int) -> Place:
    """Type ``query`` into the station input and confirm suggestion ``index``.

    Raises:
        RemoteLookupError: If the lookup failed.
        StationNotFoundError: If no suggestion exists at ``index``.
    """
    app.input.reset()
    app.type_text(query)
    # Let the debounce interval pass as if the user stopped typing
    await asyncio.sleep(app.search_controller.debounce_seconds + 0.05)
    await app.tick()

    if app.input.error is not None:
        raise RemoteLookupError(app.input.error)
    if not 0 <= index < len(app.input.suggestions):
        raise StationNotFoundError(
            f"No station #{index} for {query!r} ({len(app.input.suggestions)} found)"
        )
    app.input.selected = index
    place = app.input.suggestions[index]
    await app.confirm_selection()
    return place


def _place_to_dict(place: Place) -> dict[str, str | None]:
    return {"id": place.id, "name": place.name, "kind": place.kind}


async def _search(app: App, query: str, as_json: bool) -> None:
    places = await app.search_controller.place_repository.search_places(query)
    if as_json:
        print(json.dumps([_place_to_dict(p) for p in places], indent=2, ensure_ascii=False))
        return
    if not places:
        print(f"No stations found for '{query}'", file=sys.stderr)
        sys.exit(1)
    print(f"\nFound {len(places)} station(s):\n")
    for index, place in enumerate(places):
        print(f"  [{index}] {place.name}")
        print(f"      ID: {place.id}")


async def _journeys(app: App, as_json: bool) -> None:
    if app.route is None:
        print("No saved route. Run 'configure' first.", file=sys.stderr)
        sys.exit(1)
    batch = await app.journey_repository.fetch_journeys(
        app.route.start.id, app.route.destination.id
    )
    app.replace_journeys(batch)
    if as_json:
        rows = [
            {
                "departure": j.departure.isoformat(),
                "arrival": j.arrival.isoformat(),
                "date": j.display_date,
                "duration_seconds": j.duration_seconds,
                "transfers": j.transfer_count,
            }
            for j in app.journeys
        ]
        print(json.dumps(rows, indent=2))
        return
    print(f"{app.route.start.name} → {app.route.destination.name}")
    for line in render_journey_table(app):
        print(line)


async def _configure(app: App, args: argparse.Namespace) -> None:
    await app.stop()
    app.mode = Mode.INPUT_START
    start = await pick_place(app, args.start, args.start_index)
    destination = await pick_place(app, args.destination, args.dest_index)
    await app.stop()
    print(f"Route: {start.name} → {destination.name}")
    if app.status_message:
        print(app.status_message, file=sys.stderr)
        sys.exit(1)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    configure_logging(config)

    try:
        async with open_app(config) as app:
            if args.command == "search":
                await _search(app, args.query, args.json)
            elif args.command == "journeys":
                await _journeys(app, args.json)
            elif args.command == "configure":
                await _configure(app, args)
            elif args.command == "watch":
                if app.route is None:
                    print("No saved route. Run 'configure' first.", file=sys.stderr)
                    sys.exit(1)
                await run_live_session(app, config.tick_interval_seconds)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (RemoteLookupError, StationNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
