"""FS Operations command line.

Runs the bot's commands from a terminal and hosts the liveness endpoint.

Typical usage:
    fsops runway WSSS
    fsops runway WSSS --wind 200
    fsops metar WSSS --format raw
    fsops flight SIA826
    fsops serve
"""

import argparse
import asyncio
import sys

from fsops.commands.handler import CommandHandler
from fsops.core.logging_system import get_logger, initialize_logging
from fsops.server.liveness import run_liveness_server
from fsops.settings import BotSettings, get_settings
from fsops.version import get_version

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="fsops", description="FS Operations - flight simulation community tools"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override log level (e.g., DEBUG, INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    runway = subparsers.add_parser("runway", help="Recommend runways from wind")
    runway.add_argument("icao", help="Airport ICAO code (e.g., WSSS)")
    runway.add_argument(
        "--wind",
        type=str,
        help="Wind direction in degrees, or VRB (default: latest METAR)",
    )

    for name, label in (("metar", "METAR"), ("taf", "TAF")):
        weather = subparsers.add_parser(name, help=f"Show the latest {label}")
        weather.add_argument("icao", help="Airport ICAO code (e.g., WSSS)")
        weather.add_argument(
            "--format",
            choices=("formatted", "raw"),
            default="formatted",
            help="Output format",
        )

    flight = subparsers.add_parser("flight", help="Search a flight by number")
    flight.add_argument("flight_number", help="Flight number (e.g., SQ108, SIA826)")

    subparsers.add_parser("serve", help="Run the liveness HTTP endpoint")

    return parser.parse_args(argv)


async def run_command(args: argparse.Namespace, settings: BotSettings) -> int:
    """Run one bot command and print its replies.

    Returns:
        Exit code (1 if the command produced an error reply).
    """
    if args.command == "runway":
        name, options = "runway", {"icao": args.icao, "wind": args.wind}
    elif args.command in ("metar", "taf"):
        name, options = args.command, {"icao": args.icao, "format": args.format}
    else:
        name, options = "flightsearch", {"flight_number": args.flight_number}

    handler = CommandHandler.from_settings(settings)
    try:
        replies = await handler.dispatch(name, options)
    finally:
        await handler.close()

    for reply in replies:
        print(reply.to_text())
    return 1 if any(reply.ephemeral for reply in replies) else 0


async def serve(settings: BotSettings) -> None:
    """Run the liveness endpoint until cancelled."""
    runner = await run_liveness_server(port=settings.port)
    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)
    settings = get_settings()
    initialize_logging(settings.log_config_path, level=args.log_level)

    try:
        if args.command == "serve":
            asyncio.run(serve(settings))
            return 0
        return asyncio.run(run_command(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
