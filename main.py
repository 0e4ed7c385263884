import sys
import asyncio
import argparse

# --- Settings/Logging ---
from src.logging.setup import setup_logging
from src.config.settings import settings

setup_logging()

from loguru import logger

from rich import print
from rich.panel import Panel
from rich.text import Text

from src.analysis.analyzer import AnalysisError, analyze_match
from src.api.app import create_app
from src.catalog.leagues import LEAGUES
from src.prediction.groq_client import PredictionError


async def run_analysis(league: str, home: str, away: str) -> int:
    """Runs one analysis and prints the prediction; returns the exit code."""
    try:
        analysis = await analyze_match(league, home, away)
    except AnalysisError as e:
        print(Panel(Text(str(e.outcome.value)), title=e.outcome.kind.value, style="red"))
        return 2
    except PredictionError as e:
        logger.error(f"Prediction failed: {e}")
        return 1

    print(Panel(Text(analysis.prediction), title=analysis.description, style="green"))
    return 0


def list_leagues() -> None:
    for entry in LEAGUES.values():
        print(f"[bold]{entry.display_name}[/bold]  ({', '.join(entry.aliases)})")


def serve() -> None:
    app = create_app()
    logger.info(f"Server running at http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="League-table based match predictions.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("serve", help="Run the HTTP API.")
    commands.add_parser("leagues", help="List supported leagues and their aliases.")

    analyze = commands.add_parser("analyze", help="Predict a single match.")
    analyze.add_argument("league")
    analyze.add_argument("home")
    analyze.add_argument("away")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        serve()
        return 0
    if args.command == "leagues":
        list_leagues()
        return 0
    return asyncio.run(run_analysis(args.league, args.home, args.away))


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
