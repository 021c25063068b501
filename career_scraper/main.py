"""Main entry point - extract career histories from Wikipedia for stored players."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from career_scraper.config import settings
from career_scraper.models import IngestionSummary
from career_scraper.storage import JSONLCareerStore
from career_scraper.workers.ingestion_worker import CareerIngestionAgent
from career_scraper.workers.wikipedia_client import WikipediaClient

logger = structlog.get_logger()

RULE = "=" * 50


def configure_logging():
    """Configure structured logging."""
    log_dir = Path(settings.storage.logs_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),  # Print to console for visibility
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract player career histories from Wikipedia",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Extract and resolve careers without storing anything",
    )
    parser.add_argument(
        "--player",
        type=str,
        help="Only process the player with this name",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Process at most this many players",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=settings.storage.data_dir,
        help="Directory holding players.jsonl, teams.jsonl and the career history",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=settings.matching.threshold,
        help="Minimum similarity for a fuzzy team match",
    )

    return parser


def print_summary(summary: IngestionSummary):
    print("\n" + RULE)
    print("Summary:")
    print(f"   Players processed: {summary.players_processed}")
    print(f"   Players with career data: {summary.players_with_career}")
    print(f"   Career entries added: {summary.entries_added}")
    print(f"   Unresolved teams: {summary.unresolved_teams}")
    print(f"   Duplicates skipped: {summary.duplicates_skipped}")
    print(f"   Failures: {summary.failures}")


async def async_main(args) -> IngestionSummary:
    """Async main function."""
    store = JSONLCareerStore(args.data_dir)

    async with WikipediaClient() as client:
        agent = CareerIngestionAgent(
            store=store,
            client=client,
            threshold=args.threshold,
            dry_run=args.dry_run,
        )
        return await agent.run(player_name=args.player, limit=args.limit)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    configure_logging()

    print("Career History Extraction")
    print(RULE)
    print(f"Rate limit: 1 request every {settings.wikipedia.rate_limit_seconds}s")
    if args.dry_run:
        print("Running in DRY RUN mode - no data will be modified")
    print()

    logger.info("career_extraction_starting", data_dir=args.data_dir, dry_run=args.dry_run, player=args.player)

    try:
        summary = asyncio.run(async_main(args))
    except KeyboardInterrupt:
        logger.info("career_extraction_interrupted")
        return 1
    except Exception as e:
        logger.error("career_extraction_failed", error=str(e), exc_info=True)
        return 1

    print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
