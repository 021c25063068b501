"""Ingestion worker - extracts, resolves and stores player career histories."""

import asyncio
from typing import Callable, List, Optional, Set, Tuple

import aiohttp
from bs4 import BeautifulSoup
import structlog

from career_scraper.config import settings
from career_scraper.extractors.career_parser import CareerParser
from career_scraper.extractors.dates import to_iso_date
from career_scraper.matching.aliases import DEFAULT_ALIASES, AliasTable
from career_scraper.matching.resolver import find_best_match
from career_scraper.models import (
    CareerFact,
    CareerRecord,
    IngestionSummary,
    MatchResult,
    Player,
    Team,
    TransferType,
)
from career_scraper.storage import CareerStore
from career_scraper.workers.wikipedia_client import FetchError, WikipediaClient

logger = structlog.get_logger()

# (player id, team id, start year)
HistoryKey = Tuple[str, str, int]

# Per-player failures that are logged and skipped
TRANSIENT_ERRORS = (FetchError, aiohttp.ClientError, asyncio.TimeoutError, OSError)


def build_record(player: Player, fact: CareerFact, match: MatchResult) -> CareerRecord:
    """Turn a resolved career fact into a validity-interval record."""
    end = fact.end_date
    return CareerRecord(
        player_id=player.id,
        team_id=match.team_id,
        valid_from=to_iso_date(fact.start_date),
        valid_to=to_iso_date(end, is_end_date=True) if end else None,
        transfer_type=TransferType.LOAN if fact.is_loan else TransferType.PERMANENT,
        career_type=fact.career_type,
    )


class CareerIngestionAgent:
    """Agent that processes players sequentially: fetch, parse, resolve, store."""

    def __init__(
        self,
        store: CareerStore,
        client: WikipediaClient,
        parser: Optional[CareerParser] = None,
        aliases: AliasTable = DEFAULT_ALIASES,
        threshold: Optional[float] = None,
        dry_run: bool = False,
        echo: Callable[[str], None] = print,
    ):
        self.store = store
        self.client = client
        self.parser = parser or CareerParser()
        self.aliases = aliases
        self.threshold = settings.matching.threshold if threshold is None else threshold
        self.dry_run = dry_run
        self.echo = echo

        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {self.threshold}")

    async def fetch_document(self, player: Player) -> Optional[BeautifulSoup]:
        """Find and fetch the player's article."""
        title = await self.client.search_title(player.name)
        if not title:
            return None

        html = await self.client.fetch_article(title)
        return BeautifulSoup(html, 'html.parser')

    async def process_player(
        self,
        player: Player,
        teams: List[Team],
        summary: IngestionSummary,
        seen: Set[HistoryKey],
    ):
        """Extract and store one player's career."""
        logger.info("processing_player", player=player.name)

        soup = await self.fetch_document(player)
        if soup is None:
            self.echo(f"{player.name}: no article found")
            return

        strategy, facts = self.parser.parse_document(soup)
        if not facts:
            self.echo(f"{player.name}: no career data found")
            return

        summary.players_with_career += 1
        self.echo(f"{player.name}: {len(facts)} entries found ({strategy.value})")

        for fact in facts:
            match = find_best_match(fact.team_name, teams, self.aliases, self.threshold)
            if match is None:
                summary.unresolved_teams += 1
                logger.info("team_unresolved", player=player.name, team=fact.team_name)
                self.echo(f"   Team not found: {fact.team_name}")
                continue

            # Year-level duplicate suppression
            key = (player.id, match.team_id, fact.start_year)
            if key in seen or self.store.has_history(*key):
                summary.duplicates_skipped += 1
                self.echo(f"   Already exists: {fact.team_name} ({fact.start_year})")
                continue
            seen.add(key)

            record = build_record(player, fact, match)
            if not self.dry_run:
                self.store.insert_history(record)

            summary.entries_added += 1
            logger.info(
                "career_entry_added",
                player=player.name,
                team=fact.team_name,
                team_id=match.team_id,
                match_type=match.match_type,
                confidence=round(match.confidence, 3),
                dry_run=self.dry_run,
            )
            verb = "Would add" if self.dry_run else "Added"
            self.echo(
                f"   {verb}: {fact.team_name} "
                f"({record.valid_from} - {record.valid_to or 'present'}, {record.transfer_type})"
            )

    async def run(self, player_name: Optional[str] = None, limit: Optional[int] = None) -> IngestionSummary:
        """
        Process players one after another.

        Args:
            player_name: Only process the player with this name
            limit: Process at most this many players

        Returns:
            IngestionSummary with the run's counters

        Raises:
            ValueError: If limit is negative
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        players = self.store.load_players()
        if player_name:
            players = [p for p in players if p.name.lower() == player_name.strip().lower()]
            if not players:
                logger.warning("player_not_found", player=player_name)
                self.echo(f"Player not found: {player_name}")

        if limit is not None:
            players = players[:limit]

        teams = self.store.load_teams()
        logger.info("ingestion_started", players=len(players), teams=len(teams), dry_run=self.dry_run)
        self.echo(f"Found {len(players)} players to process against {len(teams)} teams")

        summary = IngestionSummary()
        seen: Set[HistoryKey] = set()

        for player in players:
            summary.players_processed += 1
            try:
                await self.process_player(player, teams, summary, seen)
            except TRANSIENT_ERRORS as e:
                summary.failures += 1
                logger.error("player_failed", player=player.name, error=str(e), exc_info=True)
                self.echo(f"{player.name}: could not fetch career ({e})")

        logger.info("ingestion_complete", **summary.model_dump())
        return summary
