"""
Storage layer for players, teams and career records.

Design principle: downstream code only talks to CareerStore, so the JSONL
files can be swapped for a database without changing the ingestion agent.
"""

import json
from pathlib import Path
from typing import List, Optional, Set, Tuple

from pydantic import ValidationError
import structlog

from career_scraper.models import CareerRecord, Player, Team

logger = structlog.get_logger()

PLAYERS_FILE = "players.jsonl"
TEAMS_FILE = "teams.jsonl"
HISTORY_FILE = "player_team_history.jsonl"


class CareerStore:
    """
    Abstract store interface.

    Future: Swap this with a DatabaseStore without changing downstream code.
    """

    def load_players(self) -> List[Player]:
        """Load all players."""
        raise NotImplementedError

    def load_teams(self) -> List[Team]:
        """Load the canonical team registry."""
        raise NotImplementedError

    def has_history(self, player_id: str, team_id: str, start_year: int) -> bool:
        """Check whether a stint at this team starting in this year is already stored."""
        raise NotImplementedError

    def insert_history(self, record: CareerRecord) -> None:
        """Persist one career record."""
        raise NotImplementedError


class JSONLCareerStore(CareerStore):
    """Store backed by JSONL files in a data directory."""

    def __init__(self, data_dir: str = "data/careers"):
        self.data_dir = Path(data_dir)
        # (player id, team id, start year) of stored records, loaded on first lookup
        self._history_keys: Optional[Set[Tuple[str, str, int]]] = None

    def _read_jsonl(self, filename: str) -> List[dict]:
        path = self.data_dir / filename
        if not path.exists():
            return []

        rows = []
        with open(path, 'r', encoding='utf-8') as f:
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    rows.append(json.loads(line))
                except json.JSONDecodeError as e:
                    logger.warning("jsonl_line_invalid", path=str(path), line=line_no, error=str(e))
        return rows

    def _load_models(self, filename: str, model):
        items = []
        for row in self._read_jsonl(filename):
            try:
                items.append(model(**row))
            except (ValidationError, TypeError) as e:
                logger.warning("jsonl_record_invalid", file=filename, error=str(e))
        return items

    def load_players(self) -> List[Player]:
        return self._load_models(PLAYERS_FILE, Player)

    def load_teams(self) -> List[Team]:
        return self._load_models(TEAMS_FILE, Team)

    def load_history(self) -> List[CareerRecord]:
        return self._load_models(HISTORY_FILE, CareerRecord)

    def has_history(self, player_id: str, team_id: str, start_year: int) -> bool:
        if self._history_keys is None:
            self._history_keys = {
                (record.player_id, record.team_id, record.start_year)
                for record in self.load_history()
            }
        return (player_id, team_id, start_year) in self._history_keys

    def insert_history(self, record: CareerRecord) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.data_dir / HISTORY_FILE

        with open(filepath, "a", encoding='utf-8') as f:
            f.write(record.model_dump_json() + "\n")

        if self._history_keys is not None:
            self._history_keys.add((record.player_id, record.team_id, record.start_year))

        logger.debug("career_record_saved", filepath=str(filepath), player_id=record.player_id)
