"""Pydantic models for extracted career data and team resolution."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CareerType(str, Enum):
    """Tier of a career stint."""

    SENIOR = "senior"
    YOUTH = "youth"


class FeeKind(str, Enum):
    """Kind of transfer fee."""

    PAID = "paid"
    FREE = "free"
    LOAN = "loan"
    UNDISCLOSED = "undisclosed"
    UNKNOWN = "unknown"


class MatchType(str, Enum):
    """Strategy that produced a team match."""

    EXACT = "exact"
    ALIAS = "alias"
    PARTIAL = "partial"
    FUZZY = "fuzzy"


class TransferType(str, Enum):
    """Transfer tag stored on a career record."""

    PERMANENT = "permanent"
    LOAN = "loan"


class ParsedDate(BaseModel):
    """Date of partial precision.

    A missing month or day means the source did not state it, not zero.
    """

    year: int
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)

    model_config = ConfigDict(frozen=True)


class DateRange(BaseModel):
    """Start date and optional end date (None = ongoing)."""

    start: ParsedDate
    end: Optional[ParsedDate] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_ongoing(self) -> bool:
        return self.end is None


class TransferFee(BaseModel):
    """Transfer fee details.

    `raw` always keeps the source text for auditing.
    """

    amount: Optional[Decimal] = None
    currency: str = ""
    kind: FeeKind = FeeKind.UNKNOWN
    raw: str = ""

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class CareerFact(BaseModel):
    """One inferred club stint."""

    team_name: str
    start_year: int = Field(..., ge=1900, le=2100)
    start_month: Optional[int] = Field(default=None, ge=1, le=12)
    end_year: Optional[int] = None  # None = still at the club
    end_month: Optional[int] = Field(default=None, ge=1, le=12)
    appearances: Optional[int] = Field(default=None, ge=0)
    goals: Optional[int] = Field(default=None, ge=0)
    is_loan: bool = False
    transfer_fee: Optional[TransferFee] = None
    career_type: CareerType = CareerType.SENIOR

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @property
    def start_date(self) -> ParsedDate:
        return ParsedDate(year=self.start_year, month=self.start_month)

    @property
    def end_date(self) -> Optional[ParsedDate]:
        if self.end_year is None:
            return None
        return ParsedDate(year=self.end_year, month=self.end_month)


class Team(BaseModel):
    """Canonical team entity from the registry."""

    id: str
    name: str

    model_config = ConfigDict(frozen=True)


class MatchResult(BaseModel):
    """Resolved team with the confidence of the match."""

    team_id: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    match_type: MatchType

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class Player(BaseModel):
    """Player whose career is being extracted."""

    id: str
    name: str

    model_config = ConfigDict(frozen=True)


class CareerRecord(BaseModel):
    """Persisted player-team validity interval."""

    player_id: str
    team_id: str
    valid_from: str
    valid_to: Optional[str] = None  # None = current
    transfer_type: TransferType = TransferType.PERMANENT
    career_type: CareerType = CareerType.SENIOR

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @property
    def start_year(self) -> int:
        return int(self.valid_from[:4])


class IngestionSummary(BaseModel):
    """Counters reported at the end of an ingestion run."""

    players_processed: int = 0
    players_with_career: int = 0
    entries_added: int = 0
    unresolved_teams: int = 0
    duplicates_skipped: int = 0
    failures: int = 0
