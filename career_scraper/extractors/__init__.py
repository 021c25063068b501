"""Init for extractors package."""

from career_scraper.extractors.utils import (
    clean_text,
    extract_team_from_wiki_link,
    is_total_row,
    parse_transfer_fee,
)

from career_scraper.extractors.dates import (
    parse_date,
    parse_date_range,
    parse_year,
    to_iso_date,
)

from career_scraper.extractors.strategies import (
    STRATEGIES,
    CareerStrategy,
    StrategyName,
)

from career_scraper.extractors.career_parser import CareerParser

__all__ = [
    'clean_text',
    'extract_team_from_wiki_link',
    'is_total_row',
    'parse_transfer_fee',
    'parse_date',
    'parse_date_range',
    'parse_year',
    'to_iso_date',
    'STRATEGIES',
    'CareerStrategy',
    'StrategyName',
    'CareerParser',
]
