"""Date parsing for career extraction.

Handles the date formats found in Wikipedia career sections:

    '1 July 2019'   -> ParsedDate(year=2019, month=7, day=1)
    'July 1, 2019'  -> ParsedDate(year=2019, month=7, day=1)
    'January 2020'  -> ParsedDate(year=2020, month=1)
    'Summer 2019'   -> ParsedDate(year=2019, month=7)
    '2019–2022'     -> DateRange 2019 .. 2022
    '2019–'         -> DateRange 2019 .. ongoing
"""

import re
from typing import Optional

from career_scraper.models import DateRange, ParsedDate

MIN_YEAR = 1900
MAX_YEAR = 2100

MONTH_MAP = {
    'january': 1, 'jan': 1,
    'february': 2, 'feb': 2,
    'march': 3, 'mar': 3,
    'april': 4, 'apr': 4,
    'may': 5,
    'june': 6, 'jun': 6,
    'july': 7, 'jul': 7,
    'august': 8, 'aug': 8,
    'september': 9, 'sep': 9, 'sept': 9,
    'october': 10, 'oct': 10,
    'november': 11, 'nov': 11,
    'december': 12, 'dec': 12,
}

# Representative month for each season
SEASON_MAP = {
    'winter': 1,
    'spring': 4,
    'summer': 7,
    'autumn': 10,
    'fall': 10,
}

PRESENT_WORDS = {'present', 'current', 'now'}

FULL_DATE_PATTERN = re.compile(
    r'(\d{1,2})\s+([a-z]+)\s+(\d{4})|([a-z]+)\s+(\d{1,2}),?\s+(\d{4})'
)
WORD_YEAR_PATTERN = re.compile(r'([a-z]+)\s+(\d{4})')
YEAR_ONLY_PATTERN = re.compile(r'^(\d{4})$')
LEADING_INT_PATTERN = re.compile(r'^\s*(\d+)')

# Hyphen, en dash, em dash
DASH_PATTERN = re.compile(r'[\-–—]')

# Defaults used when the source only gives a year: seasons and transfer
# windows start mid-year
SEASON_START = (7, 1)
SEASON_END = (6, 30)
MONTH_END_DAY = 28


def is_plausible_year(year: Optional[int]) -> bool:
    """Check that a year lies in the supported [1900, 2100] window."""
    return year is not None and MIN_YEAR <= year <= MAX_YEAR


def parse_year(text: Optional[str]) -> Optional[int]:
    """
    Read the leading integer of a string as a year.

    Returns None when there is no leading integer or it is not a plausible year.

    Examples:
        '2019' -> 2019
        '2022[a]' -> 2022
        '19' -> None
    """
    if not text:
        return None

    match = LEADING_INT_PATTERN.match(text)
    if not match:
        return None

    year = int(match.group(1))
    return year if is_plausible_year(year) else None


def parse_date(text: Optional[str]) -> Optional[ParsedDate]:
    """
    Parse a single date string.

    Formats are tried in a fixed order: full date, month + year,
    season + year, bare year. Month names are tried before season names,
    so a literal month always wins.

    Args:
        text: Date text from the document

    Returns:
        ParsedDate or None if no format matches
    """
    if not text:
        return None

    cleaned = text.strip().lower()

    # Full date: "1 July 2019", "July 1, 2019"
    match = FULL_DATE_PATTERN.search(cleaned)
    if match:
        day = int(match.group(1) or match.group(5))
        month = MONTH_MAP.get(match.group(2) or match.group(4))
        year = int(match.group(3) or match.group(6))
        if month and 1 <= day <= 31 and is_plausible_year(year):
            return ParsedDate(year=year, month=month, day=day)

    # Month + year: "January 2020", "Jan 2020"
    match = WORD_YEAR_PATTERN.search(cleaned)
    if match:
        month = MONTH_MAP.get(match.group(1))
        year = int(match.group(2))
        if month and is_plausible_year(year):
            return ParsedDate(year=year, month=month)

    # Season + year: "Summer 2019"
    if match:
        month = SEASON_MAP.get(match.group(1))
        year = int(match.group(2))
        if month and is_plausible_year(year):
            return ParsedDate(year=year, month=month)

    # Bare year: "2019"
    match = YEAR_ONLY_PATTERN.match(cleaned)
    if match:
        year = int(match.group(1))
        if is_plausible_year(year):
            return ParsedDate(year=year)

    return None


def _parse_range_side(text: str) -> Optional[ParsedDate]:
    """Parse one side of a range, falling back to a leading year."""
    parsed = parse_date(text)
    if parsed:
        return parsed

    year = parse_year(text)
    if year is not None:
        return ParsedDate(year=year)

    return None


def parse_date_range(text: Optional[str]) -> Optional[DateRange]:
    """
    Parse a date range such as '2019–2022', '2019–' or 'July 2019 – present'.

    An end date that cannot be parsed degrades to an ongoing range, while an
    unparseable start date fails the whole range.

    Args:
        text: Range text from the document

    Returns:
        DateRange or None if the start cannot be parsed
    """
    if not text:
        return None

    cleaned = text.strip()
    parts = DASH_PATTERN.split(cleaned)

    if len(parts) == 2:
        start_text = parts[0].strip()
        end_text = parts[1].strip()

        start = _parse_range_side(start_text)
        if not start:
            return None

        if not end_text or end_text.lower() in PRESENT_WORDS:
            return DateRange(start=start, end=None)

        # Unparseable end: assume still current
        return DateRange(start=start, end=_parse_range_side(end_text))

    # Single date: start only, still current
    single = parse_date(cleaned)
    if single:
        return DateRange(start=single, end=None)

    return None


def to_iso_date(date: ParsedDate, is_end_date: bool = False) -> str:
    """
    Render a ParsedDate as an ISO date string (YYYY-MM-DD).

    Missing parts are defaulted: the 1st of the month for a start and the
    28th for an end; a year-only date becomes July 1 (start) or June 30 (end).

    Examples:
        ParsedDate(year=2019, month=7, day=1) -> '2019-07-01'
        ParsedDate(year=2020, month=1) -> '2020-01-01'
        ParsedDate(year=2020, month=1), end -> '2020-01-28'
        ParsedDate(year=2020), end -> '2020-06-30'
    """
    year = date.year

    if date.month and date.day:
        return f"{year}-{date.month:02d}-{date.day:02d}"

    if date.month:
        day = MONTH_END_DAY if is_end_date else 1
        return f"{year}-{date.month:02d}-{day:02d}"

    month, day = SEASON_END if is_end_date else SEASON_START
    return f"{year}-{month:02d}-{day:02d}"
