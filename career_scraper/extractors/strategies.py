"""Career parsing strategies for the Wikipedia layouts we know how to read.

Each strategy is a pair of plain functions over a parsed document:

    can_parse(soup) -> bool
    parse(soup) -> List[CareerFact]

STRATEGIES lists them in the order they are tried:

1. infobox        - the career rows of the player infobox
2. wikitable      - a dedicated career / club statistics wikitable
3. transferbox    - a transfer history table
4. text_paragraph - regular expressions over the career prose (fallback)
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from career_scraper.extractors.dates import is_plausible_year, parse_date_range
from career_scraper.extractors.utils import (
    CURRENCY_PATTERN,
    clean_text,
    extract_team_from_wiki_link,
    is_total_row,
    parse_transfer_fee,
)
from career_scraper.models import CareerFact, CareerType, DateRange, FeeKind


class StrategyName(str, Enum):
    """Closed set of career parsing strategies."""

    INFOBOX = "infobox"
    WIKITABLE = "wikitable"
    TRANSFERBOX = "transferbox"
    TEXT_PARAGRAPH = "text_paragraph"


@dataclass(frozen=True)
class CareerStrategy:
    """A named applicability check and extractor for one document layout."""

    name: StrategyName
    can_parse: Callable[[BeautifulSoup], bool]
    parse: Callable[[BeautifulSoup], List[CareerFact]]


STATS_PATTERN = re.compile(r'(\d+)\s*\((\d+)\)')
SEASON_PATTERN = re.compile(r'(\d{4})(?:\s*[–—\-]\s*(\d{2,4}))?')
COUNT_PATTERN = re.compile(r'^\s*(\d[\d,]*)')
YEAR_PATTERN = re.compile(r'\d{4}')

# Infobox section labels whose rows are not club stints
SKIPPED_SECTION_KEYWORDS = ('national', 'international', 'manag')

FEE_KEYWORDS = ('free', 'loan', 'undisclosed')

# Capitalised words, optionally joined by a lowercase particle ("Atlético de Madrid")
TEAM_NAME = r"[A-Z](?:[\w'&\-]|\.(?=\w))*(?:\s+(?:(?:de|del|da|do|di|of)\s+)?[A-Z](?:[\w'&\-]|\.(?=\w))*)*"

JOINED_PATTERN = re.compile(
    r"(?:signed for|joined|moved to)\s+(?:the\s+)?(" + TEAM_NAME + r")"
    r"(?:\s+on\s+loan)?"
    r"(?:\s+(?:in|on)\s+(?:(?:\d{1,2}\s+)?[A-Z][a-z]+\s+)?(\d{4}))?"
)
PERIOD_PATTERN = re.compile(
    r"(" + TEAM_NAME + r")\s+\((\d{4})\s*[–—\-]\s*(\d{4}|present)?\)"
)

PARAGRAPH_FALLBACK_COUNT = 5


def _cell_text(cell: Optional[Tag]) -> str:
    if cell is None:
        return ''
    return clean_text(cell.get_text(' ')) or ''


def _team_from_cell(cell: Tag) -> str:
    """Team name from the first link with text, else from the cell text."""
    for link in cell.find_all('a'):
        link_text = clean_text(link.get_text(' '))
        if link_text:
            return extract_team_from_wiki_link(link_text)
    return extract_team_from_wiki_link(cell.get_text(' '))


def _is_loan(*texts: str) -> bool:
    return any('loan' in text.lower() for text in texts)


def _own_rows(table: Tag) -> List[Tag]:
    """Rows of a table, excluding rows of nested tables."""
    return [row for row in table.find_all('tr') if row.find_parent('table') is table]


def _parse_count(text: str) -> Optional[int]:
    match = COUNT_PATTERN.match(text)
    if not match:
        return None
    return int(match.group(1).replace(',', ''))


def _fact_from_range(
    team_name: str,
    date_range: DateRange,
    **fields,
) -> Optional[CareerFact]:
    """Build a fact from a parsed range, or None when the start year is implausible."""
    if not is_plausible_year(date_range.start.year):
        return None

    end = date_range.end
    return CareerFact(
        team_name=team_name,
        start_year=date_range.start.year,
        start_month=date_range.start.month,
        end_year=end.year if end else None,
        end_month=end.month if end else None,
        **fields,
    )


# ---------------------------------------------------------------------------
# Infobox
# ---------------------------------------------------------------------------

def can_parse_infobox(soup: BeautifulSoup) -> bool:
    return bool(soup.select('.infobox'))


def parse_infobox(soup: BeautifulSoup) -> List[CareerFact]:
    """
    Parse the career rows of every infobox panel.

    Section labels switch the tier: "Youth career" marks following rows as
    youth, any other "... career" label as senior. Rows under national-team
    or managerial labels are skipped until the next section label.

    Data rows are: years | team | optional "apps (goals)".
    """
    facts = []
    career_type = CareerType.SENIOR
    skipping = False

    for infobox in soup.select('.infobox'):
        for row in infobox.find_all('tr'):
            label = ' '.join(th.get_text(' ') for th in row.find_all('th', recursive=False)).lower()

            # Section labels
            if 'youth career' in label:
                career_type = CareerType.YOUTH
                skipping = False
                continue
            if any(keyword in label for keyword in SKIPPED_SECTION_KEYWORDS):
                skipping = True
                continue
            if 'career' in label:
                career_type = CareerType.SENIOR
                skipping = False
                continue

            if skipping or not row.find('td', recursive=False):
                continue

            # A leading th label holds the years on current article markup
            cells = row.find_all(['th', 'td'], recursive=False)
            if len(cells) < 2:
                continue

            years_text = _cell_text(cells[0])
            team_cell = cells[1]
            stats_text = _cell_text(cells[2]) if len(cells) > 2 else ''

            team_name = _team_from_cell(team_cell)
            date_range = parse_date_range(years_text)
            if not date_range or not team_name or is_total_row(team_name):
                continue

            appearances = goals = None
            stats_match = STATS_PATTERN.search(stats_text)
            if stats_match:
                appearances = int(stats_match.group(1))
                goals = int(stats_match.group(2))

            fact = _fact_from_range(
                team_name,
                date_range,
                appearances=appearances,
                goals=goals,
                is_loan=_is_loan(_cell_text(team_cell), years_text),
                career_type=career_type,
            )
            if fact:
                facts.append(fact)

    return facts


# ---------------------------------------------------------------------------
# Wikitable
# ---------------------------------------------------------------------------

def _is_career_table(table: Tag) -> bool:
    caption = table.find('caption')
    caption_text = caption.get_text(' ').lower() if caption else ''

    heading = table.find_previous(['h2', 'h3'])
    heading_text = heading.get_text(' ').lower() if heading else ''

    return any(
        keyword in caption_text or keyword in heading_text
        for keyword in ('career', 'club')
    )


def _header_texts(table: Tag) -> List[str]:
    thead = table.find('thead')
    if thead:
        header_cells = thead.find_all('th')
    else:
        first_row = table.find('tr')
        header_cells = first_row.find_all('th') if first_row else []

    return [(clean_text(th.get_text(' ')) or '').lower() for th in header_cells]


def _find_column(headers: List[str], matches: Callable[[str], bool]) -> Optional[int]:
    for idx, header in enumerate(headers):
        if matches(header):
            return idx
    return None


def _cell_at(cells: List[Tag], idx: Optional[int]) -> Optional[Tag]:
    if idx is None or idx >= len(cells):
        return None
    return cells[idx]


def parse_season(text: str) -> Tuple[Optional[int], Optional[int]]:
    """
    Parse a season token into (start year, end year).

    A two-digit end year takes the century of the start year.

    Examples:
        '2019' -> (2019, None)
        '2019–20' -> (2019, 2020)
        '2019-2021' -> (2019, 2021)
    """
    match = SEASON_PATTERN.search(text)
    if not match:
        return None, None

    start_year = int(match.group(1))
    if not is_plausible_year(start_year):
        return None, None

    end_year = None
    end_text = match.group(2)
    if end_text:
        if len(end_text) == 2:
            end_year = int(match.group(1)[:2] + end_text)
        else:
            end_year = int(end_text)
        if not is_plausible_year(end_year):
            end_year = None

    return start_year, end_year


def can_parse_wikitable(soup: BeautifulSoup) -> bool:
    return any(_is_career_table(table) for table in soup.select('table.wikitable'))


def parse_wikitable(soup: BeautifulSoup) -> List[CareerFact]:
    """Parse career / club statistics wikitables, locating columns from the header row."""
    facts = []

    for table in soup.select('table.wikitable'):
        if not _is_career_table(table):
            continue

        headers = _header_texts(table)
        season_idx = _find_column(headers, lambda h: 'season' in h or 'year' in h)
        club_idx = _find_column(headers, lambda h: 'club' in h or 'team' in h)
        apps_idx = _find_column(headers, lambda h: 'app' in h or h == 'a')
        goals_idx = _find_column(headers, lambda h: 'goal' in h or h in ('g', 'gls'))

        for row in _own_rows(table):
            cells = row.find_all('td', recursive=False)
            if len(cells) < 2:
                continue

            # Fall back to positional columns when the header does not say
            season_cell = _cell_at(cells, season_idx if season_idx is not None else 0)
            club_cell = _cell_at(cells, club_idx if club_idx is not None else 1)
            if season_cell is None or club_cell is None:
                continue

            season_text = _cell_text(season_cell)
            team_name = _team_from_cell(club_cell)
            if not team_name or is_total_row(team_name):
                continue

            start_year, end_year = parse_season(season_text)
            if start_year is None:
                continue

            apps_cell = _cell_at(cells, apps_idx)
            goals_cell = _cell_at(cells, goals_idx)

            facts.append(CareerFact(
                team_name=team_name,
                start_year=start_year,
                end_year=end_year,
                appearances=_parse_count(_cell_text(apps_cell)) if apps_cell else None,
                goals=_parse_count(_cell_text(goals_cell)) if goals_cell else None,
                is_loan=_is_loan(_cell_text(club_cell), season_text),
                career_type=CareerType.SENIOR,
            ))

    return facts


# ---------------------------------------------------------------------------
# Transferbox
# ---------------------------------------------------------------------------

def _mentions_transfer(table: Tag) -> bool:
    text = table.get_text(' ').lower()
    return 'transfer' in text or 'fee' in text


def _is_fee_text(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in FEE_KEYWORDS) or bool(CURRENCY_PATTERN.search(text))


def can_parse_transferbox(soup: BeautifulSoup) -> bool:
    return any(_mentions_transfer(table) for table in soup.find_all('table'))


def parse_transferbox(soup: BeautifulSoup) -> List[CareerFact]:
    """
    Parse transfer history tables.

    Cells are classified by content: a four-digit number is the date, the
    first and second linked cells are the origin and destination clubs, and
    an unlinked fee keyword or currency glyph is the fee. Each transfer starts a stint
    at the destination club.
    """
    facts = []

    for table in soup.find_all('table'):
        if not _mentions_transfer(table):
            continue

        for row in _own_rows(table):
            cells = row.find_all('td', recursive=False)
            if len(cells) < 3:
                continue

            date_text = ''
            fee_text = ''
            club_cells = []

            for cell in cells:
                cell_text = _cell_text(cell)
                if YEAR_PATTERN.search(cell_text) and not CURRENCY_PATTERN.search(cell_text):
                    date_text = cell_text
                elif cell.find('a'):
                    # Linked cells are clubs even with a "(loan)" marker
                    club_cells.append(cell)
                elif _is_fee_text(cell_text):
                    fee_text = cell_text

            if len(club_cells) < 2 or not date_text:
                continue

            to_cell = club_cells[1]
            to_team = _team_from_cell(to_cell)
            if not to_team or is_total_row(to_team):
                continue

            date_range = parse_date_range(date_text)
            if not date_range:
                continue

            fee = parse_transfer_fee(fee_text) if fee_text else None
            is_loan = _is_loan(_cell_text(to_cell), date_text) or (
                fee is not None and fee.kind == FeeKind.LOAN
            )

            start = date_range.start
            if not is_plausible_year(start.year):
                continue

            facts.append(CareerFact(
                team_name=to_team,
                start_year=start.year,
                start_month=start.month,
                end_year=None,
                appearances=None,
                goals=None,
                is_loan=is_loan,
                transfer_fee=fee,
                career_type=CareerType.SENIOR,
            ))

    return facts


# ---------------------------------------------------------------------------
# Text paragraphs
# ---------------------------------------------------------------------------

def _is_heading_block(tag: Tag) -> bool:
    return tag.name == 'h2' or tag.find('h2') is not None


def _career_section_text(soup: BeautifulSoup) -> str:
    """Text between the first 'career' h2 heading and the next h2."""
    for heading in soup.find_all('h2'):
        if 'career' not in heading.get_text().lower():
            continue

        # Current markup wraps headings in <div class="mw-heading">
        anchor = heading
        parent = heading.parent
        if parent is not None and 'mw-heading' in (parent.get('class') or []):
            anchor = parent

        parts = []
        for sibling in anchor.find_next_siblings():
            if _is_heading_block(sibling):
                break
            parts.append(sibling.get_text(' '))

        text = clean_text(' '.join(parts))
        if text:
            return text

    return ''


def _intro_text(soup: BeautifulSoup) -> str:
    body = soup.select_one('.mw-parser-output')
    if body is not None:
        paragraphs = body.find_all('p', recursive=False)
    else:
        paragraphs = soup.find_all('p')

    return clean_text(' '.join(p.get_text(' ') for p in paragraphs[:PARAGRAPH_FALLBACK_COUNT])) or ''


def can_parse_text_paragraph(soup: BeautifulSoup) -> bool:
    # Fallback: always applicable
    return True


def parse_text_paragraph(soup: BeautifulSoup) -> List[CareerFact]:
    """
    Extract stints from prose.

    Recognises "joined / signed for / moved to <Team> in <Year>" and
    "<Team> (<Year>–<Year>)". Matches without a plausible year are dropped.
    """
    text = _career_section_text(soup) or _intro_text(soup)
    if not text:
        return []

    facts = []

    for match in JOINED_PATTERN.finditer(text):
        team_name = extract_team_from_wiki_link(match.group(1))
        year = int(match.group(2)) if match.group(2) else None
        if not team_name or is_total_row(team_name) or not is_plausible_year(year):
            continue
        facts.append(CareerFact(
            team_name=team_name,
            start_year=year,
            is_loan=_is_loan(match.group(0)),
            career_type=CareerType.SENIOR,
        ))

    for match in PERIOD_PATTERN.finditer(text):
        team_name = extract_team_from_wiki_link(match.group(1))
        start_year = int(match.group(2))
        end_year = int(match.group(3)) if match.group(3) and match.group(3).isdigit() else None
        if not team_name or is_total_row(team_name) or not is_plausible_year(start_year):
            continue
        if not is_plausible_year(end_year):
            end_year = None
        facts.append(CareerFact(
            team_name=team_name,
            start_year=start_year,
            end_year=end_year,
            is_loan=_is_loan(match.group(0)),
            career_type=CareerType.SENIOR,
        ))

    return facts


INFOBOX = CareerStrategy(StrategyName.INFOBOX, can_parse_infobox, parse_infobox)
WIKITABLE = CareerStrategy(StrategyName.WIKITABLE, can_parse_wikitable, parse_wikitable)
TRANSFERBOX = CareerStrategy(StrategyName.TRANSFERBOX, can_parse_transferbox, parse_transferbox)
TEXT_PARAGRAPH = CareerStrategy(StrategyName.TEXT_PARAGRAPH, can_parse_text_paragraph, parse_text_paragraph)

# Precedence order
STRATEGIES: Tuple[CareerStrategy, ...] = (INFOBOX, WIKITABLE, TRANSFERBOX, TEXT_PARAGRAPH)
