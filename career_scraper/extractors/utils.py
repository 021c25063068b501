"""Utility functions for parsing Wikipedia career HTML."""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from career_scraper.models import FeeKind, TransferFee

ANCHOR_PATTERN = re.compile(r'<a[^>]*>([^<]*)</a>', re.IGNORECASE)
WIKI_LINK_PATTERN = re.compile(r'\[\[([^\]|]+)\|?([^\]]*)\]\]')
LOAN_MARKER_PATTERN = re.compile(r'\s*\(loan\)\s*', re.IGNORECASE)
CLUB_SUFFIX_PATTERN = re.compile(r'\s+(F\.?C\.?|A\.?F\.?C\.?|S\.?C\.?)\.?$', re.IGNORECASE)
FOOTNOTE_PATTERN = re.compile(r'\[(?:\d+|[a-z]|note \d+)\]', re.IGNORECASE)
LEADING_MARKS_PATTERN = re.compile(r'^[\s→*†‡]+')

CURRENCY_PATTERN = re.compile(r'[€£$]')
FEE_PATTERN = re.compile(
    r'([€£$])?\s*(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:[.,]\d+)?)'
    r'\s*(billion|million|bn|k|m)?(?:\s*([€£$]))?'
)

MULTIPLIERS = {
    'k': Decimal(1_000),
    'm': Decimal(1_000_000),
    'million': Decimal(1_000_000),
    'bn': Decimal(1_000_000_000),
    'billion': Decimal(1_000_000_000),
}

DEFAULT_CURRENCY = '€'


def clean_text(text: Optional[str]) -> Optional[str]:
    """Clean and normalize text."""
    if not text:
        return None

    # Remove invisible characters
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', ' ', text)

    # Replace multiple spaces (including nbsp) with single space
    text = re.sub(r'\s+', ' ', text).strip()

    return text if text else None


def extract_team_from_wiki_link(text: Optional[str]) -> str:
    """
    Extract the team name from link text or markup.

    Args:
        text: Link text, raw cell HTML or wiki markup

    Returns:
        Cleaned team name (empty string if nothing is left)

    Examples:
        '[[Manchester United F.C.|Manchester United]]' -> 'Manchester United'
        '<a href="/wiki/Chelsea_F.C.">Chelsea</a>' -> 'Chelsea'
        '→ Getafe (loan)' -> 'Getafe'
        'Arsenal F.C.' -> 'Arsenal'
    """
    if not text:
        return ''

    # Keep the text content of HTML anchors
    cleaned = ANCHOR_PATTERN.sub(r'\1', text)

    # Wiki links: display text if present, else the link target
    cleaned = WIKI_LINK_PATTERN.sub(lambda m: m.group(2) or m.group(1), cleaned)

    cleaned = LOAN_MARKER_PATTERN.sub(' ', cleaned)
    cleaned = FOOTNOTE_PATTERN.sub('', cleaned)

    # HTML entities
    cleaned = cleaned.replace('&amp;', '&').replace('&nbsp;', ' ')

    cleaned = LEADING_MARKS_PATTERN.sub('', cleaned)
    cleaned = clean_text(cleaned) or ''
    cleaned = CLUB_SUFFIX_PATTERN.sub('', cleaned)

    return cleaned.strip()


def is_total_row(team_name: str) -> bool:
    """Check whether a team name is really a summary row ("Total", "Career total")."""
    return 'total' in team_name.lower()


def parse_transfer_fee(text: str) -> TransferFee:
    """
    Parse a transfer fee string.

    Args:
        text: Fee text from the document

    Returns:
        TransferFee, with the original text kept in `raw`

    Examples:
        '€60M' -> paid, 60000000, '€'
        '£45.5 million' -> paid, 45500000, '£'
        '£1,200,000' -> paid, 1200000, '£'
        'Free transfer' -> free
        'Loan' -> loan
        'Undisclosed' -> undisclosed
    """
    raw = (text or '').strip()
    cleaned = raw.lower()

    if 'free' in cleaned or 'released' in cleaned or cleaned == '0':
        return TransferFee(amount=None, currency='', kind=FeeKind.FREE, raw=raw)

    if 'loan' in cleaned:
        return TransferFee(amount=None, currency='', kind=FeeKind.LOAN, raw=raw)

    if 'undisclosed' in cleaned or 'unknown' in cleaned or cleaned == '?':
        return TransferFee(amount=None, currency='', kind=FeeKind.UNDISCLOSED, raw=raw)

    match = FEE_PATTERN.search(cleaned)
    if not match:
        return TransferFee(amount=None, currency='', kind=FeeKind.UNKNOWN, raw=raw)

    currency = match.group(1) or match.group(4) or DEFAULT_CURRENCY
    value_str = match.group(2)
    if ',' in value_str and '.' not in value_str and re.fullmatch(r'\d+,\d{1,2}', value_str):
        # Decimal comma: "2,5m"
        value_str = value_str.replace(',', '.')
    else:
        value_str = value_str.replace(',', '')

    try:
        amount = Decimal(value_str)
    except InvalidOperation:
        return TransferFee(amount=None, currency='', kind=FeeKind.UNKNOWN, raw=raw)

    unit = match.group(3)
    if unit:
        amount *= MULTIPLIERS[unit]

    return TransferFee(amount=amount, currency=currency, kind=FeeKind.PAID, raw=raw)
