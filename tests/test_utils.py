"""Tests for link cleaning and transfer fee parsing."""

from decimal import Decimal

import pytest

from career_scraper.extractors.utils import (
    clean_text,
    extract_team_from_wiki_link,
    is_total_row,
    parse_transfer_fee,
)
from career_scraper.models import FeeKind


def test_clean_text():
    """Test whitespace and control characters are collapsed."""
    assert clean_text("  Real  Madrid \n") == "Real Madrid"
    assert clean_text("a\x07b") == "a b"
    assert clean_text("   ") is None
    assert clean_text(None) is None


@pytest.mark.parametrize("text, expected", [
    ("[[Manchester United F.C.|Manchester United]]", "Manchester United"),
    ("[[Chelsea F.C.]]", "Chelsea"),
    ('<a href="/wiki/Chelsea_F.C.">Chelsea</a>', "Chelsea"),
    ("→ Getafe (loan)", "Getafe"),
    ("Arsenal F.C.", "Arsenal"),
    ("Brighton &amp; Hove Albion", "Brighton & Hove Albion"),
    ("Benfica[1]", "Benfica"),
    ("Porto[note 2]", "Porto"),
    ("  Juventus   FC ", "Juventus"),
])
def test_extract_team_from_wiki_link(text, expected):
    """Test link markup, loan markers, footnotes and suffixes are removed."""
    assert extract_team_from_wiki_link(text) == expected


def test_extract_team_from_wiki_link_empty():
    """Test empty input gives an empty name."""
    assert extract_team_from_wiki_link("") == ""
    assert extract_team_from_wiki_link(None) == ""
    assert extract_team_from_wiki_link("[1]") == ""


def test_is_total_row():
    """Test summary rows are recognised."""
    assert is_total_row("Total")
    assert is_total_row("Career total")
    assert not is_total_row("Tottenham Hotspur")


@pytest.mark.parametrize("text, amount, currency", [
    ("€60M", Decimal("60000000"), "€"),
    ("£45.5 million", Decimal("45500000"), "£"),
    ("£1,200,000", Decimal("1200000"), "£"),
    ("$3bn", Decimal("3000000000"), "$"),
    ("500k", Decimal("500000"), "€"),
    ("€2,5m", Decimal("2500000"), "€"),
    ("12 million €", Decimal("12000000"), "€"),
])
def test_parse_transfer_fee_paid(text, amount, currency):
    """Test paid fees with units, separators and currencies."""
    fee = parse_transfer_fee(text)
    assert fee.kind == FeeKind.PAID
    assert fee.amount == amount
    assert fee.currency == currency
    assert fee.raw == text


@pytest.mark.parametrize("text, kind", [
    ("Free transfer", FeeKind.FREE),
    ("Released", FeeKind.FREE),
    ("0", FeeKind.FREE),
    ("Loan", FeeKind.LOAN),
    ("Season-long loan", FeeKind.LOAN),
    ("Undisclosed", FeeKind.UNDISCLOSED),
    ("?", FeeKind.UNDISCLOSED),
    ("n/a", FeeKind.UNKNOWN),
    ("", FeeKind.UNKNOWN),
])
def test_parse_transfer_fee_kinds(text, kind):
    """Test non-monetary fee kinds carry no amount."""
    fee = parse_transfer_fee(text)
    assert fee.kind == kind
    assert fee.amount is None
    assert fee.raw == text
