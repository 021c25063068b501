"""Team name normalization and string similarity."""

import re
import unicodedata

from rapidfuzz.distance import Levenshtein

# Club-type affixes dropped as whole words ("FC Porto", "VfB Stuttgart")
CLUB_AFFIXES = frozenset({
    'fc', 'cf', 'afc', 'sc', 'fk', 'as', 'ss', 'ssc', 'rc',
    'ac', 'bv', 'sv', 'vfb', 'vfl', 'tsg', 'rb',
})

_NON_ALNUM = re.compile(r'[^a-z0-9\s]')
_AFFIX_WORDS = re.compile(r'\b(' + '|'.join(sorted(CLUB_AFFIXES)) + r')\b')
_WHITESPACE = re.compile(r'\s+')


def strip_diacritics(text: str) -> str:
    """Remove combining marks: 'München' -> 'Munchen'."""
    decomposed = unicodedata.normalize('NFD', text)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_team_name(name: str) -> str:
    """
    Normalize a team name for comparison.

    Lower-cases, strips diacritics and punctuation, drops club affixes and
    removes all whitespace. Normalizing twice gives the same result.

    Examples:
        'Manchester United F.C.' -> 'manchesterunited'
        'Bayern München' -> 'bayernmunchen'
        'FC Porto' -> 'porto'
    """
    if not name:
        return ''

    text = strip_diacritics(name.lower())
    text = _NON_ALNUM.sub('', text)
    text = _AFFIX_WORDS.sub('', text)
    text = _WHITESPACE.sub('', text)

    # "A S" collapses to "as"; drop it now so a second pass is a no-op
    if text in CLUB_AFFIXES:
        return ''

    return text


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance (insertions, deletions, substitutions)."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Similarity in [0, 1]: 1 - distance / longer length (1.0 for two empty strings)."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - edit_distance(a, b) / max_len
