"""Init for matching package."""

from career_scraper.matching.aliases import DEFAULT_ALIASES, TEAM_ALIASES, AliasTable
from career_scraper.matching.normalizer import edit_distance, normalize_team_name, similarity
from career_scraper.matching.resolver import find_best_match

__all__ = [
    'DEFAULT_ALIASES',
    'TEAM_ALIASES',
    'AliasTable',
    'edit_distance',
    'normalize_team_name',
    'similarity',
    'find_best_match',
]
