"""Resolve free-text team names against the team registry.

Tiers are tried in a fixed order and the first one with a candidate wins:

1. exact   - normalized names are equal                    (confidence 1.0)
2. alias   - the name is a known alias of a registry team  (confidence 0.95)
3. partial - one normalized name contains the other        (0.85 * length ratio)
4. fuzzy   - best Levenshtein similarity above threshold   (the similarity)
"""

from typing import Callable, List, Optional, Sequence

from career_scraper.matching.aliases import DEFAULT_ALIASES, AliasTable
from career_scraper.matching.normalizer import normalize_team_name, similarity
from career_scraper.models import MatchResult, MatchType, Team

DEFAULT_THRESHOLD = 0.75

EXACT_CONFIDENCE = 1.0
ALIAS_CONFIDENCE = 0.95
PARTIAL_CONFIDENCE = 0.85
PARTIAL_MIN_RATIO = 0.5


def match_exact(normalized: str, teams: Sequence[Team]) -> Optional[MatchResult]:
    for team in teams:
        if normalize_team_name(team.name) == normalized:
            return MatchResult(team_id=team.id, confidence=EXACT_CONFIDENCE, match_type=MatchType.EXACT)
    return None


def match_alias(
    raw_name: str,
    normalized: str,
    teams: Sequence[Team],
    aliases: AliasTable,
) -> Optional[MatchResult]:
    """Match through the alias table; the canonical team must be in the registry."""
    raw_lower = raw_name.strip().lower()

    for canonical, alternates in aliases.items():
        names = (canonical,) + alternates
        if not any(
            normalize_team_name(name) == normalized or name.lower() == raw_lower
            for name in names
        ):
            continue

        canonical_normalized = normalize_team_name(canonical)
        for team in teams:
            if normalize_team_name(team.name) == canonical_normalized:
                return MatchResult(team_id=team.id, confidence=ALIAS_CONFIDENCE, match_type=MatchType.ALIAS)

    return None


def match_partial(normalized: str, teams: Sequence[Team]) -> Optional[MatchResult]:
    """First team where one name contains the other and the lengths are close enough."""
    for team in teams:
        team_normalized = normalize_team_name(team.name)
        if not team_normalized:
            continue
        if normalized not in team_normalized and team_normalized not in normalized:
            continue

        ratio = min(len(normalized), len(team_normalized)) / max(len(normalized), len(team_normalized))
        if ratio > PARTIAL_MIN_RATIO:
            return MatchResult(
                team_id=team.id,
                confidence=PARTIAL_CONFIDENCE * ratio,
                match_type=MatchType.PARTIAL,
            )

    return None


def match_fuzzy(normalized: str, teams: Sequence[Team], threshold: float) -> Optional[MatchResult]:
    """Most similar team, if its similarity reaches the threshold. Ties keep the earlier team."""
    best: Optional[MatchResult] = None
    best_similarity = 0.0

    for team in teams:
        score = similarity(normalized, normalize_team_name(team.name))
        if score > best_similarity and score >= threshold:
            best_similarity = score
            best = MatchResult(team_id=team.id, confidence=score, match_type=MatchType.FUZZY)

    return best


def find_best_match(
    raw_name: str,
    teams: Sequence[Team],
    aliases: AliasTable = DEFAULT_ALIASES,
    threshold: float = DEFAULT_THRESHOLD,
) -> Optional[MatchResult]:
    """
    Find the registry team that a free-text name refers to.

    Args:
        raw_name: Team name as extracted from the document
        teams: Registry of canonical teams, in the order ties should favour
        aliases: Alias table to consult
        threshold: Minimum similarity for a fuzzy match, in [0, 1]

    Returns:
        MatchResult, or None when no tier produced a candidate

    Raises:
        ValueError: If threshold is outside [0, 1]
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be between 0 and 1, got {threshold}")

    normalized = normalize_team_name(raw_name)
    if not normalized:
        return None

    tiers: List[Callable[[], Optional[MatchResult]]] = [
        lambda: match_exact(normalized, teams),
        lambda: match_alias(raw_name, normalized, teams, aliases),
        lambda: match_partial(normalized, teams),
        lambda: match_fuzzy(normalized, teams, threshold),
    ]

    for tier in tiers:
        result = tier()
        if result is not None:
            return result

    return None
