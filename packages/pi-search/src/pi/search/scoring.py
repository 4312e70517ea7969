"""Priority scoring and ranking of search candidates.

Lower score = better match:

    1          key matched
    2          an alias matched
    3          description matched
    10 + d     key within edit distance d (fallback only)
    20 + d     closest alias within edit distance d (fallback only)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

from pi.search.fuzzy import (
    MARK_CLOSE,
    MARK_OPEN,
    fuzzy_match_with_indices,
    highlight_matches,
    levenshtein_distance,
)
from pi.search.types import Aliases, Candidate, MatchResult, aliases_from_value

AliasesLike = Union[Aliases, str, Sequence[str], None]

KEY_SCORE = 1
ALIAS_SCORE = 2
DESCRIPTION_SCORE = 3
SIMILAR_KEY_BASE = 10
SIMILAR_ALIAS_BASE = 20


def fallback_threshold(search: str) -> int:
    """Largest edit distance still offered as a suggestion for ``search``."""
    return len(search) // 2 + 3


def _first_alias_match(aliases: Aliases, search: str) -> tuple[str, list[int]] | None:
    for alias in aliases:
        indices = fuzzy_match_with_indices(alias, search)
        if indices is not None:
            return alias, indices
    return None


def calculate_score(
    key: str, description: str, aliases: AliasesLike, search: str
) -> MatchResult | None:
    """Score a candidate by subsequence match on key, then aliases, then description."""
    key_match = fuzzy_match_with_indices(key, search)
    if key_match is not None:
        return MatchResult(score=KEY_SCORE, type="key", indices=tuple(key_match))

    alias_match = _first_alias_match(aliases_from_value(aliases), search)
    if alias_match is not None:
        return MatchResult(score=ALIAS_SCORE, type="aliases", indices=tuple(alias_match[1]))

    desc_match = fuzzy_match_with_indices(description, search)
    if desc_match is not None:
        return MatchResult(
            score=DESCRIPTION_SCORE, type="description", indices=tuple(desc_match)
        )

    return None


def calculate_score_with_fallback(
    key: str, description: str, aliases: AliasesLike, search: str
) -> MatchResult | None:
    """Like calculate_score, but suggest close keys or aliases when nothing matches.

    The description does not take part in the edit-distance fallback.
    """
    exact = calculate_score(key, description, aliases, search)
    if exact is not None:
        return exact

    key_distance = levenshtein_distance(key, search)

    min_alias_distance: float = math.inf
    for alias in aliases_from_value(aliases):
        min_alias_distance = min(min_alias_distance, levenshtein_distance(alias, search))

    threshold = fallback_threshold(search)

    if key_distance <= threshold:
        return MatchResult(
            score=SIMILAR_KEY_BASE + key_distance,
            type="similar",
            indices=None,
            distance=key_distance,
        )
    if min_alias_distance <= threshold:
        distance = int(min_alias_distance)
        return MatchResult(
            score=SIMILAR_ALIAS_BASE + distance,
            type="similar",
            indices=None,
            distance=distance,
        )

    return None


@dataclass(frozen=True)
class RankedCandidate:
    candidate: Candidate
    result: MatchResult
    # field text that result.indices point into; the key for "similar" results
    matched_text: str

    def highlighted(self, open_tag: str = MARK_OPEN, close_tag: str = MARK_CLOSE) -> str:
        return highlight_matches(self.matched_text, self.result.indices, open_tag, close_tag)


def _matched_text(candidate: Candidate, result: MatchResult, search: str) -> str:
    if result.type == "description":
        return candidate.description
    if result.type == "aliases":
        alias_match = _first_alias_match(candidate.aliases, search)
        if alias_match is not None:
            return alias_match[0]
    return candidate.key


def rank_candidates(
    candidates: Iterable[Candidate],
    search: str,
    *,
    fallback: bool = False,
    limit: int | None = None,
) -> list[RankedCandidate]:
    """Score every candidate, drop non-matches and sort best first.

    Candidates with equal scores keep their input order.
    """
    scorer = calculate_score_with_fallback if fallback else calculate_score
    ranked: list[RankedCandidate] = []

    for candidate in candidates:
        result = scorer(candidate.key, candidate.description, candidate.aliases, search)
        if result is not None:
            ranked.append(
                RankedCandidate(
                    candidate=candidate,
                    result=result,
                    matched_text=_matched_text(candidate, result, search),
                )
            )

    ranked.sort(key=lambda r: r.result.score)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
