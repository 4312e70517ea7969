"""pi-search: fuzzy matching and ranking for a redirect search box."""

from pi.search.catalog import (
    Catalog,
    CatalogError,
    get_catalog_path,
    load_catalog,
    parse_catalog,
    redirect_key,
)
from pi.search.fuzzy import (
    fuzzy_match_with_indices,
    highlight_matches,
    levenshtein_distance,
)
from pi.search.scoring import (
    RankedCandidate,
    calculate_score,
    calculate_score_with_fallback,
    fallback_threshold,
    rank_candidates,
)
from pi.search.types import (
    Aliases,
    Candidate,
    ManyAliases,
    MatchResult,
    MatchType,
    SingleAlias,
    aliases_from_value,
)

__all__ = [
    # Types
    "Aliases",
    "Candidate",
    "ManyAliases",
    "MatchResult",
    "MatchType",
    "SingleAlias",
    "aliases_from_value",
    # Fuzzy
    "fuzzy_match_with_indices",
    "highlight_matches",
    "levenshtein_distance",
    # Scoring
    "RankedCandidate",
    "calculate_score",
    "calculate_score_with_fallback",
    "fallback_threshold",
    "rank_candidates",
    # Catalog
    "Catalog",
    "CatalogError",
    "get_catalog_path",
    "load_catalog",
    "parse_catalog",
    "redirect_key",
]
