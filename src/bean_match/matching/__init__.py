"""Flavor and sensory matching for bean-match."""

from bean_match.matching.engine import (
    MatchingConfig,
    MatchingEngine,
    calculate_match_score,
    expand_flavor,
    get_match_details,
    normalize_text,
    score_flavor,
    score_sensory,
)

__all__ = [
    "MatchingConfig",
    "MatchingEngine",
    "calculate_match_score",
    "expand_flavor",
    "get_match_details",
    "normalize_text",
    "score_flavor",
    "score_sensory",
]
