"""bean-match: Score a coffee tasting against the roaster's notes."""

from bean_match.matching import (
    MatchingConfig,
    MatchingEngine,
    calculate_match_score,
    get_match_details,
)
from bean_match.schema import MatchDetails, MatchScore, SelectedFlavors, SensoryAttributes
from bean_match.taxonomy import FlavorTaxonomy

__version__ = "0.1.0"

__all__ = [
    "calculate_match_score",
    "get_match_details",
    "FlavorTaxonomy",
    "MatchDetails",
    "MatchingConfig",
    "MatchingEngine",
    "MatchScore",
    "SelectedFlavors",
    "SensoryAttributes",
    "__version__",
]
