"""Matching engine comparing a tasting with the roaster's notes."""

from __future__ import annotations

import logging
import math
import os
import re
import unicodedata
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from bean_match.matching.keywords import COMPLEXITY_TERMS, SENSORY_KEYWORDS
from bean_match.schema import MatchDetails, MatchScore, SelectedFlavors, SensoryAttributes
from bean_match.taxonomy import FlavorTaxonomy

logger = logging.getLogger(__name__)

SEGMENT_DELIMITERS = re.compile(r"[,，、]")
PUNCTUATION = re.compile(r"[./#!$%^&*;:{}=\-_`~()]")

LEVEL_WEIGHTS = {1: 8, 2: 6, 3: 4, 4: 2}
EXACT_TOKEN_POINTS = 10
PARTIAL_TOKEN_POINTS = 5
FLAVOR_TOKEN_MIN_LENGTH = 3

SelectedInput = SelectedFlavors | Mapping[str, Any] | None
SensoryInput = SensoryAttributes | Mapping[str, Any] | None


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class MatchingConfig:
    taxonomy_version: str = "v1"
    flavor_weight: float = 0.6
    sensory_weight: float = 0.4
    flavor_default: int = 50
    sensory_default: int = 60
    suggestion_limit: int = 5
    high_match_threshold: int = 80

    @classmethod
    def from_env(cls) -> "MatchingConfig":
        return cls(
            taxonomy_version=os.getenv("BEAN_MATCH_TAXONOMY_VERSION", "v1").strip() or "v1",
            suggestion_limit=max(0, _safe_int(os.getenv("BEAN_MATCH_SUGGESTION_LIMIT"), 5)),
        )


class MatchingEngine:
    """Lexical flavor and sensory matcher.

    The engine keeps no state between calls; the taxonomy it holds is
    read-only, so one instance can be shared freely.
    """

    def __init__(self, config: MatchingConfig | None = None):
        self.config = config or MatchingConfig()
        self.taxonomy = FlavorTaxonomy(version=self.config.taxonomy_version)

    def normalize(self, text: str | None, *, min_length: int = 2) -> list[str]:
        """Split free text into lowercase word tokens.

        Comma-separated segments are tokenized one by one so phrase
        boundaries are respected. Tokens shorter than ``min_length`` are
        dropped; repeats are kept.
        """
        if not text or not text.strip():
            return []

        tokens: list[str] = []
        for segment in SEGMENT_DELIMITERS.split(_fold(text)):
            cleaned = PUNCTUATION.sub(" ", segment)
            tokens.extend(word for word in cleaned.split() if len(word) >= min_length)
        return tokens

    def expand(self, term: str) -> set[str]:
        """Widen a flavor term to its translation, parent and children.

        Only the category to subcategory layer of the wheel is used, one step
        up and one step down.
        """
        key = term.strip().lower()
        if not key:
            return set()

        vocabulary = {key}
        self._add_translation(vocabulary, key)
        for parent, children in self.taxonomy.level2.items():
            if any(child.lower() == key for child in children):
                vocabulary.add(parent.lower())
                self._add_translation(vocabulary, parent)
            if parent.lower() == key:
                for child in children:
                    vocabulary.add(child.lower())
                    self._add_translation(vocabulary, child)
        return vocabulary

    def score_flavor(self, roaster_notes: str | None, selected: SelectedInput) -> int:
        if not roaster_notes or not roaster_notes.strip():
            return self.config.flavor_default

        flavors = _coerce_selected(selected)
        terms = _selected_terms(flavors)
        vocabulary: set[str] = set()
        for _, term in terms:
            vocabulary |= self.expand(term)

        match_score = 0
        max_possible = 0
        for token in self.normalize(roaster_notes, min_length=FLAVOR_TOKEN_MIN_LENGTH):
            max_possible += EXACT_TOKEN_POINTS
            if token in vocabulary:
                match_score += EXACT_TOKEN_POINTS
            elif any(token in entry or entry in token for entry in vocabulary):
                match_score += PARTIAL_TOKEN_POINTS

        notes = _fold(roaster_notes)
        for level, term in terms:
            weight = LEVEL_WEIGHTS[level]
            max_possible += weight
            if _fold(term) in notes:
                match_score += weight

        percentage = match_score / max_possible * 100 if max_possible > 0 else 50
        curved = min(100, percentage * 1.2 + 15)
        logger.debug("flavor match %s/%s -> %.1f", match_score, max_possible, curved)
        return _round_half_up(curved)

    def score_sensory(self, roaster_notes: str | None, attributes: SensoryInput) -> int:
        if not roaster_notes or not roaster_notes.strip():
            return self.config.sensory_default

        attrs = _coerce_sensory(attributes)
        notes = _fold(roaster_notes)
        match_count = 0
        total_checks = 0
        for attribute, band, weight in sensory_checks(attrs):
            total_checks += weight
            if band_keywords_found(notes, attribute, band):
                match_count += weight

        score = match_count / total_checks * 100 if total_checks > 0 else 50
        if _contains_any(notes, COMPLEXITY_TERMS):
            score = min(100, score + 10)
        logger.debug("sensory match %s/%s -> %.1f", match_count, total_checks, score)
        return _round_half_up(score)

    def calculate_match_score(
        self,
        roaster_notes: str | None,
        selected: SelectedInput,
        attributes: SensoryInput,
    ) -> MatchScore:
        flavor_score = self.score_flavor(roaster_notes, selected)
        sensory_score = self.score_sensory(roaster_notes, attributes)
        total = _round_half_up(
            flavor_score * self.config.flavor_weight + sensory_score * self.config.sensory_weight
        )
        return MatchScore(total=total, flavor_score=flavor_score, sensory_score=sensory_score)

    def get_match_details(
        self,
        roaster_notes: str | None,
        selected: SelectedInput,
        attributes: SensoryInput = None,
    ) -> MatchDetails:
        """Explain a match for display. Not used for scoring.

        ``attributes`` is accepted for symmetry with ``calculate_match_score``;
        the sensory report lists every sensory keyword found in the notes,
        whatever the taster's ratings were. A keyword inside a phrase of
        another band, such as "sweet" in "not sweet", is not listed.
        """
        notes = _fold(roaster_notes or "")
        tokens = self.normalize(notes, min_length=FLAVOR_TOKEN_MIN_LENGTH)
        terms = [term for _, term in _selected_terms(_coerce_selected(selected))]
        selected_flat = {term.lower() for term in terms}

        matched = _dedupe(token for token in tokens if token in selected_flat)
        unmatched = _dedupe(term for term in terms if not _shares_substring(term.lower(), tokens))

        sensory_matches = _dedupe(
            f"{attribute}: {keyword}"
            for attribute, bands in SENSORY_KEYWORDS.items()
            for band in bands
            for keyword in band_keywords_found(notes, attribute, band)
        )

        suggestions: list[str] = []
        for term in self.taxonomy.all_terms():
            if len(suggestions) >= self.config.suggestion_limit:
                break
            lowered = term.lower()
            if lowered in selected_flat:
                continue
            if _shares_substring(lowered, tokens):
                suggestions.append(term)

        return MatchDetails(
            matched_flavors=matched,
            unmatched_flavors=unmatched,
            sensory_matches=sensory_matches,
            suggestions=suggestions,
        )

    def _add_translation(self, vocabulary: set[str], term: str) -> None:
        translated = self.taxonomy.translate(term)
        if translated:
            vocabulary.add(translated.lower())


def sensory_checks(attributes: SensoryAttributes) -> list[tuple[str, str, int]]:
    """Return the ``(attribute, band, weight)`` checks for a set of ratings.

    Medium acidity, medium finish and anything below high sweetness are not
    checked; roasters rarely describe them.
    """
    checks: list[tuple[str, str, int]] = []

    body = _band(attributes.body, ("light", "medium", "heavy"))
    checks.append(("body", body, 1 if body == "medium" else 2))

    acidity = _band(attributes.acidity, ("low", "medium", "high"))
    if acidity != "medium":
        checks.append(("acidity", acidity, 2))

    if attributes.sweetness >= 4:
        checks.append(("sweetness", "high", 2))

    finish = _band(attributes.finish, ("short", "medium", "long"))
    if finish != "medium":
        checks.append(("finish", finish, 1))

    checks.append(("mouthfeel", attributes.mouthfeel, 2))
    return checks


def band_keywords_found(notes: str, attribute: str, band: str) -> list[str]:
    """Keywords of one band present in already folded ``notes``.

    Phrases belonging to the other bands of ``attribute`` are blanked out
    first, so "not sweet" never counts as "sweet" and "낮은 산미" never
    counts toward high acidity.
    """
    bands = SENSORY_KEYWORDS[attribute]
    targets = bands.get(band, ())
    for other, keywords in bands.items():
        if other == band:
            continue
        for keyword in keywords:
            # "sweet" stays when checking the band that owns "not sweet"
            if not any(keyword in target for target in targets):
                notes = notes.replace(keyword, " ")
    return [keyword for keyword in targets if keyword in notes]


@lru_cache(maxsize=1)
def default_engine() -> MatchingEngine:
    """Shared engine configured from the environment on first use."""
    return MatchingEngine(config=MatchingConfig.from_env())


def normalize_text(text: str | None, *, min_length: int = 2) -> list[str]:
    return default_engine().normalize(text, min_length=min_length)


def expand_flavor(term: str) -> set[str]:
    return default_engine().expand(term)


def score_flavor(roaster_notes: str | None, selected: SelectedInput) -> int:
    return default_engine().score_flavor(roaster_notes, selected)


def score_sensory(roaster_notes: str | None, attributes: SensoryInput) -> int:
    return default_engine().score_sensory(roaster_notes, attributes)


def calculate_match_score(
    roaster_notes: str | None,
    selected: SelectedInput,
    attributes: SensoryInput,
) -> MatchScore:
    """Score a tasting against roaster notes.

    Args:
        roaster_notes: Free-text notes published by the roaster. May be empty.
        selected: Flavors picked on each level of the wheel.
        attributes: Body, acidity, sweetness, finish and mouthfeel ratings.

    Returns:
        MatchScore with the total and both sub-scores in 0..100.
    """
    return default_engine().calculate_match_score(roaster_notes, selected, attributes)


def get_match_details(
    roaster_notes: str | None,
    selected: SelectedInput,
    attributes: SensoryInput = None,
) -> MatchDetails:
    return default_engine().get_match_details(roaster_notes, selected, attributes)


def _coerce_selected(value: SelectedInput) -> SelectedFlavors:
    if value is None:
        return SelectedFlavors()
    if isinstance(value, SelectedFlavors):
        return value
    return SelectedFlavors.model_validate(value)


def _coerce_sensory(value: SensoryInput) -> SensoryAttributes:
    if value is None:
        return SensoryAttributes()
    if isinstance(value, SensoryAttributes):
        return value
    return SensoryAttributes.model_validate(value)


def _fold(text: str) -> str:
    return unicodedata.normalize("NFKC", text).lower()


def _selected_terms(selected: SelectedFlavors) -> list[tuple[int, str]]:
    return [(level, term.strip()) for level, term in selected.all_terms() if term.strip()]


def _band(rating: int, names: tuple[str, str, str]) -> str:
    low, medium, high = names
    if rating <= 2:
        return low
    if rating >= 4:
        return high
    return medium


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _shares_substring(term: str, tokens: list[str]) -> bool:
    return any(token in term or term in token for token in tokens)


def _dedupe(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    items: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        items.append(value)
    return items


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
