"""Data models for bean-match."""

from collections.abc import Iterable, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bean_match.exceptions import FlavorPathError

Mouthfeel = Literal["Clean", "Creamy", "Juicy", "Silky"]

LEVELS = (1, 2, 3, 4)


class SelectedFlavors(BaseModel):
    """Flavors picked on each level of the flavor wheel."""

    level1: list[str] = Field(default_factory=list)
    level2: list[str] = Field(default_factory=list)
    level3: list[str] = Field(default_factory=list)
    level4: list[str] = Field(default_factory=list)

    def level(self, level: int) -> list[str]:
        return getattr(self, f"level{level}")

    def all_terms(self) -> list[tuple[int, str]]:
        """Return ``(level, term)`` pairs in level order."""
        return [(level, term) for level in LEVELS for term in self.level(level)]

    def flat(self) -> set[str]:
        """Return every selected term lowercased, ignoring the level."""
        return {term.lower() for _, term in self.all_terms()}

    def is_empty(self) -> bool:
        return not self.all_terms()

    @classmethod
    def from_paths(cls, paths: Iterable[Sequence[str]]) -> "SelectedFlavors":
        """Flatten hierarchical selections such as ``["Fruity", "Berry"]``.

        Position ``i`` of each path goes to ``level{i+1}``. Duplicates are
        dropped, keeping the first occurrence.
        """
        levels: dict[int, list[str]] = {level: [] for level in LEVELS}
        for path in paths:
            if isinstance(path, str):
                raise FlavorPathError(f"Flavor path must be a sequence of terms, got {path!r}")
            if len(path) > len(LEVELS):
                raise FlavorPathError(f"Flavor path is deeper than {len(LEVELS)} levels: {list(path)}")
            for index, term in enumerate(path):
                value = term.strip()
                if not value:
                    raise FlavorPathError(f"Empty term in flavor path: {list(path)}")
                if value not in levels[index + 1]:
                    levels[index + 1].append(value)
        return cls(**{f"level{level}": terms for level, terms in levels.items()})


class SensoryAttributes(BaseModel):
    """Sensory ratings from the tasting form."""

    body: int = Field(default=3, ge=1, le=5)
    acidity: int = Field(default=3, ge=1, le=5)
    sweetness: int = Field(default=3, ge=1, le=5)
    finish: int = Field(default=3, ge=1, le=5)
    mouthfeel: Mouthfeel = "Clean"


class MatchScore(BaseModel):
    """Similarity between a tasting and the roaster's notes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = Field(ge=0, le=100)
    flavor_score: int = Field(ge=0, le=100)
    sensory_score: int = Field(ge=0, le=100)

    def is_high_match(self, threshold: int = 80) -> bool:
        return self.total > threshold


class MatchDetails(BaseModel):
    """Explanation of a match score for display."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    matched_flavors: list[str] = Field(default_factory=list)
    unmatched_flavors: list[str] = Field(default_factory=list)
    sensory_matches: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
