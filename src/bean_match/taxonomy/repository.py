"""Flavor wheel repository backed by packaged taxonomy data."""

from __future__ import annotations

import re
from importlib import import_module

from bean_match.exceptions import TaxonomyError
from bean_match.schema import LEVELS, SelectedFlavors

VERSION_PATTERN = re.compile(r"^v\d+$")


class FlavorTaxonomy:
    """Four-level flavor wheel plus its Korean labels.

    Lookups are case-insensitive. Results keep the casing of the packaged data.
    """

    def __init__(self, version: str = "v1"):
        self.version = version
        data = self._load(version)
        self.level2: dict[str, list[str]] = data.LEVEL2
        self.level3: dict[str, list[str]] = data.LEVEL3
        self.level4: dict[str, list[str]] = data.LEVEL4
        self.korean: dict[str, str] = data.KOREAN
        self._maps = (self.level2, self.level3, self.level4)
        self._korean_index = {key.lower(): value for key, value in self.korean.items()}

    def translate(self, term: str) -> str | None:
        return self._korean_index.get(term.lower())

    def children(self, term: str) -> list[str]:
        """Direct children of ``term`` on any level of the wheel."""
        key = term.lower()
        found: list[str] = []
        for mapping in self._maps:
            for parent, children in mapping.items():
                if parent.lower() == key:
                    found.extend(child for child in children if child not in found)
        return found

    def parents(self, term: str) -> list[str]:
        """Direct parents of ``term`` on any level of the wheel."""
        key = term.lower()
        found: list[str] = []
        for mapping in self._maps:
            for parent, children in mapping.items():
                if parent not in found and any(child.lower() == key for child in children):
                    found.append(parent)
        return found

    def parents_at(self, level: int, term: str) -> list[str]:
        """Parents of ``term`` on the level above ``level``.

        Level 1 terms have no parents.
        """
        if level not in LEVELS:
            raise TaxonomyError(f"Flavor wheel has no level {level}")
        if level == 1:
            return []
        key = term.lower()
        mapping = self._maps[level - 2]
        return [parent for parent, children in mapping.items() if any(child.lower() == key for child in children)]

    def level_terms(self, level: int) -> list[str]:
        if level not in LEVELS:
            raise TaxonomyError(f"Flavor wheel has no level {level}")
        if level == 1:
            return list(self.level2)
        mapping = self._maps[level - 2]
        terms: list[str] = []
        for children in mapping.values():
            terms.extend(child for child in children if child not in terms)
        return terms

    def all_terms(self) -> list[str]:
        """Every term on the wheel, level by level, without duplicates."""
        terms: list[str] = []
        seen: set[str] = set()
        for level in LEVELS:
            for term in self.level_terms(level):
                if term.lower() in seen:
                    continue
                seen.add(term.lower())
                terms.append(term)
        return terms

    def is_known(self, term: str) -> bool:
        key = term.lower()
        return any(item.lower() == key for item in self.all_terms())

    def invalid_selections(self, selected: SelectedFlavors) -> list[str]:
        """Selected terms whose parent was not selected on the level above."""
        invalid: list[str] = []
        for level in LEVELS[1:]:
            chosen_parents = {term.lower() for term in selected.level(level - 1)}
            for term in selected.level(level):
                parents = {parent.lower() for parent in self.parents_at(level, term)}
                if not parents & chosen_parents:
                    invalid.append(f"level{level}:{term}")
        return invalid

    def validate(self) -> list[str]:
        """Report inconsistencies between the levels and the label table."""
        problems: list[str] = []
        level2_children = set(self.level_terms(2))
        level3_values = set(self.level_terms(3))

        for key in self.level3:
            if key not in level2_children:
                problems.append(f"level3 key is not a level2 subcategory: {key}")
        for child in sorted(level2_children):
            if child not in self.level3:
                problems.append(f"level2 subcategory has no level3 notes: {child}")
        for key in self.level4:
            if key not in level3_values:
                problems.append(f"level4 key is not a level3 note: {key}")
        for value in sorted(level3_values):
            if value not in self.level4:
                problems.append(f"level3 note has no level4 descriptors: {value}")

        known = {term.lower() for term in self.all_terms()}
        for key in self.korean:
            if key.lower() not in known:
                problems.append(f"korean label for unknown term: {key}")
        return problems

    @staticmethod
    def _load(version: str):
        if not VERSION_PATTERN.match(version):
            raise TaxonomyError(f"Invalid flavor taxonomy version: {version}")
        try:
            data = import_module(f"bean_match.taxonomy.data.{version}")
        except ModuleNotFoundError as exc:
            raise TaxonomyError(f"Flavor taxonomy version not found: {version}") from exc
        for name in ("LEVEL2", "LEVEL3", "LEVEL4", "KOREAN"):
            if not hasattr(data, name):
                raise TaxonomyError(f"Flavor taxonomy {version} is missing {name}")
        return data
