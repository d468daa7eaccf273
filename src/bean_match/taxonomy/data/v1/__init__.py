"""Flavor taxonomy v1."""

from bean_match.taxonomy.data.v1.wheel import KOREAN, LEVEL2, LEVEL3, LEVEL4

__all__ = ["LEVEL2", "LEVEL3", "LEVEL4", "KOREAN"]
