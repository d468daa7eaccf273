"""Flavor wheel data for bean-match."""

from bean_match.taxonomy.repository import FlavorTaxonomy

__all__ = ["FlavorTaxonomy"]
