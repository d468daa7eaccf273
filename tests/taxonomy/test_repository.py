"""Tests for the flavor taxonomy repository."""

import pytest

from bean_match import FlavorTaxonomy, SelectedFlavors
from bean_match.exceptions import TaxonomyError


@pytest.fixture(scope="module")
def taxonomy():
    return FlavorTaxonomy()


def test_packaged_taxonomy_is_consistent(taxonomy):
    assert taxonomy.validate() == []


def test_level_terms(taxonomy):
    level1 = taxonomy.level_terms(1)

    assert len(level1) == 9
    assert level1[0] == "Fruity"
    assert "Berry" in taxonomy.level_terms(2)
    assert "Blueberry" in taxonomy.level_terms(3)
    assert "Jammy" in taxonomy.level_terms(4)


def test_level_terms_rejects_unknown_level(taxonomy):
    with pytest.raises(TaxonomyError):
        taxonomy.level_terms(5)


def test_parents_and_children(taxonomy):
    assert taxonomy.parents("Berry") == ["Fruity"]
    assert taxonomy.parents("blueberry") == ["Berry"]
    assert taxonomy.children("Berry") == ["Blackberry", "Raspberry", "Blueberry", "Strawberry"]


def test_parents_at_is_scoped_to_one_level(taxonomy):
    assert taxonomy.parents_at(3, "blueberry") == ["Berry"]
    assert taxonomy.parents_at(2, "BERRY") == ["Fruity"]
    assert taxonomy.parents_at(1, "Fruity") == []
    assert taxonomy.parents_at(4, "Berry") == []


def test_parents_at_rejects_unknown_level(taxonomy):
    with pytest.raises(TaxonomyError):
        taxonomy.parents_at(5, "Berry")


def test_children_spans_levels_for_shared_names(taxonomy):
    children = taxonomy.children("Floral")

    assert "Black Tea" in children
    assert "Jasmine" in children


def test_translate(taxonomy):
    assert taxonomy.translate("Blueberry") == "블루베리"
    assert taxonomy.translate("fruity") == "과일"
    assert taxonomy.translate("Bubblegum") is None


def test_all_terms_dedupes_across_levels(taxonomy):
    terms = taxonomy.all_terms()

    assert terms.count("Green/Vegetative") == 1
    assert terms.count("Fresh") == 1
    assert terms.index("Fruity") < terms.index("Berry") < terms.index("Blueberry")


def test_is_known(taxonomy):
    assert taxonomy.is_known("jasmine")
    assert not taxonomy.is_known("bubblegum")


def test_invalid_selections(taxonomy):
    selected = SelectedFlavors(
        level1=["Fruity"],
        level2=["Berry", "Cocoa"],
        level3=["Blueberry"],
        level4=["Ripe", "Smoky"],
    )

    assert taxonomy.invalid_selections(selected) == ["level2:Cocoa", "level4:Smoky"]


def test_invalid_selections_empty_for_consistent_path(taxonomy):
    selected = SelectedFlavors.from_paths([["Fruity", "Berry", "Blueberry", "Ripe"]])

    assert taxonomy.invalid_selections(selected) == []


@pytest.mark.parametrize("version", ["v99", "../v1", "v1.wheel", ""])
def test_unknown_version_raises(version):
    with pytest.raises(TaxonomyError):
        FlavorTaxonomy(version=version)
