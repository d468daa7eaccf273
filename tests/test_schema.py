"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from bean_match import MatchDetails, MatchScore, SelectedFlavors, SensoryAttributes
from bean_match.exceptions import FlavorPathError


def test_selected_flavors_default_empty():
    """SelectedFlavors with no data should work."""
    selected = SelectedFlavors()
    assert selected.level1 == []
    assert selected.level4 == []
    assert selected.is_empty()


def test_selected_flavors_flat_bag():
    selected = SelectedFlavors(level1=["Fruity"], level3=["Blueberry", "fruity"])

    assert selected.flat() == {"fruity", "blueberry"}
    assert selected.all_terms() == [(1, "Fruity"), (3, "Blueberry"), (3, "fruity")]


def test_selected_flavors_from_paths():
    selected = SelectedFlavors.from_paths(
        [
            ["Fruity", "Berry", "Blueberry"],
            ["Fruity", "Berry", "Raspberry", "Jammy"],
            ["Sweet"],
        ]
    )

    assert selected.level1 == ["Fruity", "Sweet"]
    assert selected.level2 == ["Berry"]
    assert selected.level3 == ["Blueberry", "Raspberry"]
    assert selected.level4 == ["Jammy"]


def test_from_paths_rejects_deep_path():
    with pytest.raises(FlavorPathError):
        SelectedFlavors.from_paths([["Fruity", "Berry", "Blueberry", "Ripe", "Extra"]])


def test_from_paths_rejects_plain_string():
    with pytest.raises(FlavorPathError):
        SelectedFlavors.from_paths(["Fruity"])


def test_from_paths_rejects_blank_term():
    with pytest.raises(FlavorPathError):
        SelectedFlavors.from_paths([["Fruity", " "]])


def test_sensory_defaults():
    """SensoryAttributes defaults to the middle of every scale."""
    attrs = SensoryAttributes()
    assert (attrs.body, attrs.acidity, attrs.sweetness, attrs.finish) == (3, 3, 3, 3)
    assert attrs.mouthfeel == "Clean"


@pytest.mark.parametrize("field, value", [("body", 0), ("acidity", 6), ("mouthfeel", "Oily")])
def test_sensory_rejects_out_of_range(field, value):
    with pytest.raises(ValidationError):
        SensoryAttributes(**{field: value})


def test_match_score_serializes_camel_case():
    score = MatchScore(total=60, flavor_score=56, sensory_score=67)

    assert score.model_dump(by_alias=True) == {"total": 60, "flavorScore": 56, "sensoryScore": 67}
    assert MatchScore.model_validate({"total": 1, "flavorScore": 2, "sensoryScore": 3}).flavor_score == 2


def test_match_score_rejects_out_of_range():
    with pytest.raises(ValidationError):
        MatchScore(total=101, flavor_score=0, sensory_score=0)


def test_high_match_threshold():
    assert MatchScore(total=81, flavor_score=80, sensory_score=82).is_high_match()
    assert not MatchScore(total=80, flavor_score=80, sensory_score=80).is_high_match()
    assert MatchScore(total=71, flavor_score=70, sensory_score=72).is_high_match(threshold=70)


def test_match_details_json_round_trip():
    details = MatchDetails(matched_flavors=["blueberry"], suggestions=["Honey"])

    payload = details.model_dump_json(by_alias=True)

    assert '"matchedFlavors":["blueberry"]' in payload
    assert MatchDetails.model_validate_json(payload) == details
