import pytest

from models import IngredientInfo, MatchSource
from services.ingredient_matching import find_ingredient_matches


def test_alias_match_returns_canonical_ingredient(olive_oil):
    suggestions = find_ingredient_matches("EVOO 1 Liter", [olive_oil], min_confidence=0.3)

    assert suggestions
    assert suggestions[0].ingredient.name == "Extra Virgin Olive Oil"
    assert suggestions[0].score > 0.8


def test_abbreviated_line_ranks_chicken_first(protein_catalog):
    suggestions = find_ingredient_matches("CHKN BRST BNLS", protein_catalog, min_confidence=0.3)

    names = [s.ingredient.name for s in suggestions]
    assert names[0] == "Chicken Breast"
    assert "Chicken Thigh" in names
    assert "Atlantic Salmon" not in names


def test_alias_scores_at_full_strength():
    scallions = IngredientInfo("ing-scallions", "Scallions", "", "Produce", ("Green Onion",))
    green_onion = IngredientInfo("ing-green-onion", "Green Onion", "", "Produce")

    [name_match, alias_match] = find_ingredient_matches(
        "GRN ONIN BUNCH", [scallions, green_onion], min_confidence=0.3
    )

    assert alias_match.score == name_match.score
    assert alias_match.source is MatchSource.ALIAS
    assert alias_match.matched_text == "Green Onion"
    assert name_match.source is MatchSource.NAME
    # equal scores fall back to the canonical name
    assert name_match.ingredient.name == "Green Onion"
    assert alias_match.ingredient.name == "Scallions"


def test_equal_scores_break_on_canonical_name(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "string_similarity_weight", 0.0)
    candidates = [
        IngredientInfo("b", "Zucchini Squash"),
        IngredientInfo("a", "Acorn Squash"),
        IngredientInfo("c", "butternut squash"),
    ]

    matches = find_ingredient_matches("Squash", candidates, min_confidence=0.0)

    assert [m.ingredient.name for m in matches] == ["Acorn Squash", "butternut squash", "Zucchini Squash"]


def test_reason_names_winning_source(olive_oil):
    [match] = find_ingredient_matches("EVOO 1 Liter", [olive_oil], min_confidence=0.3)
    assert match.reason.startswith("Name match: ")
    assert match.reason.endswith("%")


def test_sku_can_carry_the_match():
    bagel = IngredientInfo("ing-bagel", "Everything Bagel", "bgl-evr-12")

    [match] = find_ingredient_matches("BGL EVR 12", [bagel], min_confidence=0.3)

    assert match.source is MatchSource.SKU
    assert match.score == pytest.approx(0.8)
    assert match.reason == "SKU match: 80%"
    assert match.breakdown.token_score == 0.0


def test_abbreviated_sku_is_expanded_like_the_description():
    poultry = IngredientInfo("ing-x", "Poultry Item", "CHKN BRST")

    [match] = find_ingredient_matches("CHKN BRST", [poultry], min_confidence=0.0)

    assert match.source is MatchSource.SKU
    assert match.breakdown.string_similarity == pytest.approx(1.0)
    assert match.score == pytest.approx(0.8)
    assert match.matched_text == "CHKN BRST"


def test_results_are_sorted_and_respect_floor(protein_catalog):
    for floor in (0.0, 0.3, 0.5, 0.9):
        matches = find_ingredient_matches("Chicken Thigh Boneless", protein_catalog, min_confidence=floor)
        scores = [m.score for m in matches]
        assert scores == sorted(scores, reverse=True)
        assert all(floor <= s <= 1.0 for s in scores)


def test_empty_inputs_return_empty(protein_catalog):
    assert find_ingredient_matches("", protein_catalog) == []
    assert find_ingredient_matches("Chicken", []) == []


def test_candidate_without_aliases_or_sku():
    plain = IngredientInfo("ing-rice", "Jasmine Rice")
    [match] = find_ingredient_matches("Jasmine Rice 25LB", [plain])
    assert match.source is MatchSource.NAME


def test_max_results(protein_catalog):
    matches = find_ingredient_matches("Chicken", protein_catalog, min_confidence=0.0, max_results=1)
    assert len(matches) == 1


@pytest.mark.parametrize("bad", [-0.01, 1.5, float("nan")])
def test_invalid_min_confidence_raises(protein_catalog, bad):
    with pytest.raises(ValueError):
        find_ingredient_matches("Chicken", protein_catalog, min_confidence=bad)
