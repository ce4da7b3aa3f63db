from __future__ import annotations

from vinomatch.catalog.models import WineRecord
from vinomatch.matching.config import MatchConfig
from vinomatch.matching.models import PreferenceVector
from vinomatch.matching.scorer import find_matches, rank_wines, score_wine


def _wine(**overrides) -> WineRecord:
    data = {
        "producer": "Test Estate",
        "varietal": "Pinot Noir",
        "region": "Willamette Valley",
        "type": "red",
        "price": 40,
        "acidity": "medium",
        "tannins": "medium",
        "bodyWeight": "medium",
        "sweetnessLevel": "dry",
        "flavorProfile": ["cherry", "earthy"],
    }
    data.update(overrides)
    return WineRecord.model_validate(data)


def _prefs(**fields) -> PreferenceVector:
    return PreferenceVector.model_validate(fields)


# ── score_wine ───────────────────────────────────────────────────────────


class TestScoreWine:
    def test_three_perfect_dimensions(self):
        prefs = _prefs(acidity="high", wineType="white", priceRange={"min": 10, "max": 30})
        wine = _wine(acidity="high", type="white", price=20)
        assert score_wine(prefs, wine) == 1.0

    def test_categorical_miss_gets_partial_credit(self):
        prefs = _prefs(acidity="high")
        assert score_wine(prefs, _wine(acidity="low")) == 0.5

    def test_sweetness_compares_against_sweetness_level(self):
        prefs = _prefs(sweetness="sweet")
        assert score_wine(prefs, _wine(sweetnessLevel="sweet")) == 1.0
        assert score_wine(prefs, _wine(sweetnessLevel="dry")) == 0.5

    def test_flavor_fraction_of_requested_notes(self):
        prefs = _prefs(flavorNotes=["oak", "cherry", "citrus", "berry"])
        wine = _wine(flavorProfile=["oak", "cherry", "vanilla"])
        assert score_wine(prefs, wine) == 0.5

    def test_extra_wine_flavors_do_not_matter(self):
        prefs = _prefs(flavorNotes=["cherry"])
        wine = _wine(flavorProfile=["cherry", "oak", "spice", "vanilla"])
        assert score_wine(prefs, wine) == 1.0

    def test_price_outside_range_gets_partial_credit(self):
        prefs = _prefs(priceRange={"min": 10, "max": 30})
        assert score_wine(prefs, _wine(price=31)) == 0.5
        assert score_wine(prefs, _wine(price=30)) == 1.0
        assert score_wine(prefs, _wine(price=10)) == 1.0

    def test_type_mismatch_scores_zero(self):
        prefs = _prefs(wineType="white")
        assert score_wine(prefs, _wine(type="red")) == 0.0

    def test_any_type_is_not_a_dimension(self):
        prefs = _prefs(wineType="any", acidity="medium")
        assert score_wine(prefs, _wine(type="sparkling")) == 1.0

    def test_no_dimensions_scores_zero(self):
        assert score_wine(PreferenceVector(), _wine()) == 0.0

    def test_mixed_dimensions_average(self):
        prefs = _prefs(acidity="high", tannins="medium", wineType="red")
        # acidity miss 0.5, tannins hit 1.0, type hit 1.0
        assert score_wine(prefs, _wine(acidity="low")) == 2.5 / 3

    def test_missing_wine_attribute_is_a_miss(self):
        prefs = _prefs(bodyWeight="full")
        wine = WineRecord(producer="Bare", varietal="Blend")
        assert score_wine(prefs, wine) == 0.5

    def test_scores_stay_in_unit_interval(self):
        wines = [
            _wine(),
            _wine(type="white", acidity="high", flavorProfile=[]),
            _wine(price=0, bodyWeight="full", flavorProfile=["oak", "oak"]),
        ]
        preference_sets = [
            _prefs(),
            _prefs(wineType="dessert", flavorNotes=["honey", "honey"]),
            _prefs(acidity="low", tannins="high", bodyWeight="light", sweetness="sweet",
                   flavorNotes=["cherry"], priceRange={"min": 0, "max": 5}, wineType="red"),
        ]
        for prefs in preference_sets:
            for wine in wines:
                assert 0.0 <= score_wine(prefs, wine) <= 1.0


# ── Malformed preferences ────────────────────────────────────────────────


class TestPreferenceParsing:
    def test_unknown_values_are_treated_as_unspecified(self):
        prefs = _prefs(acidity="extreme", bodyWeight="full", sweetness=3)
        assert prefs.acidity is None
        assert prefs.sweetness is None
        assert prefs.specified_dimensions() == ["bodyWeight"]

    def test_unknown_wine_type_means_any(self):
        assert _prefs(wineType="orange").wine_type.value == "any"

    def test_inverted_price_range_is_dropped(self):
        assert _prefs(priceRange={"min": 50, "max": 10}).price_range is None

    def test_incomplete_price_range_is_dropped(self):
        assert _prefs(priceRange={"min": 50}).price_range is None

    def test_non_list_flavor_notes_are_dropped(self):
        assert _prefs(flavorNotes="oak").flavor_notes == []


# ── rank_wines ───────────────────────────────────────────────────────────


class TestRankWines:
    def test_type_filter_excludes_other_types(self):
        catalog = [
            _wine(type="red", producer="A"),
            _wine(type="white", producer="B"),
            _wine(type="rosé", producer="C"),
            _wine(type="red", producer="D"),
        ]
        results = rank_wines(_prefs(wineType="red"), catalog)
        assert [w.producer for w in results] == ["A", "D"]
        assert all(w.type.value == "red" for w in results)

    def test_threshold_drops_weak_matches(self):
        prefs = _prefs(acidity="high", tannins="high", bodyWeight="full")
        catalog = [
            _wine(producer="Strong", acidity="high", tannins="high", bodyWeight="full"),
            _wine(producer="Weak", acidity="low", tannins="low", bodyWeight="light"),
            _wine(producer="Middle", acidity="high", tannins="low", bodyWeight="light"),
        ]
        results = rank_wines(prefs, catalog)
        # Middle scores (1 + 0.5 + 0.5) / 3 = 0.667, Weak scores 0.5
        assert [w.producer for w in results] == ["Strong", "Middle"]
        assert all(w.match_score >= 0.6 for w in results)

    def test_results_sorted_descending(self):
        prefs = _prefs(acidity="high", flavorNotes=["cherry", "oak"])
        catalog = [
            _wine(producer="Half", acidity="low", flavorProfile=["cherry", "oak"]),
            _wine(producer="Full", acidity="high", flavorProfile=["cherry", "oak"]),
            _wine(producer="ThreeQuarter", acidity="high", flavorProfile=["cherry"]),
        ]
        scores = [w.match_score for w in rank_wines(prefs, catalog)]
        assert scores == sorted(scores, reverse=True)
        assert scores[0] == 1.0

    def test_ties_keep_catalog_order(self):
        catalog = [_wine(producer=name) for name in ("First", "Second", "Third")]
        results = rank_wines(_prefs(acidity="medium"), catalog)
        assert [w.producer for w in results] == ["First", "Second", "Third"]

    def test_result_cap(self):
        catalog = [_wine(producer=f"Estate {i}") for i in range(12)]
        results = rank_wines(_prefs(acidity="medium"), catalog)
        assert len(results) == 8
        assert results[0].producer == "Estate 0"

    def test_config_is_injectable(self):
        catalog = [_wine(producer=f"Estate {i}", acidity="low") for i in range(5)]
        config = MatchConfig(threshold=0.5, max_results=3)
        results = rank_wines(_prefs(acidity="high"), catalog, config)
        assert len(results) == 3
        assert all(w.match_score == 0.5 for w in results)

    def test_no_dimensions_yields_nothing(self):
        assert rank_wines(PreferenceVector(), [_wine(), _wine()]) == []

    def test_empty_catalog(self):
        assert rank_wines(_prefs(acidity="high"), []) == []

    def test_match_carries_wine_fields(self):
        wine = _wine(wineId="w1", year="2019")
        [match] = rank_wines(_prefs(acidity="medium"), [wine])
        assert match.wine_id == "w1"
        assert match.year == "2019"
        assert match.match_score == 1.0
        dumped = match.model_dump(by_alias=True)
        assert dumped["matchScore"] == 1.0
        assert dumped["flavorProfile"] == ["cherry", "earthy"]

    def test_inputs_are_not_mutated(self):
        prefs = _prefs(acidity="high", flavorNotes=["cherry"])
        catalog = [_wine(producer="A"), _wine(producer="B", acidity="high")]
        before = [w.model_dump() for w in catalog]
        prefs_before = prefs.model_dump()
        rank_wines(prefs, catalog)
        assert [w.model_dump() for w in catalog] == before
        assert prefs.model_dump() == prefs_before


def test_find_matches_flags_empty_preferences():
    response = find_matches("r1", PreferenceVector(), [_wine()])
    assert response.inconclusive is True
    assert response.total_matches == 0


def test_find_matches_counts_results():
    response = find_matches("r1", _prefs(acidity="medium"), [_wine(), _wine(producer="B")])
    assert response.inconclusive is False
    assert response.total_matches == len(response.matches) == 2
