"""
Tests for the trait aggregator.

Coverage targets:
  - Determinism and the 0-100 range invariant
  - Reverse scoring and item averaging
  - Elemental and sensory rankings (100/75/50/25/0)
  - Sub-slider groups, the flattened form and legacy motivation sliders
  - Tensions, composite indices and pass-through labels
  - Malformed input never raises
"""
import pytest

from conftest import slider_answers
from core.profile import GROUP_NAMES, SoulPrintProfile
from inference.answer_converter import compute_traits, rank_scores, reverse_score, sub_slider
from questionnaires.questions import ELEMENT_TOKENS


class TestDeterminismAndRange:

    def test_same_answers_give_same_profile(self, adventurer_answers):
        assert compute_traits(adventurer_answers) == compute_traits(dict(adventurer_answers))

    @pytest.mark.parametrize("fixture_name", ["neutral_answers", "adventurer_answers", "restorative_answers"])
    def test_every_score_in_range(self, fixture_name, request):
        profile = compute_traits(request.getfixturevalue(fixture_name))
        for key, value in profile.all_scores().items():
            if key == "business.nps_predicted":
                assert 5.0 <= value <= 10.0
            else:
                assert 0.0 <= value <= 100.0, key

    def test_extreme_slider_values_are_clamped(self):
        answers = slider_answers(150)
        profile = compute_traits(answers)
        # forward items clamp to 100, reversed items to 0
        assert profile.big_five.get("extraversion") == pytest.approx(75.0)


class TestItemScoring:

    def test_reverse_score(self):
        assert reverse_score(20) == 80
        assert reverse_score(100) == 0

    def test_extraversion_with_reversed_item(self):
        profile = compute_traits({"Q4": 80, "Q5": 80, "Q6": 80, "Q7": 20})
        assert profile.big_five.get("extraversion") == pytest.approx(80.0)

    def test_all_fifty_is_neutral(self):
        profile = compute_traits(slider_answers(50))
        for trait, value in profile.big_five.scores.items():
            assert value == pytest.approx(50.0), trait
        assert profile.travel_style.get("luxury_style") == pytest.approx(50.0)
        assert profile.travel_style.get("pace") == pytest.approx(50.0)

    def test_missing_items_fall_back_to_midpoint(self):
        profile = compute_traits({"Q4": 100})
        # (100 + 50 + 50 + (100 - 50)) / 4
        assert profile.big_five.get("extraversion") == pytest.approx(62.5)

    @pytest.mark.parametrize("bad", ["abc", None, True, float("nan"), [1, 2]])
    def test_unusable_values_are_neutral(self, bad):
        profile = compute_traits({"Q4": bad, "Q5": 50, "Q6": 50, "Q7": 50})
        assert profile.big_five.get("extraversion") == pytest.approx(50.0)

    def test_numeric_strings_are_accepted(self):
        profile = compute_traits({"Q28": "90", "Q29": "90", "Q30": "10"})
        assert profile.travel_behaviour.get("adventure_orientation") == pytest.approx(90.0)

    def test_travel_freedom_index(self):
        answers = {
            "Q24": 100, "Q25": 100, "Q26": 100, "Q27": 0,   # SF 100
            "Q28": 0, "Q29": 0, "Q30": 100,                 # AO 0
            "Q31": 50, "Q32": 50, "Q33": 50,                # EA 50
        }
        profile = compute_traits(answers)
        assert profile.travel_behaviour.get("travel_freedom_index") == pytest.approx(0.4 * 100 + 0.4 * 0 + 0.2 * 50)

    def test_luxury_and_pace(self):
        profile = compute_traits({"Q47": 90, "Q48": 10, "Q49": 90, "Q50": 10, "Q51": 20, "Q52": 80, "Q53": 20})
        assert profile.travel_style.get("luxury_style") == pytest.approx(90.0)
        assert profile.travel_style.get("pace") == pytest.approx(20.0)


class TestRankings:

    def test_element_ranking(self):
        profile = compute_traits({"Q34": ["water", "fire", "stone", "urban", "desert"]})
        assert profile.elements.scores == {
            "water": 100.0, "fire": 75.0, "stone": 50.0, "urban": 25.0, "desert": 0.0,
        }
        assert profile.labels["dominant_element"] == "water"
        assert profile.labels["secondary_element"] == "fire"

    def test_capitalised_tokens(self):
        profile = compute_traits({"Q34": ["Fire", "Water", "Stone", "Urban", "Desert"]})
        assert [profile.elements.get(e) for e in ELEMENT_TOKENS] == [100.0, 75.0, 50.0, 25.0, 0.0]

    def test_comma_separated_ranking(self):
        profile = compute_traits({"Q34": "Desert, Stone, fire, water, urban"})
        assert profile.elements.get("desert") == 100.0
        assert profile.elements.get("urban") == 0.0

    @pytest.mark.parametrize("ranking", [
        ["fire", "water", "stone", "urban"],
        ["fire", "fire", "stone", "urban", "desert"],
        ["fire", "water", "stone", "urban", "lava"],
        42,
    ])
    def test_malformed_ranking_is_neutral(self, ranking):
        profile = compute_traits({"Q34": ranking})
        assert set(profile.elements.scores.values()) == {50.0}

    def test_element_sliders_are_not_a_ranking(self):
        profile = compute_traits({"Q34": {"fire": 100, "water": 0}})
        assert profile.elements.scores == {token: 50.0 for token in ELEMENT_TOKENS}

    def test_rank_scores_rejects_partial(self):
        assert rank_scores(["fire"], ELEMENT_TOKENS) is None

    def test_sensory_ranking_sets_top_labels(self):
        profile = compute_traits({"Q54": ["wellness", "nature", "culinary", "visual", "cultural"]})
        assert profile.sensory.get("wellness") == 100.0
        assert profile.sensory.get("cultural") == 0.0
        assert profile.labels["top_sensory_1"] == "wellness"
        assert profile.labels["top_sensory_2"] == "nature"

    def test_sensory_as_sliders(self):
        profile = compute_traits({"Q54": {"visual": 20, "culinary": 90, "nature": 40}})
        assert profile.sensory.get("culinary") == 90.0
        assert profile.sensory.get("wellness") == 50.0


class TestSubSliders:

    def test_nested_motivations(self):
        profile = compute_traits({"Q35": {"transformation": 90, "clarity": 10, "aliveness": 70, "connection": 30}})
        assert profile.motivations.get("transformation") == 90.0
        assert profile.labels["top_motivation_1"] == "Transformation"
        assert profile.labels["top_motivation_2"] == "Aliveness"

    def test_flattened_burdens(self):
        profile = compute_traits({"Q45_overwhelm": 80, "Q45_burnout": 60})
        assert profile.burdens.get("overwhelm") == 80.0
        assert profile.burdens.get("uncertainty") == 50.0
        assert profile.burdens.get("emotional_burden_index") == pytest.approx((80 + 50 + 60 + 50) / 4)

    def test_nested_form_wins_over_flattened(self):
        raw = {"Q45": {"overwhelm": 10}, "Q45_overwhelm": 90}
        assert sub_slider(raw, "Q45", "overwhelm") == 10

    def test_legacy_motivation_pairs(self):
        profile = compute_traits({"Q35": 80, "Q36": 60, "Q41": 20})
        assert profile.motivations.get("transformation") == pytest.approx(70.0)
        # one of the pair missing counts as neutral
        assert profile.motivations.get("connection") == pytest.approx(35.0)
        assert profile.motivations.get("clarity") == 50.0

    def test_emotional_travel_index(self):
        answers = {
            "Q20": 80, "Q21": 80, "Q22": 20, "Q23": 20,  # ES 80
            "Q45": {"overwhelm": 40, "uncertainty": 40, "burnout": 40, "disconnection": 40},
        }
        profile = compute_traits(answers)
        assert profile.burdens.get("emotional_travel_index") == pytest.approx((80 + 60) / 2)


class TestTensionsAndLabels:

    def test_social_tension(self):
        answers = {"Q4": 80, "Q5": 80, "Q6": 80, "Q7": 20, "Q35": {"connection": 30}}
        profile = compute_traits(answers)
        assert profile.tensions.get("social") == pytest.approx(50.0)

    def test_element_tension(self):
        profile = compute_traits({"Q34": ["fire", "stone", "urban", "desert", "water"]})
        assert profile.tensions.get("elements") == pytest.approx(100.0)
        assert profile.tensions.get("tempo") == pytest.approx(25.0)

    def test_categorical_pass_through(self, adventurer_answers):
        profile = compute_traits(adventurer_answers)
        assert profile.labels["life_phase"] == "reinventing"
        assert profile.labels["shift_desired"] == "adventure"
        assert profile.labels["completion_need"] == "momentum"

    def test_non_string_categorical_is_dropped(self):
        profile = compute_traits({"Q43": 3})
        assert profile.labels["life_phase"] is None

    def test_business_labels_present(self, adventurer_answers):
        profile = compute_traits(adventurer_answers)
        assert profile.labels["tribe"] == "A_Hunters"
        assert profile.labels["upsell_priority"] in ("Priority 1", "Priority 2", "Priority 3")


class TestMalformedInput:

    @pytest.mark.parametrize("raw", [None, [], "answers", 7, {}])
    def test_non_mapping_gives_neutral_profile(self, raw):
        profile = compute_traits(raw)
        assert profile.big_five.get("openness") == 50.0
        assert set(profile.elements.scores.values()) == {50.0}

    def test_profile_record_round_trip(self, restorative_answers):
        profile = compute_traits(restorative_answers)
        rebuilt = SoulPrintProfile.from_record(profile.to_record())
        assert rebuilt.labels == profile.labels
        for group in GROUP_NAMES:
            for trait, value in getattr(profile, group).scores.items():
                assert rebuilt.score(group, trait) == pytest.approx(value, abs=0.01)
