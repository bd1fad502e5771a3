import pytest

from matching.compare import LOWER_IS_BETTER, HIGHER_IS_BETTER, best_destinations, compare_matches
from models.match_result import MatchResult


def _match(destination_id, fit=70.0, cost=None, flight=None, **breakdown):
    return MatchResult(
        destination_id=destination_id,
        destination_name=destination_id.title(),
        fit_score=fit,
        breakdown=breakdown,
        avg_cost_per_day=cost,
        flight_time_hours=flight,
    )


class TestBestDestinations:

    def test_lower_is_better(self):
        assert best_destinations({"a": 120.0, "b": 90.0}, LOWER_IS_BETTER) == ["b"]

    def test_ties_are_all_best(self):
        values = {"a": 100.0, "b": 100.0, "c": 150.0}
        assert best_destinations(values, LOWER_IS_BETTER) == ["a", "b"]

    def test_missing_values_never_win(self):
        assert best_destinations({"a": None, "b": 10.0}, HIGHER_IS_BETTER) == ["b"]

    def test_nothing_to_compare(self):
        assert best_destinations({"a": None, "b": None}, LOWER_IS_BETTER) == []


class TestCompareMatches:

    def test_requires_two(self):
        with pytest.raises(ValueError):
            compare_matches([_match("solo")])

    def test_cost_tie_marks_both(self):
        comparison = compare_matches([
            _match("a", cost=100.0),
            _match("b", cost=100.0),
            _match("c", cost=150.0),
        ])
        cost = comparison["attributes"]["avg_cost_per_day"]
        assert cost["direction"] == LOWER_IS_BETTER
        assert cost["best"] == ["a", "b"]

    def test_fit_and_dimensions_higher_is_better(self):
        comparison = compare_matches([
            _match("a", fit=80.0, visual=90.0, nature=40.0),
            _match("b", fit=65.0, visual=70.0, nature=85.0),
        ])
        attributes = comparison["attributes"]
        assert attributes["fit_score"]["best"] == ["a"]
        assert attributes["visual"]["best"] == ["a"]
        assert attributes["nature"]["best"] == ["b"]

    def test_dimension_missing_on_one_side(self):
        comparison = compare_matches([
            _match("a", wellness=60.0),
            _match("b"),
        ])
        wellness = comparison["attributes"]["wellness"]
        assert wellness["values"] == {"a": 60.0, "b": None}
        assert wellness["best"] == ["a"]

    def test_attribute_order(self):
        comparison = compare_matches([
            _match("a", cost=90.0, flight=3.0, visual=80.0, restorative=50.0),
            _match("b", cost=80.0, flight=4.0, visual=60.0, restorative=70.0),
        ])
        assert list(comparison["attributes"]) == [
            "fit_score", "restorative", "visual", "avg_cost_per_day", "flight_time_hours",
        ]
        assert comparison["attributes"]["flight_time_hours"]["best"] == ["a"]
        assert [d["id"] for d in comparison["destinations"]] == ["a", "b"]
