import pytest

from conftest import make_destination
from ingestion.read_destination_data import load_destination_catalog
from link.catalog import filter_catalog
from models.destination_profile import DestinationProfile


def _ids(destinations):
    return [d.id for d in destinations]


class TestFilterCatalog:

    def test_anywhere_keeps_active(self, catalog):
        assert _ids(filter_catalog(catalog)) == ["lisbon", "kyoto", "wadi-rum"]

    def test_country_is_case_insensitive_substring(self, catalog):
        assert _ids(filter_catalog(catalog, "country", "portu")) == ["lisbon"]

    def test_region_is_exact(self, catalog):
        assert _ids(filter_catalog(catalog, "region", "East Asia")) == ["kyoto"]
        # partial region names do not match, so everything active comes back
        assert _ids(filter_catalog(catalog, "region", "Asia")) == ["lisbon", "kyoto", "wadi-rum"]

    def test_flight_radius(self, catalog):
        assert _ids(filter_catalog(catalog, "flight_radius", "5")) == ["lisbon", "wadi-rum"]

    def test_unparsable_radius_is_ignored(self, catalog):
        assert _ids(filter_catalog(catalog, "flight_radius", "soon")) == ["lisbon", "kyoto", "wadi-rum"]

    def test_inactive_never_returned(self, catalog):
        # the Faroes are within 3 hours but inactive
        assert _ids(filter_catalog(catalog, "flight_radius", "3")) == ["lisbon"]

    def test_no_match_falls_back_to_all_active(self, catalog):
        assert _ids(filter_catalog(catalog, "country", "Peru")) == ["lisbon", "kyoto", "wadi-rum"]

    def test_unknown_constraint_is_ignored(self, catalog):
        assert len(filter_catalog(catalog, "continent", "Europe")) == 3

    def test_tier(self):
        catalog = [make_destination("a", tier="core"), make_destination("b", tier="premium")]
        assert _ids(filter_catalog(catalog, tier="premium")) == ["b"]

    def test_empty_catalog(self):
        assert filter_catalog([], "country", "Japan") == []


class TestDestinationProfile:

    def test_from_table_row(self):
        row = {
            "id": 7,
            "name": "Zermatt",
            "is_active": "false",
            "restorative_score": "70",
            "wellness_score": "",
            "avg_cost_per_day_gbp": 320,
            "flight_time_from_uk_hours": "1.75",
            "climate_tags": "alpine|cold",
            "primary_dimensions": "luxury_style|made_up",
        }
        destination = DestinationProfile.from_row(row)
        assert destination.id == "7"
        assert destination.is_active is False
        assert destination.score("restorative") == 70.0
        assert destination.score("wellness") is None
        assert destination.avg_cost_per_day == 320.0
        assert destination.flight_time_hours == 1.75
        assert destination.climate_tags == ("alpine", "cold")
        assert destination.primary_dimensions == ("luxury_style",)

    def test_short_dimension_names(self):
        destination = DestinationProfile.from_row({"id": "x", "visual": 88, "climate_tags": ["warm"]})
        assert destination.score("visual") == 88.0
        assert destination.climate_tags == ("warm",)
        assert destination.name == "x"

    @pytest.mark.parametrize("bad", ["nan", float("nan"), float("inf"), "-inf"])
    def test_non_finite_scores_are_unscored(self, bad):
        destination = DestinationProfile.from_row({"id": "x", "visual": bad, "avg_cost_per_day": bad})
        assert destination.score("visual") is None
        assert destination.avg_cost_per_day is None

    def test_scores_clamped_to_range(self):
        destination = DestinationProfile.from_row({"id": "x", "visual": 140, "nature": -5})
        assert destination.score("visual") == 100.0
        assert destination.score("nature") == 0.0

    def test_non_string_country_and_region(self):
        destination = DestinationProfile.from_row({"id": "x", "country": 44, "region": 7})
        assert destination.country == "44"
        assert destination.region == "7"
        assert _ids(filter_catalog([destination], "country", "44")) == ["x"]

    def test_missing_id(self):
        with pytest.raises(KeyError):
            DestinationProfile.from_row({"name": "Nowhere"})


class TestBundledCatalog:

    def test_loads_every_row(self):
        catalog = load_destination_catalog()
        assert len(catalog) == 10
        assert len({d.id for d in catalog}) == 10

    def test_inactive_and_unscored_entries(self):
        faroe = {d.id: d for d in load_destination_catalog()}["faroe-islands"]
        assert faroe.is_active is False
        assert faroe.score("wellness") is None

    def test_scores_in_range(self):
        for destination in load_destination_catalog():
            for value in destination.scores.values():
                assert value is None or 0.0 <= value <= 100.0

    def test_missing_id_column(self, tmp_path):
        path = tmp_path / "catalog.csv"
        path.write_text("name,country\nLisbon,Portugal\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_destination_catalog(path)
