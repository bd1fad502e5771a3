"""
Shared fixtures.

All tests run without external services: Supabase is replaced by an
in-memory store and the LLM clients are never configured.
"""
from __future__ import annotations

import copy
from typing import Any, Optional

import pytest

import config
from fixtures.archetype_answers import ADVENTURER, NEUTRAL, RESTORATIVE
from link.supabase_client import PersistenceError, RespondentNotFound
from models.destination_profile import DIMENSIONS, DestinationProfile


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def make_destination(
    destination_id: str = "dest",
    default: Optional[float] = 50.0,
    **overrides: Any,
) -> DestinationProfile:
    """Destination with every dimension at `default` unless overridden."""
    scores = {name: default for name in DIMENSIONS}
    fields = {}
    for key, value in overrides.items():
        if key in DIMENSIONS:
            scores[key] = value
        else:
            fields[key] = value
    fields.setdefault("name", destination_id.replace("-", " ").title())
    return DestinationProfile(id=destination_id, scores=scores, **fields)


def slider_answers(value: float = 50) -> dict:
    """Every slider item answered with the same value."""
    return {qid: value for qid in [f"Q{i}" for i in range(4, 34)] + [f"Q{i}" for i in range(47, 54)]}


# ---------------------------------------------------------------------------
# Fake persistence
# ---------------------------------------------------------------------------

class FakeStore:
    """In-memory stand-in for SupabaseClient."""

    def __init__(self, respondents=None, destinations=None, intakes=None, fail_writes: bool = False):
        self.respondents = respondents or {}
        self.destinations = destinations or []
        self.intakes = intakes or {}
        self.fail_writes = fail_writes

        self.computed_scores: dict[str, dict] = {}
        self.matches: dict[str, list[dict]] = {}
        self.narratives: list[dict] = []

    async def get_respondent(self, respondent_id):
        if respondent_id not in self.respondents:
            raise RespondentNotFound(f"Respondent {respondent_id} not found")
        return self.respondents[respondent_id]

    async def get_raw_responses(self, respondent_id):
        return (await self.get_respondent(respondent_id)).get("raw_responses") or {}

    async def get_destinations(self, active_only=True):
        return [d for d in self.destinations if d.is_active or not active_only]

    async def get_geographic_preference(self, user_id):
        intake = self.intakes.get(user_id)
        if intake is None:
            return {"geographic_constraint": "anywhere", "geographic_value": "", "context_intake_id": None}
        return dict(intake)

    def _check_write(self):
        if self.fail_writes:
            raise PersistenceError("write failed")

    async def upsert_computed_scores(self, respondent_id, record):
        self._check_write()
        row = dict(record, respondent_id=respondent_id, id=f"cs-{respondent_id}")
        self.computed_scores[respondent_id] = row
        return row

    async def replace_matches(self, respondent_id, records):
        self._check_write()
        self.matches[respondent_id] = list(records)

    async def insert_narrative(self, respondent_id, narrative, computed_scores_id=None):
        self._check_write()
        self.narratives.append(dict(narrative, respondent_id=respondent_id, computed_scores_id=computed_scores_id))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def no_llm_keys(monkeypatch):
    monkeypatch.setattr(config, "GROQ_API_KEY", None)
    monkeypatch.setattr(config, "GROQ_BACKUP_API_KEY", None)
    monkeypatch.setattr(config, "OPENAI_API_KEY", None)


@pytest.fixture
def neutral_answers():
    return copy.deepcopy(NEUTRAL)


@pytest.fixture
def adventurer_answers():
    return copy.deepcopy(ADVENTURER)


@pytest.fixture
def restorative_answers():
    return copy.deepcopy(RESTORATIVE)


@pytest.fixture
def catalog():
    return [
        make_destination("lisbon", country="Portugal", region="Southern Europe", flight_time_hours=2.75,
                         avg_cost_per_day=120, social_vibe=85, culinary=85),
        make_destination("kyoto", country="Japan", region="East Asia", flight_time_hours=14.0,
                         avg_cost_per_day=180, cultural=95, restorative=65),
        make_destination("wadi-rum", country="Jordan", region="Middle East", flight_time_hours=5.0,
                         avg_cost_per_day=110, nature=85, social_vibe=30),
        make_destination("faroe-islands", country="Faroe Islands", region="Northern Europe",
                         flight_time_hours=2.5, is_active=False),
    ]


@pytest.fixture
def store(adventurer_answers, catalog):
    return FakeStore(
        respondents={
            "r-1": {"id": "r-1", "user_id": "u-1", "name": "Ana", "raw_responses": adventurer_answers},
            "r-2": {"id": "r-2", "user_id": None, "name": None, "raw_responses": {}},
        },
        destinations=catalog,
        intakes={
            "u-1": {"geographic_constraint": "region", "geographic_value": "Middle East", "context_intake_id": "ci-1"},
        },
    )
