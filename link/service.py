import logging
from typing import Iterable, Mapping, Optional

import config
from ai.narrative import generate_soulprint_narrative
from core.profile import SoulPrintProfile
from core.traveler_profile import TravelerProfile
from inference.answer_converter import compute_traits
from ingestion.read_destination_data import load_destination_catalog
from link.catalog import filter_catalog
from matching.engine import match_destinations
from models.destination_profile import DestinationProfile
from models.match_result import MatchResult

logger = logging.getLogger(__name__)


def run_assessment(
    answers: Mapping,
    catalog: Optional[Iterable[DestinationProfile]] = None,
    geographic_constraint: str = "anywhere",
    geographic_value: str = "",
    limit: Optional[int] = None,
) -> tuple[SoulPrintProfile, list[MatchResult]]:
    """Score the answers and rank the (filtered) catalog. Nothing is persisted."""
    if catalog is None:
        catalog = load_destination_catalog()

    profile = compute_traits(answers)
    candidates = filter_catalog(catalog, geographic_constraint, geographic_value)
    return profile, match_destinations(profile, candidates, limit=limit)


async def compute_and_store_soulprint(store, respondent_id: str, narrate: bool = False) -> dict:
    """
    Recompute a respondent's SoulPrint from their stored answers and upsert it.
    With narrate=True a narrative is generated and stored alongside.
    """
    profile = compute_traits(await store.get_raw_responses(respondent_id))

    stored = await store.upsert_computed_scores(respondent_id, profile.to_record())
    logger.info("[SoulPrint] Computed profile for %s (tribe %s)", respondent_id, profile.labels.get("tribe"))

    result = {"respondent_id": respondent_id, "profile": profile.to_dict(), "narrative": None}

    if narrate:
        respondent = await store.get_respondent(respondent_id)
        name = respondent.get("name") or "Traveller"
        narrative = await generate_soulprint_narrative(name, profile)
        await store.insert_narrative(respondent_id, narrative, computed_scores_id=(stored or {}).get("id"))
        result["narrative"] = narrative

    return result


async def regenerate_matches(store, respondent_id: str, limit: int = config.MATCH_LIMIT) -> list[MatchResult]:
    """
    Rebuild the respondent's destination matches.

    The traveller's latest completed geographic preference narrows the active
    catalog (falling back to all active destinations), the top `limit`
    matches replace whatever was stored before.
    """
    respondent = await store.get_respondent(respondent_id)
    preference = await store.get_geographic_preference(respondent.get("user_id"))

    traveler = TravelerProfile(
        soulprint=compute_traits(respondent.get("raw_responses") or {}),
        respondent_id=respondent_id,
        user_id=respondent.get("user_id"),
        **preference,
    )

    catalog = await store.get_destinations(active_only=True)
    candidates = filter_catalog(catalog, traveler.geographic_constraint, traveler.geographic_value)
    matches = match_destinations(traveler.soulprint, candidates, limit=limit)

    records = [m.to_record(respondent_id, traveler.context_intake_id) for m in matches]
    await store.replace_matches(respondent_id, records)

    return matches
