import logging
from typing import Iterable, Optional

from core.profile import SoulPrintProfile
from models.destination_profile import DestinationProfile
from models.match_result import MatchResult
from matching.dimensions import traveler_dimensions
from matching.similarity import match_dimensions
from matching.aggregate import aggregate_match
from explanation.templates import (
    affinity_label,
    best_for_tag,
    destination_personality,
    generate_why_it_fits,
    generate_tension,
)

"""
Matching orchestration layer.

This module coordinates the per-dimension matcher, the aggregate and the
explanation templates. It does not contain scoring logic itself.
"""

logger = logging.getLogger(__name__)


def _id_key(destination_id: str):
    # Numeric ids order numerically, everything else lexicographically
    if destination_id.isdecimal():
        return (0, int(destination_id), "")
    return (1, 0, destination_id)


def match_traveler_to_destination(
    traveler: SoulPrintProfile,
    destination: DestinationProfile,
    traveler_dims: Optional[dict[str, float]] = None,
    explain: bool = True,
) -> MatchResult:
    """
    Entry point for matching one pair.
    The fit score is computed from the unrounded breakdown, then both are
    rounded for display.
    """
    if traveler_dims is None:
        traveler_dims = traveler_dimensions(traveler)

    breakdown = match_dimensions(traveler_dims, destination)
    fit = aggregate_match(breakdown, destination.primary_dimensions)

    result = MatchResult(
        destination_id=destination.id,
        destination_name=destination.name,
        fit_score=round(fit, 1),
        breakdown={name: round(value, 1) for name, value in breakdown.items()},
        avg_cost_per_day=destination.avg_cost_per_day,
        flight_time_hours=destination.flight_time_hours,
    )

    if explain:
        result.affinity_label = affinity_label(result.fit_score)
        result.why_it_fits = generate_why_it_fits(destination.name, breakdown)
        result.tension_note = generate_tension(destination.name, breakdown, traveler_dims, destination)
        result.best_for = best_for_tag(destination)
        result.personality = destination_personality(destination)

    return result


def match_destinations(
    traveler: Optional[SoulPrintProfile],
    catalog: Iterable[DestinationProfile],
    limit: Optional[int] = None,
    explain: bool = True,
) -> list[MatchResult]:
    """
    Score every destination for the traveller and rank them.

    Ranked by fit descending; equal fits fall back to destination id so
    the same inputs always produce the same order. No traveller or an
    empty catalog gives an empty list.
    """
    catalog = list(catalog)
    if traveler is None or not catalog:
        return []

    traveler_dims = traveler_dimensions(traveler)

    results = [
        match_traveler_to_destination(traveler, destination, traveler_dims, explain=explain)
        for destination in catalog
    ]

    results.sort(key=lambda r: (-r.fit_score, _id_key(r.destination_id)))

    if limit is not None:
        results = results[:max(limit, 0)]

    for rank, result in enumerate(results, start=1):
        result.rank = rank

    logger.info(
        "[Match] Ranked %d destinations, top: %s",
        len(results),
        ", ".join(f"{r.destination_name}: {r.fit_score}" for r in results[:3]),
    )

    return results
