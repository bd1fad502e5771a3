from typing import Optional

from models.destination_profile import DIMENSIONS
from models.match_result import MatchResult

HIGHER_IS_BETTER = "higher"
LOWER_IS_BETTER = "lower"

PRACTICAL_ATTRIBUTES = {
    "avg_cost_per_day": LOWER_IS_BETTER,
    "flight_time_hours": LOWER_IS_BETTER,
}


def _attribute_value(match: MatchResult, attribute: str) -> Optional[float]:
    if attribute == "fit_score":
        return match.fit_score
    if attribute in PRACTICAL_ATTRIBUTES:
        return getattr(match, attribute)
    return match.breakdown.get(attribute)


def best_destinations(values: dict[str, Optional[float]], direction: str) -> list[str]:
    """
    Every destination holding the best value. Missing values never win;
    with no values at all there is no winner.
    """
    present = {dest_id: v for dest_id, v in values.items() if v is not None}
    if not present:
        return []

    best = max(present.values()) if direction == HIGHER_IS_BETTER else min(present.values())
    return [dest_id for dest_id, v in present.items() if v == best]


def compare_matches(matches: list[MatchResult]) -> dict:
    """
    Side-by-side comparison of two or more matches for the same traveller.

    Returns {"destinations": [...], "attributes": {attribute: {"direction",
    "values", "best"}}}. Attributes follow the order fit score, dimensions,
    then cost and flight time.
    """
    if len(matches) < 2:
        raise ValueError("Select at least two destinations to compare")

    attributes = [("fit_score", HIGHER_IS_BETTER)]
    attributes += [
        (name, HIGHER_IS_BETTER) for name in DIMENSIONS
        if any(name in m.breakdown for m in matches)
    ]
    attributes += list(PRACTICAL_ATTRIBUTES.items())

    comparison = {}
    for attribute, direction in attributes:
        values = {m.destination_id: _attribute_value(m, attribute) for m in matches}
        comparison[attribute] = {
            "direction": direction,
            "values": values,
            "best": best_destinations(values, direction),
        }

    return {
        "destinations": [
            {"id": m.destination_id, "name": m.destination_name, "rank": m.rank}
            for m in matches
        ],
        "attributes": comparison,
    }
