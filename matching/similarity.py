import math

from core.utils import clamp
from models.destination_profile import DestinationProfile, DIMENSIONS


def match_dimension(traveler_value: float, destination_value: float) -> float:
    """
    Alignment on one dimension.

    Rule:
    - Identical scores align perfectly (100)
    - Every point of distance costs one point
    - Opposite ends of the scale (0 vs 100) don't align at all
    """
    return clamp(100.0 - abs(destination_value - traveler_value))


def match_dimensions(
    traveler_dims: dict[str, float],
    destination: DestinationProfile,
) -> dict[str, float]:
    """
    Per-dimension alignment, in canonical dimension order.

    Dimensions the destination hasn't been scored on are left out rather
    than treated as 0. Non-finite scores count as unscored.
    """
    breakdown = {}

    for name in DIMENSIONS:
        destination_value = destination.score(name)
        if destination_value is None or not math.isfinite(destination_value):
            continue

        breakdown[name] = match_dimension(traveler_dims[name], destination_value)

    return breakdown
