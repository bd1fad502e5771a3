import logging
from typing import Iterable, Optional

from models.destination_profile import DestinationProfile

logger = logging.getLogger(__name__)

GEOGRAPHIC_CONSTRAINTS = ("anywhere", "country", "region", "flight_radius")


def _matches_constraint(destination: DestinationProfile, constraint: str, value: str) -> bool:
    if constraint == "country":
        return value.lower() in destination.country.lower()

    if constraint == "region":
        return destination.region == value

    if constraint == "flight_radius":
        try:
            max_hours = float(value)
        except ValueError:
            return True
        if max_hours != max_hours:  # NaN
            return True
        return destination.flight_time_hours is not None and destination.flight_time_hours <= max_hours

    return True


def filter_catalog(
    catalog: Iterable[DestinationProfile],
    geographic_constraint: str = "anywhere",
    geographic_value: str = "",
    tier: Optional[str] = None,
) -> list[DestinationProfile]:
    """
    Narrow the catalog to active destinations that satisfy the traveller's
    geographic constraint.

    If the constraint rules out every active destination, all active
    destinations are returned instead so the traveller still gets matches.
    """
    active = [d for d in catalog if d.is_active]
    if tier:
        active = [d for d in active if d.tier == tier]

    if not geographic_value or geographic_constraint not in GEOGRAPHIC_CONSTRAINTS:
        return active

    filtered = [
        d for d in active
        if _matches_constraint(d, geographic_constraint, geographic_value)
    ]

    if not filtered and active:
        logger.info(
            "[Catalog] No destinations matched %s=%r, falling back to all active",
            geographic_constraint,
            geographic_value,
        )
        return active

    return filtered
