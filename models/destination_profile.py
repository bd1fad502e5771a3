import math
from dataclasses import dataclass, field
from typing import Optional

from core.utils import clamp

DIMENSIONS = (
    "restorative",
    "achievement",
    "cultural",
    "social_vibe",
    "visual",
    "culinary",
    "nature",
    "cultural_sensory",
    "wellness",
    "luxury_style",
)


def _optional_float(value) -> Optional[float]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _dimension_score(value) -> Optional[float]:
    number = _optional_float(value)
    return None if number is None else clamp(number)


def _as_list(value) -> tuple:
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split("|") if part.strip())
    return tuple(value)


@dataclass(frozen=True)
class DestinationProfile:
    """
    Curated destination entry from the catalog.
    No logic. No scoring.
    """

    id: str
    name: str
    country: str = ""
    region: str = ""
    tier: Optional[str] = None
    is_active: bool = True

    # 0-100, None when the curator hasn't scored a dimension
    scores: dict = field(default_factory=dict)

    avg_cost_per_day: Optional[float] = None
    flight_time_hours: Optional[float] = None
    best_time_to_visit: Optional[str] = None
    climate_tags: tuple = ()
    highlights: tuple = ()
    description: str = ""

    # Dimensions the curator flagged as the main draw; weighted up in matching
    primary_dimensions: tuple = ()

    def score(self, dimension: str) -> Optional[float]:
        return self.scores.get(dimension)

    @classmethod
    def from_row(cls, row: dict) -> "DestinationProfile":
        """
        Build from a catalog row. Accepts both the short dimension names and
        the echoprint_destinations column names (restorative_score, ...).
        """
        scores = {}
        for dimension in DIMENSIONS:
            value = row.get(dimension, row.get(f"{dimension}_score"))
            scores[dimension] = _dimension_score(value)

        is_active = row.get("is_active", True)
        if isinstance(is_active, str):
            is_active = is_active.strip().lower() not in ("false", "0", "no", "")

        return cls(
            id=str(row["id"]),
            name=row.get("name") or str(row["id"]),
            country=str(row.get("country") or ""),
            region=str(row.get("region") or ""),
            tier=row.get("tier") or None,
            is_active=bool(is_active) if is_active is not None else True,
            scores=scores,
            avg_cost_per_day=_optional_float(row.get("avg_cost_per_day", row.get("avg_cost_per_day_gbp"))),
            flight_time_hours=_optional_float(row.get("flight_time_hours", row.get("flight_time_from_uk_hours"))),
            best_time_to_visit=row.get("best_time_to_visit") or None,
            climate_tags=_as_list(row.get("climate_tags")),
            highlights=_as_list(row.get("highlights")),
            description=row.get("description") or row.get("short_description") or "",
            primary_dimensions=tuple(
                d for d in _as_list(row.get("primary_dimensions")) if d in DIMENSIONS
            ),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "region": self.region,
            "tier": self.tier,
            "is_active": self.is_active,
            "scores": dict(self.scores),
            "avg_cost_per_day": self.avg_cost_per_day,
            "flight_time_hours": self.flight_time_hours,
            "best_time_to_visit": self.best_time_to_visit,
            "climate_tags": list(self.climate_tags),
            "highlights": list(self.highlights),
            "description": self.description,
            "primary_dimensions": list(self.primary_dimensions),
        }
