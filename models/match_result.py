from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MatchResult:
    """Fit of one traveller against one destination."""

    destination_id: str
    destination_name: str
    fit_score: float
    breakdown: dict[str, float] = field(default_factory=dict)
    rank: Optional[int] = None

    affinity_label: str = ""
    why_it_fits: list[str] = field(default_factory=list)
    tension_note: str = ""
    best_for: str = ""
    personality: dict[str, str] = field(default_factory=dict)

    # Carried for comparison views; not part of the persisted row
    avg_cost_per_day: Optional[float] = None
    flight_time_hours: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "destination_id": self.destination_id,
            "destination_name": self.destination_name,
            "fit_score": self.fit_score,
            "breakdown": dict(self.breakdown),
            "rank": self.rank,
            "affinity_label": self.affinity_label,
            "why_it_fits": list(self.why_it_fits),
            "tension_note": self.tension_note,
            "best_for": self.best_for,
            "personality": dict(self.personality),
            "avg_cost_per_day": self.avg_cost_per_day,
            "flight_time_hours": self.flight_time_hours,
        }

    def to_record(self, respondent_id: str, context_intake_id: Optional[str] = None) -> dict:
        """destination_matches row."""
        breakdown = dict(self.breakdown)
        breakdown["narrative"] = " ".join(self.why_it_fits)
        breakdown["tension"] = self.tension_note
        return {
            "respondent_id": respondent_id,
            "destination_id": self.destination_id,
            "context_intake_id": context_intake_id,
            "fit_score": self.fit_score,
            "fit_breakdown": breakdown,
            "rank": self.rank,
        }
