from core.components import (
    BigFive,
    TravelBehaviour,
    Elements,
    Motivations,
    Burdens,
    Tensions,
    TravelStyle,
    Sensory,
    BusinessMetrics,
)

GROUP_NAMES = (
    "big_five",
    "travel_behaviour",
    "elements",
    "motivations",
    "burdens",
    "tensions",
    "travel_style",
    "sensory",
    "business",
)

LABEL_NAMES = (
    "dominant_element",
    "secondary_element",
    "top_motivation_1",
    "top_motivation_2",
    "top_sensory_1",
    "top_sensory_2",
    "life_phase",
    "shift_desired",
    "completion_need",
    "spi_tier",
    "urs_tier",
    "nps_tier",
    "crs_tier",
    "gfi_tier",
    "cgs_tier",
    "tribe",
    "tribe_confidence",
    "upsell_priority",
    "risk_flag",
    "content_flag",
)

# computed_scores column -> (group, trait)
RECORD_COLUMNS = {
    "extraversion": ("big_five", "extraversion"),
    "openness": ("big_five", "openness"),
    "conscientiousness": ("big_five", "conscientiousness"),
    "agreeableness": ("big_five", "agreeableness"),
    "emotional_stability": ("big_five", "emotional_stability"),
    "spontaneity_flexibility": ("travel_behaviour", "spontaneity_flexibility"),
    "adventure_orientation": ("travel_behaviour", "adventure_orientation"),
    "environmental_adaptation": ("travel_behaviour", "environmental_adaptation"),
    "travel_freedom_index": ("travel_behaviour", "travel_freedom_index"),
    "fire_score": ("elements", "fire"),
    "water_score": ("elements", "water"),
    "stone_score": ("elements", "stone"),
    "urban_score": ("elements", "urban"),
    "desert_score": ("elements", "desert"),
    "transformation": ("motivations", "transformation"),
    "clarity": ("motivations", "clarity"),
    "aliveness": ("motivations", "aliveness"),
    "connection": ("motivations", "connection"),
    "overwhelm": ("burdens", "overwhelm"),
    "uncertainty": ("burdens", "uncertainty"),
    "burnout": ("burdens", "burnout"),
    "disconnection": ("burdens", "disconnection"),
    "emotional_burden_index": ("burdens", "emotional_burden_index"),
    "emotional_travel_index": ("burdens", "emotional_travel_index"),
    "t_social": ("tensions", "social"),
    "t_flow": ("tensions", "flow"),
    "t_risk": ("tensions", "risk"),
    "t_elements": ("tensions", "elements"),
    "t_tempo": ("tensions", "tempo"),
    "luxury_style": ("travel_style", "luxury_style"),
    "pace": ("travel_style", "pace"),
    "visual_score": ("sensory", "visual"),
    "culinary_score": ("sensory", "culinary"),
    "nature_score": ("sensory", "nature"),
    "cultural_sensory_score": ("sensory", "cultural"),
    "wellness_score": ("sensory", "wellness"),
    "spi": ("business", "spi"),
    "urs": ("business", "urs"),
    "crs": ("business", "crs"),
    "gfi": ("business", "gfi"),
    "cgs": ("business", "cgs"),
    "element_alignment_index": ("business", "element_alignment_index"),
    "nps_predicted": ("business", "nps_predicted"),
}

# Short names used by the narrative prompt template
PROMPT_FIELDS = {
    "E": ("big_five", "extraversion"),
    "O": ("big_five", "openness"),
    "C": ("big_five", "conscientiousness"),
    "A": ("big_five", "agreeableness"),
    "ES": ("big_five", "emotional_stability"),
    "SF": ("travel_behaviour", "spontaneity_flexibility"),
    "AO": ("travel_behaviour", "adventure_orientation"),
    "EA": ("travel_behaviour", "environmental_adaptation"),
    "TFI": ("travel_behaviour", "travel_freedom_index"),
    "fire": ("elements", "fire"),
    "water": ("elements", "water"),
    "stone": ("elements", "stone"),
    "urban": ("elements", "urban"),
    "desert": ("elements", "desert"),
    "TR": ("motivations", "transformation"),
    "CL": ("motivations", "clarity"),
    "AL": ("motivations", "aliveness"),
    "CON": ("motivations", "connection"),
    "EBI": ("burdens", "emotional_burden_index"),
    "ETI": ("burdens", "emotional_travel_index"),
    "T_Social": ("tensions", "social"),
    "T_Flow": ("tensions", "flow"),
    "T_Risk": ("tensions", "risk"),
    "T_Elements": ("tensions", "elements"),
    "T_Tempo": ("tensions", "tempo"),
    "LUX": ("travel_style", "luxury_style"),
    "PACE": ("travel_style", "pace"),
    "EAI": ("business", "element_alignment_index"),
}


class SoulPrintProfile:
    """
    The traveller's trait vector: every score group plus the categorical
    labels derived from them. Built by inference.answer_converter.
    """

    def __init__(
        self,
        big_five=None,
        travel_behaviour=None,
        elements=None,
        motivations=None,
        burdens=None,
        tensions=None,
        travel_style=None,
        sensory=None,
        business=None,
        labels=None,
    ):
        self.big_five = big_five or BigFive()
        self.travel_behaviour = travel_behaviour or TravelBehaviour()
        self.elements = elements or Elements()
        self.motivations = motivations or Motivations()
        self.burdens = burdens or Burdens()
        self.tensions = tensions or Tensions()
        self.travel_style = travel_style or TravelStyle()
        self.sensory = sensory or Sensory()
        self.business = business or BusinessMetrics()

        self.labels = {name: None for name in LABEL_NAMES}
        if labels:
            self.labels.update(labels)

    def score(self, group: str, trait: str) -> float:
        return getattr(self, group).get(trait)

    def all_scores(self) -> dict[str, float]:
        """Every score keyed as "group.trait"."""
        flat = {}
        for group_name in GROUP_NAMES:
            for trait, value in getattr(self, group_name).scores.items():
                flat[f"{group_name}.{trait}"] = value
        return flat

    def to_dict(self):
        data = {group_name: dict(getattr(self, group_name).scores) for group_name in GROUP_NAMES}
        data["labels"] = dict(self.labels)
        return data

    def to_record(self) -> dict:
        """Flat computed_scores row."""
        record = {
            column: round(self.score(group, trait), 2)
            for column, (group, trait) in RECORD_COLUMNS.items()
        }
        record.update(self.labels)
        return record

    def to_prompt_fields(self) -> dict:
        fields = {
            name: round(self.score(group, trait), 1)
            for name, (group, trait) in PROMPT_FIELDS.items()
        }
        fields.update(self.labels)
        return fields

    @classmethod
    def from_record(cls, record: dict) -> "SoulPrintProfile":
        """Rebuild a profile from a stored computed_scores row. Unknown columns are ignored."""
        profile = cls()
        for column, (group, trait) in RECORD_COLUMNS.items():
            value = record.get(column)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                getattr(profile, group).set(trait, value)

        for name in LABEL_NAMES:
            if name in record:
                profile.labels[name] = record[name]

        return profile

    def __eq__(self, other):
        return isinstance(other, SoulPrintProfile) and self.to_dict() == other.to_dict()
