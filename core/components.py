from core.utils import clamp, NEUTRAL_SCORE


class TraitGroup:
    """
    A fixed set of named 0-100 scores.

    Every trait starts at the neutral midpoint so that a group built from
    an incomplete questionnaire still reads as "no signal" rather than 0.
    """
    TYPES: list[str] = []

    def __init__(self, scores=None):
        self.scores = {name: NEUTRAL_SCORE for name in self.TYPES}

        if scores:
            for name, value in scores.items():
                self.set(name, value)

    def set(self, name, value):
        if name not in self.scores:
            raise ValueError(f"Invalid {self.__class__.__name__} trait: {name}")

        self.scores[name] = clamp(float(value))

    def get(self, name) -> float:
        return self.scores[name]

    def ranked(self) -> list[str]:
        """Trait names, highest first. Ties keep the canonical TYPES order."""
        order = {name: i for i, name in enumerate(self.TYPES)}
        return sorted(self.scores, key=lambda name: (-self.scores[name], order[name]))

    def __eq__(self, other):
        return type(self) is type(other) and self.scores == other.scores

    def __repr__(self):
        return f"{self.__class__.__name__}({self.scores})"


# Big Five personality dimensions
class BigFive(TraitGroup):
    TYPES = [
        "extraversion",
        "openness",
        "conscientiousness",
        "agreeableness",
        "emotional_stability",
    ]


# How the traveller behaves on the road
class TravelBehaviour(TraitGroup):
    TYPES = [
        "spontaneity_flexibility",
        "adventure_orientation",
        "environmental_adaptation",
        "travel_freedom_index",
    ]


# Elemental resonance, from the landscape ranking
'''
fire: volcanic, geothermal, raw energy
water: coastlines, lakes, rivers
stone: mountains, ancient ruins
urban: cities and their rhythm
desert: open, silent, vast spaces
'''

class Elements(TraitGroup):
    TYPES = ["fire", "water", "stone", "urban", "desert"]


# Inner compass: what the traveller hopes the trip gives them
class Motivations(TraitGroup):
    TYPES = ["transformation", "clarity", "aliveness", "connection"]

    LABELS = {
        "transformation": "Transformation",
        "clarity": "Clarity",
        "aliveness": "Aliveness",
        "connection": "Connection",
    }


# Emotional state carried into the trip
class Burdens(TraitGroup):
    TYPES = [
        "overwhelm",
        "uncertainty",
        "burnout",
        "disconnection",
        "emotional_burden_index",
        "emotional_travel_index",
    ]


# Internal friction between opposing traits (magnitude only)
class Tensions(TraitGroup):
    TYPES = ["social", "flow", "risk", "elements", "tempo"]


class TravelStyle(TraitGroup):
    TYPES = ["luxury_style", "pace"]


# Sensory priorities, from the sensory ranking
class Sensory(TraitGroup):
    TYPES = ["visual", "culinary", "nature", "cultural", "wellness"]

    LABELS = {
        "visual": "Visual Beauty",
        "culinary": "Culinary Excellence",
        "nature": "Nature Immersion",
        "cultural": "Cultural Sensory",
        "wellness": "Wellness & Spa",
    }


# Derived business metrics. nps_predicted lives on a 5-10 scale.
class BusinessMetrics(TraitGroup):
    TYPES = ["spi", "urs", "crs", "gfi", "cgs", "element_alignment_index", "nps_predicted"]
