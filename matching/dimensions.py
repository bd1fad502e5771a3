"""
Traveller-side view of the destination dimensions.

Destinations are scored on a fixed vocabulary (restorative, achievement,
...). Some of these map 1:1 onto a traveller trait; the rest are the simple
mean of the contributing traits, re-oriented where a trait points the
other way (an extravert is *less* restorative).
"""
from core.profile import SoulPrintProfile
from models.destination_profile import DIMENSIONS

REVERSED = True

# dimension -> [((group, trait), reversed)]
TRAVELER_DIMENSIONS = {
    "restorative": [
        (("big_five", "extraversion"), REVERSED),
        (("travel_behaviour", "adventure_orientation"), REVERSED),
        (("big_five", "conscientiousness"), False),
    ],
    "achievement": [
        (("travel_behaviour", "adventure_orientation"), False),
        (("big_five", "openness"), False),
    ],
    "cultural": [
        (("big_five", "openness"), False),
        (("motivations", "connection"), False),
    ],
    "social_vibe": [
        (("big_five", "extraversion"), False),
        (("big_five", "agreeableness"), False),
    ],
    "visual": [(("sensory", "visual"), False)],
    "culinary": [(("sensory", "culinary"), False)],
    "nature": [(("sensory", "nature"), False)],
    "cultural_sensory": [(("sensory", "cultural"), False)],
    "wellness": [(("sensory", "wellness"), False)],
    "luxury_style": [(("travel_style", "luxury_style"), False)],
}

if set(TRAVELER_DIMENSIONS) != set(DIMENSIONS):
    raise ValueError("TRAVELER_DIMENSIONS must cover every destination dimension")


def traveler_dimension(profile: SoulPrintProfile, dimension: str) -> float:
    sources = TRAVELER_DIMENSIONS[dimension]
    values = []
    for (group, trait), reverse in sources:
        value = profile.score(group, trait)
        values.append(100.0 - value if reverse else value)
    return sum(values) / len(values)


def traveler_dimensions(profile: SoulPrintProfile) -> dict[str, float]:
    return {dimension: traveler_dimension(profile, dimension) for dimension in DIMENSIONS}
