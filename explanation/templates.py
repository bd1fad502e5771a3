"""
Deterministic match explanations.

"Why it fits" and "one honest note" are assembled from fixed sentence
templates keyed by dimension and score band, so the same match always
reads the same way. The LLM rewrite in explanation_llm is layered on top
of this text and is never required.
"""
from models.destination_profile import DIMENSIONS, DestinationProfile

EXCEPTIONAL = "exceptional"
STRONG = "strong"
MODERATE = "moderate"
WEAK = "weak"

# (lower bound, band), checked top-down
BANDS = [
    (80, EXCEPTIONAL),
    (60, STRONG),
    (40, MODERATE),
    (0, WEAK),
]

DIMENSION_LABELS = {
    "restorative": "Restoration",
    "achievement": "Achievement",
    "cultural": "Cultural Immersion",
    "social_vibe": "Social Vibe",
    "visual": "Visual Beauty",
    "culinary": "Culinary",
    "nature": "Nature",
    "cultural_sensory": "Cultural Sensory",
    "wellness": "Wellness",
    "luxury_style": "Luxury Style",
}

# What the destination offers on each dimension
DIMENSION_PHRASES = {
    "restorative": "restorative pace",
    "achievement": "sense of challenge and accomplishment",
    "cultural": "depth of culture and history",
    "social_vibe": "social atmosphere",
    "visual": "visual beauty",
    "culinary": "food scene",
    "nature": "access to wild nature",
    "cultural_sensory": "sounds, scents and textures of local life",
    "wellness": "wellness offering",
    "luxury_style": "style of comfort and service",
}

WHY_FRAMES = {
    EXCEPTIONAL: "{name}'s {phrase} is an exceptional match for how you like to travel.",
    STRONG: "{name}'s {phrase} lines up strongly with your profile.",
    MODERATE: "{name}'s {phrase} suits you reasonably well.",
    WEAK: "{name}'s {phrase} is one of its better fits for you, though the match is modest.",
}

# (dimension, direction) -> note. "above": you want more of it than the
# destination offers; "below": the destination offers more than you want.
TENSION_TEMPLATES = {
    ("restorative", "above"): "Travellers with your restorative profile sometimes find the pace of {name} demanding. If you build in rest days between activities, this won't be a concern.",
    ("restorative", "below"): "Travellers with your adventurous profile sometimes find the slower pace of {name} under-stimulating. If you seek out the more active excursions available, this won't be a concern.",
    ("achievement", "above"): "{name} offers fewer big challenges than you tend to look for. If you plan one stand-out expedition, this won't be a concern.",
    ("achievement", "below"): "{name} leans towards demanding, goal-driven trips, more than you usually want. If you treat the big excursions as optional, this won't be a concern.",
    ("cultural", "above"): "{name} is lighter on cultural depth than you might hope. If you seek out a local guide or a museum day, this won't be a concern.",
    ("cultural", "below"): "{name} is steeped in history and culture, which can feel like a lot if you'd rather switch off. If you pick one or two sites rather than all of them, this won't be a concern.",
    ("social_vibe", "above"): "Travellers with your sociable nature sometimes find {name}'s quieter atmosphere isolating. If you stay in communal lodges or join group tours, this won't be a concern.",
    ("social_vibe", "below"): "Travellers with your private nature sometimes find the social bustle of {name} intense. If you choose accommodation away from the main tourist areas, this won't be a concern.",
    ("visual", "above"): "{name} is less of a visual spectacle than your top priorities suggest. If you time a few outings for golden hour, this won't be a concern.",
    ("visual", "below"): "{name}'s scenery is a headline act that may matter less to you than to most visitors.",
    ("culinary", "above"): "{name}'s food scene is simpler than you might want. If you book one or two standout tables in advance, this won't be a concern.",
    ("culinary", "below"): "{name} is a food destination first, which may be more than you need. If you keep meals simple, this won't be a concern.",
    ("nature", "above"): "{name} offers less wild nature than you crave. If you add a day trip out of town, this won't be a concern.",
    ("nature", "below"): "{name} is very outdoors-focused, more than you usually look for. If you base yourself somewhere with town comforts, this won't be a concern.",
    ("cultural_sensory", "above"): "{name} is calmer on the senses than you might like. If you head for the markets and festivals, this won't be a concern.",
    ("cultural_sensory", "below"): "{name} can be a sensory overload at times. If you keep a quiet base to retreat to, this won't be a concern.",
    ("wellness", "above"): "{name} has a thin wellness offering for what you need. If you book a spa day or a retreat in advance, this won't be a concern.",
    ("wellness", "below"): "{name} leans heavily into wellness, more than you are likely to use.",
    ("luxury_style", "above"): "Travellers with your refined taste sometimes find {name}'s infrastructure basic. If you book the premium tier accommodation available, this won't be a concern.",
    ("luxury_style", "below"): "Travellers who value raw authenticity sometimes find {name}'s polished tourism scene too curated. If you venture into the local neighbourhoods, this won't be a concern.",
}

TENSION_PREFIXES = {
    STRONG: "A small note: ",
    MODERATE: "Worth knowing: ",
    WEAK: "One honest note: ",
}

NO_TENSION = "{name} aligns well across all your key dimensions. No significant tensions were identified between your profile and this destination."


def score_band(score: float) -> str:
    for lower, band in BANDS:
        if score >= lower:
            return band
    return WEAK


def _ordered(breakdown: dict[str, float], highest_first: bool) -> list[str]:
    order = {name: i for i, name in enumerate(DIMENSIONS)}
    sign = -1 if highest_first else 1
    return sorted(breakdown, key=lambda name: (sign * breakdown[name], order.get(name, len(order))))


def top_dimensions(breakdown: dict[str, float], n: int = 3) -> list[str]:
    """Highest contributions first; ties keep canonical dimension order."""
    return _ordered(breakdown, highest_first=True)[:n]


def weakest_dimension(breakdown: dict[str, float]):
    ordered = _ordered(breakdown, highest_first=False)
    return ordered[0] if ordered else None


def why_sentence(dimension: str, band: str, destination_name: str) -> str:
    return WHY_FRAMES[band].format(name=destination_name, phrase=DIMENSION_PHRASES[dimension])


def generate_why_it_fits(destination_name: str, breakdown: dict[str, float], n: int = 3) -> list[str]:
    return [
        why_sentence(dimension, score_band(breakdown[dimension]), destination_name)
        for dimension in top_dimensions(breakdown, n)
    ]


def generate_tension(
    destination_name: str,
    breakdown: dict[str, float],
    traveler_dims: dict[str, float],
    destination: DestinationProfile,
) -> str:
    dimension = weakest_dimension(breakdown)
    if dimension is None:
        return NO_TENSION.format(name=destination_name)

    band = score_band(breakdown[dimension])
    if band == EXCEPTIONAL:
        return NO_TENSION.format(name=destination_name)

    direction = "above" if traveler_dims[dimension] > destination.score(dimension) else "below"
    note = TENSION_TEMPLATES[(dimension, direction)].format(name=destination_name)
    return TENSION_PREFIXES[band] + note


def affinity_label(score: float) -> str:
    if score >= 85:
        return "Exceptional Match"
    if score >= 70:
        return "Strong Match"
    if score >= 55:
        return "Good Match"
    return "Moderate Match"


BEST_FOR_LABELS = {
    "restorative": "restoration",
    "cultural": "cultural immersion",
    "nature": "nature exploration",
    "wellness": "wellness retreats",
    "culinary": "culinary discovery",
    "social_vibe": "social connection",
    "visual": "visual beauty",
    "luxury_style": "luxury experiences",
}


def best_for_tag(destination: DestinationProfile) -> str:
    scored = [
        (destination.score(key) or 0.0, i, label)
        for i, (key, label) in enumerate(BEST_FOR_LABELS.items())
    ]
    scored.sort(key=lambda item: (-item[0], item[1]))
    return f"Best for {scored[0][2]}"


def _describe(value: float, high: str, low: str, middle: str) -> str:
    if value > 60:
        return high
    if value < 40:
        return low
    return middle


def destination_personality(destination: DestinationProfile) -> dict[str, str]:
    restorative = destination.score("restorative")
    social = destination.score("social_vibe")
    luxury = destination.score("luxury_style")

    sensory = [
        destination.score(name)
        for name in ("visual", "culinary", "nature", "cultural_sensory", "wellness")
        if destination.score(name) is not None
    ]
    sensory_intensity = sum(sensory) / len(sensory) if sensory else 50.0

    return {
        "pace": _describe(50.0 if restorative is None else restorative, "Slow", "Fast", "Moderate"),
        "social_vibe": _describe(50.0 if social is None else social, "Vibrant", "Intimate", "Mixed"),
        "sensory_intensity": _describe(sensory_intensity, "Rich", "Calm", "Moderate"),
        "luxury_style": _describe(50.0 if luxury is None else luxury, "Opulent", "Raw", "Refined"),
    }
