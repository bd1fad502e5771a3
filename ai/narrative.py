"""
SoulPrint narrative generation.

The Groq model writes the long-form narrative from the computed profile.
Headline and tagline are always deterministic, and when the model is
unavailable the summary falls back to a fixed template built from the
same traits, so a profile always has a narrative.
"""
import logging

import config
from ai.llm_client import generate_text
from core.components import Motivations, Sensory
from core.profile import SoulPrintProfile
from matching.dimensions import traveler_dimension

logger = logging.getLogger(__name__)

PROMPT_VERSION = "v3.0"
TEMPLATE_MODEL = "template"

SYSTEM_PROMPT = "You are the SoulPrint Narrator, creating personalised travel narratives."

PROMPT_TEMPLATE = """Generate a personalised SoulPrint narrative for {name}.

PSYCHOMETRIC PROFILE:
- Big Five: E={E}, O={O}, C={C}, A={A}, ES={ES}
- Travel: SF={SF}, AO={AO}, EA={EA}, Freedom={TFI}
- Elements: Dominant={dominant_element}, Secondary={secondary_element}
- Inner Compass: {top_motivation_1}, {top_motivation_2}
- Sensory: {top_sensory_1}, {top_sensory_2}
- Style: Luxury={LUX}, Pace={PACE}
- Tensions: Social={T_Social}, Flow={T_Flow}, Risk={T_Risk}, Elements={T_Elements}, Tempo={T_Tempo}
- Emotional burden: {EBI}
- Tribe: {tribe} ({tribe_confidence})

Create a 2-3 paragraph narrative that:
1. Describes their travel personality using the elemental and trait data
2. Highlights key tensions and growth opportunities
3. Describes the kind of destination that would resonate with them
4. Provides 2-3 specific recommendations for their journey

Be warm, insightful, and specific. Avoid platitudes. Do not use markdown."""


def _high_low(value: float, high: str, low: str, middle: str) -> str:
    if value > 60:
        return high
    if value < 40:
        return low
    return middle


def _label(labels: dict, key: str) -> str:
    return labels.get(key) or "balance"


def _sensory_label(profile: SoulPrintProfile, key: str) -> str:
    token = profile.labels.get(key)
    return Sensory.LABELS.get(token, token or "Visual Beauty")


def build_prompt(name: str, profile: SoulPrintProfile) -> str:
    fields = profile.to_prompt_fields()
    fields["top_sensory_1"] = _sensory_label(profile, "top_sensory_1")
    fields["top_sensory_2"] = _sensory_label(profile, "top_sensory_2")
    return PROMPT_TEMPLATE.format(name=name, **fields)


def generate_headline(profile: SoulPrintProfile) -> str:
    tribe = profile.labels.get("tribe")
    if tribe and tribe != "Mixed":
        # "A_Hunters" -> "The Hunters"
        return f"The {tribe.split('_', 1)[-1]}"

    energy = traveler_dimension(profile, "achievement")
    social = traveler_dimension(profile, "social_vibe")
    energy_word = _high_low(energy, "Adventurous", "Contemplative", "Curious")
    social_word = _high_low(social, "Connector", "Wanderer", "Explorer")
    return f"The {energy_word} {social_word}"


def generate_tagline(profile: SoulPrintProfile) -> str:
    energy = traveler_dimension(profile, "achievement")
    social = traveler_dimension(profile, "social_vibe")

    if energy < 40 and social < 40:
        return "Seeking beauty in quiet spaces"
    if energy > 60 and social > 60:
        return "Chasing horizons with kindred spirits"
    if energy > 60 and social < 40:
        return "Conquering peaks on your own terms"
    if energy < 40 and social > 60:
        return "Finding connection in serene settings"

    motivation = profile.labels.get("top_motivation_1") or Motivations.LABELS["aliveness"]
    element = profile.labels.get("dominant_element") or "water"
    return f"Seeking {motivation.lower()} through {element}"


def template_narrative(profile: SoulPrintProfile) -> str:
    energy_desc = _high_low(
        traveler_dimension(profile, "achievement"),
        "achievement-driven", "restorative and calming", "balanced",
    )
    social_desc = _high_low(
        traveler_dimension(profile, "social_vibe"),
        "social and communal", "intimate and private", "a mix of social and solitary",
    )
    luxury_desc = _high_low(
        profile.score("travel_style", "luxury_style"),
        "seamless, polished luxury", "authentic, rustic experiences", "a blend of comfort and authenticity",
    )
    pace_desc = _high_low(
        profile.score("travel_style", "pace"),
        "packed with activities", "slow and unhurried", "moderately paced",
    )

    top1 = _sensory_label(profile, "top_sensory_1")
    top2 = _sensory_label(profile, "top_sensory_2")
    motivation = _label(profile.labels, "top_motivation_1").lower()

    return (
        f"You are drawn to {energy_desc} travel experiences. "
        f"You prefer {social_desc} settings and prioritise {top1} and {top2} in your destinations. "
        f"Your ideal pace is {pace_desc}, and you appreciate {luxury_desc}. "
        f"Above all you travel for {motivation}, and the right destination will give you room for it."
    )


async def generate_soulprint_narrative(name: str, profile: SoulPrintProfile, use_llm: bool = True) -> dict:
    """
    Narrative record for narrative_insights.
    Falls back to the template summary when the model returns nothing.
    """
    summary = ""
    model_used = TEMPLATE_MODEL

    if use_llm and config.GROQ_API_KEY:
        summary = (await generate_text(SYSTEM_PROMPT, build_prompt(name, profile))).strip()
        if summary:
            model_used = config.NARRATIVE_MODEL
        else:
            logger.warning("[Narrative] LLM returned no text for %s, using template", name)

    if not summary:
        summary = template_narrative(profile)

    return {
        "soulprint_summary": summary,
        "headline": generate_headline(profile),
        "tagline": generate_tagline(profile),
        "model_used": model_used,
        "prompt_version": PROMPT_VERSION,
    }
