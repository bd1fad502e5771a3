import logging
from typing import Mapping, Optional

from core.components import (
    BigFive,
    TravelBehaviour,
    Elements,
    Motivations,
    Burdens,
    Tensions,
    TravelStyle,
    Sensory,
)
from core.profile import SoulPrintProfile
from core.utils import clamp, safe_score, mean_or_neutral, NEUTRAL_SCORE
from inference import trait_config as cfg
from inference.business_metrics import compute_business_metrics
from questionnaires.answers import parse_ranking

logger = logging.getLogger(__name__)


def reverse_score(value: float) -> float:
    return 100.0 - value


def item_value(raw: Mapping, item_id: str, reverse: bool = False) -> float:
    value = safe_score(raw.get(item_id))
    return reverse_score(value) if reverse else value


def average_items(raw: Mapping, items: list[tuple[str, bool]]) -> float:
    """Mean of the effective (re-oriented) item values."""
    return mean_or_neutral([item_value(raw, item_id, reverse) for item_id, reverse in items])


def rank_scores(ranking, tokens: tuple) -> Optional[dict[str, float]]:
    """
    Map a ranked list onto 100 .. 0 in equal steps.

    Returns None unless the ranking is exactly a permutation of tokens.
    """
    order = parse_ranking(ranking)
    if len(order) != len(tokens) or set(order) != set(tokens):
        return None

    step = 100.0 / (len(tokens) - 1)
    return {token: 100.0 - position * step for position, token in enumerate(order)}


def sub_slider(raw: Mapping, group_id: str, field: str):
    """Read one sub-slider, nested form first, then the flattened key."""
    group = raw.get(group_id)
    if isinstance(group, Mapping) and field in group:
        return group[field]
    return raw.get(f"{group_id}_{field}")


def _ranked_group(raw: Mapping, question_id: str, tokens: tuple, allow_sliders: bool = False) -> dict[str, float]:
    answer = raw.get(question_id)

    # Sensory can also be answered as one slider per token
    if allow_sliders and isinstance(answer, Mapping):
        return {token: safe_score(answer.get(token)) for token in tokens}

    scores = rank_scores(answer, tokens)
    if scores is None:
        if answer is not None:
            logger.debug("[Traits] Malformed ranking for %s: %r", question_id, answer)
        return {token: NEUTRAL_SCORE for token in tokens}
    return scores


def _motivation_scores(raw: Mapping) -> dict[str, float]:
    scores = {}
    for name in cfg.MOTIVATION_ORDER:
        value = sub_slider(raw, cfg.MOTIVATION_GROUP, name)
        if value is not None:
            scores[name] = safe_score(value)
            continue

        # Older answer sets: two plain sliders per motivation
        first, second = cfg.LEGACY_MOTIVATION_ITEMS[name]
        legacy = [raw.get(first), raw.get(second)]
        if any(isinstance(v, (int, float)) and not isinstance(v, bool) for v in legacy):
            scores[name] = mean_or_neutral([safe_score(v) for v in legacy])
        else:
            scores[name] = NEUTRAL_SCORE
    return scores


def _categorical(raw: Mapping, question_id: str) -> Optional[str]:
    value = raw.get(question_id)
    return value if isinstance(value, str) and value else None


def compute_traits(raw: Optional[Mapping]) -> SoulPrintProfile:
    """
    Convert a raw questionnaire response into a SoulPrintProfile.

    Total: missing or malformed answers fall back to the neutral midpoint
    for that item only, so this never raises on user input.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    big_five = BigFive({
        trait: average_items(raw, items) for trait, items in cfg.BIG_FIVE_ITEMS.items()
    })

    behaviour_scores = {
        trait: average_items(raw, items) for trait, items in cfg.TRAVEL_BEHAVIOUR_ITEMS.items()
    }
    behaviour_scores["travel_freedom_index"] = sum(
        weight * behaviour_scores[trait] for trait, weight in cfg.TRAVEL_FREEDOM_WEIGHTS.items()
    )
    travel_behaviour = TravelBehaviour(behaviour_scores)

    elements = Elements(_ranked_group(raw, cfg.ELEMENT_QUESTION, cfg.ELEMENT_ORDER))
    sensory = Sensory(_ranked_group(raw, cfg.SENSORY_QUESTION, cfg.SENSORY_ORDER, allow_sliders=True))
    motivations = Motivations(_motivation_scores(raw))

    burden_scores = {
        name: safe_score(sub_slider(raw, cfg.BURDEN_GROUP, name)) for name in cfg.BURDEN_ORDER
    }
    ebi = mean_or_neutral(list(burden_scores.values()))
    burden_scores["emotional_burden_index"] = ebi
    burden_scores["emotional_travel_index"] = (big_five.get("emotional_stability") + (100 - ebi)) / 2
    burdens = Burdens(burden_scores)

    travel_style = TravelStyle({
        trait: average_items(raw, items) for trait, items in cfg.TRAVEL_STYLE_ITEMS.items()
    })

    profile = SoulPrintProfile(
        big_five=big_five,
        travel_behaviour=travel_behaviour,
        elements=elements,
        motivations=motivations,
        burdens=burdens,
        travel_style=travel_style,
        sensory=sensory,
    )

    profile.tensions = Tensions({
        name: clamp(abs(profile.score(*a) - profile.score(*b)))
        for name, (a, b) in cfg.TENSION_PAIRS.items()
    })

    element_rank = elements.ranked()
    motivation_rank = motivations.ranked()
    sensory_rank = sensory.ranked()
    profile.labels.update({
        "dominant_element": element_rank[0],
        "secondary_element": element_rank[1],
        "top_motivation_1": Motivations.LABELS[motivation_rank[0]],
        "top_motivation_2": Motivations.LABELS[motivation_rank[1]],
        "top_sensory_1": sensory_rank[0],
        "top_sensory_2": sensory_rank[1],
    })

    for label, question_id in cfg.CATEGORICAL_FIELDS.items():
        profile.labels[label] = _categorical(raw, question_id)

    profile.business, business_labels = compute_business_metrics(profile)
    profile.labels.update(business_labels)

    return profile
