"""
Hand-authored questionnaire answers for testing and UI prototyping.
Each archetype is a complete, valid RawResponse.
"""

SLIDER_IDS = [f"Q{i}" for i in range(4, 34)] + [f"Q{i}" for i in range(47, 54)]


def _answers(sliders: dict, elements: list, sensory: list, motivations: dict, burdens: dict,
             life_phase: str, shift: str, completion: str, default: float = 50) -> dict:
    answers = {qid: sliders.get(qid, default) for qid in SLIDER_IDS}
    answers.update({
        "Q34": elements,
        "Q35": motivations,
        "Q45": burdens,
        "Q43": life_phase,
        "Q44": shift,
        "Q46": completion,
        "Q54": sensory,
    })
    return answers


NEUTRAL = _answers(
    sliders={},
    elements=["fire", "water", "stone", "urban", "desert"],
    sensory=["visual", "culinary", "nature", "cultural", "wellness"],
    motivations={"transformation": 50, "clarity": 50, "aliveness": 50, "connection": 50},
    burdens={"overwhelm": 50, "uncertainty": 50, "burnout": 50, "disconnection": 50},
    life_phase="thriving",
    shift="perspective",
    completion="none",
)


# Outgoing, spontaneous, thrill-seeking; wants fire and stone
ADVENTURER = _answers(
    sliders={
        # Extraversion / Openness
        "Q4": 90, "Q5": 85, "Q6": 80, "Q7": 15,
        "Q8": 90, "Q9": 75, "Q10": 95, "Q11": 10,
        # Conscientiousness / Agreeableness
        "Q12": 20, "Q13": 35, "Q14": 40, "Q15": 85,
        "Q16": 65, "Q17": 70, "Q18": 75, "Q19": 30,
        # Stability / Spontaneity
        "Q20": 80, "Q21": 85, "Q22": 20, "Q23": 15,
        "Q24": 90, "Q25": 95, "Q26": 85, "Q27": 10,
        # Adventure / Adaptation
        "Q28": 95, "Q29": 90, "Q30": 5,
        "Q31": 85, "Q32": 80, "Q33": 10,
        # Style: rustic and packed
        "Q47": 20, "Q48": 85, "Q49": 15, "Q50": 90,
        "Q51": 90, "Q52": 15, "Q53": 80,
    },
    elements=["fire", "stone", "desert", "water", "urban"],
    sensory=["nature", "visual", "cultural", "culinary", "wellness"],
    motivations={"transformation": 90, "clarity": 55, "aliveness": 95, "connection": 60},
    burdens={"overwhelm": 20, "uncertainty": 30, "burnout": 15, "disconnection": 25},
    life_phase="reinventing",
    shift="adventure",
    completion="momentum",
)


# Introverted, planned, tired; wants water, wellness and comfort
RESTORATIVE = _answers(
    sliders={
        "Q4": 15, "Q5": 20, "Q6": 10, "Q7": 90,
        "Q8": 45, "Q9": 60, "Q10": 50, "Q11": 60,
        "Q12": 85, "Q13": 80, "Q14": 90, "Q15": 15,
        "Q16": 70, "Q17": 65, "Q18": 50, "Q19": 35,
        "Q20": 40, "Q21": 45, "Q22": 65, "Q23": 70,
        "Q24": 15, "Q25": 30, "Q26": 10, "Q27": 85,
        "Q28": 10, "Q29": 15, "Q30": 90,
        "Q31": 25, "Q32": 30, "Q33": 70,
        "Q47": 90, "Q48": 20, "Q49": 85, "Q50": 15,
        "Q51": 10, "Q52": 95, "Q53": 20,
    },
    elements=["water", "stone", "urban", "desert", "fire"],
    sensory=["wellness", "nature", "culinary", "visual", "cultural"],
    motivations={"transformation": 40, "clarity": 85, "aliveness": 35, "connection": 55},
    burdens={"overwhelm": 85, "uncertainty": 60, "burnout": 90, "disconnection": 55},
    life_phase="recovering",
    shift="rest",
    completion="permission",
)


ARCHETYPES = {
    "neutral": NEUTRAL,
    "adventurer": ADVENTURER,
    "restorative": RESTORATIVE,
}
