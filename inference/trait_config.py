"""
Scoring configuration for the trait aggregator.

Which questionnaire items feed which trait, and which of them are
reverse-scored. Kept as data so each trait can be checked in isolation
and the averaging code never has to know item ids.
"""
from questionnaires.questions import ELEMENT_TOKENS, SENSORY_TOKENS, MOTIVATION_FIELDS, BURDEN_FIELDS

REVERSED = True
FORWARD = False

# trait -> [(item id, reverse-scored)]
BIG_FIVE_ITEMS = {
    "extraversion": [("Q4", FORWARD), ("Q5", FORWARD), ("Q6", FORWARD), ("Q7", REVERSED)],
    "openness": [("Q8", FORWARD), ("Q9", FORWARD), ("Q10", FORWARD), ("Q11", REVERSED)],
    "conscientiousness": [("Q12", FORWARD), ("Q13", FORWARD), ("Q14", FORWARD), ("Q15", REVERSED)],
    "agreeableness": [("Q16", FORWARD), ("Q17", FORWARD), ("Q18", FORWARD), ("Q19", REVERSED)],
    "emotional_stability": [("Q20", FORWARD), ("Q21", FORWARD), ("Q22", REVERSED), ("Q23", REVERSED)],
}

TRAVEL_BEHAVIOUR_ITEMS = {
    "spontaneity_flexibility": [("Q24", FORWARD), ("Q25", FORWARD), ("Q26", FORWARD), ("Q27", REVERSED)],
    "adventure_orientation": [("Q28", FORWARD), ("Q29", FORWARD), ("Q30", REVERSED)],
    "environmental_adaptation": [("Q31", FORWARD), ("Q32", FORWARD), ("Q33", REVERSED)],
}

TRAVEL_STYLE_ITEMS = {
    "luxury_style": [("Q47", FORWARD), ("Q48", REVERSED), ("Q49", FORWARD), ("Q50", REVERSED)],
    "pace": [("Q51", FORWARD), ("Q52", REVERSED), ("Q53", FORWARD)],
}

TRAVEL_FREEDOM_WEIGHTS = {
    "spontaneity_flexibility": 0.4,
    "adventure_orientation": 0.4,
    "environmental_adaptation": 0.2,
}

ELEMENT_QUESTION = "Q34"
ELEMENT_ORDER = ELEMENT_TOKENS

SENSORY_QUESTION = "Q54"
SENSORY_ORDER = SENSORY_TOKENS

MOTIVATION_GROUP = "Q35"
MOTIVATION_ORDER = MOTIVATION_FIELDS

# Older questionnaire versions asked two plain sliders per motivation
LEGACY_MOTIVATION_ITEMS = {
    "transformation": ("Q35", "Q36"),
    "clarity": ("Q37", "Q38"),
    "aliveness": ("Q39", "Q40"),
    "connection": ("Q41", "Q42"),
}

BURDEN_GROUP = "Q45"
BURDEN_ORDER = BURDEN_FIELDS

# tension -> ((group, trait), (group, trait)); score is |a - b|
TENSION_PAIRS = {
    "social": (("big_five", "extraversion"), ("motivations", "connection")),
    "flow": (("big_five", "conscientiousness"), ("travel_behaviour", "spontaneity_flexibility")),
    "risk": (("travel_behaviour", "adventure_orientation"), ("travel_behaviour", "environmental_adaptation")),
    "elements": (("elements", "fire"), ("elements", "water")),
    "tempo": (("elements", "stone"), ("elements", "urban")),
}

# label -> question id, passed through untouched
CATEGORICAL_FIELDS = {
    "life_phase": "Q43",
    "shift_desired": "Q44",
    "completion_need": "Q46",
}
