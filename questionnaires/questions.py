from dataclasses import dataclass, field

SLIDER = "slider"
SINGLE_SELECT = "single_select"
RANKED_LIST = "ranked_list"
SUB_SLIDERS = "sub_sliders"

ANSWER_KINDS = (SLIDER, SINGLE_SELECT, RANKED_LIST, SUB_SLIDERS)


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    section: int
    kind: str = SLIDER
    # single_select choices, ranked_list tokens, or sub_sliders field names
    options: tuple = field(default_factory=tuple)
    required: bool = True


SECTION_TITLES = [
    "Social Energy & Curiosity",
    "Structure & Harmony",
    "Inner Weather & Flexibility",
    "Adventure & Elements",
    "Inner Compass",
    "Life Context",
    "Travel Style",
    "Sensory Priorities",
]

ELEMENT_TOKENS = ("fire", "water", "stone", "urban", "desert")
SENSORY_TOKENS = ("visual", "culinary", "nature", "cultural", "wellness")
MOTIVATION_FIELDS = ("transformation", "clarity", "aliveness", "connection")
BURDEN_FIELDS = ("overwhelm", "uncertainty", "burnout", "disconnection")

LIFE_PHASES = ("building", "thriving", "transition", "recovering", "reinventing")
SHIFTS_DESIRED = ("rest", "perspective", "adventure", "connection", "celebration")
COMPLETION_NEEDS = ("closure", "momentum", "permission", "none")


QUESTIONS: list[Question] = [

    # -------- Section 1: Extraversion, Openness --------
    Question("Q4", "I come alive in lively, crowded places.", 0),
    Question("Q5", "I enjoy striking up conversations with strangers while travelling.", 0),
    Question("Q6", "Group activities energise me more than they tire me.", 0),
    Question("Q7", "After a day around people I need long stretches alone.", 0),
    Question("Q8", "I seek out food, customs and ideas that are unfamiliar to me.", 0),
    Question("Q9", "Art, architecture and history can move me deeply.", 0),
    Question("Q10", "I like trips that change how I see the world.", 0),
    Question("Q11", "I prefer places that feel familiar and predictable.", 0),

    # -------- Section 2: Conscientiousness, Agreeableness --------
    Question("Q12", "I plan my trips down to the hour.", 1),
    Question("Q13", "I research a destination thoroughly before I go.", 1),
    Question("Q14", "I keep bookings and documents carefully organised.", 1),
    Question("Q15", "I'm happy to arrive somewhere with nothing booked.", 1),
    Question("Q16", "I adapt easily to what my travel companions want.", 1),
    Question("Q17", "I go out of my way to help fellow travellers.", 1),
    Question("Q18", "I trust locals and strangers fairly quickly.", 1),
    Question("Q19", "Travel companions often frustrate me.", 1),

    # -------- Section 3: Emotional Stability, Spontaneity --------
    Question("Q20", "I stay calm when flights are delayed or plans fall apart.", 2),
    Question("Q21", "I bounce back quickly from a bad travel day.", 2),
    Question("Q22", "Small setbacks can ruin my mood for the whole day.", 2),
    Question("Q23", "I worry a lot about what could go wrong on a trip.", 2),
    Question("Q24", "I love changing plans on a whim.", 2),
    Question("Q25", "Some of my best memories came from unplanned detours.", 2),
    Question("Q26", "I'm comfortable not knowing where I'll sleep tomorrow.", 2),
    Question("Q27", "An itinerary change makes me uneasy.", 2),

    # -------- Section 4: Adventure, Adaptation, Elements --------
    Question("Q28", "I'm drawn to physically demanding experiences.", 3),
    Question("Q29", "A little risk makes a trip feel worthwhile.", 3),
    Question("Q30", "I prefer safe, well-trodden routes.", 3),
    Question("Q31", "I sleep well in basic or unusual accommodation.", 3),
    Question("Q32", "Heat, cold and altitude don't bother me much.", 3),
    Question("Q33", "Unfamiliar climates and food make me uncomfortable.", 3),
    Question(
        "Q34",
        "Rank these landscapes from most to least resonant.",
        3,
        kind=RANKED_LIST,
        options=ELEMENT_TOKENS,
    ),

    # -------- Section 5: Inner Compass --------
    Question(
        "Q35",
        "How strongly do you want this trip to bring you each of these?",
        4,
        kind=SUB_SLIDERS,
        options=MOTIVATION_FIELDS,
    ),
    Question(
        "Q45",
        "How much are you currently carrying each of these?",
        4,
        kind=SUB_SLIDERS,
        options=BURDEN_FIELDS,
    ),

    # -------- Section 6: Life Context --------
    Question("Q43", "Which best describes your current life phase?", 5, kind=SINGLE_SELECT, options=LIFE_PHASES),
    Question("Q44", "What shift are you hoping this trip creates?", 5, kind=SINGLE_SELECT, options=SHIFTS_DESIRED),
    Question("Q46", "Is there something this trip needs to complete for you?", 5, kind=SINGLE_SELECT, options=COMPLETION_NEEDS),

    # -------- Section 7: Travel Style --------
    Question("Q47", "I want my stay to feel polished and seamless.", 6),
    Question("Q48", "I prefer raw, authentic places over curated ones.", 6),
    Question("Q49", "Five-star service is part of what makes a trip special.", 6),
    Question("Q50", "I'd rather see a place unfiltered, rough edges included.", 6),
    Question("Q51", "I like days packed with activities.", 6),
    Question("Q52", "I want long unhurried mornings with nothing scheduled.", 6),
    Question("Q53", "I'd rather see a lot than go deep on a little.", 6),

    # -------- Section 8: Sensory --------
    Question(
        "Q54",
        "Rank what you most want your senses to feast on.",
        7,
        kind=RANKED_LIST,
        options=SENSORY_TOKENS,
    ),
]

QUESTIONS_BY_ID = {q.id: q for q in QUESTIONS}


def questions_in_section(section: int) -> list[Question]:
    return [q for q in QUESTIONS if q.section == section]
