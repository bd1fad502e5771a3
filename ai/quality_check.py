"""
Deterministic assessment quality checks.
No LLM calls, only statistical analysis of slider answer patterns.
"""
from collections import Counter
from statistics import stdev, variance
from typing import Dict, List, Mapping

from questionnaires.questions import QUESTIONS, SLIDER

# stdev thresholds on the 0-100 slider scale
LOW_DIFFERENTIATION_STDEV = 8.0
MODERATE_DIFFERENTIATION_STDEV = 12.0

STRAIGHT_LINE_RATIO = 0.45
LIMITED_DISTINCT_VALUES = 3

SLIDER_SECTIONS: Dict[str, int] = {q.id: q.section for q in QUESTIONS if q.kind == SLIDER}


def _slider_values(answers: Mapping) -> Dict[str, float]:
    values = {}
    for qid, value in answers.items():
        if qid not in SLIDER_SECTIONS:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        values[qid] = float(value)
    return values


def check_assessment_quality(answers: Mapping) -> dict:
    """
    Analyse slider answers for suspicious patterns.

    Returns:
        valid (bool): whether the assessment can be used
        confidence (str): "high", "medium", or "low"
        flags (list[str]): detected issues
        straight_line_ratio (float): fraction of most common answer
        variance (float): variance of answers
    """
    flags: List[str] = []
    sliders = _slider_values(answers or {})
    values = list(sliders.values())

    if not values:
        return {
            "valid": False,
            "confidence": "low",
            "flags": ["no_answers"],
            "straight_line_ratio": 0.0,
            "variance": 0.0,
        }

    counts = Counter(values)
    most_common_count = counts.most_common(1)[0][1]
    straight_line_ratio = most_common_count / len(values)
    distinct_values = len(counts)
    answer_variance = variance(values) if len(values) >= 2 else 0.0
    answer_stdev = stdev(values) if len(values) >= 2 else 0.0

    # ── Flag detection (first match wins) ─────────────────────────

    if distinct_values == 1:
        flags.append("all_identical")

    elif answer_stdev < LOW_DIFFERENTIATION_STDEV:
        flags.append("low_differentiation")

    elif straight_line_ratio >= STRAIGHT_LINE_RATIO:
        flags.append("moderate_straight_lining")

    elif distinct_values <= LIMITED_DISTINCT_VALUES:
        flags.append("limited_differentiation")

    elif answer_stdev < MODERATE_DIFFERENTIATION_STDEV:
        flags.append("moderate_low_differentiation")

    # ── Section straight-lining (additional flag) ─────────────────
    sections: Dict[int, List[float]] = {}
    for qid, val in sliders.items():
        sections.setdefault(SLIDER_SECTIONS[qid], []).append(val)

    for section in sorted(sections):
        vals = sections[section]
        if len(vals) > 1 and len(set(vals)) == 1:
            flags.append(f"section_straight_line_{section + 1}")

    # ── Determine confidence level ────────────────────────────────
    low_flags = {"all_identical", "low_differentiation"}
    medium_flags = {"moderate_straight_lining", "limited_differentiation", "moderate_low_differentiation"}

    if any(f in low_flags for f in flags):
        confidence = "low"
        valid = "all_identical" not in flags
    elif any(f in medium_flags for f in flags):
        confidence = "medium"
        valid = True
    elif any(f.startswith("section_straight_line") for f in flags):
        confidence = "medium"
        valid = True
    else:
        confidence = "high"
        valid = True

    return {
        "valid": valid,
        "confidence": confidence,
        "flags": flags,
        "straight_line_ratio": round(straight_line_ratio, 3),
        "variance": round(answer_variance, 3),
    }
