"""
Typed answers for the questionnaire.

Raw answers arrive from the frontend as loosely-typed JSON. Each question
kind has its own answer type so the session can reject a value of the
wrong shape at the point it is entered, instead of the scoring code having
to probe for it later.
"""
from dataclasses import dataclass
from typing import Union

from questionnaires.questions import (
    Question,
    SLIDER,
    SINGLE_SELECT,
    RANKED_LIST,
    SUB_SLIDERS,
)


class AnswerError(ValueError):
    pass


@dataclass(frozen=True)
class SliderAnswer:
    value: float

    def raw(self):
        return self.value


@dataclass(frozen=True)
class SingleSelectAnswer:
    choice: str

    def raw(self):
        return self.choice


@dataclass(frozen=True)
class RankedAnswer:
    order: tuple

    def raw(self):
        return list(self.order)


@dataclass(frozen=True)
class SubSliderAnswer:
    values: tuple  # ((field, value), ...)

    def raw(self):
        return dict(self.values)


Answer = Union[SliderAnswer, SingleSelectAnswer, RankedAnswer, SubSliderAnswer]


def _slider_value(qid: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AnswerError(f"{qid}: slider answer must be numeric, got {value!r}")
    if not 0 <= value <= 100:
        raise AnswerError(f"{qid}: slider answer must be between 0 and 100, got {value}")
    return float(value)


def parse_ranking(value) -> list[str]:
    """Accept a list of tokens or the legacy comma-separated string."""
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        return []

    return [str(item).strip().lower() for item in items if str(item).strip()]


def coerce_answer(question: Question, value) -> Answer:
    qid = question.id

    if question.kind == SLIDER:
        return SliderAnswer(_slider_value(qid, value))

    if question.kind == SINGLE_SELECT:
        if not isinstance(value, str):
            raise AnswerError(f"{qid}: expected a choice, got {value!r}")
        if question.options and value not in question.options:
            raise AnswerError(f"{qid}: invalid choice {value!r}")
        return SingleSelectAnswer(value)

    if question.kind == RANKED_LIST:
        order = parse_ranking(value)
        if sorted(order) != sorted(question.options) or len(order) != len(question.options):
            raise AnswerError(
                f"{qid}: ranking must contain each of {', '.join(question.options)} exactly once"
            )
        return RankedAnswer(tuple(order))

    if question.kind == SUB_SLIDERS:
        if not isinstance(value, dict):
            raise AnswerError(f"{qid}: expected a mapping of {', '.join(question.options)}")
        unknown = set(value) - set(question.options)
        if unknown:
            raise AnswerError(f"{qid}: unknown fields {', '.join(sorted(unknown))}")
        missing = [f for f in question.options if f not in value]
        if missing:
            raise AnswerError(f"{qid}: missing fields {', '.join(missing)}")
        return SubSliderAnswer(tuple(
            (f, _slider_value(f"{qid}.{f}", value[f])) for f in question.options
        ))

    raise AnswerError(f"Unknown answer kind: {question.kind}")
