"""
Questionnaire wizard state.

A session walks the respondent through the sections in order. Answers are
validated as they come in; a section can only be left forwards once all of
its required questions are answered, and submitting freezes the answers
into an immutable RawResponse snapshot for scoring.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from questionnaires.answers import Answer, AnswerError, coerce_answer
from questionnaires.questions import QUESTIONS_BY_ID, SECTION_TITLES, questions_in_section

SUBMITTED = "submitted"


class SessionSubmittedError(RuntimeError):
    pass


class SectionIncompleteError(ValueError):
    def __init__(self, section: int, missing: list[str]):
        self.section = section
        self.missing = missing
        super().__init__(f"Section {section + 1} is missing: {', '.join(missing)}")


class QuestionnaireSession:

    def __init__(self, respondent_id: Optional[str] = None, section_count: int = len(SECTION_TITLES)):
        self.respondent_id = respondent_id
        self.section_count = section_count
        self.state = 0
        self._answers: dict[str, Answer] = {}
        self._snapshot: Optional[Mapping] = None

    @property
    def submitted(self) -> bool:
        return self.state == SUBMITTED

    @property
    def section(self) -> Optional[int]:
        return None if self.submitted else self.state

    def _ensure_open(self):
        if self.submitted:
            raise SessionSubmittedError("Questionnaire has already been submitted")

    def answer(self, question_id: str, value) -> Answer:
        self._ensure_open()

        question = QUESTIONS_BY_ID.get(question_id)
        if question is None:
            raise AnswerError(f"Unknown question: {question_id}")

        typed = coerce_answer(question, value)
        self._answers[question_id] = typed
        return typed

    def missing_in_section(self, section: Optional[int] = None) -> list[str]:
        section = self.state if section is None else section
        if section == SUBMITTED:
            return []
        return [
            q.id for q in questions_in_section(section)
            if q.required and q.id not in self._answers
        ]

    def advance(self):
        """Move to the next section, or to submitted from the last one."""
        self._ensure_open()

        missing = self.missing_in_section()
        if missing:
            raise SectionIncompleteError(self.state, missing)

        if self.state + 1 >= self.section_count:
            self.submit()
        else:
            self.state += 1

    def back(self):
        self._ensure_open()
        if self.state > 0:
            self.state -= 1

    def progress(self) -> float:
        required = [
            q.id for section in range(self.section_count)
            for q in questions_in_section(section) if q.required
        ]
        if not required:
            return 1.0
        answered = sum(1 for qid in required if qid in self._answers)
        return answered / len(required)

    def raw_answers(self) -> dict:
        return {qid: answer.raw() for qid, answer in self._answers.items()}

    def submit(self) -> Mapping:
        """Freeze the answers. Calling again returns the same snapshot."""
        if self._snapshot is not None:
            return self._snapshot

        for section in range(self.section_count):
            missing = self.missing_in_section(section)
            if missing:
                raise SectionIncompleteError(section, missing)

        self._snapshot = MappingProxyType(self.raw_answers())
        self.state = SUBMITTED
        return self._snapshot

    # --------------------------------------------------
    # Persistence (the frontend keeps this in session storage)
    # --------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "respondent_id": self.respondent_id,
            "state": self.state,
            "answers": self.raw_answers(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuestionnaireSession":
        session = cls(respondent_id=data.get("respondent_id"))

        for qid, value in (data.get("answers") or {}).items():
            session.answer(qid, value)

        state = data.get("state", 0)
        if state == SUBMITTED:
            session.submit()
        elif isinstance(state, int) and 0 <= state < session.section_count:
            session.state = state

        return session
