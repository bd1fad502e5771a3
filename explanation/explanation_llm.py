import json
import logging
from typing import Any, Dict, Optional

from openai import OpenAI, OpenAIError

import config
from models.match_result import MatchResult
from explanation.templates import DIMENSION_LABELS, score_band

logger = logging.getLogger(__name__)


class ExplanationEngine:
    """
    Optional LLM rewrite of a match explanation.

    Responsibilities:
    - Build a grounded explanation input from the deterministic match
    - Ask the model to rephrase it, without rescoring anything
    - Fall back to the template text whenever the model is unavailable
    """

    def __init__(self, model: str = config.EXPLANATION_MODEL, client: Optional[OpenAI] = None):
        self.model = model
        self._client = client

    @property
    def client(self) -> Optional[OpenAI]:
        if self._client is None and config.OPENAI_API_KEY:
            self._client = OpenAI(api_key=config.OPENAI_API_KEY)
        return self._client

    # --------------------------------------------------
    # Public API
    # --------------------------------------------------

    def explain_match(self, traveler_labels: Dict[str, Any], match: MatchResult) -> str:
        """
        Human-readable explanation for a single match.
        Returns the deterministic text if no model is configured or the call fails.
        """
        fallback = self.template_text(match)
        if self.client is None:
            return fallback

        prompt = self._build_prompt(self._build_explanation_input(traveler_labels, match))
        try:
            text = self._call_llm(prompt)
        except OpenAIError as e:
            logger.warning("[Explain] OpenAI call failed for %s: %s", match.destination_id, e)
            return fallback

        return text.strip() or fallback

    @staticmethod
    def template_text(match: MatchResult) -> str:
        parts = list(match.why_it_fits)
        if match.tension_note:
            parts.append(match.tension_note)
        return " ".join(parts)

    # --------------------------------------------------
    # Explanation input construction
    # --------------------------------------------------

    def _build_explanation_input(  # noqa
        self,
        traveler_labels: Dict[str, Any],
        match: MatchResult,
    ) -> Dict[str, Any]:
        """
        Canonical explanation input.

        Scores are passed as bands, never raw numbers.
        """
        return {
            "destination": match.destination_name,
            "overall": score_band(match.fit_score),
            "dimensions": {
                DIMENSION_LABELS.get(name, name): score_band(value)
                for name, value in match.breakdown.items()
            },
            "traveler": {
                key: traveler_labels.get(key)
                for key in ("dominant_element", "top_motivation_1", "top_sensory_1", "tribe")
            },
            "why_it_fits": match.why_it_fits,
            "honest_note": match.tension_note,
        }

    # --------------------------------------------------
    # Prompt construction
    # --------------------------------------------------

    def _build_prompt(self, explanation_input: Dict[str, Any]) -> str:  # noqa
        return f"""
You are an explanation engine for a travel destination matching system.

Rewrite the explanation below as one short, warm paragraph.

Rules you must follow:
- Do NOT rescore or reinterpret the data.
- Do NOT recommend other destinations.
- Do NOT mention raw numerical data.
- Do NOT use markdown or text-formatting such as bolding.
- Keep the honest note; do not soften it away.

Here is the factual data you must rely on:

{json.dumps(explanation_input, indent=2)}
""".strip()

    # --------------------------------------------------
    # OpenAI call
    # --------------------------------------------------

    def _call_llm(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[  # noqa
                {
                    "role": "system",
                    "content": "You explain system outputs. You do not make decisions.",
                },
                {
                    "role": "user",
                    "content": prompt,
                },
            ],
            temperature=0.3,
        )

        return response.choices[0].message.content or ""
