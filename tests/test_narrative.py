"""
Narrative and explanation text. No LLM is ever called: keys are unset
by the autouse fixture, and the model calls are replaced where a test
needs them.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

import ai.narrative as narrative
import config
from ai.llm_client import _strip_fences
from core.profile import SoulPrintProfile
from explanation.explanation_llm import ExplanationEngine
from inference.answer_converter import compute_traits
from models.match_result import MatchResult


class TestHeadlineAndTagline:

    def test_tribe_headline(self, adventurer_answers):
        assert narrative.generate_headline(compute_traits(adventurer_answers)) == "The Hunters"

    def test_headline_without_tribe(self):
        assert narrative.generate_headline(SoulPrintProfile()) == "The Curious Explorer"

    def test_tagline_quiet(self, restorative_answers):
        profile = compute_traits(restorative_answers)
        assert narrative.generate_tagline(profile) == "Seeking beauty in quiet spaces"

    def test_tagline_bold_and_social(self, adventurer_answers):
        profile = compute_traits(adventurer_answers)
        assert narrative.generate_tagline(profile) == "Chasing horizons with kindred spirits"

    def test_tagline_middle(self, neutral_answers):
        profile = compute_traits(neutral_answers)
        assert narrative.generate_tagline(profile) == "Seeking transformation through fire"


class TestNarrative:

    def test_prompt_mentions_profile(self, adventurer_answers):
        prompt = narrative.build_prompt("Ana", compute_traits(adventurer_answers))
        assert "for Ana" in prompt
        assert "E=85.0" in prompt
        assert "Dominant=fire" in prompt
        assert "Nature Immersion" in prompt

    def test_template_narrative(self, restorative_answers):
        text = narrative.template_narrative(compute_traits(restorative_answers))
        assert text.startswith("You are drawn to restorative and calming travel experiences.")
        assert "Wellness & Spa and Nature Immersion" in text
        assert "slow and unhurried" in text

    @pytest.mark.asyncio
    async def test_template_when_no_key(self, neutral_answers):
        result = await narrative.generate_soulprint_narrative("Ana", compute_traits(neutral_answers))
        assert result["model_used"] == narrative.TEMPLATE_MODEL
        assert result["soulprint_summary"].startswith("You are drawn to")

    @pytest.mark.asyncio
    async def test_llm_text_used(self, monkeypatch, neutral_answers):
        monkeypatch.setattr(config, "GROQ_API_KEY", "test-key")
        monkeypatch.setattr(narrative, "generate_text", AsyncMock(return_value="  A story.  "))
        result = await narrative.generate_soulprint_narrative("Ana", compute_traits(neutral_answers))
        assert result["soulprint_summary"] == "A story."
        assert result["model_used"] == config.NARRATIVE_MODEL

    @pytest.mark.asyncio
    async def test_empty_llm_text_falls_back(self, monkeypatch, neutral_answers):
        monkeypatch.setattr(config, "GROQ_API_KEY", "test-key")
        monkeypatch.setattr(narrative, "generate_text", AsyncMock(return_value=""))
        result = await narrative.generate_soulprint_narrative("Ana", compute_traits(neutral_answers))
        assert result["model_used"] == narrative.TEMPLATE_MODEL

    def test_strip_fences(self):
        assert _strip_fences('```json\n{"a": 1}\n```') == '{"a": 1}'


class TestExplanationEngine:

    @pytest.fixture
    def match(self):
        return MatchResult(
            destination_id="kyoto",
            destination_name="Kyoto",
            fit_score=82.0,
            breakdown={"cultural": 95.0, "wellness": 40.0},
            why_it_fits=["Kyoto's depth of culture and history is an exceptional match."],
            tension_note="Worth knowing: Kyoto has a thin wellness offering.",
        )

    def test_template_without_key(self, match):
        text = ExplanationEngine().explain_match({}, match)
        assert text == " ".join(match.why_it_fits + [match.tension_note])

    def test_llm_rewrite(self, match):
        client = MagicMock()
        client.chat.completions.create.return_value.choices = [MagicMock(message=MagicMock(content="Rewritten."))]
        assert ExplanationEngine(client=client).explain_match({"tribe": "Mixed"}, match) == "Rewritten."

    def test_llm_failure_falls_back(self, match):
        client = MagicMock()
        client.chat.completions.create.side_effect = OpenAIError("boom")
        text = ExplanationEngine(client=client).explain_match({}, match)
        assert text == ExplanationEngine.template_text(match)
