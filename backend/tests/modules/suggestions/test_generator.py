"""Tests for the Gemini suggestion generator."""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from modules.suggestions.exceptions import SuggestionUnavailableError
from modules.suggestions.generator import GeminiSuggestionGenerator, _message_text
from modules.suggestions.interfaces import ISuggestionGenerator
from modules.suggestions.models import Difficulty, SuggestionPrompt
from modules.suggestions.prompt import SYSTEM_PROMPT
from shared.config import Settings
from shared.exceptions import ConfigurationError

VALID_RESPONSE = {
    "suggestions": [
        {
            "name": "Egg Fried Rice",
            "description": "Quick fried rice.",
            "ingredients": ["rice", "egg"],
            "estimated_time_minutes": 15,
            "difficulty": "easy",
            "estimated_calories": 450,
            "uses_expiring": ["egg"],
        }
    ],
    "new_likes": ["egg fried rice"],
    "new_dislikes": [],
}


@pytest.fixture
def prompt() -> SuggestionPrompt:
    return SuggestionPrompt(ingredients=["rice", "egg"], expiring_soon=["egg"])


@pytest.fixture
def mock_llm():
    llm = MagicMock()
    llm.ainvoke = AsyncMock()
    return llm


@pytest.fixture
def generator(mock_llm) -> GeminiSuggestionGenerator:
    generator = GeminiSuggestionGenerator(api_key="test-key")
    generator._llm = mock_llm
    return generator


class TestGenerate:
    def test_satisfies_protocol(self, generator):
        assert isinstance(generator, ISuggestionGenerator)

    @pytest.mark.asyncio
    async def test_parses_json_response(self, generator, mock_llm, prompt):
        mock_llm.ainvoke.return_value = AIMessage(content=json.dumps(VALID_RESPONSE))

        result = await generator.generate(prompt)

        assert result.suggestions[0].name == "Egg Fried Rice"
        assert result.suggestions[0].difficulty == Difficulty.EASY
        assert result.new_likes == ["egg fried rice"]

    @pytest.mark.asyncio
    async def test_parses_fenced_json(self, generator, mock_llm, prompt):
        mock_llm.ainvoke.return_value = AIMessage(content=f"```json\n{json.dumps(VALID_RESPONSE)}\n```")

        result = await generator.generate(prompt)

        assert len(result.suggestions) == 1

    @pytest.mark.asyncio
    async def test_sends_system_and_user_messages(self, generator, mock_llm, prompt):
        mock_llm.ainvoke.return_value = AIMessage(content=json.dumps(VALID_RESPONSE))

        await generator.generate(prompt)

        messages = mock_llm.ainvoke.call_args[0][0]
        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == SYSTEM_PROMPT
        assert isinstance(messages[1], HumanMessage)
        assert "Available ingredients: rice, egg" in messages[1].content

    @pytest.mark.asyncio
    async def test_unparseable_response(self, generator, mock_llm, prompt):
        mock_llm.ainvoke.return_value = AIMessage(content="Sorry, I can't help with that.")

        with pytest.raises(SuggestionUnavailableError):
            await generator.generate(prompt)

    @pytest.mark.asyncio
    async def test_schema_mismatch(self, generator, mock_llm, prompt):
        mock_llm.ainvoke.return_value = AIMessage(content=json.dumps({"suggestions": []}))

        with pytest.raises(SuggestionUnavailableError):
            await generator.generate(prompt)

    @pytest.mark.asyncio
    async def test_model_call_failure(self, generator, mock_llm, prompt):
        mock_llm.ainvoke.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(SuggestionUnavailableError) as exc_info:
            await generator.generate(prompt)
        assert exc_info.value.details["original_error"] == "quota exceeded"


class TestConfiguration:
    @pytest.mark.asyncio
    async def test_missing_api_key(self, prompt):
        generator = GeminiSuggestionGenerator(api_key="")

        with pytest.raises(ConfigurationError) as exc_info:
            await generator.generate(prompt)
        assert exc_info.value.setting == "GOOGLE_API_KEY"

    @patch("modules.suggestions.generator.ChatGoogleGenerativeAI")
    def test_client_is_created_once(self, mock_chat):
        generator = GeminiSuggestionGenerator(api_key="test-key", model="gemini-2.5-flash", temperature=0.2)

        assert generator._get_llm() is generator._get_llm()
        mock_chat.assert_called_once_with(
            model="gemini-2.5-flash",
            google_api_key="test-key",
            temperature=0.2,
        )

    def test_from_settings(self):
        settings = Settings(_env_file=None, google_api_key="k", suggestion_model="gemini-x", suggestion_temperature=0.1)
        generator = GeminiSuggestionGenerator.from_settings(settings)

        assert generator._api_key == "k"
        assert generator._model == "gemini-x"
        assert generator._temperature == 0.1


class TestMessageText:
    def test_string(self):
        assert _message_text("hello") == "hello"

    def test_content_parts(self):
        parts = [{"type": "text", "text": "{\"a\": "}, {"type": "image_url"}, "1}"]
        assert _message_text(parts) == "{\"a\": 1}"
