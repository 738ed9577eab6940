"""Google Gemini suggestion generator.

Calls a Gemini chat model through langchain-google-genai and parses its
JSON answer into a SuggestionResult.
"""

import logging
from typing import Any, Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import JsonOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.exceptions import ConfigurationError

from .exceptions import SuggestionUnavailableError
from .interfaces import ISuggestionGenerator
from .models import SuggestionPrompt, SuggestionResult
from .prompt import SYSTEM_PROMPT, render_prompt

logger = logging.getLogger(__name__)


def _message_text(content: Any) -> str:
    """Flatten message content, which may be a string or a list of parts."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GeminiSuggestionGenerator(ISuggestionGenerator):
    """Suggestion generator backed by a Gemini chat model.

    The chat client is created on first use, so a missing API key only
    fails the first suggestion request, not application startup.
    """

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", temperature: float = 0.7):
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._llm: Optional[ChatGoogleGenerativeAI] = None
        self._parser = JsonOutputParser(pydantic_object=SuggestionResult)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GeminiSuggestionGenerator":
        settings = settings or get_settings()
        return cls(
            api_key=settings.google_api_key,
            model=settings.suggestion_model,
            temperature=settings.suggestion_temperature,
        )

    def _get_llm(self) -> ChatGoogleGenerativeAI:
        if self._llm is None:
            if not self._api_key:
                raise ConfigurationError(
                    "GOOGLE_API_KEY",
                    "Google AI API key is required. Set the GOOGLE_API_KEY environment variable.",
                )
            self._llm = ChatGoogleGenerativeAI(
                model=self._model,
                google_api_key=self._api_key,
                temperature=self._temperature,
            )
        return self._llm

    async def generate(self, prompt: SuggestionPrompt) -> SuggestionResult:
        """Ask the model for suggestions.

        Raises:
            ConfigurationError: If no API key is configured
            SuggestionUnavailableError: If the call fails or the answer is unusable
        """
        llm = self._get_llm()

        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=f"{render_prompt(prompt)}\n\n{self._parser.get_format_instructions()}"),
        ]

        try:
            response = await llm.ainvoke(messages)
        except Exception as e:
            logger.warning(f"Suggestion model call failed: {e}")
            raise SuggestionUnavailableError(original_error=str(e)) from e

        try:
            parsed = self._parser.parse(_message_text(response.content))
            return SuggestionResult.model_validate(parsed)
        except (OutputParserException, PydanticValidationError) as e:
            logger.warning(f"Unparseable suggestion response: {e}")
            raise SuggestionUnavailableError(
                "Suggestion model returned an unusable response",
                original_error=str(e),
            ) from e
