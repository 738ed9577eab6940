"""
Suggestion module interfaces.

ISuggestionGenerator is the opaque generative backend; ISuggestionService
is the orchestrator the API layer calls.
"""

from typing import Protocol, runtime_checkable

from .models import MealSuggestion, SuggestMealsRequest, SuggestionPrompt, SuggestionResult


@runtime_checkable
class ISuggestionGenerator(Protocol):
    """A function from a structured prompt to structured suggestions."""

    async def generate(self, prompt: SuggestionPrompt) -> SuggestionResult:
        """
        Produce meal suggestions.

        Raises:
            SuggestionUnavailableError: If the backend fails or returns unusable output
        """
        ...


@runtime_checkable
class ISuggestionService(Protocol):
    """Interface for the suggestion orchestrator."""

    async def suggest(self, user_id: str, request: SuggestMealsRequest) -> list[MealSuggestion]:
        """
        Suggest meals from the user's ingredients, history and preferences.

        Likes/dislikes inferred by the generator are merged into the
        user's preferences before returning.

        Raises:
            SuggestionUnavailableError: If no suggestions could be produced
        """
        ...
