"""
Suggestion orchestrator.

Builds the suggestion prompt from the request, the stored pantry, the
user's recent meals and preference record, calls the generator, and
feeds the likes and dislikes it inferred back into the preference ledger.
"""

import logging
from typing import Optional

from modules.inventory.interfaces import IInventoryService
from modules.inventory.models import PantrySnapshot
from modules.meals.interfaces import IMealService
from modules.preferences.interfaces import IPreferenceService
from shared.exceptions import PlatewiseError

from .exceptions import SuggestionUnavailableError
from .interfaces import ISuggestionGenerator, ISuggestionService
from .models import MealSuggestion, SuggestMealsRequest, SuggestionPrompt, SuggestionResult
from .prompt import build_suggestion_prompt

logger = logging.getLogger(__name__)


class SuggestionService(ISuggestionService):
    """
    Implements ISuggestionService.

    Generation and preference feedback form one unit: if generation fails
    nothing is written. Once suggestions exist, a failed feedback merge
    is logged and the suggestions are still returned.
    """

    def __init__(
        self,
        generator: ISuggestionGenerator,
        preferences: IPreferenceService,
        meals: IMealService,
        inventory: Optional[IInventoryService] = None,
        recent_meal_count: int = 10,
    ):
        self._generator = generator
        self._preferences = preferences
        self._meals = meals
        self._inventory = inventory
        self._recent_meal_count = recent_meal_count

    async def suggest(self, user_id: str, request: SuggestMealsRequest) -> list[MealSuggestion]:
        preferences = await self._preferences.get(user_id)

        override = request.calorie_preference
        if override is not None and (preferences is None or preferences.calorie_preference != override):
            preferences = await self._preferences.upsert_explicit(user_id, calorie_preference=override)

        recent_meals = await self._meals.get_recent_meals(user_id, self._recent_meal_count)
        pantry = await self._load_pantry(user_id)
        prompt = build_suggestion_prompt(request, preferences, recent_meals, pantry)

        result = await self._generate(prompt)
        await self._apply_feedback(user_id, result)

        return result.suggestions

    async def _load_pantry(self, user_id: str) -> Optional[PantrySnapshot]:
        if self._inventory is None:
            return None
        try:
            return await self._inventory.get_snapshot(user_id)
        except Exception as e:
            # The request still names the ingredients on hand
            logger.warning(f"Failed to load inventory for user {user_id}: {e}")
            return None

    async def _generate(self, prompt: SuggestionPrompt) -> SuggestionResult:
        try:
            return await self._generator.generate(prompt)
        except PlatewiseError:
            raise
        except Exception as e:
            logger.warning(f"Suggestion generator failed: {e}")
            raise SuggestionUnavailableError(original_error=str(e)) from e

    async def _apply_feedback(self, user_id: str, result: SuggestionResult) -> None:
        if result.new_likes:
            try:
                await self._preferences.merge_likes(user_id, result.new_likes)
            except Exception as e:
                logger.warning(f"Failed to merge inferred likes for user {user_id}: {e}")

        if result.new_dislikes:
            try:
                await self._preferences.merge_dislikes(user_id, result.new_dislikes)
            except Exception as e:
                logger.warning(f"Failed to merge inferred dislikes for user {user_id}: {e}")
