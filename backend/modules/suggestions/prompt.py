"""
Prompt assembly for meal suggestions.
"""

from typing import Optional

from modules.inventory.models import PantrySnapshot
from modules.meals.models import Meal
from modules.preferences.models import CaloriePreference, PreferenceRecord

from .models import MealSummary, SuggestMealsRequest, SuggestionPrompt

SYSTEM_PROMPT = """You are a helpful meal planning assistant.
Suggest 3 diverse meals the user can cook with what they have.

Rules:
1. Use primarily the available ingredients; prefer the ones expiring soon.
2. Avoid meals similar to the recent history.
3. Respect the user's likes and never build a meal around a dislike.
4. Match the calorie target when one is given.
5. Keep suggestions practical and easy to make.

From the history (ratings, liked flags, notes) also infer foods or
ingredients the user clearly likes or dislikes that are not already in
their lists. Leave new_likes / new_dislikes empty when unsure."""

CALORIE_RANGES = {
    CaloriePreference.LOW: "low (under 400 kcal per serving)",
    CaloriePreference.MEDIUM: "medium (400-700 kcal per serving)",
    CaloriePreference.HIGH: "high (over 700 kcal per serving)",
}


def build_suggestion_prompt(
    request: SuggestMealsRequest,
    preferences: Optional[PreferenceRecord],
    recent_meals: list[Meal],
    pantry: Optional[PantrySnapshot] = None,
) -> SuggestionPrompt:
    """
    Combine the request, stored preferences and recent history.

    Stored inventory is appended after the ingredients and expiring items
    named in the request.
    """
    stored = pantry or PantrySnapshot()
    calorie = request.calorie_preference or (preferences.calorie_preference if preferences else None)
    return SuggestionPrompt(
        ingredients=list(dict.fromkeys([*request.ingredients.flattened(), *stored.ingredients])),
        expiring_soon=list(dict.fromkeys([*request.expiring_soon, *stored.expiring_soon])),
        likes=list(preferences.likes) if preferences else [],
        dislikes=list(preferences.dislikes) if preferences else [],
        calorie_target=calorie.value if calorie else "unspecified",
        recent_meals=[
            MealSummary(
                meal_name=meal.meal_name,
                date=meal.date,
                rating=meal.rating,
                liked=meal.liked,
                notes=meal.notes,
            )
            for meal in recent_meals
        ],
    )


def _format_meal(meal: MealSummary) -> str:
    line = f"- {meal.meal_name} ({meal.date.date().isoformat()})"
    if meal.rating is not None:
        line += f" - rated {meal.rating}/5"
    if meal.liked is not None:
        line += " - liked" if meal.liked else " - disliked"
    if meal.notes:
        line += f' - notes: "{meal.notes}"'
    return line


def render_prompt(prompt: SuggestionPrompt) -> str:
    """Render the payload as the user message."""
    calorie_text = "unspecified"
    if prompt.calorie_target != "unspecified":
        calorie_text = CALORIE_RANGES[CaloriePreference(prompt.calorie_target)]

    parts = [
        f"Available ingredients: {', '.join(prompt.ingredients) or 'none'}",
        f"Expiring soon: {', '.join(prompt.expiring_soon) or 'none'}",
        f"Likes: {', '.join(prompt.likes) or 'none recorded'}",
        f"Dislikes: {', '.join(prompt.dislikes) or 'none recorded'}",
        f"Calorie target: {calorie_text}",
        "",
        "Recent meals (most recent first):",
    ]
    if prompt.recent_meals:
        parts.extend(_format_meal(m) for m in prompt.recent_meals)
    else:
        parts.append("- none")
    return "\n".join(parts)
