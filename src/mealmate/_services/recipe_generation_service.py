from typing import List, Optional

from .._utils import handle_errors
from ..models import (
    AdjustedRecipeResponse,
    RecipeFilters,
    RecipeGenerationRequest,
    RecipeGenerationResponse,
    RecipesResponse,
    ServiceError,
    SubstitutionsResponse,
    ValidationResult,
)
from ._base_service import BaseService

RECIPE_DIFFICULTIES = ("easy", "medium", "hard", "any")
MAX_PORTION_SIZE = 12
MAX_COOKING_TIME = 300


class RecipeGenerationService(BaseService):
    """Service for AI recipe generation."""

    async def generate_recipe(
        self, request: RecipeGenerationRequest
    ) -> RecipeGenerationResponse:
        """Generate a recipe from the given settings and the user's pantry.

        The backend may answer 200 with ``{"success": false, "error": {...}}``,
        for example when the pantry holds too few ingredients; that envelope is
        raised as a ServiceError carrying the server's message.

        Args:
            request (RecipeGenerationRequest): Portion, time, cuisine and difficulty settings.

        Returns:
            RecipeGenerationResponse: The recipe with pantry analysis and adaptation notes.

        Raises:
            ServiceError: The request failed or the backend rejected it.
        """
        self._logger.debug(
            f"Generating recipe for {request.portion_size} portions, "
            f"difficulty {request.recipe_difficulty}"
        )
        with handle_errors("Failed to generate recipe"):
            response = await self._api.post(
                "/recipe-generation/generate", self._payload(request)
            )

            if not response.get("success"):
                error = response.get("error") or {}
                raise ServiceError(
                    error.get("message") or "Recipe generation failed"
                )

            return RecipeGenerationResponse.model_validate(response)

    async def generate_pantry_based_recipes(
        self,
        pantry_ingredients: List[str],
        dietary_restrictions: Optional[List[str]] = None,
        meal_type: str = "",
        excluded_ingredients: Optional[List[str]] = None,
        max_additional_ingredients: int = 2,
    ) -> RecipesResponse:
        with handle_errors("Failed to generate pantry-based recipes"):
            response = await self._api.post(
                "/recipe-generation/pantry-based",
                {
                    "pantryIngredients": pantry_ingredients,
                    "dietaryRestrictions": dietary_restrictions or [],
                    "mealType": meal_type,
                    "excludedIngredients": excluded_ingredients or [],
                    "maxAdditionalIngredients": max_additional_ingredients,
                },
            )
            return RecipesResponse.model_validate(response)

    async def generate_preference_based_recipes(
        self,
        *,
        cuisines: List[str],
        dietary_restrictions: List[str],
        cooking_time: int,
        difficulty: str,
        meal_type: str,
    ) -> RecipesResponse:
        with handle_errors("Failed to generate preference-based recipes"):
            response = await self._api.post(
                "/recipe-generation/preference-based",
                {
                    "cuisines": cuisines,
                    "dietaryRestrictions": dietary_restrictions,
                    "cookingTime": cooking_time,
                    "difficulty": difficulty,
                    "mealType": meal_type,
                },
            )
            return RecipesResponse.model_validate(response)

    async def get_ingredient_substitutions(
        self,
        ingredients: List[str],
        dietary_restrictions: Optional[List[str]] = None,
    ) -> SubstitutionsResponse:
        with handle_errors("Failed to get ingredient substitutions"):
            response = await self._api.post(
                "/recipe-generation/substitutions",
                {
                    "ingredients": ingredients,
                    "dietaryRestrictions": dietary_restrictions or [],
                },
            )
            return SubstitutionsResponse.model_validate(response)

    async def adjust_recipe_portions(
        self, recipe_id: str, original_servings: int, new_servings: int
    ) -> AdjustedRecipeResponse:
        with handle_errors("Failed to adjust recipe portions"):
            response = await self._api.post(
                "/recipe-generation/adjust-portions",
                {
                    "recipeId": recipe_id,
                    "originalServings": original_servings,
                    "newServings": new_servings,
                },
            )
            return AdjustedRecipeResponse.model_validate(response)

    def build_recipe_request(
        self, filters: RecipeFilters, pantry_ingredients: Optional[List[str]] = None
    ) -> RecipeGenerationRequest:
        """Map screen filters to the backend request format.

        Explicitly selected ingredients take precedence over the pantry.
        """
        return RecipeGenerationRequest(
            portion_size=filters.servings,
            cooking_time_limit=filters.cooking_time,
            dietary_toggle=len(filters.dietary_preferences) > 0,
            dietary_preferences=filters.dietary_preferences,
            cuisine=filters.cuisines[0] if filters.cuisines else "",
            food_category=filters.categories[0] if filters.categories else "main course",
            meal_time=filters.meal_time,
            recipe_difficulty=filters.difficulty.lower(),
            ingredient_override=filters.ingredients or list(pantry_ingredients or []),
        )

    def validate_request(self, request: RecipeGenerationRequest) -> ValidationResult:
        errors: List[str] = []

        if not 0 < request.portion_size <= MAX_PORTION_SIZE:
            errors.append(f"Portion size must be between 1 and {MAX_PORTION_SIZE}")

        if not 0 < request.cooking_time_limit <= MAX_COOKING_TIME:
            errors.append(
                f"Cooking time must be between 1 and {MAX_COOKING_TIME} minutes"
            )

        if request.recipe_difficulty not in RECIPE_DIFFICULTIES:
            errors.append("Recipe difficulty must be easy, medium, hard, or any")

        return ValidationResult(is_valid=not errors, errors=errors)
