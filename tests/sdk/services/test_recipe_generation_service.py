import json

import pytest
from pytest_httpx import HTTPXMock

from mealmate._services import ApiClient, RecipeGenerationService
from mealmate.models import RecipeFilters, RecipeGenerationRequest, ServiceError


@pytest.fixture
def service(api_client: ApiClient) -> RecipeGenerationService:
    return RecipeGenerationService(api_client)


@pytest.fixture
def request_model() -> RecipeGenerationRequest:
    return RecipeGenerationRequest(
        portion_size=2,
        cooking_time_limit=30,
        dietary_toggle=False,
        recipe_difficulty="easy",
        cuisine="Italian",
    )


class TestRecipeGenerationService:
    class TestGenerateRecipe:
        @pytest.mark.anyio
        async def test_generate_recipe(
            self,
            httpx_mock: HTTPXMock,
            service: RecipeGenerationService,
            base_url: str,
            request_model: RecipeGenerationRequest,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/generate",
                method="POST",
                json={
                    "success": True,
                    "recipe": {
                        "title": "Pasta al pomodoro",
                        "servings": 2,
                        "ingredients": [{"name": "pasta", "amount": "200", "unit": "g"}],
                        "instructions": [{"step": 1, "instruction": "Boil water"}],
                    },
                    "pantryAnalysis": {"fromPantry": ["pasta"], "missing": ["basil"]},
                    "missingIngredients": ["basil"],
                },
            )

            response = await service.generate_recipe(request_model)

            assert response.recipe.title == "Pasta al pomodoro"
            assert response.pantry_analysis is not None
            assert response.pantry_analysis.from_pantry == ["pasta"]
            assert response.missing_ingredients == ["basil"]

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "portionSize": 2,
                "cookingTimeLimit": 30,
                "dietaryToggle": False,
                "dietaryPreferences": [],
                "cuisine": "Italian",
                "foodCategory": "",
                "mealTime": "",
                "recipeDifficulty": "easy",
            }

        @pytest.mark.anyio
        async def test_unsuccessful_envelope_raises(
            self,
            httpx_mock: HTTPXMock,
            service: RecipeGenerationService,
            base_url: str,
            request_model: RecipeGenerationRequest,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/generate",
                method="POST",
                json={
                    "success": False,
                    "error": {"message": "Not enough ingredients in your pantry"},
                },
            )

            with pytest.raises(ServiceError) as exc_info:
                await service.generate_recipe(request_model)

            assert str(exc_info.value) == "Not enough ingredients in your pantry"

        @pytest.mark.anyio
        async def test_unsuccessful_envelope_without_message(
            self,
            httpx_mock: HTTPXMock,
            service: RecipeGenerationService,
            base_url: str,
            request_model: RecipeGenerationRequest,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/generate",
                method="POST",
                json={"success": False},
            )

            with pytest.raises(ServiceError, match="Recipe generation failed"):
                await service.generate_recipe(request_model)

        @pytest.mark.anyio
        async def test_non_object_response_is_wrapped(
            self,
            httpx_mock: HTTPXMock,
            service: RecipeGenerationService,
            base_url: str,
            request_model: RecipeGenerationRequest,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/generate",
                method="POST",
                json=["not", "an", "object"],
            )

            with pytest.raises(ServiceError, match="Failed to generate recipe"):
                await service.generate_recipe(request_model)

        @pytest.mark.anyio
        async def test_malformed_recipe_is_wrapped(
            self,
            httpx_mock: HTTPXMock,
            service: RecipeGenerationService,
            base_url: str,
            request_model: RecipeGenerationRequest,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/generate",
                method="POST",
                json={"success": True, "recipe": {"servings": 2}},
            )

            with pytest.raises(ServiceError, match="Failed to generate recipe"):
                await service.generate_recipe(request_model)

    class TestOtherGenerators:
        @pytest.mark.anyio
        async def test_generate_pantry_based_recipes(
            self, httpx_mock: HTTPXMock, service: RecipeGenerationService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/pantry-based",
                method="POST",
                json={"success": True, "recipes": [{"title": "Omelette"}]},
            )

            response = await service.generate_pantry_based_recipes(
                ["egg", "cheese"], meal_type="breakfast"
            )

            assert [r.title for r in response.recipes] == ["Omelette"]
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "pantryIngredients": ["egg", "cheese"],
                "dietaryRestrictions": [],
                "mealType": "breakfast",
                "excludedIngredients": [],
                "maxAdditionalIngredients": 2,
            }

        @pytest.mark.anyio
        async def test_generate_preference_based_recipes(
            self, httpx_mock: HTTPXMock, service: RecipeGenerationService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/preference-based",
                method="POST",
                json={"success": True, "recipes": []},
            )

            await service.generate_preference_based_recipes(
                cuisines=["Thai"],
                dietary_restrictions=["vegan"],
                cooking_time=45,
                difficulty="medium",
                meal_type="dinner",
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content)["cookingTime"] == 45

        @pytest.mark.anyio
        async def test_get_ingredient_substitutions(
            self, httpx_mock: HTTPXMock, service: RecipeGenerationService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/substitutions",
                method="POST",
                json={
                    "success": True,
                    "substitutions": [
                        {"original": "butter", "alternatives": ["olive oil"]}
                    ],
                },
            )

            response = await service.get_ingredient_substitutions(["butter"], ["vegan"])

            assert response.substitutions[0].alternatives == ["olive oil"]

        @pytest.mark.anyio
        async def test_adjust_recipe_portions(
            self, httpx_mock: HTTPXMock, service: RecipeGenerationService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/recipe-generation/adjust-portions",
                method="POST",
                json={
                    "success": True,
                    "adjustedRecipe": {"title": "Pasta", "servings": 6},
                },
            )

            response = await service.adjust_recipe_portions("r1", 2, 6)

            assert response.adjusted_recipe.servings == 6
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "recipeId": "r1",
                "originalServings": 2,
                "newServings": 6,
            }

    class TestRequestBuilding:
        def test_build_recipe_request(self, service: RecipeGenerationService) -> None:
            filters = RecipeFilters(
                cuisines=["Mexican", "Thai"],
                dietary_preferences=["vegetarian"],
                meal_time="dinner",
                servings=4,
                cooking_time=45,
                difficulty="Medium",
            )

            request = service.build_recipe_request(filters, ["beans", "rice"])

            assert request.portion_size == 4
            assert request.cooking_time_limit == 45
            assert request.dietary_toggle is True
            assert request.cuisine == "Mexican"
            assert request.food_category == "main course"
            assert request.recipe_difficulty == "medium"
            assert request.ingredient_override == ["beans", "rice"]

        def test_selected_ingredients_take_precedence(
            self, service: RecipeGenerationService
        ) -> None:
            filters = RecipeFilters(
                servings=2, cooking_time=20, ingredients=["tofu"], categories=["soup"]
            )

            request = service.build_recipe_request(filters, ["beans"])

            assert request.ingredient_override == ["tofu"]
            assert request.food_category == "soup"
            assert request.dietary_toggle is False

        def test_validate_request(
            self,
            service: RecipeGenerationService,
            request_model: RecipeGenerationRequest,
        ) -> None:
            assert service.validate_request(request_model).is_valid is True

        def test_validate_request_collects_errors(
            self, service: RecipeGenerationService
        ) -> None:
            request = RecipeGenerationRequest(
                portion_size=13,
                cooking_time_limit=0,
                dietary_toggle=False,
                recipe_difficulty="extreme",
            )

            result = service.validate_request(request)

            assert result.is_valid is False
            assert len(result.errors) == 3
