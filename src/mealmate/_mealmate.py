from typing import Any, Optional

from dotenv import load_dotenv

from ._config import Config, resolve_config
from ._services import (
    ApiClient,
    ChefService,
    DietPlanningService,
    GroceryService,
    IngredientDetectionService,
    PantryService,
    RecipeGenerationService,
    SubscriptionService,
)
from ._utils import IdentityProvider, StaticTokenProvider, setup_logging

load_dotenv()


class MealMate:
    """
    Entry point to the MealMate backend: diet plans, pantry, groceries,
    recipe generation, subscriptions, ingredient detection and chef content.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        identity: Optional[IdentityProvider] = None,
        ingredient_detection_url: Optional[str] = None,
        timeout: Optional[float] = None,
        strict_serialization: bool = False,
        coalesce_refresh: bool = False,
        debug: bool = False,
    ) -> None:
        """
        Initialize the MealMate client.

        Args:
            base_url (Optional[str]): The API base URL. If not provided, it is read from
                the `MEALMATE_API_URL` environment variable, falling back to
                `http://localhost:5000/api`.
            identity (Optional[IdentityProvider]): Source of the user's ID tokens. If not
                provided, a token is read from the `MEALMATE_ID_TOKEN` environment variable.
            ingredient_detection_url (Optional[str]): Base URL of the ingredient detection API.
            timeout (Optional[float]): Default request timeout in seconds.
            strict_serialization (bool): Raise instead of sending a request whose JSON
                body cannot be serialized.
            coalesce_refresh (bool): Share one token refresh between concurrent 401s.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        self._config: Config = resolve_config(
            base_url,
            ingredient_detection_url,
            timeout,
            strict_serialization=strict_serialization,
            coalesce_refresh=coalesce_refresh,
        )
        setup_logging(debug)

        self._identity = identity or StaticTokenProvider.from_env()
        self._api_client = ApiClient(self._config, self._identity)
        self._detection_client = ApiClient(
            self._config,
            self._identity,
            base_url=self._config.ingredient_detection_url,
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def api_client(self) -> ApiClient:
        """
        Low-level client for making direct authenticated requests to the API.
        """
        return self._api_client

    @property
    def diet_planning(self) -> DietPlanningService:
        """
        AI-generated diet plans, daily meals, water intake and progress.
        """
        return DietPlanningService(self._api_client)

    @property
    def pantry(self) -> PantryService:
        return PantryService(self._api_client)

    @property
    def grocery(self) -> GroceryService:
        return GroceryService(self._api_client)

    @property
    def recipe_generation(self) -> RecipeGenerationService:
        """
        AI recipe generation from pantry contents and preferences.
        """
        return RecipeGenerationService(self._api_client)

    @property
    def subscription(self) -> SubscriptionService:
        return SubscriptionService(self._api_client)

    @property
    def ingredient_detection(self) -> IngredientDetectionService:
        """
        Ingredient detection from photos. Uses the separate detection API.
        """
        return IngredientDetectionService(self._detection_client)

    @property
    def chef(self) -> ChefService:
        """
        Chef-authored recipes and courses, and public listings of them.
        """
        return ChefService(self._api_client)

    async def aclose(self) -> None:
        await self._api_client.aclose()
        await self._detection_client.aclose()

    async def __aenter__(self) -> "MealMate":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
