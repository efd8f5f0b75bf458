from .api_client import ApiClient
from .chef_service import ChefService
from .diet_planning_service import DietPlanningService
from .grocery_service import GroceryService
from .ingredient_detection_service import IngredientDetectionService
from .pantry_service import PantryService
from .recipe_generation_service import RecipeGenerationService
from .subscription_service import SubscriptionService

__all__ = [
    "ApiClient",
    "ChefService",
    "DietPlanningService",
    "GroceryService",
    "IngredientDetectionService",
    "PantryService",
    "RecipeGenerationService",
    "SubscriptionService",
]
