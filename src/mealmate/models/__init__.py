from .chef import (
    ChefRecipe,
    Course,
    CoursePayload,
    CourseUnit,
    PremiumEligibility,
    RecipePayload,
)
from .diet_planning import (
    DailyPlan,
    DayProgress,
    DietPlan,
    DietPlanRequest,
    DietPlanResponse,
    GenerateMealRecipeRequest,
    GenerateMealRecipeResponse,
    Meal,
    PlanStatistics,
    StatusResponse,
    UpdateMealStatusRequest,
    UpdateWaterIntakeRequest,
)
from .errors import (
    AuthRequiredError,
    DetectionError,
    HttpError,
    MealMateError,
    RetryExhaustedError,
    SerializationError,
    ServiceError,
)
from .grocery import (
    GroceryItem,
    GroceryItemInput,
    GroceryItemResponse,
    GroceryResponse,
    PurchaseItemData,
    PurchaseResponse,
)
from .ingredient_detection import IngredientDetectionResponse, IngredientWithConfidence
from .pantry import (
    CategoriesResponse,
    Category,
    PantryItem,
    PantryItemInput,
    PantryItemResponse,
    PantryResponse,
    PantrySummary,
)
from .recipes import (
    AdjustedRecipeResponse,
    GeneratedRecipe,
    RecipeFilters,
    RecipeGenerationRequest,
    RecipeGenerationResponse,
    RecipesResponse,
    SubstitutionsResponse,
    ValidationResult,
)
from .subscription import (
    CancelSubscriptionResponse,
    PaymentSheetResponse,
    PlansResponse,
    SubscriptionPlan,
    SubscriptionResponse,
)

__all__ = [
    "AdjustedRecipeResponse",
    "AuthRequiredError",
    "CancelSubscriptionResponse",
    "CategoriesResponse",
    "Category",
    "ChefRecipe",
    "Course",
    "CoursePayload",
    "CourseUnit",
    "DailyPlan",
    "DayProgress",
    "DetectionError",
    "DietPlan",
    "DietPlanRequest",
    "DietPlanResponse",
    "GenerateMealRecipeRequest",
    "GenerateMealRecipeResponse",
    "GeneratedRecipe",
    "GroceryItem",
    "GroceryItemInput",
    "GroceryItemResponse",
    "GroceryResponse",
    "HttpError",
    "IngredientDetectionResponse",
    "IngredientWithConfidence",
    "Meal",
    "MealMateError",
    "PantryItem",
    "PantryItemInput",
    "PantryItemResponse",
    "PantryResponse",
    "PantrySummary",
    "PaymentSheetResponse",
    "PlanStatistics",
    "PlansResponse",
    "PremiumEligibility",
    "PurchaseItemData",
    "PurchaseResponse",
    "RecipeFilters",
    "RecipeGenerationRequest",
    "RecipeGenerationResponse",
    "RecipePayload",
    "RecipesResponse",
    "RetryExhaustedError",
    "SerializationError",
    "ServiceError",
    "StatusResponse",
    "SubscriptionPlan",
    "SubscriptionResponse",
    "SubstitutionsResponse",
    "UpdateMealStatusRequest",
    "UpdateWaterIntakeRequest",
    "ValidationResult",
]
