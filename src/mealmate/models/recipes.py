from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeIngredient(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = None
    name: str
    amount: Optional[str] = None
    unit: Optional[str] = None
    notes: Optional[str] = None


class RecipeInstruction(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = None
    step: int
    instruction: str
    duration: Optional[Any] = None
    temperature: Optional[str] = None
    tips: Optional[str] = None


class NutritionInfo(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    fiber: Optional[float] = None
    vitamins: Optional[Dict[str, float]] = None
    minerals: Optional[Dict[str, float]] = None


class IngredientSubstitution(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    original: str
    substitute: str
    ratio: Optional[str] = None
    notes: Optional[str] = None


class GeneratedRecipe(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = None
    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    cook_time: Optional[int] = Field(default=None, alias="cookTime")
    prep_time: Optional[int] = Field(default=None, alias="prepTime")
    servings: Optional[int] = None
    difficulty: Optional[str] = None
    cuisine: Optional[str] = None
    category: Optional[str] = None
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    instructions: List[RecipeInstruction] = Field(default_factory=list)
    nutrition_info: Optional[NutritionInfo] = Field(default=None, alias="nutritionInfo")
    tips: List[str] = Field(default_factory=list)
    substitutions: List[IngredientSubstitution] = Field(default_factory=list)


class RecipeFilters(BaseModel):
    """Filters picked on the recipe generation screen."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    cuisines: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    dietary_preferences: List[str] = Field(default_factory=list, alias="dietaryPreferences")
    meal_time: str = Field(default="", alias="mealTime")
    servings: int
    cooking_time: int = Field(alias="cookingTime")
    ingredients: List[str] = Field(default_factory=list)
    difficulty: Literal["Easy", "Medium", "Hard", "Any"] = "Any"


class RecipeGenerationRequest(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    portion_size: int = Field(alias="portionSize")
    cooking_time_limit: int = Field(alias="cookingTimeLimit")
    dietary_toggle: bool = Field(alias="dietaryToggle")
    dietary_preferences: List[str] = Field(default_factory=list, alias="dietaryPreferences")
    cuisine: str = ""
    food_category: str = Field(default="", alias="foodCategory")
    meal_time: str = Field(default="", alias="mealTime")
    recipe_difficulty: str = Field(alias="recipeDifficulty")
    ingredient_override: Optional[List[str]] = Field(default=None, alias="ingredientOverride")
    additional_requirements: Optional[str] = Field(
        default=None, alias="additionalRequirements"
    )


class PantryAnalysis(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    from_pantry: List[str] = Field(default_factory=list, alias="fromPantry")
    missing: List[str] = Field(default_factory=list)
    utilization_rate: Optional[float] = Field(default=None, alias="utilizationRate")
    match_percentage: Optional[float] = Field(default=None, alias="matchPercentage")


class RecipeGenerationResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    recipe: GeneratedRecipe
    pantry_analysis: Optional[PantryAnalysis] = Field(default=None, alias="pantryAnalysis")
    missing_ingredients: List[str] = Field(default_factory=list, alias="missingIngredients")
    substitutions: List[IngredientSubstitution] = Field(default_factory=list)
    adaptation_notes: Dict[str, Any] = Field(default_factory=dict, alias="adaptationNotes")
    settings: Dict[str, Any] = Field(default_factory=dict)
    sufficiency_warning: Optional[str] = Field(default=None, alias="sufficiencyWarning")


class RecipesResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    recipes: List[GeneratedRecipe] = Field(default_factory=list)


class SubstitutionAlternatives(BaseModel):
    original: str
    alternatives: List[str] = Field(default_factory=list)


class SubstitutionsResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    substitutions: List[SubstitutionAlternatives] = Field(default_factory=list)


class AdjustedRecipeResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    adjusted_recipe: GeneratedRecipe = Field(alias="adjustedRecipe")


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
