from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .recipes import GeneratedRecipe

GoalType = Literal["maintain", "lose", "gain"]


class DietPlanRequest(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    goal_type: GoalType = Field(alias="goalType")
    target_calories: int = Field(alias="targetCalories")
    duration: Optional[int] = None
    health_conditions: Optional[List[str]] = Field(default=None, alias="healthConditions")
    dietary_preferences: Optional[List[str]] = Field(
        default=None, alias="dietaryPreferences"
    )


class Meal(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    meal_id: str = Field(alias="mealId")
    name: str
    type: str
    time: Optional[str] = None
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0
    completed: bool = False
    has_recipe: bool = Field(default=False, alias="hasRecipe")
    recipe_id: Optional[str] = Field(default=None, alias="recipeId")
    recipe: Optional[GeneratedRecipe] = None


class DailyPlan(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    date: str
    meals: List[Meal] = Field(default_factory=list)
    water_intake: float = Field(default=0, alias="waterIntake")
    total_calories: float = Field(default=0, alias="totalCalories")
    total_protein: float = Field(default=0, alias="totalProtein")
    total_carbs: float = Field(default=0, alias="totalCarbs")
    total_fats: float = Field(default=0, alias="totalFats")


class MacroTargets(BaseModel):
    protein: float = 0
    carbs: float = 0
    fats: float = 0


class DietPlan(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="_id")
    plan_id: str = Field(alias="planId")
    user: Optional[str] = None
    goal_type: GoalType = Field(alias="goalType")
    target_calories: float = Field(alias="targetCalories")
    macro_targets: Optional[MacroTargets] = Field(default=None, alias="macroTargets")
    daily_water_target: Optional[float] = Field(default=None, alias="dailyWaterTarget")
    health_conditions: List[str] = Field(default_factory=list, alias="healthConditions")
    dietary_preferences: List[str] = Field(default_factory=list, alias="dietaryPreferences")
    start_date: datetime = Field(alias="startDate")
    end_date: datetime = Field(alias="endDate")
    duration: int
    daily_plans: List[DailyPlan] = Field(default_factory=list, alias="dailyPlans")
    is_active: bool = Field(default=True, alias="isActive")
    generated_by: Optional[str] = Field(default=None, alias="generatedBy")


class DietPlanResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    plan: DietPlan
    message: Optional[str] = None


class GenerateMealRecipeRequest(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    plan_id: str = Field(alias="planId")
    date: str
    meal_id: str = Field(alias="mealId")


class GenerateMealRecipeResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    message: Optional[str] = None
    recipe: GeneratedRecipe
    cached: bool = False


class UpdateMealStatusRequest(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    plan_id: str = Field(alias="planId")
    date: str
    meal_id: str = Field(alias="mealId")
    completed: bool


class UpdateWaterIntakeRequest(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    plan_id: str = Field(alias="planId")
    date: str
    water_intake: float = Field(alias="waterIntake")


class StatusResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool = True
    message: Optional[str] = None


class DayProgress(BaseModel):
    completed_meals: int
    total_meals: int
    percentage: int
    consumed_calories: float
    consumed_protein: float
    consumed_carbs: float
    consumed_fats: float


class PlanStatistics(BaseModel):
    total_days: int
    days_completed: int
    current_day: int
    days_remaining: int
    average_completion: int
