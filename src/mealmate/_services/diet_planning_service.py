import math
from datetime import date
from typing import Optional

from .._utils import handle_errors
from ..models import (
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
from ._base_service import BaseService


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class DietPlanningService(BaseService):
    """Service for AI-generated diet plans.

    Plans are computed server side; this service fetches and updates them and
    offers a few local helpers to summarize progress.
    """

    async def generate_ai_meal_plan(self, request: DietPlanRequest) -> DietPlanResponse:
        """Generate a new AI meal plan.

        Args:
            request (DietPlanRequest): Goal, calorie target and preferences.

        Returns:
            DietPlanResponse: The generated plan.

        Examples:
            ```python
            from mealmate import MealMate
            from mealmate.models import DietPlanRequest

            async with MealMate() as client:
                response = await client.diet_planning.generate_ai_meal_plan(
                    DietPlanRequest(goal_type="lose", target_calories=1800)
                )
            ```
        """
        with handle_errors("Failed to generate diet plan"):
            response = await self._api.post(
                "/diet-planning/generate", self._payload(request), timeout=60
            )
            return DietPlanResponse.model_validate(response)

    async def get_active_plan(self) -> DietPlanResponse:
        with handle_errors("Failed to get active plan"):
            response = await self._api.get("/diet-planning/active", timeout=30)
            return DietPlanResponse.model_validate(response)

    async def generate_meal_recipe(
        self, request: GenerateMealRecipeRequest
    ) -> GenerateMealRecipeResponse:
        """Generate (or fetch the cached) recipe for one meal of a plan."""
        self._logger.debug(
            f"Requesting recipe for meal {request.meal_id} on {request.date}"
        )
        with handle_errors("Failed to generate meal recipe"):
            response = await self._api.post(
                "/diet-planning/meal/recipe", self._payload(request), timeout=90
            )
            result = GenerateMealRecipeResponse.model_validate(response)
        self._logger.debug(
            f"Recipe response received: {'CACHED' if result.cached else 'GENERATED'}"
        )
        return result

    async def update_meal_status(self, request: UpdateMealStatusRequest) -> StatusResponse:
        with handle_errors("Failed to update meal status"):
            response = await self._api.patch(
                "/diet-planning/meal/status", self._payload(request), timeout=10
            )
            return StatusResponse.model_validate(response)

    async def update_water_intake(
        self, request: UpdateWaterIntakeRequest
    ) -> StatusResponse:
        with handle_errors("Failed to update water intake"):
            response = await self._api.patch(
                "/diet-planning/water", self._payload(request), timeout=10
            )
            return StatusResponse.model_validate(response)

    async def delete_plan(self, plan_id: str) -> StatusResponse:
        with handle_errors("Failed to delete plan"):
            response = await self._api.delete(f"/diet-planning/{plan_id}", timeout=10)
            return StatusResponse.model_validate(response)

    def get_today_plan(
        self, plan: DietPlan, today: Optional[date] = None
    ) -> Optional[DailyPlan]:
        key = (today or date.today()).isoformat()
        return next((day for day in plan.daily_plans if day.date == key), None)

    def get_meal_by_id(self, daily_plan: DailyPlan, meal_id: str) -> Optional[Meal]:
        return next((meal for meal in daily_plan.meals if meal.meal_id == meal_id), None)

    def calculate_day_progress(self, daily_plan: DailyPlan) -> DayProgress:
        completed = [meal for meal in daily_plan.meals if meal.completed]
        total = len(daily_plan.meals)

        return DayProgress(
            completed_meals=len(completed),
            total_meals=total,
            percentage=_round_half_up(len(completed) / total * 100) if total else 0,
            consumed_calories=sum(meal.calories for meal in completed),
            consumed_protein=sum(meal.protein for meal in completed),
            consumed_carbs=sum(meal.carbs for meal in completed),
            consumed_fats=sum(meal.fats for meal in completed),
        )

    def get_plan_statistics(
        self, plan: DietPlan, today: Optional[date] = None
    ) -> PlanStatistics:
        """Summarize how far into the plan the user is.

        ``current_day`` is 1-based and counted from the plan start date.
        """
        today = today or date.today()
        total_days = plan.duration
        current_day = (today - plan.start_date.date()).days + 1

        rates = [
            self.calculate_day_progress(day).percentage for day in plan.daily_plans
        ]
        average = _round_half_up(sum(rates) / len(rates)) if rates else 0

        return PlanStatistics(
            total_days=total_days,
            days_completed=min(current_day - 1, total_days),
            current_day=min(current_day, total_days),
            days_remaining=max(0, total_days - current_day + 1),
            average_completion=average,
        )
