from typing import Any, List, Optional, Union

from .._utils import handle_errors
from ..models import (
    CategoriesResponse,
    PantryItemInput,
    PantryItemResponse,
    PantryResponse,
    PantrySummary,
    ServiceError,
    StatusResponse,
)
from ..models.pantry import ExpiryStatus
from ._base_service import BaseService


class PantryService(BaseService):
    """Service for the user's pantry inventory."""

    async def get_pantry_items(
        self,
        *,
        status: Optional[ExpiryStatus] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> PantryResponse:
        """List pantry items of the signed-in user.

        Args:
            status (Optional[str]): Only items that are ``active``, ``expiring`` or ``expired``.
            category (Optional[str]): Comma-separated category names.
            search (Optional[str]): Free-text filter on the item name.

        Returns:
            PantryResponse: Items and per-status counts.
        """
        params: dict[str, Any] = {}
        if status:
            params["status"] = status
        if category:
            params["category"] = category
        if search:
            params["search"] = search

        with handle_errors("Failed to fetch pantry items"):
            response = await self._api.get("/pantry/items", params=params)
            return PantryResponse.model_validate(response)

    async def add_pantry_item(
        self, item: Union[PantryItemInput, dict[str, Any]]
    ) -> PantryItemResponse:
        if isinstance(item, dict):
            item = PantryItemInput.model_validate(item)

        with handle_errors("Failed to add pantry item"):
            response = await self._api.post("/pantry/items", self._payload(item))
            return PantryItemResponse.model_validate(response)

    async def update_pantry_item(
        self, item_id: str, changes: Union[PantryItemInput, dict[str, Any]]
    ) -> PantryItemResponse:
        if isinstance(changes, dict):
            changes = PantryItemInput.model_validate(changes)

        with handle_errors("Failed to update pantry item"):
            response = await self._api.put(
                f"/pantry/items/{item_id}", self._payload(changes)
            )
            return PantryItemResponse.model_validate(response)

    async def delete_pantry_item(self, item_id: str) -> StatusResponse:
        with handle_errors("Failed to delete pantry item"):
            response = await self._api.delete(f"/pantry/items/{item_id}")
            return StatusResponse.model_validate(response)

    async def get_categories(self) -> CategoriesResponse:
        with handle_errors("Failed to fetch categories"):
            response = await self._api.get("/pantry/categories", require_auth=False)
            return CategoriesResponse.model_validate(response)

    async def get_ingredients_for_recipe_generation(
        self,
        *,
        exclude_expired: bool = True,
        categories: Optional[List[str]] = None,
        min_quantity: Optional[float] = None,
    ) -> List[str]:
        """Names of pantry ingredients usable for recipe generation.

        Returns an empty list when the pantry cannot be read, so recipe
        generation can still proceed without pantry context.
        """
        try:
            response = await self.get_pantry_items(
                status="active" if exclude_expired else None,
                category=",".join(categories) if categories else None,
            )
        except ServiceError as e:
            self._logger.warning(f"Failed to get ingredients for recipe generation: {e}")
            return []

        items = response.items
        if min_quantity:
            items = [item for item in items if item.quantity >= min_quantity]
        return [item.name for item in items]

    async def get_pantry_summary_for_recipes(self) -> PantrySummary:
        try:
            response = await self.get_pantry_items()
        except ServiceError as e:
            self._logger.warning(f"Failed to get pantry summary: {e}")
            return PantrySummary()

        summary = PantrySummary(total_ingredients=len(response.items))
        for item in response.items:
            summary.category_counts[item.category] = (
                summary.category_counts.get(item.category, 0) + 1
            )
            if item.expiry_status == "expiring":
                summary.expiring_ingredients.append(item.name)
            if item.expiry_status in ("active", "expiring"):
                summary.available_ingredients.append(item.name)
        return summary
