from typing import Any, Literal, Optional, Union

from .._utils import handle_errors
from ..models import (
    CategoriesResponse,
    GroceryItemInput,
    GroceryItemResponse,
    GroceryResponse,
    PurchaseItemData,
    PurchaseResponse,
    StatusResponse,
)
from ..models.grocery import Urgency
from ._base_service import BaseService


class GroceryService(BaseService):
    """Service for the shopping list.

    Purchased items can be moved straight into the pantry with
    :meth:`mark_as_purchased`.
    """

    async def get_grocery_items(
        self,
        *,
        status: Optional[Literal["purchased", "pending", "urgent"]] = None,
        urgency: Optional[Urgency] = None,
        search: Optional[str] = None,
    ) -> GroceryResponse:
        params: dict[str, Any] = {}
        if status:
            params["status"] = status
        if urgency:
            params["urgency"] = urgency
        if search:
            params["search"] = search

        with handle_errors("Failed to fetch grocery items"):
            response = await self._api.get("/grocery/items", params=params)
            return GroceryResponse.model_validate(response)

    async def add_grocery_item(
        self, item: Union[GroceryItemInput, dict[str, Any]]
    ) -> GroceryItemResponse:
        if isinstance(item, dict):
            item = GroceryItemInput.model_validate(item)

        with handle_errors("Failed to add grocery item"):
            response = await self._api.post("/grocery/items", self._payload(item))
            return GroceryItemResponse.model_validate(response)

    async def update_grocery_item(
        self, item_id: str, changes: Union[GroceryItemInput, dict[str, Any]]
    ) -> GroceryItemResponse:
        if isinstance(changes, dict):
            changes = GroceryItemInput.model_validate(changes)

        with handle_errors("Failed to update grocery item"):
            response = await self._api.put(
                f"/grocery/items/{item_id}", self._payload(changes)
            )
            return GroceryItemResponse.model_validate(response)

    async def delete_grocery_item(self, item_id: str) -> StatusResponse:
        with handle_errors("Failed to delete grocery item"):
            response = await self._api.delete(f"/grocery/items/{item_id}")
            return StatusResponse.model_validate(response)

    async def mark_as_purchased(
        self, item_id: str, purchase: PurchaseItemData
    ) -> PurchaseResponse:
        """Mark a grocery item as purchased and add it to the pantry.

        Args:
            item_id (str): The grocery item ID.
            purchase (PurchaseItemData): Quantity, unit, pantry category and expiry date.

        Returns:
            PurchaseResponse: The updated grocery item and the created pantry item.
        """
        with handle_errors("Failed to mark item as purchased"):
            response = await self._api.post(
                f"/grocery/items/{item_id}/purchase", self._payload(purchase)
            )
            return PurchaseResponse.model_validate(response)

    async def get_categories(self) -> CategoriesResponse:
        with handle_errors("Failed to fetch categories"):
            response = await self._api.get("/grocery/categories", require_auth=False)
            return CategoriesResponse.model_validate(response)
