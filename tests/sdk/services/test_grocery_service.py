import json

import pytest
from pytest_httpx import HTTPXMock

from mealmate._services import ApiClient, GroceryService
from mealmate.models import GroceryItemInput, PurchaseItemData, ServiceError


@pytest.fixture
def service(api_client: ApiClient) -> GroceryService:
    return GroceryService(api_client)


def _item(item_id: str = "g1", **overrides) -> dict:
    item = {
        "id": item_id,
        "name": "Tomatoes",
        "quantity": 4,
        "unit": "pcs",
        "urgency": "normal",
        "isPurchased": False,
    }
    item.update(overrides)
    return item


class TestGroceryService:
    @pytest.mark.anyio
    async def test_get_grocery_items(
        self, httpx_mock: HTTPXMock, service: GroceryService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/grocery/items?status=pending&urgency=urgent",
            method="GET",
            json={
                "success": True,
                "items": [_item(urgency="urgent")],
                "counts": {"total": 1, "pending": 1, "urgent": 1},
            },
        )

        response = await service.get_grocery_items(status="pending", urgency="urgent")

        assert response.items[0].urgency == "urgent"
        assert response.counts.pending == 1
        assert response.counts.purchased == 0

    @pytest.mark.anyio
    async def test_add_grocery_item(
        self, httpx_mock: HTTPXMock, service: GroceryService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/grocery/items",
            method="POST",
            json={"success": True, "item": _item()},
        )

        response = await service.add_grocery_item(
            GroceryItemInput(
                name="Tomatoes", quantity=4, unit="pcs", purchase_date="2024-03-05"
            )
        )

        assert response.item.name == "Tomatoes"
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {
            "name": "Tomatoes",
            "quantity": 4,
            "unit": "pcs",
            "purchaseDate": "2024-03-05",
        }

    @pytest.mark.anyio
    async def test_update_grocery_item(
        self, httpx_mock: HTTPXMock, service: GroceryService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/grocery/items/g1",
            method="PUT",
            json={"success": True, "item": _item(notes="ripe ones")},
        )

        response = await service.update_grocery_item("g1", {"notes": "ripe ones"})

        assert response.item.notes == "ripe ones"

    @pytest.mark.anyio
    async def test_delete_grocery_item(
        self, httpx_mock: HTTPXMock, service: GroceryService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/grocery/items/g1",
            method="DELETE",
            json={"success": True},
        )

        response = await service.delete_grocery_item("g1")

        assert response.success is True

    @pytest.mark.anyio
    async def test_mark_as_purchased(
        self, httpx_mock: HTTPXMock, service: GroceryService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/grocery/items/g1/purchase",
            method="POST",
            json={
                "success": True,
                "message": "Moved to pantry",
                "groceryItem": _item(isPurchased=True),
                "pantryItem": {"id": "p9", "name": "Tomatoes"},
            },
        )

        response = await service.mark_as_purchased(
            "g1",
            PurchaseItemData(
                quantity=4, unit="pcs", category_id="vegetables", expiry_date="2024-03-12"
            ),
        )

        assert response.grocery_item.is_purchased is True
        assert response.pantry_item == {"id": "p9", "name": "Tomatoes"}
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {
            "quantity": 4,
            "unit": "pcs",
            "categoryId": "vegetables",
            "expiryDate": "2024-03-12",
        }

    @pytest.mark.anyio
    async def test_get_categories_is_public(
        self, httpx_mock: HTTPXMock, config, signed_out, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/grocery/categories",
            json={"success": True, "categories": [{"id": "veg", "name": "Vegetables"}]},
        )
        service = GroceryService(ApiClient(config, signed_out))

        response = await service.get_categories()

        assert [c.id for c in response.categories] == ["veg"]

    @pytest.mark.anyio
    async def test_purchase_failure_is_wrapped(
        self, httpx_mock: HTTPXMock, service: GroceryService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/grocery/items/g1/purchase",
            method="POST",
            status_code=400,
            text="Item already purchased",
        )

        with pytest.raises(ServiceError) as exc_info:
            await service.mark_as_purchased(
                "g1",
                PurchaseItemData(
                    quantity=1, unit="pcs", category_id="veg", expiry_date="2024-03-12"
                ),
            )

        assert exc_info.value.status_code == 400
        assert "Item already purchased" in str(exc_info.value)
