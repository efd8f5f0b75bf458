from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Urgency = Literal["normal", "urgent"]


class GroceryItem(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    name: str
    quantity: float
    unit: str
    urgency: Urgency = "normal"
    purchase_date: Optional[str] = Field(default=None, alias="purchaseDate")
    notes: str = ""
    is_purchased: bool = Field(default=False, alias="isPurchased")
    purchased_date: Optional[str] = Field(default=None, alias="purchasedDate")
    days_until_purchase: Optional[int] = Field(default=None, alias="daysUntilPurchase")
    purchase_status: Optional[str] = Field(default=None, alias="purchaseStatus")


class GroceryCounts(BaseModel):
    total: int = 0
    pending: int = 0
    purchased: int = 0
    urgent: int = 0
    overdue: int = 0


class GroceryResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool
    items: List[GroceryItem] = Field(default_factory=list)
    counts: GroceryCounts = Field(default_factory=GroceryCounts)


class GroceryItemResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool
    item: GroceryItem


class GroceryItemInput(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    name: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    urgency: Optional[Urgency] = None
    purchase_date: Optional[str] = Field(default=None, alias="purchaseDate")
    notes: Optional[str] = None


class PurchaseItemData(BaseModel):
    """Details needed to move a purchased grocery item into the pantry."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    quantity: float
    unit: str
    category_id: str = Field(alias="categoryId")
    expiry_date: str = Field(alias="expiryDate")


class PurchaseResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    success: bool
    message: Optional[str] = None
    grocery_item: GroceryItem = Field(alias="groceryItem")
    pantry_item: Optional[Dict[str, Any]] = Field(default=None, alias="pantryItem")
