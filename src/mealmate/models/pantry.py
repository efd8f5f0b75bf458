from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ExpiryStatus = Literal["active", "expiring", "expired"]
DetectionMethod = Literal["manual", "ai", "barcode"]


class Category(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    name: str
    icon: Optional[str] = None
    color: Optional[str] = None


class CategoriesResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool
    categories: List[Category] = Field(default_factory=list)


class NutritionalInfo(BaseModel):
    model_config = ConfigDict(extra="allow")
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    sodium: Optional[float] = None


class PantryItem(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    name: str
    category: str
    quantity: float
    unit: str
    expiry_date: Optional[str] = Field(default=None, alias="expiryDate")
    added_date: Optional[str] = Field(default=None, alias="addedDate")
    barcode: Optional[str] = None
    confidence_score: Optional[float] = Field(default=None, alias="confidenceScore")
    detection_method: DetectionMethod = Field(default="manual", alias="detectionMethod")
    nutritional_info: Optional[NutritionalInfo] = Field(
        default=None, alias="nutritionalInfo"
    )
    days_until_expiry: Optional[int] = Field(default=None, alias="daysUntilExpiry")
    expiry_status: ExpiryStatus = Field(default="active", alias="expiryStatus")


class PantryCounts(BaseModel):
    active: int = 0
    expiring: int = 0
    expired: int = 0
    total: int = 0


class PantryResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool
    items: List[PantryItem] = Field(default_factory=list)
    counts: PantryCounts = Field(default_factory=PantryCounts)


class PantryItemResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    success: bool
    item: PantryItem


class PantryItemInput(BaseModel):
    """Payload for creating or updating a pantry item.

    ``image_uri`` is only used for on-device ingredient detection and is
    never sent to the backend.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    name: Optional[str] = None
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    quantity: Optional[float] = None
    unit: Optional[str] = None
    expiry_date: Optional[str] = Field(default=None, alias="expiryDate")
    image_uri: Optional[str] = Field(default=None, alias="imageUri", exclude=True)
    barcode: Optional[str] = None
    confidence_score: Optional[float] = Field(default=None, alias="confidenceScore")
    detection_method: Optional[DetectionMethod] = Field(
        default=None, alias="detectionMethod"
    )
    nutritional_info: Optional[NutritionalInfo] = Field(
        default=None, alias="nutritionalInfo"
    )


class PantrySummary(BaseModel):
    total_ingredients: int = 0
    category_counts: Dict[str, int] = Field(default_factory=dict)
    expiring_ingredients: List[str] = Field(default_factory=list)
    available_ingredients: List[str] = Field(default_factory=list)
