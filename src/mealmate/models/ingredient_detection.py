from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class IngredientWithConfidence(BaseModel):
    name: str
    confidence: float


DetectedIngredient = Union[str, IngredientWithConfidence]


class IngredientDetectionResponse(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    detected_ingredients: List[DetectedIngredient] = Field(
        default_factory=list, alias="detectedIngredients"
    )
    confidence: Optional[float] = None

    @property
    def names(self) -> List[str]:
        return [
            item if isinstance(item, str) else item.name
            for item in self.detected_ingredients
        ]
