from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ContentStatus = Literal["all", "published", "draft"]


class ChefRecipeIngredient(BaseModel):
    model_config = ConfigDict(extra="allow")
    name: str
    amount: str
    unit: str
    notes: Optional[str] = None


class ChefRecipeInstruction(BaseModel):
    model_config = ConfigDict(extra="allow")
    step: int
    instruction: str
    duration: Optional[str] = None
    tips: Optional[str] = None


class Nutrition(BaseModel):
    model_config = ConfigDict(extra="allow")
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None


class RecipePayload(BaseModel):
    """Fields of a chef recipe. Every field is optional so the same model
    serves both creation and partial updates."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    ingredients: Optional[List[ChefRecipeIngredient]] = None
    instructions: Optional[List[ChefRecipeInstruction]] = None
    prep_time: Optional[int] = Field(default=None, alias="prepTime")
    cook_time: Optional[int] = Field(default=None, alias="cookTime")
    servings: Optional[int] = None
    difficulty: Optional[Literal["Easy", "Medium", "Hard"]] = None
    cuisine: Optional[str] = None
    category: Optional[str] = None
    nutrition: Optional[Nutrition] = None
    is_premium: Optional[bool] = Field(default=None, alias="isPremium")
    is_published: Optional[bool] = Field(default=None, alias="isPublished")


class ContentStats(BaseModel):
    views: int = 0
    saves: int = 0
    likes: int = 0


class ChefRecipe(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    image: Optional[Union[str, Dict[str, Any]]] = None
    ingredients: List[ChefRecipeIngredient] = Field(default_factory=list)
    instructions: List[ChefRecipeInstruction] = Field(default_factory=list)
    prep_time: Optional[int] = Field(default=None, alias="prepTime")
    cook_time: Optional[int] = Field(default=None, alias="cookTime")
    servings: Optional[int] = None
    difficulty: Optional[str] = None
    cuisine: Optional[str] = None
    category: Optional[str] = None
    author_id: Optional[str] = Field(default=None, alias="authorId")
    is_published: bool = Field(default=False, alias="isPublished")
    is_premium: bool = Field(default=False, alias="isPremium")
    average_rating: Optional[float] = Field(default=None, alias="averageRating")
    stats: Optional[ContentStats] = None

    @property
    def image_url(self) -> Optional[str]:
        if isinstance(self.image, dict):
            return self.image.get("url")
        return self.image


DurationUnit = Literal["minutes", "hours", "days", "weeks", "months"]


class CourseUnit(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = Field(default=None, alias="_id")
    title: str
    objective: Optional[str] = None
    content: str
    steps: Optional[List[str]] = None
    common_errors: Optional[List[str]] = Field(default=None, alias="commonErrors")
    best_practices: Optional[List[str]] = Field(default=None, alias="bestPractices")


class CoursePayload(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    title: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, alias="coverImage")
    category: Optional[str] = None
    duration_value: Optional[int] = Field(default=None, alias="durationValue")
    duration_unit: Optional[DurationUnit] = Field(default=None, alias="durationUnit")
    skill_level: Optional[Literal["Beginner", "Intermediate", "Advanced"]] = Field(
        default=None, alias="skillLevel"
    )
    units: Optional[List[CourseUnit]] = None
    is_premium: Optional[bool] = Field(default=None, alias="isPremium")
    is_published: Optional[bool] = Field(default=None, alias="isPublished")


class Course(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, alias="coverImage")
    category: Optional[str] = None
    duration_value: Optional[int] = Field(default=None, alias="durationValue")
    duration_unit: Optional[DurationUnit] = Field(default=None, alias="durationUnit")
    skill_level: Optional[str] = Field(default=None, alias="skillLevel")
    units: List[CourseUnit] = Field(default_factory=list)
    author_id: Optional[str] = Field(default=None, alias="authorId")
    is_published: bool = Field(default=False, alias="isPublished")
    is_premium: bool = Field(default=False, alias="isPremium")
    average_rating: Optional[float] = Field(default=None, alias="averageRating")
    total_reviews: Optional[int] = Field(default=None, alias="totalReviews")


class PremiumEligibility(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    can_upload: bool = Field(alias="canUpload")
    current_stats: Dict[str, int] = Field(default_factory=dict, alias="currentStats")
    reason: Optional[str] = None
