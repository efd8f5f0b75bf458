import mimetypes
import time
from pathlib import Path
from typing import Any, List, Union

from .._utils import MultipartBody, handle_errors
from ..models import (
    ChefRecipe,
    Course,
    CoursePayload,
    CourseUnit,
    PremiumEligibility,
    RecipePayload,
    StatusResponse,
)
from ..models.chef import ContentStatus
from ._base_service import BaseService

RecipeInput = Union[RecipePayload, dict[str, Any]]
CourseInput = Union[CoursePayload, dict[str, Any]]


class ChefService(BaseService):
    """Service for chef-authored content: recipes, courses and their images.

    Authoring endpoints act on the signed-in chef's own content. The
    ``get_published_*`` and ``get_chef_published_*`` listings are public.
    """

    async def upload_image(self, image_path: Union[str, Path]) -> str:
        """Upload an image to the backend's media storage.

        Args:
            image_path (Union[str, Path]): Path to a local image.

        Returns:
            str: The public URL of the uploaded image.
        """
        path = Path(image_path)
        file_name = path.name or f"upload_{int(time.time() * 1000)}.jpg"
        content_type = mimetypes.guess_type(file_name)[0] or "image/jpeg"

        with handle_errors("Failed to upload image"):
            form = MultipartBody(
                files={"image": (file_name, path.read_bytes(), content_type)}
            )
            response = await self._api.post_form("/upload", form, timeout=60)

        self._logger.debug(f"Image uploaded: {response['url']}")
        return response["url"]

    # recipes

    async def create_recipe(self, payload: RecipeInput) -> ChefRecipe:
        with handle_errors("Failed to create recipe"):
            response = await self._api.post(
                "/recipes/chef/create", self._payload(payload), timeout=30
            )
            return ChefRecipe.model_validate(response["recipe"])

    async def get_my_recipes(self, status: ContentStatus = "all") -> List[ChefRecipe]:
        with handle_errors("Failed to fetch recipes"):
            response = await self._api.get(
                "/recipes/chef/my-recipes", params={"status": status}, timeout=20
            )
            return [ChefRecipe.model_validate(item) for item in response["recipes"]]

    async def get_recipe(self, recipe_id: str) -> ChefRecipe:
        with handle_errors("Failed to fetch recipe"):
            response = await self._api.get(f"/recipes/chef/{recipe_id}", timeout=15)
            return ChefRecipe.model_validate(response["recipe"])

    async def update_recipe(self, recipe_id: str, payload: RecipeInput) -> ChefRecipe:
        with handle_errors("Failed to update recipe"):
            response = await self._api.put(
                f"/recipes/chef/{recipe_id}", self._payload(payload), timeout=30
            )
            return ChefRecipe.model_validate(response["recipe"])

    async def delete_recipe(self, recipe_id: str) -> StatusResponse:
        with handle_errors("Failed to delete recipe"):
            response = await self._api.delete(f"/recipes/chef/{recipe_id}", timeout=15)
            return StatusResponse.model_validate(response)

    async def publish_recipe(self, recipe_id: str) -> ChefRecipe:
        with handle_errors("Failed to publish recipe"):
            response = await self._api.patch(
                f"/recipes/chef/{recipe_id}/publish", {}, timeout=15
            )
            return ChefRecipe.model_validate(response["recipe"])

    async def unpublish_recipe(self, recipe_id: str) -> ChefRecipe:
        with handle_errors("Failed to unpublish recipe"):
            response = await self._api.patch(
                f"/recipes/chef/{recipe_id}/unpublish", {}, timeout=15
            )
            return ChefRecipe.model_validate(response["recipe"])

    async def toggle_recipe_premium(self, recipe_id: str, is_premium: bool) -> ChefRecipe:
        with handle_errors("Failed to toggle recipe premium"):
            response = await self._api.patch(
                f"/recipes/chef/{recipe_id}/premium",
                {"isPremium": is_premium},
                timeout=15,
            )
            return ChefRecipe.model_validate(response["recipe"])

    async def check_recipe_premium_eligibility(self) -> PremiumEligibility:
        with handle_errors("Failed to check recipe premium eligibility"):
            response = await self._api.get(
                "/recipes/chef/premium-eligibility", timeout=10
            )
            return PremiumEligibility.model_validate(response)

    async def search_my_recipes(self, query: str) -> List[ChefRecipe]:
        with handle_errors("Failed to search recipes"):
            response = await self._api.get(
                "/recipes/chef/search", params={"q": query}, timeout=15
            )
            return [ChefRecipe.model_validate(item) for item in response["recipes"]]

    # courses

    async def create_course(self, payload: CourseInput) -> Course:
        with handle_errors("Failed to create course"):
            response = await self._api.post(
                "/courses/chef/create", self._payload(payload), timeout=30
            )
            return Course.model_validate(response["course"])

    async def get_my_courses(self, status: ContentStatus = "all") -> List[Course]:
        with handle_errors("Failed to fetch courses"):
            response = await self._api.get(
                "/courses/chef/my-courses", params={"status": status}, timeout=20
            )
            return [Course.model_validate(item) for item in response["courses"]]

    async def get_course(self, course_id: str) -> Course:
        with handle_errors("Failed to fetch course"):
            response = await self._api.get(f"/courses/chef/{course_id}", timeout=15)
            return Course.model_validate(response["course"])

    async def update_course(self, course_id: str, payload: CourseInput) -> Course:
        with handle_errors("Failed to update course"):
            response = await self._api.put(
                f"/courses/chef/{course_id}", self._payload(payload), timeout=30
            )
            return Course.model_validate(response["course"])

    async def delete_course(self, course_id: str) -> StatusResponse:
        with handle_errors("Failed to delete course"):
            response = await self._api.delete(f"/courses/chef/{course_id}", timeout=15)
            return StatusResponse.model_validate(response)

    async def add_course_unit(self, course_id: str, unit: CourseUnit) -> Course:
        with handle_errors("Failed to add course unit"):
            response = await self._api.post(
                f"/courses/chef/{course_id}/units", self._payload(unit), timeout=20
            )
            return Course.model_validate(response["course"])

    async def update_course_unit(
        self, course_id: str, unit_id: str, unit: Union[CourseUnit, dict[str, Any]]
    ) -> Course:
        with handle_errors("Failed to update course unit"):
            response = await self._api.put(
                f"/courses/chef/{course_id}/units/{unit_id}",
                self._payload(unit),
                timeout=20,
            )
            return Course.model_validate(response["course"])

    async def delete_course_unit(self, course_id: str, unit_id: str) -> Course:
        with handle_errors("Failed to delete course unit"):
            response = await self._api.delete(
                f"/courses/chef/{course_id}/units/{unit_id}", timeout=15
            )
            return Course.model_validate(response["course"])

    async def publish_course(self, course_id: str) -> Course:
        with handle_errors("Failed to publish course"):
            response = await self._api.patch(
                f"/courses/chef/{course_id}/publish", {}, timeout=15
            )
            return Course.model_validate(response["course"])

    async def unpublish_course(self, course_id: str) -> Course:
        with handle_errors("Failed to unpublish course"):
            response = await self._api.patch(
                f"/courses/chef/{course_id}/unpublish", {}, timeout=15
            )
            return Course.model_validate(response["course"])

    async def toggle_course_premium(self, course_id: str, is_premium: bool) -> Course:
        # the course route takes POST, unlike the recipe one
        with handle_errors("Failed to toggle course premium"):
            response = await self._api.post(
                f"/courses/chef/{course_id}/premium",
                {"isPremium": is_premium},
                timeout=15,
            )
            return Course.model_validate(response["course"])

    async def check_course_premium_eligibility(self) -> PremiumEligibility:
        with handle_errors("Failed to check course premium eligibility"):
            response = await self._api.get(
                "/courses/chef/premium-eligibility", timeout=10
            )
            return PremiumEligibility.model_validate(response)

    async def search_my_courses(self, query: str) -> List[Course]:
        with handle_errors("Failed to search courses"):
            response = await self._api.get(
                "/courses/chef/search", params={"q": query}, timeout=15
            )
            return [Course.model_validate(item) for item in response["courses"]]

    # public listings

    async def get_published_recipes(self) -> List[ChefRecipe]:
        with handle_errors("Failed to fetch published recipes"):
            response = await self._api.get(
                "/recipes/published", require_auth=False, timeout=20
            )
            return [ChefRecipe.model_validate(item) for item in response["recipes"]]

    async def get_chef_published_recipes(self, chef_id: str) -> List[ChefRecipe]:
        with handle_errors("Failed to fetch chef recipes"):
            response = await self._api.get(
                f"/recipes/chef/{chef_id}/published", require_auth=False, timeout=20
            )
            return [ChefRecipe.model_validate(item) for item in response["recipes"]]

    async def get_published_courses(self) -> List[Course]:
        with handle_errors("Failed to fetch published courses"):
            response = await self._api.get(
                "/courses/published", require_auth=False, timeout=20
            )
            return [Course.model_validate(item) for item in response["courses"]]

    async def get_chef_published_courses(self, chef_id: str) -> List[Course]:
        with handle_errors("Failed to fetch chef courses"):
            response = await self._api.get(
                f"/courses/chef/{chef_id}/published", require_auth=False, timeout=20
            )
            return [Course.model_validate(item) for item in response["courses"]]
