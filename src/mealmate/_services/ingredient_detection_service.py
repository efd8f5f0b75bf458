import mimetypes
from pathlib import Path
from typing import Any, List, Union

from .._utils import MultipartBody
from .._utils.constants import INGREDIENT_DETECTION_ENDPOINT
from ..models import (
    DetectionError,
    HttpError,
    IngredientDetectionResponse,
    IngredientWithConfidence,
)
from ..models.ingredient_detection import DetectedIngredient
from ._base_service import BaseService


def _normalize_item(item: Any) -> DetectedIngredient:
    if isinstance(item, dict) and "name" in item:
        if "confidence" in item:
            return IngredientWithConfidence(name=item["name"], confidence=item["confidence"])
        return str(item["name"])
    return str(item)


def _is_present(value: Any) -> bool:
    # an empty list still counts as an answer, an empty string or zero does not
    return isinstance(value, list) or bool(value)


def normalize_detection_result(raw: Any) -> IngredientDetectionResponse:
    """Accept the response shapes the detection service is known to return.

    Supported: ``{"detectedIngredients": [...]}``, a bare list of names or
    ``{"name", "confidence"}`` objects, and ``{"ingredients": ...}``.

    Raises:
        DetectionError: The shape is not recognized.
    """
    if isinstance(raw, dict) and isinstance(raw.get("detectedIngredients"), list):
        return IngredientDetectionResponse.model_validate(raw)

    if isinstance(raw, list):
        return IngredientDetectionResponse(
            detected_ingredients=[_normalize_item(item) for item in raw]
        )

    if isinstance(raw, dict) and _is_present(raw.get("ingredients")):
        ingredients = raw["ingredients"]
        items: List[DetectedIngredient] = (
            [_normalize_item(item) for item in ingredients]
            if isinstance(ingredients, list)
            else [str(ingredients)]
        )
        return IngredientDetectionResponse(
            detected_ingredients=items,
            confidence=raw.get("confidence") or None,
        )

    raise DetectionError(
        "Invalid Response", "The API response format was not recognized", 400
    )


class IngredientDetectionService(BaseService):
    """Service for detecting ingredients in a photo.

    Talks to the standalone detection API, so it is given an ApiClient bound
    to the detection base URL. The endpoint is public.
    """

    async def detect_ingredients_from_image(
        self,
        image_path: Union[str, Path],
        *,
        include_confidence: bool = False,
    ) -> IngredientDetectionResponse:
        """Upload an image and return the detected ingredients.

        Args:
            image_path (Union[str, Path]): Path to the image file.
            include_confidence (bool): Ask for a confidence score per ingredient.

        Returns:
            IngredientDetectionResponse: The detected ingredients.

        Raises:
            DetectionError: The file is missing, the API failed or the
                response was not understood.
        """
        path = Path(image_path)
        if not path.is_file():
            raise DetectionError(
                "File not found", "The specified image file does not exist", 404
            )

        content_type = mimetypes.guess_type(path.name)[0] or "image/jpeg"
        form = MultipartBody(
            fields={"include_confidence": "true"} if include_confidence else {},
            files={"file": (path.name, path.read_bytes(), content_type)},
        )

        try:
            raw = await self._api.post_form(
                INGREDIENT_DETECTION_ENDPOINT, form, require_auth=False
            )
            return normalize_detection_result(raw)
        except DetectionError as e:
            self._logger.warning(f"Detection error: {e!r}")
            raise
        except HttpError as e:
            self._logger.warning(f"Detection API error response: {e.body}")
            raise DetectionError(
                "API Error",
                f"Failed to detect ingredients: {e.body or e.status_code}",
                e.status_code,
            ) from e
        except Exception as e:
            self._logger.warning(f"Error detecting ingredients: {e}")
            raise DetectionError(
                "Detection Failed", str(e) or "An unknown error occurred", 500
            ) from e
