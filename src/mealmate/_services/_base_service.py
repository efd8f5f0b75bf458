from logging import getLogger
from typing import Any, Union

from pydantic import BaseModel

from .api_client import ApiClient


class BaseService:
    """Common base for the domain services.

    Services do not own connections; they share one :class:`ApiClient` and
    only shape endpoints, payloads and response models.
    """

    def __init__(self, api_client: ApiClient) -> None:
        self._logger = getLogger("mealmate")
        self._api = api_client

    @staticmethod
    def _payload(data: Union[BaseModel, dict[str, Any]]) -> dict[str, Any]:
        """Serialize a request model to the camelCase JSON the backend expects."""
        if isinstance(data, BaseModel):
            return data.model_dump(by_alias=True, exclude_none=True, mode="json")
        return dict(data)
