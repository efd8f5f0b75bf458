from ._config import Config, resolve_config
from ._mealmate import MealMate
from ._services import ApiClient
from ._utils import (
    IdentityProvider,
    JsonBody,
    MultipartBody,
    StaticTokenProvider,
    User,
)
from .models.errors import (
    AuthRequiredError,
    DetectionError,
    HttpError,
    MealMateError,
    RetryExhaustedError,
    SerializationError,
    ServiceError,
)

__all__ = [
    "ApiClient",
    "AuthRequiredError",
    "Config",
    "DetectionError",
    "HttpError",
    "IdentityProvider",
    "JsonBody",
    "MealMate",
    "MealMateError",
    "MultipartBody",
    "RetryExhaustedError",
    "SerializationError",
    "ServiceError",
    "StaticTokenProvider",
    "User",
    "resolve_config",
]
