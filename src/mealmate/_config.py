from os import environ as env
from typing import Optional

from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_INGREDIENT_DETECTION_URL,
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_INGREDIENT_DETECTION_URL,
    ENV_TIMEOUT,
)


class Config(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    ingredient_detection_url: str = DEFAULT_INGREDIENT_DETECTION_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    strict_serialization: bool = False
    coalesce_refresh: bool = False

    @field_validator("base_url", "ingredient_detection_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value:
            raise ValueError("URL must not be empty")
        return value.rstrip("/")


def resolve_config(
    base_url: Optional[str] = None,
    ingredient_detection_url: Optional[str] = None,
    timeout: Optional[float] = None,
    *,
    strict_serialization: bool = False,
    coalesce_refresh: bool = False,
) -> Config:
    """Build a Config from explicit arguments, then environment, then defaults."""
    timeout_value = timeout
    if timeout_value is None and env.get(ENV_TIMEOUT):
        timeout_value = float(env[ENV_TIMEOUT])

    return Config(
        base_url=base_url or env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
        ingredient_detection_url=(
            ingredient_detection_url
            or env.get(ENV_INGREDIENT_DETECTION_URL)
            or DEFAULT_INGREDIENT_DETECTION_URL
        ),
        timeout=timeout_value if timeout_value is not None else DEFAULT_TIMEOUT,
        strict_serialization=strict_serialization,
        coalesce_refresh=coalesce_refresh,
    )
