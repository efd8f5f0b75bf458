import base64
import binascii
import json
from os import environ as env
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from .constants import ENV_ID_TOKEN


class User(BaseModel):
    uid: str
    email: Optional[str] = None


@runtime_checkable
class IdentityProvider(Protocol):
    """The external session the API client reads ID tokens from.

    The client never mutates the session. ``get_id_token(False)`` may return a
    cached token; ``get_id_token(True)`` must return a token that is valid at
    call time.
    """

    @property
    def current_user(self) -> Optional[User]: ...

    async def get_id_token(self, force_refresh: bool = False) -> str: ...


def parse_id_token(id_token: str) -> dict[str, Any]:
    """Decode the payload of a JWT without verifying its signature."""
    token_parts = id_token.split(".")
    if len(token_parts) < 2:
        raise ValueError("Invalid ID token")
    try:
        payload = base64.urlsafe_b64decode(
            token_parts[1] + "=" * (-len(token_parts[1]) % 4)
        )
        return json.loads(payload)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError("Invalid ID token") from e


class StaticTokenProvider:
    """Identity provider backed by a fixed ID token.

    Useful for scripts and the CLI, where the token is obtained out of band.
    A forced refresh returns the same token; there is nothing to refresh.
    """

    def __init__(self, id_token: Optional[str]) -> None:
        self._id_token = id_token or None

    @classmethod
    def from_env(cls) -> "StaticTokenProvider":
        return cls(env.get(ENV_ID_TOKEN))

    @property
    def current_user(self) -> Optional[User]:
        if self._id_token is None:
            return None
        try:
            claims = parse_id_token(self._id_token)
        except ValueError:
            claims = {}
        return User(
            uid=claims.get("user_id") or claims.get("sub") or "",
            email=claims.get("email"),
        )

    async def get_id_token(self, force_refresh: bool = False) -> str:
        if self._id_token is None:
            raise LookupError("No ID token available")
        return self._id_token
