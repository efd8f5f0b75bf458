from ._auth import IdentityProvider, StaticTokenProvider, User, parse_id_token
from ._errors import handle_errors
from ._logs import setup_logging
from ._request_spec import JsonBody, MultipartBody, RequestBody, RequestSpec

__all__ = [
    "IdentityProvider",
    "JsonBody",
    "MultipartBody",
    "RequestBody",
    "RequestSpec",
    "StaticTokenProvider",
    "User",
    "handle_errors",
    "parse_id_token",
    "setup_logging",
]
