import base64
import json
import logging

import httpx
import pytest

from mealmate._utils import (
    IdentityProvider,
    StaticTokenProvider,
    handle_errors,
    parse_id_token,
    setup_logging,
)
from mealmate.models import (
    AuthRequiredError,
    DetectionError,
    HttpError,
    ServiceError,
)


def _jwt(claims: dict) -> str:
    payload = base64.urlsafe_b64encode(json.dumps(claims).encode()).rstrip(b"=")
    return f"eyJhbGciOiJSUzI1NiJ9.{payload.decode()}.signature"


class TestStaticTokenProvider:
    def test_is_identity_provider(self) -> None:
        assert isinstance(StaticTokenProvider("abc"), IdentityProvider)

    def test_user_from_token_claims(self) -> None:
        provider = StaticTokenProvider(
            _jwt({"user_id": "u42", "email": "cook@example.com"})
        )

        user = provider.current_user

        assert user is not None
        assert user.uid == "u42"
        assert user.email == "cook@example.com"

    def test_opaque_token_still_counts_as_signed_in(self) -> None:
        user = StaticTokenProvider("opaque").current_user

        assert user is not None
        assert user.uid == ""

    def test_no_token(self) -> None:
        assert StaticTokenProvider(None).current_user is None
        assert StaticTokenProvider("").current_user is None

    @pytest.mark.anyio
    async def test_get_id_token(self) -> None:
        provider = StaticTokenProvider("abc")

        assert await provider.get_id_token() == "abc"
        assert await provider.get_id_token(force_refresh=True) == "abc"

    @pytest.mark.anyio
    async def test_get_id_token_without_token(self) -> None:
        with pytest.raises(LookupError):
            await StaticTokenProvider(None).get_id_token()

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEALMATE_ID_TOKEN", _jwt({"sub": "u7"}))

        user = StaticTokenProvider.from_env().current_user

        assert user is not None
        assert user.uid == "u7"


class TestParseIdToken:
    def test_parse(self) -> None:
        assert parse_id_token(_jwt({"sub": "u1", "exp": 1})) == {"sub": "u1", "exp": 1}

    @pytest.mark.parametrize("token", ["no-dots", "a.!!!.c", "a.bm90IGpzb24.c"])
    def test_invalid(self, token: str) -> None:
        with pytest.raises(ValueError, match="Invalid ID token"):
            parse_id_token(token)


class TestHandleErrors:
    def test_http_error_keeps_status(self) -> None:
        with pytest.raises(ServiceError) as exc_info:
            with handle_errors("Failed to fetch pantry items"):
                raise HttpError(500, "server exploded")

        error = exc_info.value
        assert error.status_code == 500
        assert str(error) == "Failed to fetch pantry items: API Error: 500 server exploded"
        assert isinstance(error.__cause__, HttpError)

    def test_client_error_is_wrapped(self) -> None:
        with pytest.raises(ServiceError) as exc_info:
            with handle_errors("Failed to get active plan"):
                raise AuthRequiredError()

        assert exc_info.value.status_code is None
        assert str(exc_info.value).startswith(
            "Failed to get active plan: Authentication required"
        )

    def test_network_error_is_wrapped(self) -> None:
        with pytest.raises(ServiceError) as exc_info:
            with handle_errors("Failed to add grocery item"):
                raise httpx.ConnectError("connection refused")

        assert str(exc_info.value) == "Failed to add grocery item: connection refused"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_service_error_passes_through(self) -> None:
        original = ServiceError("Not enough ingredients")

        with pytest.raises(ServiceError) as exc_info:
            with handle_errors("Failed to generate recipe"):
                raise original

        assert exc_info.value is original


class TestErrors:
    def test_http_error_from_response(self) -> None:
        request = httpx.Request("GET", "https://api.mealmate.test/api/pantry/items")
        response = httpx.Response(404, text="not found", request=request)

        error = HttpError.from_response(response)

        assert error.status_code == 404
        assert error.body == "not found"
        assert error.method == "GET"
        assert error.url == "https://api.mealmate.test/api/pantry/items"
        assert str(error) == "API Error: 404 not found"

    def test_http_error_with_empty_body(self) -> None:
        assert str(HttpError(502, "")) == "API Error: 502"

    def test_detection_error_repr(self) -> None:
        error = DetectionError("File not found", "missing", 404)

        assert repr(error) == (
            "DetectionError(error='File not found', message='missing', status=404)"
        )


class TestSetupLogging:
    def test_single_handler(self) -> None:
        setup_logging(debug=True)
        setup_logging()

        logger = logging.getLogger("mealmate")
        handlers = [h for h in logger.handlers if getattr(h, "_mealmate_handler", False)]
        assert len(handlers) == 1
        assert logger.level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
