import asyncio
import json
from logging import getLogger
from typing import Any, Optional, Union

from httpx import USE_CLIENT_DEFAULT, AsyncClient, Headers, Response
from tenacity import AsyncRetrying, RetryCallState, retry_if_result, stop_after_attempt

from .._config import Config
from .._utils import IdentityProvider, JsonBody, MultipartBody, RequestBody, RequestSpec
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    USER_AGENT,
)
from ..models.errors import (
    AuthRequiredError,
    HttpError,
    RetryExhaustedError,
    SerializationError,
)

Timeout = Union[int, float, None]


def is_unauthorized(response: Response) -> bool:
    return response.status_code == 401


def _last_response(retry_state: RetryCallState) -> Response:
    # stop reached while still unauthorized; hand the final response back
    return retry_state.outcome.result()  # type: ignore[union-attr]


class ApiClient:
    """Authenticated HTTP client for the MealMate API.

    Every authenticated call re-resolves the ID token from the injected
    identity provider and sends it as a bearer token. A 401 triggers exactly
    one retry with a force-refreshed token. Non-2xx responses raise
    :class:`HttpError` (or :class:`RetryExhaustedError` after the retry),
    successful bodies are returned as parsed JSON.

    Network errors and JSON decode errors are not translated.
    """

    def __init__(
        self,
        config: Config,
        identity: IdentityProvider,
        *,
        base_url: Optional[str] = None,
    ) -> None:
        self._logger = getLogger("mealmate")
        self._config = config
        self._identity = identity
        self._base_url = (base_url or config.base_url).rstrip("/")
        self._refresh_task: Optional["asyncio.Future[Optional[str]]"] = None

        self._client = AsyncClient(
            base_url=self._base_url,
            headers=Headers(self.default_headers),
            timeout=config.timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": CONTENT_TYPE_JSON,
            HEADER_USER_AGENT: USER_AGENT,
        }

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def get(
        self,
        endpoint: str,
        *,
        require_auth: bool = True,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Timeout = None,
    ) -> Any:
        return await self.request(
            "GET",
            endpoint,
            require_auth=require_auth,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    async def post(
        self,
        endpoint: str,
        data: Any = None,
        *,
        require_auth: bool = True,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Timeout = None,
    ) -> Any:
        return await self.request(
            "POST",
            endpoint,
            body=self._as_body(data),
            require_auth=require_auth,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    async def post_form(
        self,
        endpoint: str,
        form: MultipartBody,
        *,
        require_auth: bool = True,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Timeout = None,
    ) -> Any:
        """POST a multipart form, e.g. an image upload."""
        if not isinstance(form, MultipartBody):
            raise TypeError("post_form expects a MultipartBody")
        return await self.request(
            "POST",
            endpoint,
            body=form,
            require_auth=require_auth,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    async def put(
        self,
        endpoint: str,
        data: Any = None,
        *,
        require_auth: bool = True,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Timeout = None,
    ) -> Any:
        return await self.request(
            "PUT",
            endpoint,
            body=self._as_body(data),
            require_auth=require_auth,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    async def patch(
        self,
        endpoint: str,
        data: Any = None,
        *,
        require_auth: bool = True,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Timeout = None,
    ) -> Any:
        return await self.request(
            "PATCH",
            endpoint,
            body=self._as_body(data),
            require_auth=require_auth,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    async def delete(
        self,
        endpoint: str,
        *,
        require_auth: bool = True,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Timeout = None,
    ) -> Any:
        return await self.request(
            "DELETE",
            endpoint,
            require_auth=require_auth,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        body: Optional[RequestBody] = None,
        require_auth: bool = True,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Timeout = None,
    ) -> Any:
        """Perform one API call and return the parsed JSON response.

        Args:
            method: HTTP method.
            endpoint: Path appended to the configured base URL.
            body: JSON or multipart body, if any.
            require_auth: Attach a bearer token and fail fast without one.
            params: Query string parameters.
            headers: Extra request headers.
            timeout: Seconds for this call; ``None`` uses the configured default.

        Raises:
            AuthRequiredError: ``require_auth`` is set and there is no session.
            HttpError: The response was not successful.
            RetryExhaustedError: The retry after a 401 was not successful either.
            SerializationError: Strict serialization is on and the body is not JSON-serializable.
        """
        spec = RequestSpec(
            method=method.upper(),
            endpoint=endpoint,
            headers=dict(headers or {}),
            body=body,
            require_auth=require_auth,
            params=dict(params or {}),
            timeout=timeout,
        )
        return await self._execute(spec)

    async def _execute(self, spec: RequestSpec) -> Any:
        self._logger.debug(f"Request: {spec.method} {self._base_url}{spec.endpoint}")

        headers = self._build_headers(spec)

        token: Optional[str] = None
        if spec.require_auth:
            token = await self._resolve_token()
            if token is None:
                self._logger.debug(
                    f"No session for {spec.method} {spec.endpoint}, request not sent"
                )
                raise AuthRequiredError()

        content = self._encode_body(spec.body)
        responses: list[Response] = []

        async def send() -> Response:
            nonlocal token
            if responses:
                self._logger.warning(
                    f"Unauthorized (401) for {spec.method} {spec.endpoint}. "
                    "Retrying with a refreshed token"
                )
                token = await self._refresh_token()
                if token is None:
                    raise self._fail(HttpError.from_response(responses[0]))

            if token is not None:
                headers[HEADER_AUTHORIZATION] = f"Bearer {token}"

            response = await self._client.request(
                spec.method,
                spec.endpoint,
                headers=headers,
                params=spec.params or None,
                timeout=spec.timeout if spec.timeout is not None else USE_CLIENT_DEFAULT,
                **content,
            )
            responses.append(response)
            return response

        retrying = AsyncRetrying(
            stop=stop_after_attempt(2 if spec.require_auth else 1),
            retry=retry_if_result(is_unauthorized),
            retry_error_callback=_last_response,
        )
        response = await retrying(send)

        if not response.is_success:
            if len(responses) > 1:
                raise self._fail(RetryExhaustedError.from_response(response))
            raise self._fail(HttpError.from_response(response))

        return response.json()

    def _fail(self, error: HttpError) -> HttpError:
        self._logger.error(f"API request failed: {error.method} {error.url}: {error}")
        return error

    def _build_headers(self, spec: RequestSpec) -> Headers:
        headers = Headers(spec.headers)
        if spec.is_multipart:
            # httpx generates the multipart boundary header itself
            if HEADER_CONTENT_TYPE in headers:
                del headers[HEADER_CONTENT_TYPE]
        elif HEADER_CONTENT_TYPE not in headers:
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
        return headers

    def _encode_body(self, body: Optional[RequestBody]) -> dict[str, Any]:
        if body is None:
            return {}
        if isinstance(body, MultipartBody):
            return {"data": body.fields, "files": body.files or None}

        payload = body.payload
        if isinstance(payload, (str, bytes)):
            return {"content": payload}
        try:
            return {"content": json.dumps(payload)}
        except (TypeError, ValueError) as e:
            if self._config.strict_serialization:
                raise SerializationError(
                    f"Request body is not JSON serializable: {e}"
                ) from e
            self._logger.warning(
                f"Request body is not JSON serializable ({e}); sending it as text"
            )
            return {"content": str(payload)}

    @staticmethod
    def _as_body(data: Any) -> Optional[RequestBody]:
        if data is None or isinstance(data, (JsonBody, MultipartBody)):
            return data
        return JsonBody(data)

    async def _resolve_token(self, force_refresh: bool = False) -> Optional[str]:
        if self._identity.current_user is None:
            return None
        token = await self._identity.get_id_token(force_refresh)
        return token or None

    async def _refresh_token(self) -> Optional[str]:
        if not self._config.coalesce_refresh:
            return await self._resolve_token(force_refresh=True)

        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.ensure_future(
                self._resolve_token(force_refresh=True)
            )
        return await asyncio.shield(self._refresh_task)
