from typing import Optional

from httpx import Response


class MealMateError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class AuthRequiredError(MealMateError):
    """Raised before any network I/O when a request needs a session and none exists."""

    def __init__(
        self,
        message="Authentication required. Sign in or set the MEALMATE_ID_TOKEN environment variable to a valid ID token.",
    ):
        super().__init__(message)


class HttpError(MealMateError):
    """A non-2xx response that was not recovered by a token refresh.

    The raw response text is kept in ``body`` so callers can diagnose the
    failure without re-reading the response.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"API Error: {status_code} {body}".rstrip())

    @classmethod
    def from_response(cls, response: Response) -> "HttpError":
        return cls(
            response.status_code,
            response.text,
            method=response.request.method,
            url=str(response.request.url),
        )


class RetryExhaustedError(HttpError):
    """The single token-refresh retry after a 401 also failed."""


class SerializationError(MealMateError):
    """A JSON body could not be serialized and strict serialization is on."""


class ServiceError(MealMateError):
    """A domain-level failure wrapping the underlying client error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class DetectionError(MealMateError):
    def __init__(self, error: str, message: str, status: int):
        self.error = error
        self.status = status
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"DetectionError(error={self.error!r}, message={self.message!r}, "
            f"status={self.status!r})"
        )
