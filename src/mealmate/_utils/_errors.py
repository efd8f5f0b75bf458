from contextlib import contextmanager
from typing import Generator

from ..models.errors import HttpError, MealMateError, ServiceError


@contextmanager
def handle_errors(message: str) -> Generator[None, None, None]:
    """Context manager that enriches failures of a service call.

    Wraps client and network errors into a ServiceError whose message starts
    with the given domain message. No recovery happens here; the original
    exception is kept as ``__cause__``.

    Args:
        message: Domain description of the failed operation, for example
            ``"Failed to generate diet plan"``.

    Raises:
        ServiceError: For any exception raised inside the block. The status
            code is carried over from an HttpError cause.
    """
    try:
        yield
    except ServiceError:
        raise
    except HttpError as e:
        raise ServiceError(f"{message}: {e.message}", e.status_code) from e
    except MealMateError as e:
        raise ServiceError(f"{message}: {e.message}") from e
    except Exception as e:
        raise ServiceError(f"{message}: {str(e) or type(e).__name__}") from e
