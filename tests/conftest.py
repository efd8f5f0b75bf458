import sys
from pathlib import Path
from typing import List, Optional

import anyio
import pytest
from click.testing import CliRunner

# Ensure local source package (src/mealmate) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from mealmate._config import Config  # noqa: E402
from mealmate._services import ApiClient  # noqa: E402
from mealmate._utils import User  # noqa: E402


class FakeIdentityProvider:
    """In-memory identity provider that records every token request."""

    def __init__(
        self,
        user: Optional[User] = None,
        cached_token: str = "tok1",
        fresh_token: str = "tok2",
        refresh_delay: float = 0.0,
    ) -> None:
        self.user = user
        self.cached_token = cached_token
        self.fresh_token = fresh_token
        self.refresh_delay = refresh_delay
        self.calls: List[bool] = []

    @property
    def current_user(self) -> Optional[User]:
        return self.user

    async def get_id_token(self, force_refresh: bool = False) -> str:
        self.calls.append(force_refresh)
        if force_refresh:
            if self.refresh_delay:
                await anyio.sleep(self.refresh_delay)
            return self.fresh_token
        return self.cached_token


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("MEALMATE_API_URL", raising=False)
    monkeypatch.delenv("MEALMATE_INGREDIENT_DETECTION_URL", raising=False)
    monkeypatch.delenv("MEALMATE_TIMEOUT", raising=False)
    monkeypatch.delenv("MEALMATE_ID_TOKEN", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.mealmate.test/api"


@pytest.fixture
def detection_url() -> str:
    return "https://detect.mealmate.test"


@pytest.fixture
def config(base_url: str, detection_url: str) -> Config:
    return Config(base_url=base_url, ingredient_detection_url=detection_url)


@pytest.fixture
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider(user=User(uid="u1"))


@pytest.fixture
def signed_out() -> FakeIdentityProvider:
    return FakeIdentityProvider(user=None)


@pytest.fixture
def api_client(config: Config, identity: FakeIdentityProvider) -> ApiClient:
    return ApiClient(config, identity)


@pytest.fixture
def make_identity() -> type[FakeIdentityProvider]:
    return FakeIdentityProvider
