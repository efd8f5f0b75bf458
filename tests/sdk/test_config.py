import pytest
from pydantic import ValidationError

from mealmate import MealMate
from mealmate._config import Config, resolve_config


class TestResolveConfig:
    def test_defaults(self) -> None:
        config = resolve_config()

        assert config.base_url == "http://localhost:5000/api"
        assert config.ingredient_detection_url == "http://localhost:8000"
        assert config.timeout == 30.0
        assert config.strict_serialization is False
        assert config.coalesce_refresh is False

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEALMATE_API_URL", "https://api.example.com/api/")
        monkeypatch.setenv("MEALMATE_INGREDIENT_DETECTION_URL", "https://detect.example.com")
        monkeypatch.setenv("MEALMATE_TIMEOUT", "12.5")

        config = resolve_config()

        assert config.base_url == "https://api.example.com/api"
        assert config.ingredient_detection_url == "https://detect.example.com"
        assert config.timeout == 12.5

    def test_arguments_override_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MEALMATE_API_URL", "https://api.example.com/api")
        monkeypatch.setenv("MEALMATE_TIMEOUT", "12.5")

        config = resolve_config(
            "https://override.example.com/api", timeout=5, coalesce_refresh=True
        )

        assert config.base_url == "https://override.example.com/api"
        assert config.timeout == 5
        assert config.coalesce_refresh is True

    def test_empty_url_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Config(base_url="")


class TestMealMate:
    @pytest.mark.anyio
    async def test_services_share_configuration(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MEALMATE_ID_TOKEN", "abc")

        async with MealMate(
            base_url="https://api.example.com/api",
            ingredient_detection_url="https://detect.example.com/",
            timeout=10,
        ) as client:
            assert client.config.timeout == 10
            assert client.api_client.base_url == "https://api.example.com/api"
            assert client.diet_planning._api is client.api_client
            assert client.chef._api is client.api_client
            assert (
                client.ingredient_detection._api.base_url
                == "https://detect.example.com"
            )

    @pytest.mark.anyio
    async def test_identity_defaults_to_environment_token(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MEALMATE_ID_TOKEN", "abc")

        async with MealMate() as client:
            token = await client.api_client._resolve_token()

        assert token == "abc"

    @pytest.mark.anyio
    async def test_no_token_means_signed_out(self) -> None:
        async with MealMate() as client:
            assert await client.api_client._resolve_token() is None
