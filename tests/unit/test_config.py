import pytest

from infrastructure.config import HarvesterConfig


class TestHarvesterConfig:
    """Test configuration loading from the environment."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "FAOSTAT_LANGUAGE",
            "FAOSTAT_VERSION",
            "FAOSTAT_HTTP_TIMEOUT",
            "FAOSTAT_HTTP_MAX_RETRIES",
        ):
            monkeypatch.delenv(name, raising=False)

        config = HarvesterConfig.from_env()

        assert config.language == "en"
        assert config.version == "v1"
        assert config.timeout == 30
        assert config.max_retries == 3

    @pytest.mark.unit
    def test_environment_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAOSTAT_LANGUAGE", "fr")
        monkeypatch.setenv("FAOSTAT_VERSION", "v2")
        monkeypatch.setenv("FAOSTAT_HTTP_TIMEOUT", "5")

        config = HarvesterConfig.from_env()

        assert config.language == "fr"
        assert config.version == "v2"
        assert config.timeout == 5

    @pytest.mark.unit
    def test_arguments_override_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FAOSTAT_LANGUAGE", "fr")

        config = HarvesterConfig.from_env(language="es", version="v3")

        assert config.language == "es"
        assert config.version == "v3"

    @pytest.mark.unit
    def test_invalid_integer_uses_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FAOSTAT_HTTP_MAX_RETRIES", "many")

        assert HarvesterConfig.from_env().max_retries == 3
