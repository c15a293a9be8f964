import pytest
from pydantic import ValidationError

from imaginify.config import Environment, LogLevel, Settings, get_settings


class TestSettingsDefaults:
    def test_design_system_defaults(self) -> None:
        settings = Settings()

        assert settings.default_theme_mode == "light"
        assert settings.token_lookup_policy == "fallback"
        assert settings.fallback_color == "#000000"

    def test_development_enables_debug(self) -> None:
        settings = Settings(environment=Environment.DEVELOPMENT)

        assert settings.debug is True
        assert settings.is_development

    def test_production_defaults_to_json_logs(self) -> None:
        settings = Settings(environment=Environment.PRODUCTION)

        assert settings.log_format == "json"
        assert settings.is_production
        assert settings.debug is False

    def test_testing_environment(self) -> None:
        settings = Settings(environment="testing")

        assert settings.is_testing
        assert settings.log_format == "console"
        assert not settings.is_production

    def test_explicit_log_format_wins(self) -> None:
        settings = Settings(environment=Environment.PRODUCTION, log_format="console")

        assert settings.log_format == "console"


class TestSettingsFromEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMG_DEFAULT_THEME_MODE", "dark")
        monkeypatch.setenv("IMG_TOKEN_LOOKUP_POLICY", "strict")
        monkeypatch.setenv("IMG_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.default_theme_mode == "dark"
        assert settings.token_lookup_policy == "strict"
        assert settings.log_level is LogLevel.DEBUG

    def test_get_settings_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("IMG_DEFAULT_THEME_MODE", "dark")

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings().default_theme_mode == "dark"


class TestSettingsValidation:
    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(ValidationError):
            Settings(token_lookup_policy="lenient")

    def test_rejects_invalid_fallback_color(self) -> None:
        with pytest.raises(ValidationError):
            Settings(fallback_color="blackish")

    def test_accepts_rgba_fallback_color(self) -> None:
        settings = Settings(fallback_color=" rgba(0, 0, 0, 0.5) ")

        assert settings.fallback_color == "rgba(0, 0, 0, 0.5)"

    def test_rejects_out_of_range_port(self) -> None:
        with pytest.raises(ValidationError):
            Settings(ui_port=70000)
