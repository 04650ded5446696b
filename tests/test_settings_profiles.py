from __future__ import annotations

from exception_filters.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.log_format == "plain"
    assert dev.reload is True

    test_profile = Settings(environment="test")
    assert test_profile.environment == "test"
    assert test_profile.log_level == "WARNING"
    assert test_profile.log_format == "json"
    assert test_profile.reload is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False


def test_environment_aliases_are_normalised() -> None:
    assert Settings(environment="DEV").environment == "development"
    assert Settings(environment="Testing").environment == "test"
    assert Settings(environment="staging").environment == "development"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("EXCEPTION_FILTERS_LOG_LEVEL", "error")
    overridden = Settings(environment="test")
    assert overridden.log_level == "ERROR"

    monkeypatch.delenv("EXCEPTION_FILTERS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("EXCEPTION_FILTERS_LOG_FORMAT", "PLAIN")
    plain = Settings(environment="ci")
    assert plain.log_format == "plain"


def test_invalid_values_fall_back_to_defaults() -> None:
    settings = Settings(environment="ci", log_format="xml", request_id_header="  ")

    assert settings.log_format == "json"
    assert settings.request_id_header == "X-Request-ID"
