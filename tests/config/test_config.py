import pytest

import app.api.deps as deps_module
from app.config.config import ConfigurationError, Settings
from app.service.chat.chat import ChatService

_KEYS = [
    "PHI4__ENDPOINT",
    "PHI4__MODEL",
    "KEYVAULT__URI",
    "KEYVAULT__PHI4_SECRET_NAME",
    "REDIS_URL",
    "SESSION_IDLE_TIMEOUT",
    "CHAT_HISTORY_LIMIT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults():
    settings = Settings.from_env()

    assert settings.phi4_model == "Phi-4"
    assert settings.phi4_secret_name == "phi4-api-key"
    assert settings.session_idle_timeout == 1800
    assert settings.chat_history_limit == 0
    assert settings.redis_url is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PHI4__ENDPOINT", "https://phi4.example.com")
    monkeypatch.setenv("KEYVAULT__URI", "https://vault.example.net/")
    monkeypatch.setenv("KEYVAULT__PHI4_SECRET_NAME", "custom-secret")
    monkeypatch.setenv("CHAT_HISTORY_LIMIT", "20")

    settings = Settings.from_env()
    settings.validate()

    assert settings.phi4_endpoint == "https://phi4.example.com"
    assert settings.phi4_secret_name == "custom-secret"
    assert settings.chat_history_limit == 20


def test_validate_missing_endpoint():
    with pytest.raises(ConfigurationError, match="PHI4__ENDPOINT"):
        Settings(keyvault_uri="https://vault.example.net/").validate()


def test_validate_missing_vault():
    with pytest.raises(ConfigurationError, match="KEYVAULT__URI"):
        Settings(phi4_endpoint="https://phi4.example.com").validate()


def test_invalid_integer(monkeypatch):
    monkeypatch.setenv("SESSION_IDLE_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError, match="SESSION_IDLE_TIMEOUT"):
        Settings.from_env()


def test_build_chat_service_refuses_without_config(monkeypatch):
    def fake_fetch_secret(*_):
        raise AssertionError("vault must not be queried")

    monkeypatch.setattr(deps_module, "fetch_secret", fake_fetch_secret)

    with pytest.raises(ConfigurationError):
        deps_module.build_chat_service(Settings())


def test_build_chat_service(monkeypatch):
    monkeypatch.setattr(deps_module, "fetch_secret", lambda uri, name: f"{name}-value")
    settings = Settings(
        phi4_endpoint="https://phi4.example.com",
        keyvault_uri="https://vault.example.net/",
        chat_history_limit=10,
    )

    service = deps_module.build_chat_service(settings)

    assert isinstance(service, ChatService)
    assert service.history_limit == 10
    assert service.store.ttl_seconds == 1800
