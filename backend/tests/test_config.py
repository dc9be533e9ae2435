import logging

import pytest
from pydantic import ValidationError

from multiapi import config
from multiapi.config import DEFAULT_BASE_URL, DEFAULT_MODEL, Settings, load_settings
from multiapi.main import create_app
from multiapi.observability import setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_BASE_URL", "GEMINI_MODEL", "GEMINI_TIMEOUT",
                 "HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.setattr(config, "find_dotenv", lambda *a, **k: "")
    return monkeypatch


def test_defaults(clean_env):
    s = load_settings()
    assert s.gemini_api_key is None
    assert s.gemini_base_url == DEFAULT_BASE_URL
    assert s.gemini_model == DEFAULT_MODEL == "gemini-2.5-flash"
    assert s.gemini_timeout is None
    assert s.port == 3000
    assert s.log_format == "text"


def test_env_overrides(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "  abc  ")
    clean_env.setenv("GEMINI_BASE_URL", "http://localhost:9999/v1beta/")
    clean_env.setenv("GEMINI_TIMEOUT", "30")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("LOG_FORMAT", "JSON")
    s = load_settings()
    assert s.gemini_api_key == "abc"
    assert s.gemini_base_url == "http://localhost:9999/v1beta"
    assert s.gemini_timeout == 30.0
    assert s.port == 8080
    assert s.log_format == "json"


def test_blank_api_key_is_none(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "   ")
    assert load_settings().gemini_api_key is None


def test_bad_port_fails_fast(clean_env):
    clean_env.setenv("PORT", "three thousand")
    with pytest.raises(ValidationError, match="port"):
        load_settings()


def test_empty_values_fall_back_to_defaults(clean_env):
    clean_env.setenv("PORT", "")
    clean_env.setenv("GEMINI_TIMEOUT", "")
    s = load_settings()
    assert s.port == 3000
    assert s.gemini_timeout is None


def test_settings_are_read_only():
    s = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        s.port = 1  # type: ignore[misc]


def test_create_app_builds_client_from_settings():
    s = Settings(gemini_api_key="k", gemini_base_url="http://x/v1beta", gemini_timeout=5.0)
    app = create_app(settings=s)
    assert app.state.settings is s
    assert app.state.model_client.api_key == "k"
    assert app.state.model_client.base_url == "http://x/v1beta"
    assert app.state.model_client.timeout == 5.0


def test_setup_logging_installs_single_handler():
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "multiapi"]
    assert len(ours) == 1
    assert logging.root.level == logging.WARNING
    setup_logging("INFO", "text")
