import pytest

from presentations.api_client import PresentationApiClient
from presentations.config import DEFAULT_API_URL, Settings, get_settings


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch, fresh_settings):
    for var in ["API_URL", "MAX_UPLOAD_BYTES", "PRESENTATION_EXTENSIONS", "PDF_EXTENSIONS", "REQUEST_TIMEOUT"]:
        monkeypatch.delenv(var, raising=False)
    settings = get_settings()
    assert settings.API_URL == DEFAULT_API_URL
    assert settings.MAX_UPLOAD_BYTES == 100 * 1024 * 1024
    assert settings.PDF_EXTENSIONS == [".pdf"]
    assert ".pptx" in settings.PRESENTATION_EXTENSIONS
    assert settings.REQUEST_TIMEOUT is None


def test_environment_overrides(monkeypatch, fresh_settings):
    monkeypatch.setenv("API_URL", "https://files.example.com/")
    monkeypatch.setenv("PRESENTATION_EXTENSIONS", '[".key", ".odp"]')
    monkeypatch.setenv("REQUEST_TIMEOUT", "30")
    settings = get_settings()
    assert settings.PRESENTATION_EXTENSIONS == [".key", ".odp"]
    assert settings.REQUEST_TIMEOUT == 30.0

    api = PresentationApiClient(settings=settings)
    assert api.download_url("a.pdf") == "https://files.example.com/download/a.pdf"


def test_get_settings_is_cached(fresh_settings):
    assert get_settings() is get_settings()


def test_explicit_settings_win_over_environment(monkeypatch):
    monkeypatch.setenv("API_URL", "https://ignored.example.com")
    assert Settings(API_URL="http://backend.test").API_URL == "http://backend.test"
