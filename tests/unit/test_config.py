import pytest

from stamp.config import load_settings
from stamp.errors import ConfigError


def test_defaults():
    assert load_settings() == {
        "timezone": "",
        "always_extension": False,
        "project_start": 1,
        "project_width": 4,
    }


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("STAMP_TIMEZONE", "Asia/Tokyo")
    monkeypatch.setenv("STAMP_ALWAYS_EXTENSION", "Yes")
    monkeypatch.setenv("STAMP_PROJECT_START", "395")
    monkeypatch.setenv("STAMP_PROJECT_WIDTH", "5")

    settings = load_settings()

    assert settings["timezone"] == "Asia/Tokyo"
    assert settings["always_extension"] is True
    assert settings["project_start"] == 395
    assert settings["project_width"] == 5


def test_explicit_timezone_wins(monkeypatch):
    monkeypatch.setenv("STAMP_TIMEZONE", "Asia/Tokyo")
    assert load_settings("UTC")["timezone"] == "UTC"


@pytest.mark.parametrize("raw", ["0", "false", "no", "off"])
def test_false_booleans(monkeypatch, raw):
    monkeypatch.setenv("STAMP_ALWAYS_EXTENSION", raw)
    assert load_settings()["always_extension"] is False


@pytest.mark.parametrize("raw", ["abc", "1.5", "0", "-4"])
def test_bad_project_start(monkeypatch, raw):
    monkeypatch.setenv("STAMP_PROJECT_START", raw)
    with pytest.raises(ConfigError):
        load_settings()
