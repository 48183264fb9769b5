"""Environment-driven configuration defaults."""

from __future__ import annotations

import importlib

import pytest

import src.config.settings as settings_module

ENV_KEYS = [
    "LEXICON_PATH",
    "SENTIMENT_NEGATION",
    "SENTIMENT_PRECISION",
    "MODERATION_THRESHOLD",
    "HOST",
    "PORT",
    "ALLOW_ORIGINS",
]


@pytest.fixture
def reload_settings(monkeypatch: pytest.MonkeyPatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(settings_module)

    yield _reload

    monkeypatch.undo()
    importlib.reload(settings_module)


def test_defaults(reload_settings) -> None:
    settings = reload_settings()

    assert settings.CONFIG["SENTIMENT"] == {
        "lexicon_path": "",
        "negation": True,
        "precision": 4,
        "moderation_threshold": -3.0,
    }
    assert settings.CONFIG["WEB"]["port"] == 5000
    assert settings.CONFIG["WEB"]["allow_origins"] == ["*"]


def test_environment_overrides(reload_settings) -> None:
    settings = reload_settings(
        LEXICON_PATH="/srv/afinn.tsv",
        SENTIMENT_NEGATION="off",
        SENTIMENT_PRECISION="2",
        MODERATION_THRESHOLD="-5",
        PORT="8080",
        ALLOW_ORIGINS="https://app.example, http://localhost:19006 ,",
    )

    sentiment = settings.CONFIG["SENTIMENT"]
    assert sentiment["lexicon_path"] == "/srv/afinn.tsv"
    assert sentiment["negation"] is False
    assert sentiment["precision"] == 2
    assert sentiment["moderation_threshold"] == -5.0
    assert settings.CONFIG["WEB"]["port"] == 8080
    assert settings.CONFIG["WEB"]["allow_origins"] == [
        "https://app.example",
        "http://localhost:19006",
    ]
