"""Shared pytest fixtures for translator tests."""

from __future__ import annotations

import pytest

from phrasebook.config import get_settings
from phrasebook.i18n import Translator


@pytest.fixture
def week_translations() -> dict:
    return {
        "en": {
            "days": {"monday": "monday", "tuesday": "tuesday"},
            "phrases": {"today_is": "Today is %day%"},
            "greeting": "Hello",
        },
        "es": {
            "days": {"monday": "lunes", "tuesday": "martes"},
            "phrases": {"today_is": "Hoy es %day%"},
            "greeting": "Hola",
        },
    }


@pytest.fixture
def translator(week_translations) -> Translator:
    return Translator(week_translations)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
