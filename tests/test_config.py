"""Tests for environment-driven translator settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from phrasebook.config import TranslatorSettings, get_settings
from phrasebook.i18n import Translator


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("PHRASEBOOK_DEFAULT_LANGUAGE", raising=False)
    monkeypatch.delenv("PHRASEBOOK_CONTEXT_WRAPPER", raising=False)

    settings = TranslatorSettings(_env_file=None)

    assert settings.default_language == "en"
    assert settings.context_wrapper == "%"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PHRASEBOOK_DEFAULT_LANGUAGE", "es")

    assert get_settings().default_language == "es"


def test_settings_reject_long_wrapper():
    with pytest.raises(ValidationError):
        TranslatorSettings(_env_file=None, context_wrapper=["{", "}", "!"])


def test_translator_from_settings():
    settings = TranslatorSettings(_env_file=None, default_language="es", context_wrapper=["{", "}"])
    translator = Translator.from_settings({"es": {"hi": "Hola {name}"}}, settings=settings)

    assert translator.default_language == "es"
    assert translator.translate("hi", {"name": "Ana"}) == "Hola Ana"


def test_settings_read_wrapper_pair_from_environment(monkeypatch):
    monkeypatch.setenv("PHRASEBOOK_CONTEXT_WRAPPER", '["{", "}"]')

    settings = TranslatorSettings(_env_file=None)

    assert settings.context_wrapper == ["{", "}"]
    translator = Translator.from_settings({"en": {"hi": "Hi {name}"}}, settings=settings)
    assert translator.translate("hi", {"name": "Ana"}) == "Hi Ana"
