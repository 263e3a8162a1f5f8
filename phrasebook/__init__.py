"""Key-based text translation over nested, in-memory phrase tables."""

from phrasebook.config import TranslatorSettings, get_settings
from phrasebook.domain.models import ContextWrapper
from phrasebook.exceptions import InvalidTranslations, TranslatorError
from phrasebook.i18n import Stringable, Translator, interpolate, resolve

__all__ = [
    "ContextWrapper",
    "InvalidTranslations",
    "Stringable",
    "Translator",
    "TranslatorError",
    "TranslatorSettings",
    "get_settings",
    "interpolate",
    "resolve",
]
