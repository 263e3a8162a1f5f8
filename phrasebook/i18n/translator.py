"""In-memory translator over nested per-language phrase tables."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from phrasebook.config import TranslatorSettings, get_settings
from phrasebook.domain.models import EMPTY_BRANCH, Branch, ContextWrapper, TranslationRequest, build_branch
from phrasebook.exceptions import InvalidTranslations
from phrasebook.i18n.interpolation import interpolate
from phrasebook.i18n.resolution import resolve
from phrasebook.logging import logger


def _ensure_language(language: Any) -> str:
    if not isinstance(language, str):
        raise InvalidTranslations(f"Language code must be a string, got {type(language).__name__}.")
    return language


def _ensure_table(translations: Any, language: str | None = None) -> Mapping[Any, Any]:
    if not isinstance(translations, Mapping):
        target = f" for language {language!r}" if language is not None else ""
        raise InvalidTranslations(
            f"Translations{target} must be a mapping, got {type(translations).__name__}."
        )
    return translations


class Translator:
    """Resolve dotted keys to phrases and fill in their placeholders.

    ``translations`` maps a language code to a (possibly nested) mapping of
    phrases::

        translator = Translator(
            {
                "en": {"days": {"monday": "monday"}, "today_is": "Today is {day}"},
                "es": {"days": {"monday": "lunes"}, "today_is": "Hoy es {day}"},
            },
            context_wrapper=["{", "}"],
        )
        translator.translate("today_is", {"day": translator.translate("days.monday", "es")}, "es")
        # 'Hoy es lunes'

    A key that cannot be resolved is returned as given, so a missing phrase
    never breaks the caller.
    """

    def __init__(
        self,
        translations: Mapping[str, Mapping[str, Any]] | None = None,
        default_language: str = "en",
        context_wrapper: str | Sequence[str] | ContextWrapper = "%",
    ) -> None:
        self._store: dict[str, Branch] = {}
        for language, table in _ensure_table(translations or {}).items():
            # A language whose table is not a mapping has nothing to resolve.
            self._store[str(language)] = build_branch(table) if isinstance(table, Mapping) else EMPTY_BRANCH
        self._default_language = _ensure_language(default_language)
        self._context_wrapper = ContextWrapper.from_value(context_wrapper)

    @classmethod
    def from_settings(
        cls,
        translations: Mapping[str, Mapping[str, Any]] | None = None,
        settings: TranslatorSettings | None = None,
    ) -> Translator:
        settings = settings or get_settings()
        return cls(
            translations,
            default_language=settings.default_language,
            context_wrapper=settings.context_wrapper,
        )

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def context_wrapper(self) -> ContextWrapper:
        return self._context_wrapper

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._store)

    @property
    def translations(self) -> dict[str, dict[str, Any]]:
        """Plain-dict copy of the store; editing it leaves the translator untouched."""

        return {language: branch.to_dict() for language, branch in self._store.items()}

    def set_default_language(self, language: str) -> None:
        language = _ensure_language(language)
        logger.debug("default_language_changed", previous=self._default_language, language=language)
        self._default_language = language

    def add_translations(self, language: str, translations: Mapping[str, Any]) -> None:
        """Merge ``translations`` into ``language``, creating it when missing.

        Only top-level keys are merged: a new nested mapping replaces the old
        one under the same key instead of being combined with it.
        """

        language = _ensure_language(language)
        incoming = build_branch(_ensure_table(translations, language))
        current = self._store.get(language, EMPTY_BRANCH)
        self._store[language] = current.merged(incoming)
        logger.debug("translations_added", language=language, keys=len(incoming.children))

    def translate(
        self,
        text: str,
        context_or_language: Mapping[str, Any] | str | None = None,
        language: str | Mapping[str, Any] | None = None,
    ) -> str:
        """Translate ``text``.

        The second and third arguments are told apart by type: a string is
        the language, a mapping is the context. When both positions carry
        the same kind, the third one wins. Anything else is ignored.
        """

        return self._render(self._parse_arguments(text, context_or_language, language))

    def translate_with_language(self, text: str, language: str) -> str:
        return self._render(TranslationRequest(text=text, context={}, language=language))

    def translate_with_context(self, text: str, context: Mapping[str, Any]) -> str:
        return self._render(TranslationRequest(text=text, context=context, language=self._default_language))

    def translate_with_context_and_language(
        self, text: str, context: Mapping[str, Any], language: str
    ) -> str:
        return self._render(TranslationRequest(text=text, context=context, language=language))

    def _parse_arguments(self, text: str, context_or_language: Any, language: Any) -> TranslationRequest:
        resolved_context: Mapping[Any, Any] = {}
        resolved_language = self._default_language

        if isinstance(context_or_language, str):
            resolved_language = context_or_language
        elif isinstance(context_or_language, Mapping):
            resolved_context = context_or_language

        if isinstance(language, str):
            resolved_language = language
        elif isinstance(language, Mapping):
            resolved_context = language

        return TranslationRequest(text=text, context=resolved_context, language=resolved_language)

    def _render(self, request: TranslationRequest) -> str:
        root = self._store.get(request.language, EMPTY_BRANCH)
        message = resolve(root, request.text)
        if message is None:
            logger.debug("translation_missing", text=request.text, language=request.language)
            message = request.text
        return interpolate(message, request.context, self._context_wrapper)


__all__ = ["Translator"]
