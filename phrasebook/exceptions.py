"""Translator exceptions.

Lookups never raise; these cover callers handing in data of the wrong type.
"""


class TranslatorError(Exception):
    pass


class InvalidTranslations(TranslatorError):
    pass
