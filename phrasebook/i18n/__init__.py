from phrasebook.i18n.interpolation import Stringable, interpolate, is_renderable
from phrasebook.i18n.resolution import resolve
from phrasebook.i18n.translator import Translator

__all__ = ["Stringable", "Translator", "interpolate", "is_renderable", "resolve"]
