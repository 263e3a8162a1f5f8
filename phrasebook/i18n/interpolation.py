"""Placeholder substitution for resolved phrases."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from phrasebook.domain.models import ContextWrapper
from phrasebook.logging import logger

SCALAR_TYPES = (str, int, float, complex, bool, type(None))
COLLECTION_TYPES = (list, tuple, dict, set, frozenset, Mapping)


@runtime_checkable
class Stringable(Protocol):
    def __str__(self) -> str: ...


def is_renderable(value: Any) -> bool:
    """Scalars and objects with their own ``__str__``; never collections."""

    if isinstance(value, COLLECTION_TYPES):
        return False
    if isinstance(value, SCALAR_TYPES):
        return True
    # Every object satisfies Stringable through object.__str__, which only
    # prints a repr; require an override.
    return isinstance(value, Stringable) and type(value).__str__ is not object.__str__


def render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        # 2.0 renders as "2", like an integral number would.
        return str(int(value))
    return str(value)


def interpolate(message: str, context: Mapping[Any, Any], wrapper: ContextWrapper) -> str:
    """Replace every placeholder found in ``context`` in a single pass.

    Tokens are matched longest first at each position and replacement
    values are not scanned again.
    """

    replacements: dict[str, str] = {}
    for key, value in context.items():
        if not is_renderable(value):
            logger.debug("context_value_skipped", placeholder=str(key), value_type=type(value).__name__)
            continue
        token = wrapper.wrap(key)
        if token:
            replacements[token] = render(value)

    if not replacements:
        return message

    tokens = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: replacements[match.group(0)], message)


__all__ = ["Stringable", "interpolate", "is_renderable", "render"]
