"""Dotted-path lookup through a language's phrase tree."""

from __future__ import annotations

from phrasebook.domain.models import EMPTY_BRANCH, Branch, Leaf, PhraseNode

PATH_SEPARATOR = "."


def resolve(root: Branch, text: str) -> str | None:
    """Return the phrase ``text`` points at, or ``None`` when nothing matches.

    The walk stops at the first leaf it meets, so segments left over after a
    phrase are ignored: with ``{"a": {"b": "X"}}`` both ``"a.b"`` and
    ``"a.b.c"`` resolve to ``"X"``.
    """

    node: PhraseNode = root
    for segment in text.split(PATH_SEPARATOR):
        child = node.get(segment) if isinstance(node, Branch) else None
        node = child if child is not None else EMPTY_BRANCH
        if isinstance(node, Leaf):
            return node.text
    return None


__all__ = ["PATH_SEPARATOR", "resolve"]
