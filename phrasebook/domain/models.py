"""Data structures shared by the store, resolver and interpolator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True, slots=True)
class Leaf:
    """A translatable phrase."""

    text: str


@dataclass(frozen=True, slots=True)
class Branch:
    """A namespace addressed by one segment of a dotted path."""

    children: Mapping[str, "PhraseNode"] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, segment: str) -> PhraseNode | None:
        return self.children.get(segment)

    def merged(self, other: Branch) -> Branch:
        """Return a branch where ``other``'s top-level keys replace ours."""

        return Branch(MappingProxyType({**self.children, **other.children}))

    def to_dict(self) -> dict[str, Any]:
        """Plain nested copy; entries that were neither phrase nor mapping are left out."""

        return {
            key: node.text if isinstance(node, Leaf) else node.to_dict()
            for key, node in self.children.items()
            if node is not EMPTY_BRANCH
        }


PhraseNode = Union[Leaf, Branch]

EMPTY_BRANCH = Branch()


def _build_node(value: Any) -> PhraseNode:
    if isinstance(value, str):
        return Leaf(value)
    if isinstance(value, Mapping):
        return build_branch(value)
    # Neither phrase nor namespace: resolves like a missing key and is left
    # out of snapshots.
    return EMPTY_BRANCH


def build_branch(table: Mapping[Any, Any]) -> Branch:
    """Copy a caller's nested mapping into an immutable node tree."""

    return Branch(MappingProxyType({str(key): _build_node(value) for key, value in table.items()}))


class ContextWrapper(BaseModel):
    """Delimiters placed around a context key to form a placeholder."""

    model_config = ConfigDict(frozen=True)

    opening: str = ""
    closing: str = ""

    @classmethod
    def from_value(cls, value: str | Sequence[str] | ContextWrapper) -> ContextWrapper:
        if isinstance(value, ContextWrapper):
            return value
        if isinstance(value, str):
            return cls(opening=value, closing=value)
        items = list(value)
        opening = str(items[0]) if len(items) > 0 else ""
        closing = str(items[1]) if len(items) > 1 else ""
        return cls(opening=opening, closing=closing)

    def wrap(self, key: Any) -> str:
        return f"{self.opening}{key}{self.closing}"


@dataclass(frozen=True, slots=True)
class TranslationRequest:
    text: str
    context: Mapping[Any, Any]
    language: str
