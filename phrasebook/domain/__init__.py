from phrasebook.domain.models import (
    EMPTY_BRANCH,
    Branch,
    ContextWrapper,
    Leaf,
    PhraseNode,
    TranslationRequest,
    build_branch,
)

__all__ = [
    "EMPTY_BRANCH",
    "Branch",
    "ContextWrapper",
    "Leaf",
    "PhraseNode",
    "TranslationRequest",
    "build_branch",
]
