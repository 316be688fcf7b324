from __future__ import annotations
from typing import Dict, Type

# Language tag used when callers do not pass one.
DEFAULT_LANGUAGE = "en"

# ---- Global checker registry ----
REGISTRY: Dict[str, Type["BaseChecker"]] = {}


def register(cls: Type["BaseChecker"]) -> Type["BaseChecker"]:
    """
    Decorator: @register on a checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that spell checkers inherit ----
class BaseChecker:
    id = "base"
    name = "Base"

    def is_misspelled(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")

    def require_language(self, language: str) -> None:
        """Raise ValueError if this checker cannot check `language`."""

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        return not self.is_misspelled(word, language)
