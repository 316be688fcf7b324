from __future__ import annotations
from typing import List
from .base import DEFAULT_LANGUAGE, BaseChecker, REGISTRY, register

from . import wordfreq_checker  # noqa: F401
from . import wordlist_checker  # noqa: F401


def create_checker(checker_id: str, **kwargs) -> BaseChecker:
    """
    Factory: instantiate a registered spell checker by id.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_checker_ids() -> List[str]:
    """
    Return all registered checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
