from __future__ import annotations
import random
from typing import Dict, List, Optional, Sequence, Type

# ---- Global starter-strategy registry ----
REGISTRY: Dict[str, Type["BaseStarter"]] = {}


def register(cls: Type["BaseStarter"]) -> Type["BaseStarter"]:
    """
    Decorator: @register on a starter class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate starter id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that starter strategies inherit ----
class BaseStarter:
    id = "base"

    def __init__(self):
        self.words: Sequence[str] = ()
        self.rng = random.Random()

    def reset(self, *, words: Sequence[str], rng: Optional[random.Random] = None) -> None:
        self.words = words
        if rng is not None:
            self.rng = rng

    def suggest(self, count: int = 5) -> List[str]:
        raise NotImplementedError("Override in subclass")
