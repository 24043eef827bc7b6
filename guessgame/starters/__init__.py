from __future__ import annotations
import random
from typing import List, Optional, Sequence

from .base import BaseStarter, REGISTRY, register
from . import greedy  # noqa: F401
from . import curated  # noqa: F401
from .curated import CURATED_SETS, load_table

DEFAULT_STARTER = "greedy"


def create_starter(starter_id: str, **kwargs) -> BaseStarter:
    """
    Factory: instantiate a registered starter strategy by id.
    """
    try:
        cls = REGISTRY[starter_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown starter id: {starter_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_starter_ids() -> List[str]:
    """
    Return all registered starter ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def suggest(
        words: Sequence[str],
        *,
        strategy: str = DEFAULT_STARTER,
        rng: Optional[random.Random] = None,
        count: int = 5,
        **kwargs,
) -> List[str]:
    """
    Cold-start suggestions: a short set of words with disjoint letters.

    Each call gets its own starter instance; pass a seeded `rng` for
    reproducible picks. Raises ValueError if `count` is below 1.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    starter = create_starter(strategy, **kwargs)
    starter.reset(words=words, rng=rng if rng is not None else random.Random())
    return starter.suggest(count)
