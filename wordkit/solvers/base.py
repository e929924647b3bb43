from __future__ import annotations
import logging
import random
from typing import Dict, Iterator, Optional, Type

from .cryptarithm import Cryptarithm

log = logging.getLogger(__name__)

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    log.debug("registered solver %s (%s)", sid, cls.__name__)
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()
        self.stats: Dict[str, int] = {}

    def reset(self, *, seed: int | None = None) -> None:
        self.stats = {}
        if seed is not None:
            self.rng.seed(seed)

    def solve(self, puzzle: Cryptarithm, limit: Optional[int] = None) -> Iterator[Dict[str, int]]:
        """Yield letter -> digit assignments, at most `limit` of them."""
        raise NotImplementedError("Override in subclass")
