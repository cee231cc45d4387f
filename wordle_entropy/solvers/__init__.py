from __future__ import annotations
from typing import List, Optional
from .base import BaseSolver, REGISTRY, register

# importing a strategy module registers it
from . import random_consistent  # noqa: F401
from . import entropy  # noqa: F401


def create_solver(solver_id: str, *, seed: Optional[int] = None) -> BaseSolver:
    """Instantiate a registered strategy by id, optionally seeding its RNG."""
    if solver_id not in REGISTRY:
        raise ValueError(f"Unknown solver id: {solver_id}. Available: {get_solver_ids()}")
    solver = REGISTRY[solver_id]()
    solver.reset(seed=seed)
    return solver


def get_solver_ids() -> List[str]:
    return sorted(REGISTRY)


__all__ = ["BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids"]
