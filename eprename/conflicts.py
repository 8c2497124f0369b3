"""Batch-level conflict detection for a full set of rename plans."""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from .errors import ConflictError
from .models import PlanSet

log = logging.getLogger(__name__)


@dataclass
class Conflict:
    """One target name that cannot be used."""
    target: str
    sources: list[str] = field(default_factory=list)
    # True when the target exists on disk and is not part of the batch
    exists: bool = False
    # True when the sources rename into each other in a loop
    cycle: bool = False

    def describe(self) -> str:
        if self.cycle:
            loop = " -> ".join(self.sources + self.sources[:1])
            return f"Files would swap names in a cycle: {loop}"
        if self.exists:
            return f"Target '{self.target}' already exists and is not being renamed."
        return f"Multiple files would be renamed to '{self.target}': {self.sources}"


def _find_cycles(plan_set: PlanSet) -> list[list[str]]:
    moves = {p.source: p.target for p in plan_set.changes()}
    cycles = []
    visited: set[str] = set()
    for start in moves:
        if start in visited:
            continue
        path = [start]
        current = moves[start]
        while current in moves and current not in path and current not in visited:
            path.append(current)
            current = moves[current]
        visited.update(path)
        if current in path:
            cycles.append(path[path.index(current):])
    return cycles


def find_conflicts(plan_set: PlanSet, existing_names: Iterable[str] = ()) -> list[Conflict]:
    """
    List every conflict in a plan set without raising.

    Args:
        plan_set: All plans of the batch
        existing_names: Names currently present in the directory

    Returns:
        Duplicate targets first (in plan order), then targets that would
        overwrite a file outside the batch, then renames that loop back
        onto each other.
    """
    sources = set(plan_set.sources())
    existing = set(existing_names)
    counts = Counter(plan_set.targets())

    conflicts: list[Conflict] = []
    seen: set[str] = set()
    for plan in plan_set:
        if counts[plan.target] > 1 and plan.target not in seen:
            seen.add(plan.target)
            conflicts.append(Conflict(
                target=plan.target,
                sources=[p.source for p in plan_set if p.target == plan.target],
            ))

    seen.clear()
    for plan in plan_set:
        if plan.target in existing and plan.target not in sources and plan.target not in seen:
            seen.add(plan.target)
            conflicts.append(Conflict(
                target=plan.target,
                sources=[p.source for p in plan_set if p.target == plan.target],
                exists=True,
            ))

    for cycle in _find_cycles(plan_set):
        conflicts.append(Conflict(target=cycle[0], sources=cycle, cycle=True))

    return conflicts


def check_conflicts(plan_set: PlanSet, existing_names: Iterable[str] = ()) -> PlanSet:
    """
    Validate a plan set before anything is renamed.

    Returns:
        The same plan set, unchanged, when there is no conflict

    Raises:
        ConflictError: With every conflict found. Nothing may be applied.
    """
    conflicts = find_conflicts(plan_set, existing_names)
    if conflicts:
        for conflict in conflicts:
            log.warning("Conflict: %s", conflict.describe())
        raise ConflictError(conflicts)
    return plan_set
