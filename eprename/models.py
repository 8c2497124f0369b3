"""Data models for the eprename package."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class PromptKind(Enum):
    """What the engine is asking the user for."""
    SHOW_TITLE = "show_title"
    SEASON = "season"


@dataclass(frozen=True)
class RawFilename:
    """A filename as found on disk, split into stem and extension.

    The extension keeps its original case. It is empty when the name has
    no dot, ends with a dot, or only starts with one (``.hidden``).
    """
    name: str

    @property
    def stem(self) -> str:
        stem, _, _ = self.name.rpartition(".")
        if not stem:
            return self.name
        return stem

    @property
    def extension(self) -> str:
        stem, _, ext = self.name.rpartition(".")
        if not stem:
            return ""
        return ext


@dataclass
class ParsedEpisode:
    """Pieces extracted from a normalized stem."""
    show_title_raw: str
    episode: int
    season: int | None = None
    remainder_raw: str = ""

    @property
    def needs_season(self) -> bool:
        return self.season is None


@dataclass(frozen=True)
class RenamePlan:
    """One proposed rename inside a directory."""
    source: str
    target: str

    @property
    def is_noop(self) -> bool:
        return self.source == self.target


@dataclass
class PlanSet:
    """Ordered batch of rename plans for one run."""
    plans: list[RenamePlan] = field(default_factory=list)

    def add(self, plan: RenamePlan) -> None:
        self.plans.append(plan)

    def sources(self) -> list[str]:
        return [p.source for p in self.plans]

    def targets(self) -> list[str]:
        return [p.target for p in self.plans]

    def changes(self) -> list[RenamePlan]:
        """Plans that actually rename something."""
        return [p for p in self.plans if not p.is_noop]

    def apply_order(self) -> list[RenamePlan]:
        """
        Changed plans in the order they can be applied.

        A plan whose target is still the source of another pending plan waits
        until that file has moved, so ``a -> b, b -> c`` runs ``b`` first.
        Plans caught in a cycle are appended in listed order.
        """
        pending = self.changes()
        ordered: list[RenamePlan] = []
        while pending:
            sources = {p.source for p in pending}
            ready = [p for p in pending if p.target not in sources]
            if not ready:
                ordered.extend(pending)
                break
            ordered.extend(ready)
            pending = [p for p in pending if p.target in sources]
        return ordered

    def __iter__(self) -> Iterator[RenamePlan]:
        return iter(self.plans)

    def __len__(self) -> int:
        return len(self.plans)


@dataclass
class SkippedFile:
    """A file left out of the plan, with the reason shown to the user."""
    name: str
    reason: str
    error: Exception | None = None
