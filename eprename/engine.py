"""Rename engine: turns raw filenames into a validated plan set.

Each file goes through the same steps, once, in scan order::

    Scanned -> Normalized -> EpisodeExtracted | NoMarker
            -> SeasonResolved (maybe via the prompter)
            -> Formatted -> Assembled

Files that end up anywhere but ``Assembled`` are reported as skipped and
never stop the batch. Only the conflict check, run on the complete plan
set, can reject the batch as a whole.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from .cleaner import collapse_separators, normalize_stem
from .config import EngineConfig
from .conflicts import check_conflicts
from .errors import FileError, MalformedExtension, MissingSeason, NoEpisodeMarker
from .formatter import assemble_filename, format_remainder, format_title
from .models import PlanSet, PromptKind, RenamePlan, SkippedFile
from .parser import extract_episode, is_video_file, split_filename
from .patterns import Patterns, compile_patterns

log = logging.getLogger(__name__)


class Prompter(Protocol):
    """Whatever can ask the user for a missing piece of a filename."""

    def ask(
        self,
        kind: PromptKind,
        suggested_default: str | None,
        filename: str,
    ) -> str | None:
        """Return the answer, or None / "" when the user declines."""
        ...


class NullPrompter:
    """Declines every question. Used for non-interactive runs."""

    def ask(self, kind, suggested_default, filename):
        return None


def parse_season_answer(answer: str | None, patterns: Patterns) -> int | None:
    """
    Read a season number out of free text.

    Leading non-digits are ignored so directory names work as answers:
    '2', '02', 'S02' and 'Season 02' all give 2.
    """
    if not answer:
        return None
    match = patterns.digits.search(answer)
    if not match:
        return None
    return int(match.group(0))


@dataclass
class BatchResult:
    """Outcome of planning one batch."""
    plan_set: PlanSet = field(default_factory=PlanSet)
    skipped: list[SkippedFile] = field(default_factory=list)


class RenameEngine:
    """Parses and formats filenames according to an :class:`EngineConfig`."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.patterns = compile_patterns()

    def normalize(self, stem: str) -> str:
        return normalize_stem(stem, self.patterns)

    def is_video_file(self, name: str) -> bool:
        return is_video_file(name, self.config)

    def plan_file(
        self,
        name: str,
        prompter: Prompter | None = None,
        season_default: str | None = None,
        show_default: str | None = None,
    ) -> RenamePlan:
        """
        Compute the target name for one file.

        Args:
            name: Filename (no directory)
            prompter: Asked for a missing season or show title
            season_default: Suggested season answer (parent directory name)
            show_default: Suggested show title (grandparent directory name)

        Returns:
            RenamePlan from *name* to its normalized form

        Raises:
            MalformedExtension: If the file has no extension.
            NoEpisodeMarker: If no marker is found.
            MissingSeason: If the season is missing and was not supplied.
        """
        prompter = prompter or NullPrompter()
        raw = split_filename(name)
        if not raw.extension:
            raise MalformedExtension(name)

        stem = self.normalize(raw.stem)
        log.debug("Normalized %r -> %r", name, stem)

        try:
            parsed = extract_episode(stem, self.patterns)
        except NoEpisodeMarker:
            raise NoEpisodeMarker(name) from None
        log.debug(
            "Extracted: title=%r season=%s episode=%s remainder=%r",
            parsed.show_title_raw, parsed.season, parsed.episode, parsed.remainder_raw,
        )

        season = parsed.season
        if season is None:
            answer = prompter.ask(PromptKind.SEASON, season_default, name)
            season = parse_season_answer(answer, self.patterns)
            if season is None:
                raise MissingSeason(name)
            log.debug("Season %s supplied for %r", season, name)

        title_raw = parsed.show_title_raw
        if not title_raw:
            answer = prompter.ask(PromptKind.SHOW_TITLE, show_default, name)
            title_raw = collapse_separators(answer or "", self.patterns)

        target = assemble_filename(
            format_title(title_raw, self.config.exceptions),
            season,
            parsed.episode,
            format_remainder(parsed.remainder_raw, self.patterns),
            raw.extension,
            filename=name,
        )
        return RenamePlan(source=name, target=target)

    def plan_batch(
        self,
        names: Iterable[str],
        prompter: Prompter | None = None,
        season_default: str | None = None,
        show_default: str | None = None,
    ) -> BatchResult:
        """
        Plan every file of a batch, in the given order.

        Non-video files and files with per-file errors are collected in
        ``skipped``; they never abort the batch.
        """
        result = BatchResult()
        for name in names:
            if not self.is_video_file(name):
                log.debug("Skipping non-video file: %s", name)
                result.skipped.append(SkippedFile(name, "not a video file"))
                continue
            try:
                plan = self.plan_file(name, prompter, season_default, show_default)
            except FileError as e:
                log.info("Skipping %s: %s", name, e.reason)
                result.skipped.append(SkippedFile(name, e.reason, e))
                continue
            log.debug("Planned %s -> %s", plan.source, plan.target)
            result.plan_set.add(plan)
        return result

    def validate(self, plan_set: PlanSet, existing_names: Iterable[str] = ()) -> PlanSet:
        """Run the conflict check over a complete plan set."""
        return check_conflicts(plan_set, existing_names)
