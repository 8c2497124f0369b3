#!/usr/bin/env python3
"""
eprename - TV Episode File Renamer

A CLI tool that renames episode files in a directory to
``Show.Name.SxxExx.remainder.ext``.
"""
import argparse
import logging
import sys
from pathlib import Path

from .config import EngineConfig, SettingsManager
from .engine import BatchResult, RenameEngine
from .errors import ConfigError, ConflictError
from .models import PlanSet, PromptKind
from .parser import is_video_file

PROMPT_TEXT = {
    PromptKind.SHOW_TITLE: "Enter Show Name for '{filename}'",
    PromptKind.SEASON: "Enter Season Number (e.g., 1, 02, 15) for '{filename}'",
}


def setup_logging(verbose: bool) -> None:
    """Route engine logs to stderr; DEBUG with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="  [%(levelname)s] %(message)s",
    )


def print_diff(old_name: str, new_name: str, width: int = 0) -> None:
    """Print one proposed rename."""
    print(f"{old_name:<{width}} -> {new_name}")


def print_skip(old_name: str, reason: str) -> None:
    """Print skip message."""
    print(f"  [SKIP] {old_name}")
    print(f"         Reason: {reason}")


class TerminalPrompter:
    """Asks on stdin/stdout.

    The previous answer to a question kind becomes the default for the
    next file, so one answer can be accepted for a whole directory.
    """

    def __init__(self):
        self._last: dict[PromptKind, str] = {}

    def ask(self, kind: PromptKind, suggested_default: str | None, filename: str) -> str | None:
        default = self._last.get(kind) or suggested_default
        text = PROMPT_TEXT[kind].format(filename=filename)
        if default:
            text = f"{text} [Default: {default}]"
        try:
            answer = input(f"{text}: ").strip()
        except EOFError:
            return None
        if not answer:
            answer = default or ""
        if answer:
            self._last[kind] = answer
        return answer or None


class FixedPrompter:
    """Answers from values given on the command line."""

    def __init__(self, show: str | None = None, season: str | None = None):
        self.answers = {PromptKind.SHOW_TITLE: show, PromptKind.SEASON: season}

    def ask(self, kind: PromptKind, suggested_default: str | None, filename: str) -> str | None:
        return self.answers.get(kind)


class ChainPrompter:
    """Tries each prompter in turn until one gives an answer."""

    def __init__(self, *prompters):
        self.prompters = prompters

    def ask(self, kind: PromptKind, suggested_default: str | None, filename: str) -> str | None:
        for prompter in self.prompters:
            answer = prompter.ask(kind, suggested_default, filename)
            if answer:
                return answer
        return None


def find_video_files(directory: Path, config: EngineConfig) -> list[str]:
    """
    Find video files directly inside a directory.

    Args:
        directory: Directory to scan (not recursive)
        config: Supplies the recognized video extensions

    Returns:
        Sorted list of file names
    """
    script = Path(sys.argv[0]).resolve() if sys.argv and sys.argv[0] else None

    names = []
    for item in directory.iterdir():
        if not item.is_file():
            continue
        if script is not None and item.resolve() == script:
            continue
        if is_video_file(item.name, config):
            names.append(item.name)
    return sorted(names)


def directory_defaults(directory: Path) -> tuple[str | None, str | None]:
    """
    Suggested answers taken from the directory layout.

    For ``.../Show Name/Season 02/<cwd>`` returns ('Show Name', 'Season 02').

    Returns:
        Tuple of (show_default, season_default)
    """
    directory = directory.resolve()
    parent = directory.parent
    grandparent = parent.parent
    season_default = parent.name if parent != directory else None
    show_default = grandparent.name if grandparent != parent else None
    return show_default or None, season_default or None


def confirm_proceed(count: int) -> bool:
    """
    Ask user to confirm proceeding with rename.

    Args:
        count: Number of files to rename

    Returns:
        True if user confirms, False otherwise
    """
    while True:
        try:
            response = input(f"\nProceed with renaming {count} files? (y/n): ").strip().lower()
        except EOFError:
            return False
        if response in ('y', 'yes'):
            return True
        if response in ('n', 'no'):
            return False
        print("Please enter 'y' or 'n'.")


def rename_file(source: Path, dest: Path) -> tuple[bool, str | None]:
    """
    Rename a file safely.

    Returns:
        Tuple of (success, error_message)
    """
    # Same file under another case on case-insensitive file systems
    if dest.exists() and not dest.samefile(source):
        return False, "Destination file already exists"
    try:
        source.rename(dest)
    except OSError as e:
        return False, str(e)
    return True, None


def apply_plan(directory: Path, plan_set: PlanSet) -> tuple[int, int]:
    """
    Rename every changed file of a validated plan set.

    Files run in listed order, except that a file moves out of the way
    before another one takes its name.

    Returns:
        Tuple of (renamed_count, error_count)
    """
    renamed = 0
    errors = 0
    for plan in plan_set.apply_order():
        success, error = rename_file(directory / plan.source, directory / plan.target)
        if success:
            print(f"Renamed: '{plan.source}' to '{plan.target}'")
            renamed += 1
        else:
            print(f"Error renaming '{plan.source}' to '{plan.target}': {error}", file=sys.stderr)
            errors += 1
    return renamed, errors


def print_preview(result: BatchResult) -> None:
    for skipped in result.skipped:
        if skipped.error is not None:
            print_skip(skipped.name, skipped.reason)

    changes = result.plan_set.changes()
    if not changes:
        return
    width = max(len(p.source) for p in changes)
    print("\nProposed renames:")
    print("-" * 50)
    for plan in changes:
        print_diff(plan.source, plan.target, width)
    print("-" * 50)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="eprename",
        description="Rename TV episode files to Show.Name.SxxExx.remainder.ext."
    )

    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Directory to process (default: current directory)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be renamed without actually renaming"
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Rename without asking for confirmation"
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Never prompt; files missing a season are skipped"
    )
    parser.add_argument(
        "--season",
        type=str,
        default=None,
        help="Season number for files that only carry an episode marker"
    )
    parser.add_argument(
        "--show",
        type=str,
        default=None,
        help="Show name for files whose name starts with the marker"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: platform settings directory)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed debug information"
    )

    parsed_args = parser.parse_args(args)
    setup_logging(parsed_args.verbose)

    directory = parsed_args.path
    if not directory.is_dir():
        print(f"Error: Not a directory: {directory}")
        return 1

    try:
        config = SettingsManager(parsed_args.config).engine_config()
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    print(f"Scanning directory: {directory.resolve()}")
    names = find_video_files(directory, config)
    if not names:
        print("No eligible video files found to process in this directory.")
        return 0

    prompters = [FixedPrompter(parsed_args.show, parsed_args.season)]
    if not parsed_args.no_prompt:
        prompters.append(TerminalPrompter())
    show_default, season_default = directory_defaults(directory)

    engine = RenameEngine(config)
    result = engine.plan_batch(
        names,
        ChainPrompter(*prompters),
        season_default=season_default,
        show_default=show_default,
    )
    print_preview(result)

    plan_set = result.plan_set
    if not plan_set.changes():
        print("\nNo files need renaming based on the current rules and inputs.")
        return 0

    existing = [item.name for item in directory.iterdir()]
    try:
        engine.validate(plan_set, existing)
    except ConflictError as e:
        print("\nWarning: Potential conflicts detected!", file=sys.stderr)
        for conflict in e.conflicts:
            print(f"- {conflict.describe()}", file=sys.stderr)
        print("Please resolve conflicts before proceeding.", file=sys.stderr)
        return 1

    if parsed_args.dry_run:
        print(f"Would rename: {len(plan_set.changes())} files")
        return 0

    if not parsed_args.yes and not confirm_proceed(len(plan_set.changes())):
        print("Renaming cancelled by user.")
        return 0

    print("\nRenaming files...")
    renamed, errors = apply_plan(directory, plan_set)
    print("-" * 50)
    print(f"Renaming complete. {renamed} succeeded, {errors} failed.")

    return 0 if errors == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
