"""Stem normalization: release-group removal and separator collapsing.

The parser works on the output of :func:`normalize_stem`, so every rule
applied here shapes what the extractor sees. Normalization is idempotent:
running it on an already-normalized stem returns the same string.
"""
from .patterns import Patterns


def _has_marker(text: str, patterns: Patterns) -> bool:
    return bool(
        patterns.season_episode.search(text) or patterns.episode_only.search(text)
    )


def strip_release_suffix(stem: str, patterns: Patterns) -> str:
    """Drop one trailing ``-Group[Source]`` segment.

    A segment holding the season/episode marker is never dropped.

    For "show.s01e02.h264-sylix[EZTVx.to]" returns "show.s01e02.h264"
    """
    match = patterns.release_suffix.search(stem)
    if not match or _has_marker(match.group(1), patterns):
        return stem
    return stem[:match.start()].rstrip()


def collapse_separators(text: str, patterns: Patterns) -> str:
    """Turn whitespace runs and repeated dots into single dots.

    Separators at either end are trimmed.
    """
    text = patterns.whitespace.sub(".", text.strip())
    text = patterns.dots.sub(".", text)
    return text.strip(".")


def normalize_stem(stem: str, patterns: Patterns) -> str:
    """Full tokenizer pass over a filename stem.

    Each strip removes one bracketed segment, so a name carrying two
    (``-a[x]-b[y]``) takes two passes before the result is stable.
    """
    stem = collapse_separators(stem, patterns)
    while True:
        stripped = strip_release_suffix(stem, patterns)
        if stripped == stem:
            return stem
        stem = collapse_separators(stripped, patterns)
