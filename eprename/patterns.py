"""Compiled regular expressions used by the tokenizer and extractor.

The patterns are compiled once by :func:`compile_patterns` and handed to
the functions that need them, so nothing here is module-level state.
"""
import re
from dataclasses import dataclass

# S01E02 / s1e2 / S01E123; a fourth digit means it is not a marker
SEASON_EPISODE = r'S(\d{1,3})E(\d{1,3})(?!\d)'

# E05 at the start of a token (not the "e5" in "Lie5")
EPISODE_ONLY = r'(?<![A-Za-z])E(\d{1,3})(?!\d)'

# "-Group[Source]" at the very end of the stem; the bracket tag is required
# so hyphenated tags like "WEB-DL" stay in the remainder
RELEASE_SUFFIX = r'-([^-\[\]]+)\[[^\]]*\]$'

WHITESPACE = r'\s+'
DOTS = r'\.{2,}'
DIGITS = r'\d+'


@dataclass(frozen=True)
class Patterns:
    """Immutable bundle of compiled patterns."""
    season_episode: re.Pattern
    episode_only: re.Pattern
    release_suffix: re.Pattern
    whitespace: re.Pattern
    dots: re.Pattern
    digits: re.Pattern


def compile_patterns() -> Patterns:
    return Patterns(
        season_episode=re.compile(SEASON_EPISODE, re.IGNORECASE),
        episode_only=re.compile(EPISODE_ONLY, re.IGNORECASE),
        release_suffix=re.compile(RELEASE_SUFFIX),
        whitespace=re.compile(WHITESPACE),
        dots=re.compile(DOTS),
        digits=re.compile(DIGITS),
    )
