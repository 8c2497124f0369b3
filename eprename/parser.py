"""Parser module for extracting season/episode information from file names."""
import re

from .config import EngineConfig
from .errors import NoEpisodeMarker
from .models import ParsedEpisode, RawFilename
from .patterns import Patterns


def split_filename(name: str) -> RawFilename:
    """Wrap a plain filename so stem and extension can be read off it."""
    return RawFilename(name)


def is_video_file(name: str, config: EngineConfig) -> bool:
    """Check if file is a video file based on extension (any case)."""
    extension = split_filename(name).extension
    return bool(extension) and extension.lower() in config.video_extensions


def _trim(segment: str) -> str:
    # "Show-S01E02-720p" leaves a hyphen on either side of the marker
    return segment.strip(". -")


def _parsed(stem: str, match: re.Match, season: int | None, episode: int) -> ParsedEpisode:
    return ParsedEpisode(
        show_title_raw=_trim(stem[:match.start()]),
        season=season,
        episode=episode,
        remainder_raw=_trim(stem[match.end():]),
    )


def extract_episode(stem: str, patterns: Patterns) -> ParsedEpisode:
    """
    Locate the season/episode marker in a normalized stem.

    Tries ``SxxExx`` first, then a bare ``Exx``. A bare episode marker
    yields ``season=None``; the caller has to supply the season.

    Args:
        stem: Normalized filename stem (no extension)
        patterns: Compiled patterns

    Returns:
        ParsedEpisode with raw title and remainder around the marker

    Raises:
        NoEpisodeMarker: If neither marker is present.
    """
    match = patterns.season_episode.search(stem)
    if match:
        return _parsed(stem, match, int(match.group(1)), int(match.group(2)))

    match = patterns.episode_only.search(stem)
    if match:
        return _parsed(stem, match, None, int(match.group(1)))

    raise NoEpisodeMarker(stem)
