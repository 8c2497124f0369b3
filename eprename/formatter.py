"""Formatter module for generating final file names."""
from .cleaner import collapse_separators
from .errors import MalformedExtension, MissingSeason
from .patterns import Patterns


def format_title(title_raw: str, exceptions: frozenset[str]) -> str:
    """
    Title-case a dot separated show name.

    Every word gets a capital first letter and lowercase rest, except
    words in *exceptions*, which stay lowercase unless they open the title.

    Args:
        title_raw: Raw show title (dot separated, any case)
        exceptions: Lowercase words kept lowercase mid-title

    Returns:
        Formatted title, e.g. 'Sun.Wars.Tales.of.the.Oveworld'
    """
    words = [w for w in title_raw.split(".") if w]
    formatted = []
    for i, word in enumerate(words):
        lowered = word.lower()
        if i > 0 and lowered in exceptions:
            formatted.append(lowered)
        else:
            formatted.append(word[:1].upper() + word[1:].lower())
    return ".".join(formatted)


def format_remainder(remainder_raw: str, patterns: Patterns) -> str:
    """Lowercase the tags after the marker, dot separated."""
    return collapse_separators(remainder_raw, patterns).lower()


def format_episode_code(season: int, episode: int) -> str:
    """
    Format season and episode numbers.

    Numbers are padded to two digits; wider numbers keep all their digits.

    Returns:
        Formatted episode code (e.g., 'S01E04', 'S02E123')
    """
    return f"S{season:02d}E{episode:02d}"


def assemble_filename(
    title: str,
    season: int | None,
    episode: int,
    remainder: str,
    extension: str,
    filename: str = ""
) -> str:
    """
    Build ``Title.SxxExx.remainder.ext``.

    Empty title or remainder segments are left out together with their dot.

    Args:
        title: Formatted title
        season: Resolved season number
        episode: Episode number
        remainder: Formatted remainder
        extension: Original extension, without the dot, case preserved
        filename: Source filename, used in error messages

    Raises:
        MissingSeason: If the season was never resolved.
        MalformedExtension: If there is no extension.
    """
    if season is None:
        raise MissingSeason(filename)
    if not extension:
        raise MalformedExtension(filename)

    parts = [title, format_episode_code(season, episode), remainder]
    stem = ".".join(p for p in parts if p)
    return f"{stem}.{extension}"
