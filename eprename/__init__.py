"""
eprename - TV Episode File Renamer

Renames episode files to ``Show.Name.SxxExx.remainder.ext``.
"""
from .models import (
    RawFilename,
    ParsedEpisode,
    RenamePlan,
    PlanSet,
    SkippedFile,
    PromptKind,
)
from .config import EngineConfig, SettingsManager
from .errors import (
    RenamerError,
    ConfigError,
    NoEpisodeMarker,
    MissingSeason,
    MalformedExtension,
    ConflictError,
)
from .parser import extract_episode, is_video_file, split_filename
from .formatter import (
    format_title,
    format_remainder,
    format_episode_code,
    assemble_filename,
)
from .conflicts import Conflict, check_conflicts, find_conflicts
from .engine import RenameEngine, Prompter, NullPrompter, BatchResult

__version__ = "0.1.0"
__all__ = [
    "RawFilename",
    "ParsedEpisode",
    "RenamePlan",
    "PlanSet",
    "SkippedFile",
    "PromptKind",
    "EngineConfig",
    "SettingsManager",
    "RenamerError",
    "ConfigError",
    "NoEpisodeMarker",
    "MissingSeason",
    "MalformedExtension",
    "ConflictError",
    "extract_episode",
    "is_video_file",
    "split_filename",
    "format_title",
    "format_remainder",
    "format_episode_code",
    "assemble_filename",
    "Conflict",
    "check_conflicts",
    "find_conflicts",
    "RenameEngine",
    "Prompter",
    "NullPrompter",
    "BatchResult",
]
