"""Shared fixtures for the eprename tests."""
import pytest

from eprename.config import EngineConfig
from eprename.engine import RenameEngine
from eprename.models import PromptKind
from eprename.patterns import compile_patterns


class FakePrompter:
    """Scripted prompter: answers from a dict and records every question."""

    def __init__(self, answers=None):
        self.answers = answers or {}
        self.calls = []

    def ask(self, kind, suggested_default, filename):
        self.calls.append((kind, suggested_default, filename))
        return self.answers.get(kind)


@pytest.fixture
def patterns():
    """Fixture providing compiled patterns."""
    return compile_patterns()


@pytest.fixture
def config():
    """Fixture providing the default engine configuration."""
    return EngineConfig()


@pytest.fixture
def engine(config):
    """Fixture providing a RenameEngine with default configuration."""
    return RenameEngine(config)


@pytest.fixture
def season_prompter():
    """Prompter that answers season 2 and declines show titles."""
    return FakePrompter({PromptKind.SEASON: "2"})
