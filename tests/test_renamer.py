#!/usr/bin/env python3
"""Tests for the command-line front end."""

import pytest

from eprename.models import PlanSet, PromptKind, RenamePlan
from eprename.renamer import (
    ChainPrompter,
    FixedPrompter,
    TerminalPrompter,
    apply_plan,
    confirm_proceed,
    directory_defaults,
    find_video_files,
    main,
)


def touch(directory, *names):
    for name in names:
        (directory / name).write_text("", encoding="utf-8")


def scripted_input(monkeypatch, *answers):
    """Feed answers to input(); EOFError once they run out."""
    answers = list(answers)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        if not answers:
            raise EOFError
        return answers.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


@pytest.fixture
def settings_file(tmp_path):
    """Settings path that does not exist, so defaults apply."""
    return str(tmp_path / "config" / "settings.json")


@pytest.fixture
def media_dir(tmp_path):
    directory = tmp_path / "Sun Wars" / "Season 01" / "download"
    directory.mkdir(parents=True)
    return directory


def run(media_dir, settings_file, *extra):
    return main([str(media_dir), "--config", settings_file, *extra])


class TestHelpers:
    """Scanner, defaults and prompts."""

    def test_find_video_files(self, media_dir, config):
        touch(media_dir, "b.s01e02.mkv", "a.s01e01.MP4", "notes.txt")
        (media_dir / "extras.mkv").mkdir()
        assert find_video_files(media_dir, config) == ["a.s01e01.MP4", "b.s01e02.mkv"]

    def test_directory_defaults(self, media_dir):
        assert directory_defaults(media_dir) == ("Sun Wars", "Season 01")

    def test_terminal_prompter_uses_default(self, monkeypatch):
        prompts = scripted_input(monkeypatch, "")
        answer = TerminalPrompter().ask(PromptKind.SEASON, "Season 01", "show.e01.mkv")
        assert answer == "Season 01"
        assert "[Default: Season 01]" in prompts[0]

    def test_terminal_prompter_remembers_answer(self, monkeypatch):
        prompts = scripted_input(monkeypatch, "3", "")
        prompter = TerminalPrompter()
        assert prompter.ask(PromptKind.SEASON, "Season 01", "show.e01.mkv") == "3"
        assert prompter.ask(PromptKind.SEASON, "Season 01", "show.e02.mkv") == "3"
        assert "[Default: 3]" in prompts[1]

    def test_terminal_prompter_eof_declines(self, monkeypatch):
        scripted_input(monkeypatch)
        assert TerminalPrompter().ask(PromptKind.SEASON, None, "show.e01.mkv") is None

    def test_chain_prompter_falls_through(self):
        chain = ChainPrompter(FixedPrompter(season=None), FixedPrompter(season="4"))
        assert chain.ask(PromptKind.SEASON, None, "show.e01.mkv") == "4"
        assert chain.ask(PromptKind.SHOW_TITLE, None, "show.e01.mkv") is None

    def test_confirm_proceed_repeats(self, monkeypatch, capsys):
        scripted_input(monkeypatch, "maybe", "yes")
        assert confirm_proceed(2)
        assert "Please enter 'y' or 'n'." in capsys.readouterr().out

    def test_confirm_proceed_no(self, monkeypatch):
        scripted_input(monkeypatch, "n")
        assert not confirm_proceed(2)

    def test_apply_plan_skips_noop_and_refuses_overwrite(self, media_dir):
        touch(media_dir, "a.mkv", "b.mkv", "Same.mkv")
        plan_set = PlanSet([
            RenamePlan("Same.mkv", "Same.mkv"),
            RenamePlan("a.mkv", "A.S01E01.mkv"),
            RenamePlan("b.mkv", "A.S01E01.mkv"),
        ])
        assert apply_plan(media_dir, plan_set) == (1, 1)
        assert sorted(p.name for p in media_dir.iterdir()) == ["A.S01E01.mkv", "Same.mkv", "b.mkv"]

    def test_apply_plan_follows_a_rename_chain(self, media_dir):
        touch(media_dir, "a.mkv", "b.mkv")
        plan_set = PlanSet([RenamePlan("a.mkv", "b.mkv"), RenamePlan("b.mkv", "c.mkv")])
        assert apply_plan(media_dir, plan_set) == (2, 0)
        assert sorted(p.name for p in media_dir.iterdir()) == ["b.mkv", "c.mkv"]


class TestMain:
    """End-to-end runs on a temporary directory."""

    def test_dry_run_changes_nothing(self, media_dir, settings_file, capsys):
        name = "sun.wars.tales.of.the.oveworld.s01e02.1080p.web.h264-sylix[EZTVx.to].mkv"
        touch(media_dir, name)
        assert run(media_dir, settings_file, "--dry-run", "--no-prompt") == 0
        out = capsys.readouterr().out
        assert "Sun.Wars.Tales.of.the.Oveworld.S01E02.1080p.web.h264.mkv" in out
        assert (media_dir / name).exists()

    def test_yes_applies(self, media_dir, settings_file):
        touch(media_dir, "show.s01e02.720p.MKV", "notes.txt")
        assert run(media_dir, settings_file, "--yes", "--no-prompt") == 0
        assert sorted(p.name for p in media_dir.iterdir()) == ["Show.S01E02.720p.MKV", "notes.txt"]

    def test_confirmation_declined(self, media_dir, settings_file, monkeypatch, capsys):
        touch(media_dir, "show.s01e02.mkv")
        scripted_input(monkeypatch, "n")
        assert run(media_dir, settings_file) == 0
        assert (media_dir / "show.s01e02.mkv").exists()
        assert "cancelled" in capsys.readouterr().out

    def test_season_option(self, media_dir, settings_file):
        touch(media_dir, "show.e05.720p.mkv")
        assert run(media_dir, settings_file, "--yes", "--season", "2") == 0
        assert (media_dir / "Show.S02E05.720p.mkv").exists()

    def test_season_prompt_with_directory_default(self, media_dir, settings_file, monkeypatch):
        touch(media_dir, "show.e05.mkv")
        prompts = scripted_input(monkeypatch, "", "y")
        assert run(media_dir, settings_file) == 0
        assert "[Default: Season 01]" in prompts[0]
        assert (media_dir / "Show.S01E05.mkv").exists()

    def test_unparsable_files_are_skipped(self, media_dir, settings_file, capsys):
        touch(media_dir, "randomfile.mkv", "show.s01e01.mkv")
        assert run(media_dir, settings_file, "--yes", "--no-prompt") == 0
        assert "[SKIP] randomfile.mkv" in capsys.readouterr().out
        assert sorted(p.name for p in media_dir.iterdir()) == ["Show.S01E01.mkv", "randomfile.mkv"]

    def test_collision_renames_nothing(self, media_dir, settings_file, capsys):
        touch(media_dir, "show.s01e01.mkv", "SHOW.S1E1.mkv")
        assert run(media_dir, settings_file, "--yes", "--no-prompt") == 1
        assert "Multiple files would be renamed" in capsys.readouterr().err
        assert sorted(p.name for p in media_dir.iterdir()) == ["SHOW.S1E1.mkv", "show.s01e01.mkv"]

    def test_existing_target_renames_nothing(self, media_dir, settings_file, capsys):
        touch(media_dir, "show s01e01.mkv", "other.s01e02.mkv")
        (media_dir / "Show.S01E01.mkv").mkdir()
        assert run(media_dir, settings_file, "--yes", "--no-prompt") == 1
        assert "already exists" in capsys.readouterr().err
        assert (media_dir / "other.s01e02.mkv").exists()

    def test_nothing_to_do(self, media_dir, settings_file, capsys):
        touch(media_dir, "Show.S01E01.mkv")
        assert run(media_dir, settings_file, "--no-prompt") == 0
        assert "No files need renaming" in capsys.readouterr().out

    def test_empty_directory(self, media_dir, settings_file, capsys):
        assert run(media_dir, settings_file) == 0
        assert "No eligible video files" in capsys.readouterr().out

    def test_bad_path(self, tmp_path, settings_file):
        assert main([str(tmp_path / "missing"), "--config", settings_file]) == 1
