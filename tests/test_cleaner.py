#!/usr/bin/env python3
"""Tests for stem normalization."""

import pytest

from eprename.cleaner import collapse_separators, normalize_stem, strip_release_suffix


def test_strip_group_with_source_tag(patterns):
    stem = "sun.wars.tales.of.the.oveworld.s01e02.1080p.web.h264-sylix[EZTVx.to]"
    assert strip_release_suffix(stem, patterns) == (
        "sun.wars.tales.of.the.oveworld.s01e02.1080p.web.h264"
    )


def test_group_without_source_tag_is_kept(patterns):
    stem = "show.s01e02.720p.x264-GRP"
    assert strip_release_suffix(stem, patterns) == stem


def test_hyphenated_source_tag_is_kept(patterns):
    stem = "show.s01e02.1080p.WEB-DL"
    assert strip_release_suffix(stem, patterns) == stem


def test_only_last_segment_is_stripped(patterns):
    assert strip_release_suffix("show.s01e02.aac-grp-x[src]", patterns) == "show.s01e02.aac-grp"


def test_segment_with_marker_is_kept(patterns):
    stem = "show-s01e02[src]"
    assert strip_release_suffix(stem, patterns) == stem


def test_hyphen_inside_title_is_kept(patterns):
    """Only a trailing segment counts as a release group."""
    stem = "spider-man.s01e01.720p"
    assert strip_release_suffix(stem, patterns) == stem


def test_collapse_whitespace_and_dots(patterns):
    assert collapse_separators("Show  Name..S01E02 ...720p", patterns) == "Show.Name.S01E02.720p"


def test_collapse_trims_separators(patterns):
    assert collapse_separators(" .show s01e02. ", patterns) == "show.s01e02"


def test_collapse_empty(patterns):
    assert collapse_separators("", patterns) == ""


def test_normalize_without_match_returns_input(patterns):
    assert normalize_stem("show.s01e02.720p", patterns) == "show.s01e02.720p"


@pytest.mark.parametrize("stem", [
    "Show-S01E02",
    "show.name-s01e02-720p-x264",
    "show-e05",
])
def test_normalize_keeps_marker_after_hyphen(patterns, stem):
    assert normalize_stem(stem, patterns) == stem


def test_normalize_strips_each_bracketed_segment(patterns):
    assert normalize_stem("show.s01e02.web-a[x]-b[y]", patterns) == "show.s01e02.web"


def test_normalize_trailing_whitespace_before_suffix(patterns):
    assert normalize_stem("show s01e02 720p-grp[src] ", patterns) == "show.s01e02.720p"


@pytest.mark.parametrize("stem", [
    "sun.wars.tales.of.the.oveworld.s01e02.1080p.web.h264-sylix[EZTVx.to]",
    "Show  Name  S01E02  720p",
    "show.s01e02.a-b -c",
    "show.s01e02.web-a[x]-b[y]",
    "..show...e05..",
    "randomfile",
])
def test_normalize_is_idempotent(patterns, stem):
    once = normalize_stem(stem, patterns)
    assert normalize_stem(once, patterns) == once
