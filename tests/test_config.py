"""Tests for settings loading."""

import logging

import pytest

from minivcs.config import VcsSettings, load_settings
from minivcs.ops import commit


def test_defaults_without_file(repo):
    assert load_settings(repo.root) == VcsSettings()


def test_reads_settings_yaml(repo):
    repo.settings_path.write_text("hash_chunk_size: 1024\nlog_level: debug\n")

    settings = load_settings(repo.root)

    assert settings.hash_chunk_size == 1024
    assert settings.log_level == "DEBUG"


def test_partial_settings_keep_defaults(repo):
    repo.settings_path.write_text("log_level: INFO\n")

    settings = load_settings(repo.root)

    assert settings.hash_chunk_size == 8192
    assert settings.log_level == "INFO"


def test_empty_file_gives_defaults(repo):
    repo.settings_path.write_text("")

    assert load_settings(repo.root) == VcsSettings()


def test_invalid_yaml_gives_defaults(repo, caplog):
    repo.settings_path.write_text("log_level: [unclosed\n")

    with caplog.at_level(logging.WARNING, logger="minivcs.config"):
        settings = load_settings(repo.root)

    assert settings == VcsSettings()
    assert "Ignoring unreadable settings file" in caplog.text


def test_non_mapping_gives_defaults(repo):
    repo.settings_path.write_text("- just\n- a list\n")

    assert load_settings(repo.root) == VcsSettings()


@pytest.mark.parametrize("value", ["0", "-5", "big", "[1, 2]"])
def test_invalid_chunk_size_gives_default(repo, caplog, value):
    repo.settings_path.write_text(f"hash_chunk_size: {value}\n")

    with caplog.at_level(logging.WARNING, logger="minivcs.config"):
        settings = load_settings(repo.root)

    assert settings.hash_chunk_size == 8192
    assert "Ignoring hash_chunk_size" in caplog.text


def test_zero_chunk_size_still_detects_changes(repo, author, make_tracked, tmp_path):
    repo.settings_path.write_text("hash_chunk_size: 0\n")
    make_tracked(**{"a.txt": "X"})
    settings = load_settings(repo.root)
    commit("m1", author, ctx=repo, settings=settings)
    (tmp_path / "a.txt").write_text("Y")

    created = commit("m2", author, ctx=repo, settings=settings)

    assert created.snapshot["a.txt"].read_text() == "Y"
