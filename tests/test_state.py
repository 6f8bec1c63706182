"""
Tests for tizenpkgtool.state module.

Tests userconf.json handling including:
- Loading and saving
- Absent, empty, and invalid metadata blocks
- Corrupted file backup
- Preservation of other platforms' blocks
"""

from __future__ import annotations

import json

import pytest

from tizenpkgtool.metadata import ApplicationMetadata
from tizenpkgtool.state import UserConfig, load_userconf, save_userconf

pytestmark = pytest.mark.unit


class TestUserconfFileOperations:
    """Tests for load_userconf/save_userconf."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "userconf.json"
        save_userconf({"tizen": {"name": "A"}}, path)
        assert load_userconf(path) == {"tizen": {"name": "A"}}

    def test_save_creates_parent_directory(self, tmp_path):
        path = tmp_path / "platforms" / "nested" / "userconf.json"
        save_userconf({}, path)
        assert path.exists()

    def test_save_pretty_prints_json(self, tmp_path):
        path = tmp_path / "userconf.json"
        save_userconf({"tizen": {"version": "1.0"}}, path)
        content = path.read_text(encoding="utf-8")
        assert "  " in content
        assert content.endswith("\n")

    def test_load_missing_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_userconf(tmp_path / "missing.json")


class TestUserConfig:
    """Tests for the UserConfig class."""

    def test_load_missing_file(self, userconf_path):
        userconf = UserConfig(userconf_path)
        assert userconf.load() == {}
        assert userconf.exists is False

    def test_get_metadata_valid(self, write_userconf, userconf_path, cached_tizen):
        write_userconf({"tizen": cached_tizen})
        userconf = UserConfig(userconf_path)
        userconf.load()

        metadata = userconf.get_metadata("tizen")

        assert metadata == ApplicationMetadata(**cached_tizen)
        assert userconf.reason is None

    def test_get_metadata_missing_key(self, write_userconf, userconf_path):
        write_userconf({"webos": {"name": "other"}})
        userconf = UserConfig(userconf_path)
        userconf.load()

        assert userconf.get_metadata("tizen") is None
        assert "is empty" in userconf.reason

    def test_get_metadata_invalid_version(self, write_userconf, userconf_path, cached_tizen):
        cached_tizen["version"] = "1"
        write_userconf({"tizen": cached_tizen})
        userconf = UserConfig(userconf_path)
        userconf.load()

        assert userconf.get_metadata("tizen") is None
        assert "invalid data" in userconf.reason

    def test_corrupted_file_is_backed_up(self, userconf_path):
        userconf_path.parent.mkdir(parents=True)
        userconf_path.write_text("{not json", encoding="utf-8")
        userconf = UserConfig(userconf_path)

        assert userconf.load() == {}
        assert userconf.exists is False
        assert not userconf_path.exists()
        assert (userconf_path.parent / "userconf.json.backup").read_text() == "{not json"

    def test_non_utf8_file_is_backed_up(self, userconf_path):
        userconf_path.parent.mkdir(parents=True)
        userconf_path.write_bytes(b'{"tizen": "\xff\xfe"}')
        userconf = UserConfig(userconf_path)

        assert userconf.load() == {}
        assert userconf.exists is False
        backup = userconf_path.parent / "userconf.json.backup"
        assert backup.read_bytes() == b'{"tizen": "\xff\xfe"}'

    def test_non_object_json_is_backed_up(self, write_userconf, userconf_path):
        write_userconf(["tizen"])
        userconf = UserConfig(userconf_path)

        assert userconf.load() == {}
        assert (userconf_path.parent / "userconf.json.backup").exists()

    def test_save_preserves_other_platforms(self, write_userconf, userconf_path, cached_tizen):
        write_userconf({"webos": {"name": "other"}, "tizen": cached_tizen})
        userconf = UserConfig(userconf_path)
        userconf.load()

        updated = ApplicationMetadata(**{**cached_tizen, "version": "1.0.1"})
        userconf.set_metadata("tizen", updated)
        userconf.save()

        saved = json.loads(userconf_path.read_text(encoding="utf-8"))
        assert saved["webos"] == {"name": "other"}
        assert saved["tizen"]["version"] == "1.0.1"
