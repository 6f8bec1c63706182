"""
Tests for tizenpkgtool.cli module.

Tests the command-line interface including:
- Argument parsing (--script, subcommands)
- Non-interactive build followed by package
- Exit codes and error output
"""

from __future__ import annotations

import json
import zipfile

import pytest

from tizenpkgtool.cli import _parse_scripts, build_parser, main

pytestmark = pytest.mark.integration


def _run(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestParseScripts:
    """Tests for --script parsing."""

    def test_parse_pairs(self):
        assert _parse_scripts(["toast.js=dist/toast.js", "a/b.js=src/b.js"]) == {
            "toast.js": "dist/toast.js",
            "a/b.js": "src/b.js",
        }

    @pytest.mark.parametrize("value", ["toast.js", "=src.js", "toast.js="])
    def test_invalid_pairs(self, value):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            _parse_scripts([value])


class TestParser:
    """Tests for the argument parser."""

    def test_build_arguments(self):
        args = build_parser().parse_args(
            ["build", "www", "out", "platform", "--script", "a.js=b.js", "-y", "-v"]
        )
        assert args.command == "build"
        assert args.script == ["a.js=b.js"]
        assert args.yes is True
        assert args.verbose is True

    def test_package_defaults(self):
        args = build_parser().parse_args(["package", "build", "dist"])
        assert args.name is None
        assert args.config is None


class TestCommands:
    """Build and package through main()."""

    def test_build_then_package(self, web_project, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config.xml").write_text(
            '<widget version="3.1.0"><name>CliApp</name><description>cli</description></widget>',
            encoding="utf-8",
        )
        dest = web_project["dest"]

        code = _run([
            "build",
            str(web_project["www"]),
            str(dest),
            str(web_project["platform"]),
            "--script",
            f"toast.js={web_project['script']}",
            "--yes",
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert "Start building Samsung Tizen Platform" in out
        assert "[SUCCESS]" in out
        saved = json.loads((tmp_path / "platforms" / "userconf.json").read_text())
        assert saved["tizen"]["name"] == "CliApp"
        assert saved["tizen"]["version"] == "3.1.0"

        code = _run(["package", str(dest), str(tmp_path / "dist")])

        assert code == 0
        assert "Packaged at" in capsys.readouterr().out
        with zipfile.ZipFile(tmp_path / "dist" / "package.wgt") as archive:
            assert "config.xml" in archive.namelist()
            assert ".project" in archive.namelist()

    def test_second_noninteractive_build_bumps_version(self, web_project, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        argv = [
            "build",
            str(web_project["www"]),
            str(web_project["dest"]),
            str(web_project["platform"]),
            "--yes",
            "--host-config",
            str(tmp_path / "none.xml"),
        ]
        userconf = tmp_path / "platforms" / "userconf.json"
        userconf.parent.mkdir()
        userconf.write_text(
            json.dumps({"tizen": {"name": "A", "id": "abcde12345", "version": "2.9",
                                  "description": ""}}),
            encoding="utf-8",
        )

        assert _run(argv) == 0

        assert json.loads(userconf.read_text())["tizen"]["version"] == "2.9.1"

    def test_build_invalid_default_fails(self, web_project, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config.xml").write_text('<widget version="1.0"/>', encoding="utf-8")

        code = _run([
            "build",
            str(web_project["www"]),
            str(web_project["dest"]),
            str(web_project["platform"]),
            "--yes",
        ])

        assert code == 1
        assert "Error:" in capsys.readouterr().out

    def test_build_missing_source(self, tmp_path, capsys):
        code = _run(["build", str(tmp_path / "nope"), str(tmp_path / "out"), str(tmp_path)])
        assert code == 1
        assert "Source directory not found" in capsys.readouterr().out

    def test_package_missing_build_dir(self, tmp_path, capsys):
        code = _run(["package", str(tmp_path / "nope"), str(tmp_path / "dist")])
        assert code == 1
        assert "Build directory not found" in capsys.readouterr().out

    def test_package_name_from_settings(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        build = tmp_path / "build"
        build.mkdir()
        (build / "index.html").write_text("<html></html>", encoding="utf-8")
        (tmp_path / "tizenpkg.yaml").write_text("package_name: HelloTV.wgt\n", encoding="utf-8")

        code = _run(["package", str(build), str(tmp_path / "dist")])

        assert code == 0
        assert (tmp_path / "dist" / "HelloTV.wgt").exists()
        assert not (tmp_path / "dist" / "package.wgt").exists()

    def test_package_name_flag_overrides_settings(self, tmp_path):
        build = tmp_path / "build"
        build.mkdir()
        (build / "index.html").write_text("<html></html>", encoding="utf-8")
        settings = tmp_path / "custom.yaml"
        settings.write_text("package_name: FromSettings.wgt\n", encoding="utf-8")

        code = _run([
            "package", str(build), str(tmp_path / "dist"),
            "--config", str(settings), "--name", "FromFlag.wgt",
        ])

        assert code == 0
        assert (tmp_path / "dist" / "FromFlag.wgt").exists()

    def test_package_missing_settings_file(self, tmp_path, capsys):
        build = tmp_path / "build"
        build.mkdir()

        code = _run([
            "package", str(build), str(tmp_path / "dist"),
            "--config", str(tmp_path / "nope.yaml"),
        ])

        assert code == 1
        assert "Settings file not found" in capsys.readouterr().out
