"""Tests for the unified CLI.

Covers:
- Parser construction and argument parsing
- --help for all command groups
- build / render / routes / content check against fixture content
- Error handling for missing content
"""

import argparse
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from sitegen.cli import build_parser, main

FIXTURES = Path(__file__).parent / "fixtures"
CONTENT = str(FIXTURES / "site_copy.json")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("SITEGEN_CONFIG", "SITEGEN_CONTENT", "SITEGEN_OUTPUT", "SITEGEN_ASSETS", "PORT", "HOST"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SITEGEN_ROOT", str(tmp_path))


# ── Parser construction ──────────────────────────────────────────


class TestParserConstruction:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        with patch("sys.argv", ["sitegen"]):
            rc = main()
        assert rc == 0
        assert "sitegen" in capsys.readouterr().out

    def test_global_flags(self):
        args = build_parser().parse_args(["--content", "/tmp/c.json", "build", "--dry-run"])
        assert args.content == "/tmp/c.json"
        assert args.dry_run is True

    def test_serve_port_is_int(self):
        args = build_parser().parse_args(["serve", "--port", "8000"])
        assert args.port == 8000


class TestHelpOutput:
    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["build", "--help"],
        ["serve", "--help"],
        ["render", "--help"],
        ["routes", "--help"],
        ["content", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(cmd)
        assert exc_info.value.code == 0


# ── Commands ─────────────────────────────────────────────────────


class TestBuildCommand:
    def test_build(self, tmp_path, capsys):
        out = tmp_path / "site"
        rc = main(["--content", CONTENT, "build", "--output", str(out)])
        assert rc == 0
        assert (out / "pricing" / "index.html").is_file()
        assert (out / "assets" / "site.js").is_file()
        assert "Generated: 10" in capsys.readouterr().out

    def test_dry_run(self, tmp_path, capsys):
        out = tmp_path / "site"
        rc = main(["--content", CONTENT, "build", "--output", str(out), "--dry-run"])
        assert rc == 0
        assert not out.exists()
        assert "[DRY RUN]" in capsys.readouterr().out

    def test_missing_content_exits_nonzero(self, tmp_path, capsys):
        rc = main(["--content", str(tmp_path / "nope.json"), "build"])
        assert rc == 1
        assert "ERROR:" in capsys.readouterr().err

    def test_malformed_content_exits_nonzero(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")
        assert main(["--content", str(bad), "build"]) == 1

    def test_render_errors_exit_nonzero(self, tmp_path, capsys):
        no_nav = tmp_path / "no_nav.json"
        no_nav.write_text(json.dumps({"meta": {}}), encoding="utf-8")
        rc = main(["--content", str(no_nav), "build", "--output", str(tmp_path / "o")])
        assert rc == 1
        assert "Errors:" in capsys.readouterr().err

    def test_unwritable_output_exits_nonzero(self, tmp_path, capsys):
        out = tmp_path / "site"
        out.write_text("not a directory", encoding="utf-8")
        rc = main(["--content", CONTENT, "build", "--output", str(out)])
        assert rc == 1
        assert "ERROR:" in capsys.readouterr().err


class TestRenderCommand:
    def test_render_page(self, capsys):
        rc = main(["--content", CONTENT, "render", "/faq/"])
        assert rc == 0
        out = capsys.readouterr().out
        assert "<title>FAQ | Acme Mail</title>" in out

    def test_render_confirmation_query(self, capsys):
        rc = main(["--content", CONTENT, "render", "/confirmation", "--query", "reference=R-1!"])
        assert rc == 0
        assert "Reference: R-1" in capsys.readouterr().out

    def test_unknown_path(self, capsys):
        assert main(["--content", CONTENT, "render", "/blog"]) == 1
        assert "No page for path" in capsys.readouterr().err


class TestRoutesCommand:
    def test_lists_pages(self, capsys):
        assert main(["routes"]) == 0
        out = capsys.readouterr().out
        assert "/confirmation" in out
        assert "noindex, nofollow" in out
        assert "10 page(s)" in out


class TestContentCheck:
    def test_reports_leftover_markers(self, capsys):
        assert main(["--content", CONTENT, "content", "check"]) == 0
        out = capsys.readouterr().out
        assert "contact.contact_blocks[1].value: {{PHONE}}" in out

    def test_clean_document(self, tmp_path, capsys):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"meta": {}, "nav": [], "about": {"headline": "{{BRAND_NAME}}"}}), encoding="utf-8")
        assert main(["--content", str(path), "content", "check"]) == 0
        out = capsys.readouterr().out
        assert "All placeholders resolved." in out
        assert "Missing sections" in out

    def test_missing_nav(self, tmp_path, capsys):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"meta": {}}), encoding="utf-8")
        assert main(["--content", str(path), "content", "check"]) == 1

    def test_load_failure(self, tmp_path, capsys):
        assert main(["--content", str(tmp_path / "none.json"), "content", "check"]) == 1
        assert "ERROR:" in capsys.readouterr().err
