"""Unified CLI for the site generator.

Usage:
    sitegen build [--output DIR] [--page KEY ...] [--dry-run]
    sitegen serve [--host H] [--port N]
    sitegen render <path> [--query QS]
    sitegen routes
    sitegen content check

Global options (before the command):
    --root DIR       project root (default: $SITEGEN_ROOT or cwd)
    --config FILE    sitegen.yaml (default: <root>/sitegen.yaml if present)
    --content FILE   content JSON (default: <root>/content/site_copy.json)
"""

import argparse
import sys

from sitegen import __version__
from sitegen.cli.build import cmd_build
from sitegen.cli.content import cmd_content_check
from sitegen.cli.render import cmd_render, cmd_routes
from sitegen.cli.serve import cmd_serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitegen",
        description="Static marketing site generator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--root", default=None, help="Project root directory")
    parser.add_argument("--config", default=None, help="Path to sitegen.yaml")
    parser.add_argument("--content", default=None, help="Path to site_copy.json")
    sub = parser.add_subparsers(dest="command")

    # build
    bld = sub.add_parser("build", help="Render every page to static HTML")
    bld.add_argument("--output", default=None, help="Output directory")
    bld.add_argument(
        "--page", action="append", default=[],
        help="Only build this page key (repeatable)",
    )
    bld.add_argument(
        "--dry-run", action="store_true",
        help="Render without writing files",
    )

    # serve
    srv = sub.add_parser("serve", help="Render pages per request")
    srv.add_argument("--host", default=None, help="Bind address")
    srv.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 5173)")

    # render
    rnd = sub.add_parser("render", help="Print one page's HTML to stdout")
    rnd.add_argument("path", help="Route, e.g. / or /pricing/")
    rnd.add_argument(
        "--query", default=None,
        help="Query string, e.g. 'session_id=cs_123'",
    )

    # routes
    sub.add_parser("routes", help="List pages and their routes")

    # content
    cnt = sub.add_parser("content", help="Content document operations")
    cnt_sub = cnt.add_subparsers(dest="subcommand")
    cnt_sub.add_parser("check", help="Load, resolve and report leftover placeholders")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("build", ""): cmd_build,
        ("serve", ""): cmd_serve,
        ("render", ""): cmd_render,
        ("routes", ""): cmd_routes,
        ("content", "check"): cmd_content_check,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
