"""Single-page render and route listing CLI commands."""

import argparse
import sys

from sitegen.cli.options import site_config
from sitegen.config import ConfigError
from sitegen.content import ContentError


def cmd_render(args: argparse.Namespace) -> int:
    from sitegen.content.loader import ContentStore
    from sitegen.pages import page_for_path
    from sitegen.pages.query import parse_query
    from sitegen.pages.renderer import render_page

    spec = page_for_path(args.path)
    if spec is None:
        print(f"ERROR: No page for path '{args.path}'", file=sys.stderr)
        return 1

    try:
        config = site_config(args)
        data = ContentStore(config.content_path).snapshot()
        page = render_page(spec.key, data, request_path=args.path, query=parse_query(args.query or ""))
    except (ConfigError, ContentError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(page.html)
    return 0


def cmd_routes(args: argparse.Namespace) -> int:
    from sitegen.pages import PAGES

    print(f"\n  {'Page':<14} {'Route':<15} {'Robots':<18} {'Output'}")
    print(f"  {'─' * 70}")
    for key, spec in PAGES.items():
        print(f"  {key:<14} {spec.route:<15} {spec.robots:<18} {spec.output_path}")
    print(f"\n  {len(PAGES)} page(s)")
    return 0
