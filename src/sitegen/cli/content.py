"""Content document CLI commands."""

import argparse
import sys

from sitegen.cli.options import site_config
from sitegen.config import ConfigError
from sitegen.content import ContentError


def cmd_content_check(args: argparse.Namespace) -> int:
    from sitegen.content.loader import load_content
    from sitegen.content.placeholders import find_unresolved, resolve_document
    from sitegen.pages import PAGES

    try:
        config = site_config(args)
        data = resolve_document(load_content(config.content_path))
    except (ConfigError, ContentError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"\n  Content: {config.content_path}")
    print(f"  {'─' * 40}")

    if "nav" not in data:
        print("  ERROR: no 'nav' list; every page render will fail", file=sys.stderr)
        return 1

    expected = {spec.key for spec in PAGES.values() if spec.template != "confirmation"}
    missing = sorted(expected - set(data))
    if missing:
        print(f"  Missing sections (rendered empty): {', '.join(missing)}")

    leftover = find_unresolved(data)
    if leftover:
        print(f"  Unknown placeholders: {len(leftover)}")
        for location, marker in leftover:
            print(f"    - {location}: {marker}")
    else:
        print("  All placeholders resolved.")

    return 0
