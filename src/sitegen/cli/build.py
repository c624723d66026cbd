"""Static build CLI command."""

import argparse
import sys

from sitegen.cli.options import site_config
from sitegen.config import ConfigError
from sitegen.content import ContentError


def cmd_build(args: argparse.Namespace) -> int:
    from sitegen.build import build_site

    try:
        config = site_config(args, output_dir=args.output)
        result = build_site(
            content_path=config.content_path,
            output_dir=config.output_dir,
            assets_dir=config.assets_dir,
            dry_run=args.dry_run,
            pages=args.page or None,
        )
    except (ConfigError, ContentError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    prefix = "[DRY RUN] " if result["dry_run"] else ""
    print(f"  {prefix}Site Build Results")
    print(f"  {'─' * 40}")
    print(f"  Output:    {config.output_dir}")
    print(f"  Generated: {len(result['generated'])}")
    for g in result["generated"]:
        print(f"    - {g['route']:<15} {g['bytes']:>8,} bytes")
    print(f"  Assets:    {len(result['assets'])}")
    if result["errors"]:
        print(f"  Errors:    {len(result['errors'])}", file=sys.stderr)
        for e in result["errors"]:
            print(f"    - {e['page']}: {e['error']}", file=sys.stderr)

    return 1 if result["errors"] else 0
