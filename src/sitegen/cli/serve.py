"""Request-time server CLI command."""

import argparse
import sys

from sitegen.cli.options import site_config
from sitegen.config import ConfigError
from sitegen.content import ContentError


def cmd_serve(args: argparse.Namespace) -> int:
    from sitegen.server import serve

    try:
        config = site_config(args, host=args.host, port=args.port)
        serve(config)
    except (ConfigError, ContentError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: cannot start server: {e}", file=sys.stderr)
        return 1
    return 0
