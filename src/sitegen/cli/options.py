"""Shared option handling for CLI commands."""

import argparse

from sitegen.config import SiteConfig, load_config


def site_config(args: argparse.Namespace, **overrides) -> SiteConfig:
    """Resolve the SiteConfig from global flags plus command overrides."""
    return load_config(
        config_file=getattr(args, "config", None),
        root=getattr(args, "root", None),
        content_path=getattr(args, "content", None),
        **overrides,
    )
