"""Project path resolution.

Resolves the canonical locations of the content file, output directory
and assets. Uses environment variables when available, falls back to
conventional defaults under the project root.

Environment variables:
    SITEGEN_ROOT — project root (default: current directory)
    SITEGEN_CONFIG — config file (default: <root>/sitegen.yaml)
    SITEGEN_CONTENT — content JSON (default: <root>/content/site_copy.json)
    SITEGEN_OUTPUT — static build output (default: <root>/dist)
    SITEGEN_ASSETS — site assets directory (default: <root>/assets)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CONTENT_SUBPATH = "content/site_copy.json"

# Client script and other files shipped inside the package
PACKAGE_ASSETS_DIR = Path(__file__).parent / "assets"


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("SITEGEN_ROOT", str(Path.cwd())))


def config_path(root: Path | None = None) -> Path:
    """Return the path to sitegen.yaml."""
    env = os.environ.get("SITEGEN_CONFIG")
    if env:
        return Path(env)
    return (root or project_root()) / "sitegen.yaml"


def content_path(root: Path | None = None) -> Path:
    """Return the default path to site_copy.json."""
    return (root or project_root()) / _DEFAULT_CONTENT_SUBPATH


def output_dir(root: Path | None = None) -> Path:
    """Return the default static build output directory."""
    return (root or project_root()) / "dist"


def assets_dir(root: Path | None = None) -> Path:
    """Return the default site assets directory."""
    return (root or project_root()) / "assets"
