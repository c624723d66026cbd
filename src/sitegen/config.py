"""Site configuration — sitegen.yaml merged with environment and defaults.

Precedence, highest first: explicit overrides (CLI flags), environment
variables, sitegen.yaml, built-in defaults. Relative paths in the YAML
file resolve against the directory that holds it.

Example sitegen.yaml:

    content: content/site_copy.json
    output: dist
    assets: assets
    server:
      host: 127.0.0.1
      port: 5173
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from sitegen import paths

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5173


class ConfigError(Exception):
    """sitegen.yaml is malformed or holds an invalid value."""


@dataclass
class SiteConfig:
    """Resolved locations and server settings for one run."""

    content_path: Path
    output_dir: Path
    assets_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def read_config_file(path: Path | str) -> dict[str, Any]:
    """Read and parse a sitegen.yaml file.

    Returns:
        Parsed config dict (empty for an empty file).

    Raises:
        ConfigError: If the YAML is malformed or not a mapping.
    """
    config_file = Path(path)
    try:
        with open(config_file) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {config_file}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_file} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} is not a YAML mapping")
    return data


def load_config(
    config_file: Path | str | None = None,
    root: Path | str | None = None,
    **overrides: Any,
) -> SiteConfig:
    """Build a SiteConfig for this run.

    Args:
        config_file: Explicit sitegen.yaml path. When omitted the default
            location is used if it exists.
        root: Project root for default locations (default: SITEGEN_ROOT or cwd).
        **overrides: Non-None values for ``content_path``, ``output_dir``,
            ``assets_dir``, ``host`` or ``port`` win over everything else.

    Raises:
        ConfigError: For a malformed config file or a non-integer port.
    """
    root_path = Path(root) if root else None
    if config_file is not None:
        cfg_path = Path(config_file)
        file_data = read_config_file(cfg_path)
    else:
        cfg_path = paths.config_path(root_path)
        file_data = read_config_file(cfg_path) if cfg_path.is_file() else {}
    base = cfg_path.parent

    server = file_data.get("server") or {}
    if not isinstance(server, dict):
        raise ConfigError(f"{cfg_path}: 'server' must be a mapping")

    def _path(key: str, env: str, yaml_key: str, default: Path) -> Path:
        if overrides.get(key) is not None:
            return Path(overrides[key])
        if os.environ.get(env):
            return Path(os.environ[env])
        if file_data.get(yaml_key):
            p = Path(str(file_data[yaml_key])).expanduser()
            return p if p.is_absolute() else base / p
        return default

    host = overrides.get("host") or os.environ.get("HOST") or server.get("host") or DEFAULT_HOST
    raw_port = overrides.get("port")
    if raw_port is None:
        raw_port = os.environ.get("PORT") or server.get("port") or DEFAULT_PORT
    try:
        port = int(raw_port)
    except (TypeError, ValueError):
        raise ConfigError(f"invalid port: {raw_port!r}") from None

    return SiteConfig(
        content_path=_path("content_path", "SITEGEN_CONTENT", "content", paths.content_path(root_path)),
        output_dir=_path("output_dir", "SITEGEN_OUTPUT", "output", paths.output_dir(root_path)),
        assets_dir=_path("assets_dir", "SITEGEN_ASSETS", "assets", paths.assets_dir(root_path)),
        host=str(host),
        port=port,
    )
