"""Navigation state — normalize paths and mark the current nav item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sitegen.content import MissingContentKey


@dataclass(frozen=True)
class NavItem:
    """One rendered navigation entry."""

    href: str
    label: str
    is_current: bool = False


def normalize_path(path: str) -> str:
    """Normalize a request path or nav href for comparison.

    Strips a ``/index.html`` suffix, then a ``.html`` suffix, then any
    trailing slashes. The root (and an empty path) is always ``/``.

        >>> normalize_path("/services/index.html")
        '/services'
    """
    if path == "index.html" or path.endswith("/index.html"):
        path = path[: -len("index.html")]
    if path.endswith(".html"):
        path = path[: -len(".html")]
    path = path.rstrip("/")
    return path or "/"


def display_href(href: str) -> str:
    """Return the href shown in markup: ``/`` or exactly one trailing slash."""
    base = normalize_path(href).rstrip("/")
    return f"{base}/" if base else "/"


def build_nav(items: list[dict[str, Any]], current_path: str) -> list[NavItem]:
    """Augment nav entries with display hrefs and the current-page flag.

    Comparison is exact equality of normalized paths, so ``/services``
    never marks ``/services-extra`` or ``/`` as current.
    """
    current = normalize_path(current_path)
    nav = []
    for item in items:
        href = item.get("href") or "/"
        nav.append(NavItem(
            href=display_href(href),
            label=item.get("label", ""),
            is_current=normalize_path(href) == current,
        ))
    return nav


def resolve_nav(document: dict[str, Any], current_path: str) -> list[NavItem]:
    """Build nav state from a content document's ``nav`` list.

    Raises:
        MissingContentKey: If the document has no ``nav`` entry.
    """
    if "nav" not in document:
        raise MissingContentKey("nav")
    return build_nav(document["nav"] or [], current_path)
