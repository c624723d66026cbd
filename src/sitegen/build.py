"""Static build — render every page to <output>/<route>/index.html.

Follows the load-once, render-all, report-summary pattern: the content
document is loaded and resolved a single time, then each page in the
page table is rendered with its own route as the current path.

Writes:
- <output>/index.html and <output>/<route>/index.html for every page
- <output>/assets/ from the packaged client script and the site's assets dir
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

from sitegen.content.loader import ContentStore
from sitegen.pages import PAGES
from sitegen.pages.renderer import render_page
from sitegen.paths import PACKAGE_ASSETS_DIR


def build_site(
    content_path: Path | str,
    output_dir: Path | str,
    assets_dir: Path | str | None = None,
    dry_run: bool = False,
    pages: list[str] | None = None,
) -> dict[str, Any]:
    """Build the static site.

    Args:
        content_path: Path to site_copy.json.
        output_dir: Directory receiving the generated files.
        assets_dir: Site assets copied to <output>/assets (skipped if missing).
        dry_run: If True, render everything but write nothing.
        pages: Restrict the build to these page keys.

    Returns:
        Summary dict with generated, assets, and error lists.

    Raises:
        ContentLoadError: If the content file cannot be loaded.
        MissingContentKey: If the document has no ``meta`` record.
    """
    out = Path(output_dir)
    data = ContentStore(content_path).snapshot()

    generated = []
    errors = []

    for key in pages or list(PAGES):
        spec = PAGES.get(key)
        if spec is None:
            errors.append({"page": key, "error": f"unknown page '{key}'"})
            continue

        target = out / spec.output_path
        try:
            page = render_page(key, data)
            if not dry_run:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(page.html, encoding="utf-8")
            generated.append({
                "page": key,
                "route": spec.route,
                "path": str(target),
                "bytes": len(page.html.encode("utf-8")),
            })
        except (KeyError, TypeError, AttributeError, OSError) as e:
            errors.append({
                "page": key,
                "error": f"{type(e).__name__}: {e}",
            })

    assets = copy_assets(out / "assets", assets_dir, dry_run=dry_run)

    return {
        "generated": generated,
        "assets": assets,
        "errors": errors,
        "dry_run": dry_run,
    }


def copy_assets(
    target_dir: Path,
    assets_dir: Path | str | None = None,
    dry_run: bool = False,
) -> list[str]:
    """Copy packaged and site assets into ``target_dir``.

    Site assets are copied after the packaged ones, so a site can
    override the client script by shipping its own ``site.js``.

    Returns:
        Relative paths of the copied files.
    """
    copied = []
    sources = [PACKAGE_ASSETS_DIR]
    if assets_dir and Path(assets_dir).is_dir():
        sources.append(Path(assets_dir))

    for source in sources:
        for path in sorted(source.rglob("*")):
            if not path.is_file():
                continue
            rel = path.relative_to(source)
            if not dry_run:
                dest = target_dir / rel
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(path, dest)
            if rel.as_posix() not in copied:
                copied.append(rel.as_posix())

    return copied
