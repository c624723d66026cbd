"""Load site_copy.json and hand out resolved snapshots."""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Any

from sitegen.content import ContentLoadError
from sitegen.content.placeholders import find_unresolved, resolve_document


def load_content(path: Path | str) -> dict[str, Any]:
    """Load the raw content document from disk.

    Args:
        path: Path to the JSON content file.

    Returns:
        Parsed document dict.

    Raises:
        ContentLoadError: If the file is missing, unreadable, not valid
            JSON, or not a JSON object.
    """
    content_path = Path(path)
    try:
        with open(content_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ContentLoadError(f"content file not found: {content_path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ContentLoadError(f"cannot read {content_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ContentLoadError(f"{content_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ContentLoadError(f"{content_path} is not a JSON object")

    return data


class ContentStore:
    """Read-through cache of the resolved content document.

    The file is re-read whenever its modification time or size changes,
    so an edit is picked up by the next snapshot. Snapshots are treated
    as read-only by every renderer.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._stamp: tuple[int, int] | None = None
        self._snapshot: dict[str, Any] | None = None

    def snapshot(self) -> dict[str, Any]:
        """Return the resolved document, reloading if the file changed.

        Raises:
            ContentLoadError: If the file cannot be loaded.
            MissingContentKey: If the document has no ``meta`` record.
        """
        stamp = self._file_stamp()
        if self._snapshot is not None and stamp == self._stamp:
            return self._snapshot

        data = resolve_document(load_content(self.path))
        leftover = find_unresolved({k: v for k, v in data.items() if k != "contact"})
        if leftover:
            markers = ", ".join(sorted({marker for _, marker in leftover}))
            warnings.warn(f"{self.path}: unknown placeholders left in content: {markers}")

        self._stamp = stamp
        self._snapshot = data
        return data

    def _file_stamp(self) -> tuple[int, int] | None:
        try:
            st = self.path.stat()
        except OSError:
            return None
        return (st.st_mtime_ns, st.st_size)
