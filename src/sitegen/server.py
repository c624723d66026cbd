"""Request-time server — render pages per request from the live content file.

Single-threaded ``http.server`` loop. Every request takes a snapshot
from the ContentStore, which re-reads site_copy.json only when the file
changes, so edits show up on the next reload without a restart.
"""

from __future__ import annotations

import mimetypes
import sys
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path
from urllib.parse import urlsplit

from sitegen.config import SiteConfig
from sitegen.content import ContentError
from sitegen.content.loader import ContentStore
from sitegen.pages import page_for_path
from sitegen.pages.query import parse_query
from sitegen.pages.renderer import render_page
from sitegen.paths import PACKAGE_ASSETS_DIR

HTML_TYPE = "text/html; charset=utf-8"
TEXT_TYPE = "text/plain; charset=utf-8"


@dataclass
class Response:
    """Status, content type and body for one request."""

    status: int
    content_type: str = TEXT_TYPE
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


def respond(
    store: ContentStore,
    raw_path: str,
    asset_dirs: list[Path] | None = None,
) -> Response:
    """Route one GET request.

    Args:
        store: Content store supplying the resolved document.
        raw_path: Request target including any query string.
        asset_dirs: Directories searched in order for ``/assets/<file>``.

    Returns:
        Response with status 200, 404, or 500.
    """
    parts = urlsplit(raw_path)
    path = parts.path or "/"

    if path.startswith("/assets/"):
        return _asset_response(path[len("/assets/"):], asset_dirs or [PACKAGE_ASSETS_DIR])

    spec = page_for_path(path)
    if spec is None:
        return Response(404, body=b"Not Found")

    try:
        data = store.snapshot()
        page = render_page(spec.key, data, request_path=path, query=parse_query(parts.query))
    except (ContentError, KeyError, TypeError, AttributeError, OSError) as e:
        print(f"[sitegen] ERROR rendering {path}: {e}", file=sys.stderr)
        return Response(500, body=b"Internal Server Error")

    return Response(
        200,
        content_type=HTML_TYPE,
        body=page.html.encode("utf-8"),
        headers={"X-Robots-Tag": page.robots},
    )


def _asset_response(name: str, asset_dirs: list[Path]) -> Response:
    for directory in asset_dirs:
        root = directory.resolve()
        candidate = (root / name).resolve()
        if not candidate.is_relative_to(root) or not candidate.is_file():
            continue
        content_type = mimetypes.guess_type(candidate.name)[0] or "application/octet-stream"
        return Response(200, content_type=content_type, body=candidate.read_bytes())
    return Response(404, body=b"Not Found")


class SiteServer(HTTPServer):
    """HTTPServer carrying the content store and asset search path."""

    def __init__(self, address: tuple[str, int], store: ContentStore, asset_dirs: list[Path]) -> None:
        self.store = store
        self.asset_dirs = asset_dirs
        super().__init__(address, SiteRequestHandler)


class SiteRequestHandler(BaseHTTPRequestHandler):
    server: SiteServer

    def do_GET(self) -> None:
        self._send(respond(self.server.store, self.path, self.server.asset_dirs))

    def do_HEAD(self) -> None:
        self._send(respond(self.server.store, self.path, self.server.asset_dirs), head_only=True)

    def _send(self, response: Response, head_only: bool = False) -> None:
        self.send_response(response.status)
        self.send_header("Content-Type", response.content_type)
        self.send_header("Content-Length", str(len(response.body)))
        for name, value in response.headers.items():
            self.send_header(name, value)
        self.end_headers()
        if not head_only:
            self.wfile.write(response.body)

    def log_message(self, format: str, *args) -> None:
        print(f"[sitegen] {self.address_string()} {format % args}", file=sys.stderr)


def create_server(config: SiteConfig) -> SiteServer:
    """Load content once and bind the server.

    Raises:
        ContentLoadError: If the content file cannot be loaded at start-up.
        MissingContentKey: If the document has no ``meta`` record.
    """
    store = ContentStore(config.content_path)
    store.snapshot()
    asset_dirs = [config.assets_dir, PACKAGE_ASSETS_DIR]
    return SiteServer((config.host, config.port), store, asset_dirs)


def serve(config: SiteConfig) -> None:
    httpd = create_server(config)
    host, port = httpd.server_address[:2]
    print(f"[sitegen] Serving http://{host}:{port}/ (content: {config.content_path})")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("[sitegen] Shutting down server.")
    finally:
        httpd.server_close()
