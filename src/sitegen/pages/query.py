"""Confirmation page query parameters — display-only sanitizing.

Values come from the payment provider's redirect URL. They are shown
to the visitor and nothing else: never stored, never trusted.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qsl

# First non-empty key wins
REFERENCE_KEYS = ("session_id", "reference", "checkout_session_id")
REFERENCE_MAX_LENGTH = 64
REFERENCE_STRIP_RE = re.compile(r"[^A-Za-z0-9_-]")

CLIENT_EMAIL_MAX_LENGTH = 100


def parse_query(query: str) -> dict[str, str]:
    """Parse a query string into a flat dict (last value wins)."""
    return dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))


def reference_from_query(params: dict[str, str]) -> str:
    """Return the sanitized payment reference, or "" when there is none."""
    for key in REFERENCE_KEYS:
        raw = params.get(key)
        if raw:
            return REFERENCE_STRIP_RE.sub("", raw[:REFERENCE_MAX_LENGTH])
    return ""


def client_email_from_query(params: dict[str, str]) -> str:
    """Return client_email if it looks like an address, else ""."""
    email = params.get("client_email") or ""
    if "@" in email and len(email) < CLIENT_EMAIL_MAX_LENGTH:
        return email
    return ""
