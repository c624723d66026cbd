"""Placeholder resolution — substitute brand tokens throughout the content document.

Tokens look like ``{{BRAND_NAME}}``. Each known token maps to a field of
the document's ``meta`` record, with a fallback used when that field is
absent or empty. Unknown ``{{...}}`` markers are left verbatim.
"""

from __future__ import annotations

import re
from typing import Any, Union

from sitegen.content import MissingContentKey

# token -> (meta field, fallback). The only token table in the project.
TOKENS: dict[str, tuple[str, str]] = {
    "BRAND_NAME":              ("brand_name",             "Our Company"),
    "DOMAIN":                  ("domain",                 ""),
    "CONTACT_EMAIL":           ("contact_email",          "contact@example.com"),
    "LOCATION":                ("location",               "Boston, MA"),
    "STRIPE_PAYMENT_LINK_URL": ("stripe_payment_link_url", "#"),
    "INTAKE_FORM_URL":         ("intake_form_url",        "#"),
}

_FIELD_DEFAULTS = {field_name: fallback for field_name, fallback in TOKENS.values()}

PLACEHOLDER_RE = re.compile(r"\{\{([^{}]*)\}\}")

ContentValue = Union[str, list, dict, int, float, bool, None]


def token_values(meta: dict[str, Any] | None) -> dict[str, str]:
    """Map each known token name to its replacement for this meta record."""
    meta = meta or {}
    values = {}
    for token, (field_name, fallback) in TOKENS.items():
        value = meta.get(field_name)
        values[token] = str(value) if value else fallback
    return values


def meta_value(meta: dict[str, Any] | None, field_name: str) -> str:
    """Return a meta field, falling back to its token default when unset."""
    value = (meta or {}).get(field_name)
    if value:
        return str(value)
    return _FIELD_DEFAULTS.get(field_name, "")


def replace_placeholders(text: str, values: dict[str, str]) -> str:
    """Replace every occurrence of every known token in a single string."""
    if not text or "{{" not in text:
        return text

    def _sub(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    return PLACEHOLDER_RE.sub(_sub, text)


def resolve_placeholders(value: ContentValue, meta: dict[str, Any] | None) -> ContentValue:
    """Return a deep copy of ``value`` with tokens replaced in every string.

    Args:
        value: Any JSON-shaped value (string, list, mapping, scalar).
        meta: The metadata record supplying token values.

    Returns:
        A new structure of the same shape. Scalars that are not strings
        are returned unchanged.
    """
    return _visit(value, token_values(meta))


def _visit(value: ContentValue, values: dict[str, str]) -> ContentValue:
    if isinstance(value, str):
        return replace_placeholders(value, values)
    if isinstance(value, list):
        return [_visit(item, values) for item in value]
    if isinstance(value, dict):
        return {key: _visit(item, values) for key, item in value.items()}
    return value


def resolve_document(document: dict[str, Any]) -> dict[str, Any]:
    """Resolve a whole content document against its own ``meta`` record.

    Raises:
        MissingContentKey: If the document has no ``meta`` entry.
    """
    if "meta" not in document:
        raise MissingContentKey("meta")
    return resolve_placeholders(document, document["meta"])


def is_unresolved(value: Any) -> bool:
    """True if a value is still a bare ``{{...}}`` marker after resolution."""
    return isinstance(value, str) and value.startswith("{{") and value.endswith("}}")


def find_unresolved(value: ContentValue, location: str = "") -> list[tuple[str, str]]:
    """List ``(location, marker)`` pairs for every ``{{...}}`` left in the document."""
    found: list[tuple[str, str]] = []
    if isinstance(value, str):
        for match in PLACEHOLDER_RE.finditer(value):
            found.append((location, match.group(0)))
    elif isinstance(value, list):
        for i, item in enumerate(value):
            found.extend(find_unresolved(item, f"{location}[{i}]"))
    elif isinstance(value, dict):
        for key, item in value.items():
            found.extend(find_unresolved(item, f"{location}.{key}" if location else str(key)))
    return found
