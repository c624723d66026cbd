"""Canonical page definitions — single source of truth.

All route, title, meta description and robots mappings live here.
No other module (server, build, client script) should define its own
page table.
"""

from __future__ import annotations

from dataclasses import dataclass

from sitegen.content.navigation import normalize_path

INDEXABLE = "index, follow"
NOT_INDEXABLE = "noindex, nofollow"


@dataclass(frozen=True)
class PageSpec:
    """Static metadata for one page key."""

    key: str
    route: str
    template: str
    title: str = ""
    # None means "use meta.seo_description"; may contain {brand_name}
    description: str | None = None
    robots: str = INDEXABLE

    @property
    def output_path(self) -> str:
        """Relative path of the generated file, e.g. ``services/index.html``."""
        if self.route == "/":
            return "index.html"
        return f"{self.route.strip('/')}/index.html"


PAGES: dict[str, PageSpec] = {
    "home": PageSpec("home", "/", "home"),
    "services": PageSpec(
        "services", "/services", "services", "Services",
        "48-hour email authentication setup: SPF, DKIM, DMARC configuration with objective verification.",
    ),
    "pricing": PageSpec(
        "pricing", "/pricing", "pricing", "Pricing",
        "Simple flat pricing: $199 one-time for complete email authentication setup.",
    ),
    "faq": PageSpec(
        "faq", "/faq", "faq", "FAQ",
        "Frequently asked questions about email authentication setup and bulk-sender compliance.",
    ),
    "about": PageSpec(
        "about", "/about", "about", "About",
        "Learn about our focused, proof-based email authentication setup service.",
    ),
    "contact": PageSpec(
        "contact", "/contact", "contact", "Contact",
        "Contact us for email authentication setup questions or support.",
    ),
    "privacy": PageSpec("privacy", "/privacy", "legal", "Privacy Policy", "Privacy Policy for {brand_name}."),
    "terms": PageSpec("terms", "/terms", "legal", "Terms of Service", "Terms of Service for {brand_name}."),
    "refund": PageSpec("refund", "/refund", "legal", "Refund Policy", "Refund Policy for {brand_name}."),
    "confirmation": PageSpec(
        "confirmation", "/confirmation", "confirmation", "Payment Received — Next Steps",
        "Payment confirmed. Next steps for your 48-hour email authentication setup.",
        NOT_INDEXABLE,
    ),
}


def route_map() -> dict[str, str]:
    """Map normalized routes (``/``, ``/services``, ...) → page keys."""
    return {spec.route: key for key, spec in PAGES.items()}


def page_for_path(path: str) -> PageSpec | None:
    """Resolve a request path to its page, accepting trailing-slash forms."""
    key = route_map().get(normalize_path(path))
    return PAGES[key] if key else None
