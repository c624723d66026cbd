"""Page renderer — resolved content + nav state + page table → HTML.

``render_page`` is a pure function of (page key, resolved document,
request path, query). The build and the server both call it; neither
holds rendering logic of its own.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from sitegen.content import MissingContentKey
from sitegen.content.navigation import NavItem, resolve_nav
from sitegen.content.placeholders import is_unresolved, meta_value
from sitegen.pages import PAGES, PageSpec
from sitegen.pages import query as confirmation_query
from sitegen.pages import templates as t


@dataclass
class RenderedPage:
    """Everything produced for one page render."""

    spec: PageSpec
    title: str
    description: str
    robots: str
    nav: list[NavItem] = field(default_factory=list)
    html: str = ""


def build_title(page_title: str, suffix: str) -> str:
    """Full document title: ``"{page_title} | {suffix}"`` or bare suffix."""
    if not page_title:
        return suffix
    return f"{page_title} | {suffix}"


def page_description(spec: PageSpec, meta: dict[str, Any]) -> str:
    """Meta description for a page, from the page table."""
    if spec.description is None:
        return str(meta.get("seo_description") or "")
    return spec.description.format(brand_name=meta_value(meta, "brand_name"))


def render_page(
    key: str,
    data: dict[str, Any],
    request_path: str | None = None,
    query: dict[str, str] | None = None,
) -> RenderedPage:
    """Render one page.

    Args:
        key: Page key from ``PAGES`` (``home``, ``services``, ...).
        data: Resolved content document.
        request_path: Path used for nav highlighting; defaults to the
            page's own route.
        query: Parsed query parameters (confirmation page only).

    Returns:
        RenderedPage with title, description, robots, nav and HTML.

    Raises:
        KeyError: For an unknown page key, or a document without
            ``meta``/``nav``.
    """
    spec = PAGES[key]
    if "meta" not in data:
        raise MissingContentKey("meta")
    meta = data["meta"]
    nav = resolve_nav(data, request_path or spec.route)

    suffix = str(meta.get("title_suffix") or meta_value(meta, "brand_name"))
    title = build_title(spec.title, suffix)
    description = page_description(spec, meta)

    body = _BODY_RENDERERS[spec.template](spec, data, query or {})
    brand = meta_value(meta, "brand_name")
    contact_email = meta_value(meta, "contact_email")

    page_html = t.LAYOUT.format(
        title=_esc(title),
        description=_attr_esc(description),
        robots=spec.robots,
        page_key=spec.key,
        brand_name=_esc(brand),
        nav_html=_render_nav(nav),
        main=body,
        location=_esc(meta_value(meta, "location")),
        contact_email=_esc(contact_email),
        contact_email_attr=_attr_esc(contact_email),
        year=datetime.now(timezone.utc).year,
    )

    return RenderedPage(
        spec=spec,
        title=title,
        description=description,
        robots=spec.robots,
        nav=nav,
        html=page_html,
    )


# ── Page body renderers ──────────────────────────────────────────────


def _render_home(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    home = data.get("home") or {}
    faq = data.get("faq") or {}
    sections = "\n".join(
        t.CONTENT_SECTION.format(
            title=_esc(s.get("title", "")),
            body_html=_bullet_list(s.get("bullets")),
        )
        for s in home.get("sections") or []
    )
    return t.HOME_BODY.format(
        hero_headline=_esc(home.get("hero_headline", "")),
        hero_subheadline=_esc(home.get("hero_subheadline", "")),
        cta_href=_attr_esc(home.get("primary_cta_href") or "#"),
        cta_label=_esc(home.get("primary_cta_label", "")),
        sections_html=sections,
        faq_headline=_esc(faq.get("headline") or "FAQ"),
        faq_html=_render_faq_items(faq.get("items"), "home-faq"),
    )


def _render_services(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    services = data.get("services") or {}
    content = "\n".join(
        t.CONTENT_SECTION.format(
            title=_esc(s.get("title", "")),
            body_html="\n".join(filter(None, [
                _paragraphs(s.get("paragraphs")),
                _bullet_list(s.get("bullets")),
            ])),
        )
        for s in services.get("sections") or []
    )
    return t.PAGE_BODY.format(
        headline=_esc(services.get("headline", "")),
        container_class="services-sections",
        content_html=content,
    )


def _render_pricing(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    pricing = data.get("pricing") or {}
    cards = []
    for tier in pricing.get("tiers") or []:
        includes = "\n".join(
            f"          <li>{_esc(item)}</li>" for item in tier.get("includes") or []
        )
        cards.append(t.PRICING_CARD.format(
            name=_esc(tier.get("name", "")),
            price=_esc(tier.get("price", "")),
            who=_esc(tier.get("who_its_for", "")),
            includes_html=includes,
            cta_href=_attr_esc(tier.get("cta_href") or "#"),
            cta_label=_esc(tier.get("cta_label", "")),
        ))
    return t.PRICING_BODY.format(
        headline=_esc(pricing.get("headline", "")),
        tiers_html="\n".join(cards),
        fine_print_html=_bullet_list(pricing.get("fine_print")),
    )


def _render_faq(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    faq = data.get("faq") or {}
    return t.PAGE_BODY.format(
        headline=_esc(faq.get("headline", "")),
        container_class="faq-list",
        content_html=_render_faq_items(faq.get("items"), "faq"),
    )


def _render_about(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    about = data.get("about") or {}
    content = "\n".join(filter(None, [
        _paragraphs(about.get("paragraphs")),
        _bullet_list(about.get("bullets")),
    ]))
    return t.PAGE_BODY.format(
        headline=_esc(about.get("headline", "")),
        container_class="about-content",
        content_html=content,
    )


def _render_contact(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    contact = data.get("contact") or {}
    meta = data["meta"]
    blocks = []
    for block in contact.get("contact_blocks") or []:
        label = str(block.get("label", ""))
        value = str(block.get("value") or "")
        if is_unresolved(value):
            value_html = t.NOT_PROVIDED
        elif label.lower() == "email" and "@" in value:
            value_html = f'<a href="mailto:{_attr_esc(value)}">{_esc(value)}</a>'
        else:
            value_html = _esc(value)
        blocks.append(t.CONTACT_BLOCK.format(label=_esc(label), value_html=value_html))
    return t.CONTACT_BODY.format(
        headline=_esc(contact.get("headline", "")),
        intro_html=_paragraphs(contact.get("paragraphs")),
        blocks_html="\n".join(blocks),
        payment_href=_attr_esc(meta_value(meta, "stripe_payment_link_url")),
    )


def _render_legal(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    page = data.get(spec.key) or {}
    content = "\n".join(
        t.LEGAL_SECTION.format(
            title=_esc(s.get("title", "")),
            body_html=_paragraphs(s.get("paragraphs")),
        )
        for s in page.get("sections") or []
    )
    return t.PAGE_BODY.format(
        headline=_esc(page.get("headline") or spec.title),
        container_class="legal-content",
        content_html=content,
    )


def _render_confirmation(spec: PageSpec, data: dict[str, Any], query: dict[str, str]) -> str:
    meta = data["meta"]
    reference = confirmation_query.reference_from_query(query)
    email = confirmation_query.client_email_from_query(query)
    support_email = meta_value(meta, "contact_email")
    return t.CONFIRMATION_BODY.format(
        reference_hidden="" if reference else " hidden",
        reference_text=_esc(f"Reference: {reference}") if reference else "",
        reference_max_length=confirmation_query.REFERENCE_MAX_LENGTH,
        reference_keys=",".join(confirmation_query.REFERENCE_KEYS),
        email_hidden="" if email else " hidden",
        email_text=_esc(f"We'll send updates to: {email}") if email else "",
        email_max_length=confirmation_query.CLIENT_EMAIL_MAX_LENGTH,
        intake_href=_attr_esc(meta_value(meta, "intake_form_url")),
        support_email=_esc(support_email),
        support_email_attr=_attr_esc(support_email),
    )


_BODY_RENDERERS: dict[str, Callable[[PageSpec, dict[str, Any], dict[str, str]], str]] = {
    "home": _render_home,
    "services": _render_services,
    "pricing": _render_pricing,
    "faq": _render_faq,
    "about": _render_about,
    "contact": _render_contact,
    "legal": _render_legal,
    "confirmation": _render_confirmation,
}


# ── HTML fragment renderers ──────────────────────────────────────────


def _render_nav(nav: list[NavItem]) -> str:
    return "\n".join(
        t.NAV_ITEM.format(
            href=_attr_esc(item.href),
            current=' aria-current="page"' if item.is_current else "",
            label=_esc(item.label),
        )
        for item in nav
    )


def _render_faq_items(items: list[dict[str, str]] | None, id_prefix: str) -> str:
    return "\n".join(
        t.FAQ_ITEM.format(
            item_id=f"{id_prefix}-{i}",
            question=_esc(item.get("q", "")),
            answer=_esc(item.get("a", "")),
        )
        for i, item in enumerate(items or [])
    )


def _bullet_list(items: list[str] | None) -> str:
    if not items:
        return ""
    lis = "".join(f"<li>{_esc(item)}</li>" for item in items)
    return f"        <ul>{lis}</ul>"


def _paragraphs(paragraphs: list[str] | None) -> str:
    return "\n".join(f"        <p>{_esc(p)}</p>" for p in paragraphs or [])


# ── Escaping helpers ─────────────────────────────────────────────────


def _esc(text: Any) -> str:
    """Escape text for HTML content."""
    if text is None:
        return ""
    return html.escape(str(text), quote=False)


def _attr_esc(text: Any) -> str:
    """Escape text for HTML attribute values."""
    if text is None:
        return ""
    return html.escape(str(text), quote=True)
