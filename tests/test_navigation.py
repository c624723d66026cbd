"""Tests for path normalization and nav state."""

import pytest

from sitegen.content import MissingContentKey
from sitegen.content.navigation import (
    NavItem,
    build_nav,
    display_href,
    normalize_path,
    resolve_nav,
)


class TestNormalizePath:
    @pytest.mark.parametrize("path", [
        "/services", "/services/", "/services/index.html", "/services.html",
    ])
    def test_services_forms(self, path):
        assert normalize_path(path) == "/services"

    @pytest.mark.parametrize("path", ["/", "", "/index.html", "index.html"])
    def test_root_forms(self, path):
        assert normalize_path(path) == "/"

    @pytest.mark.parametrize("path", [
        "/", "/faq/", "/about.html", "/a/b/index.html", "/pricing",
    ])
    def test_idempotent(self, path):
        once = normalize_path(path)
        assert normalize_path(once) == once

    def test_strips_all_trailing_slashes(self):
        assert normalize_path("/faq//") == "/faq"

    def test_repeated_slashes_idempotent(self):
        once = normalize_path("/faq//")
        assert normalize_path(once) == once

    @pytest.mark.parametrize("path,expected", [
        ("/myindex.html", "/myindex"),
        ("/servicesindex.html", "/servicesindex"),
        ("/a/index.html", "/a"),
    ])
    def test_index_suffix_needs_slash(self, path, expected):
        assert normalize_path(path) == expected


class TestDisplayHref:
    def test_root_stays_root(self):
        assert display_href("/") == "/"

    @pytest.mark.parametrize("href", ["/faq", "/faq/", "/faq//", "/faq/index.html"])
    def test_exactly_one_trailing_slash(self, href):
        assert display_href(href) == "/faq/"


class TestBuildNav:
    ITEMS = [
        {"href": "/", "label": "Home"},
        {"href": "/services", "label": "Services"},
        {"href": "/services-extra/", "label": "Extra"},
    ]

    def test_marks_exactly_one_current(self):
        nav = build_nav(self.ITEMS, "/services/")
        assert [item.is_current for item in nav] == [False, True, False]

    def test_no_prefix_matching(self):
        nav = build_nav(self.ITEMS, "/services-extra")
        assert [item.label for item in nav if item.is_current] == ["Extra"]

    def test_root_current_only_on_root(self):
        assert build_nav(self.ITEMS, "/index.html")[0].is_current
        assert not build_nav(self.ITEMS, "/services")[0].is_current

    def test_index_suffix_without_slash_not_current(self):
        nav = build_nav([{"href": "/my", "label": "My"}], "/myindex.html")
        assert not nav[0].is_current

    def test_unknown_path_marks_none(self):
        assert not any(item.is_current for item in build_nav(self.ITEMS, "/confirmation"))

    def test_display_hrefs(self):
        nav = build_nav(self.ITEMS, "/")
        assert [item.href for item in nav] == ["/", "/services/", "/services-extra/"]

    def test_items_are_nav_items(self):
        nav = build_nav(self.ITEMS, "/")
        assert nav[0] == NavItem(href="/", label="Home", is_current=True)

    def test_input_not_mutated(self):
        items = [{"href": "/faq", "label": "FAQ"}]
        build_nav(items, "/faq")
        assert items == [{"href": "/faq", "label": "FAQ"}]


class TestResolveNav:
    def test_from_document(self, site_data):
        nav = resolve_nav(site_data, "/pricing")
        current = [item.label for item in nav if item.is_current]
        assert current == ["Pricing"]

    def test_missing_nav(self):
        with pytest.raises(MissingContentKey):
            resolve_nav({"meta": {}}, "/")
