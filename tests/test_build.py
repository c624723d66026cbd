"""Tests for the static build."""

import json

import pytest

from sitegen.build import build_site, copy_assets
from sitegen.content import ContentLoadError
from sitegen.pages import PAGES


class TestBuildSite:
    def test_writes_every_route(self, content_file, tmp_path):
        out = tmp_path / "dist"
        result = build_site(content_file, out)
        assert result["errors"] == []
        assert len(result["generated"]) == len(PAGES)
        for spec in PAGES.values():
            assert (out / spec.output_path).is_file(), spec.key
        assert (out / "index.html").is_file()
        assert (out / "services" / "index.html").is_file()

    def test_each_page_marks_its_own_nav(self, content_file, tmp_path):
        out = tmp_path / "dist"
        build_site(content_file, out)
        faq = (out / "faq" / "index.html").read_text(encoding="utf-8")
        assert '<a href="/faq/" aria-current="page">FAQ</a>' in faq
        home = (out / "index.html").read_text(encoding="utf-8")
        assert '<a href="/" aria-current="page">Home</a>' in home

    def test_confirmation_not_indexable(self, content_file, tmp_path):
        out = tmp_path / "dist"
        build_site(content_file, out)
        html = (out / "confirmation" / "index.html").read_text(encoding="utf-8")
        assert 'content="noindex, nofollow"' in html

    def test_dry_run_writes_nothing(self, content_file, tmp_path):
        out = tmp_path / "dist"
        result = build_site(content_file, out, dry_run=True)
        assert result["dry_run"] is True
        assert len(result["generated"]) == len(PAGES)
        assert not out.exists()

    def test_page_filter(self, content_file, tmp_path):
        result = build_site(content_file, tmp_path / "dist", pages=["faq", "blog"])
        assert [g["page"] for g in result["generated"]] == ["faq"]
        assert result["errors"][0]["page"] == "blog"

    def test_missing_content_raises(self, tmp_path):
        with pytest.raises(ContentLoadError):
            build_site(tmp_path / "missing.json", tmp_path / "dist")

    def test_missing_nav_reported_per_page(self, tmp_path):
        path = tmp_path / "site_copy.json"
        path.write_text(json.dumps({"meta": {"brand_name": "X"}}), encoding="utf-8")
        result = build_site(path, tmp_path / "dist")
        assert result["generated"] == []
        assert len(result["errors"]) == len(PAGES)
        assert "nav" in result["errors"][0]["error"]


class TestCopyAssets:
    def test_packaged_client_script(self, tmp_path):
        copied = copy_assets(tmp_path / "assets")
        assert "site.js" in copied
        assert (tmp_path / "assets" / "site.js").is_file()

    def test_site_assets_override(self, tmp_path):
        site_assets = tmp_path / "site-assets"
        (site_assets / "img").mkdir(parents=True)
        (site_assets / "site.js").write_text("// custom", encoding="utf-8")
        (site_assets / "img" / "logo.svg").write_text("<svg/>", encoding="utf-8")

        target = tmp_path / "out"
        copied = copy_assets(target, site_assets)
        assert copied.count("site.js") == 1
        assert "img/logo.svg" in copied
        assert (target / "site.js").read_text(encoding="utf-8") == "// custom"

    def test_missing_site_assets_dir_ignored(self, tmp_path):
        copied = copy_assets(tmp_path / "out", tmp_path / "nope")
        assert copied == ["site.js"]

    def test_dry_run(self, tmp_path):
        copied = copy_assets(tmp_path / "out", dry_run=True)
        assert copied == ["site.js"]
        assert not (tmp_path / "out").exists()
