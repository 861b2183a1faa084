from ruamel.yaml import YAML

from pagemap.parsing.pipeline import SitemapPipeline
from pagemap.report.exporter import SitemapExporter
from sitemap_fixtures import CLEAN_SITEMAP, make_catalog


def test_export_nests_children_and_redirects():
    """The exported YAML mirrors the URI hierarchy."""
    pipeline = SitemapPipeline(make_catalog())
    pipeline.run(CLEAN_SITEMAP)

    text = SitemapExporter().export(pipeline.sitemap)
    data = YAML(typ="safe").load(text)

    assert text.startswith("# 4 pages, 1 redirects, 0 errors")
    assert list(data["pages"]) == ["home"]
    home = data["pages"]["home"]
    assert home["view"] == "sitemap_fixtures.HomeView"
    assert home["label_key"] == "Home"
    assert home["access"] == "public"
    assert list(home["children"]) == ["account", "about-us"]

    account = home["children"]["account"]
    assert account["roles"] == ["admin", "user"]
    assert account["access"] == "permission"
    assert account["children"]["profile"]["label_key"] == "Profile"
    assert data["redirects"] == [{"from": "old-page", "to": "new-page"}]


def test_unbound_node_exports_access_only():
    pipeline = SitemapPipeline(make_catalog())
    pipeline.run("[options]\n[viewPackages]\n[map]\nlost\n[redirects]\n")

    data = YAML(typ="safe").load(SitemapExporter().export(pipeline.sitemap))
    assert data["pages"] == {"lost": {"access": "public"}}
    assert "redirects" not in data


def test_duplicate_redirects_are_all_exported_in_order():
    pipeline = SitemapPipeline(make_catalog())
    pipeline.run("[options]\n[viewPackages]\n[map]\n[redirects]\na : b\na : c\na : b\n")

    text = SitemapExporter().export(pipeline.sitemap)
    data = YAML(typ="safe").load(text)

    assert text.startswith("# 0 pages, 3 redirects,")
    assert data["redirects"] == [
        {"from": "a", "to": "b"},
        {"from": "a", "to": "c"},
        {"from": "a", "to": "b"},
    ]
    assert pipeline.sitemap.redirect_for("a") == "b"
