import sys

from pagemap.cli.main import PageMapCLI

HOST_SITEMAP = """\
[options]
appendView=true
labelKeys=sitemap_fixtures.LabelKey
[viewPackages]
sitemap_fixtures
[map]
home
-account;Account;Account_Label
[redirects]
"""


def test_check_passes_with_registered_module(tmp_path):
    source = tmp_path / "site.txt"
    source.write_text(HOST_SITEMAP, encoding="utf-8")

    assert PageMapCLI().run(["check", str(source), "-m", "sitemap_fixtures"]) == 0


def test_check_fails_on_errors(tmp_path):
    source = tmp_path / "site.txt"
    source.write_text(HOST_SITEMAP.replace("-account;Account;Account_Label", "-nowhere"), encoding="utf-8")

    assert PageMapCLI().run(["check", str(source), "-m", "sitemap_fixtures"]) == 1


def test_export_from_config(tmp_path):
    (tmp_path / "site.txt").write_text(HOST_SITEMAP, encoding="utf-8")
    config = tmp_path / "pagemap.yaml"
    config.write_text("sources:\n  site: site.txt\nmodules:\n  - sitemap_fixtures\n", encoding="utf-8")

    assert PageMapCLI().run(["export", str(config)]) == 0


def test_bad_config_exit_code(tmp_path):
    config = tmp_path / "pagemap.yaml"
    config.write_text("sources: [", encoding="utf-8")
    assert PageMapCLI().run(["check", str(config)]) == 2


def test_unknown_module_exit_code(tmp_path):
    source = tmp_path / "site.txt"
    source.write_text(HOST_SITEMAP, encoding="utf-8")
    assert PageMapCLI().run(["check", str(source), "-m", "no_such_module_here"]) == 2


HOST_VIEWS = """\
from enum import Enum

from pagemap.registry.capabilities import I18NKey, NavigableView


class Keys(I18NKey, Enum):
    Landing = "landing"


class LandingView(NavigableView):
    pass
"""


def test_path_option_makes_host_module_importable(tmp_path, monkeypatch):
    """Modules outside the interpreter path are found through --path."""
    monkeypatch.setattr(sys, "path", list(sys.path))
    host = tmp_path / "host"
    host.mkdir()
    (host / "pagemap_cli_host_views.py").write_text(HOST_VIEWS, encoding="utf-8")
    source = tmp_path / "site.txt"
    source.write_text(
        "[options]\nappendView=true\nlabelKeys=pagemap_cli_host_views.Keys\n"
        "[viewPackages]\npagemap_cli_host_views\n[map]\nlanding\n[redirects]\n",
        encoding="utf-8",
    )

    argv = ["check", str(source), "-m", "pagemap_cli_host_views", "--path", str(host)]
    assert PageMapCLI().run(argv) == 0
    assert sys.path[0] == str(host)
