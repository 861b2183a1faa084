"""
PIPELINE TESTS - whole-source parsing through every section processor.
"""

from pagemap.core.models import PageAccessControl, Redirect
from pagemap.parsing.pipeline import SitemapPipeline
from sitemap_fixtures import (
    CLEAN_SITEMAP,
    ERRORED_SITEMAP,
    AboutUsView,
    AccountView,
    HomeView,
    LabelKey,
    ProfileView,
    WigglyHome,
    make_catalog,
)


def run(text):
    pipeline = SitemapPipeline(make_catalog())
    context = pipeline.run(text)
    return pipeline.sitemap, context


def test_clean_source_builds_tree():
    sitemap, context = run(CLEAN_SITEMAP)

    assert context.parsed
    assert sitemap.uris() == ["home", "home/account", "home/account/profile", "home/about-us"]
    assert sitemap.errors == 0
    assert not sitemap.has_errors
    assert context.warning_sum() == 0
    assert context.comment_lines == 1
    assert context.blank_lines == 3

    home = sitemap.node_for_uri("home")
    assert home.view_class is HomeView
    assert home.label_key is LabelKey.Home
    assert home.page_access_control is PageAccessControl.PUBLIC
    assert home.roles == set()

    account = sitemap.node_for_uri("home/account")
    assert account.uri_segment == "account"
    assert account.view_class is AccountView
    assert account.label_key is LabelKey.Account_Label
    assert account.label == "Account Label"
    assert account.roles == {"admin", "user"}
    assert account.page_access_control is PageAccessControl.PERMISSION

    assert sitemap.node_for_uri("home/account/profile").view_class is ProfileView
    assert sitemap.node_for_uri("home/about-us").view_class is AboutUsView
    assert sitemap.node_for_uri("home/about-us").label_key is LabelKey.About_Us
    assert sitemap.redirects == [Redirect("old-page", "new-page")]


def test_tree_queries():
    sitemap, _ = run(CLEAN_SITEMAP)
    home = sitemap.node_for_uri("home")
    account = sitemap.node_for_uri("home/account")

    assert [n.uri for n in sitemap.children_of(home)] == ["home/account", "home/about-us"]
    assert sitemap.parent_of(account) is home
    assert sitemap.roots() == [home]


def test_error_accounting():
    """Every structural problem is tallied; warnings are counted separately."""
    sitemap, context = run(ERRORED_SITEMAP)

    assert context.append_view is False
    assert context.unrecognised_options == {"colour"}
    assert context.property_errors == {
        "Property must contain an '=' sign at line 4 in the options section"}
    assert len(context.syntax_errors) == 1
    assert context.indentation_errors == {
        "Indentation error at line 2: indent of 3 follows an indent of 0"}
    assert context.undeclared_view_classes == {"Home", "Deep", "Contact"}
    assert context.missing_enums == {"Deep", "Missing_Key", "Contact"}

    assert sitemap.uris() == ["home", "home/deep", "home/contact"]
    assert sitemap.errors == 8
    assert context.warning_sum() == 2
    assert sitemap.redirects == [Redirect("a", "b")]
    assert context.info_messages == {"Invalid redirect line 'nonsense' ignored"}


def test_missing_sections_halt_processing():
    sitemap, context = run("[options]\nappendView=true\n[map]\nhome")

    assert context.missing_sections == {"viewPackages", "redirects"}
    assert sitemap.node_count == 0
    assert context.append_view is False
    # 2 missing sections + no view packages + label class never declared
    assert sitemap.errors == 4
    assert context.parsed


def test_duplicate_uri_last_write_wins():
    text = CLEAN_SITEMAP.replace(
        "-about-us",
        "-about-us\nhome;Account;Account_Label;admin;ROLES")
    sitemap, context = run(text)

    home = sitemap.node_for_uri("home")
    assert sitemap.uris()[0] == "home"
    assert sitemap.node_count == 4
    assert home.view_class is AccountView
    assert home.label_key is LabelKey.Account_Label
    assert home.roles == {"admin"}
    assert home.page_access_control is PageAccessControl.ROLES
    assert sitemap.errors == 0


def test_map_reads_after_options():
    """Options written after other sections still govern the map."""
    text = ("[map]\nhome\n[viewPackages]\ncom.example.views\n[redirects]\n"
            "[options]\nappendView=true\nlabelKeys=com.example.LabelKey\n")
    sitemap, context = run(text)

    assert sitemap.node_for_uri("home").view_class is HomeView
    assert sitemap.errors == 0


def test_label_cross_check_adds_derived_name():
    """A node whose explicit key failed is retried from its segment."""
    text = CLEAN_SITEMAP.replace("--profile", "--profile;;Nope")
    sitemap, context = run(text)

    assert context.missing_enums == {"Nope"}
    assert sitemap.node_for_uri("home/account/profile").label_key is LabelKey.Profile
    assert sitemap.errors == 1


def test_label_keys_unconfigured_records_every_name():
    text = CLEAN_SITEMAP.replace("labelKeys = com.example.LabelKey", "")
    sitemap, context = run(text)

    assert context.label_class_missing
    # the cross-check adds the segment-derived "Account" as well
    assert context.missing_enums == {"Home", "Account_Label", "Account", "Profile", "About_Us"}
    assert sitemap.errors == 5 + 1


def test_empty_view_packages():
    text = CLEAN_SITEMAP.replace("com.example.views\n", "")
    sitemap, context = run(text)

    assert context.view_packages == []
    assert context.undeclared_view_classes == {"HomeView", "AccountView", "ProfileView", "About_UsView"}
    assert sitemap.errors == 4 + 1


def test_standard_pages_section():
    text = CLEAN_SITEMAP + (
        "\n[standardPages]\n"
        "Public_Home=public : WigglyHome ~ Yes\n"
        "Broken=public/x : ~ Yes\n")
    catalog = make_catalog().register("com.example.views.WigglyHomeView", WigglyHome)
    pipeline = SitemapPipeline(catalog)
    context = pipeline.run(text)
    sitemap = pipeline.sitemap

    node = sitemap.node_for_uri("public")
    assert node.standard_page_key == "Public_Home"
    assert node.view_class is WigglyHome
    assert node.label_key is LabelKey.Yes
    assert context.syntax_errors == {"Standard page view cannot be empty at line 2"}
    assert sitemap.errors == 1


def test_parse_is_deterministic():
    """Parsing the same malformed input twice gives identical diagnostics."""
    _, first = run(ERRORED_SITEMAP)
    _, second = run(ERRORED_SITEMAP)

    for name in ("syntax_errors", "indentation_errors", "missing_enums", "invalid_view_classes",
                 "undeclared_view_classes", "property_errors", "unrecognised_options",
                 "info_messages"):
        assert getattr(first, name) == getattr(second, name)
    assert first.error_sum() == second.error_sum()


def test_accepts_line_sequence():
    sitemap, _ = run(CLEAN_SITEMAP.splitlines())
    assert sitemap.node_count == 4


def test_text_and_line_sequence_count_alike():
    """A trailing newline does not produce an extra blank line."""
    text = "[options]\n[viewPackages]\n[map]\n[redirects]\n"
    _, from_text = run(text)
    _, from_lines = run(text.splitlines())

    assert from_text.blank_lines == from_lines.blank_lines == 0

    _, clean_text = run(CLEAN_SITEMAP)
    _, clean_lines = run(CLEAN_SITEMAP.splitlines())
    assert (clean_text.blank_lines, clean_text.comment_lines) == \
        (clean_lines.blank_lines, clean_lines.comment_lines)


def test_crlf_source_counts_like_lf():
    _, context = run(CLEAN_SITEMAP.replace("\n", "\r\n"))
    assert context.blank_lines == 3
