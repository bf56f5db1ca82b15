"""Unit tests for CSS class composition and HTML fragments."""

from datetime import datetime

from personalsite.core.components import (
    format_post_date,
    link_tag,
    post_card,
    post_date,
    post_title,
    tag_badge,
    tag_links,
)
from personalsite.core.styles import FontSize, Icon, css_classes
from personalsite.core.tags import TagColor


# ============================================================
# css_classes
# ============================================================


class TestCssClasses:
    def test_joins_in_order(self):
        assert css_classes("badge", "badge-pill", "fs-12") == "badge badge-pill fs-12"

    def test_flattens_iterables(self):
        assert css_classes("card", ["mb-3", "card-size"]) == "card mb-3 card-size"

    def test_skips_none_and_empty(self):
        assert css_classes("nav-item", None, "", ["nav-link", ""]) == "nav-item nav-link"

    def test_no_tokens(self):
        assert css_classes() == ""


class TestIcon:
    def test_named(self):
        assert Icon.named("github") is Icon.GITHUB
        assert Icon.named("stackoverflow").css_class == "fab fa-stack-overflow"


# ============================================================
# Fragments
# ============================================================


class TestPostDate:
    def test_format_medium_style(self):
        assert format_post_date(datetime(2020, 1, 5, 14, 30)) == "Jan 5, 2020"

    def test_marker(self):
        html = post_date(datetime(2021, 11, 23))
        assert html == '<p class="post date">Nov 23, 2021</p>'


class TestPostTitle:
    def test_heading(self):
        assert post_title("Hello") == "<h1>Hello</h1>"

    def test_escapes_title(self):
        assert post_title("<script>") == "<h1>&lt;script&gt;</h1>"


class TestTagBadge:
    def test_default_classes(self):
        html = tag_badge("swift")
        assert html == (
            '<span class="badge badge-pill badge-info fs-14 text-monospace">swift</span>'
        )

    def test_additional_classes_come_last(self):
        html = tag_badge("swift", FontSize.LARGE, TagColor.RED, ["ml-2", "pt-2"])
        assert 'class="badge badge-pill badge-danger fs-18 text-monospace ml-2 pt-2"' in html


class TestLinkTag:
    def test_links_to_tag_page(self, site):
        html = link_tag(site, "Swift UI")
        assert html.startswith('<a href="https://example.com/tags/swift-ui/">')
        assert ">Swift UI</span></a>" in html

    def test_uses_tag_color(self, site):
        assert "badge-primary" in link_tag(site, "apple")
        assert "badge-danger" in link_tag(site, "zebra")

    def test_font_size(self, site):
        assert "fs-12" in link_tag(site, "apple", FontSize.SMALL)

    def test_tag_links_keep_order(self, site):
        html = tag_links(site, ["zebra", "apple"])
        assert html.count("<a ") == 2
        assert html.index(">zebra<") < html.index(">apple<")

    def test_tag_links_empty(self, site):
        assert tag_links(site, []) == ""


class TestPostCard:
    def test_contents(self, site, post_factory):
        post = post_factory(title="My <Post>", description="About things", tags=["ios"])
        html = post_card(site, post)
        assert 'href="/posts/hello/"' in html
        assert "My &lt;Post&gt;" in html
        assert "About things" in html
        assert "Jan 5, 2020" in html
        assert "https://example.com/tags/ios/" in html
