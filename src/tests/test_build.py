"""End-to-end tests of the site build."""

from unittest.mock import MagicMock

import pytest

from personalsite.build import build_site, default_steps
from personalsite.config import Settings
from personalsite.core.deploy import GitDeployer
from personalsite.core.errors import ContentError, UntaggedPostError


def write_post(content_dir, slug, title, date, tags="swift", body="Body text"):
    path = content_dir / "posts" / f"{slug}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f"---\ntitle: {title}\ndescription: About {title}\ndate: {date}\ntags: {tags}\n---\n\n{body}\n",
        encoding="utf-8",
    )


@pytest.fixture
def config(tmp_path):
    return Settings(
        _env_file=None,
        content_dir=tmp_path / "Content",
        output_dir=tmp_path / "Output",
        site_url="https://example.com",
        site_name="Example",
        deploy_remote=None,
    )


@pytest.fixture
def content_dir(config):
    write_post(config.content_dir, "second", "Second", "2020-06-01 09:00:00", tags="ios, swift")
    write_post(config.content_dir, "first", "First", "2021-02-01 09:00:00", tags="apple")
    write_post(config.content_dir, "third", "Third", "2019-01-01 09:00:00", tags="zebra")
    return config.content_dir


class TestBuildSite:
    def test_posts_page_newest_first(self, config, content_dir):
        build_site(config)
        html = (config.output_dir / "posts" / "index.html").read_text(encoding="utf-8")
        assert html.index("First") < html.index("Second") < html.index("Third")

    def test_index_shows_newest_post_only(self, config, content_dir):
        build_site(config)
        html = (config.output_dir / "index.html").read_text(encoding="utf-8")
        assert "About First" in html
        assert "About Second" not in html
        assert "About Third" not in html

    def test_post_page_body_order(self, config, content_dir):
        build_site(config)
        html = (config.output_dir / "posts" / "second" / "index.html").read_text(encoding="utf-8")
        title_at = html.index("<h1>Second</h1>")
        tags_at = html.index('<a href="https://example.com/tags/ios/">')
        date_at = html.index('<p class="post date">Jun 1, 2020</p>')
        body_at = html.index("<p>Body text</p>")
        assert title_at < tags_at < date_at < body_at

    def test_writes_every_page(self, config, content_dir):
        build_site(config)
        out = config.output_dir
        for relative in [
            "index.html",
            "me/index.html",
            "posts/index.html",
            "projects/index.html",
            "posts/first/index.html",
            "tags/index.html",
            "tags/apple/index.html",
            "tags/zebra/index.html",
        ]:
            assert (out / relative).is_file(), relative

    def test_tag_list_sorted(self, config, content_dir):
        build_site(config)
        html = (config.output_dir / "tags" / "index.html").read_text(encoding="utf-8")
        positions = [html.index(f">{tag}</span>") for tag in ["apple", "ios", "swift", "zebra"]]
        assert positions == sorted(positions)

    def test_section_titles_assigned(self, config, content_dir):
        context = build_site(config)
        assert all(section.title for section in context.sections.values())

    def test_empty_content_builds_placeholder_index(self, config):
        build_site(config)
        html = (config.output_dir / "index.html").read_text(encoding="utf-8")
        assert "No posts yet." in html

    def test_untagged_post_aborts_build(self, config, content_dir):
        (content_dir / "posts" / "bare.md").write_text("---\ntitle: Bare\n---\nText", encoding="utf-8")
        with pytest.raises(UntaggedPostError):
            build_site(config)
        assert not (config.output_dir / "index.html").exists()

    def test_malformed_frontmatter_aborts_build(self, config, content_dir):
        (content_dir / "posts" / "broken.md").write_text("---\ntitle: [x\n---\nText", encoding="utf-8")
        with pytest.raises(ContentError):
            build_site(config)

    def test_deploys_once_after_output(self, config, content_dir):
        sink = MagicMock()
        sink.deploy.side_effect = lambda out: (out / "index.html").exists() or pytest.fail("deployed before output")
        build_site(config, sink=sink)
        sink.deploy.assert_called_once_with(config.output_dir)


class TestDefaultSteps:
    def test_order(self, config):
        names = [s.name for s in default_steps(config)]
        assert names == [
            "Add section titles",
            "Add Markdown files",
            "Sort items by date",
            "Ensure all items are tagged",
            "Insert date in posts",
            "Insert tags in posts",
            "Insert titles in posts",
            "Generate HTML",
            "Write output",
        ]

    def test_git_deploy_when_remote_configured(self, config):
        config.deploy_remote = "git@example.com:me/site.git"
        steps = default_steps(config)
        assert steps[-1].name == "Deploy"

    def test_explicit_sink(self, config):
        steps = default_steps(config, sink=GitDeployer("remote"))
        assert steps[-1].name == "Deploy"
