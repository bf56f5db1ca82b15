"""Page rendering.

A page is described by a :data:`PageRequest` and turned into a complete
HTML document by :func:`render`. Rendering never mutates the site model.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from personalsite.core import components
from personalsite.core.models import Post, SectionID
from personalsite.core.styles import FontSize, Icon, TextColor, css_classes
from personalsite.core.tags import TAG_LIST_PATH, tag_color, tag_path, tag_slug

if TYPE_CHECKING:
    from personalsite.core.pipeline import PublishingContext


@dataclass(frozen=True)
class IndexPage:
    pass


@dataclass(frozen=True)
class SectionPage:
    section_id: SectionID


@dataclass(frozen=True)
class PostPage:
    post: Post


@dataclass(frozen=True)
class TagListPage:
    pass


@dataclass(frozen=True)
class TagDetailPage:
    tag: str


PageRequest = IndexPage | SectionPage | PostPage | TagListPage | TagDetailPage


templates_path = Path(__file__).parent.parent / "templates"

templates = Environment(
    loader=FileSystemLoader(str(templates_path)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
templates.filters["post_date"] = components.format_post_date
templates.globals.update(
    css_classes=css_classes,
    link_tag=components.link_tag,
    tag_badge=components.tag_badge,
    post_card=components.post_card,
    icon=components.icon,
    icon_text_card=components.icon_text_card,
    tag_card=components.tag_card,
    tag_color=tag_color,
    FontSize=FontSize,
    Icon=Icon,
    TextColor=TextColor,
    tag_list_path=TAG_LIST_PATH,
)


def _base_context(context: "PublishingContext", current_section: SectionID | None, title: str) -> dict:
    """Create base context for templates."""
    return {
        "site": context.site,
        "sections": list(context.sections.values()),
        "current_section": current_section,
        "page_title": title,
    }


def render(request: PageRequest, context: "PublishingContext") -> str:
    """Render one page of the site to an HTML document."""
    match request:
        case IndexPage():
            items = context.all_items()
            return templates.get_template("index.html").render(
                **_base_context(context, None, context.site.name),
                latest=items[0] if items else None,
            )
        case SectionPage(section_id=section_id):
            section = context.sections[section_id]
            return templates.get_template(f"section/{section_id.value}.html").render(
                **_base_context(context, section_id, section.title),
                section=section,
            )
        case PostPage(post=post):
            return templates.get_template("post.html").render(
                **_base_context(context, post.section_id, post.title),
                post=post,
            )
        case TagListPage():
            return templates.get_template("tag_list.html").render(
                **_base_context(context, None, "Tags"),
                tags=context.all_tags(),
            )
        case TagDetailPage(tag=tag):
            return templates.get_template("tag_detail.html").render(
                **_base_context(context, None, tag),
                tag=tag,
                items=context.items_tagged_with(tag),
            )
    raise TypeError(f"Unknown page request: {request!r}")


def output_path(request: PageRequest) -> str:
    """Return the file a page is written to, relative to the output root."""
    match request:
        case IndexPage():
            return "index.html"
        case SectionPage(section_id=section_id):
            return f"{section_id.value}/index.html"
        case PostPage(post=post):
            return f"{post.path.strip('/')}/index.html"
        case TagListPage():
            return f"{TAG_LIST_PATH.strip('/')}/index.html"
        case TagDetailPage(tag=tag):
            return f"{tag_path(tag).strip('/')}/index.html"
    raise TypeError(f"Unknown page request: {request!r}")


def page_requests(context: "PublishingContext") -> list[PageRequest]:
    """Every page the site consists of."""
    requests: list[PageRequest] = [IndexPage()]
    for section in context.sections.values():
        requests.append(SectionPage(section.id))
        requests.extend(PostPage(item) for item in section.items)
    requests.append(TagListPage())
    # One page per slug; spellings that share a slug share the page
    pages_by_slug: dict[str, str] = {}
    for tag in context.all_tags():
        pages_by_slug.setdefault(tag_slug(tag), tag)
    requests.extend(TagDetailPage(tag) for tag in pages_by_slug.values())
    return requests


def render_site(context: "PublishingContext") -> dict[str, str]:
    """Render every page, keyed by output path."""
    return {output_path(r): render(r, context) for r in page_requests(context)}
