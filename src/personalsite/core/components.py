"""HTML fragments shared by publishing steps and page templates.

Every function returns :class:`markupsafe.Markup`, so the result can be
prepended to a post body or emitted from a Jinja2 template unescaped.
Text arguments are always escaped.
"""

from datetime import datetime

from markupsafe import Markup, escape

from personalsite.core.models import Post, Site
from personalsite.core.styles import FontSize, Icon, TextColor, css_classes
from personalsite.core.tags import TagColor, tag_color, tag_path

TAG_SPACING = ["pt-2", "pb-2", "mr-2", "mb-2"]


def format_post_date(date: datetime) -> str:
    """Format a post date in medium style, e.g. ``Jan 5, 2020``."""
    return f"{date:%b} {date.day}, {date.year}"


def tag_badge(
    tag: str,
    font_size: FontSize = FontSize.MEDIUM,
    color: TagColor = TagColor.CYAN,
    additional_classes: list[str] | None = None,
) -> Markup:
    """Render a tag as a pill badge."""
    classes = css_classes(
        "badge",
        "badge-pill",
        color.css_class,
        font_size.css_class,
        "text-monospace",
        additional_classes,
    )
    return Markup('<span class="{}">{}</span>').format(classes, tag)


def link_tag(
    site: Site,
    tag: str,
    font_size: FontSize = FontSize.MEDIUM,
    color: TagColor | None = None,
) -> Markup:
    """Render a tag badge linking to the tag's detail page."""
    if color is None:
        color = tag_color(tag)
    badge = tag_badge(tag, font_size, color, TAG_SPACING)
    return Markup('<a href="{}">{}</a>').format(site.url_for(tag_path(tag)), badge)


def tag_links(site: Site, tags: list[str], font_size: FontSize = FontSize.SMALL) -> Markup:
    """Render one link tag per tag, in the given order."""
    return Markup("").join(link_tag(site, tag, font_size) for tag in tags)


def post_date(date: datetime) -> Markup:
    """Date marker prepended to post bodies."""
    return Markup('<p class="{}">{}</p>').format(
        css_classes("post", "date"), format_post_date(date)
    )


def post_title(title: str) -> Markup:
    """Heading prepended to post bodies."""
    return Markup("<h1>{}</h1>").format(title)


def icon(name: Icon, *extra: str) -> Markup:
    return Markup('<i class="{}"></i>').format(css_classes(name.css_class, extra))


def post_card(site: Site, post: Post) -> Markup:
    """Summary card of a post: linked title, tags, description and date."""
    return Markup(
        '<div class="{card}">'
        '<div class="card-body">'
        '<div class="card-title">'
        '<h5><a class="{white}" href="{href}">{title}</a></h5>'
        "{tags}"
        "</div>"
        '<p class="card-text">{description}</p>'
        '<p class="{date_classes}">{date}</p>'
        "</div>"
        "</div>"
    ).format(
        card=css_classes("card", TextColor.WHITE.css_class, "bg-dark", "mb-3", "card-size"),
        white=TextColor.WHITE.css_class,
        href=post.path,
        title=post.title,
        tags=tag_links(site, post.tags),
        description=post.description,
        date_classes=css_classes(TextColor.RED.css_class, "mb-0"),
        date=format_post_date(post.date),
    )


def icon_text_card(
    header_title: str,
    header_icon: Icon,
    icon_size: FontSize,
    title: str,
    text: str,
    additional_icon_classes: list[str] | None = None,
) -> Markup:
    return Markup(
        '<div class="{card}">'
        '<div class="card-header"><span>{icon}{header}</span></div>'
        '<div class="card-body">'
        '<h5 class="card-title">{title}</h5>'
        '<p class="card-text">{text}</p>'
        "</div>"
        "</div>"
    ).format(
        card=css_classes("card", TextColor.WHITE.css_class, "bg-dark", "mb-3", "card-size"),
        icon=icon(header_icon, icon_size.css_class, *(additional_icon_classes or [])),
        header=header_title,
        title=title,
        text=text,
    )


def tag_card(
    header_title: str,
    header_icon: Icon,
    icon_size: FontSize,
    tags: list[str],
    additional_icon_classes: list[str] | None = None,
) -> Markup:
    """Card listing plain (unlinked) tag badges."""
    badges = Markup("").join(
        tag_badge(tag, additional_classes=["pt-2", "pb-2", "mr-4", "mb-2"])
        for tag in tags
    )
    return Markup(
        '<div class="{card}">'
        '<div class="card-header"><span>{icon}{header}</span></div>'
        '<div class="card-body">{badges}</div>'
        "</div>"
    ).format(
        card=css_classes("card", TextColor.WHITE.css_class, "bg-dark", "mb-3", "card-size"),
        icon=icon(header_icon, icon_size.css_class, *(additional_icon_classes or [])),
        header=header_title,
        badges=badges,
    )
