"""Tag colours and tag page paths."""

import hashlib
import re
from enum import Enum

TAG_LIST_PATH = "/tags/"

_SLUG_STRIP = re.compile(r"[^\w-]|_")


class TagColor(Enum):
    """Badge palette. Each value is the matching Bootstrap class."""

    BLUE = "badge-primary"
    GRAY = "badge-secondary"
    GREEN = "badge-success"
    RED = "badge-danger"
    YELLOW = "badge-warning"
    CYAN = "badge-info"
    WHITE = "badge-light"
    BLACK = "badge-dark"

    @property
    def css_class(self) -> str:
        return self.value


def tag_color(tag: str) -> TagColor:
    """Return the display colour for a tag from its first character.

    Only lower-case ASCII letters are mapped; anything else, including an
    empty tag, is cyan.
    """
    if not tag:
        return TagColor.CYAN
    first = tag[0]
    if "a" <= first <= "c":
        return TagColor.BLUE
    if "d" <= first <= "o":
        return TagColor.GREEN
    if "p" <= first <= "t":
        return TagColor.CYAN
    if "u" <= first <= "z":
        return TagColor.RED
    return TagColor.CYAN


def slugify(text: str) -> str:
    """Normalize text into a URL path segment.

    Letters and digits of any script are kept, spaces become dashes and
    everything else is dropped. Text with nothing left maps to a short
    hash so the segment is never empty.
    """
    slug = _SLUG_STRIP.sub("", text.strip().lower().replace(" ", "-"))
    if slug.strip("-"):
        return slug
    return "x-" + hashlib.sha1(text.encode("utf-8")).hexdigest()[:8]


def tag_slug(tag: str) -> str:
    """Normalize a tag into a URL path segment."""
    return slugify(tag)


def tag_path(tag: str) -> str:
    """Site-relative path of a tag's detail page."""
    return f"{TAG_LIST_PATH}{tag_slug(tag)}/"
