"""CSS class vocabulary shared by components and templates."""

from enum import Enum
from typing import Iterable


def css_classes(*tokens: str | Iterable[str] | None) -> str:
    """Join class-name tokens into a single ``class`` attribute value.

    Accepts strings, iterables of strings and ``None``; empty tokens are
    skipped and order is preserved.
    """
    flat: list[str] = []
    for token in tokens:
        if token is None:
            continue
        if isinstance(token, str):
            flat.append(token)
        else:
            flat.extend(token)
    return " ".join(t for t in flat if t)


class FontSize(Enum):
    SMALL = "fs-12"
    MEDIUM = "fs-14"
    LARGE = "fs-18"
    DISPLAY = "fs-32"

    @property
    def css_class(self) -> str:
        return self.value


class TextColor(Enum):
    RED = "text-danger"
    WHITE = "text-white"

    @property
    def css_class(self) -> str:
        return self.value


class Icon(Enum):
    GITHUB = "fab fa-github"
    LAPTOP = "fas fa-laptop-code"
    LINKEDIN = "fab fa-linkedin"
    MEDIUM = "fab fa-medium"
    STACKOVERFLOW = "fab fa-stack-overflow"
    USER = "fas fa-user"
    XING = "fab fa-xing"

    @property
    def css_class(self) -> str:
        return self.value

    @classmethod
    def named(cls, name: str) -> "Icon":
        """Look up an icon by its lower-case name, e.g. ``"github"``."""
        return cls[name.upper()]
