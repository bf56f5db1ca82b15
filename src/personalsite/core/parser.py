"""Markdown parser for post bodies."""

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor


# Pattern for strikethrough: ~~text~~
# Group 2 must contain the text (SimpleTagInlineProcessor expectation)
STRIKETHROUGH_PATTERN = r"(~~)(.*?)~~"


class StrikethroughExtension(Extension):
    """Markdown extension for ~~strikethrough~~ text."""

    def extendMarkdown(self, md: Markdown) -> None:
        """Add strikethrough pattern to markdown parser."""
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            50,
        )


def create_parser() -> Markdown:
    """Create a Markdown parser for post bodies.

    Returns:
        Configured Markdown parser instance.
    """
    return Markdown(
        extensions=[
            "extra",  # Includes: abbreviations, attr_list, def_list, fenced_code, footnotes, md_in_html, tables
            "sane_lists",  # Better list handling
            "smarty",  # Smart quotes and dashes
            "codehilite",  # Pygments syntax highlighting
            # PyMdown extensions
            "pymdownx.tasklist",  # Task lists with checkboxes
            StrikethroughExtension(),  # ~~strikethrough~~
        ],
        extension_configs={
            "codehilite": {"guess_lang": False},
        },
    )


def parse_markdown(content: str) -> str:
    """Convert a Markdown post body to an HTML fragment.

    Args:
        content: Markdown source without frontmatter.

    Returns:
        HTML string.
    """
    parser = create_parser()
    return parser.convert(content)
