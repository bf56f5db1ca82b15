"""Loading of Markdown sources into posts and sections."""

import logging
import re
from datetime import date, datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from personalsite.core.errors import ContentError
from personalsite.core.models import Post, PostMetadata, Section, SectionID
from personalsite.core.parser import parse_markdown
from personalsite.core.tags import slugify

logger = logging.getLogger(__name__)

SECTION_INDEX_FILENAME = "index.md"


class ContentStore:
    """File-based content store.

    Posts are stored as Markdown files with optional YAML frontmatter,
    one directory per section: ``<base>/<section-id>/<slug>.md``.
    A section's own ``index.md`` holds the section title and description.
    """

    FRONTMATTER_PATTERN = re.compile(
        r"^---\s*\n(.*?)\n---\s*\n",
        re.DOTALL,
    )
    HEADING_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$", re.MULTILINE)

    def __init__(self, base_path: Path):
        self.base_path = base_path

    def _section_dir(self, section_id: SectionID) -> Path:
        return self.base_path / section_id.value

    def _filename_to_slug(self, filename: str) -> str:
        """Convert a source filename to a URL slug."""
        return slugify(filename.removesuffix(".md"))

    def _read(self, path: Path) -> str:
        """Read a source file as UTF-8.

        Raises:
            ContentError: If the file is not valid UTF-8.
        """
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ContentError(path, f"not valid UTF-8: {e}") from e

    def _parse_frontmatter(self, path: Path, content: str) -> tuple[PostMetadata, str]:
        """Parse YAML frontmatter from content.

        Returns (metadata, content_without_frontmatter).

        Raises:
            ContentError: If the frontmatter is not valid YAML or metadata.
        """
        match = self.FRONTMATTER_PATTERN.match(content)
        if not match:
            return PostMetadata(), content

        try:
            frontmatter = yaml.safe_load(match.group(1)) or {}
        except yaml.YAMLError as e:
            raise ContentError(path, f"invalid frontmatter: {e}") from e
        if not isinstance(frontmatter, dict):
            raise ContentError(path, "frontmatter must be a mapping")

        value = frontmatter.get("date")
        if isinstance(value, date) and not isinstance(value, datetime):
            frontmatter["date"] = datetime.combine(value, datetime.min.time())

        tags = frontmatter.get("tags")
        if isinstance(tags, str):
            frontmatter["tags"] = tags.split(",")
        if isinstance(frontmatter.get("tags"), list):
            frontmatter["tags"] = [
                str(t).strip() for t in frontmatter["tags"] if str(t).strip()
            ]

        try:
            metadata = PostMetadata(**frontmatter)
        except ValidationError as e:
            raise ContentError(path, f"invalid metadata: {e}") from e
        return metadata, content[match.end() :]

    def _derive_title(self, body: str, path: Path) -> str:
        """Return the first level-one heading, or the file stem."""
        match = self.HEADING_PATTERN.search(body)
        if match:
            return match.group(1)
        return path.stem.replace("-", " ").replace("_", " ")

    def load_post(self, section_id: SectionID, path: Path) -> Post:
        """Load a single Markdown file as a post of a section."""
        raw = self._read(path)
        metadata, body = self._parse_frontmatter(path, raw)

        published = metadata.date
        if published is None:
            published = datetime.fromtimestamp(path.stat().st_mtime)

        return Post(
            path=f"/{section_id.value}/{self._filename_to_slug(path.name)}/",
            title=metadata.title or self._derive_title(body, path),
            description=metadata.description,
            body=parse_markdown(body),
            date=published,
            tags=metadata.tags,
        )

    def load_section(self, section_id: SectionID) -> Section:
        """Load a section and all its posts. Missing directories are empty."""
        section = Section(id=section_id)
        directory = self._section_dir(section_id)
        if not directory.is_dir():
            return section

        for path in sorted(directory.glob("*.md")):
            if path.name == SECTION_INDEX_FILENAME:
                metadata, _ = self._parse_frontmatter(path, self._read(path))
                section.title = metadata.title or ""
                section.description = metadata.description
                continue
            section.items.append(self.load_post(section_id, path))

        logger.info("Loaded %d items for section %s", len(section.items), section_id.value)
        return section

    def load_sections(self) -> list[Section]:
        """Load every section in navigation order."""
        return [self.load_section(section_id) for section_id in SectionID]
