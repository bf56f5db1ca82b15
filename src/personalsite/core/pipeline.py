"""Publishing pipeline: ordered steps applied to the site before output.

Each step takes the :class:`PublishingContext` by exclusive ownership,
mutates or replaces its sections and returns it. :func:`publish` threads
the context through the steps in registration order.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from personalsite.core.components import post_date, post_title, tag_links
from personalsite.core.errors import UntaggedPostError
from personalsite.core.models import Post, Section, SectionID, Site
from personalsite.core.renderer import render_site
from personalsite.core.tags import tag_slug

logger = logging.getLogger(__name__)

SECTION_TITLES: dict[SectionID, str] = {
    SectionID.ME: "Me",
    SectionID.POSTS: "Posts",
    SectionID.PROJECTS: "Projects",
}


@dataclass
class PublishingContext:
    """Site model threaded through the pipeline."""

    site: Site
    sections: dict[SectionID, Section] = field(
        default_factory=lambda: {sid: Section(id=sid) for sid in SectionID}
    )
    # Rendered pages keyed by output path relative to the output directory
    pages: dict[str, str] = field(default_factory=dict)

    def all_items(self) -> list[Post]:
        """Every post of every section, newest first."""
        items = [item for section in self.sections.values() for item in section.items]
        return sorted(items, key=lambda p: p.date, reverse=True)

    def all_tags(self) -> list[str]:
        """Every distinct tag, in ascending order."""
        return sorted({tag for item in self.all_items() for tag in item.tags})

    def items_tagged_with(self, tag: str) -> list[Post]:
        """Posts carrying any spelling of tag that shares its page."""
        slug = tag_slug(tag)
        return [
            item
            for item in self.all_items()
            if any(tag_slug(t) == slug for t in item.tags)
        ]

    def mutate_items(self, section_id: SectionID, mutate: Callable[[Post], Post]) -> None:
        section = self.sections[section_id]
        section.items = [mutate(item) for item in section.items]


StepFunction = Callable[[PublishingContext], PublishingContext]


@dataclass(frozen=True)
class PublishingStep:
    name: str
    run: StepFunction


def step(name: str) -> Callable[[StepFunction], PublishingStep]:
    """Decorator turning a context function into a named step."""

    def wrap(run: StepFunction) -> PublishingStep:
        return PublishingStep(name=name, run=run)

    return wrap


def publish(context: PublishingContext, steps: list[PublishingStep]) -> PublishingContext:
    """Run steps in order. The first exception aborts the whole build."""
    for index, publishing_step in enumerate(steps, start=1):
        logger.info("[%d/%d] %s", index, len(steps), publishing_step.name)
        context = publishing_step.run(context)
    return context


# ========== Content steps ==========


@step("Add section titles")
def add_section_titles(context: PublishingContext) -> PublishingContext:
    for section in context.sections.values():
        if section.title:
            continue
        section.title = SECTION_TITLES.get(section.id, "")
    return context


def add_markdown_files(store) -> PublishingStep:
    """Load every section's Markdown files from a ContentStore."""

    @step("Add Markdown files")
    def run(context: PublishingContext) -> PublishingContext:
        for loaded in store.load_sections():
            section = context.sections[loaded.id]
            section.items.extend(loaded.items)
            if loaded.title:
                section.title = loaded.title
            if loaded.description:
                section.description = loaded.description
        return context

    return run


@step("Sort items by date")
def sort_items_by_date(context: PublishingContext) -> PublishingContext:
    for section in context.sections.values():
        section.items.sort(key=lambda p: p.date, reverse=True)
    return context


@step("Ensure all items are tagged")
def ensure_all_items_are_tagged(context: PublishingContext) -> PublishingContext:
    untagged = [item.path for item in context.all_items() if not item.tags]
    if untagged:
        raise UntaggedPostError(untagged)
    return context


# ========== Post body steps ==========
# Each of these prepends to the body, so the last one registered ends up first.


@step("Insert date in posts")
def insert_post_dates(context: PublishingContext) -> PublishingContext:
    context.mutate_items(
        SectionID.POSTS,
        lambda post: post.model_copy(update={"body": str(post_date(post.date)) + post.body}),
    )
    return context


@step("Insert tags in posts")
def insert_post_tags(context: PublishingContext) -> PublishingContext:
    site = context.site
    context.mutate_items(
        SectionID.POSTS,
        lambda post: post.model_copy(
            update={"body": str(tag_links(site, post.tags)) + post.body}
        ),
    )
    return context


@step("Insert titles in posts")
def insert_post_titles(context: PublishingContext) -> PublishingContext:
    context.mutate_items(
        SectionID.POSTS,
        lambda post: post.model_copy(update={"body": str(post_title(post.title)) + post.body}),
    )
    return context


# ========== Output steps ==========


@step("Generate HTML")
def generate_html(context: PublishingContext) -> PublishingContext:
    context.pages = render_site(context)
    logger.info("Rendered %d pages", len(context.pages))
    return context


def write_output(output_dir: Path) -> PublishingStep:
    """Write every rendered page below output_dir."""

    @step("Write output")
    def run(context: PublishingContext) -> PublishingContext:
        for relative_path, html in context.pages.items():
            target = output_dir / relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
        logger.info("Wrote %d files to %s", len(context.pages), output_dir)
        return context

    return run


def deploy(sink, output_dir: Path) -> PublishingStep:
    """Hand the written output to a deployment sink."""

    @step("Deploy")
    def run(context: PublishingContext) -> PublishingContext:
        sink.deploy(output_dir)
        return context

    return run
