"""Build driver: assembles the publishing steps and runs them."""

import logging

from personalsite.config import Settings, settings
from personalsite.core.deploy import DeploymentSink, GitDeployer
from personalsite.core.models import Site
from personalsite.core.pipeline import (
    PublishingContext,
    PublishingStep,
    add_markdown_files,
    add_section_titles,
    deploy,
    ensure_all_items_are_tagged,
    generate_html,
    insert_post_dates,
    insert_post_tags,
    insert_post_titles,
    publish,
    sort_items_by_date,
    write_output,
)
from personalsite.core.storage import ContentStore

logger = logging.getLogger(__name__)


def create_site(config: Settings) -> Site:
    return Site(
        name=config.site_name,
        description=config.site_description,
        url=config.site_url,
        language=config.language,
    )


def default_steps(config: Settings, sink: DeploymentSink | None = None) -> list[PublishingStep]:
    """The site's publishing steps, in the order they must run.

    Date, tag and title insertion all prepend to the post body, so titles
    come out first, then tags, then the date.
    """
    if sink is None and config.deploy_remote:
        sink = GitDeployer(config.deploy_remote, config.deploy_branch)

    steps = [
        add_section_titles,
        add_markdown_files(ContentStore(config.content_dir)),
        sort_items_by_date,
        ensure_all_items_are_tagged,
        insert_post_dates,
        insert_post_tags,
        insert_post_titles,
        generate_html,
        write_output(config.output_dir),
    ]
    if sink is not None:
        steps.append(deploy(sink, config.output_dir))
    return steps


def build_site(config: Settings = settings, sink: DeploymentSink | None = None) -> PublishingContext:
    """Run the full build. Any failing step aborts the build."""
    context = PublishingContext(site=create_site(config))
    context = publish(context, default_steps(config, sink))
    logger.info("Build finished: %d pages", len(context.pages))
    return context
