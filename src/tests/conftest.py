"""Shared fixtures for the personalsite test suite."""

from datetime import datetime

import pytest

from personalsite.core.models import Post, SectionID, Site
from personalsite.core.pipeline import PublishingContext


def make_post(
    slug: str = "hello",
    title: str = "Hello",
    date: datetime = datetime(2020, 1, 5, 10, 30),
    tags: list[str] | None = None,
    body: str = "<p>Original body</p>",
    section: SectionID = SectionID.POSTS,
    description: str = "A post",
) -> Post:
    return Post(
        path=f"/{section.value}/{slug}/",
        title=title,
        description=description,
        body=body,
        date=date,
        tags=["swift"] if tags is None else tags,
    )


@pytest.fixture
def site():
    return Site(name="Test Site", description="A test site", url="https://example.com")


@pytest.fixture
def context(site):
    return PublishingContext(site=site)


@pytest.fixture
def post_factory():
    return make_post
