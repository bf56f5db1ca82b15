"""Data models for the personal website."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SectionID(str, Enum):
    """Top-level navigation areas, in navigation order."""

    ME = "me"
    POSTS = "posts"
    PROJECTS = "projects"


class PostMetadata(BaseModel):
    """Metadata extracted from post frontmatter."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str = ""
    date: datetime | None = None
    tags: list[str] = Field(default_factory=list)


class Post(BaseModel):
    """A rendered blog post or section item."""

    path: str
    title: str
    description: str = ""
    body: str = ""
    date: datetime
    tags: list[str] = Field(default_factory=list)

    @property
    def slug(self) -> str:
        """Return the last path segment."""
        return self.path.strip("/").rsplit("/", 1)[-1]

    @property
    def section_id(self) -> SectionID | None:
        """Section named by the first path segment, if any."""
        try:
            return SectionID(self.path.strip("/").split("/", 1)[0])
        except ValueError:
            return None

    @field_validator("date")
    @classmethod
    def _local_naive_date(cls, value: datetime) -> datetime:
        """Convert aware dates to naive local time."""
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class Section(BaseModel):
    """A named, ordered group of posts."""

    id: SectionID
    title: str = ""
    description: str = ""
    items: list[Post] = Field(default_factory=list)

    @property
    def path(self) -> str:
        return f"/{self.id.value}/"


class SocialLink(BaseModel):
    url: str
    icon: str


class AboutMe(BaseModel):
    """Content of the Me section."""

    position_title: str = "iOS Software Engineer @eos-uptrade"
    position_text: str = (
        "I work in the Hamburg office. My team is among others responsible "
        "for the library eos.ticketingSuite."
    )
    personal_tags: list[str] = Field(
        default_factory=lambda: [
            "Family person",
            "Minimalist",
            "Traveler 4731: I love to travel",
            "Skier",
            "Father",
            "Road racer",
            "Swift developer",
        ]
    )


class Site(BaseModel):
    """Top-level description of the website."""

    name: str
    description: str = ""
    url: str
    language: str = "en"
    stylesheet_paths: list[str] = Field(
        default_factory=lambda: [
            "/css/bootstrap.min.css",
            "/css/all.min.css",
            "/css/styles.css",
        ]
    )
    social_links: list[SocialLink] = Field(
        default_factory=lambda: [
            SocialLink(url="https://github.com/crelies", icon="github"),
            SocialLink(url="https://medium.com/@crelies", icon="medium"),
            SocialLink(url="https://stackoverflow.com/story/crelies", icon="stackoverflow"),
            SocialLink(url="https://www.xing.com/profile/Christian_Elies2", icon="xing"),
            SocialLink(url="https://www.linkedin.com/in/christian-elies-b1009b104", icon="linkedin"),
        ]
    )
    about: AboutMe = Field(default_factory=AboutMe)
    owner: str = "Christian Elies"
    owner_city: str = "Lüneburg"

    def url_for(self, path: str) -> str:
        """Return the absolute URL of a site-relative path."""
        return self.url.rstrip("/") + "/" + path.lstrip("/")


# ========== Profile (welcome server) ==========


class JobApp(BaseModel):
    name: str
    url: str | None = None


class Job(BaseModel):
    title: str
    description: str
    apps: list[JobApp] = Field(default_factory=list)


class Me(BaseModel):
    """Profile loaded from me.json."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    street_address: str = Field(alias="streetAddress")
    zip: str
    city: str
    job: Job
    tags: list[str] = Field(default_factory=list)
