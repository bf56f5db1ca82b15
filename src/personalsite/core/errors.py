"""Exceptions raised while building the site or serving the profile."""


class SiteError(Exception):
    """Base class for all personalsite errors."""


class ContentError(SiteError):
    """A Markdown source could not be turned into a post."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class UntaggedPostError(ContentError):
    """One or more posts carry no tags."""

    def __init__(self, paths: list[str]):
        self.paths = paths
        super().__init__(", ".join(paths), "posts must have at least one tag")


class ProfileDecodeError(SiteError):
    """The profile JSON file is malformed or does not match the schema."""


class DeploymentError(SiteError):
    """A deployment command failed."""
