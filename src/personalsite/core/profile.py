"""Profile loading for the welcome page."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from personalsite.core.errors import ProfileDecodeError
from personalsite.core.models import Me

logger = logging.getLogger(__name__)

PROFILE_FILENAME = "me.json"


class ProfileService:
    """Reads the profile JSON from the public directory.

    The file is read on every call; nothing is cached.
    """

    def __init__(self, public_dir: Path):
        self.public_dir = public_dir

    @property
    def path(self) -> Path:
        return self.public_dir / PROFILE_FILENAME

    def get_profile(self) -> Me:
        """Load and validate the profile.

        Raises:
            FileNotFoundError: If the profile file does not exist.
            ProfileDecodeError: If the file is not valid JSON or does not
                match the profile schema.
        """
        raw = self.path.read_bytes()
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ProfileDecodeError(f"{self.path}: invalid JSON: {e}") from e
        try:
            return Me.model_validate(data)
        except ValidationError as e:
            raise ProfileDecodeError(f"{self.path}: invalid profile: {e}") from e
