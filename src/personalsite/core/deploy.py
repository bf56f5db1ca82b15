"""Deployment of the generated site."""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from personalsite.core.errors import DeploymentError

logger = logging.getLogger(__name__)


class DeploymentSink(ABC):
    """Abstract base class for publishing the build output."""

    @abstractmethod
    def deploy(self, output_dir: Path) -> None:
        """Publish the contents of output_dir."""
        ...


class GitDeployer(DeploymentSink):
    """Commits the output directory and force-pushes it to a remote branch."""

    def __init__(self, remote: str, branch: str = "master", message: str = "Publish deploy"):
        self.remote = remote
        self.branch = branch
        self.message = message

    def _git(self, output_dir: Path, *args: str) -> None:
        command = ["git", *args]
        logger.info("Running %s", " ".join(command))
        try:
            subprocess.run(command, cwd=output_dir, check=True, capture_output=True)  # noqa: S603, S607
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", "replace").strip() if e.stderr else ""
            raise DeploymentError(f"git {args[0]} failed: {stderr}") from e

    def deploy(self, output_dir: Path) -> None:
        if not (output_dir / ".git").exists():
            self._git(output_dir, "init")
        self._git(output_dir, "checkout", "-B", self.branch)
        self._git(output_dir, "add", "-A")
        self._git(output_dir, "commit", "-m", self.message, "--allow-empty")
        self._git(output_dir, "push", "--force", self.remote, self.branch)
        logger.info("Deployed %s to %s (%s)", output_dir, self.remote, self.branch)
