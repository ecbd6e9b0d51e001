"""
Git operations for cloning the selected repositories.

Runs one `git clone <url>` per selected repository, with the
destination directory as working directory.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Union

from ghclone.core.config import CloneConfig
from ghclone.core.exceptions import GitNotAvailableError
from ghclone.forge.models import RepositoryDescriptor, RepositoryIndex

logger = logging.getLogger(__name__)


@dataclass
class CloneReport:
    """Outcome of cloning a selection of repositories."""

    destination: str
    cloned: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    skipped: List[int] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.cloned) + len(self.failed)

    @property
    def is_successful(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "destination": self.destination,
            "cloned": list(self.cloned),
            "failed": dict(self.failed),
            "skipped": list(self.skipped),
        }


class GitCloner:
    """
    Clones repositories with the external git client.

    When `CloneConfig.wait` is set, each clone runs to completion before the
    next one starts and its exit status is checked. Otherwise clones are
    launched one after another without waiting, and only the launch itself
    is checked.
    """

    def __init__(self, config: CloneConfig):
        self.config = config

    def is_git_available(self) -> bool:
        """Check if the git executable can be found on PATH."""
        return shutil.which(self.config.git_executable) is not None

    def build_command(self, clone_url: str) -> List[str]:
        """Command line used to clone one repository."""
        return [self.config.git_executable, "clone", clone_url]

    def clone_selected(
        self,
        index: RepositoryIndex,
        selection: Iterable[int],
        destination: Union[str, Path],
    ) -> CloneReport:
        """
        Clone every selected repository into a destination directory.

        Args:
            index: Repositories offered to the user.
            selection: Indices into `index`, in the order to clone them.
            destination: Existing directory used as working directory.

        Returns:
            CloneReport listing cloned and failed repositories. Launch and
            clone failures are recorded per repository; the remaining
            selections are still attempted.

        Raises:
            GitNotAvailableError: If git cannot be found and there is
                something to clone.
        """
        report = CloneReport(destination=str(destination))
        targets = []

        for position in selection:
            descriptor = index.resolve(position)
            if descriptor is None:
                logger.debug(f"Skipping unknown selection index: {position}")
                report.skipped.append(position)
                continue
            targets.append(descriptor)

        if not targets:
            logger.info("Nothing to clone")
            return report

        if not self.is_git_available():
            raise GitNotAvailableError(self.config.git_executable)

        for descriptor in targets:
            try:
                self.clone(descriptor, destination)
            except OSError as e:
                logger.warning(f"Failed to launch clone of {descriptor.name}: {e}")
                report.failed[descriptor.name] = f"could not launch git: {e}"
            except subprocess.TimeoutExpired:
                logger.warning(f"Clone of {descriptor.name} timed out")
                report.failed[descriptor.name] = (
                    f"timed out after {self.config.timeout} seconds"
                )
            except subprocess.CalledProcessError as e:
                logger.warning(
                    f"Clone of {descriptor.name} exited with status {e.returncode}"
                )
                report.failed[descriptor.name] = (
                    f"git exited with status {e.returncode}"
                )
            else:
                report.cloned.append(descriptor.name)

        return report

    def clone(
        self,
        descriptor: RepositoryDescriptor,
        destination: Union[str, Path],
    ) -> None:
        """
        Clone a single repository.

        Raises:
            OSError: If git cannot be launched.
            subprocess.CalledProcessError: If git exits non-zero (wait mode).
            subprocess.TimeoutExpired: If the clone times out (wait mode).
        """
        cmd = self.build_command(descriptor.clone_url)

        logger.info(f"Cloning repository: {descriptor.clone_url}")
        logger.debug(f"Clone command: {' '.join(cmd)} (cwd={destination})")

        if not self.config.wait:
            subprocess.Popen(cmd, cwd=str(destination))
            return

        subprocess.run(
            cmd,
            cwd=str(destination),
            check=True,
            timeout=self.config.timeout or None,
        )
        logger.info(f"Repository cloned: {descriptor.name}")
