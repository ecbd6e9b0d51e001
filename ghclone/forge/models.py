"""
Repository data structures returned by the forge.

Provides the immutable repository descriptor and the ordered index
used both to display choices and to resolve selected indices.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ghclone.core.exceptions import MalformedResponseError


@dataclass(frozen=True)
class RepositoryDescriptor:
    """Name and clone URL of one repository."""

    name: str
    clone_url: str

    @classmethod
    def from_api(cls, entry: object) -> "RepositoryDescriptor":
        """
        Build a descriptor from one decoded API entry.

        Extra fields are ignored.

        Raises:
            MalformedResponseError: If the entry is not an object with
                string `name` and `clone_url` fields.
        """
        if not isinstance(entry, dict):
            raise MalformedResponseError(
                f"expected a repository object, got {type(entry).__name__}"
            )

        name = entry.get("name")
        clone_url = entry.get("clone_url")

        if not isinstance(name, str) or not name:
            raise MalformedResponseError("repository entry without a 'name'")
        if not isinstance(clone_url, str) or not clone_url:
            raise MalformedResponseError(
                f"repository '{name}' has no 'clone_url'"
            )

        return cls(name=name, clone_url=clone_url)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "clone_url": self.clone_url}


class RepositoryIndex:
    """
    Ordered view over the repositories of one account.

    The descriptor sequence is kept in API response order and is the only
    source of ordering: the names shown to the user and the lookup by
    selected index both read from it.
    """

    def __init__(self, descriptors: Iterable[RepositoryDescriptor]):
        self._descriptors: Tuple[RepositoryDescriptor, ...] = tuple(descriptors)
        self._urls: Dict[str, str] = {
            descriptor.name: descriptor.clone_url
            for descriptor in self._descriptors
        }

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self):
        return iter(self._descriptors)

    @property
    def names(self) -> List[str]:
        """Repository names in display order."""
        return [descriptor.name for descriptor in self._descriptors]

    def resolve(self, index: int) -> Optional[RepositoryDescriptor]:
        """Return the descriptor at `index`, or None if out of range."""
        if 0 <= index < len(self._descriptors):
            return self._descriptors[index]
        return None

    def clone_url_for(self, name: str) -> Optional[str]:
        """Return the clone URL of a repository by name."""
        return self._urls.get(name)
