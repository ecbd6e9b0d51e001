"""
Forge access: repository descriptors and the REST client.
"""

from ghclone.forge.models import RepositoryDescriptor, RepositoryIndex
from ghclone.forge.client import ForgeClient

__all__ = [
    "RepositoryDescriptor",
    "RepositoryIndex",
    "ForgeClient",
]
