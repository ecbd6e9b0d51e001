"""
Git integration: cloning selected repositories.
"""

from ghclone.git.cloner import GitCloner, CloneReport

__all__ = [
    "GitCloner",
    "CloneReport",
]
