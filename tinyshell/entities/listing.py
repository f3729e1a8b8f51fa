"""
Directory listing domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryListing:
    path: str
    entries: list[str]
