"""
Download task domain entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DownloadState(str, Enum):
    IN_FLIGHT = "in_flight"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass
class DownloadTask:
    """
    State of a single ``wget`` transfer.

    Created when the command starts, updated as body chunks are written and
    finished exactly once, either as complete or as failed.
    """

    url: str
    destination: str
    state: DownloadState = DownloadState.IN_FLIGHT
    bytes_written: int = 0
    error: Optional[str] = None

    def record_chunk(self, size: int) -> None:
        """Account for a chunk that reached the destination."""
        if self.state is not DownloadState.IN_FLIGHT:
            raise RuntimeError(f"Download of {self.url} is already {self.state.value}")
        self.bytes_written += size

    def complete(self) -> None:
        if self.state is not DownloadState.IN_FLIGHT:
            raise RuntimeError(f"Download of {self.url} is already {self.state.value}")
        self.state = DownloadState.COMPLETE

    def fail(self, reason: str) -> None:
        if self.state is not DownloadState.IN_FLIGHT:
            raise RuntimeError(f"Download of {self.url} is already {self.state.value}")
        self.state = DownloadState.FAILED
        self.error = reason

    @property
    def is_finished(self) -> bool:
        return self.state is not DownloadState.IN_FLIGHT

    def get_details(self) -> dict[str, object]:
        """
        Get a summary of the transfer.

        Returns:
            Dictionary with download information
        """
        return {
            "url": self.url,
            "destination": self.destination,
            "state": self.state.value,
            "bytes_written": self.bytes_written,
            "error": self.error,
        }
