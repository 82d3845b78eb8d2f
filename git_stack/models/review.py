"""Review (pull request) model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class ReviewState(Enum):
    """State of the review request attached to a branch."""
    OPEN = "open"
    CLOSED = "closed"
    MERGED = "merged"
    LOCAL = "local"  # No review exists

    @property
    def is_terminal(self) -> bool:
        """Closed and merged reviews make their branch disposable."""
        return self in (ReviewState.CLOSED, ReviewState.MERGED)


@dataclass(frozen=True)
class ReviewRecord:
    """Snapshot of a branch's review state, fetched fresh on every run."""
    state: ReviewState
    url: Optional[str] = None
    number: Optional[int] = None

    @classmethod
    def local(cls) -> "ReviewRecord":
        return cls(ReviewState.LOCAL)
