"""Data models for git-stack."""

from .review import ReviewState, ReviewRecord
from .repository import RepositoryState
from .sync import SyncResult

__all__ = ["ReviewState", "ReviewRecord", "RepositoryState", "SyncResult"]
