"""Git and GitHub services for git-stack."""

from .operations import GitOperations
from .github import GitHubService

__all__ = [
    "GitOperations",
    "GitHubService",
]
