"""Custom exceptions for git-stack"""

from typing import Optional


class GitStackError(Exception):
    """Base exception for all git-stack errors."""
    pass


class UsageError(GitStackError):
    """Exception raised for an invalid command-line invocation."""
    pass


class PrerequisiteError(GitStackError):
    """Exception raised when tooling, configuration or authentication is missing."""
    pass


class FatalRemoteError(GitStackError):
    """Exception raised when the remote cannot be reached or its trunk resolved."""
    pass


class GitOperationError(GitStackError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class BranchExistsError(GitOperationError):
    """Exception raised when creating a branch whose name is already taken."""

    def __init__(self, branch: str):
        super().__init__("create_branch", branch, "Branch already exists")


class DetachedHeadError(GitOperationError):
    """Exception raised when repository is in detached HEAD state."""

    def __init__(self):
        super().__init__("check_state", message="Repository is in detached HEAD state")


class GitHubAPIError(GitStackError):
    """Exception raised for errors in GitHub API operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"GitHub API operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ReviewLookupError(GitHubAPIError):
    """Exception raised when the review state of a branch cannot be fetched."""

    def __init__(self, branch: str, message: Optional[str] = None):
        self.branch = branch
        super().__init__("view_review", f"{branch}: {message}" if message else branch)


class ReviewNotFoundError(GitStackError):
    """Raised when a branch has never had a pull request."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"No pull request found for branch '{branch}'")
