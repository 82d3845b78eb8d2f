"""Startup checks run once before any command mutates anything."""

import shutil

from git_stack.exceptions import PrerequisiteError
from git_stack.logging_config import get_logger

logger = get_logger(__name__)


def check_git_installed() -> str:
    """Return the path of the git executable or fail."""
    path = shutil.which("git")
    if not path:
        raise PrerequisiteError("git is not installed")
    logger.debug(f"Using git at {path}")
    return path


def check_github_token(token) -> None:
    if not token:
        raise PrerequisiteError(
            "GitHub token not found. Set the GITHUB_TOKEN environment variable "
            "(get one at https://github.com/settings/tokens)"
        )
