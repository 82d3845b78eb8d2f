"""Formatting utilities for git-stack.

- review: Pull request title/body derived from commit history
- status: Review state display
"""

from .review import fill_review_description, split_commit_message
from .status import format_state

__all__ = [
    # Review
    "fill_review_description",
    "split_commit_message",
    # Status
    "format_state",
]
