"""Pull request description formatting."""

from typing import List, Tuple


def split_commit_message(message: str) -> Tuple[str, str]:
    """Split a commit message into its subject line and body."""
    subject, _, body = message.strip().partition("\n")
    return subject.strip(), body.strip()


def fill_review_description(branch_name: str, messages: List[str]) -> Tuple[str, str]:
    """
    Build a pull request title and body from the branch's commits.

    A single commit provides both title and body. Several commits give the
    branch name as title and a bullet list of their subjects as body.

    Args:
        branch_name: Name of the branch being submitted
        messages: Commit messages on the branch, oldest first

    Returns:
        (title, body) tuple
    """
    if not messages:
        return branch_name, ""

    if len(messages) == 1:
        return split_commit_message(messages[0])

    subjects = [split_commit_message(message)[0] for message in messages]
    return branch_name, "\n".join(f"- {subject}" for subject in subjects)
