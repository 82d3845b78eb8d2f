"""Collaborator interfaces consumed by the stack workflow.

``GitOperations`` and ``GitHubService`` talk to a real repository and to the
GitHub API.
"""

from typing import List, Protocol, Tuple

from git_stack.models.review import ReviewRecord


class VersionControl(Protocol):
    def current_branch(self) -> str: ...

    def list_local_branches(self) -> List[str]: ...

    def resolve_default_remote_branch(self) -> str: ...

    def branch_exists(self, name: str) -> bool: ...

    def has_changes(self) -> bool: ...

    def checkout(self, name: str, create: bool = False) -> None: ...

    def delete_branch_forced(self, name: str) -> None: ...

    def commit_all(self, message: str) -> None: ...

    def push(self, name: str) -> None: ...

    def fetch_all(self) -> None: ...

    def pull(self, branch: str) -> None: ...

    def get_commit_messages(self, base: str, head: str) -> List[str]: ...

    def get_remote_url(self) -> str: ...


class ReviewService(Protocol):
    def check_authentication(self) -> str: ...

    def view_review(self, branch: str) -> ReviewRecord:
        """Raises ReviewNotFoundError or ReviewLookupError."""
        ...

    def create_review(
        self, head: str, base: str, title: str, body: str
    ) -> Tuple[ReviewRecord, bool]:
        """Returns the review and whether it was newly created."""
        ...
