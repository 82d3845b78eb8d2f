"""In-memory collaborators for exercising the workflow without git or network.

``InMemoryGit`` records every mutating call in ``calls`` so tests can assert
on ordering (e.g. checkout of trunk before deleting the current branch).
"""

from typing import Dict, List, Optional, Tuple

from git_stack.exceptions import (
    DetachedHeadError,
    GitOperationError,
    PrerequisiteError,
    ReviewNotFoundError,
)
from git_stack.models.review import ReviewRecord, ReviewState


class InMemoryGit:
    """A repository reduced to branch names, a HEAD and a dirty flag."""

    def __init__(
        self,
        branches: Optional[List[str]] = None,
        current: Optional[str] = "main",
        default_branch: Optional[str] = "main",
        dirty: bool = False,
        remote_url: str = "git@github.com:test/repo.git",
    ):
        self.branches: List[str] = list(branches if branches is not None else ["main"])
        self.current = current
        self.default_branch = default_branch
        self.dirty = dirty
        self.remote_url = remote_url
        self.commits: Dict[str, List[str]] = {name: [] for name in self.branches}
        self.pushed: List[str] = []
        self.calls: List[Tuple[str, ...]] = []
        # operation name -> exception raised when that operation runs
        self.failures: Dict[str, Exception] = {}

    def _maybe_fail(self, operation: str) -> None:
        error = self.failures.get(operation)
        if error is not None:
            raise error

    def current_branch(self) -> str:
        if self.current is None:
            raise DetachedHeadError()
        return self.current

    def list_local_branches(self) -> List[str]:
        return list(self.branches)

    def resolve_default_remote_branch(self) -> str:
        self._maybe_fail("resolve_default_branch")
        if self.default_branch is None:
            raise GitOperationError("resolve_default_branch", message="origin/HEAD is not set")
        return self.default_branch

    def branch_exists(self, name: str) -> bool:
        return name in self.branches

    def has_changes(self) -> bool:
        return self.dirty

    def checkout(self, name: str, create: bool = False) -> None:
        self.calls.append(("checkout", name, create))
        self._maybe_fail("checkout")
        if create:
            if name in self.branches:
                raise GitOperationError("checkout", name, "already exists")
            self.branches.append(name)
            self.commits[name] = list(self.commits.get(self.current or "", []))
        elif name not in self.branches:
            raise GitOperationError("checkout", name, "no such branch")
        self.current = name

    def delete_branch_forced(self, name: str) -> None:
        self.calls.append(("delete", name))
        self._maybe_fail("delete_branch")
        if name == self.current:
            raise GitOperationError("delete_branch", name, "branch is checked out")
        if name not in self.branches:
            raise GitOperationError("delete_branch", name, "no such branch")
        self.branches.remove(name)
        self.commits.pop(name, None)

    def commit_all(self, message: str) -> None:
        self.calls.append(("commit", message))
        self._maybe_fail("commit")
        if not self.dirty:
            raise GitOperationError("commit", self.current, "nothing to commit")
        self.commits.setdefault(self.current_branch(), []).append(message)
        self.dirty = False

    def push(self, name: str) -> None:
        self.calls.append(("push", name))
        self._maybe_fail("push")
        self.pushed.append(name)

    def fetch_all(self) -> None:
        self.calls.append(("fetch",))
        self._maybe_fail("fetch")

    def pull(self, branch: str) -> None:
        self.calls.append(("pull", branch))
        self._maybe_fail("pull")

    def get_commit_messages(self, base: str, head: str) -> List[str]:
        return list(self.commits.get(head, []))

    def get_remote_url(self) -> str:
        return self.remote_url


class InMemoryReviews:
    """Review records keyed by branch; missing branches have no review."""

    def __init__(
        self,
        records: Optional[Dict[str, ReviewRecord]] = None,
        errors: Optional[Dict[str, Exception]] = None,
    ):
        self.records: Dict[str, ReviewRecord] = dict(records or {})
        self.errors: Dict[str, Exception] = dict(errors or {})
        self.lookups: List[str] = []
        self.descriptions: Dict[str, Tuple[str, str]] = {}
        self.authenticated = True

    def check_authentication(self) -> str:
        if not self.authenticated:
            raise PrerequisiteError("GitHub is not authenticated")
        return "tester"

    def view_review(self, branch: str) -> ReviewRecord:
        self.lookups.append(branch)
        if branch in self.errors:
            raise self.errors[branch]
        if branch not in self.records:
            raise ReviewNotFoundError(branch)
        return self.records[branch]

    def create_review(self, head: str, base: str, title: str, body: str) -> Tuple[ReviewRecord, bool]:
        existing = self.records.get(head)
        created = existing is None or existing.state != ReviewState.OPEN
        if created:
            number = len(self.records) + 1
            existing = ReviewRecord(
                ReviewState.OPEN, url=f"https://github.com/test/repo/pull/{number}", number=number
            )
            self.records[head] = existing
            self.descriptions[head] = (title, body)
        else:
            self.descriptions[head] = (self.descriptions.get(head, (title, ""))[0], body)
        return existing, created
