"""Reconcile local branches with the state of their pull requests.

Every local branch except trunk is looked up on the review service, one at a
time. Branches whose pull request was closed or merged are force-deleted; if
such a branch is checked out, trunk is checked out first. Each branch is
handled on its own: a failed lookup, checkout or delete is recorded and the
pass moves on. Only fetching from the remote and resolving trunk are fatal.
"""

from typing import TYPE_CHECKING

from rich.console import Console

from git_stack.exceptions import FatalRemoteError, GitStackError, ReviewNotFoundError
from git_stack.logging_config import get_logger
from git_stack.models.repository import RepositoryState
from git_stack.models.review import ReviewRecord, ReviewState
from git_stack.models.sync import SyncResult

if TYPE_CHECKING:
    from git_stack.services.interfaces import ReviewService, VersionControl

console = Console()
logger = get_logger(__name__)


class Reconciler:
    """Deletes local branches whose review is terminal."""

    def __init__(self, git_ops: "VersionControl", reviews: "ReviewService", dry_run: bool = False):
        self.git_ops = git_ops
        self.reviews = reviews
        self.dry_run = dry_run

    def sync(self) -> SyncResult:
        """Fetch, reconcile every branch, then bring local trunk up to date."""
        console.print("Fetching latest changes from remote")
        try:
            self.git_ops.fetch_all()
        except GitStackError as e:
            raise FatalRemoteError(f"Could not fetch from remote: {e}") from e

        try:
            trunk = self.git_ops.resolve_default_remote_branch()
        except GitStackError as e:
            raise FatalRemoteError(f"Could not resolve the default branch: {e}") from e

        state = self.snapshot(trunk)

        console.print("Checking for closed PRs and removing corresponding local branches")
        result = self.reconcile(state)

        if not self.dry_run:
            result.trunk_updated = self._update_trunk(trunk)

        return result

    def snapshot(self, trunk: str) -> RepositoryState:
        try:
            current = self.git_ops.current_branch()
        except GitStackError:
            current = None  # Detached HEAD
        return RepositoryState(
            trunk=trunk, current_branch=current, branches=self.git_ops.list_local_branches()
        )

    def lookup(self, branch: str) -> ReviewRecord:
        """Review state of a branch; a branch without a pull request is LOCAL."""
        try:
            return self.reviews.view_review(branch)
        except ReviewNotFoundError:
            logger.debug(f"No pull request for {branch}")
            return ReviewRecord.local()

    def reconcile(self, state: RepositoryState) -> SyncResult:
        """Process every non-trunk branch of a repository snapshot."""
        result = SyncResult(trunk=state.trunk, dry_run=self.dry_run)
        current = state.current_branch

        for branch in state.candidates():
            try:
                record = self.lookup(branch)
            except Exception as e:
                logger.warning(f"Could not look up pull request for {branch}: {e}")
                result.failed[branch] = str(e)
                result.kept[branch] = ReviewState.LOCAL
                continue

            if not record.state.is_terminal:
                result.kept[branch] = record.state
                continue

            if self.dry_run:
                if branch == current:
                    result.relocated = True
                console.print(
                    f"[yellow]Would remove local branch {branch} (PR is {record.state.value})[/yellow]"
                )
                result.removed.append(branch)
                continue

            try:
                if branch == current:
                    console.print(
                        f"Current branch {branch} has a {record.state.value} PR. "
                        f"Switching to {state.trunk}."
                    )
                    self.git_ops.checkout(state.trunk)
                    current = state.trunk
                    result.relocated = True

                console.print(f"Removing local branch {branch} (PR is {record.state.value})")
                self.git_ops.delete_branch_forced(branch)
            except GitStackError as e:
                logger.warning(f"Could not remove {branch}: {e}")
                result.failed[branch] = str(e)
                result.kept[branch] = record.state
                continue

            result.removed.append(branch)

        return result

    def _update_trunk(self, trunk: str) -> bool:
        try:
            self.git_ops.pull(trunk)
        except GitStackError as e:
            logger.warning(f"Could not update {trunk}: {e}")
            return False
        return True
