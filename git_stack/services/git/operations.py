"""Git operations service"""

from typing import List, Optional, TYPE_CHECKING, Union

import git

from git_stack.exceptions import DetachedHeadError, GitOperationError
from git_stack.logging_config import get_logger

if TYPE_CHECKING:
    from git_stack.config import Config

logger = get_logger(__name__)


def _command_error_text(error: git.exc.GitCommandError) -> str:
    """Pick the most useful line out of a failed git invocation."""
    stderr = (error.stderr or "").strip()
    # GitPython wraps stderr as "stderr: '...'"
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr or str(error)


class GitOperations:
    """Service for Git operations against a working copy."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            repo_path: Path to the git repository (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.remote_name = config.get("remote_name", "origin")
        logger.debug(f"Git operations initialized for {repo_path}")

    def _get_repo(self) -> git.Repo:
        """Open the repository.

        GitPython repos are lightweight - they don't clone, just open the
        existing repo - so every operation sees the current on-disk state.
        """
        return git.Repo(self.repo_path)

    def _active_branch_name(self, repo: git.Repo) -> Optional[str]:
        try:
            return repo.active_branch.name
        except TypeError:
            return None  # Detached HEAD

    def current_branch(self) -> str:
        """Name of the checked-out branch."""
        name = self._active_branch_name(self._get_repo())
        if name is None:
            raise DetachedHeadError()
        return name

    def list_local_branches(self) -> List[str]:
        """All local branch names in ref order."""
        return [head.name for head in self._get_repo().heads]

    def branch_exists(self, name: str) -> bool:
        return name in self.list_local_branches()

    def has_changes(self) -> bool:
        """True when there is anything to stage, tracked or untracked."""
        return self._get_repo().is_dirty(untracked_files=True)

    def resolve_default_remote_branch(self) -> str:
        """Resolve trunk from the remote's symbolic HEAD reference."""
        ref = f"refs/remotes/{self.remote_name}/HEAD"
        try:
            target = self._get_repo().git.symbolic_ref(ref)
        except git.exc.GitCommandError as e:
            raise GitOperationError(
                "resolve_default_branch",
                message=f"{ref} is not set ({_command_error_text(e)}). "
                f"Run 'git remote set-head {self.remote_name} --auto' to fix it.",
            ) from e

        prefix = f"refs/remotes/{self.remote_name}/"
        if not target.startswith(prefix):
            raise GitOperationError(
                "resolve_default_branch", message=f"unexpected target '{target}' for {ref}"
            )
        trunk = target[len(prefix):]
        logger.debug(f"Resolved default branch: {trunk}")
        return trunk

    def checkout(self, name: str, create: bool = False) -> None:
        """Check out a branch, creating it from HEAD first when asked."""
        repo = self._get_repo()
        try:
            if create:
                repo.git.checkout("-q", "-b", name)
            else:
                repo.git.checkout("-q", name)
        except git.exc.GitCommandError as e:
            raise GitOperationError("checkout", name, _command_error_text(e)) from e
        logger.debug(f"Checked out {name}{' (new)' if create else ''}")

    def delete_branch_forced(self, name: str) -> None:
        """Delete a local branch even if it holds unmerged commits."""
        repo = self._get_repo()
        try:
            repo.delete_head(name, force=True)
        except git.exc.GitCommandError as e:
            raise GitOperationError("delete_branch", name, _command_error_text(e)) from e
        logger.debug(f"Deleted local branch {name}")

    def commit_all(self, message: str) -> None:
        """Stage every pending change and commit it."""
        repo = self._get_repo()
        try:
            repo.git.add("--all")
            repo.git.commit("-q", "-m", message)
        except git.exc.GitCommandError as e:
            raise GitOperationError(
                "commit", self._active_branch_name(repo), _command_error_text(e)
            ) from e

    def push(self, name: str) -> None:
        """Push a branch and set its upstream tracking branch."""
        repo = self._get_repo()
        try:
            repo.git.push("-q", "--set-upstream", self.remote_name, name)
        except git.exc.GitCommandError as e:
            raise GitOperationError("push", name, _command_error_text(e)) from e
        logger.debug(f"Pushed {name} to {self.remote_name}")

    def fetch_all(self) -> None:
        repo = self._get_repo()
        try:
            repo.git.fetch("-q", "--all")
        except git.exc.GitCommandError as e:
            raise GitOperationError("fetch", message=_command_error_text(e)) from e

    def pull(self, branch: str) -> None:
        """Bring a local branch up to date with its remote counterpart.

        The checked-out branch is pulled; any other branch is fast-forwarded
        in place through a fetch refspec.
        """
        repo = self._get_repo()
        try:
            if self._active_branch_name(repo) == branch:
                repo.git.pull("-q", "--ff-only", self.remote_name, branch)
            else:
                repo.git.fetch("-q", self.remote_name, f"{branch}:{branch}")
        except git.exc.GitCommandError as e:
            raise GitOperationError("pull", branch, _command_error_text(e)) from e

    def get_commit_messages(self, base: str, head: str) -> List[str]:
        """Messages of the commits on head that are not on base, oldest first."""
        repo = self._get_repo()
        try:
            commits = list(repo.iter_commits(f"{base}..{head}"))
        except git.exc.GitCommandError as e:
            raise GitOperationError("log", head, _command_error_text(e)) from e

        messages = []
        for commit in reversed(commits):
            message = commit.message
            if isinstance(message, bytes):
                message = message.decode("utf-8", errors="ignore")
            messages.append(message.strip())
        return messages

    def get_remote_url(self) -> str:
        try:
            return self._get_repo().remote(self.remote_name).url
        except ValueError as e:
            raise GitOperationError(
                "get_remote", message=f"Remote '{self.remote_name}' is not configured"
            ) from e
