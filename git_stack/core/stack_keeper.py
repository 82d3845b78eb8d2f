"""Core functionality for git-stack"""

import webbrowser
from datetime import date
from typing import Optional, Union

import git
from rich.console import Console

from git_stack.config import Config
from git_stack.exceptions import BranchExistsError, GitOperationError, UsageError
from git_stack.formatters import fill_review_description
from git_stack.logging_config import get_logger
from git_stack.models.review import ReviewRecord
from git_stack.models.sync import SyncResult
from git_stack.services.display_service import DisplayService
from git_stack.services.git import GitHubService, GitOperations
from git_stack.services.interfaces import ReviewService, VersionControl
from git_stack.services.naming import generate_branch_name, has_empty_body
from git_stack.services.prerequisites import check_git_installed, check_github_token
from git_stack.services.reconciler import Reconciler

console = Console()
logger = get_logger(__name__)

# Commands that talk to GitHub
REVIEW_COMMANDS = ("submit", "sync")


class StackKeeper:
    """Creates, submits and cleans up stacked branches."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        git_service: Optional[VersionControl] = None,
        review_service: Optional[ReviewService] = None,
    ):
        """Initialize StackKeeper.

        Args:
            repo_path: Path to git repository
            config: Configuration dict or Config object
            git_service: Version control collaborator (GitOperations by default)
            review_service: Review collaborator (GitHubService by default, set up on first use)
        """
        self.repo_path = repo_path
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        if git_service is None:
            try:
                repo = git.Repo(self.repo_path, search_parent_directories=True)
            except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
                raise GitOperationError("open_repository", message=f"Not a git repository: {e}") from e
            self.repo_path = repo.working_tree_dir or self.repo_path
            git_service = GitOperations(self.repo_path, self.config)

        self.git_service = git_service
        self._review_service = review_service
        self.display_service = DisplayService(verbose=self.config.verbose, debug=self.config.debug)

    @property
    def review_service(self) -> ReviewService:
        if self._review_service is None:
            github_service = GitHubService(self.repo_path, self.config)
            github_service.setup_github_api(self.git_service.get_remote_url())
            self._review_service = github_service
        return self._review_service

    def check_prerequisites(self, command: str) -> None:
        """Fail before any mutation when tooling or authentication is missing."""
        check_git_installed()
        if command in REVIEW_COMMANDS:
            if self._review_service is None:
                check_github_token(self.config.github_token)
            login = self.review_service.check_authentication()
            logger.info(f"Authenticated to GitHub as {login}")

    def create(self, message: str, today: Optional[date] = None) -> str:
        """Create a branch named after message and commit all pending changes to it.

        Returns:
            The new branch name
        """
        if not message or not message.strip():
            raise UsageError("A commit message is required (create -m <message>)")

        branch = generate_branch_name(
            message, self.config.branch_prefix, self.config.max_branch_length, today
        )
        if has_empty_body(message):
            logger.warning(f"Commit message has no letters or digits; branch will be named {branch}")

        if self.git_service.branch_exists(branch):
            raise BranchExistsError(branch)
        if not self.git_service.has_changes():
            raise GitOperationError("commit", message="No changes to commit")

        previous = self.git_service.current_branch()

        console.print(f"Creating git branch {branch}")
        self.git_service.checkout(branch, create=True)

        console.print("Adding all files and committing changes")
        try:
            self.git_service.commit_all(message)
        except GitOperationError:
            logger.debug(f"Commit failed, removing {branch} and returning to {previous}")
            try:
                self.git_service.checkout(previous)
                self.git_service.delete_branch_forced(branch)
            except GitOperationError as rollback_error:
                logger.error(f"Could not remove {branch} after the failed commit: {rollback_error}")
            raise

        return branch

    def submit(self, web: bool = False) -> ReviewRecord:
        """Push the current branch and open (or refresh) its pull request."""
        branch = self.git_service.current_branch()
        trunk = self.git_service.resolve_default_remote_branch()
        if branch == trunk:
            raise UsageError(f"Refusing to submit the default branch '{trunk}'")

        console.print("Pushing branch to remote")
        self.git_service.push(branch)

        messages = self.git_service.get_commit_messages(f"{self.config.remote_name}/{trunk}", branch)
        title, body = fill_review_description(branch, messages)

        console.print("Creating pull request")
        record, created = self.review_service.create_review(head=branch, base=trunk, title=title, body=body)
        self.display_service.display_review(branch, record, created)

        if web and record.url:
            webbrowser.open(record.url)

        return record

    def sync(self, dry_run: bool = False) -> SyncResult:
        """Delete local branches whose pull request is closed or merged."""
        reconciler = Reconciler(self.git_service, self.review_service, dry_run=dry_run)
        result = reconciler.sync()
        self.display_service.display_sync_result(result)
        return result
