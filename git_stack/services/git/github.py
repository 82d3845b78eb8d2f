"""GitHub API integration service"""

from typing import List, Optional, Tuple, TYPE_CHECKING, Union
from urllib.parse import urlparse

from github import Auth, BadCredentialsException, Github, GithubException

from git_stack.exceptions import (
    GitHubAPIError,
    PrerequisiteError,
    ReviewLookupError,
    ReviewNotFoundError,
)
from git_stack.logging_config import get_logger
from git_stack.models.review import ReviewRecord, ReviewState
from git_stack.services.prerequisites import check_github_token

if TYPE_CHECKING:
    from github.PullRequest import PullRequest
    from github.Repository import Repository
    from git_stack.config import Config

logger = get_logger(__name__)


def parse_repo_path(remote_url: str) -> str:
    """Extract ``owner/name`` from an SSH or HTTPS GitHub remote URL."""
    if remote_url.startswith("git@"):
        # Handle SSH URL format (git@github.com:org/repo.git)
        path = remote_url.split(":", 1)[1]
    else:
        # Handle HTTPS URL format (https://github.com/org/repo.git)
        path = urlparse(remote_url).path
    path = path.strip("/")

    if path.endswith(".git"):
        path = path[:-4]

    if path.count("/") != 1:
        raise GitHubAPIError("parse_remote", f"Cannot determine repository from '{remote_url}'")
    return path


def review_state_of(pr: "PullRequest") -> ReviewState:
    if pr.merged_at is not None:
        return ReviewState.MERGED
    if pr.state == "closed":
        return ReviewState.CLOSED
    return ReviewState.OPEN


class GitHubService:
    """Pull request lookups and creation through the GitHub REST API."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        Note: setup_github_api must be called before any review operation.
        """
        self.repo_path = repo_path
        self.config = config
        self.debug_mode = config.get("debug", False)
        self.github_token = config.get("github_token")
        self.github_repo: Optional[str] = None
        self.github: Optional[Github] = None
        self.gh_repo: Optional["Repository"] = None

    def setup_github_api(self, remote_url: str) -> None:
        """Setup GitHub API access for the repository behind remote_url."""
        check_github_token(self.github_token)

        self.github_repo = parse_repo_path(remote_url)
        self.github = Github(auth=Auth.Token(self.github_token))
        try:
            self.gh_repo = self.github.get_repo(self.github_repo)
        except BadCredentialsException as e:
            raise PrerequisiteError("GitHub token was rejected. Check GITHUB_TOKEN.") from e
        except GithubException as e:
            raise GitHubAPIError("get_repo", f"{self.github_repo}: {e}") from e

        logger.debug(f"[GitHub] GitHub integration enabled for: {self.github_repo}")

    def check_authentication(self) -> str:
        """Verify the token works and return the authenticated login."""
        assert self.github is not None, "setup_github_api must be called first"
        try:
            login = self.github.get_user().login
        except BadCredentialsException as e:
            raise PrerequisiteError("GitHub is not authenticated. Check GITHUB_TOKEN.") from e
        except GithubException as e:
            raise PrerequisiteError(f"Could not verify GitHub authentication: {e}") from e
        logger.debug(f"[GitHub] Authenticated as {login}")
        return login

    def _head(self, branch_name: str) -> str:
        assert self.github_repo is not None
        return f"{self.github_repo.split('/')[0]}:{branch_name}"

    def _pulls_for_branch(self, branch_name: str, state: str) -> List["PullRequest"]:
        assert self.gh_repo is not None
        return list(self.gh_repo.get_pulls(state=state, head=self._head(branch_name)))

    def view_review(self, branch_name: str) -> ReviewRecord:
        """Fetch the review state of a branch.

        An open pull request wins over older closed ones; otherwise the most
        recently created pull request decides.
        """
        try:
            pulls = self._pulls_for_branch(branch_name, "all")
        except Exception as e:
            raise ReviewLookupError(branch_name, str(e)) from e

        if not pulls:
            raise ReviewNotFoundError(branch_name)

        open_pulls = [pr for pr in pulls if pr.state == "open"]
        pr = max(open_pulls or pulls, key=lambda p: p.created_at)
        state = review_state_of(pr)

        if self.debug_mode:
            logger.debug(f"[GitHub] Branch {branch_name} has {state.value} PR #{pr.number}")

        return ReviewRecord(state=state, url=pr.html_url, number=pr.number)

    def create_review(
        self, head: str, base: str, title: str, body: str
    ) -> Tuple[ReviewRecord, bool]:
        """Open a pull request, or refresh the description of the open one."""
        assert self.gh_repo is not None
        try:
            existing = self._pulls_for_branch(head, "open")
            if existing:
                pr = existing[0]
                pr.edit(body=body)
                logger.info(f"[GitHub] Updated description of PR #{pr.number}")
                created = False
            else:
                pr = self.gh_repo.create_pull(base=base, head=head, title=title, body=body)
                logger.info(f"[GitHub] Created PR #{pr.number} for {head}")
                created = True
        except GithubException as e:
            raise GitHubAPIError("create_review", f"{head}: {e}") from e

        return ReviewRecord(state=ReviewState.OPEN, url=pr.html_url, number=pr.number), created
