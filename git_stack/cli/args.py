"""Command-line argument parsing for git-stack."""

import argparse

from git_stack.__version__ import __version__
from git_stack.constants import ENV_BRANCH_PREFIX, ENV_GITHUB_TOKEN, ENV_MAX_BRANCH_LENGTH


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per workflow step."""
    parser = argparse.ArgumentParser(
        prog="git-stack",
        description="Stacked branch workflow on top of git and GitHub",
        epilog=f"Setup: set {ENV_BRANCH_PREFIX} to your branches prefix (e.g. yourname/) and "
        f"{ENV_GITHUB_TOKEN} to a token with repo scope. "
        f"{ENV_MAX_BRANCH_LENGTH} overrides the maximum branch name length.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-stack {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--prefix", dest="branch_prefix", help=f"Branch name prefix (overrides {ENV_BRANCH_PREFIX})"
    )
    parser.add_argument(
        "--max-length",
        dest="max_branch_length",
        type=int,
        metavar="N",
        help=f"Maximum branch name length before hashing (overrides {ENV_MAX_BRANCH_LENGTH})",
    )
    parser.add_argument("--remote", dest="remote_name", help="Remote to work against (default: origin)")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    create_parser = subparsers.add_parser(
        "create", help="Create a branch from a commit message and commit all changes"
    )
    create_parser.add_argument(
        "-m", "--message", required=True, help="Commit message, also used to name the branch"
    )

    submit_parser = subparsers.add_parser(
        "submit", help="Push the current branch and open a pull request"
    )
    submit_parser.add_argument(
        "-w", "--web", action="store_true", help="Open the pull request in the browser"
    )

    sync_parser = subparsers.add_parser(
        "sync", help="Delete local branches whose pull request was closed or merged"
    )
    sync_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - show what would be deleted without actually deleting",
    )

    return parser


def parse_args(argv=None):
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
