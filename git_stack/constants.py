"""Shared constants for git-stack."""

# Branch naming
DATE_STAMP_FORMAT = "%Y%m%d"
DIGEST_LENGTH = 8
DEFAULT_MAX_BRANCH_LENGTH = 80

# Remotes
DEFAULT_REMOTE = "origin"

# Environment variables read once at startup
ENV_BRANCH_PREFIX = "GIT_BRANCH_PREFIX"
ENV_MAX_BRANCH_LENGTH = "GIT_STACK_MAX_BRANCH_LENGTH"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

# Log file location (debug mode)
LOG_DIR_NAME = ".git-stack"
LOG_FILE_NAME = "git-stack.log"

# Review state display (Rich color names)
STATE_COLORS = {
    "open": "green",
    "closed": "red",
    "merged": "magenta",
    "local": "dim",
}
