"""Configuration handling for git-stack"""

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from git_stack.constants import (
    DEFAULT_MAX_BRANCH_LENGTH,
    DEFAULT_REMOTE,
    DIGEST_LENGTH,
    ENV_BRANCH_PREFIX,
    ENV_GITHUB_TOKEN,
    ENV_MAX_BRANCH_LENGTH,
)
from git_stack.exceptions import PrerequisiteError

# Characters git refuses in ref names (see git-check-ref-format)
_INVALID_PREFIX_CHARS = re.compile(r"[\s~^:?*\[\\]")


@dataclass(frozen=True)
class Config:
    """Configuration for git-stack with validation.

    Built once at process start and passed explicitly into the naming and
    reconciliation code; nothing below the CLI reads the environment.
    """

    branch_prefix: str
    max_branch_length: int = DEFAULT_MAX_BRANCH_LENGTH
    remote_name: str = DEFAULT_REMOTE

    # GitHub integration
    github_token: Optional[str] = None

    # Execution modes
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_branch_prefix()
        self._validate_max_branch_length()
        self._validate_remote_name()

    def _validate_branch_prefix(self):
        """Validate branch_prefix is set and usable inside a ref name."""
        if not self.branch_prefix or not self.branch_prefix.strip():
            raise PrerequisiteError(
                f"{ENV_BRANCH_PREFIX} is not set. Set it to your branches prefix (e.g. yourname/)"
            )
        if _INVALID_PREFIX_CHARS.search(self.branch_prefix) or ".." in self.branch_prefix:
            raise PrerequisiteError(
                f"branch prefix '{self.branch_prefix}' contains characters not allowed in a branch name"
            )
        if self.branch_prefix.startswith(("-", "/")):
            raise PrerequisiteError(f"branch prefix cannot start with '{self.branch_prefix[0]}'")

    def _validate_max_branch_length(self):
        """Validate max_branch_length leaves room for the digest suffix."""
        if self.max_branch_length <= DIGEST_LENGTH:
            raise PrerequisiteError(
                f"max_branch_length must be greater than {DIGEST_LENGTH}, got {self.max_branch_length}"
            )

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise PrerequisiteError("remote_name cannot be empty")

    def to_dict(self) -> dict:
        """Convert config to dictionary (token redacted)."""
        return {
            "branch_prefix": self.branch_prefix,
            "max_branch_length": self.max_branch_length,
            "remote_name": self.remote_name,
            "github_token": "***" if self.github_token else None,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "branch_prefix",
            "max_branch_length",
            "remote_name",
            "github_token",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """Create Config from environment variables.

        Keyword overrides that are not None (typically parsed CLI flags) win
        over the environment.
        """
        if environ is None:
            environ = os.environ

        values = {
            "branch_prefix": environ.get(ENV_BRANCH_PREFIX, ""),
            "github_token": environ.get(ENV_GITHUB_TOKEN) or None,
        }

        raw_length = environ.get(ENV_MAX_BRANCH_LENGTH)
        if raw_length:
            try:
                values["max_branch_length"] = int(raw_length)
            except ValueError:
                raise PrerequisiteError(
                    f"{ENV_MAX_BRANCH_LENGTH} must be an integer, got '{raw_length}'"
                ) from None

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_dict(values)
