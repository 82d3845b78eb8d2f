"""Branch name generation from commit messages.

The body of the name is a slug of the commit message. When the full name is
longer than the configured maximum it is truncated and suffixed with a short
MD5 digest of the untouched message, so two long messages that share their
first characters still get distinct branches.

Order of operations: transform, trim, prefix and date, truncate and hash,
collapse underscores.
"""

import hashlib
import re
from datetime import date
from typing import Optional

from git_stack.constants import DATE_STAMP_FORMAT, DIGEST_LENGTH

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_NON_SLUG = re.compile(r"[^a-z0-9_]")
_UNDERSCORE_RUN = re.compile(r"_{2,}")


def slugify(message: str) -> str:
    """Reduce a free-text message to ``[a-z0-9_]`` without edge underscores."""
    slug = _NON_ALNUM.sub("_", message).lower()
    slug = _NON_SLUG.sub("", slug)
    return slug.strip("_")


def message_digest(message: str) -> str:
    """First characters of the MD5 hex digest of the original message."""
    return hashlib.md5(message.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]


def generate_branch_name(
    message: str, prefix: str, max_length: int, today: Optional[date] = None
) -> str:
    """Derive a deterministic branch name from a commit message.

    Args:
        message: Commit message the branch is created for
        prefix: Per-user branch prefix (e.g. ``alice/``)
        max_length: Length above which the name is truncated and hashed
        today: Date used for the stamp, defaults to the current date

    Returns:
        ``{prefix}{YYYYMMDD}_{slug}``, possibly truncated with a digest suffix
    """
    if today is None:
        today = date.today()

    name = f"{prefix}{today.strftime(DATE_STAMP_FORMAT)}_{slugify(message)}"

    if len(name) > max_length:
        name = f"{name[:max_length]}_{message_digest(message)}"

    name = _UNDERSCORE_RUN.sub("_", name)

    # Empty body leaves a dangling separator after the date stamp
    return name.rstrip("_")


def has_empty_body(message: str) -> bool:
    """True when the message contributes nothing to the branch name."""
    return not slugify(message)
