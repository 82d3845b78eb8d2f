"""Result of a sync pass"""
from dataclasses import dataclass, field
from typing import Dict, List

from git_stack.models.review import ReviewState


@dataclass
class SyncResult:
    """Outcome of reconciling local branches with review state."""
    trunk: str
    removed: List[str] = field(default_factory=list)
    relocated: bool = False
    kept: Dict[str, ReviewState] = field(default_factory=dict)
    failed: Dict[str, str] = field(default_factory=dict)  # branch -> error text
    trunk_updated: bool = False
    dry_run: bool = False
