"""Repository snapshot model"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class RepositoryState:
    """Local branches, the checked-out branch and the trunk branch name."""
    trunk: str
    current_branch: Optional[str]  # None = detached HEAD
    branches: List[str] = field(default_factory=list)

    def candidates(self) -> Iterator[str]:
        """Yield every local branch except trunk, in listing order."""
        for branch in self.branches:
            if branch != self.trunk:
                yield branch
