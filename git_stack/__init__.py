"""
git-stack - Stacked branch workflow on top of git and GitHub
"""

from .__version__ import __version__
from .cli.main import main

__all__ = ["StackKeeper", "main", "__version__"]


def __getattr__(name):
    # GitPython fails at import time when git is missing, so load the core on demand
    if name == "StackKeeper":
        from .core import StackKeeper

        return StackKeeper
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
