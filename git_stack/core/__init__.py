"""Core workflow for git-stack."""

from .stack_keeper import StackKeeper

__all__ = ["StackKeeper"]
