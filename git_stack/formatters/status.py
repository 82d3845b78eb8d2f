"""Review state formatting utilities."""

from git_stack.constants import STATE_COLORS
from git_stack.models.review import ReviewState


def format_state(state: ReviewState) -> str:
    """
    Format review state as Rich markup.

    Args:
        state: Review state enum value

    Returns:
        Colored display text for the state
    """
    color = STATE_COLORS.get(state.value)
    return f"[{color}]{state.value}[/{color}]" if color else state.value

