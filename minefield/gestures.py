"""Mapping from pointer/touch gestures to game actions."""

from typing import Tuple

from .config import LONG_PRESS_THRESHOLD_MS

ACTION_REVEAL = "reveal"
ACTION_FLAG = "flag"

BUTTON_PRIMARY = "primary"
BUTTON_SECONDARY = "secondary"
BUTTONS: Tuple[str, ...] = (BUTTON_PRIMARY, BUTTON_SECONDARY)


def action_for_press(
    button: str = BUTTON_PRIMARY,
    held_ms: float = 0.0,
    *,
    threshold_ms: float = LONG_PRESS_THRESHOLD_MS,
) -> str:
    """
    Decide which action a completed press stands for.

    A secondary (right) click always flags. A primary click or tap reveals,
    unless it was held for at least threshold_ms, which is the touch
    long-press that flags.

    Args:
        button: "primary" or "secondary".
        held_ms: How long the press was held, in milliseconds.
        threshold_ms: Long-press threshold.

    Returns:
        "reveal" or "flag".

    Raises:
        ValueError: If the button is unknown or held_ms is negative.
    """
    if button not in BUTTONS:
        raise ValueError(f"button must be one of {BUTTONS}; got {button!r}.")
    if held_ms < 0:
        raise ValueError("held_ms must be non-negative.")

    if button == BUTTON_SECONDARY or held_ms >= threshold_ms:
        return ACTION_FLAG
    return ACTION_REVEAL
