"""Night queue construction - which roles wake tonight, in order."""

from typing import Sequence

from grimoire.models.player import Player


def build_night_queue(wake_order: Sequence[str], players: Sequence[Player]) -> list[str]:
    """Filter a wake-order list down to roles currently in play.

    Args:
        wake_order: The script's first-night or other-night list.
        players: Current roster.

    Returns:
        Role names held by at least one player, in wake order. Each name
        appears at most once.
    """
    in_play = {player.role_name for player in players if player.role is not None}

    queue: list[str] = []
    for role_name in wake_order:
        if role_name in in_play and role_name not in queue:
            queue.append(role_name)
    return queue
