"""Neighbor lookup over the circular seating order."""

from typing import Optional, Sequence

from grimoire.models.player import Player


def next_living_neighbor(
    players: Sequence[Player],
    seat_index: int,
    clockwise: bool = True,
) -> Optional[Player]:
    """Find the nearest living player next to a seat.

    Walks the circle one seat at a time (clockwise = increasing index),
    never returning the starting seat itself. At most len(players) seats
    are probed.

    Args:
        players: Players in seating order.
        seat_index: Index of the seat to start from.
        clockwise: Direction to walk.

    Returns:
        The first living player found, or None if nobody else is alive.
    """
    n = len(players)
    if n == 0:
        return None

    step = 1 if clockwise else -1
    current = seat_index
    for _ in range(n):
        current = (current + step) % n
        if current == seat_index:
            continue
        if players[current].is_alive:
            return players[current]

    return None


def living_neighbors(
    players: Sequence[Player],
    seat_index: int,
) -> tuple[Optional[Player], Optional[Player]]:
    """Return the (clockwise, counter-clockwise) living neighbors of a seat."""
    return (
        next_living_neighbor(players, seat_index, clockwise=True),
        next_living_neighbor(players, seat_index, clockwise=False),
    )
