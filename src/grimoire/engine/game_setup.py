"""Game setup - seats the players and deals the roles."""

import random
from typing import Optional, Sequence

from grimoire.engine.distribution import MAX_PLAYERS, MIN_PLAYERS, assign_random_roles
from grimoire.engine.game_state import Game, Phase
from grimoire.exceptions import ValidationError
from grimoire.models.player import Player
from grimoire.models.script import Script


def default_player_names(count: int) -> list[str]:
    return [f"Player {i + 1}" for i in range(count)]


def create_game(
    script: Script,
    names: Sequence[str],
    rng: Optional[random.Random] = None,
    deal_roles: bool = True,
) -> Game:
    """Create a new game in the Setup phase.

    Args:
        script: Script the game is played with.
        names: Player names in seating order.
        rng: random.Random instance for reproducible deals.
        deal_roles: Deal random roles from the script (otherwise players
                    start without a role).

    Returns:
        A Game with one player per name.

    Raises:
        ValidationError: If the player count is outside 5-15, a name is
                         blank, or the script cannot supply the roles.
    """
    if not MIN_PLAYERS <= len(names) <= MAX_PLAYERS:
        raise ValidationError(
            f"player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {len(names)}"
        )
    if any(not name.strip() for name in names):
        raise ValidationError("player names must not be blank")

    game = Game(
        players=[Player(id=i, name=name.strip()) for i, name in enumerate(names)],
        phase=Phase.SETUP,
        script=script,
    )

    if deal_roles:
        assign_random_roles(game, rng or random.Random())

    return game
