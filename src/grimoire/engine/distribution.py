"""Setup distribution table and role dealing."""

import random
from typing import TYPE_CHECKING

from pydantic import BaseModel

from grimoire.exceptions import ValidationError
from grimoire.models.player import Role, RoleType

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


MIN_PLAYERS = 5
MAX_PLAYERS = 15


class Distribution(BaseModel):
    """How many characters of each category a game uses."""

    townsfolk: int
    outsider: int
    minion: int
    demon: int

    @property
    def total(self) -> int:
        return self.townsfolk + self.outsider + self.minion + self.demon

    def count_for(self, role_type: RoleType) -> int:
        """Count for a category (Travelers are never dealt)."""
        return {
            RoleType.TOWNSFOLK: self.townsfolk,
            RoleType.OUTSIDER: self.outsider,
            RoleType.MINION: self.minion,
            RoleType.DEMON: self.demon,
        }.get(role_type, 0)


# player count -> (townsfolk, outsider, minion, demon)
_SETUP_TABLE: dict[int, tuple[int, int, int, int]] = {
    5: (3, 0, 1, 1),
    6: (3, 1, 1, 1),
    7: (5, 0, 1, 1),
    8: (5, 1, 1, 1),
    9: (5, 2, 1, 1),
    10: (7, 0, 2, 1),
    11: (7, 1, 2, 1),
    12: (7, 2, 2, 1),
    13: (9, 0, 3, 1),
    14: (9, 1, 3, 1),
    15: (9, 2, 3, 1),
}

DEALT_TYPES = (RoleType.TOWNSFOLK, RoleType.OUTSIDER, RoleType.MINION, RoleType.DEMON)


def get_distribution(player_count: int) -> Distribution:
    """Look up the official setup counts for a player count.

    Counts below 5 degrade to all townsfolk with no evil roles; counts
    above 15 use the 15-player row.
    """
    if player_count < MIN_PLAYERS:
        return Distribution(townsfolk=max(player_count, 0), outsider=0, minion=0, demon=0)
    townsfolk, outsider, minion, demon = _SETUP_TABLE[min(player_count, MAX_PLAYERS)]
    return Distribution(townsfolk=townsfolk, outsider=outsider, minion=minion, demon=demon)


def assign_random_roles(game: "Game", rng: random.Random) -> list[Role]:
    """Deal script roles to every seated player.

    Each category is shuffled and the distribution's count taken from it;
    the combined selection is shuffled again and handed out in seat order.

    Args:
        game: Game whose players and script are used.
        rng: random.Random instance for reproducible deals.

    Returns:
        The roles dealt, in seat order.

    Raises:
        ValidationError: If the script lacks enough roles of a category.
    """
    distribution = get_distribution(len(game.players))

    selected: list[Role] = []
    for role_type in DEALT_TYPES:
        bucket = list(game.script.roles_of_type(role_type))
        needed = distribution.count_for(role_type)
        if len(bucket) < needed:
            raise ValidationError(
                f"Script '{game.script.name}' has {len(bucket)} {role_type.value} "
                f"role(s), {needed} needed for {len(game.players)} players"
            )
        rng.shuffle(bucket)
        selected.extend(bucket[:needed])

    rng.shuffle(selected)

    for player, role in zip(game.players, selected):
        player.role = role.model_copy(deep=True)

    return selected
