"""Imp ability - the nightly Demon kill."""

from typing import TYPE_CHECKING

from grimoire.handlers.base import RoleHandler
from grimoire.handlers.registry import register_role
from grimoire.models.player import Player

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


SOLDIER_ID = "soldier"


@register_role("Imp")
class ImpHandler(RoleHandler):
    """Kills the target.

    Resolution order:
    1. Malfunctioning Imp: no kill
    2. Protected target: blocked
    3. Healthy Soldier: immune
    4. Otherwise the target dies
    """

    def act(self, game: "Game", actor: Player, target: Player) -> str:
        if actor.is_malfunctioning:
            return f"Imp attacked {target.name} but was malfunctioning"

        if target.is_protected:
            return f"Imp attacked {target.name} but they were protected!"

        if target.role_id == SOLDIER_ID and not target.is_malfunctioning:
            return f"Imp attacked Soldier {target.name}! No effect."

        target.is_alive = False
        return f"Imp killed {target.name}!"
