"""Monk ability - protect one player from the Demon tonight."""

from typing import TYPE_CHECKING

from grimoire.handlers.base import RoleHandler
from grimoire.handlers.registry import register_role
from grimoire.models.player import Player

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


@register_role("Monk")
class MonkHandler(RoleHandler):
    """Protects the target unless the Monk is poisoned or drunk."""

    def act(self, game: "Game", actor: Player, target: Player) -> str:
        if actor.is_malfunctioning:
            return f"Monk tried to protect {target.name} but was malfunctioning"
        target.is_protected = True
        return f"Monk protected {target.name}"
