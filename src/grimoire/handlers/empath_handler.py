"""Empath - passive; the reading itself comes from NightActionResolver.get_empath_info."""

from typing import TYPE_CHECKING

from grimoire.handlers.base import RoleHandler
from grimoire.handlers.registry import register_role
from grimoire.models.player import Player

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


@register_role("Empath")
class EmpathHandler(RoleHandler):
    def act(self, game: "Game", actor: Player, target: Player) -> str:
        return "Empath checked neighbors"
