"""Butler ability - choose a master."""

from typing import TYPE_CHECKING

from grimoire.handlers.base import RoleHandler
from grimoire.handlers.registry import register_role
from grimoire.models.player import Player

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


@register_role("Butler")
class ButlerHandler(RoleHandler):
    def act(self, game: "Game", actor: Player, target: Player) -> str:
        return f"Butler chose master {target.name}"
