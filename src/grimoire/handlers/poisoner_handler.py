"""Poisoner ability - the target malfunctions until the next night."""

from typing import TYPE_CHECKING

from grimoire.handlers.base import RoleHandler
from grimoire.handlers.registry import register_role
from grimoire.models.player import Player

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


@register_role("Poisoner")
class PoisonerHandler(RoleHandler):
    """Poisons the chosen player. Works even on the Poisoner's own seat."""

    def act(self, game: "Game", actor: Player, target: Player) -> str:
        target.is_poisoned = True
        return f"Poisoner poisoned {target.name}"
