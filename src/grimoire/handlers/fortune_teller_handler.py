"""Fortune Teller - two-player Demon check with a red herring.

The yes/no answer is computed by NightActionResolver.resolve_fortune_teller;
this handler only fixes the interaction shape and the single-target log text.
"""

from typing import TYPE_CHECKING

from grimoire.handlers.base import Interaction, RoleHandler
from grimoire.handlers.registry import register_role
from grimoire.models.player import Player

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


@register_role("Fortune Teller")
class FortuneTellerHandler(RoleHandler):
    """Always walks the red herring / two-player flow, whatever the script's action_type."""

    interaction = Interaction.FORTUNE_TELLER

    def act(self, game: "Game", actor: Player, target: Player) -> str:
        if actor.is_malfunctioning:
            return f"Fortune Teller checked {target.name} (False Info due to malfunction)"
        return f"Fortune Teller checked {target.name}"
