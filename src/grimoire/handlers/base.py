"""Shared base types for role ability handlers.

This module contains the types every handler builds on:
- Interaction: the shape of input the night walk collects for a role
- ActionResult: outcome of a resolution call
- RoleHandler: base class implementing the generic "targeted" ability

Handlers are registered per role in grimoire.handlers.registry.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel

from grimoire.models.player import ActionType, Player, Role, RoleType

if TYPE_CHECKING:
    from grimoire.engine.game_state import Game


# ============================================================================
# Shared Handler Result Types
# ============================================================================


class Interaction(str, Enum):
    """Input the night walk collects before resolving a role."""

    NONE = "none"  # Nothing to select, advance
    SELECT_PLAYER = "select_player"  # One target
    INFO_TOKEN = "info_token"  # Two players + revealed role
    FORTUNE_TELLER = "fortune_teller"  # Red herring (once) + two players


class ActionResult(BaseModel):
    """Outcome of a resolver call.

    A failed result carries a descriptive message instead of raising, so
    the interactive loop can log it and carry on.
    """

    message: str
    success: bool = True

    @classmethod
    def error(cls, message: str) -> "ActionResult":
        return cls(message=f"Error: {message}", success=False)

    def __str__(self) -> str:
        return self.message


# ============================================================================
# Base Handler
# ============================================================================


_ACTION_TYPE_INTERACTIONS = {
    ActionType.SELECT_PLAYER: Interaction.SELECT_PLAYER,
    ActionType.INFO_TOKEN: Interaction.INFO_TOKEN,
}


class RoleHandler:
    """Default ability handler.

    Subclasses override act() for roles whose ability changes state, and
    may set class attributes:
    - interaction: force an interaction regardless of the role's action_type
    - reveal_type: category offered when the Storyteller picks the role an
      info-token role learns about
    """

    interaction: Optional[Interaction] = None
    reveal_type: Optional[RoleType] = None

    def interaction_for(self, role: Optional[Role]) -> Interaction:
        if self.interaction is not None:
            return self.interaction
        if role is None:
            return Interaction.NONE
        return _ACTION_TYPE_INTERACTIONS.get(role.action_type, Interaction.NONE)

    def act(self, game: "Game", actor: Player, target: Player) -> str:
        """Apply the ability to a target and describe what happened."""
        return f"{actor.role_name} targeted {target.name}"
