"""NightWalk - steps the Storyteller through tonight's wake order.

Walk flow per role (chosen by the role's handler interaction):
- NONE:            WALK -> advance
- SELECT_PLAYER:   WALK -> SELECT_TARGET -> resolve -> advance
- INFO_TOKEN:      WALK -> SELECT_FIRST -> SELECT_SECOND -> SELECT_REVEAL_ROLE
                   -> REVEAL -> resolve -> advance
- FORTUNE_TELLER:  WALK -> [SELECT_RED_HERRING] -> SELECT_FIRST -> SELECT_SECOND
                   -> FORTUNE_REVEAL -> resolve -> advance

Every command returns the log line it appended (or None). Cancelling
from a sub-state returns to WALK without touching the game.
"""

import logging
from enum import Enum
from typing import Optional

from grimoire.engine.game_state import Game, Phase
from grimoire.engine.night_action_resolver import (
    EmpathReading,
    FortuneReading,
    NightActionResolver,
)
from grimoire.engine.night_queue import build_night_queue
from grimoire.exceptions import InvalidStateError, NotFoundError
from grimoire.handlers import Interaction, get_handler
from grimoire.models.player import Player, Role

logger = logging.getLogger(__name__)


class WalkState(str, Enum):
    """Where the Storyteller is in the night walk."""

    OVERVIEW = "overview"  # Not walking
    WALK = "walk"  # Current step displayed
    SELECT_TARGET = "select_target"
    SELECT_FIRST = "select_first"
    SELECT_SECOND = "select_second"
    SELECT_REVEAL_ROLE = "select_reveal_role"
    REVEAL = "reveal"
    SELECT_RED_HERRING = "select_red_herring"
    FORTUNE_REVEAL = "fortune_reveal"


SUB_STATES = frozenset(set(WalkState) - {WalkState.OVERVIEW, WalkState.WALK})

EMPATH_ID = "empath"


class NightWalk:
    """Drives one game's nights, one input event at a time."""

    def __init__(self, game: Game, resolver: Optional[NightActionResolver] = None):
        """Initialize the night walk.

        Args:
            game: The game to drive. Saves go through its attached store.
            resolver: Ability resolver (a default one if None).
        """
        self._game = game
        self._resolver = resolver or NightActionResolver()
        self._state = WalkState.OVERVIEW
        self._queue: list[str] = []
        self._step = 0
        self._herring_forced = False
        self._clear_pending()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def game(self) -> Game:
        return self._game

    @property
    def resolver(self) -> NightActionResolver:
        return self._resolver

    @property
    def state(self) -> WalkState:
        return self._state

    @property
    def queue(self) -> list[str]:
        return list(self._queue)

    @property
    def step(self) -> int:
        return self._step

    @property
    def is_walking(self) -> bool:
        return self._state != WalkState.OVERVIEW

    @property
    def current_role_name(self) -> Optional[str]:
        if not self.is_walking or self._step >= len(self._queue):
            return None
        return self._queue[self._step]

    @property
    def current_actor(self) -> Optional[Player]:
        name = self.current_role_name
        return self._game.find_player_by_role(name) if name else None

    @property
    def current_role(self) -> Optional[Role]:
        actor = self.current_actor
        if actor is not None:
            return actor.role
        name = self.current_role_name
        return self._game.script.get_role(name) if name else None

    @property
    def current_interaction(self) -> Interaction:
        name = self.current_role_name
        if name is None:
            return Interaction.NONE
        return get_handler(name).interaction_for(self.current_role)

    @property
    def pending_first(self) -> Optional[Player]:
        return self._player_or_none(self._first)

    @property
    def pending_second(self) -> Optional[Player]:
        return self._player_or_none(self._second)

    @property
    def pending_role(self) -> Optional[str]:
        return self._reveal_role

    @property
    def role_choices(self) -> list[str]:
        return list(self._role_choices)

    def fortune_preview(self) -> Optional[FortuneReading]:
        """The reading confirm() would log, while in FORTUNE_REVEAL."""
        if self._state != WalkState.FORTUNE_REVEAL:
            return None
        return self._resolver.resolve_fortune_teller(
            self._game, self.current_actor, self.pending_first, self.pending_second
        )

    def empath_preview(self) -> Optional[EmpathReading]:
        """The Empath's reading when the current step is the Empath."""
        actor = self.current_actor
        if actor is None or actor.role_id != EMPATH_ID:
            return None
        return self._resolver.get_empath_info(self._game, actor)

    # ------------------------------------------------------------------
    # Phase commands
    # ------------------------------------------------------------------

    def next_phase(self) -> Phase:
        """Advance the game phase, starting the night walk on Day -> Night."""
        phase = self._game.advance_phase()
        if phase == Phase.NIGHT:
            self.start_night()
        else:
            self._end_walk()
        self._game.save()
        return phase

    def start_night(self) -> list[str]:
        """Reset night flags, build tonight's queue and start walking it."""
        self._game.reset_night_changes()
        self._queue = build_night_queue(self._game.active_wake_order(), self._game.players)
        self._step = 0
        self._clear_pending()
        self._state = WalkState.WALK if self._queue else WalkState.OVERVIEW
        logger.info("Night %d queue: %s", self._game.turn, ", ".join(self._queue) or "(empty)")
        return list(self._queue)

    # ------------------------------------------------------------------
    # Walk commands
    # ------------------------------------------------------------------

    def advance(self) -> None:
        """Act on the current step: enter its selection flow or move on."""
        self._require(WalkState.WALK)

        interaction = self.current_interaction
        if interaction == Interaction.FORTUNE_TELLER:
            if self._game.red_herring is None:
                self._herring_forced = True
                self._state = WalkState.SELECT_RED_HERRING
            else:
                self._state = WalkState.SELECT_FIRST
        elif interaction == Interaction.SELECT_PLAYER:
            self._state = WalkState.SELECT_TARGET
        elif interaction == Interaction.INFO_TOKEN:
            self._state = WalkState.SELECT_FIRST
        else:
            self._next_step()

    def skip(self) -> None:
        """Move past the current step without acting."""
        self._require(WalkState.WALK)
        self._next_step()

    def request_red_herring(self) -> None:
        """Re-pick the Fortune Teller's red herring from a Fortune Teller step."""
        self._require(WalkState.WALK)
        if self.current_interaction != Interaction.FORTUNE_TELLER:
            raise InvalidStateError("red herring can only be set on the Fortune Teller's step")
        self._herring_forced = False
        self._state = WalkState.SELECT_RED_HERRING

    def choose_player(self, index: int) -> Optional[str]:
        """Confirm a player selection in the current sub-state.

        Raises:
            NotFoundError: If index is not a seat.
            InvalidStateError: If no player selection is pending.
        """
        self._require(
            WalkState.SELECT_TARGET,
            WalkState.SELECT_FIRST,
            WalkState.SELECT_SECOND,
            WalkState.SELECT_RED_HERRING,
        )
        player = self._game.get_player(index)

        if self._state == WalkState.SELECT_TARGET:
            result = self._resolver.resolve_night_action(
                self._game, self.current_role_name, player
            )
            return self._commit(result.message)

        if self._state == WalkState.SELECT_FIRST:
            self._first = index
            self._state = WalkState.SELECT_SECOND
            return None

        if self._state == WalkState.SELECT_SECOND:
            self._second = index
            if self.current_interaction == Interaction.FORTUNE_TELLER:
                self._state = WalkState.FORTUNE_REVEAL
            else:
                self._role_choices = self._resolver.reveal_choices(
                    self._game, self.current_role_name, self.pending_first, player
                )
                self._state = WalkState.SELECT_REVEAL_ROLE
            return None

        # SELECT_RED_HERRING commits on its own, whatever happens to the step
        line = self._game.set_red_herring(index)
        self._game.save()
        self._state = WalkState.SELECT_FIRST if self._herring_forced else WalkState.WALK
        self._herring_forced = False
        return line

    def choose_role(self, role_name: str) -> None:
        """Pick the role an info token reveals.

        Raises:
            NotFoundError: If the script has no such role.
        """
        self._require(WalkState.SELECT_REVEAL_ROLE)
        if self._game.script.get_role(role_name) is None:
            raise NotFoundError(f"role {role_name} not found in script")
        self._reveal_role = role_name
        self._state = WalkState.REVEAL

    def confirm(self) -> str:
        """Commit a pending info token or Fortune Teller reading."""
        self._require(WalkState.REVEAL, WalkState.FORTUNE_REVEAL)

        if self._state == WalkState.REVEAL:
            result = self._resolver.resolve_info_action(
                self._game,
                self.current_role_name,
                self.pending_first,
                self.pending_second,
                self._reveal_role,
            )
        else:
            result = self.fortune_preview()

        return self._commit(result.message)

    def cancel(self) -> None:
        """Back out of a sub-state to WALK, or out of the walk entirely."""
        if self._state in SUB_STATES:
            self._clear_pending()
            self._herring_forced = False
            self._state = WalkState.WALK
        elif self._state == WalkState.WALK:
            self._end_walk()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, *states: WalkState) -> None:
        if self._state not in states:
            allowed = ", ".join(s.value for s in states)
            raise InvalidStateError(
                f"command not valid in state '{self._state.value}' (expected {allowed})"
            )

    def _commit(self, message: str) -> str:
        line = self._game.add_log(f"[Night] {message}")
        self._game.save()
        self._state = WalkState.WALK
        self._next_step()
        return line

    def _next_step(self) -> None:
        self._step += 1
        self._clear_pending()
        if self._step >= len(self._queue):
            self._end_walk()

    def _end_walk(self) -> None:
        self._state = WalkState.OVERVIEW
        self._clear_pending()

    def _clear_pending(self) -> None:
        self._first: Optional[int] = None
        self._second: Optional[int] = None
        self._reveal_role: Optional[str] = None
        self._role_choices: list[str] = []

    def _player_or_none(self, index: Optional[int]) -> Optional[Player]:
        if index is None or index >= len(self._game.players):
            return None
        return self._game.players[index]
