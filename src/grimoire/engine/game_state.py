"""Game state management for the grimoire."""

import logging
from enum import Enum
from typing import Any, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field, PrivateAttr

from grimoire.exceptions import InvalidStateError, NotFoundError
from grimoire.models.player import Player
from grimoire.models.script import Script
from grimoire.engine.neighbors import next_living_neighbor

if TYPE_CHECKING:
    from grimoire.engine.store import GameStore

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Macro phases of the game."""

    SETUP = "Setup"
    DAY = "Day"
    NIGHT = "Night"


class GameSnapshot(BaseModel):
    """A restorable copy of the mutable parts of a game."""

    players: list[Player]
    phase: Phase
    turn: int
    log: list[str]


class Game(BaseModel):
    """The Storyteller's grimoire.

    Player list order is the seating circle. history is kept in memory
    only and is never written by the store.
    """

    players: list[Player] = Field(default_factory=list)
    phase: Phase = Phase.SETUP
    script: Script = Field(default_factory=Script)
    turn: int = 0  # Incremented on every Day -> Night, so the first night is turn 1
    log: list[str] = Field(default_factory=list)
    history: list[GameSnapshot] = Field(default_factory=list, exclude=True)

    _store: Any = PrivateAttr(default=None)  # GameStore

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def attach_store(self, store: "GameStore") -> None:
        """Persist this game through store on every save()."""
        self._store = store

    @property
    def store(self) -> Optional["GameStore"]:
        return self._store

    def save(self) -> None:
        """Write the game through the attached store, if any.

        I/O errors propagate to the caller.
        """
        if self._store is not None:
            self._store.save(self)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_player(self, index: int) -> Player:
        """Get player by seat index.

        Raises:
            NotFoundError: If index is outside the roster.
        """
        if index < 0 or index >= len(self.players):
            raise NotFoundError(f"invalid player index: {index}")
        return self.players[index]

    def seat_of(self, player: Player) -> Optional[int]:
        """Seat index of a player object, or None if not seated."""
        for i, p in enumerate(self.players):
            if p is player:
                return i
        return None

    def find_player_by_role(self, role_name: str) -> Optional[Player]:
        """First player (in seat order) holding the named role."""
        for player in self.players:
            if player.role_name == role_name:
                return player
        return None

    def next_living_neighbor(self, seat_index: int, clockwise: bool = True) -> Optional[Player]:
        return next_living_neighbor(self.players, seat_index, clockwise)

    @property
    def red_herring(self) -> Optional[Player]:
        for player in self.players:
            if player.is_red_herring:
                return player
        return None

    def active_wake_order(self) -> list[str]:
        """Wake order for tonight: first-night list on turn 1 (or earlier)."""
        if self.turn <= 1:
            return self.script.first_night
        return self.script.other_night

    # ------------------------------------------------------------------
    # Phase and night bookkeeping
    # ------------------------------------------------------------------

    def add_log(self, line: str) -> str:
        self.log.append(line)
        return line

    def advance_phase(self) -> Phase:
        """Move to the next phase: Setup/Night -> Day, Day -> Night.

        Entering night increments the turn counter.
        """
        if self.phase == Phase.DAY:
            self.phase = Phase.NIGHT
            self.turn += 1
        else:
            self.phase = Phase.DAY
        logger.info("Phase is now %s (turn %d)", self.phase.value, self.turn)
        return self.phase

    def reset_night_changes(self) -> None:
        """Clear poison, drunkenness and protection for every player."""
        for player in self.players:
            player.reset_night_status()

    def set_red_herring(self, index: int) -> str:
        """Make one player the Fortune Teller's red herring, clearing any other."""
        target = self.get_player(index)
        for player in self.players:
            player.is_red_herring = False
        target.is_red_herring = True
        return self.add_log(f"[Setup] Fortune Teller Red Herring set to {target.name}")

    # ------------------------------------------------------------------
    # Manual edits
    # ------------------------------------------------------------------

    def toggle_life(self, index: int) -> str:
        player = self.get_player(index)
        player.is_alive = not player.is_alive
        status = "alive" if player.is_alive else "dead"
        return self.add_log(f"[{self.phase.value}] {player.name} is now {status}")

    def swap_players(self, i: int, j: int) -> None:
        """Swap two seats.

        Raises:
            NotFoundError: If either index is outside the roster.
        """
        self.get_player(i)
        self.get_player(j)
        self.players[i], self.players[j] = self.players[j], self.players[i]

    def set_player_role(self, index: int, role_name: str) -> str:
        """Give a player a different script role, keeping their status flags.

        Raises:
            NotFoundError: If index is invalid or the script has no such role.
        """
        player = self.get_player(index)
        role = self.script.get_role(role_name)
        if role is None:
            raise NotFoundError(f"role {role_name} not found in script")
        player.role = role.model_copy(deep=True)
        return self.add_log(f"[{self.phase.value}] {player.name} is now the {role.name}")

    def set_drunk(self, index: int, value: bool = True) -> None:
        """Mark a player drunk until the next nightly reset."""
        self.get_player(index).is_drunk = value

    def add_reminder(self, index: int, reminder: str) -> None:
        self.get_player(index).reminders.append(reminder)

    def remove_reminder(self, index: int, reminder: str) -> None:
        """Remove one occurrence of a reminder tag.

        Raises:
            NotFoundError: If the player does not carry that reminder.
        """
        player = self.get_player(index)
        if reminder not in player.reminders:
            raise NotFoundError(f"{player.name} has no reminder '{reminder}'")
        player.reminders.remove(reminder)

    # ------------------------------------------------------------------
    # Snapshot / undo
    # ------------------------------------------------------------------

    def snapshot(self) -> None:
        """Push a copy of players, phase, turn and log onto the history stack."""
        self.history.append(
            GameSnapshot(
                players=[player.model_copy(deep=True) for player in self.players],
                phase=self.phase,
                turn=self.turn,
                log=list(self.log),
            )
        )

    def undo(self) -> None:
        """Restore the most recent snapshot and save.

        Raises:
            InvalidStateError: If there is no history.
        """
        if not self.history:
            raise InvalidStateError("no history to undo")

        last = self.history.pop()
        self.players = last.players
        self.phase = last.phase
        self.turn = last.turn
        self.log = last.log
        logger.debug("Undo restored snapshot (%d left)", len(self.history))

        self.save()
