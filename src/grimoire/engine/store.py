"""File-backed persistence for a single game slot."""

import logging
from pathlib import Path
from typing import Union

from grimoire.engine.game_state import Game

logger = logging.getLogger(__name__)

DEFAULT_SAVE_FILE = "game_state.json"


class GameStore:
    """Reads and writes one game as a JSON document.

    The path is injected so several save slots (or a pytest tmp_path)
    can coexist. Snapshot history is never written. OSError and
    pydantic.ValidationError propagate to the caller.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SAVE_FILE):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def save(self, game: Game) -> None:
        """Serialize a game to the store's path."""
        self._path.write_text(game.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("Saved game to %s", self._path)

    def load(self) -> Game:
        """Load the stored game and attach this store to it."""
        game = Game.model_validate_json(self._path.read_text(encoding="utf-8"))
        game.attach_store(self)
        logger.info("Loaded game from %s (%d players)", self._path, len(game.players))
        return game

    def delete(self) -> None:
        """Remove the save file. A missing file is not an error."""
        self._path.unlink(missing_ok=True)
        logger.info("Deleted save file %s", self._path)
