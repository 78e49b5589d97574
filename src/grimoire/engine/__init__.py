"""Engine package - grimoire state and night orchestration components."""

from .game_state import Game, GameSnapshot, Phase
from .neighbors import next_living_neighbor, living_neighbors
from .distribution import Distribution, get_distribution, assign_random_roles
from .night_queue import build_night_queue
from .night_action_resolver import (
    NightActionResolver,
    FortuneReading,
    EmpathReading,
    shifted_reading,
)
from .night_walk import NightWalk, WalkState
from .store import GameStore, DEFAULT_SAVE_FILE
from .game_setup import create_game, default_player_names

__all__ = [
    "Game",
    "GameSnapshot",
    "Phase",
    "next_living_neighbor",
    "living_neighbors",
    "Distribution",
    "get_distribution",
    "assign_random_roles",
    "build_night_queue",
    "NightActionResolver",
    "FortuneReading",
    "EmpathReading",
    "shifted_reading",
    "NightWalk",
    "WalkState",
    "GameStore",
    "DEFAULT_SAVE_FILE",
    "create_game",
    "default_player_names",
]
