"""Models package."""

from grimoire.models.player import (
    RoleType,
    ActionType,
    Role,
    Player,
    EVIL_TYPES,
    canonical_role_id,
)
from grimoire.models.script import Script

__all__ = [
    "RoleType",
    "ActionType",
    "Role",
    "Player",
    "EVIL_TYPES",
    "canonical_role_id",
    "Script",
]
