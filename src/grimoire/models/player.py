"""Player and Role models."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class RoleType(str, Enum):
    """Character categories."""

    TOWNSFOLK = "Townsfolk"
    OUTSIDER = "Outsider"
    MINION = "Minion"
    DEMON = "Demon"
    TRAVELER = "Traveler"


class ActionType(str, Enum):
    """Interaction a role needs from the Storyteller when it wakes."""

    NONE = "None"
    SELECT_PLAYER = "SelectPlayer"
    SELECT_ROLE = "SelectRole"
    YES_NO = "YesNo"
    INFO_TOKEN = "InfoToken"  # 2 players + 1 role, e.g. Washerwoman


EVIL_TYPES = frozenset({RoleType.MINION, RoleType.DEMON})


def canonical_role_id(name: str) -> str:
    """Normalize a role name into its registry key ("Fortune Teller" -> "fortune_teller")."""
    return "_".join(name.strip().lower().replace("-", " ").split())


class Role(BaseModel):
    """A character definition from a script.

    The name is unique within a script and is the join key used
    whenever a role is looked up by who holds it.
    """

    name: str
    type: RoleType
    ability: str = ""
    action_type: ActionType = ActionType.NONE
    reminders: list[str] = Field(default_factory=list)

    @property
    def role_id(self) -> str:
        return canonical_role_id(self.name)


class Player(BaseModel):
    """Represents a seated player in the grimoire.

    Seating order is the order of the game's player list, so a player
    carries no seat number of its own.
    """

    id: int
    name: str
    role: Optional[Role] = None  # None until roles are dealt
    is_alive: bool = True
    used_ghost_vote: bool = False
    reminders: list[str] = Field(default_factory=list)
    registration_override: Optional[RoleType] = None  # e.g. Recluse registering as Demon

    # Cleared at the start of every night
    is_poisoned: bool = False
    is_drunk: bool = False
    is_protected: bool = False

    is_red_herring: bool = False  # For Fortune Teller

    @property
    def role_name(self) -> str:
        return self.role.name if self.role else ""

    @property
    def role_id(self) -> str:
        return self.role.role_id if self.role else ""

    @property
    def is_malfunctioning(self) -> bool:
        """Poisoned or drunk: the ability may silently fail or give false info."""
        return self.is_poisoned or self.is_drunk

    @property
    def registered_type(self) -> Optional[RoleType]:
        """Category this player registers as to other abilities."""
        if self.registration_override is not None:
            return self.registration_override
        return self.role.type if self.role else None

    @property
    def is_evil(self) -> bool:
        """Minion or Demon by the role actually held."""
        return self.role is not None and self.role.type in EVIL_TYPES

    @property
    def registers_evil(self) -> bool:
        """Minion or Demon as seen through any registration override."""
        return self.registered_type in EVIL_TYPES

    def reset_night_status(self) -> None:
        """Clear poison, drunkenness and protection."""
        self.is_poisoned = False
        self.is_drunk = False
        self.is_protected = False

    def to_dict(self) -> dict:
        """Convert to a flat dictionary for display."""
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role_name,
            "type": self.role.type.value if self.role else "",
            "is_alive": self.is_alive,
            "reminders": list(self.reminders),
        }
