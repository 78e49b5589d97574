"""Script model - a named bundle of roles and their wake order."""

from typing import Optional
from pydantic import BaseModel, Field

from grimoire.models.player import Role, RoleType


class Script(BaseModel):
    """A playable edition.

    first_night and other_night list role names in the order the
    Storyteller wakes them. Names are trusted to match entries in roles.
    """

    name: str = ""
    roles: list[Role] = Field(default_factory=list)
    first_night: list[str] = Field(default_factory=list)
    other_night: list[str] = Field(default_factory=list)

    def get_role(self, name: str) -> Optional[Role]:
        """Find a role definition by exact name."""
        for role in self.roles:
            if role.name == name:
                return role
        return None

    def role_names(self) -> list[str]:
        return [role.name for role in self.roles]

    def roles_of_type(self, role_type: RoleType) -> list[Role]:
        return [role for role in self.roles if role.type == role_type]
