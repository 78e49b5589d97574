"""First-night info token roles: learn that one of two players is a given character."""

from grimoire.handlers.base import RoleHandler
from grimoire.handlers.registry import register_role
from grimoire.models.player import RoleType


@register_role("Washerwoman")
class WasherwomanHandler(RoleHandler):
    reveal_type = RoleType.TOWNSFOLK


@register_role("Librarian")
class LibrarianHandler(RoleHandler):
    reveal_type = RoleType.OUTSIDER


@register_role("Investigator")
class InvestigatorHandler(RoleHandler):
    reveal_type = RoleType.MINION
