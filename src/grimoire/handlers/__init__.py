"""Role ability handlers.

Importing this package registers every built-in handler.
"""

from grimoire.handlers.base import (
    ActionResult,
    Interaction,
    RoleHandler,
)
from grimoire.handlers.registry import (
    DEFAULT_HANDLER,
    get_handler,
    register_role,
    registered_roles,
)

# Import handlers so their @register_role decorators run
from .poisoner_handler import PoisonerHandler
from .monk_handler import MonkHandler
from .imp_handler import ImpHandler
from .butler_handler import ButlerHandler
from .empath_handler import EmpathHandler
from .fortune_teller_handler import FortuneTellerHandler
from .info_token_handler import (
    WasherwomanHandler,
    LibrarianHandler,
    InvestigatorHandler,
)

__all__ = [
    "ActionResult",
    "Interaction",
    "RoleHandler",
    "DEFAULT_HANDLER",
    "get_handler",
    "register_role",
    "registered_roles",
    "PoisonerHandler",
    "MonkHandler",
    "ImpHandler",
    "ButlerHandler",
    "EmpathHandler",
    "FortuneTellerHandler",
    "WasherwomanHandler",
    "LibrarianHandler",
    "InvestigatorHandler",
]
