"""Role handler registry keyed by canonical role id."""

from typing import Callable, TypeVar

from grimoire.handlers.base import RoleHandler
from grimoire.models.player import canonical_role_id

H = TypeVar("H", bound=type[RoleHandler])

_HANDLERS: dict[str, RoleHandler] = {}
DEFAULT_HANDLER = RoleHandler()


def register_role(*role_names: str) -> Callable[[H], H]:
    """Class decorator registering one handler instance for the given roles.

    Usage:
        @register_role("Monk")
        class MonkHandler(RoleHandler):
            ...
    """

    def decorator(cls: H) -> H:
        handler = cls()
        for name in role_names:
            _HANDLERS[canonical_role_id(name)] = handler
        return cls

    return decorator


def get_handler(role_name: str) -> RoleHandler:
    """Handler for a role name; roles without one get DEFAULT_HANDLER."""
    return _HANDLERS.get(canonical_role_id(role_name), DEFAULT_HANDLER)


def registered_roles() -> list[str]:
    return sorted(_HANDLERS)
