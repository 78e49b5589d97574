"""Console presentation for the grimoire."""

from .grimoire_view import (
    render_grimoire_table,
    render_role_info,
    render_log,
    render_walk,
    style_role,
)

__all__ = [
    "render_grimoire_table",
    "render_role_info",
    "render_log",
    "render_walk",
    "style_role",
]
