"""Rich renderables for the grimoire and the night walk."""

from typing import Optional

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from grimoire.engine.game_state import Game
from grimoire.engine.night_walk import NightWalk, WalkState
from grimoire.models.player import Player, RoleType

ROLE_TYPE_STYLES = {
    RoleType.TOWNSFOLK: "bold blue",
    RoleType.OUTSIDER: "cyan",
    RoleType.MINION: "red",
    RoleType.DEMON: "bold red",
    RoleType.TRAVELER: "magenta",
}

STATE_TITLES = {
    WalkState.SELECT_TARGET: "SELECT TARGET for {role}",
    WalkState.SELECT_FIRST: "SELECT PLAYER 1 for {role}",
    WalkState.SELECT_SECOND: "SELECT PLAYER 2 for {role}",
    WalkState.SELECT_RED_HERRING: "SELECT RED HERRING",
}


def style_role(name: str, role_type: Optional[RoleType]) -> Text:
    return Text(name, style=ROLE_TYPE_STYLES.get(role_type, ""))


def status_effects(player: Player) -> str:
    effects = []
    if player.is_poisoned:
        effects.append("poisoned")
    if player.is_drunk:
        effects.append("drunk")
    if player.is_protected:
        effects.append("protected")
    if player.is_red_herring:
        effects.append("red herring")
    return ", ".join(effects)


def render_grimoire_table(game: Game, marks: Optional[dict[int, str]] = None) -> Table:
    """Seat table: name, role, type, life and effects.

    Args:
        game: Game to render.
        marks: Optional seat index -> short marker shown after the name.
    """
    marks = marks or {}
    table = Table(title=f"Phase: {game.phase.value} (turn {game.turn})", show_header=True)
    table.add_column("#", width=3, justify="right")
    table.add_column("Name")
    table.add_column("Role")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Effects")
    table.add_column("Reminders")

    for i, player in enumerate(game.players):
        role_type = player.role.type if player.role else None
        name = player.name + (f" {marks[i]}" if i in marks else "")
        table.add_row(
            str(i + 1),
            Text(name),
            style_role(player.role_name or "-", role_type),
            style_role(role_type.value if role_type else "-", role_type),
            "ALIVE" if player.is_alive else Text("DEAD", style="dim"),
            status_effects(player),
            ", ".join(player.reminders),
        )
    return table


def render_role_info(player: Player) -> Panel:
    role = player.role
    if role is None:
        return Panel(f"{player.name} has no role yet.", title="ROLE INFO")

    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold")
    grid.add_column()
    grid.add_row("Name:", style_role(role.name, role.type))
    grid.add_row("Type:", style_role(role.type.value, role.type))
    grid.add_row("Ability:", role.ability)
    if role.reminders:
        grid.add_row("Reminders:", ", ".join(role.reminders))
    return Panel(grid, title="ROLE INFO")


def render_log(game: Game, last: int = 10) -> Panel:
    lines = game.log[-last:] if last else game.log
    return Panel(Text("\n".join(lines) or "(empty)"), title="LOG")


def _render_walk_step(walk: NightWalk) -> Panel:
    role_name = walk.current_role_name or ""
    actor = walk.current_actor
    lines = [Text(f"Step {walk.step + 1}/{len(walk.queue)}:  {role_name.upper()}", style="bold")]

    if actor is None:
        lines.append(Text("(Role not in play. Skip?)"))
    else:
        team = "EVIL" if actor.is_evil else "GOOD"
        effects = status_effects(actor)
        lines.append(Text(f"Player:  {actor.name}"))
        lines.append(Text(f"Status:  {'Alive' if actor.is_alive else 'DEAD'}{' - ' + effects if effects else ''}"))
        lines.append(Text(f"Team:    {team} ({actor.role.type.value})"))
        lines.append(Text(f"Ability: {actor.role.ability}"))

        empath = walk.empath_preview()
        if empath is not None:
            lines.append(Text(f"[Empath Info] {empath.message}", style="yellow"))

    return Panel(Group(*lines), title="NIGHT PHASE")


def _render_player_choice(walk: NightWalk) -> Panel:
    game = walk.game
    marks: dict[int, str] = {}
    if walk.state == WalkState.SELECT_SECOND and walk.pending_first is not None:
        marks[game.seat_of(walk.pending_first)] = "[1]"
    if walk.state == WalkState.SELECT_RED_HERRING and game.red_herring is not None:
        marks[game.seat_of(game.red_herring)] = "[CURRENT]"
    title = STATE_TITLES[walk.state].format(role=(walk.current_role_name or "").upper())
    return Panel(render_grimoire_table(game, marks), title=title)


def _render_role_choice(walk: NightWalk) -> Panel:
    grid = Table.grid(padding=(0, 1))
    for i, name in enumerate(walk.role_choices):
        role = walk.game.script.get_role(name)
        grid.add_row(f"[{i + 1}]", style_role(name, role.type if role else None))
    return Panel(grid, title=f"SELECT ROLE for {(walk.current_role_name or '').upper()}")


def _render_reveal(walk: NightWalk) -> Panel:
    first, second = walk.pending_first, walk.pending_second
    role = walk.game.script.get_role(walk.pending_role or "")
    line = Text(f"{first.name} OR {second.name} is the ")
    line.append_text(style_role(walk.pending_role or "", role.type if role else None))
    return Panel(
        Group(Text(f"{(walk.current_role_name or '').upper()} learns that:"), line),
        title="CONFIRM INFORMATION",
    )


def _render_fortune(walk: NightWalk) -> Panel:
    reading = walk.fortune_preview()
    first, second = walk.pending_first, walk.pending_second
    answer = Text("YES" if reading.result else "NO", style="bold red" if reading.result else "bold green")
    if reading.malfunctioning:
        answer.append(" (MALFUNCTION - LIED?)", style="yellow")
    return Panel(
        Group(Text(f"FORTUNE TELLER checks {first.name} and {second.name}"), answer),
        title="FORTUNE TELLER RESULT",
    )


def render_walk(walk: NightWalk) -> Panel:
    """Renderable for whatever the night walk is currently waiting on."""
    state = walk.state
    if state == WalkState.WALK:
        return _render_walk_step(walk)
    if state in STATE_TITLES:
        return _render_player_choice(walk)
    if state == WalkState.SELECT_REVEAL_ROLE:
        return _render_role_choice(walk)
    if state == WalkState.REVEAL:
        return _render_reveal(walk)
    if state == WalkState.FORTUNE_REVEAL:
        return _render_fortune(walk)
    return Panel(render_grimoire_table(walk.game), title="GRIMOIRE")
