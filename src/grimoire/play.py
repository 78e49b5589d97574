#!/usr/bin/env python
"""Storyteller's grimoire on the console.

Usage:
    grimoire                                   # Resume game_state.json or start a 7-player game
    grimoire --players 9 --seed 42             # New reproducible 9-player deal
    grimoire --names "Ann,Bob,Cat,Dan,Eve"     # New game with named seats
    grimoire --script my_script.json --new     # Ignore the save file, use a custom script
"""

import argparse
import logging
import random
import sys
from typing import Callable, Optional

# Enable Windows console colors
if sys.platform == "win32":
    import colorama
    colorama.init()

from yaml import YAMLError
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.prompt import Prompt

from grimoire.engine import (
    DEFAULT_SAVE_FILE,
    Game,
    GameStore,
    NightWalk,
    WalkState,
    create_game,
    default_player_names,
)
from grimoire.exceptions import GrimoireError, InvalidStateError, NotFoundError
from grimoire.scripts import resolve_script
from grimoire.ui.grimoire_view import (
    render_grimoire_table,
    render_log,
    render_role_info,
    render_walk,
)

logger = logging.getLogger(__name__)

OVERVIEW_HELP = (
    "(next) Next phase - (toggle N) Toggle life - (swap I J) Move seat - "
    "(role N NAME) Change role - (drunk N) Toggle drunk - (remind N TAG) / (unremind N TAG) - "
    "(info N) Role info - (log) - (undo) - (wipe) Delete save & quit - (quit)"
)
WALK_HELP = (
    "(Enter) Act / confirm - (N) Pick seat or role - (skip) Next step - "
    "(herring) Re-pick red herring - (back) Cancel - (log) - (quit)"
)

PLAYER_SELECT_STATES = frozenset({
    WalkState.SELECT_TARGET,
    WalkState.SELECT_FIRST,
    WalkState.SELECT_SECOND,
    WalkState.SELECT_RED_HERRING,
})
# Sub-states whose confirmation writes to the game
COMMITTING_STATES = frozenset({
    WalkState.SELECT_TARGET,
    WalkState.SELECT_RED_HERRING,
    WalkState.REVEAL,
    WalkState.FORTUNE_REVEAL,
})


class GrimoireConsole:
    """Reads Storyteller commands and drives a NightWalk.

    Every command that changes the game is preceded by a snapshot, so
    "undo" steps back one command at a time.
    """

    def __init__(self, game: Game, console: Optional[Console] = None):
        self._game = game
        self._walk = NightWalk(game)
        self._console = console or Console()

    @property
    def walk(self) -> NightWalk:
        return self._walk

    def run(self) -> None:
        while True:
            self.show()
            try:
                command = Prompt.ask(">", default="", console=self._console)
            except (KeyboardInterrupt, EOFError):
                self._console.print()
                return
            if not self.handle(command):
                return

    def show(self) -> None:
        if self._walk.is_walking:
            self._console.print(render_walk(self._walk))
            self._console.print(f"[dim]{WALK_HELP}[/dim]")
        else:
            self._console.print(render_grimoire_table(self._game))
            self._console.print(f"[dim]{OVERVIEW_HELP}[/dim]")

    def handle(self, command: str) -> bool:
        """Execute one command. Returns False when the session should end."""
        words = command.strip().split()
        verb = words[0].lower() if words else ""
        args = words[1:]

        if verb in ("quit", "q"):
            return False

        try:
            if verb == "log":
                self._console.print(render_log(self._game))
            elif verb == "info":
                self._console.print(render_role_info(self._game.get_player(self._seat(args, 0))))
            elif self._walk.is_walking:
                self._handle_walk(verb, words)
            else:
                return self._handle_overview(verb, args)
        except GrimoireError as e:
            self._console.print(f"[red]{escape(str(e))}[/red]")
        except OSError as e:
            self._console.print(f"[red]Could not save game: {escape(str(e))}[/red]")
        return True

    # ------------------------------------------------------------------

    def _handle_overview(self, verb: str, args: list[str]) -> bool:
        game = self._game
        if verb in ("next", "n"):
            self._mutate(self._walk.next_phase)
        elif verb in ("toggle", "t"):
            self._print_line(self._mutate(lambda: game.toggle_life(self._seat(args, 0))))
        elif verb == "swap":
            self._mutate(lambda: game.swap_players(self._seat(args, 0), self._seat(args, 1)))
        elif verb == "role":
            self._print_line(self._mutate(lambda: game.set_player_role(self._seat(args, 0), " ".join(args[1:]))))
        elif verb == "drunk":
            seat = self._seat(args, 0)
            self._mutate(lambda: game.set_drunk(seat, not game.get_player(seat).is_drunk))
        elif verb == "remind":
            self._mutate(lambda: game.add_reminder(self._seat(args, 0), " ".join(args[1:])))
        elif verb == "unremind":
            self._mutate(lambda: game.remove_reminder(self._seat(args, 0), " ".join(args[1:])))
        elif verb in ("undo", "u"):
            game.undo()
        elif verb == "wipe":
            if game.store is not None:
                game.store.delete()
            return False
        elif verb:
            self._console.print(f"[yellow]Unknown command: {verb}[/yellow]")
        return True

    def _handle_walk(self, verb: str, words: list[str]) -> None:
        walk = self._walk
        state = walk.state

        if verb in ("back", "esc", "cancel"):
            walk.cancel()
        elif verb == "skip":
            walk.skip()
        elif verb == "herring":
            walk.request_red_herring()
        elif verb in ("", "go", "yes", "confirm"):
            if state in (WalkState.REVEAL, WalkState.FORTUNE_REVEAL):
                self._print_line(self._mutate(walk.confirm))
            elif state == WalkState.WALK:
                walk.advance()
            else:
                raise InvalidStateError("make a selection first, or 'back' to cancel")
        elif state in PLAYER_SELECT_STATES:
            index = self._seat(words, 0)
            line = self._mutate(lambda: walk.choose_player(index), state in COMMITTING_STATES)
            self._print_line(line)
        elif state == WalkState.SELECT_REVEAL_ROLE:
            text = " ".join(words)
            if text.isdigit():
                choices = walk.role_choices
                number = int(text)
                if not 1 <= number <= len(choices):
                    raise NotFoundError(f"no role choice {number}")
                text = choices[number - 1]
            walk.choose_role(text)
        else:
            self._console.print(f"[yellow]Unknown command: {verb}[/yellow]")

    def _mutate(self, action: Callable, snapshot: bool = True):
        """Run a game-changing action behind a snapshot, saving afterwards."""
        if not snapshot:
            return action()
        self._game.snapshot()
        try:
            result = action()
        except GrimoireError:
            self._game.history.pop()
            raise
        self._game.save()
        return result

    def _seat(self, args: list[str], position: int) -> int:
        """Parse a 1-based seat number argument into a player index."""
        try:
            return int(args[position]) - 1
        except (IndexError, ValueError):
            raise NotFoundError("expected a seat number") from None

    def _print_line(self, line: Optional[str]) -> None:
        if line:
            self._console.print(f"[green]{escape(line)}[/green]")


def build_game(args: argparse.Namespace, store: GameStore) -> Game:
    """Resume the stored game, or set up a new one from the arguments."""
    if store.exists() and not args.new:
        return store.load()

    script = resolve_script(args.script)
    if args.names:
        names = [name.strip() for name in args.names.split(",")]
    else:
        names = default_player_names(args.players)

    game = create_game(script, names, rng=random.Random(args.seed))
    game.attach_store(store)
    game.save()
    logger.info("Started new %s game with %d players", script.name, len(names))
    return game


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Grimoire - a Storyteller's assistant for social deduction games",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--script",
        type=str,
        default="trouble_brewing",
        help="Bundled script name or path to a .json/.yaml script (default: trouble_brewing)"
    )
    parser.add_argument(
        "--save-file",
        type=str,
        default=DEFAULT_SAVE_FILE,
        help=f"Game save file (default: {DEFAULT_SAVE_FILE})"
    )
    parser.add_argument(
        "--players",
        type=int,
        default=7,
        help="Number of players for a new game, 5-15 (default: 7)"
    )
    parser.add_argument(
        "--names",
        type=str,
        default=None,
        help="Comma-separated player names in seating order (overrides --players)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible role deal"
    )
    parser.add_argument(
        "--new",
        action="store_true",
        help="Start a new game even if the save file exists"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    console = Console()
    store = GameStore(args.save_file)

    try:
        game = build_game(args, store)
    except (GrimoireError, OSError, ValueError, YAMLError) as e:
        console.print(Panel(f"[red]{e}[/red]", title="Error"))
        return 1

    GrimoireConsole(game, console).run()
    return 0


if __name__ == "__main__":
    exit(main())
