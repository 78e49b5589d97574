"""Tests for the console driver."""

import argparse
import io

import pytest
from rich.console import Console

from grimoire.engine import Game, GameStore, Phase, WalkState
from grimoire.models import Player
from grimoire.play import GrimoireConsole, build_game
from grimoire.scripts import bundled_script


ROLES = ["Washerwoman", "Empath", "Imp", "Poisoner", "Fortune Teller", "Chef", "Monk"]


def make_console(tmp_path, phase: Phase = Phase.DAY) -> tuple[GrimoireConsole, Game, io.StringIO]:
    """Create a console over a 7-player game saved under tmp_path."""
    script = bundled_script("trouble_brewing")
    game = Game(
        players=[
            Player(id=seat, name=f"Player{seat}", role=script.get_role(name).model_copy(deep=True))
            for seat, name in enumerate(ROLES)
        ],
        script=script,
        phase=phase,
    )
    game.attach_store(GameStore(tmp_path / "game.json"))
    output = io.StringIO()
    return GrimoireConsole(game, Console(file=output, width=120)), game, output


def make_args(**overrides) -> argparse.Namespace:
    values = {
        "script": "trouble_brewing",
        "players": 7,
        "names": None,
        "seed": 1,
        "new": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestOverviewCommands:
    """Tests for commands outside the night walk."""

    def test_toggle_and_undo(self, tmp_path) -> None:
        """Test toggle snapshots, saves and can be undone."""
        console, game, _ = make_console(tmp_path)

        assert console.handle("toggle 2") is True
        assert not game.players[1].is_alive
        assert len(game.history) == 1
        assert not game.store.load().players[1].is_alive

        console.handle("undo")
        assert game.players[1].is_alive
        assert game.history == []

    def test_undo_empty_history_reports_error(self, tmp_path) -> None:
        """Test undo with nothing to undo prints instead of raising."""
        console, _, output = make_console(tmp_path)
        assert console.handle("undo") is True
        assert "no history to undo" in output.getvalue()

    def test_failed_edit_leaves_no_snapshot(self, tmp_path) -> None:
        """Test a rejected edit does not push history."""
        console, game, output = make_console(tmp_path)
        console.handle("role 1 Vortox")
        assert game.history == []
        assert game.players[0].role_name == "Washerwoman"
        assert "Vortox" in output.getvalue()

    def test_role_swap_and_reminders(self, tmp_path) -> None:
        """Test role change, seat swap and reminder commands."""
        console, game, _ = make_console(tmp_path)
        console.handle("role 1 Soldier")
        console.handle("swap 1 2")
        console.handle("remind 1 Safe")
        assert game.players[1].role_name == "Soldier"
        assert game.players[0].reminders == ["Safe"]
        console.handle("unremind 1 Safe")
        assert game.players[0].reminders == []

    def test_invalid_swap_leaves_no_snapshot(self, tmp_path) -> None:
        """Test swapping with a missing seat reports and pushes no history."""
        console, game, output = make_console(tmp_path)
        order = [p.name for p in game.players]
        console.handle("swap 1 99")
        assert "invalid player index: 98" in output.getvalue()
        assert game.history == []
        assert [p.name for p in game.players] == order

    def test_undo_night_start_replays_first_night(self, tmp_path) -> None:
        """Test undoing the move into night does not count the turn twice."""
        console, game, _ = make_console(tmp_path)
        console.handle("next")
        console.handle("back")
        console.handle("undo")
        assert game.phase == Phase.DAY
        assert game.turn == 0

        console.handle("next")
        assert game.turn == 1
        assert console.walk.queue == ["Poisoner", "Washerwoman", "Chef", "Empath", "Fortune Teller"]
        assert game.store.load().turn == 1

    def test_drunk_toggles(self, tmp_path) -> None:
        """Test drunk flips the flag each time."""
        console, game, _ = make_console(tmp_path)
        console.handle("drunk 3")
        assert game.players[2].is_drunk
        console.handle("drunk 3")
        assert not game.players[2].is_drunk

    def test_bad_seat_argument(self, tmp_path) -> None:
        """Test a non-numeric seat prints an error."""
        console, game, output = make_console(tmp_path)
        console.handle("toggle x")
        assert "expected a seat number" in output.getvalue()
        assert game.history == []

    def test_info_and_log(self, tmp_path) -> None:
        """Test read-only commands render without changing the game."""
        console, game, output = make_console(tmp_path)
        console.handle("info 3")
        console.handle("log")
        assert "Imp" in output.getvalue()
        assert game.history == []

    def test_unknown_command(self, tmp_path) -> None:
        """Test unknown commands are reported."""
        console, _, output = make_console(tmp_path)
        console.handle("dance")
        assert "Unknown command: dance" in output.getvalue()

    def test_quit_and_wipe(self, tmp_path) -> None:
        """Test quit ends the session and wipe also deletes the save."""
        console, game, _ = make_console(tmp_path)
        assert console.handle("q") is False
        game.save()
        assert console.handle("wipe") is False
        assert not game.store.exists()


class TestWalkCommands:
    """Tests for commands during the night walk."""

    def test_next_starts_walk(self, tmp_path) -> None:
        """Test next moves Day to Night and starts walking."""
        console, game, _ = make_console(tmp_path)
        console.handle("next")
        assert game.phase == Phase.NIGHT
        assert console.walk.state == WalkState.WALK
        assert console.walk.current_role_name == "Poisoner"

    def test_poisoner_by_seat_number(self, tmp_path) -> None:
        """Test Enter advances and a seat number resolves the target."""
        console, game, output = make_console(tmp_path)
        console.handle("next")
        console.handle("")
        assert console.walk.state == WalkState.SELECT_TARGET
        console.handle("2")
        assert game.players[1].is_poisoned
        assert "Poisoner poisoned Player1" in output.getvalue()
        assert console.walk.current_role_name == "Washerwoman"

    def test_info_token_role_by_number(self, tmp_path) -> None:
        """Test a revealed role can be chosen by its list number."""
        console, game, _ = make_console(tmp_path)
        console.handle("next")
        console.handle("skip")
        console.handle("")
        console.handle("6")
        console.handle("7")
        assert console.walk.role_choices == ["Chef", "Monk"]
        console.handle("2")
        assert console.walk.pending_role == "Monk"
        console.handle("confirm")
        assert game.log[-1] == "[Night] Washerwoman learned that Player5 or Player6 is Monk"

    def test_role_number_out_of_range(self, tmp_path) -> None:
        """Test an invalid role number is reported."""
        console, _, output = make_console(tmp_path)
        console.handle("next")
        console.handle("skip")
        console.handle("")
        console.handle("6")
        console.handle("7")
        console.handle("9")
        assert "no role choice 9" in output.getvalue()
        assert console.walk.state == WalkState.SELECT_REVEAL_ROLE

    def test_back_cancels(self, tmp_path) -> None:
        """Test back leaves a sub-state, then the walk."""
        console, _, _ = make_console(tmp_path)
        console.handle("next")
        console.handle("")
        console.handle("back")
        assert console.walk.state == WalkState.WALK
        console.handle("back")
        assert console.walk.state == WalkState.OVERVIEW

    def test_enter_in_selection_reports(self, tmp_path) -> None:
        """Test Enter without a pick asks for a selection."""
        console, _, output = make_console(tmp_path)
        console.handle("next")
        console.handle("")
        console.handle("")
        assert "make a selection first" in output.getvalue()

    def test_show_renders_each_state(self, tmp_path) -> None:
        """Test the current view renders in overview and walk states."""
        console, _, output = make_console(tmp_path)
        console.show()
        console.handle("next")
        console.show()
        console.handle("")
        console.show()
        assert "NIGHT PHASE" in output.getvalue()
        assert "SELECT TARGET for POISONER" in output.getvalue()


class TestBuildGame:
    """Tests for build_game."""

    def test_new_game_saved(self, tmp_path) -> None:
        """Test a new game is created and written."""
        store = GameStore(tmp_path / "game.json")
        game = build_game(make_args(players=8), store)
        assert len(game.players) == 8
        assert game.store is store
        assert store.exists()

    def test_resumes_saved_game(self, tmp_path) -> None:
        """Test an existing save is loaded unless --new is given."""
        store = GameStore(tmp_path / "game.json")
        first = build_game(make_args(names="Ann,Bob,Cat,Dan,Eve"), store)
        first.toggle_life(0)
        first.save()

        resumed = build_game(make_args(), store)
        assert [p.name for p in resumed.players] == ["Ann", "Bob", "Cat", "Dan", "Eve"]
        assert not resumed.players[0].is_alive

        fresh = build_game(make_args(new=True), store)
        assert len(fresh.players) == 7

    def test_invalid_player_count(self, tmp_path) -> None:
        """Test setup errors propagate to main."""
        from grimoire.exceptions import ValidationError

        with pytest.raises(ValidationError):
            build_game(make_args(players=3), GameStore(tmp_path / "game.json"))
