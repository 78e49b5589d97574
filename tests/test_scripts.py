"""Tests for script loading."""

import json

import pytest
import yaml

from grimoire.exceptions import NotFoundError
from grimoire.models import ActionType, RoleType
from grimoire.scripts import (
    bundled_script,
    list_bundled_scripts,
    load_script,
    parse_script,
    resolve_script,
)


MINI_SCRIPT = {
    "name": "Mini",
    "roles": [
        {"name": "Chef", "type": "Townsfolk"},
        {"name": "Imp", "type": "Demon", "action_type": "SelectPlayer", "reminders": ["Dead"]},
    ],
    "first_night": ["Chef"],
    "other_night": ["Imp"],
}


class TestBundledScripts:
    """Tests for scripts shipped with the package."""

    def test_trouble_brewing_listed(self) -> None:
        """Test the bundled script is discoverable."""
        assert "trouble_brewing" in list_bundled_scripts()

    def test_trouble_brewing_contents(self) -> None:
        """Test role counts and wake order of Trouble Brewing."""
        script = bundled_script("trouble_brewing")
        assert script.name == "Trouble Brewing"
        assert len(script.roles_of_type(RoleType.TOWNSFOLK)) == 13
        assert len(script.roles_of_type(RoleType.OUTSIDER)) == 4
        assert len(script.roles_of_type(RoleType.MINION)) == 4
        assert len(script.roles_of_type(RoleType.DEMON)) == 1
        assert script.first_night[0] == "Poisoner"
        assert script.get_role("Washerwoman").action_type == ActionType.INFO_TOKEN

    def test_wake_order_names_exist(self) -> None:
        """Test every wake-order entry names a script role."""
        script = bundled_script("trouble_brewing")
        for name in script.first_night + script.other_night:
            assert script.get_role(name) is not None, name

    def test_unknown_bundled_script(self) -> None:
        """Test asking for a missing bundled script fails."""
        with pytest.raises(NotFoundError):
            bundled_script("bad_moon_rising_deluxe")


class TestLoadScript:
    """Tests for loading scripts from disk."""

    def test_parse_yaml(self) -> None:
        """Test YAML text parses into a Script."""
        script = parse_script(yaml.safe_dump(MINI_SCRIPT))
        assert script.role_names() == ["Chef", "Imp"]
        assert script.get_role("Imp").reminders == ["Dead"]

    def test_load_json_file(self, tmp_path) -> None:
        """Test .json files are read as JSON."""
        path = tmp_path / "mini.json"
        path.write_text(json.dumps(MINI_SCRIPT), encoding="utf-8")
        script = load_script(path)
        assert script.name == "Mini"
        assert script.other_night == ["Imp"]

    def test_load_yaml_file(self, tmp_path) -> None:
        """Test other suffixes are read as YAML."""
        path = tmp_path / "mini.yml"
        path.write_text(yaml.safe_dump(MINI_SCRIPT), encoding="utf-8")
        assert load_script(path).first_night == ["Chef"]

    def test_resolve_prefers_bundled(self, tmp_path) -> None:
        """Test resolve_script handles names and paths."""
        assert resolve_script("trouble_brewing").name == "Trouble Brewing"

        path = tmp_path / "mini.json"
        path.write_text(json.dumps(MINI_SCRIPT), encoding="utf-8")
        assert resolve_script(str(path)).name == "Mini"

    def test_resolve_missing_path(self, tmp_path) -> None:
        """Test an unknown name that is not a file raises OSError."""
        with pytest.raises(OSError):
            resolve_script(str(tmp_path / "nothing.yaml"))
