"""Script loading.

Scripts are read from JSON or YAML documents shaped like:

    name: ...
    roles: [{name, type, ability, action_type, reminders}, ...]
    first_night: [role name, ...]
    other_night: [role name, ...]
"""

import json
from importlib import resources
from pathlib import Path
from typing import Union

import yaml

from grimoire.exceptions import NotFoundError
from grimoire.models.script import Script

BUNDLED_SUFFIX = ".yaml"


def parse_script(text: str, fmt: str = "yaml") -> Script:
    """Parse script text. fmt is "json" or "yaml"."""
    if fmt == "json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    return Script.model_validate(data)


def load_script(path: Union[str, Path]) -> Script:
    """Load a script file; .json files are read as JSON, anything else as YAML."""
    path = Path(path)
    fmt = "json" if path.suffix.lower() == ".json" else "yaml"
    with open(path, "r", encoding="utf-8") as f:
        return parse_script(f.read(), fmt)


def list_bundled_scripts() -> list[str]:
    """Names of the scripts shipped with the package."""
    return sorted(
        entry.name[: -len(BUNDLED_SUFFIX)]
        for entry in resources.files(__name__).iterdir()
        if entry.name.endswith(BUNDLED_SUFFIX)
    )


def bundled_script(name: str) -> Script:
    """Load a script shipped with the package, e.g. "trouble_brewing".

    Raises:
        NotFoundError: If no bundled script has that name.
    """
    resource = resources.files(__name__).joinpath(name + BUNDLED_SUFFIX)
    if not resource.is_file():
        raise NotFoundError(f"no bundled script named '{name}'")
    return parse_script(resource.read_text(encoding="utf-8"))


def resolve_script(name_or_path: str) -> Script:
    """Load a bundled script by name, falling back to a file path."""
    if name_or_path in list_bundled_scripts():
        return bundled_script(name_or_path)
    return load_script(name_or_path)


__all__ = [
    "parse_script",
    "load_script",
    "list_bundled_scripts",
    "bundled_script",
    "resolve_script",
]
