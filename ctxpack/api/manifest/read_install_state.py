"""Read state.json from a store directory."""

import json
from pathlib import Path

from pydantic import ValidationError

from .InstallState import InstallState
from .STATE_FILENAME import STATE_FILENAME


def read_install_state(destination: Path) -> InstallState | None:
    """Return the recorded install state, or None if nothing usable is recorded."""
    path = destination / STATE_FILENAME
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as fh:
            return InstallState.model_validate(json.load(fh))
    except (json.JSONDecodeError, ValidationError):
        return None
