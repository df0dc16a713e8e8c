# todo_notes/config.py

from pathlib import Path
from typing import Optional

import platformdirs

# Name of the per-user application data directory
APP_NAME = "to_do_notes"

# The database file inside that directory
DATABASE_FILENAME = "data"

# Environment variable (or .env entry) that overrides the database location
DB_PATH_ENV = "TODO_NOTES_DB_PATH"


def default_database_path() -> Path:
    """
    Return the OS-appropriate per-user data location of the database file.

    platformdirs resolves the platform convention for user data:
        • Linux   $XDG_DATA_HOME/to_do_notes/data (~/.local/share by default)
        • macOS   ~/Library/Application Support/to_do_notes/data
        • Windows %LOCALAPPDATA%\\to_do_notes\\data
    """
    return Path(platformdirs.user_data_dir(APP_NAME, appauthor=False)) / DATABASE_FILENAME


def resolve_database_path(override: Optional[Path] = None) -> Path:
    """Return `override` when given, otherwise the default location."""
    if override is not None:
        return override.expanduser()
    return default_database_path()
