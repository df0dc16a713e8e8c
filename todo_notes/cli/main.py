"""
Root entrypoint for the to-do note manager.

Running `todo-notes` (or `python -m todo_notes.cli.main`) opens the
database and drops straight into the interactive menu:

    You have the following options:
    c: Create new item.
    l: List items.
    d: Mark item done/undone.
    r: Remove item from list.
    q: Quit.
    Please choose what to do:

The CLI is responsible for dependency creation: it resolves the database
location, opens the NoteStore and hands it to the menu loop. If storage
cannot be opened the error is printed and the process exits with code 1
without entering the menu.
"""

# ---------------------------------------------------------------------------
# Imports (must be at top to satisfy flake8 E402)
# ---------------------------------------------------------------------------
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import typer

from todo_notes.cli.console import print_error
from todo_notes.cli.menu import run_menu
from todo_notes.config import DB_PATH_ENV, resolve_database_path
from todo_notes.errors import StorageSetupError
from todo_notes.logging_utils import log_verbose
from todo_notes.storage import NoteStore

# Load environment variables (TODO_NOTES_DB_PATH may come from .env)
load_dotenv()

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "Personal to-do notes.\n\n"
        "Starts an interactive menu to create, list, mark done/undone and "
        "remove notes. Notes are kept in a SQLite file in your user data "
        "directory."
    ),
    add_completion=False,
)


@cli.command()
def main(
    db_path: Optional[Path] = typer.Option(
        None,
        "--db-path",
        envvar=DB_PATH_ENV,
        dir_okay=False,
        help="Database file to use instead of the per-user default.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show progress messages after each operation.",
    ),
) -> None:
    """Run the interactive to-do notes menu."""
    path = resolve_database_path(db_path)
    log_verbose(f"Using database: {path}", verbose)

    try:
        store = NoteStore.open(path)
    except StorageSetupError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)

    try:
        run_menu(store, verbose=verbose)
    finally:
        store.close()


# ---------------------------------------------------------------------------
# Entry point for `python -m todo_notes.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
