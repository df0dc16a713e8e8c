"""
Interactive command loop.

The loop has a single state, "awaiting command". Each iteration prints the
menu, reads one line, parses it into a Command and dispatches through
HANDLERS. Every TodoNotesError raised by a handler is reported on stderr
and the loop carries on; only `q` (or the end of standard input) stops it.
"""

from typing import Callable, Dict

import typer

from todo_notes.cli.console import (
    print_error,
    print_prompt,
    read_line,
    read_note_id,
)
from todo_notes.errors import EndOfInput, InputError, TodoNotesError
from todo_notes.logging_utils import log_verbose
from todo_notes.storage import NoteStore
from todo_notes.timestamps import render
from todo_notes.types import Command, NoteRecord

MENU_PROMPT = (
    "You have the following options:\n"
    "c: Create new item.\n"
    "l: List items.\n"
    "d: Mark item done/undone.\n"
    "r: Remove item from list.\n"
    "q: Quit.\n"
    "Please choose what to do: "
)

TITLE_PROMPT = "Enter a title: "
CONTENT_PROMPT = "Enter the to do note: "
TOGGLE_PROMPT = "Enter the ID of the item to mark done/undone: "
REMOVE_PROMPT = "Enter the ID of the item to remove: "

INVALID_OPTION_MESSAGE = "Invalid option! Try again."

SEPARATOR = "---"


def parse_command(line: str) -> Command:
    """Map a raw menu line onto a Command; anything unrecognized is UNKNOWN."""
    choice = line.rstrip()
    if not choice:
        return Command.UNKNOWN
    try:
        return Command(choice)
    except ValueError:
        return Command.UNKNOWN


def format_note(note: NoteRecord) -> str:
    """Render the fields of a note, one per line, without separators."""
    return (
        f"[{note['id']}]\n"
        f"Title: {note['title']}\n"
        f"Content: {note['content']}\n"
        f"Time created: {render(note['created'])}\n"
        f"Done: {'true' if note['done'] else 'false'}"
    )


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def create_item(store: NoteStore, verbose: bool) -> None:
    # Both lines are read before anything is written.
    print_prompt(TITLE_PROMPT)
    title = read_line()
    print_prompt(CONTENT_PROMPT)
    content = read_line()

    note_id = store.create_note(title, content)
    log_verbose(f"Created note [{note_id}].", verbose)


def list_items(store: NoteStore, verbose: bool) -> None:
    notes = store.list_notes()
    for note in notes:
        typer.echo(SEPARATOR)
        typer.echo(format_note(note))
        typer.echo(SEPARATOR)
    log_verbose(f"Listed {len(notes)} note(s).", verbose)


def mark_done(store: NoteStore, verbose: bool) -> None:
    note_id = read_note_id(TOGGLE_PROMPT)
    done = store.toggle_done(note_id)
    log_verbose(f"Note [{note_id}] is now {'done' if done else 'not done'}.", verbose)


def remove_item(store: NoteStore, verbose: bool) -> None:
    note_id = read_note_id(REMOVE_PROMPT)
    store.remove_note(note_id)
    log_verbose(f"Removed note [{note_id}].", verbose)


HANDLERS: Dict[Command, Callable[[NoteStore, bool], None]] = {
    Command.CREATE: create_item,
    Command.LIST: list_items,
    Command.TOGGLE: mark_done,
    Command.REMOVE: remove_item,
}


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------


def run_menu(store: NoteStore, verbose: bool = False) -> None:
    """
    Run the interactive menu until the user quits.

    Parameters
    ----------
    store : NoteStore
        An initialized store, owned by the caller for the whole session.
    verbose : bool
        Print progress messages after each operation.
    """
    while True:
        print_prompt(MENU_PROMPT)
        try:
            line = read_line()
        except EndOfInput:
            # No further command can ever arrive; treat as quit.
            typer.echo()
            log_verbose("End of input, quitting.", verbose)
            return
        except InputError as exc:
            print_error(str(exc))
            continue

        command = parse_command(line)
        if command is Command.QUIT:
            return

        handler = HANDLERS.get(command)
        if handler is None:
            print_error(INVALID_OPTION_MESSAGE)
            continue

        try:
            handler(store, verbose)
        except TodoNotesError as exc:
            print_error(str(exc))
