"""
Line-based console I/O for the interactive menu.

    • print_prompt: text on stdout, no newline, flushed before reading
    • print_error: one line on stderr
    • read_line: one line from stdin, trailing whitespace removed
    • read_note_id: the id-prompt sub-protocol shared by toggle and remove
"""

import re

import typer

from todo_notes.errors import (
    EndOfInput,
    INVALID_INDEX_MESSAGE,
    InputError,
    READ_FAILURE_MESSAGE,
)

# Optionally signed decimal integer, nothing else.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# SQLite INTEGER is a signed 64-bit value.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def print_prompt(prompt: str) -> None:
    typer.echo(prompt, nl=False)


def print_error(message: str) -> None:
    typer.echo(message, err=True)


def read_line() -> str:
    """
    Read one line from standard input.

    Raises
    ------
    EndOfInput
        If the input stream is exhausted.
    InputError
        If the stream cannot be read (e.g. invalid encoding).
    """
    try:
        line = input()
    except EOFError as exc:
        raise EndOfInput() from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(READ_FAILURE_MESSAGE) from exc

    return line.rstrip()


def parse_note_id(text: str) -> int:
    """Parse `text` as a note id or raise InputError("Invalid input for index.")."""
    if not _INTEGER_RE.fullmatch(text):
        raise InputError(INVALID_INDEX_MESSAGE)

    value = int(text)
    if not _MIN_ID <= value <= _MAX_ID:
        raise InputError(INVALID_INDEX_MESSAGE)
    return value


def read_note_id(prompt: str) -> int:
    """
    Prompt for and read a note id.

    A failed read and an unparseable line are both reported as
    "Invalid input for index.".
    """
    print_prompt(prompt)
    try:
        line = read_line()
    except InputError as exc:
        raise InputError(INVALID_INDEX_MESSAGE) from exc
    return parse_note_id(line)
