"""
logging_utils.py

Progress output for the to-do note manager.

The menu protocol owns stdout and stderr: prompts, note listings and the
single-line error messages are fixed text. Anything beyond that is opt-in
and only appears when the user starts the program with `--verbose`.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Echo a one-line progress message after a menu operation, in verbose mode.

    Messages emitted by the CLI:
        • "Using database: <path>"          at startup
        • "Created note [<id>]."            after `c`
        • "Listed <n> note(s)."             after `l`
        • "Note [<id>] is now done."        after `d` (or "not done")
        • "Removed note [<id>]."            after `r`
        • "End of input, quitting."         when stdin closes at the menu

    They are written to stdout after the operation's own output, so a
    scripted session without `--verbose` sees exactly the menu protocol.
    """
    if verbose:
        typer.echo(message)
