"""
Exception taxonomy for the to-do note manager.

    TodoNotesError
      ├── StorageSetupError   cannot open or initialize the database (fatal)
      ├── StorageError        I/O failure during an operation (recoverable)
      ├── NoteNotFoundError   toggle/remove targeted an id with no row
      └── InputError          console read failure or malformed id
            └── EndOfInput    the input stream is exhausted

The interactive menu catches every TodoNotesError raised by an operation,
prints its message on stderr and returns to the prompt. Only
StorageSetupError, raised before the menu starts, ends the process.
"""

NOTE_NOT_FOUND_MESSAGE = "Chosen to do note does not exist."
READ_FAILURE_MESSAGE = "Could not read input."
INVALID_INDEX_MESSAGE = "Invalid input for index."


class TodoNotesError(Exception):
    """Base class for all errors reported by the application."""


class StorageSetupError(TodoNotesError):
    """The database file could not be opened or its schema created."""


class StorageError(TodoNotesError):
    """An underlying database failure during create/list/toggle/remove."""


class NoteNotFoundError(TodoNotesError):
    """No note matches the requested id."""

    def __init__(self, note_id: int) -> None:
        super().__init__(NOTE_NOT_FOUND_MESSAGE)
        self.note_id = note_id


class InputError(TodoNotesError):
    """A console line could not be read or parsed."""


class EndOfInput(InputError):
    """Standard input reached end of file."""

    def __init__(self) -> None:
        super().__init__(READ_FAILURE_MESSAGE)
