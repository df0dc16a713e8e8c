"""
Public API surface for the to-do note manager.

Callers can rely on:

    from todo_notes import NoteStore, NoteRecord
    from todo_notes import NoteNotFoundError, StorageError, StorageSetupError

without needing to know the internal module layout.
"""

from .errors import (
    InputError,
    NoteNotFoundError,
    StorageError,
    StorageSetupError,
    TodoNotesError,
)
from .storage import NoteStore
from .types import Command, NoteRecord

__all__ = [
    "Command",
    "InputError",
    "NoteNotFoundError",
    "NoteRecord",
    "NoteStore",
    "StorageError",
    "StorageSetupError",
    "TodoNotesError",
]
