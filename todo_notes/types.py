"""
todo_notes/types.py

Centralized type definitions for the to-do note manager.

This module defines the record shape returned by the storage layer and the
finite set of commands understood by the interactive menu. Keeping these
types in one place gives the CLI and the storage layer a single contract:

    • NoteRecord: one row of the `to_do_notes` table
    • Command   : the parsed form of a menu choice
"""

from datetime import datetime
from enum import Enum
from typing import TypedDict


# ---------------------------------------------------------------------------
# NoteRecord
# ---------------------------------------------------------------------------
# Represents a single note row as returned by NoteStore.list_notes().
#
#   • id     : assigned by storage, never reused
#   • created: timezone-aware UTC instant, immutable after insert
#   • done   : the only mutable field, flipped by NoteStore.toggle_done()
# ---------------------------------------------------------------------------
class NoteRecord(TypedDict):
    id: int
    title: str
    content: str
    created: datetime
    done: bool


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------
# Menu choices. The raw input line is parsed into one of these once, and the
# menu dispatches on the enumeration rather than on raw text.
# ---------------------------------------------------------------------------
class Command(Enum):
    CREATE = "c"
    LIST = "l"
    TOGGLE = "d"
    REMOVE = "r"
    QUIT = "q"
    UNKNOWN = ""
