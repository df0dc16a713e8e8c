"""
SQLite-backed storage for to-do notes.

NoteStore owns the single `to_do_notes` table and the four operations the
menu needs against it:

    • create_note(title, content) → id
    • list_notes()                → [NoteRecord, ...]
    • toggle_done(id)             → new done value
    • remove_note(id)

The store is constructed once at startup and handed to the menu for the
lifetime of the session. It assumes it is the only process using the
database file: toggle_done() is a read followed by a write with no
cross-process lock.

Errors are normalized so callers never see SQLAlchemy exceptions:

    • schema/connection failures while opening → StorageSetupError
    • failures during an operation             → StorageError
    • toggle/remove of a missing id            → NoteNotFoundError
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.types import TypeDecorator

from todo_notes.errors import NoteNotFoundError, StorageError, StorageSetupError
from todo_notes.timestamps import from_text, to_text, utc_now
from todo_notes.types import NoteRecord

TABLE_NAME = "to_do_notes"


# ---------------------------------------------------------------------------
# Column type: canonical UTC timestamp stored as text
# ---------------------------------------------------------------------------


class UTCTimestamp(TypeDecorator):
    """Stores aware datetimes as canonical UTC text (see todo_notes.timestamps)."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Any) -> Optional[str]:
        if value is None:
            return None
        return to_text(value)

    def process_result_value(self, value: Optional[str], dialect: Any) -> Optional[datetime]:
        if value is None:
            return None
        return from_text(value)


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------
# sqlite_autoincrement emits AUTOINCREMENT, so ids of deleted rows are never
# handed out again.
# ---------------------------------------------------------------------------
metadata = MetaData()

notes_table = Table(
    TABLE_NAME,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("created", UTCTimestamp, nullable=False),
    Column("done", Boolean, nullable=False, default=False),
    sqlite_autoincrement=True,
)


def sqlite_engine(path: Path) -> Engine:
    """Build an Engine for the SQLite file at `path`."""
    return create_engine(URL.create("sqlite", database=str(path)))


# ---------------------------------------------------------------------------
# Main storage class
# ---------------------------------------------------------------------------


class NoteStore:
    """
    Persistence component for Notes.

    Parameters
    ----------
    engine : Engine
        A SQLAlchemy engine bound to the database file.
    clock : Callable[[], datetime]
        Source of the `created` timestamp. Defaults to the current UTC time;
        tests inject a fixed clock.
    """

    def __init__(self, engine: Engine, clock: Callable[[], datetime] = utc_now) -> None:
        self.engine = engine
        self.clock = clock

    @classmethod
    def open(cls, path: Path, clock: Callable[[], datetime] = utc_now) -> "NoteStore":
        """
        Open (creating if needed) the database file at `path` and initialize it.

        Raises
        ------
        StorageSetupError
            If the directory cannot be created or the schema cannot be set up.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageSetupError(f"Could not create data directory {path.parent}: {exc}") from exc

        store = cls(sqlite_engine(path), clock=clock)
        store.initialize()
        return store

    def initialize(self) -> None:
        """
        Ensure the notes table exists.

        create_all() checks for the table first, so this is safe to call on
        every startup and never touches existing rows.
        """
        try:
            metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StorageSetupError(f"Could not initialize storage: {exc}") from exc

    def close(self) -> None:
        """Release pooled connections held by the engine."""
        self.engine.dispose()

    # -----------------------------------------------------------------------
    # CRUD
    # -----------------------------------------------------------------------

    def create_note(self, title: str, content: str) -> int:
        """
        Insert a new note and return its storage-assigned id.

        Any text is accepted for `title` and `content`, including "".
        The note starts with done=False and created=now (UTC).
        """
        stmt = insert(notes_table).values(
            title=title,
            content=content,
            created=self.clock(),
            done=False,
        )
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
                return int(result.inserted_primary_key[0])
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not create note: {exc}") from exc

    def list_notes(self) -> List[NoteRecord]:
        """Return every note in insertion order as a fully materialized list."""
        stmt = select(notes_table).order_by(notes_table.c.id)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except (SQLAlchemyError, ValueError) as exc:
            # ValueError: a stored `created` value is not a readable timestamp.
            raise StorageError(f"Could not list notes: {exc}") from exc

        return [
            NoteRecord(
                id=row["id"],
                title=row["title"],
                content=row["content"],
                created=row["created"],
                done=bool(row["done"]),
            )
            for row in rows
        ]

    def toggle_done(self, note_id: int) -> bool:
        """
        Flip the done flag of a note and return the new value.

        Raises
        ------
        NoteNotFoundError
            If no note has this id. Nothing is written.
        """
        query = select(notes_table.c.done).where(notes_table.c.id == note_id)
        try:
            with self.engine.begin() as conn:
                row = conn.execute(query).first()
                if row is None:
                    raise NoteNotFoundError(note_id)

                done = not bool(row.done)
                conn.execute(
                    update(notes_table).where(notes_table.c.id == note_id).values(done=done)
                )
                return done
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not update note {note_id}: {exc}") from exc

    def remove_note(self, note_id: int) -> None:
        """
        Delete the note with this id.

        Raises
        ------
        NoteNotFoundError
            If no row was deleted.
        """
        stmt = delete(notes_table).where(notes_table.c.id == note_id)
        try:
            with self.engine.begin() as conn:
                deleted = conn.execute(stmt).rowcount
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not remove note {note_id}: {exc}") from exc

        if deleted == 0:
            raise NoteNotFoundError(note_id)
