"""
QuickNotes Backend - In-Memory Note Store
==========================================

What:  Thread-safe CRUD over an in-memory mapping of note id → Note.
How:   One reader/writer lock guards the whole mapping. Reads (list, get)
       share it; writes (create, update, delete) hold it exclusively, and
       only for the dict access itself.
Who:   Created by the application factory and owned by the app (app.state);
       NoteService is the only caller.

Consistency:
    Every read is a snapshot of some state between call and return. Writes
    are serialized, last write wins. Nothing is persisted.

Locking Scope:
    Create validates and mints the id (Note.new) before taking the lock.
    Update has to revise the record it reads, so the length check and the
    dataclass copy in Note.revise run under the write lock; neither does I/O.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from quicknotes.models.note import Note

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Many concurrent readers or one writer.

    Writers waiting for the lock block new readers, so a steady stream of
    list/get calls cannot starve create/update/delete.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class NoteStore:
    """
    Exclusively owns every Note record.

    Records are frozen, so handing them out is equivalent to handing out
    copies: callers cannot change what the store holds.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._notes: Dict[str, Note] = {}

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._notes)

    def list_notes(self) -> List[Note]:
        """Snapshot of all notes. Order is unspecified."""
        with self._lock.read():
            return list(self._notes.values())

    def get_note(self, note_id: str) -> Optional[Note]:
        """Return the note, or None for an unknown (or malformed) id."""
        with self._lock.read():
            return self._notes.get(note_id)

    def create_note(self, title: str, content: str) -> Note:
        """
        Validate, mint and store a new note.

        Raises:
            ValidationError: title/content out of bounds (nothing is stored).
        """
        note = Note.new(title, content)
        with self._lock.write():
            self._notes[note.id] = note
        logger.debug("Stored note %s", note.id)
        return note

    def update_note(
        self,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Note]:
        """
        Replace the supplied fields of an existing note.

        None leaves a field unchanged. Returns None if the note is absent.

        Raises:
            ValidationError: a supplied field is out of bounds (note unchanged).
        """
        with self._lock.write():
            current = self._notes.get(note_id)
            if current is None:
                return None
            updated = current.revise(title=title, content=content)
            self._notes[note_id] = updated
        logger.debug("Updated note %s", note_id)
        return updated

    def delete_note(self, note_id: str) -> bool:
        """Hard delete. Returns False if the note was not present."""
        with self._lock.write():
            removed = self._notes.pop(note_id, None)
        if removed is None:
            return False
        logger.debug("Deleted note %s", note_id)
        return True
