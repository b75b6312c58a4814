"""
QuickNotes Backend - Note Service (Business Logic)
===================================================

What:  Thin layer between the note routes and the NoteStore.
How:   Calls the store, turns misses into NotFoundError, turns domain Notes
       into NoteResponse schemas, and logs every mutation.
Who:   Built per request by `get_note_service()` around the app-owned store.

Error Handling Strategy:
    ValidationError from the Note factory propagates unchanged (→ 400).
    A missing note becomes NotFoundError (→ 404). The store itself cannot
    fail, so nothing is wrapped.
"""

import logging
from typing import List, Optional

from fastapi import Request

from quicknotes.exceptions import NotFoundError
from quicknotes.models.note import Note
from quicknotes.schemas.note import NoteResponse
from quicknotes.store import NoteStore

logger = logging.getLogger(__name__)


def _to_response(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        title=note.title,
        content=note.content,
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): all notes, most recently updated first
        - get_note(): single note with not-found handling
        - create_note() / update_note() / delete_note(): mutations, logged
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def list_notes(self) -> List[NoteResponse]:
        """
        Return every note, newest `updated_at` first.

        The store returns an unordered snapshot; sorting here gives clients a
        stable order. Ties are broken by id, which is time-ordered.
        """
        notes = sorted(
            self.store.list_notes(),
            key=lambda n: (n.updated_at, n.id),
            reverse=True,
        )
        return [_to_response(n) for n in notes]

    def get_note(self, note_id: str) -> NoteResponse:
        """
        Raises:
            NotFoundError: no note with this id (→ 404)
        """
        note = self.store.get_note(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return _to_response(note)

    def create_note(self, title: str, content: str) -> NoteResponse:
        """
        Raises:
            ValidationError: title/content out of bounds (→ 400)
        """
        note = self.store.create_note(title=title, content=content)
        logger.info("Note created: %s (%d chars)", note.id, len(note.content))
        return _to_response(note)

    def update_note(
        self,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        """
        Replace the supplied fields; None keeps the current value.

        Raises:
            NotFoundError: no note with this id (→ 404)
            ValidationError: a supplied field is out of bounds (→ 400)
        """
        note = self.store.update_note(note_id, title=title, content=content)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info(
            "Note updated: %s (title=%s, content=%s)",
            note_id,
            "replaced" if title is not None else "kept",
            "replaced" if content is not None else "kept",
        )
        return _to_response(note)

    def delete_note(self, note_id: str) -> None:
        """
        Raises:
            NotFoundError: no note with this id (→ 404)
        """
        if not self.store.delete_note(note_id):
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note deleted: %s", note_id)


def get_note_service(request: Request) -> NoteService:
    """FastAPI dependency: a NoteService over the store owned by this app."""
    return NoteService(request.app.state.note_store)
