"""
QuickNotes Backend - Notes Route Handlers
==========================================

What:  CRUD endpoints under /api/notes.
How:   Parse the body into a request schema, delegate to NoteService, return JSON.
Who:   Called by the notes frontend.

Endpoints:
    GET    /api/notes          → 200 list of notes
    POST   /api/notes          → 201 created note
    GET    /api/notes/{id}     → 200 note | 404
    PUT    /api/notes/{id}     → 200 note | 404
    DELETE /api/notes/{id}     → 204 | 404

Ids are opaque strings: a malformed id is simply not found (404), never 422.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from quicknotes.schemas.note import (
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    ErrorResponse,
)
from quicknotes.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every note, most recently updated first. No pagination.",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return service.list_notes()


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Invalid JSON or field out of bounds", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Create a note from `{title, content}`.

    The title arrives already trimmed (see NoteCreate); content is kept as sent.
    """
    return service.create_note(title=payload.title, content=payload.content)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found (empty body)"}},
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.get_note(note_id)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Invalid JSON or field out of bounds", "model": ErrorResponse},
        404: {"description": "Note not found (empty body)"},
    },
    summary="Update a note",
    description=(
        "Partial update: omitted or null fields are kept, supplied fields are replaced. "
        "updatedAt always advances."
    ),
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.update_note(note_id, title=payload.title, content=payload.content)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Note not found (empty body)"}},
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.delete_note(note_id)
    return Response(status_code=204)
