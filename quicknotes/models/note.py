"""
QuickNotes Backend - Note Domain Model
=======================================

What:  The validated Note record and the factory that mints it.
How:   Frozen dataclass; `Note.new()` checks length bounds, mints a
       time-ordered id and stamps both timestamps. `Note.revise()` returns a
       new validated record for updates.
Who:   Used by the NoteStore for every write, by NoteService for responses.

Field Rules:
    - id: version-7 layout UUID string (millisecond timestamp first), so ids
      sort by creation time, even when minted within the same millisecond
    - title: 1-100 characters, counted as Unicode code points (not bytes)
    - content: 1-10000 characters, same counting
    - created_at: set once, UTC
    - updated_at: equals created_at on construction, strictly increases on
      every revision

A Note that exists is always valid: there is no way to build one that skips
the bounds check.
"""

import secrets
import threading
import time
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from quicknotes.exceptions import ValidationError

MIN_TITLE_LENGTH = 1
MAX_TITLE_LENGTH = 100
MIN_CONTENT_LENGTH = 1
MAX_CONTENT_LENGTH = 10000


# ══════════════════════════════════════════════════════════════════════════
# Identifier Minting
# ══════════════════════════════════════════════════════════════════════════

_RAND_BITS = 74
_RAND_MASK = (1 << _RAND_BITS) - 1

_id_lock = threading.Lock()
_last_ms = 0
_last_rand = 0


def new_note_id() -> str:
    """
    Mint a unique, time-ordered note identifier.

    Layout (RFC 9562 UUIDv7):
        48 bits  unix timestamp in milliseconds
         4 bits  version (7)
        12 bits  rand_a  ┐
         2 bits  variant │ 74 random bits, split around the variant
        62 bits  rand_b  ┘

    Within one millisecond the random part is incremented instead of redrawn,
    so successive ids from this process are strictly increasing. If the
    counter overflows, the timestamp is bumped by one millisecond.

    Returns:
        Canonical lowercase UUID string (36 chars). Lexicographic order equals
        minting order.
    """
    global _last_ms, _last_rand

    with _id_lock:
        now_ms = time.time_ns() // 1_000_000
        if now_ms > _last_ms:
            _last_ms = now_ms
            _last_rand = secrets.randbits(_RAND_BITS)
        else:
            _last_rand += 1
            if _last_rand > _RAND_MASK:
                _last_ms += 1
                _last_rand = secrets.randbits(_RAND_BITS)
        ms, rand = _last_ms, _last_rand

    rand_a = rand >> 62
    rand_b = rand & ((1 << 62) - 1)
    value = (ms << 80) | (0x7 << 76) | (rand_a << 64) | (0b10 << 62) | rand_b
    return str(uuid.UUID(int=value))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _check_length(field: str, value: str, minimum: int, maximum: int) -> None:
    """Raise ValidationError unless minimum <= len(value) <= maximum."""
    # len() on str counts code points, which is what the bounds are defined in
    length = len(value)
    if length < minimum or length > maximum:
        raise ValidationError(
            message=f"{field} must be between {minimum} and {maximum} characters (got {length})",
            field=field,
            context={"length": length, "min": minimum, "max": maximum},
        )


# ══════════════════════════════════════════════════════════════════════════
# Note Record
# ══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Note:
    """
    A titled text note.

    Frozen: the store can hand the same instance to any number of readers,
    and every mutation produces a new record via `revise()`.
    """

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def new(cls, title: str, content: str) -> "Note":
        """
        Validate fields and build a brand new note.

        Raises:
            ValidationError: title or content length out of bounds. Nothing
                is minted in that case.
        """
        _check_length("title", title, MIN_TITLE_LENGTH, MAX_TITLE_LENGTH)
        _check_length("content", content, MIN_CONTENT_LENGTH, MAX_CONTENT_LENGTH)

        now = _utc_now()
        return cls(
            id=new_note_id(),
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )

    def revise(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> "Note":
        """
        Return a copy with the supplied fields replaced.

        None means "leave unchanged". Any string, including "", is a real
        replacement and must satisfy the bounds. `updated_at` always moves
        forward, even when no field is supplied.

        Raises:
            ValidationError: a supplied field is out of bounds.
        """
        if title is not None:
            _check_length("title", title, MIN_TITLE_LENGTH, MAX_TITLE_LENGTH)
        if content is not None:
            _check_length("content", content, MIN_CONTENT_LENGTH, MAX_CONTENT_LENGTH)

        now = _utc_now()
        if now <= self.updated_at:
            # clock did not tick (or stepped back)
            now = self.updated_at + timedelta(microseconds=1)

        return replace(
            self,
            title=self.title if title is None else title,
            content=self.content if content is None else content,
            updated_at=now,
        )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, updated_at='{self.updated_at}')>"
