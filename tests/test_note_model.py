"""
QuickNotes Backend - Note Model Unit Tests
===========================================

What we test:
    ✅ Length bounds on title (1-100) and content (1-10000), counted in code points
    ✅ Refusal raises ValidationError naming the field
    ✅ Fresh notes: non-empty id, created_at == updated_at, UTC
    ✅ revise(): None keeps a field, strings replace it, updated_at advances
    ✅ Identifier minting: unique, time-ordered, UUIDv7 layout
"""

import threading
import uuid
from dataclasses import FrozenInstanceError
from datetime import timezone

import pytest

from quicknotes.exceptions import ValidationError
from quicknotes.models.note import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    Note,
    new_note_id,
)


class TestNoteFactory:
    """Tests for Note.new() validation and stamping."""

    def test_new_note_success(self):
        note = Note.new("title", "content")
        assert note.id
        assert note.title == "title"
        assert note.content == "content"
        assert note.created_at == note.updated_at
        assert note.created_at.tzinfo == timezone.utc

    @pytest.mark.parametrize(
        "title,content",
        [
            ("t", "c"),
            ("t" * MAX_TITLE_LENGTH, "c"),
            ("t", "c" * MAX_CONTENT_LENGTH),
        ],
    )
    def test_bounds_inclusive(self, title, content):
        """Both ends of each range are accepted."""
        note = Note.new(title, content)
        assert len(note.title) == len(title)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Note.new("", "content")
        assert exc_info.value.field == "title"

    def test_title_too_long_rejected(self):
        with pytest.raises(ValidationError, match="title"):
            Note.new("t" * (MAX_TITLE_LENGTH + 1), "content")

    def test_empty_content_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Note.new("title", "")
        assert exc_info.value.field == "content"
        assert exc_info.value.context["length"] == 0

    def test_content_too_long_rejected(self):
        with pytest.raises(ValidationError, match="content"):
            Note.new("title", "c" * (MAX_CONTENT_LENGTH + 1))

    def test_length_counts_code_points_not_bytes(self):
        """100 three-byte characters is 300 bytes but still a valid title."""
        title = "あ" * MAX_TITLE_LENGTH
        assert len(title.encode("utf-8")) > MAX_TITLE_LENGTH
        note = Note.new(title, "本文")
        assert note.title == title

    def test_multibyte_title_over_limit_rejected(self):
        with pytest.raises(ValidationError):
            Note.new("é" * (MAX_TITLE_LENGTH + 1), "content")

    def test_note_is_immutable(self):
        note = Note.new("title", "content")
        with pytest.raises(FrozenInstanceError):
            note.title = "changed"


class TestNoteRevise:
    """Tests for Note.revise() partial updates."""

    def setup_method(self):
        self.note = Note.new("title", "content")

    def test_revise_nothing_keeps_fields_and_advances_timestamp(self):
        revised = self.note.revise()
        assert revised.title == "title"
        assert revised.content == "content"
        assert revised.updated_at > self.note.updated_at
        assert revised.created_at == self.note.created_at
        assert revised.id == self.note.id

    def test_revise_title_only(self):
        revised = self.note.revise(title="new title")
        assert revised.title == "new title"
        assert revised.content == "content"

    def test_revise_content_only(self):
        revised = self.note.revise(content="new content")
        assert revised.title == "title"
        assert revised.content == "new content"

    def test_revise_to_empty_string_is_a_real_replacement(self):
        """An empty string replaces the field, so it is validated and refused."""
        with pytest.raises(ValidationError):
            self.note.revise(title="")

    def test_revise_does_not_touch_original(self):
        self.note.revise(title="other")
        assert self.note.title == "title"

    def test_repeated_revisions_strictly_increase_updated_at(self):
        note = self.note
        stamps = []
        for _ in range(50):
            note = note.revise()
            stamps.append(note.updated_at)
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)


class TestNoteIdentifiers:
    """Tests for new_note_id()."""

    def test_id_is_uuid_version_7(self):
        parsed = uuid.UUID(new_note_id())
        assert parsed.version == 7
        assert parsed.variant == uuid.RFC_4122

    def test_ids_are_monotonic_within_one_process(self):
        ids = [new_note_id() for _ in range(2000)]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    def test_ids_unique_across_threads(self):
        results = []
        lock = threading.Lock()

        def mint():
            batch = [new_note_id() for _ in range(500)]
            with lock:
                results.extend(batch)

        threads = [threading.Thread(target=mint) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 4000
        assert len(set(results)) == 4000
