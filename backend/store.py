"""Data access for the entries table.

An EntryStore wraps one SQLModel session and is constructed explicitly by the
caller, so service functions never reach for a process-wide handle. Every
query is scoped by owner; there is no way to read or write another user's
row through this class.
"""
import logging
import uuid
from datetime import UTC, datetime

from sqlalchemy import delete
from sqlmodel import Session, select

from models import Entry

logger = logging.getLogger(__name__)


class EntryStore:
    def __init__(self, session: Session):
        self.session = session

    def list_for_user(self, user_id: str) -> list[Entry]:
        """All entries owned by user_id, newest first."""
        stmt = (
            select(Entry)
            .where(Entry.user_id == user_id)
            .order_by(Entry.created_at.desc())
        )
        return list(self.session.exec(stmt).all())

    def get_owned(self, entry_id: uuid.UUID, user_id: str) -> Entry | None:
        stmt = select(Entry).where(Entry.id == entry_id, Entry.user_id == user_id)
        return self.session.exec(stmt).first()

    def insert(self, user_id: str, name: str, notes: str, category: str) -> Entry:
        now = datetime.now(UTC)
        entry = Entry(
            user_id=user_id,
            name=name,
            notes=notes,
            category=category,
            created_at=now,
            updated_at=now,
        )
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def update_owned(
        self, entry_id: uuid.UUID, user_id: str, name: str, notes: str, category: str
    ) -> Entry | None:
        """Replace name/notes/category of the matching row.

        Returns None when no row has both this id and this owner.
        """
        entry = self.get_owned(entry_id, user_id)
        if entry is None:
            return None

        entry.name = name
        entry.notes = notes
        entry.category = category
        entry.updated_at = datetime.now(UTC)
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_owned(self, entry_id: uuid.UUID, user_id: str) -> int:
        """Delete the matching row and return the number of rows removed (0 or 1)."""
        result = self.session.execute(
            delete(Entry).where(Entry.id == entry_id, Entry.user_id == user_id)
        )
        self.session.commit()
        return result.rowcount or 0
