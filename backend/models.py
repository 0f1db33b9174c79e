import uuid
from datetime import UTC, datetime

from sqlmodel import Field, SQLModel

CATEGORIES = (
    "Actor",
    "Director",
    "Playwright",
    "Designer",
    "Place",
    "Play",
    "Producer",
    "Stage Manager",
    "Choreographer",
    "Other",
)


class Entry(SQLModel, table=True):
    __tablename__ = "entries"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: str = Field(index=True)  # Identity provider's stable user id
    name: str
    notes: str = Field(default="")
    category: str = Field(index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
