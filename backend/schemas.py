import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EntryCreate(BaseModel):
    # Required fields are checked by the service so a missing one is a 400, not a 422
    name: str | None = None
    notes: str | None = None
    category: str | None = None


class EntryUpdate(BaseModel):
    id: str | None = None
    name: str | None = None
    notes: str | None = None
    category: str | None = None


class DeleteResponse(BaseModel):
    success: bool


class EntryResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: uuid.UUID
    user_id: str
    name: str
    notes: str = ""
    category: str
    created_at: datetime
    updated_at: datetime
