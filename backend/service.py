"""Entry operations: authorize, validate, then one store call.

Each function takes the caller's user id (None when the identity provider
resolved nobody) and an explicitly constructed EntryStore.
"""
import logging
import uuid

from models import CATEGORIES, Entry
from store import EntryStore

logger = logging.getLogger(__name__)


class UnauthorizedError(Exception):
    """No caller identity could be resolved."""


class EntryValidationError(ValueError):
    """A required field is missing or a field value is not allowed."""


def _require_user(user_id: str | None) -> str:
    if not user_id:
        raise UnauthorizedError("Unauthorized")
    return user_id


def _check_category(category: str) -> None:
    if category not in CATEGORIES:
        raise EntryValidationError(f"Category must be one of: {', '.join(CATEGORIES)}")


def _parse_id(entry_id: str | uuid.UUID) -> uuid.UUID | None:
    # A malformed id can't match any row
    if isinstance(entry_id, uuid.UUID):
        return entry_id
    try:
        return uuid.UUID(str(entry_id))
    except ValueError:
        return None


def list_entries(store: EntryStore, user_id: str | None) -> list[Entry]:
    user_id = _require_user(user_id)
    return store.list_for_user(user_id)


def create_entry(
    store: EntryStore,
    user_id: str | None,
    name: str | None,
    category: str | None,
    notes: str | None = None,
) -> Entry:
    user_id = _require_user(user_id)
    if not name or not name.strip() or not category:
        raise EntryValidationError("Name and category are required")
    _check_category(category)

    entry = store.insert(user_id, name=name, notes=notes or "", category=category)
    logger.info(f"Created entry {entry.id} for user {user_id}")
    return entry


def update_entry(
    store: EntryStore,
    user_id: str | None,
    entry_id: str | uuid.UUID | None,
    name: str | None,
    category: str | None,
    notes: str | None = None,
) -> Entry | None:
    """Full replacement of name/notes/category.

    Returns None, not an error, when the id is unknown or owned by someone else.
    """
    user_id = _require_user(user_id)
    if not entry_id or not name or not name.strip() or not category:
        raise EntryValidationError("ID, name, and category are required")
    _check_category(category)

    parsed_id = _parse_id(entry_id)
    if parsed_id is None:
        return None

    entry = store.update_owned(parsed_id, user_id, name=name, notes=notes or "", category=category)
    if entry is None:
        logger.info(f"Update for entry {entry_id} matched no row for user {user_id}")
    return entry


def delete_entry(store: EntryStore, user_id: str | None, entry_id: str | None) -> None:
    user_id = _require_user(user_id)
    if not entry_id:
        raise EntryValidationError("ID is required")

    parsed_id = _parse_id(entry_id)
    if parsed_id is None:
        return

    deleted = store.delete_owned(parsed_id, user_id)
    logger.info(f"Delete entry {entry_id} for user {user_id}: {deleted} row(s) removed")
