"""Local entry cache and the views derived from it.

The cache keeps the full entry list in one named storage slot and rewrites
the whole slot after every change. It never talks to the API on its own;
pull() and push() are the only way the two stores meet.
"""
import json
import logging
import os
import uuid
from collections.abc import Callable
from datetime import UTC, date, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel

from api_client import EntriesApiClient
from export import entries_to_csv, export_filename
from models import CATEGORIES

logger = logging.getLogger(__name__)

STORAGE_KEY = "remember-her-entries"
ALL = "All"
DEFAULT_STORAGE_DIR = os.getenv("REMEMBER_HER_STORAGE_DIR", "~/.remember-her")


class CachedEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    name: str
    notes: str = ""
    category: str
    created_at: datetime


_entry_list = TypeAdapter(list[CachedEntry])


class LocalStorage:
    """String key-value slots, one file per key."""

    def __init__(self, directory: str | Path = DEFAULT_STORAGE_DIR):
        self.directory = Path(directory).expanduser()

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class EntryCache:
    def __init__(
        self,
        storage: LocalStorage,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        self.storage = storage
        self.clock = clock
        self.entries: list[CachedEntry] = self.load()

    def load(self) -> list[CachedEntry]:
        """Read the persisted list. Missing or unreadable data gives an empty list."""
        try:
            raw = self.storage.get_item(STORAGE_KEY)
            if not raw:
                return []
            return _entry_list.validate_python(json.loads(raw))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable entry cache: {e}")
            return []

    def persist(self) -> None:
        payload = _entry_list.dump_json(self.entries, by_alias=True).decode("utf-8")
        try:
            self.storage.set_item(STORAGE_KEY, payload)
        except OSError as e:
            logger.warning(f"Could not persist entry cache: {e}")

    def create(self, name: str, category: str = "Actor", notes: str = "") -> CachedEntry | None:
        """Prepend a new entry. Returns None, storing nothing, if name is blank."""
        if not name.strip():
            return None
        _check_category(category)

        entry = CachedEntry(
            id=str(uuid.uuid4()),
            name=name.strip(),
            notes=notes.strip(),
            category=category,
            created_at=self.clock(),
        )
        self.entries = [entry, *self.entries]
        self.persist()
        return entry

    def update(self, entry_id: str, name: str, category: str, notes: str = "") -> CachedEntry | None:
        """Replace name/notes/category of one entry. A blank name changes nothing."""
        if not name.strip():
            return None
        _check_category(category)

        updated = None
        entries = []
        for entry in self.entries:
            if entry.id == entry_id:
                entry = entry.model_copy(
                    update={"name": name.strip(), "notes": notes.strip(), "category": category}
                )
                updated = entry
            entries.append(entry)

        self.entries = entries
        self.persist()
        return updated

    def delete(self, entry_id: str) -> None:
        self.entries = [e for e in self.entries if e.id != entry_id]
        self.persist()

    def visible_entries(self, category: str = ALL, search: str = "") -> list[CachedEntry]:
        """Entries in category (or any, for "All") whose name or notes contain search."""
        needle = search.lower()
        return [
            e
            for e in self.entries
            if (category == ALL or e.category == category)
            and (needle in e.name.lower() or needle in e.notes.lower())
        ]

    def category_counts(self) -> dict[str, int]:
        """Entry count per category, in menu order, leaving out empty categories."""
        counts = {c: 0 for c in CATEGORIES}
        for entry in self.entries:
            if entry.category in counts:
                counts[entry.category] += 1
        return {c: n for c, n in counts.items() if n}

    @property
    def total(self) -> int:
        return len(self.entries)

    def export_csv(
        self,
        directory: str | Path,
        category: str = ALL,
        search: str = "",
        today: date | None = None,
    ) -> Path:
        """Write the current filtered view to remember-her-<date>.csv in directory."""
        path = Path(directory) / export_filename(today)
        path.write_text(entries_to_csv(self.visible_entries(category, search)), encoding="utf-8")
        logger.info(f"Exported entries to {path}")
        return path

    def pull(self, api: EntriesApiClient) -> int:
        """Replace the local list with the server's list for this user."""
        self.entries = _entry_list.validate_python(api.list_entries())
        self.persist()
        return len(self.entries)

    def push(self, api: EntriesApiClient) -> int:
        """Create entries the server doesn't know yet, then pull the server's list."""
        known = {e["id"] for e in api.list_entries()}
        pushed = 0
        # Oldest first so the server's newest-first order matches ours
        for entry in reversed(self.entries):
            if entry.id not in known:
                api.create_entry(entry.name, entry.category, entry.notes)
                pushed += 1
        self.pull(api)
        return pushed


def _check_category(category: str) -> None:
    if category not in CATEGORIES:
        raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}")
