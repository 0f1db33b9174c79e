"""Thin HTTP client for the /api/entries resource."""
import logging

import httpx

from auth import AUTH_USER_HEADER

logger = logging.getLogger(__name__)

ENTRIES_PATH = "/api/entries"


class EntriesApiClient:
    """Calls the entries API on behalf of one signed-in user.

    Wraps any httpx.Client, so a FastAPI TestClient works as well as a real
    connection. Non-2xx responses raise httpx.HTTPStatusError.
    """

    def __init__(self, http: httpx.Client, user_id: str, user_header: str = AUTH_USER_HEADER):
        self.http = http
        self.headers = {user_header: user_id}

    @classmethod
    def connect(cls, base_url: str, user_id: str, timeout: float = 10.0) -> "EntriesApiClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout), user_id)

    def list_entries(self) -> list[dict]:
        response = self.http.get(ENTRIES_PATH, headers=self.headers)
        response.raise_for_status()
        return response.json()

    def create_entry(self, name: str, category: str, notes: str = "") -> dict:
        response = self.http.post(
            ENTRIES_PATH,
            json={"name": name, "category": category, "notes": notes},
            headers=self.headers,
        )
        response.raise_for_status()
        return response.json()

    def update_entry(self, entry_id: str, name: str, category: str, notes: str = "") -> dict | None:
        response = self.http.put(
            ENTRIES_PATH,
            json={"id": entry_id, "name": name, "category": category, "notes": notes},
            headers=self.headers,
        )
        response.raise_for_status()
        return response.json()

    def delete_entry(self, entry_id: str) -> bool:
        response = self.http.delete(ENTRIES_PATH, params={"id": entry_id}, headers=self.headers)
        response.raise_for_status()
        return response.json()["success"]
