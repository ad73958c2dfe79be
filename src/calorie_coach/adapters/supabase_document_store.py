"""Supabase-backed document store."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from calorie_coach.domain.errors import TransportError
from calorie_coach.services.profiles import DocumentStore


@dataclass
class SupabaseDocumentStore(DocumentStore):
    """Store JSON documents as ``(id, data)`` rows of a Supabase table."""

    client: Client
    collection: str

    def get(self, key: str) -> dict[str, object] | None:
        """Return the document stored under key, if present."""
        with _provider_errors(self.collection):
            response = (
                self.client.table(self.collection)
                .select("id, data")
                .eq("id", key)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        data = response.data[0].get("data")
        return dict(data) if isinstance(data, dict) else {}

    def set(self, key: str, document: dict[str, object]) -> None:
        """Write the full document under key."""
        with _provider_errors(self.collection):
            self.client.table(self.collection).upsert(
                {"id": key, "data": document}
            ).execute()

    def update(self, key: str, partial: dict[str, object]) -> None:
        """Merge top-level fields into the stored document."""
        current = self.get(key) or {}
        current.update(partial)
        with _provider_errors(self.collection):
            self.client.table(self.collection).update({"data": current}).eq(
                "id", key
            ).execute()

    def exists(self, key: str) -> bool:
        """Return True when a row exists for key."""
        with _provider_errors(self.collection):
            response = (
                self.client.table(self.collection)
                .select("id")
                .eq("id", key)
                .limit(1)
                .execute()
            )
        return bool(response.data)


@contextmanager
def _provider_errors(collection: str) -> Iterator[None]:
    """Re-raise Supabase and network failures as TransportError."""
    try:
        yield
    except (APIError, httpx.HTTPError) as exc:
        raise TransportError(f"Supabase {collection} request failed: {exc}") from exc
