"""Helpers shared by the Supabase adapters."""

from datetime import datetime
from typing import Any

from postgrest.exceptions import APIError

from materials_catalog.domain.errors import StoreError


def execute(query: Any, action: str) -> Any:
    """Run a PostgREST query, mapping API failures to StoreError."""
    try:
        return query.execute()
    except APIError as exc:
        raise StoreError(f"Failed to {action}: {exc.message or exc}") from exc


def parse_timestamp(value: object) -> datetime:
    """Parse a timestamp column returned by PostgREST."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        raise StoreError("Row is missing a timestamp")
    return datetime.fromisoformat(value)
