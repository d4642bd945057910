"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from materials_catalog.adapters.supabase_query import execute
from materials_catalog.domain.errors import StoreError
from materials_catalog.domain.models import Credentials, UserRecord
from materials_catalog.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with this id, if present."""
        response = execute(
            self.client.table("users")
            .select("id, email")
            .eq("id", user_id)
            .limit(1),
            "load user",
        )
        if response.data:
            row = response.data[0]
            return UserRecord(id=int(row["id"]), email=row["email"])
        return None

    def get_credentials(self, email: str) -> Credentials | None:
        """Return the stored credentials for an email, if present."""
        response = execute(
            self.client.table("users")
            .select("id, email, password_hash")
            .eq("email", email)
            .limit(1),
            "load credentials",
        )
        if response.data:
            row = response.data[0]
            return Credentials(
                id=int(row["id"]),
                email=row["email"],
                password_hash=row["password_hash"],
            )
        return None

    def create_user(self, email: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        response = execute(
            self.client.table("users").insert(
                {"email": email, "password_hash": password_hash}
            ),
            "create user",
        )
        if not response.data:
            raise StoreError("Failed to create user")
        row = response.data[0]
        return UserRecord(id=int(row["id"]), email=row["email"])
