"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime

from postgrest.exceptions import APIError
from supabase import Client

from user_directory.domain.errors import DuplicateResourceError, ResourceNotFoundError
from user_directory.domain.models import UserDraft, UserQuery, UserRecord
from user_directory.services.users import UserRepository

_UNIQUE_VIOLATION = "23505"
_RANGE_NOT_SATISFIABLE = "PGRST103"
_KEYWORD_COLUMNS = ("first_name", "last_name", "email")


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client
    table: str = "users"

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def find_by_email(self, email: str) -> UserRecord | None:
        """Return the user owning an email address, if present."""
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, draft: UserDraft, created_at: datetime) -> UserRecord:
        """Insert a user row and return it."""
        timestamp = created_at.isoformat()
        payload = {
            **_draft_payload(draft),
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        try:
            response = self.client.table(self.table).insert(payload).execute()
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateResourceError(
                    f"User already exists with email: {draft.email}"
                ) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_user(
        self, user_id: int, draft: UserDraft, updated_at: datetime
    ) -> UserRecord:
        """Overwrite the mutable columns of a user row and return it."""
        payload = {**_draft_payload(draft), "updated_at": updated_at.isoformat()}
        try:
            response = (
                self.client.table(self.table)
                .update(payload)
                .eq("id", user_id)
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateResourceError(
                    f"User already exists with email: {draft.email}"
                ) from exc
            raise
        if not response.data:
            raise ResourceNotFoundError(f"User not found with ID: {user_id}")
        return _parse_user(response.data[0])

    def delete_user(self, user_id: int) -> None:
        """Delete a user row."""
        self.client.table(self.table).delete().eq("id", user_id).execute()

    def list_users(self, query: UserQuery) -> tuple[list[UserRecord], int]:
        """Return one ordered window of matching users and the total count."""
        builder = self._filtered(query, "*", count="exact")
        try:
            response = (
                builder.order(query.sort_by, desc=query.descending)
                .range(query.offset, query.offset + query.size - 1)
                .execute()
            )
        except APIError as exc:
            if exc.code != _RANGE_NOT_SATISFIABLE:
                raise
            # PostgREST rejects windows that start past the last row.
            return [], self._count(query)
        users = [_parse_user(row) for row in response.data or []]
        return users, int(response.count or 0)

    def count_users(self) -> int:
        """Return the number of stored users."""
        response = (
            self.client.table(self.table)
            .select("id", count="exact", head=True)
            .execute()
        )
        return int(response.count or 0)

    def _count(self, query: UserQuery) -> int:
        response = self._filtered(query, "id", count="exact", head=True).execute()
        return int(response.count or 0)

    def _filtered(  # type: ignore[no-untyped-def]
        self, query: UserQuery, columns: str, **select_options
    ):
        builder = self.client.table(self.table).select(columns, **select_options)
        if query.city:
            builder = builder.ilike("city", _like_literal(query.city))
        if query.keyword:
            pattern = _quoted(f"%{_like_literal(query.keyword)}%")
            builder = builder.or_(
                ",".join(f"{column}.ilike.{pattern}" for column in _KEYWORD_COLUMNS)
            )
        return builder


def _draft_payload(draft: UserDraft) -> dict[str, object]:
    return {
        "first_name": draft.first_name,
        "last_name": draft.last_name,
        "email": draft.email,
        "phone": draft.phone,
        "city": draft.city,
    }


def _like_literal(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _quoted(value: str) -> str:
    """Quote a value for use inside a PostgREST logic tree."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _parse_user(row: dict[str, object]) -> UserRecord:
    """Parse a users row into a domain model."""
    return UserRecord(
        id=int(row["id"]),
        first_name=str(row.get("first_name", "")),
        last_name=str(row.get("last_name", "")),
        email=str(row.get("email", "")),
        phone=row.get("phone"),
        city=row.get("city"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
