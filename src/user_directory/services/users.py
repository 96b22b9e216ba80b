"""User-related business logic."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from user_directory.domain.errors import (
    DuplicateResourceError,
    ResourceNotFoundError,
    ValidationFailedError,
)
from user_directory.domain.models import UserDraft, UserPage, UserQuery, UserRecord

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50

# API sort keys mapped to storage columns.
SORTABLE_FIELDS = {
    "id": "id",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "city": "city",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def find_by_email(self, email: str) -> UserRecord | None:
        """Return the user owning an email address, if present."""

    def create_user(self, draft: UserDraft, created_at: datetime) -> UserRecord:
        """Insert a new user and return it with its assigned id."""

    def update_user(
        self, user_id: int, draft: UserDraft, updated_at: datetime
    ) -> UserRecord:
        """Overwrite the mutable fields of a user and return it."""

    def delete_user(self, user_id: int) -> None:
        """Remove a user permanently."""

    def list_users(self, query: UserQuery) -> tuple[list[UserRecord], int]:
        """Return one ordered window of matching users and the total match count."""

    def count_users(self) -> int:
        """Return the number of stored users."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def list_users(  # noqa: PLR0913
        self,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
        sort_by: str = "id",
        sort_dir: str = "asc",
        city: str | None = None,
        keyword: str | None = None,
    ) -> UserPage:
        """Return a page of users matching the optional city and keyword filters.

        Blank filters are ignored, ``size`` is clamped into ``[1, MAX_PAGE_SIZE]``
        and a page past the end yields empty content with correct counts.
        """
        if page < 0:
            raise ValidationFailedError({"page": "Page index must not be negative"})
        column = _resolve_sort_column(sort_by)
        descending = sort_dir.strip().lower() == "desc"
        query = UserQuery(
            page=page,
            size=min(max(size, 1), MAX_PAGE_SIZE),
            sort_by=column,
            descending=descending,
            city=_normalize_filter(city),
            keyword=_normalize_filter(keyword),
        )
        logger.info(
            "Listing users page=%s size=%s sort=%s %s city=%s keyword=%s",
            query.page,
            query.size,
            query.sort_by,
            "desc" if descending else "asc",
            query.city,
            query.keyword,
        )
        content, total = self.repository.list_users(query)
        total_pages = math.ceil(total / query.size)
        return UserPage(
            content=content,
            current_page=query.page,
            page_size=query.size,
            total_elements=total,
            total_pages=total_pages,
            has_next=query.page + 1 < total_pages,
            has_previous=query.page > 0,
            sort_by=sort_by.strip(),
            sort_direction="desc" if descending else "asc",
        )

    def get_user(self, user_id: int) -> UserRecord:
        """Return a user or raise when the id is unknown."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise ResourceNotFoundError(f"User not found with ID: {user_id}")
        return user

    def create_user(self, draft: UserDraft) -> UserRecord:
        """Create a user after checking the email is not taken."""
        if self.repository.find_by_email(draft.email) is not None:
            raise DuplicateResourceError(
                f"User already exists with email: {draft.email}"
            )
        created = self.repository.create_user(draft, created_at=datetime.now(tz=UTC))
        logger.info("User created with id=%s", created.id)
        return created

    def update_user(self, user_id: int, draft: UserDraft) -> UserRecord:
        """Overwrite a user's fields, keeping emails unique."""
        current = self.get_user(user_id)
        if draft.email != current.email:
            owner = self.repository.find_by_email(draft.email)
            if owner is not None and owner.id != user_id:
                raise DuplicateResourceError(
                    f"User already exists with email: {draft.email}"
                )
        updated_at = max(datetime.now(tz=UTC), current.created_at)
        updated = self.repository.update_user(user_id, draft, updated_at=updated_at)
        logger.info("User updated with id=%s", user_id)
        return updated

    def delete_user(self, user_id: int) -> None:
        """Delete a user or raise when the id is unknown."""
        self.get_user(user_id)
        self.repository.delete_user(user_id)
        logger.info("User deleted with id=%s", user_id)


def _normalize_filter(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _resolve_sort_column(sort_by: str) -> str:
    key = sort_by.strip()
    if key in SORTABLE_FIELDS:
        return SORTABLE_FIELDS[key]
    if key in SORTABLE_FIELDS.values():
        return key
    raise ValidationFailedError(
        {"sortBy": f"Unsupported sort field '{sort_by}'"}
    )
