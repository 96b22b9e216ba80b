"""Domain models for the user directory."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None
    city: str | None
    created_at: datetime
    updated_at: datetime


class UserDraft(BaseModel):
    """Mutable user fields supplied on create and update."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )

    first_name: str = Field(alias="firstName", min_length=2, max_length=50)
    last_name: str = Field(alias="lastName", min_length=2, max_length=50)
    email: EmailStr = Field(max_length=100)
    phone: str | None = Field(default=None, max_length=20)
    city: str | None = Field(default=None, max_length=100)


@dataclass(frozen=True)
class UserQuery:
    """A normalized page request with optional filters."""

    page: int
    size: int
    sort_by: str
    descending: bool
    city: str | None = None
    keyword: str | None = None

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class UserPage:
    """One page of users plus count metadata."""

    content: list[UserRecord]
    current_page: int
    page_size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool
    sort_by: str
    sort_direction: str
