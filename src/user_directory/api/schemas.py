"""Pydantic models for the users HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from user_directory.domain.models import UserPage, UserRecord


class ApiModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserResponse(ApiModel):
    """A stored user."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    city: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls.model_validate(record)


class PagedUsersResponse(ApiModel):
    """A page of users with pagination metadata."""

    content: list[UserResponse]
    current_page: int
    page_size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool
    sort_by: str
    sort_direction: str

    @classmethod
    def from_page(cls, page: UserPage) -> "PagedUsersResponse":
        return cls(
            content=[UserResponse.from_record(user) for user in page.content],
            current_page=page.current_page,
            page_size=page.page_size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
            sort_by=page.sort_by,
            sort_direction=page.sort_direction,
        )


class DeleteResponse(ApiModel):
    """Confirmation returned after a delete."""

    message: str
    id: int
    status: int
    timestamp: datetime


class ErrorResponse(ApiModel):
    """Uniform error body."""

    error: str
    message: str
    status: int
    timestamp: datetime
    validation_errors: dict[str, str] | None = None
