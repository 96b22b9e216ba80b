"""User CRUD and external import endpoints."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Path, Query, Request, status

from user_directory.api.schemas import (
    DeleteResponse,
    PagedUsersResponse,
    UserResponse,
)
from user_directory.domain.external import ExternalUser
from user_directory.domain.models import UserDraft  # noqa: TC001
from user_directory.services.users import DEFAULT_PAGE_SIZE

if TYPE_CHECKING:
    from user_directory.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("", response_model=PagedUsersResponse)
async def list_users(  # noqa: PLR0913
    request: Request,
    page: int = Query(default=0, ge=0),
    size: int = Query(default=DEFAULT_PAGE_SIZE),
    sort_by: str = Query(default="id", alias="sortBy"),
    sort_dir: str = Query(default="asc", alias="sortDir"),
    city: str | None = Query(default=None),
    keyword: str | None = Query(default=None),
) -> PagedUsersResponse:
    """Return a page of users, optionally filtered by city and keyword."""
    logger.info(
        "REQUEST GET /users page=%s size=%s city=%s keyword=%s",
        page,
        size,
        city,
        keyword,
    )
    result = _container(request).user_service.list_users(
        page=page,
        size=size,
        sort_by=sort_by,
        sort_dir=sort_dir,
        city=city,
        keyword=keyword,
    )
    logger.info(
        "RESPONSE GET /users total=%s page=%s returned=%s",
        result.total_elements,
        result.current_page,
        len(result.content),
    )
    return PagedUsersResponse.from_page(result)


@router.get("/external", response_model=list[ExternalUser])
async def list_external_users(request: Request) -> list[ExternalUser]:
    """Return users from the external API as-is."""
    logger.info("REQUEST GET /users/external")
    users = await _container(request).external_user_service.list_external_users()
    logger.info("RESPONSE GET /users/external fetched=%s", len(users))
    return users


@router.post(
    "/import/{external_id}",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def import_external_user(
    request: Request, external_id: int = Path(ge=1)
) -> UserResponse:
    """Fetch an external user and store it locally."""
    logger.info("REQUEST POST /users/import/%s", external_id)
    user = await _container(request).external_user_service.import_user(external_id)
    logger.info("RESPONSE POST /users/import/%s id=%s", external_id, user.id)
    return UserResponse.from_record(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(request: Request, user_id: int = Path(ge=1)) -> UserResponse:
    """Return a single user."""
    logger.info("REQUEST GET /users/%s", user_id)
    user = _container(request).user_service.get_user(user_id)
    return UserResponse.from_record(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: Request, draft: UserDraft) -> UserResponse:
    """Create a user."""
    logger.info("REQUEST POST /users email=%s", draft.email)
    user = _container(request).user_service.create_user(draft)
    logger.info("RESPONSE POST /users id=%s", user.id)
    return UserResponse.from_record(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    request: Request, draft: UserDraft, user_id: int = Path(ge=1)
) -> UserResponse:
    """Overwrite a user's fields."""
    logger.info("REQUEST PUT /users/%s email=%s", user_id, draft.email)
    user = _container(request).user_service.update_user(user_id, draft)
    return UserResponse.from_record(user)


@router.delete("/{user_id}", response_model=DeleteResponse)
async def delete_user(request: Request, user_id: int = Path(ge=1)) -> DeleteResponse:
    """Delete a user."""
    logger.info("REQUEST DELETE /users/%s", user_id)
    _container(request).user_service.delete_user(user_id)
    return DeleteResponse(
        message="User deleted successfully",
        id=user_id,
        status=status.HTTP_200_OK,
        timestamp=datetime.now(tz=UTC),
    )
