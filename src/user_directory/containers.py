"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from user_directory.adapters.jsonplaceholder_client import HttpxJsonPlaceholderClient
from user_directory.adapters.supabase_user_repository import SupabaseUserRepository
from user_directory.config import Settings
from user_directory.services.external_users import ExternalUserService
from user_directory.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    external_user_service: ExternalUserService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(
        supabase_client, table=resolved_settings.users_table
    )
    user_service = UserService(user_repository)
    external_client = HttpxJsonPlaceholderClient.create(
        base_url=resolved_settings.external_api_base_url,
        timeout=resolved_settings.external_api_timeout,
    )
    external_user_service = ExternalUserService(
        client=external_client,
        user_service=user_service,
    )

    async def close_resources() -> None:
        await external_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        external_user_service=external_user_service,
        close_resources=close_resources,
    )
