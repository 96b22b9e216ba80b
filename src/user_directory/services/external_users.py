"""Import users from the external JSONPlaceholder API."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from user_directory.adapters.jsonplaceholder_client import ExternalUserClient
from user_directory.domain.errors import UpstreamError, ValidationFailedError
from user_directory.domain.external import ExternalUser
from user_directory.domain.models import UserDraft, UserRecord
from user_directory.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class ExternalUserService:
    """Fetches remote users and feeds them through the local create path."""

    client: ExternalUserClient
    user_service: UserService

    async def list_external_users(self) -> list[ExternalUser]:
        """Return all users exposed by the external API."""
        payload = await self.client.list_users()
        users = [_parse_external(item) for item in payload]
        logger.info("Fetched %s users from external API", len(users))
        return users

    async def fetch_external_user(self, external_id: int) -> ExternalUser:
        """Return a single external user."""
        return _parse_external(await self.client.get_user(external_id))

    async def import_user(self, external_id: int) -> UserRecord:
        """Fetch an external user and create it locally."""
        external = await self.fetch_external_user(external_id)
        draft = to_user_draft(external)
        created = self.user_service.create_user(draft)
        logger.info(
            "Imported external user %s as local user %s", external_id, created.id
        )
        return created


def split_name(name: str) -> tuple[str, str]:
    """Split a display name on its first space into first and last name."""
    first, _, last = name.strip().partition(" ")
    return first, last.strip()


def to_user_draft(external: ExternalUser) -> UserDraft:
    """Map an external user onto the local create request."""
    first_name, last_name = split_name(external.name)
    city = external.address.city if external.address else None
    try:
        return UserDraft.model_validate(
            {
                "firstName": first_name,
                "lastName": last_name,
                "email": external.email or "",
                "phone": _local_phone(external.phone),
                "city": city or None,
            }
        )
    except ValidationError as exc:
        raise ValidationFailedError(validation_messages(exc)) from exc


def validation_messages(exc: ValidationError) -> dict[str, str]:
    """Flatten pydantic errors into a field to message map."""
    messages: dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        messages.setdefault(field, error["msg"])
    return messages


def _local_phone(phone: str | None) -> str | None:
    """Drop a trailing extension such as ' x56442' from a remote phone number."""
    if not phone:
        return None
    number, _, _ = phone.partition(" x")
    return number.strip() or None


def _parse_external(payload: object) -> ExternalUser:
    try:
        return ExternalUser.model_validate(payload)
    except ValidationError as exc:
        raise UpstreamError("External API returned a malformed user") from exc
