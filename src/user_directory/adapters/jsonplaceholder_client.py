"""JSONPlaceholder users API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from user_directory.domain.errors import ResourceNotFoundError, UpstreamError

logger = logging.getLogger(__name__)


class ExternalUserClient(Protocol):
    """Interface for the external user API."""

    async def list_users(self) -> list[dict[str, object]]:
        """Return every remote user as raw API data."""

    async def get_user(self, external_id: int) -> dict[str, object]:
        """Return one remote user as raw API data."""


@dataclass
class HttpxJsonPlaceholderClient(ExternalUserClient):
    """HTTPX-backed JSONPlaceholder client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 5.0

    @classmethod
    def create(cls, base_url: str, timeout: float) -> "HttpxJsonPlaceholderClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def list_users(self) -> list[dict[str, object]]:
        """Fetch all remote users."""
        payload = await self._get("/users")
        if not isinstance(payload, list):
            raise UpstreamError("External API returned an unexpected users payload")
        return payload

    async def get_user(self, external_id: int) -> dict[str, object]:
        """Fetch a single remote user by id."""
        payload = await self._get(f"/users/{external_id}")
        # JSONPlaceholder answers unknown ids with 404 and an empty object.
        if not isinstance(payload, dict) or not payload:
            raise ResourceNotFoundError(
                f"External user not found with ID: {external_id}"
            )
        return payload

    async def _get(self, path: str) -> object:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == httpx.codes.NOT_FOUND:
                raise ResourceNotFoundError(
                    f"External resource not found: {path}"
                ) from exc
            logger.error(
                "External API returned %s for %s", exc.response.status_code, url
            )
            raise UpstreamError(
                f"External API responded with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("External API call to %s failed: %s", url, exc)
            raise UpstreamError("Failed to reach external API") from exc
        except ValueError as exc:
            raise UpstreamError("External API returned invalid JSON") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
