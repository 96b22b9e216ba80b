"""Pydantic models for JSONPlaceholder user payloads."""

from pydantic import BaseModel, ConfigDict, Field


class ExternalGeo(BaseModel):
    """Geo coordinates of an external address."""

    lat: str | None = None
    lng: str | None = None


class ExternalAddress(BaseModel):
    """Postal address of an external user."""

    street: str | None = None
    suite: str | None = None
    city: str | None = None
    zipcode: str | None = None
    geo: ExternalGeo | None = None


class ExternalCompany(BaseModel):
    """Employer of an external user."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    catch_phrase: str | None = Field(default=None, alias="catchPhrase")
    bs: str | None = None


class ExternalUser(BaseModel):
    """User representation returned by JSONPlaceholder."""

    id: int | None = None
    name: str = ""
    username: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    address: ExternalAddress | None = None
    company: ExternalCompany | None = None
