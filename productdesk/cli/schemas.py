"""
Request Schemas.

Payloads sent to the backend. Field names on the wire follow the
backend's camelCase (expirationDate); dump with to_payload().
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON body using wire field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Credentials(_Payload):
    email: str
    password: str


class UserCreate(_Payload):
    name: str
    age: int
    email: str
    password: str


class ProductCreate(_Payload):
    """Product as sent on creation; the backend assigns the id."""

    name: str
    price: float
    expiration_date: str = Field(alias="expirationDate")


class ProductUpdate(_Payload):
    id: str
    name: str
    price: float
    expiration_date: str = Field(alias="expirationDate")
