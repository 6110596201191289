"""
Pydantic models for user data.

``UserCreate`` is the body of ``POST /usuario`` and ``UserRead`` is
what both endpoints return.  Only ``id`` is required when parsing:
``name`` and ``birth_date`` may be omitted by the client, in which
case the ``NOT NULL`` constraints of the ``usuario`` table reject the
insert and the request fails with a storage error.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def _document_as_required(schema: Dict[str, Any]) -> None:
    """Describe every field as a required string in the OpenAPI schema.

    Parsing stays lenient so the table constraints decide; clients are
    still told to send all three fields.
    """
    schema["required"] = ["id", "name", "birth_date"]
    for name in ("name", "birth_date"):
        prop = schema["properties"][name]
        prop.pop("anyOf", None)
        prop.pop("default", None)
        prop["type"] = "string"


class UserBase(BaseModel):
    id: int = Field(..., description="O CPF do usuário", examples=[12345678901])


class UserCreate(UserBase):
    """Schema for registering a user."""

    model_config = ConfigDict(json_schema_extra=_document_as_required)

    name: Optional[str] = Field(None, description="O nome do usuário", examples=["Ana"])
    birth_date: Optional[str] = Field(
        None,
        description="A data de nascimento do usuário",
        examples=["1990-01-01"],
        json_schema_extra={"format": "date"},
    )


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    name: str = Field(..., description="O nome do usuário", examples=["Ana"])
    birth_date: str = Field(
        ...,
        description="A data de nascimento do usuário",
        examples=["1990-01-01"],
        json_schema_extra={"format": "date"},
    )


class ErrorResponse(BaseModel):
    """Error envelope returned by every failed request."""

    error: str = Field(..., examples=["user not found"])
