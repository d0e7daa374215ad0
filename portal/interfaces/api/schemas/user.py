"""User schemas."""

from typing import Literal

from pydantic import ConfigDict, EmailStr, Field

from .base import CamelModel

NIK_LENGTH = 16


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    nik: str = Field(..., min_length=NIK_LENGTH, max_length=NIK_LENGTH)
    full_name: str = Field(..., min_length=1)
    birth_place: str | None = None
    birth_date: str | None = None
    gender: str | None = None
    religion: str | None = None
    marital_status: str | None = None
    address: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    language: Literal["id", "en"] | None = None


class UserUpdate(CamelModel):
    username: str | None = Field(default=None, min_length=1, max_length=50)
    password: str | None = Field(default=None, min_length=1)
    nik: str | None = Field(default=None, min_length=NIK_LENGTH, max_length=NIK_LENGTH)
    full_name: str | None = Field(default=None, min_length=1)
    birth_place: str | None = None
    birth_date: str | None = None
    gender: str | None = None
    religion: str | None = None
    marital_status: str | None = None
    address: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    language: str | None = None

    model_config = ConfigDict(extra="forbid")


class LanguageUpdate(CamelModel):
    # Checked by the use case so an unsupported value yields 400, not 422.
    language: str | None = None


class UserRead(CamelModel):
    id: int
    username: str
    nik: str
    full_name: str
    birth_place: str | None
    birth_date: str | None
    gender: str | None
    religion: str | None
    marital_status: str | None
    address: str | None
    phone: str | None
    email: str | None
    language: str
