"""User Schemas — request/response models for /users."""

from uuid import UUID

from pydantic import Field, field_validator, model_validator

from tracker.schemas.base import ApiModel, reject_explicit_nulls, strip_required_text

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(ApiModel):
    """User creation and full replacement body."""
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(max_length=320, pattern=EMAIL_PATTERN)
    phone: str | None = Field(None, max_length=40)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required_text(v, "name")


class UserReplace(UserCreate):
    pass


class UserPatch(ApiModel):
    """Sparse update — only supplied keys are applied."""
    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(None, max_length=320, pattern=EMAIL_PATTERN)
    phone: str | None = Field(None, max_length=40)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_required_text(v, "name")

    @model_validator(mode="after")
    def validate_non_nullable(self):
        reject_explicit_nulls(self, ("name", "email"))
        return self


class UserRead(ApiModel):
    id: UUID
    name: str
    email: str
    phone: str | None = None
