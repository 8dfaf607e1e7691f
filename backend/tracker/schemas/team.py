"""Team Schemas — request/response models for /teams.

Invariants:
    - members is a list of user ids on the wire; duplicates collapse server-side
    - Create/replace without members means "no members"; patch without members
      leaves membership untouched
"""

from uuid import UUID

from pydantic import Field, model_validator

from tracker.schemas.base import ApiModel, reject_explicit_nulls


class TeamCreate(ApiModel):
    """Team creation and full replacement body."""
    name: str = Field(min_length=1, max_length=200)
    members: list[UUID] = Field(default_factory=list)


class TeamReplace(TeamCreate):
    pass


class TeamPatch(ApiModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    members: list[UUID] | None = None

    @model_validator(mode="after")
    def validate_non_nullable(self):
        reject_explicit_nulls(self, ("name", "members"))
        return self


class TeamRead(ApiModel):
    id: UUID
    name: str
    members: list[UUID] = Field(default_factory=list)
