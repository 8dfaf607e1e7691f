"""Project Schemas — request/response models for /projects.

Invariants:
    - projectName is the key Tasks use to reference a project; it is stored
      trimmed whichever write supplied it
"""

from uuid import UUID

from pydantic import Field, field_validator, model_validator

from tracker.schemas.base import ApiModel, reject_explicit_nulls, strip_required_text


class ProjectCreate(ApiModel):
    """Project creation and full replacement body."""
    project_name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(None, max_length=10_000)

    @field_validator("project_name")
    @classmethod
    def strip_project_name(cls, v: str) -> str:
        return strip_required_text(v, "projectName")


class ProjectReplace(ProjectCreate):
    pass


class ProjectPatch(ApiModel):
    project_name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=10_000)

    @field_validator("project_name")
    @classmethod
    def strip_project_name(cls, v: str | None) -> str | None:
        return strip_required_text(v, "projectName")

    @model_validator(mode="after")
    def validate_non_nullable(self):
        reject_explicit_nulls(self, ("project_name",))
        return self


class ProjectRead(ApiModel):
    id: UUID
    project_name: str
    description: str | None = None
