"""Schema Base — camelCase wire format, data envelope, patch null guard.

Invariants:
    - JSON keys are camelCase; Python attributes are snake_case (alias generator)
    - Every successful response body is {"data": <entity | [entity]>}
    - Unknown request keys are ignored (e.g. a client echoing `creation` on PUT)
    - Patch schemas reject explicit null for columns that are NOT NULL
    - Names are trimmed the same way on create, replace and patch

Design Decisions:
    - populate_by_name=True: services hand back snake_case dicts which validate
      straight into response models
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Shared config for every request and response schema."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class DataEnvelope(ApiModel, Generic[T]):
    """Response envelope carrying an entity or a collection."""
    data: T


def reject_explicit_nulls(model: BaseModel, fields: Iterable[str]) -> None:
    """Raise if the caller sent null for any of `fields`."""
    nulled = [
        f for f in fields if f in model.model_fields_set and getattr(model, f) is None
    ]
    if nulled:
        raise ValueError(f"fields cannot be null: {', '.join(nulled)}")


def strip_required_text(value: str | None, label: str) -> str | None:
    """Trim `value`; reject it if nothing is left. None passes through."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError(f"{label} cannot be empty or whitespace")
    return value
