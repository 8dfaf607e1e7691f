"""Referential Integrity Validator — tests for short-circuit existence checking.

Tests cover:
    - all references present -> reference subset returned unchanged
    - first missing reference raises, naming field, target type and key
    - later fields are never looked up after a miss
    - null and absent references are never looked up
"""

from uuid import uuid4

import pytest

from tracker.core.domain_types import EntityType
from tracker.core.errors import ReferenceNotFoundError
from tracker.services.entity_definitions import TASK_DEFINITION
from tracker.services.reference_validator import ReferenceValidator

from tests.services.fakes import FakeResolver

REFS = TASK_DEFINITION.references


async def test_all_present_returns_reference_subset():
    creator, primary = uuid4(), uuid4()
    resolver = FakeResolver({
        (EntityType.USER, creator), (EntityType.USER, primary),
        (EntityType.PROJECT, "apollo"),
    })
    candidate = {
        "title": "t", "project": "apollo",
        "creator": creator, "assigned_primary": primary,
    }
    result = await ReferenceValidator(resolver).validate(REFS, candidate)
    assert result == {
        "project": "apollo", "creator": creator, "assigned_primary": primary,
    }


async def test_first_missing_reference_short_circuits():
    creator, primary = uuid4(), uuid4()
    resolver = FakeResolver({(EntityType.PROJECT, "apollo")})
    candidate = {"project": "apollo", "creator": creator, "assigned_primary": primary}

    with pytest.raises(ReferenceNotFoundError) as exc_info:
        await ReferenceValidator(resolver).validate(REFS, candidate)

    assert exc_info.value.field == "creator"
    assert exc_info.value.target_type == "user"
    assert exc_info.value.key == str(creator)
    # assigned_primary was never looked up
    assert resolver.calls == [
        (EntityType.PROJECT, "apollo"), (EntityType.USER, creator),
    ]


async def test_same_bad_input_reports_same_field():
    parent, secondary = uuid4(), uuid4()
    candidate = {"parent_task": parent, "assigned_secondary": secondary}
    fields = []
    for _ in range(3):
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            await ReferenceValidator(FakeResolver()).validate(REFS, candidate)
        fields.append(exc_info.value.field)
    assert fields == ["assigned_secondary"] * 3


async def test_null_and_absent_references_not_looked_up():
    resolver = FakeResolver()
    await ReferenceValidator(resolver).validate(
        REFS, {"assigned_secondary": None, "title": "x"},
    )
    assert resolver.calls == []


async def test_self_reference_checks_task_type():
    parent = uuid4()
    resolver = FakeResolver({(EntityType.TASK, parent)})
    await ReferenceValidator(resolver).validate(REFS, {"parent_task": parent})
    assert resolver.calls == [(EntityType.TASK, parent)]
