"""Referential Integrity Validator — executes planned existence checks, first miss wins.

Invariants:
    - Checks run in schema declaration order (plan from core/enforce_references.py)
    - Short-circuit: the first missing reference raises ReferenceNotFoundError,
      later fields are never looked up
    - Never writes: callers only touch storage after validate() returns
    - Storage failures from the resolver propagate unchanged

Design Decisions:
    - Same entry point for create, replace and patch: callers narrow the
      candidate document, the validator never knows which operation is running
"""

import logging
from collections.abc import Mapping

from tracker.core.domain_types import ForeignKey, ReferenceCheck
from tracker.core.enforce_references import plan_reference_checks, select_references
from tracker.core.errors import ReferenceNotFoundError
from tracker.core.repository_protocols import ExistenceResolver

logger = logging.getLogger(__name__)


class ReferenceValidator:
    """Validates that every present, non-null reference names an existing entity."""

    def __init__(self, resolver: ExistenceResolver):
        self.resolver = resolver

    async def validate(
        self, schema: tuple[ForeignKey, ...], candidate: Mapping[str, object],
    ) -> dict:
        """Run all checks for `candidate`; return its reference subset unchanged."""
        for check in plan_reference_checks(schema, candidate):
            await self.require(check)
        return select_references(schema, candidate)

    async def require(self, check: ReferenceCheck) -> None:
        """Single lookup; raise if the referenced entity is gone."""
        if await self.resolver.exists(check.target, check.key):
            return
        logger.info(
            f"Reference {check.field} -> {check.target.value} '{check.key}' not found",
            extra={
                "field": check.field,
                "entity_type": check.target.value,
                "entity_key": check.key,
            },
        )
        raise ReferenceNotFoundError(
            check.field, check.target.value, str(check.key),
        )
