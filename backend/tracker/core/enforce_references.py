"""Reference Enforcement — plans existence checks for a candidate document.

Invariants:
    - plan_reference_checks is PURE: returns check descriptors, performs no lookups
    - Only present, non-null reference fields produce a check
    - Checks come out in schema declaration order, so the same bad input
      always reports the same first offending field
    - Shell executes the plan and short-circuits on the first miss

Design Decisions:
    - Planning separated from lookup: core stays sync and IO-free, the async
      executor lives in services/reference_validator.py (ADR: impureim sandwich)
    - Required-but-absent fields are NOT reported here: pydantic rejects them
      at the API boundary before the core runs
"""

from collections.abc import Mapping

from tracker.core.domain_types import ForeignKey, ReferenceCheck


def plan_reference_checks(
    schema: tuple[ForeignKey, ...], candidate: Mapping[str, object],
) -> list[ReferenceCheck]:
    """Build the ordered list of lookups needed to validate `candidate`."""
    checks = []
    for fk in schema:
        if fk.field not in candidate:
            continue
        key = candidate[fk.field]
        if key is None:
            continue
        checks.append(ReferenceCheck(field=fk.field, target=fk.target, key=key))
    return checks


def select_references(
    schema: tuple[ForeignKey, ...], candidate: Mapping[str, object],
) -> dict:
    """Subset of `candidate` holding only declared reference fields."""
    return {fk.field: candidate[fk.field] for fk in schema if fk.field in candidate}


def full_reference_candidate(
    schema: tuple[ForeignKey, ...], document: Mapping[str, object],
) -> dict:
    """Every declared reference field of a full document, absent ones as None.

    Used by replace: the whole reference set is re-validated, not just the
    fields that changed.
    """
    return {fk.field: document.get(fk.field) for fk in schema}
