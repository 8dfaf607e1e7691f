"""Membership Sets — pure helpers for set-valued relations (Team.members).

Invariants:
    - normalize_member_keys collapses duplicates, keeping first-seen order
    - Reconciliation is a full swap: the desired set replaces the stored one,
      there is never an implicit union with prior members
"""

from collections.abc import Iterable

from tracker.core.domain_types import EntityKey


def normalize_member_keys(keys: Iterable[EntityKey] | None) -> list[EntityKey]:
    """Deduplicate member keys. None and empty both mean 'no members'."""
    if not keys:
        return []
    return list(dict.fromkeys(keys))
