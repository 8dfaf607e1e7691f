"""Many-to-Many Reconciler — sole writer of set-valued relations (Team.members).

Invariants:
    - Every desired member is validated BEFORE any membership row changes
      (all-or-nothing: a missing member leaves the stored set untouched)
    - On success the stored set becomes exactly the desired set; duplicates collapse
    - Empty desired set is valid and clears the relation
    - Never commits: runs inside the owning Entity Service's transaction

Design Decisions:
    - validate_members / apply split so create can check members before the
      owner row exists, then attach them once it has an id
"""

import logging

from tracker.core.domain_types import EntityKey, ManyToMany, ReferenceCheck
from tracker.core.membership import normalize_member_keys
from tracker.core.repository_protocols import MembershipStore
from tracker.services.reference_validator import ReferenceValidator

logger = logging.getLogger(__name__)


class MembershipReconciler:
    """Validates and swaps membership sets through per-relation stores."""

    def __init__(
        self, validator: ReferenceValidator, stores: dict[str, MembershipStore],
    ):
        self.validator = validator
        self.stores = stores

    async def validate_members(
        self, relation: ManyToMany, desired: list[EntityKey] | None,
    ) -> list[EntityKey]:
        """Deduplicate and existence-check every desired member."""
        members = normalize_member_keys(desired)
        for key in members:
            await self.validator.require(
                ReferenceCheck(field=relation.name, target=relation.target, key=key),
            )
        return members

    async def apply(
        self, owner_key: EntityKey, relation: ManyToMany, members: list[EntityKey],
    ) -> None:
        """Replace the stored set. Members must already be validated."""
        await self.stores[relation.name].replace(owner_key, members)

    async def reconcile(
        self, owner_key: EntityKey, relation: ManyToMany, desired: list[EntityKey] | None,
    ) -> list[EntityKey]:
        """Validate then swap in one call."""
        members = await self.validate_members(relation, desired)
        await self.apply(owner_key, relation, members)
        logger.info(
            f"Reconciled {relation.name} for {owner_key}: {len(members)} member(s)",
            extra={"field": relation.name, "entity_key": owner_key},
        )
        return members

    async def current(
        self, owner_key: EntityKey, relation: ManyToMany,
    ) -> list[EntityKey]:
        return await self.stores[relation.name].members_of(owner_key)
