"""Entity Service — create/get/list/replace/patch/delete for one entity family.

Invariants:
    - Every write validates references BEFORE touching storage; a failed write
      leaves the stored row (and its membership set) exactly as it was
    - create: all present references + relation members checked, then insert
    - replace: the ENTIRE reference set of the document is re-validated
    - patch: current state merged with the patch, then every mutable column of the
      merged document written; only references present in the patch are
      validated; empty patch is a no-op
    - delete: returns prior state, never cascades to dependents
    - One commit per successful write; failures raise before commit and the
      request session discards anything pending

Design Decisions:
    - Generic over EntityDefinition rather than four hand-written services
      (ADR: per-entity code is only the reference schema)
    - State returned as plain dicts keyed by column name; the API layer
      validates them into response schemas
    - validate-then-commit is not locked: a referenced row deleted between the
      checks and the commit leaves a dangling reference (accepted race)
"""

import logging
from collections.abc import Mapping

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import EntityKey
from tracker.core.enforce_references import full_reference_candidate
from tracker.core.errors import DuplicateKeyError, ResourceNotFoundError
from tracker.core.merge_documents import changed_fields, drop_fields, merge_partial
from tracker.core.repository_protocols import EntityRepository
from tracker.services.entity_definitions import EntityDefinition
from tracker.services.membership_reconciler import MembershipReconciler
from tracker.services.reference_validator import ReferenceValidator

logger = logging.getLogger(__name__)


class EntityService:
    """Orchestrates validator, merge engine and reconciler for one entity type."""

    def __init__(
        self,
        db: AsyncSession,
        definition: EntityDefinition,
        repository: EntityRepository,
        validator: ReferenceValidator,
        reconciler: MembershipReconciler,
    ):
        self.db = db
        self.definition = definition
        self.repository = repository
        self.validator = validator
        self.reconciler = reconciler
        self._columns = tuple(
            attr.key for attr in inspect(definition.model).column_attrs
        )
        self._mutable_columns = tuple(
            c for c in self._columns if c not in definition.immutable
        )

    @property
    def entity_name(self) -> str:
        return self.definition.entity_type.value

    # ─── Reads ───────────────────────────────────────────────────

    async def get(self, key: EntityKey) -> dict:
        entity = await self._get_or_404(key)
        return await self._state(entity)

    async def list(self) -> list[dict]:
        entities = await self.repository.list()
        return [await self._state(entity) for entity in entities]

    # ─── Writes ──────────────────────────────────────────────────

    async def create(self, document: Mapping[str, object]) -> dict:
        values = self._writable(document)
        await self.validator.validate(self.definition.references, values)
        members = await self._validate_relations(document)
        await self._check_unique(values)

        entity = await self.repository.add(values)
        for relation in self.definition.relations:
            await self.reconciler.apply(entity.id, relation, members[relation.name])
        await self.db.commit()

        logger.info(
            f"Created {self.entity_name} {entity.id}",
            extra={"entity_type": self.entity_name, "entity_key": entity.id},
        )
        return self._snapshot(entity) | members

    async def replace(self, key: EntityKey, document: Mapping[str, object]) -> dict:
        entity = await self._get_or_404(key)
        supplied = self._writable(document)
        values = {column: supplied.get(column) for column in self._mutable_columns}

        await self.validator.validate(
            self.definition.references,
            full_reference_candidate(self.definition.references, values),
        )
        members = await self._validate_relations(document)
        await self._check_unique(values, current=entity)

        await self.repository.update(entity, values)
        for relation in self.definition.relations:
            await self.reconciler.apply(entity.id, relation, members[relation.name])
        await self.db.commit()

        logger.info(
            f"Replaced {self.entity_name} {key}",
            extra={"entity_type": self.entity_name, "entity_key": key},
        )
        return self._snapshot(entity) | members

    async def patch(self, key: EntityKey, partial: Mapping[str, object]) -> dict:
        entity = await self._get_or_404(key)
        if not partial:
            return await self._state(entity)

        patch_values = self._writable(partial)
        current = self._snapshot(entity)
        merged = self._writable(merge_partial(current, patch_values))

        touched = {field: merged[field] for field in patch_values}
        await self.validator.validate(self.definition.references, touched)
        members = await self._validate_relations(partial, only_present=True)
        await self._check_unique(touched, current=entity)

        await self.repository.update(
            entity, {column: merged[column] for column in self._mutable_columns},
        )
        for name, keys in members.items():
            relation = self._relation(name)
            await self.reconciler.apply(entity.id, relation, keys)
        await self.db.commit()

        logger.info(
            f"Patched {self.entity_name} {key}: {changed_fields(current, merged)}",
            extra={"entity_type": self.entity_name, "entity_key": key},
        )
        return await self._state(entity)

    async def delete(self, key: EntityKey) -> dict:
        entity = await self._get_or_404(key)
        prior = await self._state(entity)

        # The owner's own join rows go with it; rows naming it from elsewhere stay.
        for relation in self.definition.relations:
            await self.reconciler.apply(entity.id, relation, [])
        await self.repository.delete(entity)
        await self.db.commit()

        logger.info(
            f"Deleted {self.entity_name} {key}",
            extra={"entity_type": self.entity_name, "entity_key": key},
        )
        return prior

    # ─── Helpers ─────────────────────────────────────────────────

    async def _get_or_404(self, key: EntityKey):
        entity = await self.repository.get(key)
        if entity is None:
            raise ResourceNotFoundError(self.entity_name, str(key))
        return entity

    def _writable(self, document: Mapping[str, object]) -> dict:
        """Column values the caller may set: no immutable, no relation keys."""
        return drop_fields(
            document, self.definition.immutable | self.definition.relation_names,
        )

    def _snapshot(self, entity) -> dict:
        return {column: getattr(entity, column) for column in self._columns}

    async def _state(self, entity) -> dict:
        state = self._snapshot(entity)
        for relation in self.definition.relations:
            state[relation.name] = await self.reconciler.current(entity.id, relation)
        return state

    async def _validate_relations(
        self, document: Mapping[str, object], only_present: bool = False,
    ) -> dict:
        """Validate set-valued relations of `document`.

        On create and replace every relation is reconciled (absent means empty);
        on patch only the relations the caller supplied.
        """
        members = {}
        for relation in self.definition.relations:
            if only_present and relation.name not in document:
                continue
            members[relation.name] = await self.reconciler.validate_members(
                relation, document.get(relation.name),
            )
        return members

    def _relation(self, name: str):
        return next(rel for rel in self.definition.relations if rel.name == name)

    async def _check_unique(self, values: Mapping[str, object], current=None) -> None:
        for field in self.definition.unique:
            value = values.get(field)
            if value is None:
                continue
            clashes = [
                e for e in await self.repository.find_by(field, value)
                if e is not current
            ]
            if clashes:
                raise DuplicateKeyError(self.entity_name, field, str(value))
