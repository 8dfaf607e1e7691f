"""Partial Merge — computes entity state from a base state and a sparse update.

Invariants:
    - merge_partial is PURE: never mutates base or patch
    - Keys present in patch overwrite (explicit None included); absent keys keep base
    - Empty patch yields a copy equal to base (valid no-op, never an error)
    - The merge knows nothing about which fields are references

Design Decisions:
    - Plain dicts over ORM objects: the shell applies the result only after
      the reference validator has passed, so a failed patch never touches
      the tracked ORM instance (ADR: no partial writes)
"""

from collections.abc import Iterable, Mapping


def merge_partial(base: Mapping[str, object], patch: Mapping[str, object]) -> dict:
    """Overlay `patch` onto `base`, present keys only."""
    merged = dict(base)
    merged.update(patch)
    return merged


def drop_fields(document: Mapping[str, object], fields: Iterable[str]) -> dict:
    """Copy of `document` without `fields` (immutable or relation keys)."""
    excluded = set(fields)
    return {k: v for k, v in document.items() if k not in excluded}


def changed_fields(base: Mapping[str, object], merged: Mapping[str, object]) -> list[str]:
    """Keys whose value differs between base and merged, for logging."""
    return [k for k, v in merged.items() if base.get(k) != v]
