from dataclasses import fields, replace
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, TypeVar

E = TypeVar("E")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def merge_update(
    existing: E,
    payload: Mapping[str, Any],
    now: datetime,
    preserved: Iterable[str] = ("id", "created_at"),
) -> E:
    """
    Build the updated version of a stored record.

    Every field not listed in `preserved` takes the payload's value. A None
    in the payload, or a key missing from it, clears the field: the payload
    replaces the record, it is not a sparse patch. Preserved fields are copied
    from `existing`, updated_at is set to `now` and keys of the payload that
    are not fields of the record are ignored.

    Args:
        existing: Record as currently stored
        payload: Field values decoded from the update request
        now: Timestamp written to updated_at
        preserved: Fields carried over from `existing`

    Returns:
        A new record; `existing` is not modified
    """
    kept = set(preserved) | {"updated_at"}
    changes = {
        f.name: payload.get(f.name)
        for f in fields(existing)
        if f.name not in kept
    }
    return replace(existing, updated_at=now, **changes)
