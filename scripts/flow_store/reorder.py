"""Priority reordering of a merged flows document."""

from __future__ import annotations

from typing import Any, Iterable


def _record_id(record: Any) -> Any:
    if isinstance(record, dict):
        return record.get("id")
    return None


def reorder(merged: list[Any], order_list: Iterable[str] | None) -> list[Any]:
    """Move the records named in ``order_list`` to the front.

    Each id claims the first record with that id that has not been claimed
    yet, so a repeated id never duplicates a record. Unknown ids are skipped.
    Everything left over follows in its original order.
    """
    order = list(order_list or [])
    if not order:
        return merged

    claimed: set[int] = set()
    ordered: list[Any] = []
    for wanted in order:
        for index, record in enumerate(merged):
            if index not in claimed and _record_id(record) == wanted:
                ordered.append(record)
                claimed.add(index)
                break

    remaining = [record for index, record in enumerate(merged) if index not in claimed]
    return ordered + remaining
