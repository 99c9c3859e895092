"""
Sibling ordering.

Lists within a board and cards within a list carry an integer sort_order.
Order is relative, not contiguous: gaps left by deletions are never closed
and duplicate values (from concurrent appends) are tie-broken by
(created_at, id) when reading.
"""

from typing import Dict, Hashable, List, Optional, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)


def next_sort_order(current_max: Optional[int]) -> int:
    """Order value that places a new item after every existing sibling."""
    if current_max is None:
        return 0
    return current_max + 1


def first_sort_order(current_min: Optional[int]) -> int:
    """
    Order value that places an item before every existing sibling.

    0 while that is strictly below the current first item, otherwise one
    below it. Values may go negative.
    """
    if current_min is None or current_min > 0:
        return 0
    return current_min - 1


def reorder_sequence(item_id: K, new_index: int, sibling_ids: Sequence[K]) -> List[K]:
    """
    Move ``item_id`` to ``new_index`` within the caller-observed sequence.

    ``new_index`` is clamped into the valid range. Raises ValueError when the
    item is not part of the sequence or the sequence has duplicates.
    """
    if len(set(sibling_ids)) != len(sibling_ids):
        raise ValueError("sibling sequence contains duplicate ids")
    if item_id not in sibling_ids:
        raise ValueError("item is not part of the sibling sequence")

    remaining = [sibling for sibling in sibling_ids if sibling != item_id]
    index = max(0, min(new_index, len(remaining)))
    remaining.insert(index, item_id)
    return remaining


def assign_positions(sequence: Sequence[K]) -> Dict[K, int]:
    """Position-derived order values: strictly increasing, no ties."""
    return {item: position for position, item in enumerate(sequence)}
