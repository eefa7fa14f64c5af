"""Reordering of order_index sequences (content blocks, images, videos)

Two operations with different contracts live here and must not be merged:

* ``resequence`` moves one item and renumbers the whole sequence 0..N-1.
* ``swap_with_neighbor`` exchanges the order_index of two adjacent items
  and leaves every other row untouched.
"""

import logging
from typing import Any, List, NamedTuple, Sequence, Type

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.services.exceptions import OrderingError, OrderPersistenceError

logger = logging.getLogger(__name__)

DIRECTIONS = ("previous", "next")


class OrderAssignment(NamedTuple):
    """New order_index for one row"""
    id: Any
    order_index: int


def _check_index(index: int, length: int, name: str) -> None:
    if not 0 <= index < length:
        raise OrderingError(f"{name} {index} is out of range for {length} items")


def resequence(items: Sequence[Any], from_index: int, to_index: int) -> List[OrderAssignment]:
    """
    Move the item at from_index to to_index and renumber every item.

    Args:
        items: Current sequence, already in display order
        from_index: Position of the item being moved
        to_index: Target position

    Returns:
        One assignment per item, order_index matching its new position

    Raises:
        OrderingError: If either index is out of range
    """
    _check_index(from_index, len(items), "from_index")
    _check_index(to_index, len(items), "to_index")

    moved = list(items)
    item = moved.pop(from_index)
    moved.insert(to_index, item)

    return resequence_all(moved)


def resequence_all(items: Sequence[Any]) -> List[OrderAssignment]:
    """Renumber a sequence as-is to contiguous zero-based positions"""
    return [OrderAssignment(item.id, position) for position, item in enumerate(items)]


def swap_with_neighbor(items: Sequence[Any], index: int, direction: str) -> List[OrderAssignment]:
    """
    Exchange the order_index of the item at index with its immediate neighbor.

    Args:
        items: Current sequence, already in display order
        index: Position of the item being nudged
        direction: "previous" or "next"

    Returns:
        Exactly two assignments, or an empty list when the item is already
        at the requested end of the sequence

    Raises:
        OrderingError: If index is out of range or direction is unknown
    """
    if direction not in DIRECTIONS:
        raise OrderingError(f"direction must be one of {DIRECTIONS}, got '{direction}'")
    _check_index(index, len(items), "index")

    neighbor_index = index - 1 if direction == "previous" else index + 1
    if not 0 <= neighbor_index < len(items):
        return []

    item = items[index]
    neighbor = items[neighbor_index]
    return [
        OrderAssignment(item.id, neighbor.order_index),
        OrderAssignment(neighbor.id, item.order_index),
    ]


def index_of(items: Sequence[Any], item_id: Any) -> int:
    """Position of the row with item_id in items"""
    for position, item in enumerate(items):
        if item.id == item_id:
            return position
    raise OrderingError(f"Item {item_id} is not part of this sequence")


async def apply_order_assignments(
    db: AsyncSession,
    model: Type[Any],
    assignments: Sequence[OrderAssignment],
) -> int:
    """
    Write order_index values back, one independent commit per row.

    Every assignment is attempted even after a failure. Rows already
    committed stay committed; the caller can repair the partition later
    with ``resequence_all``.

    Returns:
        Number of rows updated

    Raises:
        OrderPersistenceError: If any row failed to update
    """
    failed_ids = []

    for assignment in assignments:
        try:
            result = await db.execute(
                update(model)
                .where(model.id == assignment.id)
                .values(order_index=assignment.order_index)
            )
            if result.rowcount == 0:
                raise LookupError(f"{model.__tablename__} row {assignment.id} not found")
            await db.commit()
        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to update order_index for {assignment.id}: {e}")
            failed_ids.append(assignment.id)

    if failed_ids:
        raise OrderPersistenceError(failed_ids, len(assignments))

    logger.info(f"Updated order_index for {len(assignments)} {model.__tablename__} rows")
    return len(assignments)
