"""Reduce a list of continuous ranges to its canonical form.

After :func:`simplify_ranges` the list:

- holds only simplified ranges, none of them empty
- has no two ranges that overlap
- has no two ranges that could be joined, i.e. where the end of one is the
  start of the next and at most one of the two bounds is exclusive
- is sorted by start bound
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence
from functools import cmp_to_key
from typing import Any, TypeVar

from rangealgebra.bounds import RangeContractError
from rangealgebra.continuous import ContinuousRange, RangeKind
from rangealgebra.relation import RangesRelation

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MERGEABLE = (
    RangesRelation.MEETS,
    RangesRelation.IS_MET,
    RangesRelation.OVERLAPS,
    RangesRelation.IS_OVERLAPPED,
)
_READ_COVERS_WRITE = (
    RangesRelation.STARTS,
    RangesRelation.IS_STRICTLY_CONTAINED,
    RangesRelation.FINISHES,
)


def swap_remove(items: MutableSequence[T], index: int) -> T:
    """Remove ``items[index]`` by moving the last element into its slot."""
    removed = items[index]
    last = items.pop()
    if index < len(items):
        items[index] = last
    return removed


def remove_indices(items: MutableSequence[T], indices: Iterable[int]) -> None:
    """Swap-remove every position in ``indices``.

    Positions are processed from highest to lowest. Going upwards would let
    an earlier swap move a pending element to a position that is already
    done, deleting the wrong elements.
    """
    for index in sorted(set(indices), reverse=True):
        swap_remove(items, index)


def _compare_for_sort(
    left: ContinuousRange[Any], right: ContinuousRange[Any]
) -> int:
    relation = left.compare(right)
    if relation is None:
        raise RangeContractError(
            f"Cannot order {left!r} against {right!r} while sorting",
            {"left": left, "right": right},
        )
    return relation.start_ordering().value


def simplify_ranges(ranges: MutableSequence[ContinuousRange[Any]]) -> None:
    """Simplify ``ranges`` in place.

    The caller must own ``ranges`` for the duration of the call. Raises
    :class:`RangeContractError` when two ranges cannot be ordered.
    """
    if not ranges:
        return

    input_count = len(ranges)
    empty_indices: list[int] = []
    for index, current in enumerate(ranges):
        simplified_range = current.simplify()
        if simplified_range.kind == RangeKind.EMPTY:
            empty_indices.append(index)
        elif simplified_range.is_full():
            logger.debug(
                "Full range at index %d absorbs %d ranges", index, input_count
            )
            ranges[:] = [simplified_range]
            return
        ranges[index] = simplified_range

    remove_indices(ranges, empty_indices)
    if empty_indices:
        logger.debug("Dropped %d empty ranges", len(empty_indices))

    ranges[:] = sorted(ranges, key=cmp_to_key(_compare_for_sort))

    write_index = 0
    read_index = 1
    while read_index < len(ranges):
        write = ranges[write_index]
        read = ranges[read_index]
        relation = write.compare(read)
        if relation is None:
            raise RangeContractError(
                f"Cannot compare {write!r} with {read!r} while merging",
                {"write": write, "read": read},
            )

        if relation == RangesRelation.STRICTLY_BEFORE:
            write_index += 1
            ranges[write_index], ranges[read_index] = read, ranges[write_index]
        elif relation == RangesRelation.STRICTLY_AFTER:
            raise RangeContractError(
                f"Unexpected range order after sort: {write!r} is strictly "
                f"after {read!r}",
                {"write": write, "read": read},
            )
        elif relation in _MERGEABLE:
            merged = write.union_with_relation(read, relation)
            if merged is None:
                raise RangeContractError(
                    f"Union of {write!r} and {read!r} failed for "
                    f"{relation.value}",
                    {"write": write, "read": read, "relation": relation},
                )
            ranges[write_index] = merged
        elif relation in _READ_COVERS_WRITE:
            ranges[write_index], ranges[read_index] = read, write
        # Otherwise the write range already covers the read one, which is
        # left behind for the final truncation.
        read_index += 1

    del ranges[write_index + 1 :]
    logger.debug("Simplified %d ranges into %d", input_count, len(ranges))


def simplified(
    ranges: Iterable[ContinuousRange[Any]],
) -> list[ContinuousRange[Any]]:
    """Return the canonical form of ``ranges`` without mutating them."""
    result = list(ranges)
    simplify_ranges(result)
    return result
