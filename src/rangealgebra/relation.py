from __future__ import annotations

from enum import Enum


class Ordering(int, Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


class RangesRelation(str, Enum):
    """How two continuous ranges ``A`` and ``B`` relate to each other.

    Based on Allen's interval algebra::

        STRICTLY_BEFORE        [ A ]
                                     [ B ]
        MEETS                  [ A )
                                   [ B ]
        OVERLAPS               [ A ]
                                 [ B ]
        STARTS                 [ A ]
                               [   B   ]
        STRICTLY_CONTAINS      [   A   ]
                                 [ B ]
        FINISHES                   [ A ]
                               [   B   ]
        EQUAL                  [ A ]
                               [ B ]

    Every ``IS_*`` member and ``STRICTLY_AFTER`` is the converse of its
    counterpart above, with ``A`` and ``B`` swapped.
    """

    STRICTLY_BEFORE = "strictly_before"
    STRICTLY_AFTER = "strictly_after"
    MEETS = "meets"
    IS_MET = "is_met"
    OVERLAPS = "overlaps"
    IS_OVERLAPPED = "is_overlapped"
    STARTS = "starts"
    IS_STARTED = "is_started"
    STRICTLY_CONTAINS = "strictly_contains"
    IS_STRICTLY_CONTAINED = "is_strictly_contained"
    FINISHES = "finishes"
    IS_FINISHED = "is_finished"
    EQUAL = "equal"

    def intersects(self) -> bool:
        """True for every relation except the two strictly disjoint ones.

        Ranges that only meet count as intersecting.
        """
        return self not in (
            RangesRelation.STRICTLY_BEFORE,
            RangesRelation.STRICTLY_AFTER,
        )

    def disjoint(self) -> bool:
        return not self.intersects()

    def contains(self) -> bool:
        """True when ``A`` contains ``B``."""
        return self in (
            RangesRelation.EQUAL,
            RangesRelation.STRICTLY_CONTAINS,
            RangesRelation.IS_FINISHED,
            RangesRelation.IS_STARTED,
        )

    def inverse(self) -> RangesRelation:
        return _INVERSES[self]

    def start_ordering(self) -> Ordering:
        """Ordering of ``A``'s start bound against ``B``'s."""
        return _START_ORDERINGS[self]

    def end_ordering(self) -> Ordering:
        """Ordering of ``A``'s end bound against ``B``'s."""
        return _END_ORDERINGS[self]


_INVERSES: dict[RangesRelation, RangesRelation] = {
    RangesRelation.STRICTLY_BEFORE: RangesRelation.STRICTLY_AFTER,
    RangesRelation.STRICTLY_AFTER: RangesRelation.STRICTLY_BEFORE,
    RangesRelation.MEETS: RangesRelation.IS_MET,
    RangesRelation.IS_MET: RangesRelation.MEETS,
    RangesRelation.OVERLAPS: RangesRelation.IS_OVERLAPPED,
    RangesRelation.IS_OVERLAPPED: RangesRelation.OVERLAPS,
    RangesRelation.STARTS: RangesRelation.IS_STARTED,
    RangesRelation.IS_STARTED: RangesRelation.STARTS,
    RangesRelation.STRICTLY_CONTAINS: RangesRelation.IS_STRICTLY_CONTAINED,
    RangesRelation.IS_STRICTLY_CONTAINED: RangesRelation.STRICTLY_CONTAINS,
    RangesRelation.FINISHES: RangesRelation.IS_FINISHED,
    RangesRelation.IS_FINISHED: RangesRelation.FINISHES,
    RangesRelation.EQUAL: RangesRelation.EQUAL,
}

_START_ORDERINGS: dict[RangesRelation, Ordering] = {
    RangesRelation.STRICTLY_BEFORE: Ordering.LESS,
    RangesRelation.STRICTLY_AFTER: Ordering.GREATER,
    RangesRelation.MEETS: Ordering.LESS,
    RangesRelation.IS_MET: Ordering.GREATER,
    RangesRelation.OVERLAPS: Ordering.LESS,
    RangesRelation.IS_OVERLAPPED: Ordering.GREATER,
    RangesRelation.STARTS: Ordering.EQUAL,
    RangesRelation.IS_STARTED: Ordering.EQUAL,
    RangesRelation.STRICTLY_CONTAINS: Ordering.LESS,
    RangesRelation.IS_STRICTLY_CONTAINED: Ordering.GREATER,
    RangesRelation.FINISHES: Ordering.GREATER,
    RangesRelation.IS_FINISHED: Ordering.LESS,
    RangesRelation.EQUAL: Ordering.EQUAL,
}

_END_ORDERINGS: dict[RangesRelation, Ordering] = {
    RangesRelation.STRICTLY_BEFORE: Ordering.LESS,
    RangesRelation.STRICTLY_AFTER: Ordering.GREATER,
    RangesRelation.MEETS: Ordering.LESS,
    RangesRelation.IS_MET: Ordering.GREATER,
    RangesRelation.OVERLAPS: Ordering.LESS,
    RangesRelation.IS_OVERLAPPED: Ordering.GREATER,
    RangesRelation.STARTS: Ordering.LESS,
    RangesRelation.IS_STARTED: Ordering.GREATER,
    RangesRelation.STRICTLY_CONTAINS: Ordering.GREATER,
    RangesRelation.IS_STRICTLY_CONTAINED: Ordering.LESS,
    RangesRelation.FINISHES: Ordering.EQUAL,
    RangesRelation.IS_FINISHED: Ordering.EQUAL,
    RangesRelation.EQUAL: Ordering.EQUAL,
}
