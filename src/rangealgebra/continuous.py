from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from rangealgebra.bounds import (
    Bound,
    BoundKind,
    BoundOrdering,
    BoundSide,
    RangeContractError,
    compare_bounds,
    expect_bound,
    reverse_bound,
)
from rangealgebra.relation import RangesRelation

Idx = TypeVar("Idx")


class RangeKind(str, Enum):
    EMPTY = "empty"
    SINGLE = "single"
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"
    START_EXCLUSIVE = "start_exclusive"
    END_EXCLUSIVE = "end_exclusive"
    FROM = "from"
    FROM_EXCLUSIVE = "from_exclusive"
    TO = "to"
    TO_EXCLUSIVE = "to_exclusive"
    FULL = "full"


# (uses start, uses end) for each kind. SINGLE keeps its value in `start`.
_KIND_FIELDS: dict[RangeKind, tuple[bool, bool]] = {
    RangeKind.EMPTY: (False, False),
    RangeKind.SINGLE: (True, False),
    RangeKind.INCLUSIVE: (True, True),
    RangeKind.EXCLUSIVE: (True, True),
    RangeKind.START_EXCLUSIVE: (True, True),
    RangeKind.END_EXCLUSIVE: (True, True),
    RangeKind.FROM: (True, False),
    RangeKind.FROM_EXCLUSIVE: (True, False),
    RangeKind.TO: (False, True),
    RangeKind.TO_EXCLUSIVE: (False, True),
    RangeKind.FULL: (False, False),
}

_START_BOUND_KINDS: dict[RangeKind, BoundKind] = {
    RangeKind.SINGLE: BoundKind.INCLUDED,
    RangeKind.INCLUSIVE: BoundKind.INCLUDED,
    RangeKind.EXCLUSIVE: BoundKind.EXCLUDED,
    RangeKind.START_EXCLUSIVE: BoundKind.EXCLUDED,
    RangeKind.END_EXCLUSIVE: BoundKind.INCLUDED,
    RangeKind.FROM: BoundKind.INCLUDED,
    RangeKind.FROM_EXCLUSIVE: BoundKind.EXCLUDED,
    RangeKind.TO: BoundKind.UNBOUNDED,
    RangeKind.TO_EXCLUSIVE: BoundKind.UNBOUNDED,
    RangeKind.FULL: BoundKind.UNBOUNDED,
}

_END_BOUND_KINDS: dict[RangeKind, BoundKind] = {
    RangeKind.SINGLE: BoundKind.INCLUDED,
    RangeKind.INCLUSIVE: BoundKind.INCLUDED,
    RangeKind.EXCLUSIVE: BoundKind.EXCLUDED,
    RangeKind.START_EXCLUSIVE: BoundKind.INCLUDED,
    RangeKind.END_EXCLUSIVE: BoundKind.EXCLUDED,
    RangeKind.FROM: BoundKind.UNBOUNDED,
    RangeKind.FROM_EXCLUSIVE: BoundKind.UNBOUNDED,
    RangeKind.TO: BoundKind.INCLUDED,
    RangeKind.TO_EXCLUSIVE: BoundKind.EXCLUDED,
    RangeKind.FULL: BoundKind.UNBOUNDED,
}

_HALF_OPEN_KINDS = (
    RangeKind.EXCLUSIVE,
    RangeKind.START_EXCLUSIVE,
    RangeKind.END_EXCLUSIVE,
)

# (start vs start, end vs end) once both "strictly disjoint" and "touching"
# outcomes have been ruled out.
_CONTAINMENT_FAMILY: dict[
    tuple[BoundOrdering, BoundOrdering], RangesRelation
] = {
    (BoundOrdering.LESS, BoundOrdering.LESS): RangesRelation.OVERLAPS,
    (BoundOrdering.GREATER, BoundOrdering.GREATER): (
        RangesRelation.IS_OVERLAPPED
    ),
    (BoundOrdering.EQUAL, BoundOrdering.LESS): RangesRelation.STARTS,
    (BoundOrdering.EQUAL, BoundOrdering.GREATER): RangesRelation.IS_STARTED,
    (BoundOrdering.GREATER, BoundOrdering.EQUAL): RangesRelation.FINISHES,
    (BoundOrdering.LESS, BoundOrdering.EQUAL): RangesRelation.IS_FINISHED,
    (BoundOrdering.LESS, BoundOrdering.GREATER): (
        RangesRelation.STRICTLY_CONTAINS
    ),
    (BoundOrdering.GREATER, BoundOrdering.LESS): (
        RangesRelation.IS_STRICTLY_CONTAINED
    ),
    (BoundOrdering.EQUAL, BoundOrdering.EQUAL): RangesRelation.EQUAL,
}


class ContinuousRange(BaseModel, Generic[Idx]):
    """A range of ``Idx`` values without holes.

    Building one directly keeps the given shape as-is, e.g.
    ``ContinuousRange(kind=RangeKind.INCLUSIVE, start=4, end=2)``. The
    named constructors collapse degenerate shapes to ``SINGLE`` or
    ``EMPTY`` the same way :meth:`simplify` does.

    Textual form::

        []        empty           v         single
        [s..e]    inclusive       (s..e)    exclusive
        (s..e]    start_exclusive [s..e)    end_exclusive
        [s..)     from            (s..)     from_exclusive
        (..e]     to              (..e)     to_exclusive
        (..)      full
    """

    model_config = ConfigDict(frozen=True)

    kind: RangeKind
    start: Idx | None = None
    end: Idx | None = None

    @model_validator(mode="after")
    def validate_shape(self) -> ContinuousRange[Idx]:
        uses_start, uses_end = _KIND_FIELDS[self.kind]
        for field_name, used in (("start", uses_start), ("end", uses_end)):
            value = getattr(self, field_name)
            if used and value is None:
                raise ValueError(
                    f"{self.kind.value} range requires a {field_name} value"
                )
            if not used and value is not None:
                raise ValueError(
                    f"{self.kind.value} range does not take a "
                    f"{field_name} value"
                )
        return self

    @classmethod
    def empty(cls) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.EMPTY)

    @classmethod
    def single(cls, value: Idx) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.SINGLE, start=value)

    @classmethod
    def full(cls) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.FULL)

    @classmethod
    def inclusive(cls, start: Idx, end: Idx) -> ContinuousRange[Idx]:
        """``[start..end]``, or a single value / empty when degenerate."""
        return cls(kind=RangeKind.INCLUSIVE, start=start, end=end).simplify()

    @classmethod
    def exclusive(cls, start: Idx, end: Idx) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.EXCLUSIVE, start=start, end=end).simplify()

    @classmethod
    def start_exclusive(cls, start: Idx, end: Idx) -> ContinuousRange[Idx]:
        return cls(
            kind=RangeKind.START_EXCLUSIVE, start=start, end=end
        ).simplify()

    @classmethod
    def end_exclusive(cls, start: Idx, end: Idx) -> ContinuousRange[Idx]:
        return cls(
            kind=RangeKind.END_EXCLUSIVE, start=start, end=end
        ).simplify()

    @classmethod
    def starting_from(cls, start: Idx) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.FROM, start=start)

    @classmethod
    def starting_after(cls, start: Idx) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.FROM_EXCLUSIVE, start=start)

    @classmethod
    def ending_at(cls, end: Idx) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.TO, end=end)

    @classmethod
    def ending_before(cls, end: Idx) -> ContinuousRange[Idx]:
        return cls(kind=RangeKind.TO_EXCLUSIVE, end=end)

    @classmethod
    def from_bounds(cls, start: Bound, end: Bound) -> ContinuousRange[Idx]:
        if start.is_unbounded:
            if end.is_unbounded:
                return cls.full()
            if end.is_included:
                return cls.ending_at(end.value)
            return cls.ending_before(end.value)

        if start.is_included:
            if end.is_included:
                return cls.inclusive(start.value, end.value)
            if end.is_excluded:
                return cls.end_exclusive(start.value, end.value)
            return cls.starting_from(start.value)

        if end.is_included:
            return cls.start_exclusive(start.value, end.value)
        if end.is_excluded:
            return cls.exclusive(start.value, end.value)
        return cls.starting_after(start.value)

    @classmethod
    def from_native(cls, value: Any) -> ContinuousRange[Any]:
        """Build a range from a Python range literal.

        ``()`` is empty, ``range(a, b)`` and ``slice(a, b)`` are
        ``[a..b)``, and a slice may leave either side open.
        """
        if isinstance(value, ContinuousRange):
            return value
        if isinstance(value, tuple) and not value:
            return cls.empty()
        if isinstance(value, range):
            if value.step != 1:
                raise ValueError(
                    f"range step must be 1 to form a continuous range, "
                    f"got {value.step}"
                )
            return cls.end_exclusive(value.start, value.stop)
        if isinstance(value, slice):
            if value.step is not None:
                raise ValueError(
                    "slice step is not supported for continuous ranges"
                )
            if value.start is None and value.stop is None:
                return cls.full()
            if value.stop is None:
                return cls.starting_from(value.start)
            if value.start is None:
                return cls.ending_before(value.stop)
            return cls.end_exclusive(value.start, value.stop)
        raise TypeError(
            f"Cannot build a continuous range from {type(value).__name__}"
        )

    def start_bound(self) -> Bound | None:
        if self.kind == RangeKind.EMPTY:
            return None
        bound_kind = _START_BOUND_KINDS[self.kind]
        if bound_kind == BoundKind.UNBOUNDED:
            return Bound.unbounded()
        return Bound(bound_kind, self.start)

    def end_bound(self) -> Bound | None:
        if self.kind == RangeKind.EMPTY:
            return None
        bound_kind = _END_BOUND_KINDS[self.kind]
        if bound_kind == BoundKind.UNBOUNDED:
            return Bound.unbounded()
        value = self.start if self.kind == RangeKind.SINGLE else self.end
        return Bound(bound_kind, value)

    def range_bounds(self) -> tuple[Bound, Bound] | None:
        """Start and end bounds, or ``None`` for an empty range."""
        start = self.start_bound()
        end = self.end_bound()
        if start is None or end is None:
            return None
        return start, end

    def _expect_range_bounds(self, message: str) -> tuple[Bound, Bound]:
        bounds = self.range_bounds()
        if bounds is None:
            raise RangeContractError(message, {"range": self})
        return bounds

    def contains(self, value: Any) -> bool:
        if self.kind == RangeKind.EMPTY:
            return False
        if self.kind == RangeKind.FULL:
            return True
        if self.kind == RangeKind.SINGLE:
            return self.start == value

        start, end = self._expect_range_bounds("Non-empty range has bounds")
        if start.is_included and not value >= start.value:
            return False
        if start.is_excluded and not value > start.value:
            return False
        if end.is_included and not value <= end.value:
            return False
        if end.is_excluded and not value < end.value:
            return False
        return True

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def is_empty(self) -> bool:
        """True for ``EMPTY`` and for bounded shapes with inverted bounds."""
        if self.kind == RangeKind.EMPTY:
            return True
        if self.kind == RangeKind.INCLUSIVE:
            return self.start > self.end
        if self.kind in _HALF_OPEN_KINDS:
            return self.start >= self.end
        return False

    def is_full(self) -> bool:
        return self.kind == RangeKind.FULL

    def simplify(self) -> ContinuousRange[Idx]:
        """Collapse degenerate bounded shapes to ``SINGLE`` or ``EMPTY``."""
        if self.kind == RangeKind.INCLUSIVE:
            if self.start == self.end:
                return type(self).single(self.start)
            if self.start > self.end:
                return type(self).empty()
        elif self.kind in _HALF_OPEN_KINDS and self.start >= self.end:
            return type(self).empty()
        return self

    def compare(self, other: ContinuousRange[Idx]) -> RangesRelation | None:
        """Classify how this range relates to ``other``.

        Returns ``None`` when exactly one side is empty or when the bound
        values cannot be ordered. Raises :class:`RangeContractError` when the
        bound comparisons are mutually inconsistent, which only happens if
        ``Idx`` ordering is not a valid order.
        """
        if self.is_empty():
            return RangesRelation.EQUAL if other.is_empty() else None
        if other.is_empty():
            return None

        self_start, self_end = self._expect_range_bounds(
            "Non-empty self should have bounds"
        )
        other_start, other_end = other._expect_range_bounds(
            "Non-empty other should have bounds"
        )

        end_vs_start = compare_bounds(
            self_end, BoundSide.END, other_start, BoundSide.START
        )
        if end_vs_start is None:
            return None
        if end_vs_start == BoundOrdering.LESS:
            return RangesRelation.STRICTLY_BEFORE
        if end_vs_start == BoundOrdering.MEETS:
            return RangesRelation.MEETS

        start_vs_end = compare_bounds(
            self_start, BoundSide.START, other_end, BoundSide.END
        )
        if start_vs_end is None:
            return None
        if start_vs_end == BoundOrdering.GREATER:
            return RangesRelation.STRICTLY_AFTER
        if start_vs_end == BoundOrdering.IS_MET:
            return RangesRelation.IS_MET

        start_vs_start = compare_bounds(
            self_start, BoundSide.START, other_start, BoundSide.START
        )
        end_vs_end = compare_bounds(
            self_end, BoundSide.END, other_end, BoundSide.END
        )
        if start_vs_start is None or end_vs_end is None:
            return None

        relation = _CONTAINMENT_FAMILY.get((start_vs_start, end_vs_end))
        if relation is None:
            raise RangeContractError(
                "Ordering contract isn't correctly implemented: no relation "
                f"found between {self!r} and {other!r} "
                f"(self.end vs other.start = {end_vs_start.name}, "
                f"self.start vs other.end = {start_vs_end.name}, "
                f"self.start vs other.start = {start_vs_start.name}, "
                f"self.end vs other.end = {end_vs_end.name})",
                {
                    "self": self,
                    "other": other,
                    "end_vs_start": end_vs_start,
                    "start_vs_end": start_vs_end,
                    "start_vs_start": start_vs_start,
                    "end_vs_end": end_vs_end,
                },
            )
        return relation

    def contains_range(self, other: ContinuousRange[Idx]) -> bool:
        relation = self.compare(other)
        return relation is not None and relation.contains()

    def intersects(self, other: ContinuousRange[Idx]) -> bool:
        # Two empty ranges compare EQUAL but share nothing.
        if self.is_empty() and other.is_empty():
            return False
        relation = self.compare(other)
        return relation is not None and relation.intersects()

    def disjoint_from_range(self, other: ContinuousRange[Idx]) -> bool:
        """True unless ``compare`` finds a non-disjoint relation.

        Two empty ranges compare ``EQUAL`` and so are not disjoint, even
        though :meth:`intersects` is false for them.
        """
        relation = self.compare(other)
        return relation is None or relation.disjoint()

    def union_with_relation(
        self,
        other: ContinuousRange[Idx],
        relation: RangesRelation,
    ) -> ContinuousRange[Idx] | None:
        """Union for a ``relation`` already computed by :meth:`compare`."""
        if relation.disjoint():
            return None
        if relation in (RangesRelation.MEETS, RangesRelation.OVERLAPS):
            start, _ = self._expect_range_bounds("Self meets without bounds")
            _, end = other._expect_range_bounds("Other meets without bounds")
            return type(self).from_bounds(start, end)
        if relation in (RangesRelation.IS_MET, RangesRelation.IS_OVERLAPPED):
            start, _ = other._expect_range_bounds("Other meets without bounds")
            _, end = self._expect_range_bounds("Self meets without bounds")
            return type(self).from_bounds(start, end)
        if relation.contains():
            return self
        return other

    def union(
        self, other: ContinuousRange[Idx]
    ) -> ContinuousRange[Idx] | None:
        """Smallest range covering both, or ``None`` if there is a gap."""
        if self.is_full() or other.is_full():
            return type(self).full()
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        relation = self.compare(other)
        if relation is None:
            return None
        return self.union_with_relation(other, relation)

    def intersection(self, other: ContinuousRange[Idx]) -> ContinuousRange[Idx]:
        if self.is_empty() or other.is_empty():
            return type(self).empty()
        if self.is_full():
            return other
        if other.is_full():
            return self

        relation = self.compare(other)
        if relation is None or relation.disjoint():
            return type(self).empty()
        if relation == RangesRelation.MEETS:
            value = expect_bound(
                self.end_bound(), "Self meets without end bound"
            )
            return type(self).single(value)
        if relation == RangesRelation.IS_MET:
            value = expect_bound(
                self.start_bound(), "Self is met without start bound"
            )
            return type(self).single(value)
        if relation == RangesRelation.OVERLAPS:
            _, end = self._expect_range_bounds("Self overlaps without bounds")
            start, _ = other._expect_range_bounds(
                "Other is overlapped without bounds"
            )
            return type(self).from_bounds(start, end)
        if relation == RangesRelation.IS_OVERLAPPED:
            start, _ = self._expect_range_bounds(
                "Self is overlapped without bounds"
            )
            _, end = other._expect_range_bounds("Other overlaps without bounds")
            return type(self).from_bounds(start, end)
        if relation.contains():
            return other
        return self

    def difference(
        self, other: ContinuousRange[Idx]
    ) -> ContinuousRange[Idx] | None:
        """Values of this range that are not in ``other``.

        Returns ``None`` when ``other`` lies strictly inside this range,
        since the remainder would be two separate pieces, and when the
        ranges cannot be compared.
        """
        if self.is_empty():
            return type(self).empty()
        if other.is_empty():
            return self

        relation = self.compare(other)
        if relation is None:
            return None
        if relation.disjoint():
            return self
        if relation == RangesRelation.STRICTLY_CONTAINS:
            return None
        if relation in (
            RangesRelation.MEETS,
            RangesRelation.OVERLAPS,
            RangesRelation.IS_FINISHED,
        ):
            start, _ = self._expect_range_bounds("Self without bounds")
            cut, _ = other._expect_range_bounds("Other without bounds")
            return type(self).from_bounds(start, reverse_bound(cut))
        if relation in (
            RangesRelation.IS_MET,
            RangesRelation.IS_OVERLAPPED,
            RangesRelation.IS_STARTED,
        ):
            _, end = self._expect_range_bounds("Self without bounds")
            _, cut = other._expect_range_bounds("Other without bounds")
            return type(self).from_bounds(reverse_bound(cut), end)
        # EQUAL, STARTS, FINISHES, IS_STRICTLY_CONTAINED
        return type(self).empty()

    def _render(self, fmt: Callable[[Any], str]) -> str:
        if self.kind == RangeKind.EMPTY:
            return "[]"
        if self.kind == RangeKind.SINGLE:
            return fmt(self.start)
        start, end = self._expect_range_bounds("Non-empty range has bounds")
        opening = "[" if start.is_included else "("
        closing = "]" if end.is_included else ")"
        start_text = "" if start.is_unbounded else fmt(start.value)
        end_text = "" if end.is_unbounded else fmt(end.value)
        return f"{opening}{start_text}..{end_text}{closing}"

    def __str__(self) -> str:
        return self._render(str)

    def __repr__(self) -> str:
        return self._render(repr)
