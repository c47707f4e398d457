import math

import pytest

from rangealgebra.bounds import (
    Bound,
    BoundKind,
    BoundOrdering,
    BoundSide,
    RangeContractError,
    compare_bounds,
    expect_bound,
    partial_compare,
    reverse_bound,
)

START = BoundSide.START
END = BoundSide.END


class TestPartialCompare:
    def test_total_order_values(self) -> None:
        assert partial_compare(1, 2) == BoundOrdering.LESS
        assert partial_compare(2, 1) == BoundOrdering.GREATER
        assert partial_compare(2, 2) == BoundOrdering.EQUAL

    def test_nan_is_unordered(self) -> None:
        assert partial_compare(math.nan, 1.0) is None
        assert partial_compare(1.0, math.nan) is None

    def test_subset_order_is_partial(self) -> None:
        assert partial_compare(frozenset({1}), frozenset({1, 2})) == (
            BoundOrdering.LESS
        )
        assert partial_compare(frozenset({1}), frozenset({2})) is None


class TestCompareBounds:
    @pytest.mark.parametrize(
        ("this_side", "other_side"),
        [(START, START), (START, END), (END, START), (END, END)],
    )
    def test_included_values_use_plain_ordering(
        self, this_side: BoundSide, other_side: BoundSide
    ) -> None:
        assert (
            compare_bounds(
                Bound.included(1), this_side, Bound.included(2), other_side
            )
            == BoundOrdering.LESS
        )
        assert (
            compare_bounds(
                Bound.included(3), this_side, Bound.included(3), other_side
            )
            == BoundOrdering.EQUAL
        )

    @pytest.mark.parametrize(
        ("this", "other", "this_side", "other_side", "expected"),
        [
            (Bound.included(5), Bound.excluded(5), START, START, "LESS"),
            (Bound.included(5), Bound.excluded(5), END, END, "GREATER"),
            (Bound.included(5), Bound.excluded(5), START, END, "IS_MET"),
            (Bound.included(5), Bound.excluded(5), END, START, "MEETS"),
            (Bound.excluded(5), Bound.included(5), START, START, "GREATER"),
            (Bound.excluded(5), Bound.included(5), END, END, "LESS"),
            (Bound.excluded(5), Bound.included(5), START, END, "IS_MET"),
            (Bound.excluded(5), Bound.included(5), END, START, "MEETS"),
            (Bound.excluded(5), Bound.excluded(5), START, START, "EQUAL"),
            (Bound.excluded(5), Bound.excluded(5), END, END, "EQUAL"),
            (Bound.excluded(5), Bound.excluded(5), START, END, "GREATER"),
            (Bound.excluded(5), Bound.excluded(5), END, START, "LESS"),
        ],
    )
    def test_equal_values_resolved_by_inclusivity_and_side(
        self,
        this: Bound,
        other: Bound,
        this_side: BoundSide,
        other_side: BoundSide,
        expected: str,
    ) -> None:
        assert compare_bounds(this, this_side, other, other_side) == (
            BoundOrdering[expected]
        )

    def test_distinct_values_ignore_inclusivity(self) -> None:
        assert (
            compare_bounds(Bound.excluded(1), END, Bound.included(2), START)
            == BoundOrdering.LESS
        )
        assert (
            compare_bounds(Bound.included(9), START, Bound.excluded(2), END)
            == BoundOrdering.GREATER
        )

    @pytest.mark.parametrize(
        "finite", [Bound.included(0), Bound.excluded(0)]
    )
    def test_unbounded_against_finite(self, finite: Bound) -> None:
        unbounded = Bound.unbounded()
        for finite_side in (START, END):
            assert compare_bounds(unbounded, START, finite, finite_side) == (
                BoundOrdering.LESS
            )
            assert compare_bounds(unbounded, END, finite, finite_side) == (
                BoundOrdering.GREATER
            )
            assert compare_bounds(finite, finite_side, unbounded, START) == (
                BoundOrdering.GREATER
            )
            assert compare_bounds(finite, finite_side, unbounded, END) == (
                BoundOrdering.LESS
            )

    def test_unbounded_against_unbounded(self) -> None:
        unbounded = Bound.unbounded()
        assert compare_bounds(unbounded, START, unbounded, START) == (
            BoundOrdering.EQUAL
        )
        assert compare_bounds(unbounded, END, unbounded, END) == (
            BoundOrdering.EQUAL
        )
        assert compare_bounds(unbounded, START, unbounded, END) == (
            BoundOrdering.LESS
        )
        assert compare_bounds(unbounded, END, unbounded, START) == (
            BoundOrdering.GREATER
        )

    def test_unordered_values_are_incomparable(self) -> None:
        assert (
            compare_bounds(
                Bound.included(math.nan), START, Bound.included(1.0), START
            )
            is None
        )
        assert (
            compare_bounds(
                Bound.excluded(frozenset({1})),
                END,
                Bound.excluded(frozenset({2})),
                START,
            )
            is None
        )

    def test_unbounded_never_needs_value_ordering(self) -> None:
        assert (
            compare_bounds(
                Bound.unbounded(), START, Bound.included(math.nan), START
            )
            == BoundOrdering.LESS
        )


class TestBoundHelpers:
    def test_reverse_bound_swaps_inclusivity(self) -> None:
        assert reverse_bound(Bound.included(4)) == Bound.excluded(4)
        assert reverse_bound(Bound.excluded(4)) == Bound.included(4)
        assert reverse_bound(Bound.unbounded()) == Bound.unbounded()

    def test_bound_kind_flags(self) -> None:
        bound = Bound.excluded("a")
        assert bound.kind == BoundKind.EXCLUDED
        assert bound.is_excluded
        assert not bound.is_included
        assert not bound.is_unbounded
        assert Bound.unbounded().is_unbounded

    def test_expect_bound_returns_finite_value(self) -> None:
        assert expect_bound(Bound.included(7), "needs a value") == 7
        assert expect_bound(Bound.excluded(8), "needs a value") == 8

    @pytest.mark.parametrize("bound", [None, Bound.unbounded()])
    def test_expect_bound_rejects_missing_or_unbounded(
        self, bound: Bound | None
    ) -> None:
        with pytest.raises(RangeContractError, match="needs a value"):
            expect_bound(bound, "needs a value")
