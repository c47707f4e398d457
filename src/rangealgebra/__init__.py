"""rangealgebra: continuous ranges, Allen relations and range simplification."""

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
from rangealgebra.continuous import ContinuousRange, RangeKind
from rangealgebra.relation import Ordering, RangesRelation
from rangealgebra.simplify import (
    remove_indices,
    simplified,
    simplify_ranges,
    swap_remove,
)

__all__ = [
    "Bound",
    "BoundKind",
    "BoundOrdering",
    "BoundSide",
    "ContinuousRange",
    "Ordering",
    "RangeContractError",
    "RangeKind",
    "RangesRelation",
    "compare_bounds",
    "expect_bound",
    "partial_compare",
    "remove_indices",
    "reverse_bound",
    "simplified",
    "simplify_ranges",
    "swap_remove",
]
