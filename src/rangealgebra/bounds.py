from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RangeContractError(RuntimeError):
    """Raised when an ordering or range invariant is broken."""

    def __init__(
        self, message: str, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.details = details or {}


class BoundKind(str, Enum):
    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


class BoundSide(str, Enum):
    START = "start"
    END = "end"


class BoundOrdering(int, Enum):
    """Result of comparing two bounds.

    ``MEETS`` and ``IS_MET`` are the "touching" variants of ``LESS`` and
    ``GREATER``: both bounds sit on the same value but exactly one of them
    admits it, one being a start and the other an end.
    """

    MEETS = -2
    LESS = -1
    EQUAL = 0
    GREATER = 1
    IS_MET = 2


@dataclass(frozen=True)
class Bound:
    kind: BoundKind
    value: Any = None

    @classmethod
    def included(cls, value: Any) -> Bound:
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: Any) -> Bound:
        return cls(BoundKind.EXCLUDED, value)

    @classmethod
    def unbounded(cls) -> Bound:
        return cls(BoundKind.UNBOUNDED)

    @property
    def is_included(self) -> bool:
        return self.kind == BoundKind.INCLUDED

    @property
    def is_excluded(self) -> bool:
        return self.kind == BoundKind.EXCLUDED

    @property
    def is_unbounded(self) -> bool:
        return self.kind == BoundKind.UNBOUNDED


def partial_compare(left: Any, right: Any) -> BoundOrdering | None:
    """Compare two values, returning ``None`` when they are unordered."""
    if left < right:
        return BoundOrdering.LESS
    if left > right:
        return BoundOrdering.GREATER
    if left == right:
        return BoundOrdering.EQUAL
    return None


# Outcome when both finite values are equal, keyed by
# (this kind, other kind, this side, other side).
_S = BoundSide.START
_E = BoundSide.END
_INC = BoundKind.INCLUDED
_EXC = BoundKind.EXCLUDED

_EQUAL_VALUE_TABLE: dict[
    tuple[BoundKind, BoundKind, BoundSide, BoundSide], BoundOrdering
] = {
    (_INC, _EXC, _S, _S): BoundOrdering.LESS,
    (_INC, _EXC, _E, _E): BoundOrdering.GREATER,
    (_INC, _EXC, _S, _E): BoundOrdering.IS_MET,
    (_INC, _EXC, _E, _S): BoundOrdering.MEETS,
    (_EXC, _INC, _S, _S): BoundOrdering.GREATER,
    (_EXC, _INC, _E, _E): BoundOrdering.LESS,
    (_EXC, _INC, _S, _E): BoundOrdering.IS_MET,
    (_EXC, _INC, _E, _S): BoundOrdering.MEETS,
    (_EXC, _EXC, _S, _S): BoundOrdering.EQUAL,
    (_EXC, _EXC, _E, _E): BoundOrdering.EQUAL,
    (_EXC, _EXC, _S, _E): BoundOrdering.GREATER,
    (_EXC, _EXC, _E, _S): BoundOrdering.LESS,
}


def _unbounded_ordering(side: BoundSide) -> BoundOrdering:
    # A start at -inf sorts first, an end at +inf sorts last.
    if side == BoundSide.START:
        return BoundOrdering.LESS
    return BoundOrdering.GREATER


def compare_bounds(
    this: Bound,
    this_side: BoundSide,
    other: Bound,
    other_side: BoundSide,
) -> BoundOrdering | None:
    """Compare two range bounds, taking the side each one stands for into
    account.

    Returns ``None`` only when the underlying values cannot be ordered.
    """
    if this.is_unbounded:
        if other.is_unbounded:
            if this_side == other_side:
                return BoundOrdering.EQUAL
            return _unbounded_ordering(this_side)
        return _unbounded_ordering(this_side)

    if other.is_unbounded:
        if other_side == BoundSide.START:
            return BoundOrdering.GREATER
        return BoundOrdering.LESS

    ordering = partial_compare(this.value, other.value)
    if ordering != BoundOrdering.EQUAL:
        return ordering
    if this.is_included and other.is_included:
        return BoundOrdering.EQUAL
    return _EQUAL_VALUE_TABLE[(this.kind, other.kind, this_side, other_side)]


def reverse_bound(bound: Bound) -> Bound:
    if bound.is_included:
        return Bound.excluded(bound.value)
    if bound.is_excluded:
        return Bound.included(bound.value)
    return bound


def expect_bound(bound: Bound | None, message: str) -> Any:
    """Return the finite value of ``bound``.

    Only called once a relation has established the bound is finite, so an
    absent or unbounded bound is a broken invariant.
    """
    if bound is None or bound.is_unbounded:
        raise RangeContractError(message, {"bound": bound})
    return bound.value
