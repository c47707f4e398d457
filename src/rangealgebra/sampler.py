import random
from typing import Any

from pydantic import BaseModel, Field, model_validator

from rangealgebra.continuous import ContinuousRange, RangeKind

_VALUED_KINDS: tuple[RangeKind, ...] = (
    RangeKind.SINGLE,
    RangeKind.FROM,
    RangeKind.FROM_EXCLUSIVE,
    RangeKind.TO,
    RangeKind.TO_EXCLUSIVE,
    RangeKind.INCLUSIVE,
    RangeKind.EXCLUSIVE,
    RangeKind.START_EXCLUSIVE,
    RangeKind.END_EXCLUSIVE,
)


def _validate_no_bool_value_range(data: Any) -> None:
    if not isinstance(data, dict):
        return

    value = data.get("value_range")
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return
    low, high = value
    if isinstance(low, bool) or isinstance(high, bool):
        raise ValueError("value_range: bool is not allowed for range bounds")


class RangeSamplerAxes(BaseModel):
    value_range: tuple[int, int] = Field(default=(-100, 100))
    empty_weight: int = Field(default=1, ge=0)
    non_empty_weight: int = Field(default=10, ge=0)
    full_weight: int = Field(default=1, ge=0)
    valued_weight: int = Field(default=9, ge=0)
    kinds: list[RangeKind] = Field(
        default_factory=lambda: list(_VALUED_KINDS)
    )

    @model_validator(mode="before")
    @classmethod
    def validate_input_axes(cls, data: Any) -> Any:
        _validate_no_bool_value_range(data)
        return data

    @model_validator(mode="after")
    def validate_axes(self) -> "RangeSamplerAxes":
        lo, hi = self.value_range
        if lo > hi:
            raise ValueError(f"value_range: low ({lo}) must be <= high ({hi})")

        if self.empty_weight + self.non_empty_weight == 0:
            raise ValueError(
                "empty_weight and non_empty_weight must not both be 0"
            )
        if self.full_weight + self.valued_weight == 0:
            raise ValueError("full_weight and valued_weight must not both be 0")

        if not self.kinds:
            raise ValueError("kinds must not be empty")
        for kind in self.kinds:
            if kind not in _VALUED_KINDS:
                raise ValueError(
                    f"kinds: {kind.value} does not carry a value"
                )

        return self


def sample_value(
    axes: RangeSamplerAxes,
    rng: random.Random | None = None,
) -> int:
    if rng is None:
        rng = random.Random()
    return rng.randint(axes.value_range[0], axes.value_range[1])


def sample_range_with_value(
    axes: RangeSamplerAxes,
    rng: random.Random | None = None,
) -> ContinuousRange[int]:
    """Sample one of the value-carrying shapes, without normalizing it.

    Two-value shapes may come out inverted or degenerate.
    """
    if rng is None:
        rng = random.Random()

    kind = rng.choice(axes.kinds)
    if kind in (RangeKind.SINGLE, RangeKind.FROM, RangeKind.FROM_EXCLUSIVE):
        return ContinuousRange(kind=kind, start=sample_value(axes, rng))
    if kind in (RangeKind.TO, RangeKind.TO_EXCLUSIVE):
        return ContinuousRange(kind=kind, end=sample_value(axes, rng))
    start = sample_value(axes, rng)
    end = sample_value(axes, rng)
    return ContinuousRange(kind=kind, start=start, end=end)


def sample_range(
    axes: RangeSamplerAxes,
    rng: random.Random | None = None,
    allow_empty: bool = True,
) -> ContinuousRange[int]:
    if rng is None:
        rng = random.Random()

    if allow_empty:
        total = axes.empty_weight + axes.non_empty_weight
        if rng.randrange(total) < axes.empty_weight:
            return ContinuousRange.empty()

    total = axes.full_weight + axes.valued_weight
    if rng.randrange(total) < axes.full_weight:
        return ContinuousRange.full()
    return sample_range_with_value(axes, rng)


def sample_ranges(
    axes: RangeSamplerAxes,
    rng: random.Random | None = None,
    count: int = 5,
    allow_empty: bool = True,
) -> list[ContinuousRange[int]]:
    if rng is None:
        rng = random.Random()
    return [
        sample_range(axes, rng, allow_empty=allow_empty) for _ in range(count)
    ]
