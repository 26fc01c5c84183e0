"""
Inventory planning calculations.

Pure, stateless formulas for days of inventory, stock classification,
replenishment quantities, pallet counts, sales smoothing and growth.
They run inline in render and planning paths, so division-by-zero cases map
to a defined result (usually 0) instead of raising. Pass ``strict=True`` to
have out-of-contract inputs rejected with ``InvalidArgumentError``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, overload

from models.enums import InventoryStatus
from models.validation import (
    DemandInput,
    GrowthInput,
    InventoryPairInput,
    PalletInput,
    ReplenishmentInput,
    SmoothingInput,
    ThresholdsInput,
)
from utils.validation import validate_inputs

if TYPE_CHECKING:
    from models.inventory import DOIThresholds

__all__ = [
    "round_half_up",
    "days_of_inventory",
    "total_inventory",
    "available_inventory",
    "inbound_inventory",
    "classify_stock",
    "units_to_make",
    "pallets_required",
    "smooth",
    "SmoothedSeries",
    "growth_rate",
]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves towards positive infinity, as dashboards expect (2.5 -> 3, -2.5 -> -2).

    Non-finite values are returned unchanged.
    """
    scale = 10**ndigits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    floored = math.floor(scaled)
    if scaled - floored >= 0.5:
        floored += 1
    return floored / scale


def _round_to_int(value: float) -> int | float:
    rounded = round_half_up(value)
    return int(rounded) if math.isfinite(rounded) else rounded


def _ceil(value: float) -> int | float:
    return math.ceil(value) if math.isfinite(value) else value


def days_of_inventory(inventory_units: float, daily_demand: float, *, strict: bool = False) -> int:
    """Days the given stock lasts at the given daily demand, rounded half-up.

    Zero demand reports 0 days, not infinity. A 0 here does not mean the
    product is fully stocked.
    """
    if strict:
        validate_inputs(DemandInput, inventory_units=inventory_units, daily_demand=daily_demand)
    if daily_demand == 0:
        return 0
    return _round_to_int(inventory_units / daily_demand)


def _sum_pair(first: float, second: float, strict: bool) -> float:
    if strict:
        validate_inputs(InventoryPairInput, first=first, second=second)
    return first + second


def total_inventory(fba_total: float, awd_total: float, *, strict: bool = False) -> float:
    return _sum_pair(fba_total, awd_total, strict)


def available_inventory(fba_available: float, awd_available: float, *, strict: bool = False) -> float:
    return _sum_pair(fba_available, awd_available, strict)


def inbound_inventory(fba_inbound: float, awd_inbound: float, *, strict: bool = False) -> float:
    return _sum_pair(fba_inbound, awd_inbound, strict)


def classify_stock(doi: float, thresholds: DOIThresholds, *, strict: bool = False) -> InventoryStatus:
    """
    Classify stock health from days of inventory. First match wins:

    1. doi <= 0                   -> out-of-stock
    2. doi <= thresholds.critical -> out-of-stock
    3. doi <= thresholds.low      -> low-stock
    4. otherwise                  -> in-stock

    Thresholds with critical > low are not rejected unless ``strict`` is set;
    the classification is then not monotonic in doi.
    """
    if strict:
        validate_inputs(ThresholdsInput, doi=doi, low=thresholds.low, critical=thresholds.critical)
    if doi <= 0:
        return InventoryStatus.OUT_OF_STOCK
    if doi <= thresholds.critical:
        return InventoryStatus.OUT_OF_STOCK
    if doi <= thresholds.low:
        return InventoryStatus.LOW_STOCK
    return InventoryStatus.IN_STOCK


def units_to_make(
    current_inventory: float,
    forecasted_daily_demand: float,
    doi_goal: float,
    lead_time_days: float,
    *,
    strict: bool = False,
) -> int:
    """
    Units needed to bring stock up to ``forecasted_daily_demand * doi_goal``.

    ``lead_time_days`` is accepted but does not enter the target yet; the
    target does not cover demand during the lead time.
    Never negative.
    """
    if strict:
        validate_inputs(
            ReplenishmentInput,
            current_inventory=current_inventory,
            forecasted_daily_demand=forecasted_daily_demand,
            doi_goal=doi_goal,
            lead_time_days=lead_time_days,
        )
    target_inventory = forecasted_daily_demand * doi_goal
    needed = target_inventory - current_inventory
    return max(0, _ceil(needed))


def pallets_required(units: float, units_per_pallet: float, *, strict: bool = False) -> int:
    if strict:
        validate_inputs(PalletInput, units=units, units_per_pallet=units_per_pallet)
    if units_per_pallet <= 0:
        return 0
    return _ceil(units / units_per_pallet)


class SmoothedSeries(Sequence):
    """
    Centered moving average over a snapshot of a series.

    Values are computed on access, so iterating twice recomputes them from
    the same snapshot. Windows are clipped at both ends rather than padded,
    so the first and last points average over fewer values. Compares equal
    to any sequence holding the same values.
    """

    def __init__(self, series: Iterable[float], window_size: int = 7):
        self._values = tuple(series)
        self.window_size = window_size
        self._half = max(0, int(window_size // 2))

    def __len__(self) -> int:
        return len(self._values)

    def _value_at(self, index: int) -> float:
        start = max(0, index - self._half)
        end = min(len(self._values), index + self._half + 1)
        window = self._values[start:end]
        return round_half_up(sum(window) / len(window), 2)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> list[float]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._value_at(i) for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("smoothed series index out of range")
        return self._value_at(index)

    def __iter__(self) -> Iterator[float]:
        for index in range(len(self._values)):
            yield self._value_at(index)

    def __repr__(self) -> str:
        return f"SmoothedSeries({list(self)!r}, window_size={self.window_size})"

    def __eq__(self, other):
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None


def smooth(series: Iterable[float], window_size: int = 7, *, strict: bool = False) -> SmoothedSeries:
    """Smooth a sales series with a centered moving average (values rounded to 2 decimals)."""
    if strict:
        series = list(series)
        validate_inputs(SmoothingInput, series=series, window_size=window_size)
    return SmoothedSeries(series, window_size)


def growth_rate(current: float, previous: float, *, strict: bool = False) -> float:
    """
    Percentage change from ``previous`` to ``current``; may be negative.
    Returns 0 when previous is 0, which also covers "no prior data".
    """
    if strict:
        validate_inputs(GrowthInput, current=current, previous=previous)
    if previous == 0:
        return 0
    return (current - previous) / previous * 100
