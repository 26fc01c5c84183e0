"""
Pydantic input schemas used when the calculator runs in strict mode.
Each schema mirrors the arguments of one calculator operation.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    NonNegativeFloat,
    PositiveFloat,
    PositiveInt,
    model_validator,
)


class StrictInput(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False, frozen=True)


class DemandInput(StrictInput):
    inventory_units: NonNegativeFloat
    daily_demand: NonNegativeFloat


class InventoryPairInput(StrictInput):
    first: NonNegativeFloat
    second: NonNegativeFloat


class ThresholdsInput(StrictInput):
    doi: FiniteFloat
    low: PositiveFloat
    critical: NonNegativeFloat

    @model_validator(mode="after")
    def check_order(self):
        if self.critical > self.low:
            raise ValueError("critical threshold must not exceed low threshold")
        return self


class ReplenishmentInput(StrictInput):
    current_inventory: NonNegativeFloat
    forecasted_daily_demand: NonNegativeFloat
    doi_goal: NonNegativeFloat
    lead_time_days: NonNegativeFloat


class PalletInput(StrictInput):
    units: NonNegativeFloat
    units_per_pallet: PositiveFloat


class SmoothingInput(StrictInput):
    series: list[FiniteFloat] = Field(default_factory=list)
    window_size: PositiveInt


class GrowthInput(StrictInput):
    current: FiniteFloat
    previous: FiniteFloat
