"""
Configuration classes for the inventory planning project.
Defines DOI targets, forecast adjustments and planner settings in a type-safe,
extensible way. Planner settings can be read from the environment (or a
project-level `.env` file).
"""

from dataclasses import dataclass, field

from models.enums import ForecastModel
from models.inventory import DOIThresholds
from utils.env import env_flag, env_float, env_int, load_project_dotenv

# Days of history averaged for the baseline demand of each forecast profile
FORECAST_LOOKBACK_DAYS: dict[ForecastModel, int] = {
    ForecastModel.NEW: 7,
    ForecastModel.GROWING: 30,
    ForecastModel.ESTABLISHED: 90,
}


@dataclass
class DOIConfig:
    amazon_doi_goal: int = 120
    inbound_lead_time: int = 30
    manufacture_lead_time: int = 7

    def total_required_doi(self) -> int:
        """Days of inventory to plan for: the Amazon goal plus both lead times."""
        return self.amazon_doi_goal + self.inbound_lead_time + self.manufacture_lead_time

    def total_lead_time(self) -> int:
        return self.inbound_lead_time + self.manufacture_lead_time


@dataclass
class ForecastConfig:
    model: ForecastModel = ForecastModel.ESTABLISHED
    market_adjustment: float = 0.0  # percent
    sales_velocity_adjustment: float = 0.0  # percent

    def lookback_days(self) -> int:
        return FORECAST_LOOKBACK_DAYS[ForecastModel(self.model)]


@dataclass
class PlannerSettings:
    strict_validation: bool = False
    smoothing_window: int = 7
    low_doi: float = 45
    critical_doi: float = 10
    units_per_pallet: int = 0  # 0 means no palletisation
    units_per_box: int = 24
    doi: DOIConfig = field(default_factory=DOIConfig)
    forecast: ForecastConfig = field(default_factory=ForecastConfig)

    def thresholds(self) -> DOIThresholds:
        return DOIThresholds(low=self.low_doi, critical=self.critical_doi)

    @classmethod
    def from_env(cls) -> "PlannerSettings":
        """Build settings from INVENTORY_* environment variables, loading `.env` first."""
        load_project_dotenv()
        defaults = cls()
        return cls(
            strict_validation=env_flag("INVENTORY_STRICT_VALIDATION", defaults.strict_validation),
            smoothing_window=env_int("INVENTORY_SMOOTHING_WINDOW", defaults.smoothing_window),
            low_doi=env_float("INVENTORY_LOW_DOI", defaults.low_doi),
            critical_doi=env_float("INVENTORY_CRITICAL_DOI", defaults.critical_doi),
            units_per_pallet=env_int("INVENTORY_UNITS_PER_PALLET", defaults.units_per_pallet),
            units_per_box=env_int("INVENTORY_UNITS_PER_BOX", defaults.units_per_box),
        )


# Example usage:
# settings = PlannerSettings.from_env()
# planner = ShipmentPlanner(settings.doi, settings.thresholds(), units_per_pallet=settings.units_per_pallet)
