import math
from collections.abc import Iterable

import pandas as pd

from config.config import DOIConfig, PlannerSettings
from models.enums import ShipmentType
from models.inventory import DOIStats, DOIThresholds, InventorySnapshot, PlanningGoal
from models.shipment import Shipment, ShipmentPlanLine
from utils.calculations import (
    classify_stock,
    days_of_inventory,
    pallets_required,
    round_half_up,
    units_to_make,
)
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_THRESHOLDS = DOIThresholds(low=45, critical=10)


def implied_daily_demand(inventory: float, days_of_inventory: float) -> float:
    """Back out the daily demand from stock on hand and its days of inventory."""
    if days_of_inventory <= 0:
        return 0.0
    return inventory / days_of_inventory


def suggested_units_to_make(inventory: float, days_of_inventory: float, required_doi_days: float) -> int:
    """Units to make so stock covers ``required_doi_days`` at the demand implied by the current DOI."""
    if required_doi_days <= 0 or days_of_inventory <= 0:
        return 0
    target_inventory = required_doi_days * implied_daily_demand(inventory, days_of_inventory)
    return max(0, int(round_half_up(target_inventory - inventory)))


def doi_stats(
    snapshot: InventorySnapshot,
    daily_demand: float,
    forecast_daily_demand: float | None = None,
) -> DOIStats:
    """
    Days of inventory for FBA available stock, for all stock on hand, and
    for stock on hand plus inbound at the forecast demand (defaults to the
    current demand).
    """
    if forecast_daily_demand is None:
        forecast_daily_demand = daily_demand
    return DOIStats(
        fba_available=days_of_inventory(snapshot.fba_available, daily_demand),
        total_inventory=days_of_inventory(snapshot.total(), daily_demand),
        forecast=days_of_inventory(snapshot.total() + snapshot.inbound(), forecast_daily_demand),
    )


class ShipmentPlanner:
    """Builds shipment plan lines and shipments from inventory snapshots and demand."""

    def __init__(
        self,
        doi_config: DOIConfig | None = None,
        thresholds: DOIThresholds | None = None,
        units_per_pallet: int = 0,
        units_per_box: int = 24,
        strict: bool = False,
    ):
        self.doi_config = doi_config or DOIConfig()
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.units_per_pallet = units_per_pallet
        self.units_per_box = units_per_box
        self.strict = strict
        if not self.thresholds.is_ordered():
            logger.warning(
                f"Critical DOI threshold {self.thresholds.critical} exceeds low threshold "
                f"{self.thresholds.low}; stock classification will not be monotonic"
            )

    @classmethod
    def from_settings(cls, settings: PlannerSettings) -> "ShipmentPlanner":
        return cls(
            doi_config=settings.doi,
            thresholds=settings.thresholds(),
            units_per_pallet=settings.units_per_pallet,
            units_per_box=settings.units_per_box,
            strict=settings.strict_validation,
        )

    def planning_goal(self) -> PlanningGoal:
        return PlanningGoal(
            doi_goal=self.doi_config.total_required_doi(),
            lead_time_days=self.doi_config.total_lead_time(),
        )

    def plan_line(
        self,
        product_id: str,
        snapshot: InventorySnapshot,
        daily_demand: float,
        forecast_daily_demand: float | None = None,
    ) -> ShipmentPlanLine:
        """Plan one product: stock on hand plus inbound, measured against the required DOI."""
        if forecast_daily_demand is None:
            forecast_daily_demand = daily_demand
        goal = self.planning_goal()
        current = snapshot.total() + snapshot.inbound()
        doi = days_of_inventory(current, daily_demand, strict=self.strict)
        units = units_to_make(
            current,
            forecast_daily_demand,
            goal.doi_goal,
            goal.lead_time_days,
            strict=self.strict,
        )
        line = ShipmentPlanLine(
            product_id=product_id,
            current_inventory=current,
            daily_demand=daily_demand,
            days_of_inventory=doi,
            status=classify_stock(doi, self.thresholds, strict=self.strict),
            units_to_make=units,
            pallets=pallets_required(units, self.units_per_pallet),
            box_inventory=math.floor(current / self.units_per_box) if self.units_per_box > 0 else 0,
        )
        logger.debug(f"Planned {product_id}: doi={doi} status={line.status.value} units={units}")
        return line

    def plan(self, rows: Iterable[tuple[str, InventorySnapshot, float]]) -> list[ShipmentPlanLine]:
        """Plan every (product_id, snapshot, daily_demand) row."""
        lines = [self.plan_line(product_id, snapshot, demand) for product_id, snapshot, demand in rows]
        logger.info(
            f"Planned {len(lines)} products, {sum(line.units_to_make for line in lines)} units "
            f"against a {self.doi_config.total_required_doi()} day target"
        )
        return lines

    def build_shipment(
        self,
        name: str,
        shipment_type: ShipmentType,
        lines: Iterable[ShipmentPlanLine],
    ) -> Shipment:
        """Turn plan lines into a shipment in planning status; lines needing no units are skipped."""
        shipment = Shipment(name=name, shipment_type=ShipmentType(shipment_type))
        for line in lines:
            if line.units_to_make > 0:
                shipment.add_item(line.product_id, line.units_to_make)
        logger.info(
            f"Built {shipment.shipment_type.value} shipment '{name}' with "
            f"{len(shipment.items)} items, {shipment.total_units()} units"
        )
        return shipment

    @staticmethod
    def to_frame(lines: Iterable[ShipmentPlanLine]) -> pd.DataFrame:
        """Tabulate plan lines, one row per product, with the status as its string value."""
        records = [
            {
                "product_id": line.product_id,
                "current_inventory": line.current_inventory,
                "daily_demand": line.daily_demand,
                "days_of_inventory": line.days_of_inventory,
                "status": line.status.value,
                "units_to_make": line.units_to_make,
                "pallets": line.pallets,
                "box_inventory": line.box_inventory,
            }
            for line in lines
        ]
        columns = [
            "product_id",
            "current_inventory",
            "daily_demand",
            "days_of_inventory",
            "status",
            "units_to_make",
            "pallets",
            "box_inventory",
        ]
        return pd.DataFrame(records, columns=columns)
