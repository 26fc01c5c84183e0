"""
Inventory-related data models for inventory planning.
Includes InventorySnapshot, DOIThresholds, PlanningGoal and DOIStats dataclasses.
"""

from dataclasses import dataclass

from utils.calculations import available_inventory, inbound_inventory, total_inventory


@dataclass(frozen=True)
class InventorySnapshot:
    """
    Point-in-time stock counts for one product across the FBA and AWD networks.
    Totals are expected to be at least the available counts; this is not enforced.
    """

    fba_available: float = 0
    awd_available: float = 0
    fba_total: float = 0
    awd_total: float = 0
    fba_inbound: float = 0
    awd_inbound: float = 0

    def total(self) -> float:
        return total_inventory(self.fba_total, self.awd_total)

    def available(self) -> float:
        return available_inventory(self.fba_available, self.awd_available)

    def inbound(self) -> float:
        return inbound_inventory(self.fba_inbound, self.awd_inbound)


@dataclass(frozen=True)
class DOIThresholds:
    """
    Days-of-inventory cut-offs used to classify stock health.
    Callers must keep critical <= low.
    """

    low: float
    critical: float

    def is_ordered(self) -> bool:
        return self.critical <= self.low


@dataclass(frozen=True)
class PlanningGoal:
    """Target days of inventory coverage and the replenishment lead time."""

    doi_goal: float
    lead_time_days: float = 0


@dataclass(frozen=True)
class DOIStats:
    """Days of inventory for one product, seen three ways."""

    fba_available: int
    total_inventory: int
    forecast: int
