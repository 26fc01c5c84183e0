"""
Shipment-related data models.
Includes ShipmentItem, Shipment and ShipmentPlanLine dataclasses.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from models.enums import InventoryStatus, ShipmentStatus, ShipmentType
from utils.errors import PlanningError

_STATUS_ORDER = list(ShipmentStatus)


@dataclass
class ShipmentItem:
    product_id: str
    quantity: int


@dataclass
class ShipmentPlanLine:
    """One product row in a shipment plan."""

    product_id: str
    current_inventory: float
    daily_demand: float
    days_of_inventory: int
    status: InventoryStatus
    units_to_make: int
    pallets: int
    box_inventory: int


@dataclass
class Shipment:
    """
    A replenishment shipment being built or tracked.
    Status only moves forward: planning -> ready -> shipped -> received -> archived.
    """

    name: str
    shipment_type: ShipmentType
    status: ShipmentStatus = ShipmentStatus.PLANNING
    marketplace: str = "US"
    planned_date: date | None = None
    items: list[ShipmentItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def total_units(self) -> int:
        return sum(item.quantity for item in self.items)

    def add_item(self, product_id: str, quantity: int) -> None:
        """Add units for a product, merging with an existing line for the same product."""
        if self.status != ShipmentStatus.PLANNING:
            raise PlanningError(f"Cannot add items to shipment '{self.name}' in status {self.status.value}")
        for item in self.items:
            if item.product_id == product_id:
                item.quantity += quantity
                return
        self.items.append(ShipmentItem(product_id=product_id, quantity=quantity))

    def advance(self) -> ShipmentStatus:
        """Move to the next status and return it."""
        index = _STATUS_ORDER.index(self.status)
        if index == len(_STATUS_ORDER) - 1:
            raise PlanningError(f"Shipment '{self.name}' is already {self.status.value}")
        self.status = _STATUS_ORDER[index + 1]
        return self.status
