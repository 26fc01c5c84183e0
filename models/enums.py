"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class InventoryStatus(str, Enum):
    """Stock health of a product, derived from its days of inventory"""

    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


class ShipmentStatus(str, Enum):
    """Lifecycle of a replenishment shipment, in order"""

    PLANNING = "planning"
    READY = "ready"
    SHIPPED = "shipped"
    RECEIVED = "received"
    ARCHIVED = "archived"


class ShipmentType(str, Enum):
    """Destination network for a shipment"""

    AWD = "awd"  # Amazon Warehousing & Distribution
    FBA = "fba"  # Fulfillment by Amazon


class ForecastModel(str, Enum):
    """Forecast profiles, chosen by how much sales history a product has"""

    NEW = "new"
    GROWING = "growing"
    ESTABLISHED = "established"
