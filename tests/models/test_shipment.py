import pytest

from models.enums import ShipmentStatus, ShipmentType
from models.shipment import Shipment
from utils.errors import PlanningError


def test_shipment_status_advances_in_order():
    shipment = Shipment(name="Q3 AWD", shipment_type=ShipmentType.AWD)
    assert shipment.status == ShipmentStatus.PLANNING
    assert [shipment.advance() for _ in range(4)] == [
        ShipmentStatus.READY,
        ShipmentStatus.SHIPPED,
        ShipmentStatus.RECEIVED,
        ShipmentStatus.ARCHIVED,
    ]


def test_archived_shipment_cannot_advance():
    shipment = Shipment(name="Old", shipment_type=ShipmentType.FBA, status=ShipmentStatus.ARCHIVED)
    with pytest.raises(PlanningError):
        shipment.advance()
    assert shipment.status == ShipmentStatus.ARCHIVED


def test_add_item_merges_same_product():
    shipment = Shipment(name="FBA", shipment_type=ShipmentType.FBA)
    shipment.add_item("P1", 100)
    shipment.add_item("P2", 40)
    shipment.add_item("P1", 20)
    assert [(item.product_id, item.quantity) for item in shipment.items] == [("P1", 120), ("P2", 40)]
    assert shipment.total_units() == 160


def test_add_item_only_while_planning():
    shipment = Shipment(name="FBA", shipment_type=ShipmentType.FBA)
    shipment.advance()
    with pytest.raises(PlanningError):
        shipment.add_item("P1", 10)
    assert shipment.items == []


def test_shipments_do_not_share_items():
    first = Shipment(name="A", shipment_type=ShipmentType.FBA)
    second = Shipment(name="B", shipment_type=ShipmentType.FBA)
    first.add_item("P1", 1)
    assert second.items == []
