from dataclasses import FrozenInstanceError

import pytest

from models.inventory import DOIThresholds, InventorySnapshot, PlanningGoal


def test_inventory_snapshot_sums():
    snapshot = InventorySnapshot(
        fba_available=120,
        awd_available=300,
        fba_total=150,
        awd_total=320,
        fba_inbound=40,
        awd_inbound=0,
    )
    assert snapshot.available() == 420
    assert snapshot.total() == 470
    assert snapshot.inbound() == 40


def test_inventory_snapshot_defaults_to_empty():
    snapshot = InventorySnapshot()
    assert snapshot.total() == snapshot.available() == snapshot.inbound() == 0


def test_inventory_snapshot_is_immutable():
    snapshot = InventorySnapshot(fba_total=10)
    with pytest.raises(FrozenInstanceError):
        snapshot.fba_total = 20


def test_doi_thresholds_ordering():
    assert DOIThresholds(low=45, critical=10).is_ordered()
    assert DOIThresholds(low=10, critical=10).is_ordered()
    assert not DOIThresholds(low=10, critical=45).is_ordered()


def test_planning_goal_defaults():
    goal = PlanningGoal(doi_goal=120)
    assert goal.lead_time_days == 0
