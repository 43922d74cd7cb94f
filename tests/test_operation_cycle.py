import pytest

from faultmgr.operation_cycle import (
    CycleEventType,
    CycleSource,
    ManualCycleProvider,
    OperationCycleEvent,
    OperationCycleProvider,
    OperationCycleTracker,
)


def make_event(cycle_id, event_type):
    return OperationCycleEvent(cycle_id, event_type, CycleSource.ECU)


def test_new_tracker_returns_zero():
    tracker = OperationCycleTracker()
    assert tracker.get("power") == 0
    assert tracker.get("ignition") == 0


def test_increment_increases_count():
    tracker = OperationCycleTracker()
    assert tracker.increment("power") == 1
    assert tracker.increment("power") == 2
    assert tracker.increment("power") == 3
    assert tracker.get("power") == 3


def test_independent_cycle_refs():
    tracker = OperationCycleTracker()
    tracker.increment("power")
    tracker.increment("power")
    tracker.increment("ignition")
    assert tracker.get("power") == 2
    assert tracker.get("ignition") == 1
    assert tracker.get("drive") == 0


def test_snapshot_captures_all_cycles():
    tracker = OperationCycleTracker()
    tracker.increment("power")
    tracker.increment("drive")
    tracker.increment("drive")
    snap = tracker.snapshot()
    assert snap.get("power") == 1
    assert snap.get("drive") == 2


def test_snapshot_is_independent_copy():
    tracker = OperationCycleTracker()
    tracker.increment("power")
    snap = tracker.snapshot()
    tracker.increment("power")
    assert snap["power"] == 1
    assert tracker.get("power") == 2


def test_apply_events_start_increments_counter():
    tracker = OperationCycleTracker()
    events = [
        make_event("power", CycleEventType.START),
        make_event("power", CycleEventType.START),
    ]
    incremented = tracker.apply_events(events)
    assert tracker.get("power") == 2
    assert len(incremented) == 2


def test_apply_events_stop_does_not_increment():
    tracker = OperationCycleTracker()
    tracker.increment("power")
    incremented = tracker.apply_events([make_event("power", CycleEventType.STOP)])
    assert tracker.get("power") == 1
    assert incremented == []


def test_apply_events_restart_increments_once():
    tracker = OperationCycleTracker()
    incremented = tracker.apply_events([make_event("ignition", CycleEventType.RESTART)])
    assert tracker.get("ignition") == 1
    assert incremented == ["ignition"]


def test_apply_events_mixed_sequence():
    tracker = OperationCycleTracker()
    events = [
        make_event("power", CycleEventType.START),
        make_event("power", CycleEventType.STOP),
        make_event("power", CycleEventType.START),
        make_event("ignition", CycleEventType.START),
    ]
    tracker.apply_events(events)
    assert tracker.get("power") == 2
    assert tracker.get("ignition") == 1


def test_manual_provider_poll_drains_queue():
    provider = ManualCycleProvider()
    provider.start_cycle("power")
    provider.start_cycle("ignition")
    events = provider.poll()
    assert len(events) == 2
    assert events[0].cycle_id == "power"
    assert events[1].cycle_id == "ignition"
    assert provider.poll() == []


def test_manual_provider_start_and_stop():
    provider = ManualCycleProvider()
    provider.start_cycle("drive")
    provider.stop_cycle("drive")
    events = provider.poll()
    assert len(events) == 2
    assert events[0].event_type is CycleEventType.START
    assert events[1].event_type is CycleEventType.STOP
    assert all(e.source is CycleSource.MANUAL for e in events)


def test_manual_provider_push_returns_same_event():
    provider = ManualCycleProvider()
    event = make_event("power", CycleEventType.RESTART)
    provider.push(event)
    assert provider.poll() == [event]


def test_manual_provider_current_cycle_returns_none():
    provider = ManualCycleProvider()
    assert provider.current_cycle("power") is None


def test_provider_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        OperationCycleProvider()


def test_provider_events_drive_tracker():
    provider = ManualCycleProvider()
    provider.start_cycle("power")
    provider.start_cycle("power")
    provider.stop_cycle("power")
    provider.start_cycle("ignition")
    tracker = OperationCycleTracker()
    tracker.apply_events(provider.poll())
    assert tracker.get("power") == 2
    assert tracker.get("ignition") == 1