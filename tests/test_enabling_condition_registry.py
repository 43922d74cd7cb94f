import pytest

from faultmgr.enabling_condition_registry import (
    EnablingConditionRegistry,
    EnablingConditionStatus,
)


def test_new_registry_is_empty():
    reg = EnablingConditionRegistry()
    assert len(reg) == 0
    assert not reg


def test_register_creates_inactive_condition():
    reg = EnablingConditionRegistry()
    status = reg.register("vehicle.speed.valid")
    assert status == EnablingConditionStatus.INACTIVE
    assert len(reg) == 1
    assert reg.get_status("vehicle.speed.valid") == EnablingConditionStatus.INACTIVE


def test_register_duplicate_returns_current_status():
    reg = EnablingConditionRegistry()
    reg.register("engine.running")
    reg.update_status("engine.running", EnablingConditionStatus.ACTIVE)
    status = reg.register("engine.running")
    assert status == EnablingConditionStatus.ACTIVE
    assert len(reg) == 1


def test_update_status_returns_new_on_change():
    reg = EnablingConditionRegistry()
    reg.register("engine.running")
    result = reg.update_status("engine.running", EnablingConditionStatus.ACTIVE)
    assert result == EnablingConditionStatus.ACTIVE


def test_update_status_returns_none_on_no_change():
    reg = EnablingConditionRegistry()
    reg.register("engine.running")
    result = reg.update_status("engine.running", EnablingConditionStatus.INACTIVE)
    assert result is None


def test_update_status_auto_registers_unknown_condition():
    reg = EnablingConditionRegistry()
    result = reg.update_status("new.condition", EnablingConditionStatus.ACTIVE)
    assert result == EnablingConditionStatus.ACTIVE
    assert len(reg) == 1


def test_get_status_returns_none_for_unknown():
    reg = EnablingConditionRegistry()
    assert reg.get_status("nonexistent") is None


def test_all_conditions_returns_full_map():
    reg = EnablingConditionRegistry()
    reg.register("a")
    reg.register("b")
    reg.update_status("a", EnablingConditionStatus.ACTIVE)

    all_conditions = reg.all_conditions()
    assert len(all_conditions) == 2
    assert all_conditions["a"] == EnablingConditionStatus.ACTIVE
    assert all_conditions["b"] == EnablingConditionStatus.INACTIVE


def test_all_conditions_is_read_only():
    reg = EnablingConditionRegistry()
    reg.register("a")
    view = reg.all_conditions()
    with pytest.raises(TypeError):
        view["a"] = EnablingConditionStatus.ACTIVE  # type: ignore[index]
    assert reg.get_status("a") == EnablingConditionStatus.INACTIVE


def test_toggle_back_and_forth_reports_each_change():
    reg = EnablingConditionRegistry()
    reg.register("x")
    assert reg.update_status("x", EnablingConditionStatus.ACTIVE) == EnablingConditionStatus.ACTIVE
    assert reg.update_status("x", EnablingConditionStatus.ACTIVE) is None
    assert (
        reg.update_status("x", EnablingConditionStatus.INACTIVE)
        == EnablingConditionStatus.INACTIVE
    )
    assert reg.get_status("x") == EnablingConditionStatus.INACTIVE