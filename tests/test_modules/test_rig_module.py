"""ViewpointRigModule 테스트"""

import logging

import pytest

from src.core.rig.models import OrientationFrame
from src.modules.base import TickContext
from src.modules.module_manager import ModuleManager
from src.modules.rig.module import REFERENCE_FRAME_KEY, ViewpointRigModule


def _enabled(build_default: bool = True):
    manager = ModuleManager()
    module = ViewpointRigModule(manager.event_bus, build_default=build_default)
    manager.register(module)
    manager.enable(module.name)
    return manager, module


class TestLifecycle:
    def test_enable_builds_default_rig(self):
        _, module = _enabled()
        assert module.rig is not None
        assert len(module.rig.viewpoints) == 5

    def test_enable_empty_rig(self):
        _, module = _enabled(build_default=False)
        assert module.rig.viewpoints == []

    def test_disable_drops_rig(self):
        manager, module = _enabled()
        manager.disable(module.name)
        assert module.rig is None
        assert module.last_results == {}

    def test_tick_while_disabled_is_noop(self):
        module = ViewpointRigModule(ModuleManager().event_bus)
        module.on_tick(TickContext(tick=1))
        module.on_late_tick(TickContext(tick=1))
        assert module.rig is None


class TestTick:
    def test_reference_from_context(self):
        manager, module = _enabled()
        manager.process_tick(
            TickContext(
                tick=1,
                extra={REFERENCE_FRAME_KEY: OrientationFrame.from_euler(pitch=90.0)},
            )
        )
        weights = module.rig.weights()
        assert weights["Down"] == pytest.approx(1.0)
        assert weights["Front"] == 0.0
        assert set(module.last_results) == set(weights)

    def test_tick_without_reference_keeps_pose(self):
        manager, module = _enabled()
        manager.process_tick(TickContext(tick=1))
        assert module.rig.weights()["Front"] == 1.0
        assert module.last_results["Front"].written is False


class TestDominantViewpoint:
    def test_front_dominant_after_enable(self):
        _, module = _enabled()
        assert module.dominant_viewpoint == "Front"

    def test_empty_rig_has_none(self):
        _, module = _enabled(build_default=False)
        assert module.dominant_viewpoint is None

    def test_hand_off_on_weight_change(self, caplog):
        manager, module = _enabled()
        with caplog.at_level(logging.INFO):
            manager.process_tick(
                TickContext(
                    tick=1,
                    extra={REFERENCE_FRAME_KEY: OrientationFrame.from_euler(pitch=90.0)},
                )
            )
        assert module.dominant_viewpoint == "Down"
        assert "Front → Down" in caplog.text

    def test_unregister_dominant(self):
        _, module = _enabled()
        module.rig.unregister_viewpoint("Front")
        assert module.dominant_viewpoint is None

    def test_registered_viewpoint_tracked(self):
        manager, module = _enabled(build_default=False)
        module.rig.register_viewpoint(
            "Solo", OrientationFrame.identity(), initial_weight=1.0
        )
        manager.process_tick(TickContext(tick=1))
        assert module.dominant_viewpoint == "Solo"

    def test_disable_unsubscribes(self):
        manager, module = _enabled()
        handlers = manager.event_bus.handler_count
        manager.disable(module.name)
        assert manager.event_bus.handler_count == handlers - 3
        assert module.dominant_viewpoint is None
