"""ViewpointRig — 레퍼런스 프레임, 컨스트레인트, 평가기 묶음

Service → Core 허용. 모듈/API는 이 서비스를 경유한다.
뷰포인트 등록 시 컨스트레인트 슬롯과 평가기를 함께 만들고,
해제 시 슬롯을 제거하고 뒤쪽 평가기의 인덱스를 다시 맞춘다.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from src.config import settings
from src.core.event_bus import EventBus, RigEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.rig.constraint import PositionConstraint
from src.core.rig.curves import Curve, get_curve
from src.core.rig.evaluator import WeightEvaluator
from src.core.rig.models import (
    AngleThresholds,
    ConstraintSource,
    EvaluatedWeight,
    OrientationFrame,
)
from src.core.rig.sink import SourceWeightSink

logger = get_logger(__name__)

RIG_SOURCE = "viewpoint_rig"


@dataclass(frozen=True)
class ViewpointPreset:
    """기본 리그 뷰포인트 정의: 오프셋 위치 + 바라보는 방향"""

    name: str
    position: Tuple[float, float, float]
    direction: Tuple[float, float, float]
    initial_weight: float = 0.0


DEFAULT_VIEWPOINTS: List[ViewpointPreset] = [
    ViewpointPreset("Front", (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), 1.0),
    ViewpointPreset("Down", (0.0, -1.0, 0.0), (0.0, -1.0, 0.0)),
    ViewpointPreset("Up", (0.0, 1.0, 0.0), (0.0, 1.0, 0.0)),
    ViewpointPreset("Left", (-1.0, 0.0, 0.0), (-1.0, 0.0, 0.0)),
    ViewpointPreset("Right", (1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
]


def default_thresholds() -> AngleThresholds:
    """config 기본 임계값"""
    return AngleThresholds(
        min_angle_fwd=settings.RIG_MIN_ANGLE_FWD,
        max_angle_fwd=settings.RIG_MAX_ANGLE_FWD,
        min_angle_up=settings.RIG_MIN_ANGLE_UP,
        max_angle_up=settings.RIG_MAX_ANGLE_UP,
    )


class ViewpointRig:
    """뷰포인트 등록/해제, 틱 평가, 블렌드 위치 조회"""

    def __init__(
        self,
        event_bus: EventBus,
        reference: Optional[OrientationFrame] = None,
        constraint: Optional[PositionConstraint] = None,
        epsilon: Optional[float] = None,
    ) -> None:
        self._bus = event_bus
        self._reference = reference or OrientationFrame.identity()
        self._constraint = constraint or PositionConstraint()
        self._epsilon = settings.RIG_WEIGHT_EPSILON if epsilon is None else epsilon
        self._evaluators: Dict[str, WeightEvaluator] = {}

    # ── 조회 ─────────────────────────────────────────────────

    @property
    def reference(self) -> OrientationFrame:
        return self._reference

    @property
    def constraint(self) -> PositionConstraint:
        return self._constraint

    @property
    def viewpoints(self) -> List[WeightEvaluator]:
        """슬롯 인덱스 순 평가기 목록"""
        return sorted(self._evaluators.values(), key=lambda e: e.index)

    def get_viewpoint(self, name: str) -> Optional[WeightEvaluator]:
        return self._evaluators.get(name)

    def weights(self) -> Dict[str, float]:
        return {e.name: e.current_weight for e in self.viewpoints}

    def blended_position(self) -> np.ndarray:
        return self._constraint.evaluate_position()

    def _emit(self, event: RigEvent) -> None:
        """틱 밖의 단발 조작은 조작마다 체인을 닫는다 (핸들러 안에서 호출된 경우 제외)."""
        self._bus.emit(event)
        if not self._bus.dispatching:
            self._bus.reset_chain()

    # ── 등록/해제 ────────────────────────────────────────────

    def register_viewpoint(
        self,
        name: str,
        frame: OrientationFrame,
        thresholds: Optional[AngleThresholds] = None,
        curve: Optional[Curve] = None,
        initial_weight: float = 0.0,
    ) -> WeightEvaluator:
        """컨스트레인트 소스 추가 + 평가기 바인딩"""
        if name in self._evaluators:
            raise ValueError(f"Viewpoint already registered: {name}")

        index = self._constraint.add_source(
            ConstraintSource(source_frame=frame, weight=initial_weight)
        )
        sink = SourceWeightSink(self._constraint, index, epsilon=self._epsilon)
        evaluator = WeightEvaluator(
            name=name,
            frame=frame,
            reference=self._reference,
            sink=sink,
            thresholds=thresholds or default_thresholds(),
            curve=curve or get_curve(),
        )
        self._evaluators[name] = evaluator
        logger.info(f"뷰포인트 등록: {name} (index={index})")

        self._emit(
            RigEvent(
                event_type=EventTypes.VIEWPOINT_REGISTERED,
                data={"name": name, "index": index},
                source=name,
            )
        )
        return evaluator

    def unregister_viewpoint(self, name: str) -> None:
        """슬롯 제거 + 뒤쪽 평가기 인덱스 재바인딩"""
        evaluator = self._evaluators.pop(name, None)
        if evaluator is None:
            raise ValueError(f"Viewpoint not found: {name}")

        removed_index = evaluator.index
        self._constraint.remove_source(removed_index)
        for other in self._evaluators.values():
            if other.index > removed_index:
                other.sink.rebind(other.index - 1)
        logger.info(f"뷰포인트 해제: {name} (index={removed_index})")

        self._emit(
            RigEvent(
                event_type=EventTypes.VIEWPOINT_UNREGISTERED,
                data={"name": name, "index": removed_index},
                source=name,
            )
        )

    # ── 틱 ───────────────────────────────────────────────────

    def move_reference(self, reference: OrientationFrame) -> None:
        """레퍼런스 프레임 교체. 가중치는 다음 tick()에서 반영."""
        self._reference = reference
        for evaluator in self._evaluators.values():
            evaluator.set_reference(reference)
        self._emit(
            RigEvent(
                event_type=EventTypes.REFERENCE_MOVED,
                data={
                    "forward": reference.forward.tolist(),
                    "up": reference.up.tolist(),
                },
                source=RIG_SOURCE,
            )
        )

    def tick(self) -> Dict[str, EvaluatedWeight]:
        """전 뷰포인트 평가 → 슬롯 기록. 기록된 슬롯마다 이벤트 발행."""
        results: Dict[str, EvaluatedWeight] = {}
        for evaluator in self.viewpoints:
            result = evaluator.tick()
            results[evaluator.name] = result
            if result.written:
                self._bus.emit(
                    RigEvent(
                        event_type=EventTypes.SOURCE_WEIGHT_CHANGED,
                        data={
                            "name": evaluator.name,
                            "index": evaluator.index,
                            "weight": result.weight,
                        },
                        source=evaluator.name,
                    )
                )
        if not self._bus.dispatching:
            self._bus.reset_chain()
        return results


def build_default_rig(rig: ViewpointRig) -> List[WeightEvaluator]:
    """5방향 기본 리그 구성 (Front 가중치 1로 시작) + 컨스트레인트 활성화"""
    evaluators = [
        rig.register_viewpoint(
            preset.name,
            OrientationFrame.look_rotation(preset.direction, position=preset.position),
            initial_weight=preset.initial_weight,
        )
        for preset in DEFAULT_VIEWPOINTS
    ]
    rig.constraint.constraint_active = True
    return evaluators
