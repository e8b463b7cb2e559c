"""ViewpointRigModule — HostModule 인터페이스 구현

ViewpointRig를 래핑하여 ModuleManager 생명주기에 통합.
on_tick: context.extra["reference_frame"]가 있으면 레퍼런스 갱신
on_late_tick: 전 뷰포인트 가중치 평가 (레퍼런스가 확정된 뒤)

EventBus 구독:
- source_weight_changed: 뷰포인트별 가중치 추적, late 틱 끝에 주도 뷰포인트 전환 로깅
- viewpoint_registered / viewpoint_unregistered: 추적 대상 추가/제거
"""

from __future__ import annotations

from typing import Dict, Optional

from src.config import settings
from src.core.event_bus import EventBus, RigEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.rig.models import EvaluatedWeight, OrientationFrame
from src.modules.base import HostModule, TickContext
from src.services.rig_service import ViewpointRig, build_default_rig

logger = get_logger(__name__)

REFERENCE_FRAME_KEY = "reference_frame"


class ViewpointRigModule(HostModule):
    """뷰포인트 리그 모듈

    담당:
    - 활성화 시 리그 생성 (옵션: 5방향 기본 구성)
    - 틱 처리: 레퍼런스 갱신 → late 단계 가중치 평가
    - 가중치 변경 이벤트로 주도 뷰포인트 추적
    """

    def __init__(
        self,
        event_bus: EventBus,
        build_default: Optional[bool] = None,
    ) -> None:
        super().__init__()
        self._bus = event_bus
        self._build_default = (
            settings.RIG_BUILD_DEFAULT if build_default is None else build_default
        )
        self._rig: Optional[ViewpointRig] = None
        self._last_results: Dict[str, EvaluatedWeight] = {}
        self._tracked_weights: Dict[str, float] = {}
        self._dominant: Optional[str] = None

    @property
    def name(self) -> str:
        return "viewpoint_rig"

    @property
    def rig(self) -> Optional[ViewpointRig]:
        return self._rig

    @property
    def last_results(self) -> Dict[str, EvaluatedWeight]:
        """마지막 late 틱 평가 결과"""
        return dict(self._last_results)

    @property
    def dominant_viewpoint(self) -> Optional[str]:
        """가중치가 가장 큰 뷰포인트. 모두 0이면 None."""
        return self._dominant

    def on_enable(self) -> None:
        """모듈 활성화: 리그 생성 + EventBus 구독"""
        self._rig = ViewpointRig(self._bus)
        self._bus.subscribe(
            EventTypes.VIEWPOINT_REGISTERED, self._handle_viewpoint_registered
        )
        self._bus.subscribe(EventTypes.SOURCE_WEIGHT_CHANGED, self._handle_weight_changed)
        self._bus.subscribe(
            EventTypes.VIEWPOINT_UNREGISTERED, self._handle_viewpoint_unregistered
        )
        if self._build_default:
            build_default_rig(self._rig)
        self._tracked_weights = self._rig.weights()
        self._dominant = self._resolve_dominant()
        logger.info("viewpoint_rig 모듈 활성화")

    def on_disable(self) -> None:
        """모듈 비활성화: EventBus 구독 해제"""
        self._bus.unsubscribe(
            EventTypes.VIEWPOINT_REGISTERED, self._handle_viewpoint_registered
        )
        self._bus.unsubscribe(
            EventTypes.SOURCE_WEIGHT_CHANGED, self._handle_weight_changed
        )
        self._bus.unsubscribe(
            EventTypes.VIEWPOINT_UNREGISTERED, self._handle_viewpoint_unregistered
        )
        self._rig = None
        self._last_results = {}
        self._tracked_weights = {}
        self._dominant = None
        logger.info("viewpoint_rig 모듈 비활성화")

    def on_tick(self, context: TickContext) -> None:
        if self._rig is None:
            return
        reference: Optional[OrientationFrame] = context.extra.get(REFERENCE_FRAME_KEY)
        if reference is not None:
            self._rig.move_reference(reference)

    def on_late_tick(self, context: TickContext) -> None:
        if self._rig is None:
            return
        self._last_results = self._rig.tick()

        dominant = self._resolve_dominant()
        if dominant != self._dominant:
            logger.info(
                f"주도 뷰포인트 전환: {self._dominant} → {dominant} (tick={context.tick})"
            )
            self._dominant = dominant

    # ── EventBus 핸들러 ────────────────────────────────────────

    def _handle_viewpoint_registered(self, event: RigEvent) -> None:
        """viewpoint_registered → 초기 가중치로 추적 시작"""
        if self._rig is None:
            return
        evaluator = self._rig.get_viewpoint(event.data["name"])
        if evaluator is not None:
            self._tracked_weights[evaluator.name] = evaluator.current_weight

    def _handle_weight_changed(self, event: RigEvent) -> None:
        """source_weight_changed → 추적 가중치 갱신 (전환 판정은 late 틱 끝에서)"""
        self._tracked_weights[event.data["name"]] = event.data["weight"]

    def _handle_viewpoint_unregistered(self, event: RigEvent) -> None:
        self._tracked_weights.pop(event.data["name"], None)
        if self._dominant == event.data["name"]:
            self._dominant = self._resolve_dominant()

    def _resolve_dominant(self) -> Optional[str]:
        if not self._tracked_weights:
            return None
        name = max(self._tracked_weights, key=self._tracked_weights.__getitem__)
        if self._tracked_weights[name] <= 0.0:
            return None
        return name
