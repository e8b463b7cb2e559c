"""Viewpoint rig API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from src.api.schemas import (
    ErrorResponse,
    OrientationInfo,
    ReferencePoseRequest,
    RigStateResponse,
    ViewpointInfo,
    ViewpointRequest,
)
from src.core.logging import get_logger
from src.core.rig.curves import get_curve
from src.core.rig.models import AngleThresholds, OrientationFrame
from src.modules.base import TickContext
from src.modules.module_manager import ModuleManager
from src.modules.rig.module import REFERENCE_FRAME_KEY, ViewpointRigModule
from src.services.rig_service import ViewpointRig

logger = get_logger(__name__)

router = APIRouter(prefix="/rig", tags=["rig"])


def get_module_manager(request: Request) -> ModuleManager:
    """ModuleManager 인스턴스 반환 (의존성 주입)"""
    manager: ModuleManager = request.app.state.module_manager
    return manager


def get_rig(request: Request) -> ViewpointRig:
    """활성 ViewpointRig 반환 (의존성 주입)"""
    module: ViewpointRigModule = request.app.state.rig_module
    if module.rig is None:
        raise HTTPException(status_code=503, detail="Viewpoint rig module disabled")
    return module.rig


def _build_orientation_info(frame: OrientationFrame) -> OrientationInfo:
    """OrientationFrame을 OrientationInfo로 변환"""
    return OrientationInfo(
        position=tuple(frame.position.tolist()),
        forward=tuple(frame.forward.tolist()),
        up=tuple(frame.up.tolist()),
    )


def _build_state(rig: ViewpointRig) -> RigStateResponse:
    return RigStateResponse(
        reference=_build_orientation_info(rig.reference),
        viewpoints=[
            ViewpointInfo(
                name=e.name,
                index=e.index,
                weight=e.current_weight,
                orientation=_build_orientation_info(e.frame),
            )
            for e in rig.viewpoints
        ],
        blended_position=tuple(rig.blended_position().tolist()),
        constraint_active=rig.constraint.constraint_active,
    )


@router.get("", response_model=RigStateResponse)
def get_rig_state(rig: ViewpointRig = Depends(get_rig)) -> RigStateResponse:
    """리그 상태 조회 (레퍼런스, 뷰포인트별 가중치, 블렌드 위치)"""
    return _build_state(rig)


@router.put("/reference", response_model=RigStateResponse)
def move_reference(
    pose: ReferencePoseRequest,
    request: Request,
    rig: ViewpointRig = Depends(get_rig),
    manager: ModuleManager = Depends(get_module_manager),
) -> RigStateResponse:
    """
    레퍼런스 자세 갱신

    새 자세로 호스트 틱 1회를 실행하고 갱신된 상태를 반환합니다.
    """
    frame = OrientationFrame.from_euler(
        pitch=pose.pitch,
        yaw=pose.yaw,
        roll=pose.roll,
        position=rig.reference.position,
    )
    request.app.state.tick += 1
    manager.process_tick(
        TickContext(tick=request.app.state.tick, extra={REFERENCE_FRAME_KEY: frame})
    )
    return _build_state(rig)


@router.post(
    "/viewpoints",
    response_model=ViewpointInfo,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def register_viewpoint(
    body: ViewpointRequest,
    rig: ViewpointRig = Depends(get_rig),
) -> ViewpointInfo:
    """뷰포인트 등록"""
    try:
        frame = OrientationFrame.look_rotation(body.direction, position=body.position)
        thresholds = (
            AngleThresholds(**body.thresholds.model_dump()) if body.thresholds else None
        )
        curve = get_curve(body.curve) if body.curve else None
        evaluator = rig.register_viewpoint(
            body.name,
            frame,
            thresholds=thresholds,
            curve=curve,
            initial_weight=body.initial_weight,
        )
    except ValueError as e:
        logger.warning("Failed to register viewpoint: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return ViewpointInfo(
        name=evaluator.name,
        index=evaluator.index,
        weight=evaluator.current_weight,
        orientation=_build_orientation_info(evaluator.frame),
    )


@router.delete(
    "/viewpoints/{name}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
def unregister_viewpoint(name: str, rig: ViewpointRig = Depends(get_rig)) -> Response:
    """뷰포인트 해제"""
    try:
        rig.unregister_viewpoint(name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
