"""API request/response schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

Vector3 = tuple[float, float, float]


# === Request Schemas ===


class ReferencePoseRequest(BaseModel):
    """레퍼런스(카메라) 자세 — 3DOF 오일러 각 (degrees)"""

    pitch: float = Field(0.0, ge=-180.0, le=180.0, description="X축 회전")
    yaw: float = Field(0.0, ge=-360.0, le=360.0, description="Y축 회전")
    roll: float = Field(0.0, ge=-180.0, le=180.0, description="Z축 회전")


class ThresholdsSchema(BaseModel):
    """축별 각도 임계값 (degrees)"""

    min_angle_fwd: float = Field(10.0, ge=0.0, le=180.0)
    max_angle_fwd: float = Field(30.0, ge=0.0, le=180.0)
    min_angle_up: float = Field(30.0, ge=0.0, le=180.0)
    max_angle_up: float = Field(60.0, ge=0.0, le=180.0)

    @model_validator(mode="after")
    def check_ordering(self) -> "ThresholdsSchema":
        if self.min_angle_fwd >= self.max_angle_fwd:
            raise ValueError("min_angle_fwd must be less than max_angle_fwd")
        if self.min_angle_up >= self.max_angle_up:
            raise ValueError("min_angle_up must be less than max_angle_up")
        return self


class ViewpointRequest(BaseModel):
    """뷰포인트 등록 요청"""

    name: str = Field(..., min_length=1, max_length=50, description="뷰포인트 이름")
    position: Vector3 = (0.0, 0.0, 0.0)
    direction: Vector3 = Field((0.0, 0.0, 1.0), description="바라보는 방향")
    thresholds: Optional[ThresholdsSchema] = None
    curve: Optional[Literal["ease", "linear"]] = None
    initial_weight: float = Field(0.0, ge=0.0, le=1.0)


# === Response Schemas ===


class OrientationInfo(BaseModel):
    """프레임 방향 정보"""

    position: Vector3
    forward: Vector3
    up: Vector3


class ViewpointInfo(BaseModel):
    """뷰포인트 상태"""

    name: str
    index: int
    weight: float
    orientation: OrientationInfo


class RigStateResponse(BaseModel):
    """리그 전체 상태"""

    reference: OrientationInfo
    viewpoints: list[ViewpointInfo] = []
    blended_position: Vector3
    constraint_active: bool


class ErrorResponse(BaseModel):
    """에러 응답"""

    detail: str
