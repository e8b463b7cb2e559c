"""뷰포인트 리그 도메인 모델

호스트 씬 그래프와 무관한 순수 데이터 클래스.
좌표계는 호스트 엔진 규약(왼손 좌표계, +Z forward, +Y up)을 따른다.
"""

from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]

WORLD_FORWARD = (0.0, 0.0, 1.0)
WORLD_UP = (0.0, 1.0, 0.0)
WORLD_RIGHT = (1.0, 0.0, 0.0)

_PARALLEL_EPS = 1e-9


def as_vector(value: VectorLike) -> np.ndarray:
    """3요소 float 벡터로 변환."""
    vec = np.asarray(value, dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"3D vector expected, got shape {vec.shape}")
    return vec


def _normalized(value: VectorLike) -> np.ndarray:
    vec = as_vector(value)
    length = float(np.linalg.norm(vec))
    if length == 0.0:
        raise ValueError("Zero-length direction vector")
    return vec / length


def _rotation_matrix(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Z(roll) → X(pitch) → Y(yaw) 순서의 회전 행렬 (degrees)."""
    p, y, r = np.radians([pitch, yaw, roll])
    rx = np.array(
        [[1.0, 0.0, 0.0], [0.0, np.cos(p), -np.sin(p)], [0.0, np.sin(p), np.cos(p)]]
    )
    ry = np.array(
        [[np.cos(y), 0.0, np.sin(y)], [0.0, 1.0, 0.0], [-np.sin(y), 0.0, np.cos(y)]]
    )
    rz = np.array(
        [[np.cos(r), -np.sin(r), 0.0], [np.sin(r), np.cos(r), 0.0], [0.0, 0.0, 1.0]]
    )
    return ry @ rx @ rz


@dataclass(frozen=True, eq=False)
class OrientationFrame:
    """위치 + 직교 기저 (forward, up). right는 파생값.

    코어는 forward/up만 읽으며 프레임을 변경하지 않는다.
    위치/회전 변경은 새 프레임을 만들어 교체한다.
    """

    position: np.ndarray
    forward: np.ndarray
    up: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "position", as_vector(self.position))
        object.__setattr__(self, "forward", as_vector(self.forward))
        object.__setattr__(self, "up", as_vector(self.up))

    @property
    def right(self) -> np.ndarray:
        return np.cross(self.up, self.forward)

    @classmethod
    def identity(cls, position: VectorLike = (0.0, 0.0, 0.0)) -> "OrientationFrame":
        return cls(position=position, forward=WORLD_FORWARD, up=WORLD_UP)

    @classmethod
    def look_rotation(
        cls,
        direction: VectorLike,
        up_hint: VectorLike = WORLD_UP,
        position: VectorLike = (0.0, 0.0, 0.0),
    ) -> "OrientationFrame":
        """forward를 direction으로 맞춘 프레임.

        direction이 up_hint와 평행하면 월드 X축을 right로 사용한다.
        (정하방 → up=(0,0,1), 정상방 → up=(0,0,-1))
        """
        forward = _normalized(direction)
        right = np.cross(as_vector(up_hint), forward)
        if np.linalg.norm(right) < _PARALLEL_EPS:
            right = np.array(WORLD_RIGHT)
        right = right / np.linalg.norm(right)
        up = np.cross(forward, right)
        return cls(position=position, forward=forward, up=up)

    @classmethod
    def from_euler(
        cls,
        pitch: float = 0.0,
        yaw: float = 0.0,
        roll: float = 0.0,
        position: VectorLike = (0.0, 0.0, 0.0),
    ) -> "OrientationFrame":
        """오일러 각(degrees)으로 프레임 생성. 3DOF 헤드 트래커 입력용."""
        rotation = _rotation_matrix(pitch, yaw, roll)
        return cls(
            position=position,
            forward=rotation @ np.array(WORLD_FORWARD),
            up=rotation @ np.array(WORLD_UP),
        )

    def moved_to(self, position: VectorLike) -> "OrientationFrame":
        return OrientationFrame(position=position, forward=self.forward, up=self.up)


@dataclass(frozen=True)
class AngleThresholds:
    """축별 각도 임계값 (degrees)

    min: 가중치가 1에 도달하는 각도 차이
    max: 가중치가 0에 도달하는 각도 차이
    """

    min_angle_fwd: float = 10.0
    max_angle_fwd: float = 30.0
    min_angle_up: float = 30.0
    max_angle_up: float = 60.0

    def __post_init__(self):
        # min >= max는 감쇠 방향이 뒤집히므로 설정 단계에서 거부
        if not self.min_angle_fwd < self.max_angle_fwd:
            raise ValueError(
                f"min_angle_fwd ({self.min_angle_fwd}) must be less than "
                f"max_angle_fwd ({self.max_angle_fwd})"
            )
        if not self.min_angle_up < self.max_angle_up:
            raise ValueError(
                f"min_angle_up ({self.min_angle_up}) must be less than "
                f"max_angle_up ({self.max_angle_up})"
            )


@dataclass
class ConstraintSource:
    """가중 평균 컨스트레인트의 소스 슬롯 하나"""

    source_frame: OrientationFrame
    weight: float = 0.0


@dataclass
class EvaluatedWeight:
    """1회 평가 결과. 저장되지 않는 일시값."""

    angle_fwd: float
    angle_up: float
    t_fwd: float
    t_up: float
    raw_weight: float  # t_fwd * t_up, 커브 적용 전
    weight: float  # 커브 적용 후
    written: bool = field(default=False, compare=False)
