"""정렬 가중치 계산

전부 순수 함수 — 외부 의존 없음.
forward/up 두 축의 각도 차이를 [0,1] 가중치 하나로 합성한다.
"""

import numpy as np

from src.core.rig.curves import Curve
from src.core.rig.models import (
    AngleThresholds,
    EvaluatedWeight,
    VectorLike,
    as_vector,
)


def angle_between(a: VectorLike, b: VectorLike) -> float:
    """두 벡터 사이 각도 (degrees, 0 ~ 180).

    길이 0 벡터는 전제 조건 위반 → ValueError.
    """
    va = as_vector(a)
    vb = as_vector(b)
    denominator = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if denominator == 0.0:
        raise ValueError("angle_between: zero-length vector")
    cosine = float(np.clip(np.dot(va, vb) / denominator, -1.0, 1.0))
    return float(np.degrees(np.arccos(cosine)))


def inverse_lerp(a: float, b: float, value: float) -> float:
    """value가 a → b 사이 어디인지 [0,1]로. 범위 밖은 클램프, a == b면 0."""
    if a == b:
        return 0.0
    return max(0.0, min(1.0, (value - a) / (b - a)))


def axis_alignment(angle: float, min_angle: float, max_angle: float) -> float:
    """한 축의 정렬도. min 이하 → 1, max 이상 → 0."""
    return inverse_lerp(max_angle, min_angle, angle)


def combine_alignment(t_fwd: float, t_up: float) -> float:
    """두 축 AND 합성 — 어느 한 축이 0이면 전체 0."""
    return t_fwd * t_up


def weight_from_angles(
    angle_fwd: float,
    angle_up: float,
    thresholds: AngleThresholds,
    curve: Curve,
) -> EvaluatedWeight:
    """각도 차이 → 가중치. 커브는 합성 후 1회만 적용 (축별 적용 아님)."""
    t_fwd = axis_alignment(angle_fwd, thresholds.min_angle_fwd, thresholds.max_angle_fwd)
    t_up = axis_alignment(angle_up, thresholds.min_angle_up, thresholds.max_angle_up)
    raw_weight = combine_alignment(t_fwd, t_up)
    return EvaluatedWeight(
        angle_fwd=angle_fwd,
        angle_up=angle_up,
        t_fwd=t_fwd,
        t_up=t_up,
        raw_weight=raw_weight,
        weight=curve.evaluate(raw_weight),
    )


def evaluate_weight(
    self_forward: VectorLike,
    self_up: VectorLike,
    ref_forward: VectorLike,
    ref_up: VectorLike,
    thresholds: AngleThresholds,
    curve: Curve,
) -> EvaluatedWeight:
    """뷰포인트 프레임과 레퍼런스 프레임의 forward/up 일치도 → 가중치."""
    return weight_from_angles(
        angle_between(self_forward, ref_forward),
        angle_between(self_up, ref_up),
        thresholds,
        curve,
    )
