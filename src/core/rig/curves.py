"""이징 커브

정규화 입력 [0,1] → 출력 매핑. 평가기는 커브를 블랙박스로 취급한다.
단조성은 강제하지 않는다.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from src.config import settings
from src.core.logging import get_logger

logger = get_logger(__name__)


class Curve(ABC):
    """evaluate(x) -> y 단일 연산 인터페이스"""

    @abstractmethod
    def evaluate(self, x: float) -> float: ...

    def __call__(self, x: float) -> float:
        return self.evaluate(x)


class LinearCurve(Curve):
    """항등 커브"""

    def evaluate(self, x: float) -> float:
        return float(x)


@dataclass(frozen=True)
class Keyframe:
    """커브 키 (time, value) + 진입/진출 탄젠트"""

    time: float
    value: float
    in_tangent: float = 0.0
    out_tangent: float = 0.0


class KeyframeCurve(Curve):
    """키프레임 기반 cubic Hermite 커브.

    키 범위 밖은 양 끝 값으로 클램프.
    탄젠트는 구간 폭으로 스케일된다.
    """

    def __init__(self, keys: Sequence[Keyframe]) -> None:
        if not keys:
            raise ValueError("KeyframeCurve requires at least one key")
        self._keys: Tuple[Keyframe, ...] = tuple(sorted(keys, key=lambda k: k.time))

    @property
    def keys(self) -> Tuple[Keyframe, ...]:
        return self._keys

    def evaluate(self, x: float) -> float:
        keys = self._keys
        if len(keys) == 1:
            return keys[0].value
        if x <= keys[0].time:
            return keys[0].value
        if x >= keys[-1].time:
            return keys[-1].value

        for left, right in zip(keys, keys[1:]):
            if x <= right.time:
                break

        dt = right.time - left.time
        if dt <= 0.0:
            return right.value
        t = (x - left.time) / dt
        t2 = t * t
        t3 = t2 * t

        h00 = 2 * t3 - 3 * t2 + 1
        h10 = t3 - 2 * t2 + t
        h01 = -2 * t3 + 3 * t2
        h11 = t3 - t2
        return float(
            h00 * left.value
            + h10 * dt * left.out_tangent
            + h01 * right.value
            + h11 * dt * right.in_tangent
        )


class PiecewiseLinearCurve(Curve):
    """(x, y) 제어점 사이 선형 보간. 범위 밖은 클램프."""

    def __init__(self, points: Sequence[Tuple[float, float]]) -> None:
        if not points:
            raise ValueError("PiecewiseLinearCurve requires at least one point")
        ordered = sorted(points)
        self._xs = np.array([p[0] for p in ordered], dtype=float)
        self._ys = np.array([p[1] for p in ordered], dtype=float)

    def evaluate(self, x: float) -> float:
        return float(np.interp(x, self._xs, self._ys))


class LookupTableCurve(Curve):
    """[0,1] 균등 간격 샘플 테이블"""

    def __init__(self, samples: Sequence[float]) -> None:
        if len(samples) < 2:
            raise ValueError("LookupTableCurve requires at least two samples")
        self._samples = np.asarray(samples, dtype=float)
        self._xs = np.linspace(0.0, 1.0, len(self._samples))

    @classmethod
    def bake(cls, curve: Curve, resolution: int = 64) -> "LookupTableCurve":
        """다른 커브를 resolution개 샘플로 굽는다."""
        xs = np.linspace(0.0, 1.0, resolution)
        return cls([curve.evaluate(float(x)) for x in xs])

    def evaluate(self, x: float) -> float:
        return float(np.interp(x, self._xs, self._samples))


def default_ease_curve() -> KeyframeCurve:
    """기본 ease in/out: (0,0) → (1,1), 탄젠트 0 (smoothstep)"""
    return KeyframeCurve([Keyframe(0.0, 0.0, 0.0, 0.0), Keyframe(1.0, 1.0, 0.0, 0.0)])


def get_curve(name: Optional[str] = None) -> Curve:
    """이름으로 커브 생성.

    Args:
        name: "ease" | "linear". 미지정 시 config의 RIG_EASE_CURVE 사용.

    Returns:
        Curve 인스턴스. 알 수 없는 이름은 ease 커브로 대체.
    """
    curve_name = name or settings.RIG_EASE_CURVE

    if curve_name == "ease":
        return default_ease_curve()

    if curve_name == "linear":
        return LinearCurve()

    logger.warning("Unknown curve '%s', falling back to ease curve", curve_name)
    return default_ease_curve()
