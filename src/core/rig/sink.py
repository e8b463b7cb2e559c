"""SourceWeightSink — 평가된 가중치를 컨스트레인트 슬롯에 기록

변화량이 epsilon을 넘을 때만 기록한다 (중복 쓰기 방지, 스무딩 아님).
"""

from dataclasses import replace

from src.config import WEIGHT_EPSILON
from src.core.logging import get_logger
from src.core.rig.constraint import PositionConstraint

logger = get_logger(__name__)

# 표현 가능한 최소 양의 float: 사실상 완전히 같은 값만 걸러낸다
DEFAULT_EPSILON = WEIGHT_EPSILON


class SourceWeightSink:
    """컨스트레인트 슬롯 하나에 대한 변경 감지 게이트"""

    def __init__(
        self,
        constraint: PositionConstraint,
        index: int,
        epsilon: float = DEFAULT_EPSILON,
    ) -> None:
        self._constraint = constraint
        self._index = index
        self._epsilon = epsilon
        self._weight: float = constraint.get_source(index).weight
        self._write_count = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def weight(self) -> float:
        """마지막으로 기록된 가중치"""
        return self._weight

    @property
    def write_count(self) -> int:
        return self._write_count

    def rebind(self, index: int) -> None:
        """슬롯 제거로 인덱스가 밀렸을 때 재연결"""
        self._index = index

    def apply(self, new_weight: float) -> bool:
        """|new - last| > epsilon 이면 기록 후 True, 아니면 no-op."""
        if abs(new_weight - self._weight) <= self._epsilon:
            return False

        self._weight = new_weight
        source = self._constraint.get_source(self._index)
        self._constraint.set_source(self._index, replace(source, weight=new_weight))
        self._write_count += 1
        logger.debug(f"소스 가중치 기록: index={self._index} weight={new_weight:.4f}")
        return True
