"""가중 평균 위치 컨스트레인트

소스 슬롯(프레임 + 가중치) 목록의 가중 평균 위치를 계산한다.
가중치 합이 1일 필요는 없다 — 정규화는 컨스트레인트가 한다.
"""

from typing import List

import numpy as np

from src.core.logging import get_logger
from src.core.rig.models import ConstraintSource, VectorLike, as_vector

logger = get_logger(__name__)


class PositionConstraint:
    """인덱스 기반 소스 슬롯을 가진 위치 컨스트레인트"""

    def __init__(
        self,
        translation_at_rest: VectorLike = (0.0, 0.0, 0.0),
        translation_offset: VectorLike = (0.0, 0.0, 0.0),
        weight: float = 1.0,
    ) -> None:
        self._sources: List[ConstraintSource] = []
        self.translation_at_rest = as_vector(translation_at_rest)
        self.translation_offset = as_vector(translation_offset)
        self.weight = weight
        self.constraint_active = False

    @property
    def source_count(self) -> int:
        return len(self._sources)

    @property
    def sources(self) -> List[ConstraintSource]:
        """소스 목록 사본 (읽기 전용 접근)"""
        return list(self._sources)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._sources):
            raise IndexError(
                f"Constraint source index out of range: {index} "
                f"(count={len(self._sources)})"
            )

    def add_source(self, source: ConstraintSource) -> int:
        """소스 추가. 새 슬롯 인덱스 반환."""
        self._sources.append(source)
        return len(self._sources) - 1

    def get_source(self, index: int) -> ConstraintSource:
        self._check_index(index)
        return self._sources[index]

    def set_source(self, index: int, source: ConstraintSource) -> None:
        self._check_index(index)
        self._sources[index] = source

    def remove_source(self, index: int) -> ConstraintSource:
        """소스 제거. 뒤쪽 슬롯 인덱스가 하나씩 당겨진다."""
        self._check_index(index)
        removed = self._sources.pop(index)
        logger.debug(f"컨스트레인트 소스 제거: index={index}")
        return removed

    def evaluate_position(self) -> np.ndarray:
        """블렌드된 위치.

        비활성 또는 가중치 합 0 → rest 위치.
        """
        if not self.constraint_active or not self._sources:
            return self.translation_at_rest.copy()

        weights = np.array([s.weight for s in self._sources], dtype=float)
        total = float(weights.sum())
        if total <= 0.0:
            return self.translation_at_rest.copy()

        positions = np.stack([s.source_frame.position for s in self._sources])
        blended = (weights[:, None] * positions).sum(axis=0) / total
        target = blended + self.translation_offset
        return self.translation_at_rest + (target - self.translation_at_rest) * self.weight
