"""WeightEvaluator — 뷰포인트 하나의 가중치 평가기

하나의 컨스트레인트 슬롯, 하나의 레퍼런스 프레임에 1:1로 바인딩된다.
호스트가 매 틱(위치/회전 갱신이 끝난 late 단계) tick()을 호출한다.
"""

from typing import Optional

from src.core.rig.calculations import evaluate_weight
from src.core.rig.curves import Curve, default_ease_curve
from src.core.rig.models import AngleThresholds, EvaluatedWeight, OrientationFrame
from src.core.rig.sink import SourceWeightSink


class WeightEvaluator:
    """forward/up 정렬도 기반 소스 가중치 평가기

    Args:
        name: 뷰포인트 이름
        frame: 뷰포인트(self) 프레임
        reference: 레퍼런스(카메라) 프레임
        sink: 결과를 기록할 슬롯 게이트
        thresholds: 각도 임계값. 미지정 시 기본값 (10/30, 30/60)
        curve: 이징 커브. 미지정 시 기본 ease 커브
    """

    def __init__(
        self,
        name: str,
        frame: OrientationFrame,
        reference: OrientationFrame,
        sink: SourceWeightSink,
        thresholds: Optional[AngleThresholds] = None,
        curve: Optional[Curve] = None,
    ) -> None:
        self.name = name
        self.frame = frame
        self._reference = reference
        self._sink = sink
        self.thresholds = thresholds or AngleThresholds()
        self.curve = curve or default_ease_curve()

    @property
    def reference(self) -> OrientationFrame:
        return self._reference

    def set_reference(self, reference: OrientationFrame) -> None:
        self._reference = reference

    @property
    def index(self) -> int:
        return self._sink.index

    @property
    def sink(self) -> SourceWeightSink:
        return self._sink

    @property
    def current_weight(self) -> float:
        """현재 슬롯 가중치 (읽기 전용)"""
        return self._sink.weight

    def evaluate(self) -> EvaluatedWeight:
        """현재 프레임 기준 가중치 계산. 부수효과 없음."""
        return evaluate_weight(
            self.frame.forward,
            self.frame.up,
            self._reference.forward,
            self._reference.up,
            self.thresholds,
            self.curve,
        )

    def tick(self) -> EvaluatedWeight:
        """평가 후 sink에 전달"""
        result = self.evaluate()
        result.written = self._sink.apply(result.weight)
        return result
