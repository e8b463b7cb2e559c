"""호스트 모듈 기반 인터페이스"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class TickContext:
    """매 틱 모듈에 전달되는 호스트 상태"""

    tick: int
    delta_time: float = 0.0

    # 모듈이 추가 데이터를 넣을 수 있는 확장 슬롯
    extra: Dict[str, Any] = field(default_factory=dict)


class HostModule(ABC):
    """호스트 스케줄러가 구동하는 모듈 인터페이스

    규칙:
    - 코어는 타이머/루프를 갖지 않는다. 틱은 호스트가 구동한다
    - on_tick: 일반 갱신 단계 (위치/회전 변경)
    - on_late_tick: 모든 on_tick 이후 단계 (변경이 끝난 프레임을 읽는다)
    - 모듈 간 통신은 EventBus를 경유한다
    """

    _enabled: bool

    def __init__(self) -> None:
        self._enabled = False

    @property
    @abstractmethod
    def name(self) -> str:
        """모듈 고유 이름 (예: 'viewpoint_rig')"""
        ...

    @property
    def dependencies(self) -> List[str]:
        """이 모듈이 의존하는 다른 모듈 이름 목록"""
        return []

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @abstractmethod
    def on_enable(self) -> None: ...

    @abstractmethod
    def on_disable(self) -> None: ...

    @abstractmethod
    def on_tick(self, context: TickContext) -> None:
        """매 틱 일반 갱신 단계"""
        ...

    @abstractmethod
    def on_late_tick(self, context: TickContext) -> None:
        """매 틱 후반 단계. 전 모듈의 on_tick 이후 호출."""
        ...
