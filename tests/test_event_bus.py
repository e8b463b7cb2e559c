"""EventBus 테스트"""

from src.core.event_bus import MAX_DEPTH, EventBus, RigEvent


class TestSubscribeEmit:
    def test_basic_emit(self):
        bus = EventBus()
        received = []
        bus.subscribe("test_event", lambda e: received.append(e))
        bus.emit(RigEvent(event_type="test_event", data={"index": 1}, source="Front"))
        assert len(received) == 1
        assert received[0].data["index"] == 1

    def test_multiple_handlers_in_order(self):
        bus = EventBus()
        results = []
        bus.subscribe("evt", lambda e: results.append("a"))
        bus.subscribe("evt", lambda e: results.append("b"))
        bus.emit(RigEvent(event_type="evt", data={}, source="test"))
        assert results == ["a", "b"]

    def test_no_handlers(self):
        """구독자 없는 이벤트 발행 — 에러 없이 무시"""
        bus = EventBus()
        bus.emit(RigEvent(event_type="no_one_listens", data={}, source="test"))

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        handler = lambda e: received.append(e)  # noqa: E731
        bus.subscribe("evt", handler)
        bus.unsubscribe("evt", handler)
        bus.emit(RigEvent(event_type="evt", data={}, source="test"))
        assert received == []

    def test_unsubscribe_nonexistent(self):
        """미등록 핸들러 해제 — 경고만, 에러 없음"""
        bus = EventBus()
        bus.subscribe("evt", lambda e: None)
        bus.unsubscribe("evt", lambda e: None)
        assert bus.handler_count == 1


class TestChainGuards:
    def test_max_depth_prevents_infinite_loop(self):
        bus = EventBus()
        call_count = 0

        def recursive_handler(event: RigEvent):
            nonlocal call_count
            call_count += 1
            bus.emit(
                RigEvent(event_type="chain", data={}, source=f"handler_{call_count}")
            )

        bus.subscribe("chain", recursive_handler)
        bus.emit(RigEvent(event_type="chain", data={}, source="origin"))
        assert call_count == MAX_DEPTH

    def test_duplicate_in_chain_blocked(self):
        bus = EventBus()
        received = []
        bus.subscribe("evt", lambda e: received.append(e))
        bus.emit(RigEvent(event_type="evt", data={}, source="Front"))
        bus.emit(RigEvent(event_type="evt", data={}, source="Front"))
        assert len(received) == 1

    def test_reset_chain_allows_reemit(self):
        bus = EventBus()
        received = []
        bus.subscribe("evt", lambda e: received.append(e))
        bus.emit(RigEvent(event_type="evt", data={}, source="Front"))
        bus.reset_chain()
        bus.emit(RigEvent(event_type="evt", data={}, source="Front"))
        assert len(received) == 2

    def test_handler_exception_isolated(self):
        bus = EventBus()
        received = []

        def broken(event: RigEvent):
            raise RuntimeError("boom")

        bus.subscribe("evt", broken)
        bus.subscribe("evt", lambda e: received.append(e))
        bus.emit(RigEvent(event_type="evt", data={}, source="test"))
        assert len(received) == 1

    def test_clear(self):
        bus = EventBus()
        bus.subscribe("evt", lambda e: None)
        bus.clear()
        assert bus.handler_count == 0


class TestDispatching:
    def test_true_only_inside_handler(self):
        bus = EventBus()
        seen = []
        bus.subscribe("evt", lambda e: seen.append(bus.dispatching))
        assert bus.dispatching is False
        bus.emit(RigEvent(event_type="evt", data={}, source="test"))
        assert seen == [True]
        assert bus.dispatching is False
