"""Tests for the synchronous event bus."""

from restyle.events import EventBus, GenerationStarted, StylesReset


class TestSubscribe:
    def test_type_listener_receives_matching_events(self):
        bus = EventBus()
        received = []
        bus.subscribe(GenerationStarted, received.append)
        bus.emit(GenerationStarted(prompt="bauhaus"))
        bus.emit(StylesReset(previous_template=None))
        assert received == [GenerationStarted(prompt="bauhaus")]

    def test_listeners_called_in_registration_order(self):
        bus = EventBus()
        order = []
        bus.subscribe(GenerationStarted, lambda e: order.append("first"))
        bus.subscribe(GenerationStarted, lambda e: order.append("second"))
        bus.emit(GenerationStarted(prompt="x"))
        assert order == ["first", "second"]

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe(GenerationStarted, received.append)
        unsubscribe()
        unsubscribe()
        bus.emit(GenerationStarted(prompt="x"))
        assert received == []

    def test_emit_without_listeners(self):
        EventBus().emit(GenerationStarted(prompt="x"))


class TestOnAll:
    def test_global_listener_receives_everything(self):
        bus = EventBus()
        received = []
        bus.on_all(received.append)
        bus.emit(GenerationStarted(prompt="x"))
        bus.emit(StylesReset(previous_template="bauhaus"))
        assert [type(e) for e in received] == [GenerationStarted, StylesReset]

    def test_global_listeners_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(GenerationStarted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("global"))
        bus.emit(GenerationStarted(prompt="x"))
        assert order == ["global", "typed"]

    def test_unsubscribe_global(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.on_all(received.append)
        unsubscribe()
        bus.emit(GenerationStarted(prompt="x"))
        assert received == []

    def test_listener_may_unsubscribe_during_dispatch(self):
        bus = EventBus()
        received = []

        def once(event):
            received.append(event)
            remove()

        remove = bus.on_all(once)
        bus.emit(GenerationStarted(prompt="a"))
        bus.emit(GenerationStarted(prompt="b"))
        assert received == [GenerationStarted(prompt="a")]
