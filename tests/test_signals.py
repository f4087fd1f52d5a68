"""Unit tests for EventAddedSignal.

Run with: pytest tests/test_signals.py -v
"""

import pytest

from managing_events.signals import EventAddedSignal


class Recorder:
    def __init__(self):
        self.calls = []

    def handle(self, event, message):
        self.calls.append((event, message))


class TestEventAddedSignal:
    """Tests for subscription and fan-out."""

    def test_notify_calls_handler(self, event):
        signal = EventAddedSignal()
        recorder = Recorder()
        signal.subscribe(recorder.handle)
        assert signal.notify(sender=None, event=event, message="hello") == []
        assert recorder.calls == [(event, "hello")]

    def test_same_handler_subscribes_once(self, event):
        signal = EventAddedSignal()
        recorder = Recorder()
        signal.subscribe(recorder.handle)
        signal.subscribe(recorder.handle)
        signal.notify(sender=None, event=event, message="hello")
        assert len(recorder.calls) == 1

    def test_bound_method_can_be_unsubscribed(self, event):
        signal = EventAddedSignal()
        recorder = Recorder()
        signal.subscribe(recorder.handle)
        assert signal.unsubscribe(recorder.handle) is True
        signal.notify(sender=None, event=event, message="hello")
        assert recorder.calls == []

    def test_unsubscribe_unknown_handler(self):
        assert EventAddedSignal().unsubscribe(lambda evt, message: None) is False

    def test_notify_returns_subscriber_failures(self, event):
        signal = EventAddedSignal()
        error = ValueError("boom")

        def broken(evt, message):
            raise error

        signal.subscribe(broken)
        assert signal.notify(sender=None, event=event, message="hello") == [error]

    def test_non_callable_handler_is_rejected(self):
        with pytest.raises(TypeError):
            EventAddedSignal().subscribe("handler")  # type: ignore[arg-type]
