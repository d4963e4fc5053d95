"""Tests for the hand-off between the pacing thread and the consumer."""

import gc
import threading

import pytest

from textspritzer.config import PacerSettings
from textspritzer.models.enums import MessageKind
from textspritzer.schemas.frame import PivotFrame
from textspritzer.services.pacer.engine import PacerEngine
from textspritzer.services.pacer.handler import ConsumerHandler, DirectHandler, Message


def _frame(word):
    return PivotFrame(word=word, padded_word=word, pivot_start=0, pivot_end=1)


@pytest.fixture
def handler():
    return ConsumerHandler()


@pytest.fixture
def engine(display, handler):
    return PacerEngine(display, settings=PacerSettings(), handler=handler)


class TestConsumerHandler:
    """Tests for the queue-backed handler."""

    def test_messages_wait_for_drain(self, engine, handler, display):
        handler.post(MessageKind.WORD_READY, _frame("one"))
        assert display.frames == []
        assert handler.pending == 1

        assert handler.drain() == 1
        assert display.frames == [("one", 0, 1)]
        assert handler.pending == 0

    def test_drain_preserves_order(self, engine, handler, display):
        for word in ("one", "two", "three"):
            handler.post(MessageKind.WORD_READY, _frame(word))

        assert handler.drain() == 3
        assert display.words == ["one", "two", "three"]

    def test_drain_runs_on_calling_thread(self, engine, handler, display):
        poster = threading.Thread(
            target=handler.post, args=(MessageKind.WORD_READY, _frame("one"))
        )
        poster.start()
        poster.join(timeout=5)

        handler.drain()
        assert display.threads == [threading.get_ident()]

    def test_drain_timeout_on_empty_inbox(self, engine, handler):
        assert handler.drain(timeout=0.01) == 0

    def test_messages_dropped_after_engine_is_gone(self, display):
        handler = ConsumerHandler()
        engine = PacerEngine(display, settings=PacerSettings(), handler=handler)
        handler.post(MessageKind.WORD_READY, _frame("one"))

        del engine
        gc.collect()

        assert handler.engine is None
        assert handler.drain() == 1
        assert display.frames == []

    def test_unbound_handler_drops_messages(self):
        handler = ConsumerHandler()
        handler.post(MessageKind.COMPLETE)
        assert handler.drain() == 1

    def test_unexpected_kind_fails_fast(self, engine, handler):
        handler.post("bogus")
        with pytest.raises(AssertionError):
            handler.drain()

    def test_run_until_stopped_without_loop(self, engine, handler, display):
        handler.post(MessageKind.WORD_READY, _frame("one"))
        assert handler.run_until_stopped(timeout=1) is True
        assert display.words == ["one"]


class TestDirectHandler:
    """Tests for the immediate handler."""

    def test_post_executes_immediately(self, display):
        handler = DirectHandler()
        engine = PacerEngine(display, settings=PacerSettings(), handler=handler)

        handler.post(MessageKind.WORD_READY, _frame("now"))

        assert display.words == ["now"]
        assert handler.pending == 0
        assert handler.engine is engine


def test_message_defaults():
    message = Message(MessageKind.COMPLETE)
    assert message.payload is None
