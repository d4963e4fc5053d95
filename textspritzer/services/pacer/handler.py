"""
Hand-off of pacing events from the background loop to the consumer.

The loop thread only ever posts messages; the consumer context (a UI loop,
or whatever thread calls :meth:`ConsumerHandler.drain`) executes them, so
display state is only touched on the consumer's own thread. The handler
holds a weak reference to its engine and drops messages once the engine has
been torn down.
"""

from __future__ import annotations

import logging
import queue
import time
import weakref
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

from textspritzer.models.enums import MessageKind

if TYPE_CHECKING:
    from .engine import PacerEngine


logger = logging.getLogger(__name__)


class Message(NamedTuple):
    kind: MessageKind
    payload: Any = None


class ConsumerHandler:
    """
    Queue-backed message handler drained on the consumer context.

    Messages are executed in the order they were posted. Call
    :meth:`drain` from the consumer's loop (e.g. a UI idle callback), or
    :meth:`run_until_stopped` to pump until playback ends.
    """

    def __init__(self) -> None:
        self._inbox: "queue.SimpleQueue[Message]" = queue.SimpleQueue()
        self._engine_ref: Optional[weakref.ref[PacerEngine]] = None

    def bind(self, engine: PacerEngine) -> None:
        """Attach to ``engine`` without keeping it alive."""
        self._engine_ref = weakref.ref(engine)

    @property
    def engine(self) -> Optional[PacerEngine]:
        if self._engine_ref is None:
            return None
        return self._engine_ref()

    @property
    def pending(self) -> int:
        """Approximate number of undelivered messages."""
        return self._inbox.qsize()

    def post(self, kind: MessageKind, payload: Any = None) -> None:
        """Queue a message for the consumer context. Safe from any thread."""
        self._inbox.put(Message(kind, payload))

    def drain(self, timeout: Optional[float] = None) -> int:
        """
        Execute every queued message on the calling thread.

        Args:
            timeout: Seconds to wait for a first message when the inbox is
                empty. None or 0 returns immediately.

        Returns:
            Number of messages taken from the inbox.
        """
        handled = 0

        if timeout:
            try:
                message = self._inbox.get(timeout=timeout)
            except queue.Empty:
                return 0
            self.handle_message(message)
            handled += 1

        while True:
            try:
                message = self._inbox.get_nowait()
            except queue.Empty:
                return handled
            self.handle_message(message)
            handled += 1

    def run_until_stopped(self, timeout: float, poll_interval: float = 0.01) -> bool:
        """
        Pump messages until the engine's loop has exited and the inbox is empty.

        Returns:
            True if playback stopped within ``timeout`` seconds.
        """
        deadline = time.monotonic() + timeout

        while True:
            self.drain(timeout=poll_interval)
            engine = self.engine
            if engine is None or not engine.loop_alive:
                # Messages posted just before the loop exited
                self.drain()
                return True
            if time.monotonic() >= deadline:
                return False

    def handle_message(self, message: Message) -> None:
        engine = self.engine
        if engine is None:
            logger.debug("Engine gone; dropping %s message", message.kind)
            return

        if message.kind is MessageKind.WORD_READY:
            engine._print_word(message.payload)
        elif message.kind is MessageKind.PROGRESS:
            engine._publish_progress(message.payload)
        elif message.kind is MessageKind.COMPLETE:
            engine._notify_completion()
        else:
            logger.error("Unexpected message kind=%r", message.kind)
            if __debug__:
                raise AssertionError(f"Unexpected message kind={message.kind!r}")


class DirectHandler(ConsumerHandler):
    """
    Handler that executes messages immediately on the posting thread.

    For hosts without an event loop of their own (scripts, terminals);
    the display is then driven from the pacing thread.
    """

    def post(self, kind: MessageKind, payload: Any = None) -> None:
        self.handle_message(Message(kind, payload))
