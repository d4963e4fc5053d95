"""
Word pacing engine for rapid serial visual presentation.

PacerEngine turns a block of text into a queue of words and emits them one
at a time, at the configured WPM, to a display living on the consumer
context. A single background thread does the timing; everything it sends to
the consumer goes through a :class:`ConsumerHandler`.

Example usage:
    >>> engine = PacerEngine(display)
    >>> engine.set_text("Hello world. This is a test.")
    >>> engine.start()
    >>> engine.handler.run_until_stopped(timeout=10)
"""

from __future__ import annotations

import logging
import threading
import time
import weakref
from collections import deque
from typing import Any, Callable, Deque, Optional, Protocol, Tuple

from textspritzer.config import PacerSettings, get_settings
from textspritzer.models.enums import MessageKind, PlaybackState
from textspritzer.schemas.frame import PivotFrame, PivotStyle, ProgressUpdate

from .handler import ConsumerHandler
from .pivot import PivotLayout
from .segmenter import split_if_needed
from .timing import (
    DefaultDelayStrategy,
    DelayStrategy,
    calculate_word_delay_ms,
    estimate_reading_time_formatted,
)
from .tokenizer import tokenize


logger = logging.getLogger(__name__)


class WordDisplay(Protocol):
    """
    Consumer-owned surface that renders one word at a time.

    The character at ``padded_word[pivot_start:pivot_end]`` is highlighted
    using the engine's :attr:`PacerEngine.pivot_style`, which is fixed for
    the engine's lifetime and also carried by every frame from
    :meth:`PacerEngine.layout_word`.
    """

    def on_word_ready(self, padded_word: str, pivot_start: int, pivot_end: int) -> None:
        ...


OnCompletionListener = Callable[[], Any]


def _run_loop(engine_ref: "weakref.ref[PacerEngine]") -> None:
    """
    Body of the pacing thread.

    Only a weak reference to the engine is kept between ticks, so a
    discarded engine ends its loop instead of being kept alive by it.
    """
    engine = engine_ref()
    if engine is None:
        return
    logger.debug("Starting pacing loop with queue length %d", len(engine._word_queue))
    del engine

    while True:
        engine = engine_ref()
        if engine is None:
            logger.debug("Engine collected; stopping pacing loop")
            return

        try:
            if not engine._claim_tick():
                logger.debug("Stopping pacing loop")
                return
            displayed = engine.process_next_word()
            engine._finish_tick(displayed)
        except Exception:
            logger.exception("Pacing loop failed; stopping playback")
            engine._release_loop()
            return

        del engine


class PacerEngine:
    """
    Paces words from a text onto a display at a given WPM.

    Long words are split across consecutive ticks, every word is padded so
    its pivot character stays in a fixed column, and each word is held for
    ``60000 // wpm`` milliseconds times the delay strategy's multiplier.

    The consumer context calls :meth:`set_text`, :meth:`start`,
    :meth:`pause` and the setters; the pacing thread is the only one that
    advances the queue while playing.
    """

    def __init__(
        self,
        display: Optional[WordDisplay] = None,
        *,
        settings: Optional[PacerSettings] = None,
        delay_strategy: Optional[DelayStrategy] = None,
        handler: Optional[ConsumerHandler] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize the engine.

        Args:
            display: Target receiving ``on_word_ready`` calls.
            settings: Pacing settings; defaults to :func:`get_settings`.
            delay_strategy: Multiplier policy; defaults to one delay per word.
            handler: Hand-off to the consumer context; a queue-backed
                :class:`ConsumerHandler` by default.
            sleep: Blocking sleep taking seconds, used between words.
        """
        self.settings = settings or get_settings()
        self._display = display
        self._delay_strategy: DelayStrategy = delay_strategy or DefaultDelayStrategy()
        self._sleep = sleep
        self.pivot_style = PivotStyle(color=self.settings.pivot_color)
        self._layout = PivotLayout(self.settings.chars_left_of_pivot, style=self.pivot_style)

        self._handler = handler or ConsumerHandler()
        self._handler.bind(self)

        self._word_array: Optional[Tuple[str, ...]] = None
        self._word_queue: Deque[str] = deque()
        self._current_index = 0
        self._last_word: Optional[str] = None
        self._wpm = self.settings.default_wpm

        self._progress_observer: Optional[Any] = None
        self._on_completion: Optional[OnCompletionListener] = None

        # Guards playback flags, wpm and the queue/index pair
        self._lock = threading.RLock()
        self._state = PlaybackState.IDLE
        self._play_requested = False
        self._loop_alive = False
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def handler(self) -> ConsumerHandler:
        return self._handler

    @property
    def wpm(self) -> int:
        with self._lock:
            return self._wpm

    def set_words_per_minute(self, wpm: int) -> None:
        """
        Set the target words-per-minute rate, effective on the next word.

        Non-positive rates are ignored.
        """
        if wpm <= 0:
            logger.warning("Ignoring non-positive WPM %s", wpm)
            return
        with self._lock:
            self._wpm = wpm

    def set_delay_strategy(self, strategy: Optional[DelayStrategy]) -> None:
        """Replace the delay strategy; None restores the default."""
        with self._lock:
            self._delay_strategy = strategy or DefaultDelayStrategy()

    def attach_progress_observer(self, observer: Optional[Any]) -> None:
        """
        Attach an observer receiving ``(current, total)`` progress updates.

        The observer is either a callable or an object with an
        ``update(current, total)`` method. Exceptions it raises are logged
        and never reach the pacing loop.
        """
        self._progress_observer = observer

    def set_on_completion_listener(self, listener: Optional[OnCompletionListener]) -> None:
        """Set a callable invoked once each time the text is read to the end."""
        self._on_completion = listener

    def swap_display(self, display: Optional[WordDisplay]) -> bool:
        """
        Swap the display target, e.g. after the host view was re-created.

        Only allowed while not playing; the last shown word is rendered on
        the new target right away.

        Returns:
            True if the display was swapped.
        """
        with self._lock:
            if self.is_playing:
                logger.warning("Refusing to swap display while playing")
                return False
            self._display = display
            last_word = self._last_word
            if last_word is None and self._word_array:
                last_word = self._word_array[-1]

        if last_word is not None:
            self._print_word(self.layout_word(last_word))
        return True

    # ------------------------------------------------------------------
    # Text and playback control
    # ------------------------------------------------------------------

    def set_text(self, text: str) -> None:
        """
        Prepare to pace the given text. Call :meth:`start` to begin display.

        Replaces the previous words, queue and progress.
        """
        words = tokenize(text)
        with self._lock:
            self._word_array = words
            self._last_word = None
            self._refill_word_queue()
            progress = self._progress_snapshot()

        logger.debug("Loaded text with %d words", len(words))
        self._publish_progress(progress)

    def start(self) -> bool:
        """
        Start or resume displaying the text given to :meth:`set_text`.

        A no-op while already playing, before any text was set, when the
        text has no words, or while a paused loop is still holding the last
        word (that tick completes the text).

        Returns:
            True if playback was requested.
        """
        with self._lock:
            if self._state in (PlaybackState.PLAY_REQUESTED, PlaybackState.PLAYING):
                return False
            if not self._word_array:
                logger.debug("start() ignored: no words to display")
                return False
            if self._wpm <= 0:
                logger.warning("start() ignored: WPM is %s", self._wpm)
                return False
            paused_on_last_word = (
                self._state is PlaybackState.PAUSED
                and not self._word_queue
                and self._loop_alive
            )
            if paused_on_last_word:
                # The paused final tick completes the text once its delay ends
                logger.debug("start() ignored: final word still on screen")
                return False

            refilled = not self._word_queue
            if refilled:
                self._refill_word_queue()
                progress = self._progress_snapshot()

            self._play_requested = True
            self._state = PlaybackState.PLAY_REQUESTED
            self._start_loop()

        if refilled:
            self._publish_progress(progress)
        return True

    def pause(self) -> None:
        """
        Stop after the word currently on screen.

        The in-flight word keeps its full delay; the loop exits when it next
        checks the play flag.
        """
        with self._lock:
            self._play_requested = False
            if self._state in (PlaybackState.PLAY_REQUESTED, PlaybackState.PLAYING):
                self._state = PlaybackState.PAUSED

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the pacing thread has exited.

        Returns:
            True if no pacing thread is running.
        """
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return not self.loop_alive

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def word_array(self) -> Optional[Tuple[str, ...]]:
        return self._word_array

    @property
    def word_queue(self) -> Tuple[str, ...]:
        """Snapshot of the words still to be displayed."""
        with self._lock:
            return tuple(self._word_queue)

    @property
    def state(self) -> PlaybackState:
        with self._lock:
            return self._state

    @property
    def is_playing(self) -> bool:
        with self._lock:
            return self._state in (PlaybackState.PLAY_REQUESTED, PlaybackState.PLAYING)

    @property
    def loop_alive(self) -> bool:
        with self._lock:
            return self._loop_alive

    @property
    def current_index(self) -> int:
        with self._lock:
            return self._current_index

    @property
    def total_words(self) -> int:
        return len(self._word_array or ())

    @property
    def last_word(self) -> Optional[str]:
        """The segment most recently sent to the display."""
        with self._lock:
            return self._last_word

    def layout_word(self, word: str) -> PivotFrame:
        """Lay out ``word`` the way this engine sends it to the display."""
        return self._layout.layout(word)

    @property
    def progress(self) -> ProgressUpdate:
        with self._lock:
            return self._progress_snapshot()

    def minutes_remaining(self) -> int:
        """Whole minutes left in the queue at the current rate."""
        with self._lock:
            if not self._word_queue:
                return 0
            return len(self._word_queue) // self._wpm

    def time_remaining_formatted(self) -> str:
        """Remaining reading time as a string like "3 min" or "1 hr 5 min"."""
        with self._lock:
            return estimate_reading_time_formatted(len(self._word_queue), self._wpm)

    # ------------------------------------------------------------------
    # Pacing loop
    # ------------------------------------------------------------------

    def process_next_word(self) -> bool:
        """
        Display the head of the queue and hold it for its delay.

        A word longer than the display limit is split: its first segment is
        shown now and the rest goes back to the head of the queue for the
        next tick. Runs on the pacing thread, since it sleeps.

        Returns:
            True if a word was displayed.
        """
        with self._lock:
            if not self._word_queue:
                word = None
            else:
                word = self._word_queue.popleft()
                self._current_index += 1

                word, remainder = split_if_needed(
                    word,
                    self.settings.max_word_length,
                    break_at_hyphens=self.settings.break_at_hyphens,
                )
                if remainder is not None:
                    self._word_queue.appendleft(remainder)
                    # The remainder is the same source word
                    self._current_index -= 1

                self._last_word = word
                wpm = self._wpm
                strategy = self._delay_strategy

        if word is None:
            self.update_progress()
            return False

        self._handler.post(MessageKind.WORD_READY, self.layout_word(word))

        delay_ms = calculate_word_delay_ms(wpm, strategy.delay_multiplier(word))
        try:
            self._sleep(delay_ms / 1000)
        except InterruptedError:
            logger.info("Delay for %r interrupted; continuing", word)

        self.update_progress()
        return True

    def update_progress(self) -> None:
        """Post the current progress to the consumer context."""
        with self._lock:
            progress = self._progress_snapshot()
        self._handler.post(MessageKind.PROGRESS, progress)

    def _start_loop(self) -> None:
        # Caller holds self._lock: the check and the set are one step
        if self._loop_alive:
            logger.debug("Pacing loop already running; re-armed")
            return
        self._loop_alive = True
        self._thread = threading.Thread(
            target=_run_loop,
            args=(weakref.ref(self),),
            name=self.settings.loop_thread_name,
            daemon=True,
        )
        self._thread.start()

    def _claim_tick(self) -> bool:
        with self._lock:
            if not self._play_requested:
                self._release_loop()
                return False
            self._state = PlaybackState.PLAYING
            return True

    def _finish_tick(self, displayed: bool) -> None:
        with self._lock:
            if self._word_queue:
                return
            self._play_requested = False
            self._state = PlaybackState.IDLE

        if displayed:
            logger.debug("Queue is empty after processing; completing")
            self._handler.post(MessageKind.COMPLETE)

    def _release_loop(self) -> None:
        with self._lock:
            self._loop_alive = False
            self._play_requested = False
            self._state = PlaybackState.IDLE

    def _refill_word_queue(self) -> None:
        self._current_index = 0
        self._word_queue.clear()
        self._word_queue.extend(self._word_array or ())

    def _progress_snapshot(self) -> ProgressUpdate:
        total = len(self._word_array or ())
        current = min(max(self._current_index, 0), total)
        return ProgressUpdate(current=current, total=total)

    # ------------------------------------------------------------------
    # Consumer-context callbacks (run by the handler)
    # ------------------------------------------------------------------

    def _print_word(self, frame: PivotFrame) -> None:
        display = self._display
        if display is None:
            return
        try:
            display.on_word_ready(frame.padded_word, frame.pivot_start, frame.pivot_end)
        except Exception:
            logger.exception("Display failed to render %r", frame.word)

    def _publish_progress(self, progress: ProgressUpdate) -> None:
        observer = self._progress_observer
        if observer is None:
            return
        try:
            if callable(observer):
                observer(progress.current, progress.total)
            else:
                observer.update(progress.current, progress.total)
        except Exception:
            logger.exception("Progress observer failed")

    def _notify_completion(self) -> None:
        listener = self._on_completion
        if listener is None:
            return
        try:
            listener()
        except Exception:
            logger.exception("Completion listener failed")
