"""
Fixtures for pacing engine tests.

Engines get an injected sleep so tests never wait on real delays; the
gated variant blocks the pacing thread until the test releases it.
"""

import threading

import pytest

from textspritzer.config import PacerSettings
from textspritzer.services.pacer import ConsumerHandler, PacerEngine


class RecordingDisplay:
    """Display stub recording every word it is asked to render."""

    def __init__(self):
        self.frames = []
        self.threads = []

    def on_word_ready(self, padded_word, pivot_start, pivot_end):
        self.frames.append((padded_word, pivot_start, pivot_end))
        self.threads.append(threading.get_ident())

    @property
    def words(self):
        return [padded.strip() for padded, _, _ in self.frames]


class RecordingSleep:
    """Sleep stub that returns immediately and remembers each call."""

    def __init__(self):
        self.calls = []
        self.threads = set()

    def __call__(self, seconds):
        self.calls.append(seconds)
        self.threads.add(threading.get_ident())


class GatedSleep(RecordingSleep):
    """Sleep stub that blocks until the test calls release()."""

    def __init__(self):
        super().__init__()
        self._entered = threading.Semaphore(0)
        self._released = threading.Semaphore(0)

    def __call__(self, seconds):
        super().__call__(seconds)
        self._entered.release()
        if not self._released.acquire(timeout=5):
            raise RuntimeError("sleep was never released")

    def wait_entered(self, timeout=5):
        assert self._entered.acquire(timeout=timeout), "pacing loop never slept"

    def release(self, count=1):
        for _ in range(count):
            self._released.release()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def gated_sleep():
    sleep = GatedSleep()
    yield sleep
    # Unblock a loop left sleeping by a failed test
    sleep.release(100)


@pytest.fixture
def make_engine(display):
    """Factory building engines with a queue handler and test settings."""
    engines = []

    def _make(sleep, **kwargs):
        kwargs.setdefault("settings", PacerSettings())
        kwargs.setdefault("handler", ConsumerHandler())
        engine = PacerEngine(display, sleep=sleep, **kwargs)
        engines.append(engine)
        return engine

    yield _make

    for engine in engines:
        engine.pause()
        engine.wait(timeout=5)
