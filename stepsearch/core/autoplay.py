# stepsearch/core/autoplay.py
# Driver for the step engines: manual single steps plus a timer-style auto-play.
from __future__ import annotations
import logging
import time
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

StepFn = Callable[[Any], Any]


class AutoPlayer:
    """
    Owns one session and re-invokes `step` every `interval_s` seconds while playing.

    Nothing runs in the background: a presenter calls tick() whenever it gets
    control (a UI rerun, a loop iteration). Cancelling is just pause(); there is
    never a step in flight. Playback stops by itself once the session cannot
    step any more (goal found, frontier exhausted, or idle).
    """

    def __init__(self, session, step: StepFn, interval_s: float, clock: Callable[[], float] = time.monotonic):
        if interval_s < 0:
            raise ValueError(f"interval_s must be >= 0, got {interval_s}")
        self.session = session
        self.step = step
        self.interval_s = float(interval_s)
        self.clock = clock
        self._playing = False
        self._last_tick: Optional[float] = None

    @property
    def playing(self) -> bool:
        return self._playing

    def play(self) -> None:
        if not self.session.can_step:
            return
        self._playing = True
        # first automatic step waits one full interval, like a fresh timer
        self._last_tick = self.clock()

    def pause(self) -> None:
        self._playing = False
        self._last_tick = None

    def toggle(self) -> bool:
        if self._playing:
            self.pause()
        else:
            self.play()
        return self._playing

    def replace_session(self, session) -> None:
        """Swap in a new session (reset, new settings); playback stops."""
        self.pause()
        self.session = session

    def step_once(self):
        """Manual step. Ignored while auto-play is running."""
        if not self._playing:
            self.session = self.step(self.session)
        return self.session

    def seconds_until_due(self, now: Optional[float] = None) -> float:
        if not self._playing or self._last_tick is None:
            return 0.0
        now = self.clock() if now is None else now
        return max(0.0, self.interval_s - (now - self._last_tick))

    def tick(self, now: Optional[float] = None) -> bool:
        """Step if playing and the interval has elapsed. Returns True when a step ran."""
        if not self._playing:
            return False
        if not self.session.can_step:
            self.pause()
            return False
        now = self.clock() if now is None else now
        if self._last_tick is not None and now - self._last_tick < self.interval_s:
            return False
        self.session = self.step(self.session)
        self._last_tick = now
        if not self.session.can_step:
            logger.debug("auto-play stopped after step %d", self.session.steps)
            self.pause()
        return True

    def run(self, sleep: Callable[[float], None] = time.sleep, max_ticks: Optional[int] = None) -> int:
        """Blocking playback until the session stops or max_ticks steps ran. Returns steps run."""
        self.play()
        ran = 0
        while self._playing and (max_ticks is None or ran < max_ticks):
            wait = self.seconds_until_due()
            if wait > 0:
                sleep(wait)
            if self.tick():
                ran += 1
        self.pause()
        return ran
