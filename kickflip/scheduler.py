from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from kickflip.tween import Tween

logger = logging.getLogger(__name__)


class TweenHandle:
    """ Returned by Scheduler.start(); cancel() stops the tween early. """

    __slots__ = ("tween", "_scheduler", "cancelled")

    def __init__(self, scheduler: "Scheduler", tween: Tween[Any]) -> None:
        self._scheduler = scheduler
        self.tween = tween
        self.cancelled = False

    @property
    def done(self) -> bool:
        return self.tween.is_terminal

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        self.tween.kill()
        self._scheduler._evict(self.tween)

    def __repr__(self) -> str:
        return f"<TweenHandle {self.tween.state.value} cancelled={self.cancelled}>"


class Scheduler:
    """
    Registry of running tweens, driven by the host loop:

      - start(tween) kills whatever tween already writes through the same
        setter, registers the new one and returns its handle
      - advance(dt) ticks every active tween once; call it once per frame
      - finished tweens (completed or killed) drop out on their own

    Create one per app and pass it to whatever starts tweens.
    """

    def __init__(self) -> None:
        # dict as an insertion-ordered identity set (Tween is eq=False)
        self._active: Dict[Tween[Any], TweenHandle] = {}

    # ----- registry -----------------------------------------------------------
    @property
    def active(self) -> Tuple[Tween[Any], ...]:
        return tuple(self._active)

    def is_active(self, tween: Tween[Any]) -> bool:
        return tween in self._active

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, tween: object) -> bool:
        return tween in self._active

    # ----- lifecycle ----------------------------------------------------------
    def start(self, tween: Tween[Any]) -> TweenHandle:
        if tween.is_terminal:
            raise ValueError(f"Cannot start a tween that already {tween.state.value}")
        if tween.handle is not None:
            raise ValueError("Tween is already running")

        # Snapshot first: kill() evicts through the finish hook while we scan.
        for other in tuple(self._active):
            if other.conflicts(tween):
                logger.debug("Tween on %r superseded by a newer one", other.setter)
                other.kill()
                self._active.pop(other, None)

        handle = TweenHandle(self, tween)
        self._active[tween] = handle
        tween._attach(handle, self._evict)
        return handle

    def advance(self, dt: float) -> None:
        """ Advance all running tweens by `dt` seconds of frame time. """
        for tween in tuple(self._active):
            handle = self._active.get(tween)
            if handle is None or handle.cancelled:
                continue
            tween.advance(dt)

    def kill_setter(self, setter: Callable[..., Any]) -> int:
        """ Kill every active tween writing through `setter`; returns how many. """
        doomed = [tw for tw in tuple(self._active) if tw.setter is setter]
        for tw in doomed:
            tw.kill()
        return len(doomed)

    def kill_all(self) -> None:
        for tw in tuple(self._active):
            tw.kill()
        self._active.clear()

    # ----- internals ----------------------------------------------------------
    def _evict(self, tween: Tween[Any]) -> Optional[TweenHandle]:
        return self._active.pop(tween, None)
