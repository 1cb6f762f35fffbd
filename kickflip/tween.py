from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from kickflip.scheduler import Scheduler, TweenHandle

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TweenState(Enum):
    PENDING = "pending"         # waiting out the start delay
    RUNNING = "running"
    COMPLETED = "completed"
    KILLED = "killed"


_TERMINAL = (TweenState.COMPLETED, TweenState.KILLED)
_PROGRESS_EPS = 1e-9


@dataclass(eq=False)
class Tween(Generic[T]):
    """
    One animation of a value from `start` to `end` over `duration` seconds.

    Every tick writes `lerp(start, end, ease(progress))` through `setter`.
    The setter's identity is what the scheduler uses to detect two tweens
    fighting over the same target, so pass the same callable each time
    (see kickflip.wrappers.setter_for).

    A failing ease/lerp/setter kills the tween instead of raising; the
    exception is kept on `error`. This only contains the damage, the target
    is left wherever the last good write put it.
    """
    setter: Callable[[T], Any]
    start: T
    end: T
    duration: float
    lerp: Callable[[T, T, float], T]
    delay: float = 0.0
    ease: Optional[Callable[[float], float]] = None
    on_complete: Optional[Callable[[], Any]] = None

    progress: float = field(default=0.0, init=False)
    state: TweenState = field(default=TweenState.PENDING, init=False)
    error: Optional[BaseException] = field(default=None, init=False, repr=False)
    _delay_left: float = field(default=0.0, init=False, repr=False)
    _handle: Optional["TweenHandle"] = field(default=None, init=False, repr=False)
    _finish_hooks: List[Callable[["Tween[T]"], None]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.delay < 0:
            raise ValueError(f"Tween delay must be >= 0 (got {self.delay})")
        self._delay_left = float(self.delay)

    # --- state ---------------------------------------------------------------
    @property
    def is_complete(self) -> bool:
        return self.progress >= 1.0

    @property
    def is_terminal(self) -> bool:
        return self.state in _TERMINAL

    @property
    def handle(self) -> Optional["TweenHandle"]:
        return self._handle

    def conflicts(self, other: "Tween[Any]") -> bool:
        return other.setter is self.setter

    # --- driving -------------------------------------------------------------
    def advance(self, dt: float) -> None:
        """
        Scheduler-facing frame step: burns the start delay first, then
        hands whatever is left of `dt` to tick().
        """
        if self.is_terminal:
            return
        dt = max(0.0, dt)
        if self.state is TweenState.PENDING:
            had_delay = self._delay_left > 0
            self._delay_left -= dt
            if self._delay_left > 0:
                return
            dt = -self._delay_left
            self._delay_left = 0.0
            self.state = TweenState.RUNNING
            if had_delay and dt <= 0:
                return
        self.tick(dt)

    def tick(self, dt: float) -> None:
        if self.is_terminal or self.is_complete:
            return
        if self.state is TweenState.PENDING:
            self.state = TweenState.RUNNING

        if self.duration <= 0:
            progress = 1.0
        else:
            progress = min(1.0, self.progress + max(0.0, dt) / self.duration)
            if 1.0 - progress < _PROGRESS_EPS:
                progress = 1.0  # frame times summing to duration, give or take rounding

        try:
            u = self.ease(progress) if self.ease is not None else progress
            self.setter(self.lerp(self.start, self.end, u))
        except Exception as exc:
            logger.warning("Tween on %r faulted at progress %.3f, killing it: %s", self.setter, progress, exc)
            self.error = exc
            self.kill()
            return

        # only committed once the write went through
        self.progress = progress
        if self.is_complete:
            self._finish(TweenState.COMPLETED)

    def kill(self) -> None:
        """ Stop this tween for good. No-op once it is completed or killed. """
        if self.is_terminal:
            return
        self._finish(TweenState.KILLED)
        if self._handle is not None:
            self._handle.cancel()

    def play(self, scheduler: "Scheduler") -> "TweenHandle":
        return scheduler.start(self)

    # --- internals -----------------------------------------------------------
    def _attach(self, handle: "TweenHandle", on_finish: Callable[["Tween[T]"], None]) -> None:
        self._handle = handle
        self._finish_hooks.append(on_finish)

    def _finish(self, state: TweenState) -> None:
        self.state = state
        hooks, self._finish_hooks = self._finish_hooks, []
        for hook in hooks:
            hook(self)
        if state is TweenState.COMPLETED and self.on_complete is not None:
            try:
                self.on_complete()
            except Exception:
                logger.warning("on_complete for tween on %r raised", self.setter, exc_info=True)
