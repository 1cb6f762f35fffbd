from __future__ import annotations
import bisect
from typing import Callable, Dict, Iterable, List, Tuple, Union

Ease = Callable[[float], float]

def ease_linear(t: float) -> float: return t
def ease_in_quad(t: float) -> float: return t * t
def ease_out_quad(t: float) -> float: return t * (2 - t)
def ease_in_out_quad(t: float) -> float: return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t
def ease_out_cubic(t: float) -> float: t = max(0.0, min(1.0, t)); return 1 - (1 - t) ** 3
def ease_in_out_cubic(t: float) -> float: return 4 * t * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2

def ease_out_bounce(t: float) -> float:
    n1, d1 = 7.5625, 2.75
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


EASINGS: Dict[str, Ease] = {
    "linear": ease_linear,
    "in_quad": ease_in_quad,
    "out_quad": ease_out_quad,
    "in_out_quad": ease_in_out_quad,
    "out_cubic": ease_out_cubic,
    "in_out_cubic": ease_in_out_cubic,
    "out_bounce": ease_out_bounce,
}


def get_ease(ease: Union[str, Ease, None]) -> Ease | None:
    """
    Resolve an easing given by name ("out_cubic") or pass a callable through.
    None stays None (the tween then uses raw progress).
    """
    if ease is None or callable(ease):
        return ease
    try:
        return EASINGS[str(ease).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown easing '{ease}' (known: {', '.join(sorted(EASINGS))})") from None


class KeyframeCurve:
    """
    Piecewise-linear curve through (time, value) keys, usable as a tween ease.

        curve = KeyframeCurve([(0.0, 0.0), (0.7, 1.1), (1.0, 1.0)])
        curve(0.35)  # -> 0.55

    Outside the key range the first/last value is held.
    """

    __slots__ = ("_times", "_values")

    def __init__(self, keys: Iterable[Tuple[float, float]]) -> None:
        pts = sorted((float(t), float(v)) for t, v in keys)
        if not pts:
            raise ValueError("KeyframeCurve needs at least one key")
        self._times: List[float] = [t for t, _ in pts]
        self._values: List[float] = [v for _, v in pts]

    def __call__(self, t: float) -> float:
        times, values = self._times, self._values
        if t <= times[0]:
            return values[0]
        if t >= times[-1]:
            return values[-1]
        i = bisect.bisect_right(times, t)
        t0, t1 = times[i - 1], times[i]
        if t1 == t0:
            return values[i]
        u = (t - t0) / (t1 - t0)
        return values[i - 1] + (values[i] - values[i - 1]) * u

    def __repr__(self) -> str:
        return f"KeyframeCurve({list(zip(self._times, self._values))!r})"
