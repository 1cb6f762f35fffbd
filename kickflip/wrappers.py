from __future__ import annotations
import weakref
from typing import Any, Callable, Dict, Optional, Union

import pygame

from kickflip.easing import Ease, get_ease
from kickflip.lerp import lerp_color, lerp_number, lerp_vector
from kickflip.scheduler import Scheduler, TweenHandle
from kickflip.tween import Tween

# id(target) -> {attr: setter}; a finalizer drops the entry with the target
_setters: Dict[int, Dict[str, Callable[[Any], None]]] = {}


def setter_for(obj: Any, attr: str) -> Callable[[Any], None]:
    """
    Return the one setter that writes `obj.<attr>`.

    Repeated calls hand back the same function object, so two tweens on the
    same attribute conflict and the newer one wins. Targets are told apart
    by identity, so equal (or unhashable) objects each get their own setter.
    The target is held weakly; writing after it was collected raises
    ReferenceError (which the tween turns into a kill).
    """
    key = id(obj)
    per_obj = _setters.get(key)
    if per_obj is None:
        per_obj = _setters[key] = {}
        weakref.finalize(obj, _setters.pop, key, None)
    fn = per_obj.get(attr)
    if fn is None:
        ref = weakref.ref(obj)

        def _set(value: Any) -> None:
            target = ref()
            if target is None:
                raise ReferenceError(f"tween target for '{attr}' no longer exists")
            setattr(target, attr, value)

        _set.__qualname__ = f"setter_for.<{type(obj).__name__}.{attr}>"
        fn = per_obj[attr] = _set
    return fn


def tween_attr(
    scheduler: Scheduler,
    obj: Any,
    attr: str,
    end: Any,
    duration: float,
    *,
    lerp: Callable[[Any, Any, float], Any] = lerp_number,
    start: Any = None,
    delay: float = 0.0,
    ease: Union[str, Ease, None] = None,
    on_complete: Optional[Callable[[], Any]] = None,
) -> TweenHandle:
    """ Animate `obj.<attr>` from its current value (or `start`) to `end`. """
    if start is None:
        start = getattr(obj, attr)
    tween = Tween(
        setter=setter_for(obj, attr),
        start=start,
        end=end,
        duration=duration,
        lerp=lerp,
        delay=delay,
        ease=get_ease(ease),
        on_complete=on_complete,
    )
    return scheduler.start(tween)


def tween_position(scheduler: Scheduler, obj: Any, end: Any, duration: float, **kw: Any) -> TweenHandle:
    """ Move `obj.pos` (a pygame Vector2/Vector3) to `end`. """
    start = kw.pop("start", None)
    if start is None:
        start = getattr(obj, "pos")
    vec = type(start) if isinstance(start, (pygame.math.Vector2, pygame.math.Vector3)) else pygame.math.Vector2
    return tween_attr(scheduler, obj, "pos", vec(end), duration, lerp=lerp_vector, start=vec(start), **kw)


def tween_color(scheduler: Scheduler, obj: Any, end: Any, duration: float, **kw: Any) -> TweenHandle:
    """ Fade `obj.color` to `end` (anything pygame.Color accepts). """
    start = kw.pop("start", None)
    if start is None:
        start = getattr(obj, "color")
    return tween_attr(scheduler, obj, "color", pygame.Color(end), duration,
                      lerp=lerp_color, start=pygame.Color(start), **kw)
