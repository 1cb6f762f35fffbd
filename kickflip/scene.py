from __future__ import annotations
from typing import Protocol
import pygame

from kickflip.scheduler import Scheduler


class Scene(Protocol):
    """
    What TweenApp drives each frame. The app owns the Scheduler and
    advances it before update(), so tweens started in handle_event() or
    update() get their first tick next frame.
    """
    scheduler: Scheduler

    def update(self, dt: float) -> None: ...
    def draw(self, surface: pygame.Surface) -> None: ...
    def handle_event(self, e: pygame.event.Event) -> bool: ...
