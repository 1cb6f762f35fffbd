from __future__ import annotations
import logging
import random
import pygame

from kickflip.scene import Scene
from kickflip.scheduler import Scheduler
from kickflip.settings import AppCfg
from kickflip.wrappers import tween_attr, tween_color, tween_position

logger = logging.getLogger(__name__)

_PALETTE = ["#f2c14e", "#f78154", "#4d9078", "#5fad56", "#b4436c", "#7ea8be"]


class Marker:
    """ Something for the tweens to push around. """
    def __init__(self, pos, color, radius: float = 18.0) -> None:
        self.pos = pygame.math.Vector2(pos)
        self.color = pygame.Color(color)
        self.radius = radius


class ChaseScene(Scene):
    """
    Left click: the marker glides to the cursor. Clicking again mid-flight
    replaces the running move (same setter), it never stacks.
    Space: recolor. Up/Down: pulse the radius after a short delay.
    """
    def __init__(self, scheduler: Scheduler, cfg: AppCfg):
        self.scheduler = scheduler
        self.cfg = cfg
        self.bg = tuple(cfg.window.bg_rgb)
        w, h = cfg.window.width, cfg.window.height
        self.marker = Marker((w // 2, h // 2), _PALETTE[0])
        self.arrivals = 0
        self.font = pygame.font.Font(None, 24)

    def _arrived(self) -> None:
        self.arrivals += 1
        logger.debug("Marker arrived (%d)", self.arrivals)

    # --- loop ---
    def handle_event(self, e: pygame.event.Event) -> bool:
        tcfg = self.cfg.tween
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            tween_position(self.scheduler, self.marker, e.pos, tcfg.default_duration,
                           ease=tcfg.default_ease, on_complete=self._arrived)
            return True
        if e.type == pygame.KEYDOWN:
            if e.key == pygame.K_SPACE:
                tween_color(self.scheduler, self.marker, random.choice(_PALETTE), tcfg.default_duration)
                return True
            if e.key in (pygame.K_UP, pygame.K_DOWN):
                target = 36.0 if e.key == pygame.K_UP else 10.0
                tween_attr(self.scheduler, self.marker, "radius", target, tcfg.default_duration,
                           delay=0.25, ease="out_bounce")
                return True
        return False

    def update(self, dt: float) -> None:
        pass

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.bg)
        m = self.marker
        pygame.draw.circle(surface, m.color, (int(m.pos.x), int(m.pos.y)), max(1, int(m.radius)))
        hud = self.font.render(
            f"active tweens: {len(self.scheduler)}   arrivals: {self.arrivals}", True, (180, 182, 190)
        )
        surface.blit(hud, (12, 12))
