from __future__ import annotations

import logging
from typing import Callable

import pygame

from kickflip.scene import Scene
from kickflip.scheduler import Scheduler
from kickflip.settings import AppCfg

logger = logging.getLogger(__name__)


class TweenApp:
    """
    Minimal pygame shell acting as the frame driver: it owns the window,
    the clock and the one Scheduler, and hands that scheduler to the scene.
    """

    def __init__(self, cfg: AppCfg, make_scene: Callable[[Scheduler, AppCfg], Scene]):
        self.cfg = cfg
        pygame.init()
        pygame.display.set_caption(cfg.window.title)

        self._flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self.screen = pygame.display.set_mode(
            (int(cfg.window.width), int(cfg.window.height)),
            flags=self._flags,
        )

        self.clock = pygame.time.Clock()
        self.running = True

        self.scheduler = Scheduler()
        self.scene = make_scene(self.scheduler, cfg)
        logger.info("Window %dx%d @ %d fps", cfg.window.width, cfg.window.height, cfg.fps)

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        max_dt = self.cfg.tween.max_frame_dt
        while self.running:
            dt = self.clock.tick(self.cfg.fps) / 1000.0
            if max_dt > 0:
                dt = min(dt, max_dt)

            # ---- event pump -------------------------------------------------
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                    break

                if e.type == pygame.VIDEORESIZE:
                    self._resize_to(e.w, e.h)
                    continue

                if self.scene.handle_event(e):
                    continue

                if e.type == pygame.KEYDOWN:
                    if (e.key == pygame.K_q) and (pygame.key.get_mods() & pygame.KMOD_CTRL):
                        self.running = False
                        continue

            # ---- tweens, then update/draw -----------------------------------
            self.scheduler.advance(dt)
            self.scene.update(dt)
            self.scene.draw(self.screen)
            pygame.display.flip()

        self.scheduler.kill_all()
        pygame.quit()

    def _resize_to(self, w: int, h: int) -> None:
        w = max(1, int(w))
        h = max(1, int(h))
        self.screen = pygame.display.set_mode((w, h), flags=self._flags)
