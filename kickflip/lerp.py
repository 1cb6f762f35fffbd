from __future__ import annotations
from typing import Sequence, Tuple, TypeVar
import pygame

V = TypeVar("V", pygame.math.Vector2, pygame.math.Vector3)


def lerp_number(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_tuple(a: Sequence[float], b: Sequence[float], t: float) -> Tuple[float, ...]:
    """ Component-wise lerp for plain tuples/lists of equal length. """
    if len(a) != len(b):
        raise ValueError(f"lerp_tuple: length mismatch ({len(a)} vs {len(b)})")
    return tuple(x + (y - x) * t for x, y in zip(a, b))


def lerp_vector(a: V, b: V, t: float) -> V:
    # Vector2.lerp() rejects t outside [0, 1]; overshooting eases need the raw form
    return a + (b - a) * t


def lerp_color(a: pygame.Color, b: pygame.Color, t: float) -> pygame.Color:
    return pygame.Color(a).lerp(pygame.Color(b), max(0.0, min(1.0, t)))
