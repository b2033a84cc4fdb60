"""Drawing helpers and per-body visual metadata.

Visual attributes are kept out of :class:`~tribody.physics.Body`. A list of
:class:`BodyStyle` runs parallel to the engine's body list and the two are
joined by index only when drawing.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pygame
import pygame.gfxdraw

from . import constants as C


@dataclass(frozen=True)
class BodyStyle:
    """Colour, radius and label for one body."""

    color: Tuple[int, int, int] = C.BLACK
    radius: int = C.BODY_RADIUS_PIXELS
    name: Optional[str] = None


def styles_from_preset(records) -> list:
    return [
        BodyStyle(
            tuple(cfg.get("color", C.BLACK)),
            int(cfg.get("radius", C.BODY_RADIUS_PIXELS)),
            cfg.get("name", f"Body {i}"),
        )
        for i, cfg in enumerate(records)
    ]


def world_to_screen(pos, screen_size) -> Tuple[float, float]:
    """Map simulation coordinates to pixels with the origin at the screen centre."""
    width, height = screen_size
    return (pos[0] + width / 2.0, pos[1] + height / 2.0)


def draw_bodies(screen, bodies, styles: Sequence[BodyStyle], background=C.WHITE):
    """Draw every body's trail, then the bodies on top."""
    size = screen.get_size()
    screen.fill(background)

    for body, style in zip(bodies, styles):
        if len(body.trail) > 1:
            points = [world_to_screen(p, size) for p in body.trail]
            pygame.draw.aalines(screen, style.color, False, points)

    for body, style in zip(bodies, styles):
        x, y = world_to_screen(body.pos, size)
        if abs(x) > C.SAFE_COORD_LIMIT or abs(y) > C.SAFE_COORD_LIMIT:
            continue
        radius = max(1, int(style.radius))
        pygame.gfxdraw.filled_circle(screen, int(x), int(y), radius, style.color)
        pygame.gfxdraw.aacircle(screen, int(x), int(y), radius, style.color)
