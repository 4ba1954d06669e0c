import io
from typing import Dict, Tuple

import pygame
from pygame.freetype import Font
from material_icons import MaterialIcons, IconStyle

from sleepdial_helper import color_to_hex


_icon_cache: Dict[Tuple, pygame.Surface] = {}


def get_icon(
    name: str,
    size: int = 24,
    color: Tuple[int, int, int] = (0, 0, 0),
    style: IconStyle = IconStyle.ROUND
) -> pygame.Surface:
    """
    Get a Material Design icon as a pygame surface.
    Results are cached to avoid repeated loading of the same icons.
    """
    cache_key = (name, size, color, style)
    if cache_key in _icon_cache:
        return _icon_cache[cache_key]

    icons = MaterialIcons()
    hex_color = color_to_hex(color)
    icon = icons.get(name, size=size, color=hex_color, style=style)
    surface = pygame.image.load(io.BytesIO(icon))

    _icon_cache[cache_key] = surface

    return surface


def render_centered(
    screen: pygame.Surface,
    font: Font,
    text: str,
    color: Tuple[int, int, int],
    center: Tuple[float, float]
) -> pygame.Rect:
    text_surface, rect = font.render(text, color)
    rect.center = (int(center[0]), int(center[1]))
    screen.blit(text_surface, rect)

    return rect


def hour_label(hour: int) -> str:
    """Only even hours get a label on the dial, 24 is shown as 0."""
    if hour == 24:
        return "0"

    if hour % 2 == 0:
        return str(hour)

    return ""
