"""Render a computed layout to an image for quick inspection."""

from __future__ import annotations

import math
from pathlib import Path

from PIL import Image, ImageDraw

from app.justifiedgrid.layout.justified import LayoutResult

_PALETTE = [
    (79, 129, 189),
    (192, 80, 77),
    (155, 187, 89),
    (128, 100, 162),
    (75, 172, 198),
    (247, 150, 70),
]


def render_preview(
    result: LayoutResult,
    container_width: int,
    path: str | Path | None = None,
    *,
    background: tuple[int, int, int] = (255, 255, 255),
) -> Image.Image:
    """Draw every rect as a filled box and optionally save it as PNG.

    Rects wider than the container (a lone oversized item) are clipped by the
    canvas.
    """

    width = max(1, int(container_width))
    height = max(1, int(math.ceil(result.container_height)))
    img = Image.new("RGB", (width, height), background)
    draw = ImageDraw.Draw(img)

    for index, rect in enumerate(result.rects):
        x0 = int(round(rect.x))
        y0 = int(round(rect.y))
        x1 = int(round(rect.x + rect.width)) - 1
        y1 = int(round(rect.y + rect.height)) - 1
        if x1 < x0 or y1 < y0:
            continue
        fill = _PALETTE[index % len(_PALETTE)]
        draw.rectangle([x0, y0, x1, y1], fill=fill, outline=(40, 40, 40))

    if path is not None:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        img.save(out, format="PNG")
    return img
