from __future__ import annotations

from pathlib import Path
import argparse
import logging
from typing import List, Optional

from app.justifiedgrid.items import load_items
from app.justifiedgrid.layout.justified import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_MAXIMUM_SHRINK_FACTOR,
    DEFAULT_MAXIMUM_STRETCH_FACTOR,
    LayoutConfig,
    LayoutResult,
    compute_layout,
    validate_config,
)
from app.justifiedgrid.preview import render_preview

logger = logging.getLogger(__name__)


def layout_from_file(
    items_path: str,
    *,
    container_width: int,
    row_height: float = 200,
    gap: float = 8,
    maximum_shrink_factor: float = DEFAULT_MAXIMUM_SHRINK_FACTOR,
    maximum_stretch_factor: float = DEFAULT_MAXIMUM_STRETCH_FACTOR,
    default_aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    uniform: bool = False,
) -> LayoutResult:
    items = load_items(items_path)
    config = LayoutConfig(
        items=tuple(items),
        row_height=row_height,
        gap=gap,
        maximum_shrink_factor=maximum_shrink_factor,
        maximum_stretch_factor=maximum_stretch_factor,
        default_aspect_ratio=default_aspect_ratio,
        uniform=uniform,
    )
    validate_config(config)
    logger.debug("laying out %d items at width %s", len(items), container_width)
    return compute_layout(container_width, config)


def format_rect_lines(result: LayoutResult) -> List[str]:
    return [
        f"{i}: x={r.x:.2f} y={r.y:.2f} w={r.width:.2f} h={r.height:.2f}"
        for i, r in enumerate(result.rects)
    ]


def run_cli(argv: Optional[List[str]] = None) -> LayoutResult:
    parser = argparse.ArgumentParser(description="Justified grid layout for a JSON list of items")
    parser.add_argument("items", help="JSON file: list of objects with optional width/height")
    parser.add_argument("--width", type=int, required=True, help="Container width in px")
    parser.add_argument("--row-height", type=float, default=200)
    parser.add_argument("--gap", type=float, default=8)
    parser.add_argument("--shrink", type=float, default=DEFAULT_MAXIMUM_SHRINK_FACTOR, help="Maximum shrink factor")
    parser.add_argument("--stretch", type=float, default=DEFAULT_MAXIMUM_STRETCH_FACTOR, help="Maximum stretch factor")
    parser.add_argument("--aspect", type=float, default=DEFAULT_ASPECT_RATIO, help="Aspect ratio for items without dimensions")
    parser.add_argument("--uniform", action="store_true", help="Lock all rows to the first row's geometry")
    parser.add_argument("--preview", default=None, help="Write a PNG preview to this path")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = layout_from_file(
            args.items,
            container_width=args.width,
            row_height=args.row_height,
            gap=args.gap,
            maximum_shrink_factor=args.shrink,
            maximum_stretch_factor=args.stretch,
            default_aspect_ratio=args.aspect,
            uniform=args.uniform,
        )
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    for line in format_rect_lines(result):
        print(line)
    print(f"Rows: {len(result.rows())}")
    print(f"Container height: {result.container_height:.2f}")

    if args.preview:
        render_preview(result, args.width, args.preview)
        print(f"Preview: {Path(args.preview).resolve()}")
    return result


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
