"""Justified row layout (container-first) helpers.

This module is intentionally UI-framework agnostic.

Goal: given a *known* container width and a list of items that may carry a
natural width/height, pack them into rows whose total width matches the
container, within bounded shrink/stretch tolerances, without waiting for
assets to load.

Algorithm: greedy single pass. Each item is tried against the current row;
a row that overflows is closed (without the item) and justified, then the
item is retried against a fresh row. A lone item is never rejected.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

DEFAULT_MAXIMUM_SHRINK_FACTOR = 0.2
DEFAULT_MAXIMUM_STRETCH_FACTOR = 0.5
DEFAULT_ASPECT_RATIO = 4 / 3


@dataclass(frozen=True)
class LayoutConfig:
    """Input for `compute_layout`.

    items: dicts or objects exposing optional `width`/`height`; any other
    fields are ignored and never touched.
    """

    row_height: float
    items: Sequence[Any] = ()
    gap: float = 0
    maximum_shrink_factor: float = DEFAULT_MAXIMUM_SHRINK_FACTOR
    maximum_stretch_factor: float = DEFAULT_MAXIMUM_STRETCH_FACTOR
    default_aspect_ratio: float = DEFAULT_ASPECT_RATIO
    uniform: bool = False


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LayoutResult:
    rects: List[Rect]
    container_height: float

    def rows(self) -> List[List[Rect]]:
        """Group rects into visual rows (consecutive rects sharing `y`)."""
        rows: List[List[Rect]] = []
        for rect in self.rects:
            if rows and rows[-1][0].y == rect.y:
                rows[-1].append(rect)
            else:
                rows.append([rect])
        return rows


@dataclass
class _Box:
    x: float
    y: float
    width: float
    height: float

    def freeze(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)


@dataclass
class _RowState:
    """Accumulator threaded through the row helpers for one layout pass."""

    row: List[_Box] = field(default_factory=list)
    row_width: float = 0
    container_height: float = 0
    uniform_aspect_ratio: float = 0
    uniform_row_height: float = 0
    rects: List[Rect] = field(default_factory=list)


@dataclass(frozen=True)
class _Limits:
    container_width: float
    row_height: float
    gap: float
    shrink: float
    stretch: float
    default_aspect_ratio: float
    uniform: bool


def item_dimensions(item: Any) -> tuple[Optional[float], Optional[float]]:
    """Return (width, height) declared by an item, None where missing."""
    if isinstance(item, Mapping):
        return item.get("width"), item.get("height")
    return getattr(item, "width", None), getattr(item, "height", None)


def _scale_factor(width: float, container_width: float) -> float:
    # A zero-width row can never be justified.
    if width == 0:
        return math.inf
    return (container_width - width) / width


def _can_shrink(width: float, limits: _Limits) -> bool:
    return abs(_scale_factor(width, limits.container_width)) <= limits.shrink


def _can_justify(width: float, limits: _Limits) -> bool:
    factor = abs(_scale_factor(width, limits.container_width))
    return factor <= limits.shrink or factor <= limits.stretch


def _uniform_locked(state: _RowState, limits: _Limits) -> bool:
    return bool(limits.uniform and state.uniform_aspect_ratio)


def _size_item(item: Any, state: _RowState, limits: _Limits) -> _Box:
    if _uniform_locked(state, limits):
        aspect_ratio = state.uniform_aspect_ratio
    else:
        width, height = item_dimensions(item)
        if width and height:
            aspect_ratio = width / height
        else:
            aspect_ratio = limits.default_aspect_ratio

    if limits.uniform and state.uniform_row_height:
        height = state.uniform_row_height
    else:
        height = limits.row_height

    return _Box(
        x=state.row_width,
        y=state.container_height,
        width=aspect_ratio * height,
        height=height,
    )


def _row_fits(box: _Box, state: _RowState, limits: _Limits) -> bool:
    provisional = state.row_width + box.width + limits.gap
    return provisional < limits.container_width or _can_shrink(provisional, limits)


def _commit(box: _Box, state: _RowState, limits: _Limits) -> None:
    state.row_width += box.width + limits.gap
    state.row.append(box)


def _row_height(natural_width: float, state: _RowState, limits: _Limits) -> float:
    if limits.uniform and state.uniform_row_height:
        return state.uniform_row_height
    if _can_justify(natural_width, limits):
        return (limits.row_height / natural_width) * limits.container_width
    return limits.row_height


def _justify(natural_width: float, state: _RowState, limits: _Limits) -> None:
    factor = _scale_factor(natural_width, limits.container_width)
    height = _row_height(natural_width, state, limits)

    previous: Optional[_Box] = None
    for box in state.row:
        box.width += factor * box.width
        box.height = height
        if previous is not None:
            box.x = previous.x + previous.width + limits.gap
        previous = box


def _close_row(state: _RowState, limits: _Limits) -> None:
    natural_width = state.row_width - limits.gap

    if not _uniform_locked(state, limits):
        if _can_justify(natural_width, limits):
            _justify(natural_width, state, limits)

        first = state.row[0]
        state.uniform_aspect_ratio = first.width / first.height if first.height else 0
        state.uniform_row_height = first.height

    state.rects.extend(box.freeze() for box in state.row)
    state.container_height += _row_height(natural_width, state, limits) + limits.gap
    state.row = []
    state.row_width = 0


def compute_layout(container_width: float, config: LayoutConfig) -> LayoutResult:
    """Compute justified rects and total height.

    Pure function: the same arguments always give the same result. Invalid
    numbers are not rejected here; see `validate_config`.

    Returns an empty result when the container has no width or there are no
    items.
    """

    items = list(config.items)
    if container_width <= 0 or not items:
        return LayoutResult(rects=[], container_height=0)

    limits = _Limits(
        container_width=container_width,
        row_height=config.row_height,
        gap=config.gap,
        shrink=config.maximum_shrink_factor or DEFAULT_MAXIMUM_SHRINK_FACTOR,
        stretch=config.maximum_stretch_factor or DEFAULT_MAXIMUM_STRETCH_FACTOR,
        default_aspect_ratio=config.default_aspect_ratio or DEFAULT_ASPECT_RATIO,
        uniform=bool(config.uniform),
    )
    state = _RowState()
    last = len(items) - 1

    index = 0
    while index <= last:
        box = _size_item(items[index], state, limits)

        if _row_fits(box, state, limits):
            _commit(box, state, limits)
            if index == last:
                _close_row(state, limits)
            index += 1
        elif not state.row:
            # Oversized lone item: it gets a row to itself.
            _commit(box, state, limits)
            _close_row(state, limits)
            index += 1
        else:
            _close_row(state, limits)

    return LayoutResult(rects=state.rects, container_height=state.container_height)


def validate_config(config: LayoutConfig) -> None:
    """Reject configs that would produce degenerate geometry.

    `compute_layout` never calls this; callers validate upstream.
    """

    if not config.row_height > 0:
        raise ValueError("row_height must be > 0")
    if not config.gap >= 0:
        raise ValueError("gap must be >= 0")
    if not 0 < config.maximum_shrink_factor <= 1:
        raise ValueError("maximum_shrink_factor must be in (0, 1]")
    if not 0 < config.maximum_stretch_factor <= 1:
        raise ValueError("maximum_stretch_factor must be in (0, 1]")
    if not (config.default_aspect_ratio > 0 and math.isfinite(config.default_aspect_ratio)):
        raise ValueError("default_aspect_ratio must be a finite number > 0")

    for index, item in enumerate(config.items):
        for name, value in zip(("width", "height"), item_dimensions(item)):
            if value is not None and value < 0:
                raise ValueError(f"item {index}: {name} must be >= 0")
