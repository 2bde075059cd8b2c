from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from PySide6.QtCore import QRect, Qt
from PySide6.QtWidgets import QLabel, QWidget

from app.justifiedgrid.layout.justified import LayoutConfig, LayoutResult, compute_layout, validate_config
from native.justifiedgrid_app.width_observer import ContainerWidthObserver, apply_container_height

logger = logging.getLogger(__name__)

_TILE_COLORS = ["#4f81bd", "#c0504d", "#9bbb59", "#8064a2", "#4bacc6", "#f79646"]


class JustifiedGridWidget(QWidget):
    """Places one tile per item using the justified row layout.

    No Qt layout: tiles are positioned manually from the computed rects
    whenever the observed width or the config changes.
    """

    def __init__(
        self,
        config: LayoutConfig,
        *,
        wait_ms: int = 200,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        validate_config(config)
        self._config = config
        self._tiles: List[QLabel] = []
        self._memo: Optional[Tuple[int, LayoutConfig, LayoutResult]] = None

        self.observer = ContainerWidthObserver(self, wait_ms=wait_ms, parent=self)
        self.observer.width_changed.connect(lambda _w: self.relayout())

        self._rebuild_tiles()

    def config(self) -> LayoutConfig:
        return self._config

    def set_config(self, config: LayoutConfig) -> None:
        if config is self._config:
            return
        validate_config(config)
        self._config = config
        self._rebuild_tiles()
        self.relayout()

    def tiles(self) -> List[QLabel]:
        return list(self._tiles)

    def layout_result(self) -> LayoutResult:
        width = self.observer.current_width()
        memo = self._memo
        if memo is not None and memo[0] == width and memo[1] is self._config:
            return memo[2]
        result = compute_layout(width, self._config)
        self._memo = (width, self._config, result)
        return result

    def relayout(self) -> LayoutResult:
        result = self.layout_result()
        for tile, rect in zip(self._tiles, result.rects):
            tile.setGeometry(
                QRect(
                    int(round(rect.x)),
                    int(round(rect.y)),
                    int(round(rect.width)),
                    int(round(rect.height)),
                )
            )
            tile.show()
        # Nothing to place at zero width.
        for tile in self._tiles[len(result.rects):]:
            tile.hide()
        apply_container_height(self, result.container_height)
        return result

    def _rebuild_tiles(self) -> None:
        for tile in self._tiles:
            tile.deleteLater()
        self._tiles = []
        self._memo = None

        for index, item in enumerate(self._config.items):
            label = item.get("label") if isinstance(item, dict) else None
            tile = QLabel(str(label if label is not None else index), self)
            tile.setAlignment(Qt.AlignmentFlag.AlignCenter)
            color = _TILE_COLORS[index % len(_TILE_COLORS)]
            tile.setStyleSheet(f"background: {color}; color: white; border-radius: 4px;")
            tile.hide()
            self._tiles.append(tile)
        logger.debug("built %d tiles", len(self._tiles))

    def showEvent(self, event) -> None:  # type: ignore[override]
        super().showEvent(event)
        self.observer.start()

    def hideEvent(self, event) -> None:  # type: ignore[override]
        self.observer.stop()
        super().hideEvent(event)
