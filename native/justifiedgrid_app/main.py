from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Any, Dict, List

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, QSize
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from app.justifiedgrid.layout.justified import LayoutConfig
from native.justifiedgrid_app.grid_widget import JustifiedGridWidget

COMPACT_WIDTH_PX = 640
QWIDGETSIZE_MAX = 16777215


def random_items(count: int, seed: int = 0) -> List[Dict[str, Any]]:
    """Demo items: mixed landscape/portrait sizes, some without dimensions."""
    rng = random.Random(seed)
    items: List[Dict[str, Any]] = []
    for i in range(count):
        if rng.random() < 0.1:
            items.append({"label": f"#{i}"})
            continue
        width, height = rng.choice([(1920, 1080), (1080, 1350), (1200, 1200), (3000, 1000), (800, 1200)])
        items.append({"label": f"#{i}", "width": width, "height": height})
    return items


class MainWindow(QMainWindow):
    def __init__(self, *, count: int, row_height: int, gap: int, seed: int) -> None:
        super().__init__()
        self.setWindowTitle("Justified Grid")
        self._items = tuple(random_items(count, seed))
        self._row_height = row_height
        self._gap = gap
        self._compact = False

        self.grid = JustifiedGridWidget(self._make_config(uniform=False))

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setWidget(self.grid)

        # Narrowing the scroll area changes the grid width without a window
        # resize; the observer picks it up once the animation finishes.
        self._width_anim = QPropertyAnimation(self.scroll, b"maximumWidth", self)
        self._width_anim.setDuration(250)
        self._width_anim.setEasingCurve(QEasingCurve.Type.InOutCubic)
        self._width_anim.finished.connect(self._on_width_anim_finished)
        self.grid.observer.track_animation(self._width_anim)

        uniform_box = QCheckBox("Uniform rows")
        uniform_box.toggled.connect(lambda on: self.grid.set_config(self._make_config(uniform=on)))
        compact_btn = QPushButton("Toggle compact")
        compact_btn.clicked.connect(self.toggle_compact)

        toolbar = QHBoxLayout()
        toolbar.addWidget(uniform_box)
        toolbar.addWidget(compact_btn)
        toolbar.addStretch(1)

        body = QWidget()
        outer = QVBoxLayout(body)
        outer.addLayout(toolbar)
        outer.addWidget(self.scroll, 1)
        self.setCentralWidget(body)

    def _make_config(self, *, uniform: bool) -> LayoutConfig:
        return LayoutConfig(
            items=self._items,
            row_height=self._row_height,
            gap=self._gap,
            uniform=uniform,
        )

    def toggle_compact(self) -> None:
        self._compact = not self._compact
        full = self.centralWidget().contentsRect().width()
        self._width_anim.stop()
        self._width_anim.setStartValue(self.scroll.width())
        self._width_anim.setEndValue(COMPACT_WIDTH_PX if self._compact else full)
        self._width_anim.start()

    def _on_width_anim_finished(self) -> None:
        if not self._compact:
            self.scroll.setMaximumWidth(QWIDGETSIZE_MAX)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.grid.observer.close()
        super().closeEvent(event)

    def sizeHint(self) -> QSize:  # type: ignore[override]
        return QSize(1100, 760)


def main() -> None:
    parser = argparse.ArgumentParser(description="Justified grid demo window")
    parser.add_argument("--count", type=int, default=60)
    parser.add_argument("--row-height", type=int, default=180)
    parser.add_argument("--gap", type=int, default=8)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("-v", "--verbose", action="store_true")
    args, qt_args = parser.parse_known_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("JustifiedGrid")

    win = MainWindow(count=args.count, row_height=args.row_height, gap=args.gap, seed=args.seed)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
