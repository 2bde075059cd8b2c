from __future__ import annotations

import logging
import math
from typing import Callable, List, Tuple

from PySide6.QtCore import QAbstractAnimation, QEvent, QObject, Signal
from PySide6.QtWidgets import QWidget

from native.justifiedgrid_app.debounce import Debouncer

logger = logging.getLogger(__name__)

HEIGHT_THRESHOLD_PX = 10


class ContainerWidthObserver(QObject):
    """Reports a container widget's width, debounced.

    Refreshes are triggered by resizes of the container's top-level window
    and by finished animations whose target is the container or one of its
    ancestors (the Qt counterpart of a CSS transitionend). Bursts of triggers
    coalesce into one measurement per `wait_ms` of quiet. `width_changed` is
    only emitted when the measured width differs from the last one.
    """

    width_changed = Signal(int)

    def __init__(
        self,
        container: QWidget,
        *,
        wait_ms: int = 200,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._container = container
        self._width = 0
        self._window: QWidget | None = None
        self._animations: List[Tuple[QAbstractAnimation, Callable[[], None]]] = []
        self._debounced_refresh = Debouncer(self._refresh, wait_ms, self)

    def current_width(self) -> int:
        return self._width

    def is_running(self) -> bool:
        return self._window is not None

    def start(self) -> None:
        if self._window is not None:
            return
        self._window = self._container.window()
        self._window.installEventFilter(self)
        self._debounced_refresh()

    def stop(self) -> None:
        """Stop reacting to triggers; tracked animations stay registered."""
        self._debounced_refresh.cancel()
        if self._window is not None:
            self._window.removeEventFilter(self)
            self._window = None

    def close(self) -> None:
        """Final teardown: stop and disconnect every tracked animation."""
        self.stop()
        for animation, slot in self._animations:
            try:
                animation.finished.disconnect(slot)
            except RuntimeError:
                # Animation already deleted on the C++ side.
                pass
        self._animations = []

    def schedule_refresh(self) -> None:
        if self._window is None:
            return
        self._debounced_refresh()

    def notify_transition_end(self, target: QObject | None) -> None:
        if not isinstance(target, QWidget):
            return
        if target is self._container or target.isAncestorOf(self._container):
            self.schedule_refresh()

    def tracked_animations(self) -> List[QAbstractAnimation]:
        return [animation for animation, _slot in self._animations]

    def track_animation(self, animation: QAbstractAnimation) -> None:
        """Refresh after `animation` finishes if it moved the container's ancestry.

        Only property animations carry a target; others are accepted and their
        finish is ignored. Finishes while stopped are ignored too. Registering
        the same animation twice is a no-op.
        """

        if any(tracked is animation for tracked, _slot in self._animations):
            return

        def on_finished() -> None:
            target_of = getattr(animation, "targetObject", None)
            self.notify_transition_end(target_of() if target_of else None)

        animation.finished.connect(on_finished)
        animation.destroyed.connect(lambda *_: self._forget(animation))
        self._animations.append((animation, on_finished))

    def _forget(self, animation: QAbstractAnimation) -> None:
        self._animations = [(a, s) for a, s in self._animations if a is not animation]

    def eventFilter(self, obj, event) -> bool:  # type: ignore[override]
        if obj is self._window and event.type() == QEvent.Type.Resize:
            self._debounced_refresh()
        return super().eventFilter(obj, event)

    def _refresh(self) -> None:
        width = max(0, int(self._container.contentsRect().width()))
        if width == self._width:
            return
        logger.debug("container width %d -> %d", self._width, width)
        self._width = width
        self.width_changed.emit(width)


def apply_container_height(
    widget: QWidget,
    container_height: float,
    threshold: float = HEIGHT_THRESHOLD_PX,
) -> bool:
    """Pin the widget's minimum height to the layout height.

    Small deltas are ignored so sub-pixel recomputation doesn't thrash the
    parent layout. Returns True when the height was applied.
    """

    current = widget.minimumHeight()
    if abs(current - container_height) <= threshold:
        return False
    target = int(math.ceil(container_height))
    logger.debug("container height %d -> %d", current, target)
    widget.setMinimumHeight(target)
    return True
