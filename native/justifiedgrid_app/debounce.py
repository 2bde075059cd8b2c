"""Debounced calls on the Qt event loop."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from PySide6.QtCore import QObject, QTimer


class Debouncer(QObject):
    """Run `fn` once calls have been quiet for `wait_ms`.

    Every call restarts the single-shot timer, so a burst of calls results in
    one invocation with the arguments of the last call. Needs a running
    QCoreApplication event loop for the timer to fire.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait_ms: int = 200,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._fn = fn
        self._args: Optional[Tuple[Any, ...]] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(int(wait_ms))
        self._timer.timeout.connect(self._fire)

    @property
    def wait_ms(self) -> int:
        return self._timer.interval()

    def __call__(self, *args: Any) -> None:
        self._args = args
        # start() on an active timer restarts it.
        self._timer.start()

    def is_pending(self) -> bool:
        return self._timer.isActive()

    def cancel(self) -> None:
        self._timer.stop()
        self._args = None

    def _fire(self) -> None:
        args, self._args = self._args, None
        if args is None:
            return
        self._fn(*args)
