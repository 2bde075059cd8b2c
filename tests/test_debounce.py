import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from native.justifiedgrid_app.debounce import Debouncer

_app = QApplication.instance() or QApplication([])


class TestDebouncer(unittest.TestCase):
    def test_burst_runs_once_with_last_args(self):
        calls = []
        debounced = Debouncer(lambda *a: calls.append(a), 50)
        debounced(1)
        debounced(2)
        debounced(3, "x")
        self.assertTrue(debounced.is_pending())
        self.assertEqual(calls, [])

        QTest.qWait(200)
        self.assertEqual(calls, [(3, "x")])
        self.assertFalse(debounced.is_pending())

    def test_new_call_restarts_quiet_period(self):
        calls = []
        debounced = Debouncer(calls.append, 200)
        debounced(1)
        QTest.qWait(100)
        debounced(2)
        QTest.qWait(100)
        self.assertEqual(calls, [])

        QTest.qWait(300)
        self.assertEqual(calls, [2])

    def test_cancel_drops_pending_call(self):
        calls = []
        debounced = Debouncer(calls.append, 30)
        debounced(1)
        debounced.cancel()
        self.assertFalse(debounced.is_pending())

        QTest.qWait(120)
        self.assertEqual(calls, [])

        # Still usable after cancel.
        debounced(2)
        QTest.qWait(120)
        self.assertEqual(calls, [2])

    def test_default_wait(self):
        self.assertEqual(Debouncer(lambda: None).wait_ms, 200)


if __name__ == "__main__":
    unittest.main()
