import sys
import os
import unittest
from collections import OrderedDict
from unittest.mock import Mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PyQt6 import sip
    from PyQt6.QtWidgets import QApplication, QDialog, QMainWindow, QMenu, QToolBar
    HAS_QT = True
except ImportError:
    HAS_QT = False


def setUpModule():
    global app
    if HAS_QT:
        app = QApplication.instance() or QApplication([])


@unittest.skipUnless(HAS_QT, "PyQt6 not available")
class TestCrashUI(unittest.TestCase):

    def setUp(self):
        from core.qt_host import QtWindowHost
        from core.unloader import UnloadRegistry
        from ui.crash_toolbar import CrashUI

        self.native = Mock()
        self.exception = Mock()
        self.content = Mock()
        actions = OrderedDict([
            ("native", ("Crash me!", "Crash your application", self.native)),
            ("exception", ("Crash me (exception)!", "Crash through an unhandled exception", self.exception)),
            ("content", ("Crash content process!", "Crash the content process", self.content)),
        ])
        self.registry = UnloadRegistry(QtWindowHost())
        self.ui = CrashUI(self.registry, actions)
        self.window = QMainWindow()
        self.window.setWindowTitle("main")

    def tearDown(self):
        self.registry.run_all()
        if not sip.isdeleted(self.window):
            sip.delete(self.window)

    def _toolbar(self, window=None):
        target = window if window is not None else self.window
        return target.findChild(QToolBar, "crashmeToolbar")

    def _menu(self):
        return self.window.findChild(QMenu, "crashmeMenu")

    def test_add_ui_creates_menu_and_toolbar(self):
        self.ui.add_ui(self.window)

        menu = self._menu()
        self.assertIsNotNone(menu)
        self.assertIn(menu.menuAction(), self.window.menuBar().actions())
        self.assertEqual([a.text() for a in menu.actions()],
                         ["Crash me!", "Crash me (exception)!", "Crash content process!"])
        toolbar = self._toolbar()
        self.assertIsNotNone(toolbar)
        self.assertEqual([a.text() for a in toolbar.actions()],
                         ["Crash me!", "Crash content process!"])
        self.assertEqual(len(self.registry), 1)

    def test_add_ui_twice_is_ignored(self):
        self.ui.add_ui(self.window)
        self.ui.add_ui(self.window)

        self.assertEqual(len(self.window.findChildren(QToolBar, "crashmeToolbar")), 1)
        self.assertEqual(len(self.registry), 1)

    def test_actions_trigger_crashes(self):
        self.ui.add_ui(self.window)

        for action in self._menu().actions():
            action.trigger()
        for action in self._toolbar().actions():
            action.trigger()

        self.assertEqual(self.native.call_count, 2)
        self.exception.assert_called_once_with()
        self.assertEqual(self.content.call_count, 2)

    def test_remove_ui(self):
        self.ui.add_ui(self.window)
        menu_action = self._menu().menuAction()
        toolbar = self._toolbar()

        self.ui.remove_ui(self.window)

        self.assertNotIn(menu_action, self.window.menuBar().actions())
        self.assertTrue(toolbar.isHidden())
        self.assertEqual(len(self.registry), 0)

        # Decorating again works once the old controls are gone
        self.ui.add_ui(self.window)
        self.assertEqual(len(self.registry), 1)

    def test_remove_ui_on_undecorated_window(self):
        self.ui.remove_ui(self.window)

        self.assertIsNone(self._menu())
        self.assertEqual(len(self.registry), 0)

    def test_dialogs_are_not_decorated(self):
        dialog = QDialog()
        try:
            self.ui.add_ui(dialog)
            self.assertIsNone(self._toolbar(dialog))
            self.assertEqual(len(self.registry), 0)
        finally:
            sip.delete(dialog)

    def test_destroyed_window_is_forgotten(self):
        self.ui.add_ui(self.window)

        sip.delete(self.window)

        self.assertEqual(len(self.registry), 0)
        self.assertEqual(len(self.ui._decorations), 0)


if __name__ == "__main__":
    unittest.main()
