import sys
import os
import unittest
from unittest.mock import Mock, call

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PyQt6 import sip
    from PyQt6.QtWidgets import QApplication, QDialog, QMainWindow, QWidget
    HAS_QT = True
except ImportError:
    HAS_QT = False

BROWSER = "navigator:browser"


def setUpModule():
    global app
    if HAS_QT:
        app = QApplication.instance() or QApplication([])


@unittest.skipUnless(HAS_QT, "PyQt6 not available")
class QtTestCase(unittest.TestCase):

    def setUp(self):
        from core.qt_host import QtWindowHost
        self.host = QtWindowHost()
        self.widgets = []

    def tearDown(self):
        for widget in self.widgets:
            if not sip.isdeleted(widget):
                sip.delete(widget)

    def make_window(self, category=BROWSER, cls=QMainWindow):
        window = cls()
        if category is not None:
            window.setProperty("windowtype", category)
        self.widgets.append(window)
        return window


class TestQtWindowHost(QtTestCase):

    def test_enumerates_top_level_windows(self):
        window = self.make_window()
        child = QWidget(window)

        windows = self.host.enumerate_windows()

        self.assertIn(window, windows)
        self.assertNotIn(child, windows)

    def test_category_from_property(self):
        self.assertEqual(self.host.window_category(self.make_window()), BROWSER)
        self.assertIsNone(self.host.window_category(self.make_window(category=None)))

    def test_loaded_once_shown(self):
        window = self.make_window()
        self.assertFalse(self.host.is_loaded(window))
        window.show()
        self.assertTrue(self.host.is_loaded(window))

    def test_load_listener_fires_on_show(self):
        window = self.make_window()
        listener = Mock()
        self.host.add_load_listener(window, listener)

        window.show()

        listener.assert_called_once_with(window)

    def test_removed_load_listener_is_silent(self):
        window = self.make_window()
        listener = Mock()
        self.host.add_load_listener(window, listener)
        self.host.remove_load_listener(window, listener)
        self.host.remove_load_listener(window, listener)

        window.show()

        listener.assert_not_called()

    def test_open_listener_sees_new_window(self):
        listener = Mock()
        self.host.add_open_listener(listener)

        window = self.make_window()
        window.show()

        self.assertIn(call(window), listener.call_args_list)
        self.host.remove_open_listener(listener)

    def test_removed_open_listener_is_silent(self):
        listener = Mock()
        self.host.add_open_listener(listener)
        self.host.remove_open_listener(listener)

        self.make_window().show()

        listener.assert_not_called()

    def test_destroy_listener(self):
        window = self.make_window()
        listener = Mock()
        self.host.add_destroy_listener(window, listener)

        sip.delete(window)

        listener.assert_called_once_with()

    def test_removed_destroy_listener_is_silent(self):
        window = self.make_window()
        listener = Mock()
        self.host.add_destroy_listener(window, listener)
        self.host.remove_destroy_listener(window, listener)
        self.host.remove_destroy_listener(window, listener)

        sip.delete(window)

        listener.assert_not_called()


class TestWatcherOnQt(QtTestCase):

    def setUp(self):
        super().setUp()
        from core.unloader import UnloadRegistry
        from core.window_watcher import WindowWatcher
        self.registry = UnloadRegistry(self.host)
        self.watcher = WindowWatcher(self.host, self.registry, target_type=BROWSER)
        self.callback = Mock()

    def tearDown(self):
        self.registry.run_all()
        super().tearDown()

    def test_enumerate_only(self):
        shown = self.make_window()
        shown.show()
        pending = self.make_window()
        dialog = self.make_window(category="dialog:utility", cls=QDialog)
        dialog.show()

        self.watcher.watch(self.callback, "enumerate-only")
        self.callback.assert_called_once_with(shown)

        pending.show()
        self.assertEqual(self.callback.call_args_list, [call(shown), call(pending)])

        late = self.make_window()
        late.show()
        self.assertEqual(self.callback.call_count, 2)

    def test_continuous_until_teardown(self):
        self.watcher.watch(self.callback)

        late = self.make_window()
        late.show()
        self.callback.assert_called_once_with(late)

        self.registry.run_all()
        later = self.make_window()
        later.show()
        self.callback.assert_called_once_with(late)

    def test_scoped_unloader_runs_on_destroy(self):
        window = self.make_window()
        cleanup = Mock()
        self.registry.register(cleanup, window)

        sip.delete(window)
        self.registry.run_all()

        cleanup.assert_called_once_with()
        self.assertEqual(len(self.registry), 0)


if __name__ == "__main__":
    unittest.main()
