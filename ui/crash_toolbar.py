"""Crash menu and toolbar added to every primary window"""
import logging
import weakref
from typing import Callable

from PyQt6.QtWidgets import QMainWindow, QToolBar

from core.crash import CRASH_ACTIONS
from ui.theme import Theme

logger = logging.getLogger(__name__)

# Actions that also get a toolbar button, in display order
TOOLBAR_ACTIONS = ("native", "content")


class _Decoration:
    """Widgets added to one window"""

    def __init__(self, menu, toolbar, deregister: Callable[[], None]):
        self.menu = menu
        self.toolbar = toolbar
        self.deregister = deregister


class CrashUI:
    """Adds and removes the crash controls on primary windows"""

    def __init__(self, registry, actions=CRASH_ACTIONS):
        """
        Initialize crash UI

        Args:
            registry: UnloadRegistry used to forget windows when they are destroyed
            actions: Ordered mapping of action id to (label, tooltip, callable)
        """
        self.registry = registry
        self.actions = actions
        self._decorations: "weakref.WeakKeyDictionary[QMainWindow, _Decoration]" = weakref.WeakKeyDictionary()

    def add_ui(self, window):
        """Add the crash menu and toolbar to a window"""
        if window in self._decorations:
            return
        if not isinstance(window, QMainWindow):
            logger.debug(f"[CrashUI] Skipping {type(window).__name__}, not a main window")
            return

        menu = window.menuBar().addMenu("Crash me")
        menu.setObjectName("crashmeMenu")
        for action_id, (label, tooltip, trigger) in self.actions.items():
            action = menu.addAction(label)
            action.setObjectName(f"crashme-{action_id}")
            action.setToolTip(tooltip)
            action.triggered.connect(self._make_handler(action_id, trigger))

        toolbar = QToolBar("Crash me", window)
        toolbar.setObjectName("crashmeToolbar")
        toolbar.setStyleSheet(Theme.get_toolbar_stylesheet())
        for action_id in TOOLBAR_ACTIONS:
            if action_id not in self.actions:
                continue
            label, tooltip, trigger = self.actions[action_id]
            button = toolbar.addAction(label)
            button.setObjectName(f"toolbarbutton-crashme-{action_id}")
            button.setToolTip(tooltip)
            button.triggered.connect(self._make_handler(action_id, trigger))
        window.addToolBar(toolbar)

        window_ref = weakref.ref(window)

        def forget():
            target = window_ref()
            if target is not None:
                self._decorations.pop(target, None)

        deregister = self.registry.register(forget, window)
        self._decorations[window] = _Decoration(menu, toolbar, deregister)
        logger.info(f"[CrashUI] Added crash controls to '{window.windowTitle()}'")

    def remove_ui(self, window):
        """Remove the crash menu and toolbar from a window"""
        decoration = self._decorations.pop(window, None)
        if decoration is None:
            return
        decoration.deregister()
        window.menuBar().removeAction(decoration.menu.menuAction())
        decoration.menu.deleteLater()
        window.removeToolBar(decoration.toolbar)
        decoration.toolbar.deleteLater()
        logger.info(f"[CrashUI] Removed crash controls from '{window.windowTitle()}'")

    @staticmethod
    def _make_handler(action_id: str, trigger: Callable[[], object]):
        def handler(checked=False):
            logger.info(f"[CrashUI] Crash action '{action_id}' triggered")
            trigger()
        return handler
