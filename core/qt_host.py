"""
Qt binding of the host window services.
QtWindowHost drives WindowHost from a running QApplication.
"""
import logging
from typing import Callable, Dict, List, Optional, Tuple

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtWidgets import QApplication, QWidget

from config.settings import Settings
from core.host import DestroyListener, WindowHost, WindowListener

logger = logging.getLogger(__name__)


class _ShowFilter(QObject):
    """Per-window event filter forwarding Show events to load listeners"""

    def __init__(self, window: QWidget):
        super().__init__(window)
        self.listeners: List[WindowListener] = []

    def eventFilter(self, obj, event):
        if event.type() == QEvent.Type.Show and self.listeners:
            for listener in list(self.listeners):
                listener(obj)
        return False


class _PolishFilter(QObject):
    """Application-wide event filter reporting newly polished top-level widgets"""

    def __init__(self, host: "QtWindowHost"):
        super().__init__()
        self.host = host

    def eventFilter(self, obj, event):
        if event.type() == QEvent.Type.Polish and isinstance(obj, QWidget) and obj.isWindow():
            self.host._dispatch_opened(obj)
        return False


class QtWindowHost(WindowHost):
    """
    WindowHost backed by PyQt6.

    A window is "loaded" once it has been shown, "opened" when Qt polishes it
    right before its first show, and a container is destroyed when its
    QObject.destroyed signal fires.
    """

    def __init__(self, app: Optional[QApplication] = None, category_property: str = Settings.WINDOW_TYPE_PROPERTY):
        self.app = app if app is not None else QApplication.instance()
        if self.app is None:
            raise RuntimeError("QtWindowHost needs a QApplication")
        self.category_property = category_property
        self._open_listeners: List[WindowListener] = []
        self._polish_filter: Optional[_PolishFilter] = None
        self._show_filters: Dict[int, _ShowFilter] = {}
        self._destroy_slots: Dict[Tuple[int, DestroyListener], Callable] = {}

    def enumerate_windows(self) -> List[object]:
        return [w for w in self.app.topLevelWidgets() if w.isWindow()]

    def window_category(self, window) -> Optional[str]:
        value = window.property(self.category_property)
        if value is None:
            return None
        return str(value)

    def is_loaded(self, window) -> bool:
        return window.isVisible()

    # --- load notification ---

    def add_load_listener(self, window, listener: WindowListener) -> None:
        key = id(window)
        show_filter = self._show_filters.get(key)
        if show_filter is None:
            show_filter = _ShowFilter(window)
            window.installEventFilter(show_filter)
            self._show_filters[key] = show_filter
            # The filter is a child of the window and dies with it
            window.destroyed.connect(lambda *_: self._show_filters.pop(key, None))
        show_filter.listeners.append(listener)

    def remove_load_listener(self, window, listener: WindowListener) -> None:
        show_filter = self._show_filters.get(id(window))
        if show_filter is None or listener not in show_filter.listeners:
            return
        show_filter.listeners.remove(listener)
        if not show_filter.listeners:
            window.removeEventFilter(show_filter)
            del self._show_filters[id(window)]
            show_filter.deleteLater()

    # --- open notification ---

    def add_open_listener(self, listener: WindowListener) -> None:
        if self._polish_filter is None:
            self._polish_filter = _PolishFilter(self)
            self.app.installEventFilter(self._polish_filter)
            logger.debug("[QtHost] Watching for new top-level windows")
        self._open_listeners.append(listener)

    def remove_open_listener(self, listener: WindowListener) -> None:
        if listener not in self._open_listeners:
            return
        self._open_listeners.remove(listener)
        if not self._open_listeners and self._polish_filter is not None:
            self.app.removeEventFilter(self._polish_filter)
            self._polish_filter = None
            logger.debug("[QtHost] Stopped watching for new top-level windows")

    def _dispatch_opened(self, window):
        logger.debug(f"[QtHost] Window opened: {window.objectName() or type(window).__name__}")
        for listener in list(self._open_listeners):
            listener(window)

    # --- destroy notification ---

    def add_destroy_listener(self, container, listener: DestroyListener) -> None:
        key = (id(container), listener)
        if key in self._destroy_slots:
            return

        def slot(*_):
            self._destroy_slots.pop(key, None)
            listener()

        self._destroy_slots[key] = slot
        container.destroyed.connect(slot)

    def remove_destroy_listener(self, container, listener: DestroyListener) -> None:
        slot = self._destroy_slots.pop((id(container), listener), None)
        if slot is None:
            return
        try:
            container.destroyed.disconnect(slot)
        except (TypeError, RuntimeError):
            # Already disconnected or the C++ object is gone
            pass
