"""Apply callbacks to every open and future primary window"""
import logging
import weakref
from typing import Callable, Optional

from config.settings import Settings

logger = logging.getLogger(__name__)

CONTINUOUS = "continuous"
ENUMERATE_ONLY = "enumerate-only"
WATCH_MODES = (CONTINUOUS, ENUMERATE_ONLY)


class WindowWatcher:
    """Runs a callback on each primary window once it has finished loading"""

    def __init__(self, host, registry, target_type: Optional[str] = None):
        """
        Initialize window watcher

        Args:
            host: WindowHost providing enumeration and lifecycle notifications
            registry: UnloadRegistry that owns the teardown of continuous watches
            target_type: Window category to match (defaults to Settings)
        """
        self.host = host
        self.registry = registry
        self.target_type = target_type or Settings.get_target_window_type()

    def watch(self, callback: Callable[[object], None], mode: str = CONTINUOUS):
        """
        Apply a callback to each matching window

        Args:
            callback: 1-parameter function that gets a primary window
            mode: "continuous" also handles windows opened later,
                  "enumerate-only" only handles the ones open right now

        Returns:
            For continuous watches, a 0-parameter function that stops watching
            right away and drops the pending teardown. None for enumerate-only.
        """
        if mode not in WATCH_MODES:
            raise ValueError(f"Unknown watch mode: {mode!r}")

        host = self.host
        target_type = self.target_type
        # Windows already handled by this watch, so each one sees the callback once
        seen = weakref.WeakSet()

        def watcher(window):
            # Only classify once the window has loaded
            if host.window_category(window) != target_type:
                return
            if window in seen:
                return
            seen.add(window)
            callback(window)

        def run_on_load(window):
            def run_once(loaded_window):
                host.remove_load_listener(window, run_once)
                watcher(window)

            host.add_load_listener(window, run_once)

        for window in host.enumerate_windows():
            if host.is_loaded(window):
                watcher(window)
            else:
                run_on_load(window)

        if mode == ENUMERATE_ONLY:
            return None

        def window_opened(window):
            if host.is_loaded(window):
                watcher(window)
            else:
                run_on_load(window)

        host.add_open_listener(window_opened)
        logger.debug(f"[Watcher] Watching for new '{target_type}' windows")

        def stop_watching():
            host.remove_open_listener(window_opened)
            logger.debug(f"[Watcher] Stopped watching for '{target_type}' windows")

        remove_teardown = self.registry.register(stop_watching)

        def cancel():
            remove_teardown()
            stop_watching()

        return cancel
