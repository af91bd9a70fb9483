"""Extension lifecycle: install, startup, shutdown, uninstall"""
import logging
from typing import Optional

from config.settings import Settings
from core.crash_reporter import CrashReporter
from core.unloader import unload_registry
from core.window_watcher import ENUMERATE_ONLY, WindowWatcher

logger = logging.getLogger(__name__)


class CrashMeExtension:
    """Decorates every primary window with crash controls while started"""

    def __init__(self, host, registry=None, ui=None, reporter: Optional[CrashReporter] = None,
                 settings=Settings, enable_reporter: Optional[bool] = None):
        """
        Initialize extension

        Args:
            host: WindowHost the extension runs in
            registry: UnloadRegistry (defaults to the process-wide one)
            ui: Object with add_ui/remove_ui (defaults to the Qt crash toolbar)
            reporter: CrashReporter to install on startup (built from settings when None)
            settings: Settings class
            enable_reporter: Override Settings.reporter_enabled()
        """
        self.host = host
        self.registry = registry if registry is not None else unload_registry()
        if self.registry.host is None:
            self.registry.host = host
        self.settings = settings
        if ui is None:
            from ui.crash_toolbar import CrashUI
            ui = CrashUI(self.registry)
        self.ui = ui
        if enable_reporter is None:
            enable_reporter = settings.reporter_enabled()
        if not enable_reporter:
            reporter = None
        elif reporter is None:
            reporter = CrashReporter(log_dir=settings.get_log_dir(), prefix=settings.CRASH_REPORT_PREFIX)
        self.reporter = reporter
        self.watcher = WindowWatcher(host, self.registry, settings.get_target_window_type())
        self.started = False

    def install(self):
        logger.info("[Extension] Installed")

    def uninstall(self):
        logger.info("[Extension] Uninstalled")

    def startup(self):
        """Install the crash reporter and decorate current and future windows"""
        if self.started:
            logger.warning("[Extension] startup() called twice, ignoring")
            return
        if self.reporter is not None:
            self.reporter.install()
        self.watcher.watch(self.ui.add_ui)
        self.started = True
        logger.info("[Extension] Started")

    def shutdown(self):
        """Undecorate open windows and run every pending unloader"""
        if not self.started:
            return
        self.watcher.watch(self.ui.remove_ui, ENUMERATE_ONLY)
        if self.reporter is not None:
            self.reporter.uninstall()
        self.registry.run_all()
        self.started = False
        logger.info("[Extension] Shut down")
