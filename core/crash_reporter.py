import sys
import traceback
import os
import logging
import faulthandler
from datetime import datetime

from config.settings import Settings

logger = logging.getLogger(__name__)


class CrashReporter:
    """
    Handles unhandled exceptions and native faults and logs them to files.
    """
    def __init__(self, log_dir=Settings.DEFAULT_LOG_DIR, prefix=Settings.CRASH_REPORT_PREFIX, exit_on_crash=True):
        self.log_dir = log_dir
        self.prefix = prefix
        self.exit_on_crash = exit_on_crash
        self.installed = False
        self._previous_hook = None
        self._native_log = None
        self._setup_logging()

    def _setup_logging(self):
        if not os.path.exists(self.log_dir):
            try:
                os.makedirs(self.log_dir)
            except Exception as e:
                logger.error(f"[CrashReporter] Failed to create log directory: {e}")

    def install(self):
        """Install the exception hook and the native fault handler"""
        if self.installed:
            return
        self._previous_hook = sys.excepthook
        sys.excepthook = self._handle_exception
        try:
            self._native_log = open(os.path.join(self.log_dir, Settings.NATIVE_CRASH_LOG), "a", encoding="utf-8")
            faulthandler.enable(file=self._native_log, all_threads=True)
        except OSError as e:
            logger.error(f"[CrashReporter] Native fault log unavailable: {e}")
            self._native_log = None
        self.installed = True
        logger.info("[CrashReporter] Installed exception hook")

    def uninstall(self):
        """Restore the previous exception hook"""
        if not self.installed:
            return
        if sys.excepthook == self._handle_exception:
            sys.excepthook = self._previous_hook or sys.__excepthook__
        if self._native_log is not None:
            faulthandler.disable()
            self._native_log.close()
            self._native_log = None
        self.installed = False
        logger.info("[CrashReporter] Removed exception hook")

    def _handle_exception(self, exc_type, exc_value, exc_traceback):
        """Callback for sys.excepthook"""
        # Ignore KeyboardInterrupt so Ctrl+C still works
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        self.write_report(exc_type, exc_value, exc_traceback)

        if self.exit_on_crash:
            sys.exit(1)

    def write_report(self, exc_type, exc_value, exc_traceback):
        """Write a crash report file and return its path, or None on failure"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{self.prefix}_crash_{timestamp}.log"
        filepath = os.path.join(self.log_dir, filename)

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write("CrashMe Crash Report\n")
                f.write(f"Time: {datetime.now().isoformat()}\n")
                f.write(f"OS: {sys.platform}\n")
                f.write(f"Python: {sys.version}\n")
                f.write("-" * 50 + "\n")
                f.write("Exception:\n")
                traceback.print_exception(exc_type, exc_value, exc_traceback, file=f)
                f.write("-" * 50 + "\n")

            logger.critical(f"[CRASH] Application crashed! traceback saved to: {filepath}")
            # Also print to stderr for immediate feedback
            traceback.print_exception(exc_type, exc_value, exc_traceback)
            return filepath

        except Exception as e:
            print(f"[CRASH] Failed to write crash log: {e}", file=sys.stderr)
            traceback.print_exception(exc_type, exc_value, exc_traceback)
            return None
