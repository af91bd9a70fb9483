"""Settings and configuration management"""
import os
from typing import Optional


class Settings:
    """Application settings"""

    # Window classification
    TARGET_WINDOW_TYPE = "navigator:browser"  # Primary application windows only
    WINDOW_TYPE_PROPERTY = "windowtype"  # Qt dynamic property holding the category

    # Crash reporting
    DEFAULT_LOG_DIR = "logs"
    CRASH_REPORT_PREFIX = "crashme"
    NATIVE_CRASH_LOG = "native_crash.log"
    NATIVE_CRASH_ADDRESS = 8  # Near-NULL so the read faults instead of returning

    # Demo host
    DEFAULT_WINDOW_COUNT = 1
    APP_LOG_FILE = "crashme.log"

    @staticmethod
    def get_target_window_type() -> str:
        """Get the window category to decorate"""
        return os.getenv("CRASHME_WINDOW_TYPE") or Settings.TARGET_WINDOW_TYPE

    @staticmethod
    def get_log_dir() -> str:
        """Get crash report directory from environment"""
        return os.getenv("CRASHME_LOG_DIR") or Settings.DEFAULT_LOG_DIR

    @staticmethod
    def reporter_enabled() -> bool:
        """Whether the crash reporter should be installed on startup"""
        value: Optional[str] = os.getenv("CRASHME_REPORTER")
        if value is None:
            return True
        return value.strip().lower() not in ("0", "false", "no", "off")
