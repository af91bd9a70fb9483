"""Main entry point for the crashme demo host"""
import sys
import argparse
import logging

from PyQt6.QtWidgets import QApplication, QMainWindow, QLabel, QDialog, QVBoxLayout
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction

from core.qt_host import QtWindowHost
from core.extension import CrashMeExtension
from core.crash_reporter import CrashReporter
from config.settings import Settings
from ui.theme import Theme

logger = logging.getLogger("CrashMe")


class HostWindow(QMainWindow):
    """Primary window of the demo host"""

    def __init__(self, index: int, open_window=None, parent=None):
        super().__init__(parent)
        self.setObjectName(f"hostWindow{index}")
        self.setProperty(Settings.WINDOW_TYPE_PROPERTY, Settings.get_target_window_type())
        self.setWindowTitle(f"crashme - window {index}")
        self.resize(800, 500)

        label = QLabel("Use the Crash me menu or toolbar to crash this application.")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet(f"color: {Theme.TEXT_SECONDARY}; font-size: {Theme.FONT_SIZE_LG}px;")
        self.setCentralWidget(label)

        if open_window is not None:
            file_menu = self.menuBar().addMenu("File")
            new_action = QAction("New window", self)
            new_action.triggered.connect(open_window)
            file_menu.addAction(new_action)


class UtilityDialog(QDialog):
    """A secondary window that must never be decorated"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setProperty(Settings.WINDOW_TYPE_PROPERTY, "crashme:utility")
        self.setWindowTitle("crashme - utility")
        layout = QVBoxLayout()
        layout.addWidget(QLabel("Utility window"))
        self.setLayout(layout)


class CrashMeApp:
    """Demo host application controller"""

    def __init__(self, window_count: int, with_dialog: bool, reporter: CrashReporter = None):
        self.app = QApplication(sys.argv)
        self.app.setStyleSheet(Theme.get_stylesheet())
        self.windows = []
        self.window_count = window_count
        self.with_dialog = with_dialog

        self.host = QtWindowHost(self.app)
        self.extension = CrashMeExtension(self.host, reporter=reporter, enable_reporter=reporter is not None)
        self.app.aboutToQuit.connect(self._on_about_to_quit)

    def open_window(self):
        """Open another primary window"""
        window = HostWindow(len(self.windows) + 1, open_window=self.open_window)
        window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        window.destroyed.connect(lambda *_, w=window: self._forget_window(w))
        self.windows.append(window)
        window.show()
        logger.info(f"Opened {window.windowTitle()}")
        return window

    def _forget_window(self, window):
        if window in self.windows:
            self.windows.remove(window)

    def _on_about_to_quit(self):
        self.extension.shutdown()
        self.extension.uninstall()

    def start(self):
        """Start the application"""
        self.extension.install()
        # One window exists before startup, the rest open while watching
        self.open_window()
        self.extension.startup()
        for _ in range(self.window_count - 1):
            self.open_window()

        if self.with_dialog:
            self.dialog = UtilityDialog()
            self.dialog.show()

        logger.info("Starting event loop...")
        result = self.app.exec()
        logger.info(f"Event loop exited with code: {result}")
        sys.exit(result)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(Settings.APP_LOG_FILE, encoding='utf-8')
        ]
    )


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="crashme - deliberately crash the application for crash-reporting QA")
    parser.add_argument("--windows", type=int, default=Settings.DEFAULT_WINDOW_COUNT,
                        help=f"Number of primary windows to open (default: {Settings.DEFAULT_WINDOW_COUNT})")
    parser.add_argument("--with-dialog", action="store_true", help="Also open a utility window that stays undecorated")
    parser.add_argument("--log-dir", type=str, default=Settings.get_log_dir(),
                        help=f"Crash report directory (default: {Settings.get_log_dir()})")
    parser.add_argument("--no-reporter", action="store_true", help="Do not install the crash reporter")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    setup_logging(args.verbose)
    logger.debug(f"Parsed args: {args}")

    reporter = None
    if not args.no_reporter and Settings.reporter_enabled():
        reporter = CrashReporter(log_dir=args.log_dir)

    app = CrashMeApp(window_count=max(1, args.windows), with_dialog=args.with_dialog, reporter=reporter)
    app.start()


if __name__ == "__main__":
    main()
