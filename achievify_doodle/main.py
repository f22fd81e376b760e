"""
Achievify Doodle - Main Entry Point

Usage:
    python -m achievify_doodle.main
"""

import sys

from PyQt6.QtWidgets import QApplication

from .config import Config
from .utils.logging_config import LoggingConfig


def setup_application() -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication(sys.argv)

    # Set application metadata
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    # Note: High DPI scaling is enabled by default in PyQt6

    return app


def main():
    """
    Main entry point for Achievify Doodle

    Creates the application, sets up the main window, and runs the event loop.
    """
    # Setup logging first
    LoggingConfig.setup_logging(Config.get_log_dir())

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")
    logger.info(f"Log file: {LoggingConfig.get_log_file_path()}")

    app = setup_application()

    from .widgets.main_window import MainWindow
    window = MainWindow()
    window.show()

    logger.info(f"Device pixel ratio: {window.devicePixelRatioF():.2f}")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
