"""Global logging and error handling utilities"""
import sys
import logging
import traceback
from PyQt5.QtWidgets import QApplication, QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_main_window = None
_logger = logging.getLogger('FrameEditor')


def configure_logging(level=logging.WARNING):
    """Send log records to stdout in the editor's format"""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Logs the message and raises the exception (full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    message = user_message if user_message else str(e)

    if DEBUG_MODE:
        _logger.debug("%s: %s", title, message)
        raise e

    _logger.error("%s: %s\n%s", title, message, traceback.format_exc())

    if _main_window is not None and QApplication.instance() is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error("ERROR POPUP (no window): %s - %s", title, message)

    # Re-raise so the caller can handle it appropriately
    raise e
