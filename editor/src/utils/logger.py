"""Global error reporting for the designer window"""
import logging
import sys

# True when running from source, False in a frozen (packaged) build
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None
_logger = logging.getLogger('TubeDesigner')


def set_main_window(window):
    """Set the main window reference used as the popup parent"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception, then re-raise it

    Args:
        e: The exception to handle
        user_message: User-friendly message for the popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE the exception is re-raised straight away so the full
    traceback reaches the console.

    In release builds the traceback is logged and a critical message box is
    shown on the main window (if one is registered) before re-raising.
    """
    if DEBUG_MODE:
        raise e

    _logger.error(user_message or str(e), exc_info=e)

    message = user_message if user_message else str(e)
    if _main_window is not None:
        from PyQt5.QtWidgets import QMessageBox
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"ERROR POPUP (no window): {title} - {message}")

    raise e
