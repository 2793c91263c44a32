"""
Logging Configuration
Sets up the application logger and routes Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOGGER_NAME = "randomchooser"

# Qt message types -> Python logging levels
_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def _qt_message_handler(msg_type, context, message: str) -> None:
    """Forward qDebug/qWarning output (e.g. QSoundEffect decode errors) to logging."""
    level = _QT_LEVELS.get(msg_type, logging.WARNING)
    logging.getLogger(f"{LOGGER_NAME}.qt").log(level, message)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    capture_qt: bool = True
) -> logging.Logger:
    """
    Configures the logger for the 'randomchooser' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG to see every spin tick)
        log_file: Optional path to save logs to a file.
        capture_qt: Install a Qt message handler so multimedia warnings
            end up in the same stream instead of raw stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on re-setup
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if capture_qt:
        qInstallMessageHandler(_qt_message_handler)

    logger.info("Logging initialized.")
    return logger
