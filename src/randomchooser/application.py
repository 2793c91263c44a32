"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) objects.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Creates the QApplication and registers the org/app identity for QSettings.
2. Reads spin overrides and the mute switch from QSettings.
3. Instantiates the scheduler, the sound service and the controller.
4. Passes the controller into the Main Window (View).
"""
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from randomchooser.controller.audio import NullSoundService, QtSoundService
from randomchooser.controller.scheduling import QtScheduler
from randomchooser.controller.selection import SelectionController
from randomchooser.model.candidates import Candidate, DEFAULT_CANDIDATES
from randomchooser.model.state import SpinSettings
from randomchooser.view.main_window import MainWindow, VISIBLE_APP_NAME

ORG_ID = "randomchooser"
APP_ID = "random-chooser"

logger = logging.getLogger(__name__)


def create_app(argv: Optional[list[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def build_main_window(
    candidates: Sequence[Candidate] = DEFAULT_CANDIDATES,
    settings: Optional[SpinSettings] = None,
    muted: Optional[bool] = None
) -> MainWindow:
    """Wires scheduler, sounds and controller together behind the main window."""
    store = QSettings()
    if settings is None:
        settings = SpinSettings.from_qsettings(store)
    if muted is None:
        muted = bool(store.value("audio/muted", False, type=bool))

    scheduler = QtScheduler()
    sounds = NullSoundService() if muted else QtSoundService()
    controller = SelectionController(
        candidates=candidates,
        scheduler=scheduler,
        loop_audio=sounds,
        oneshot_audio=sounds,
        settings=settings,
    )

    window = MainWindow(controller)
    # Keep the helpers alive as long as the window
    scheduler.setParent(window)
    controller.setParent(window)
    if isinstance(sounds, QtSoundService):
        sounds.setParent(window)
    else:
        logger.info("Sound is muted.")
    return window
