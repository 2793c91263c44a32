"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths to images and sounds scattered
   throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (images, sounds) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    IMAGES_PATH (str): Absolute path to the candidate images.
    SOUNDS_PATH (str): Absolute path to the sound effects.
"""
import logging
import sys
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/randomchooser/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
IMAGES_PATH: str = os.path.join(ASSETS_PATH, "images")
SOUNDS_PATH: str = os.path.join(ASSETS_PATH, "sounds")

IMAGE_EXTENSION = ".png"
# QSoundEffect only decodes uncompressed WAV
SOUND_EXTENSION = ".wav"

# Sound asset identifiers
SPINNING_SOUND = "spinning"
WIN_SOUND = "win"

# Spin defaults (overridable through QSettings, see model.state.SpinSettings)
TICK_INTERVAL_MS = 100
LAP_THRESHOLD = 3
PULSE_SCALE = 0.95
REVEAL_SCALE = 1.2
REVEAL_SETTLE_MS = 300

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
