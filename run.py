"""
Entry Point Script (Bootstrap)
==============================
Starts Random Chooser straight from a source checkout.

Why is this file needed?
------------------------
1. It sits outside the 'src' package so the app runs without installing it.
2. It puts 'src' on 'sys.path' so 'from randomchooser...' imports resolve.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

# Gives the window its own taskbar entry on Windows
appid = 'randomchooser.RandomChooser'
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from randomchooser.main import main

if __name__ == "__main__":
    sys.exit(main())
