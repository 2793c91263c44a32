"""
The VIEW layer: Qt widgets that render ControllerState and forward clicks.
"""
