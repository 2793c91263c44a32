"""
The CONTROLLER layer drives the spin: the selection state machine, the
timer adapter that feeds it ticks, and the sound service it notifies.
"""
