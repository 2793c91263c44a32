"""
The MODEL layer contains pure data structures.
It has NO knowledge of timers, sounds or widgets.
It deals with Candidates, Spin Settings and the Controller State snapshot.
"""
