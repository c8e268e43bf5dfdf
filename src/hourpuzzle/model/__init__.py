"""
The MODEL layer contains pure data structures and puzzle logic.
It has NO knowledge of the GUI (Qt).
It deals with the tile order, the clock and the reveal rules.
"""
