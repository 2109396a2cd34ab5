"""Core primitives: states, the game map that owns them, shared values and run events.

Kept free of run-loop concerns so graphs can be built and inspected in isolation.
"""
