"""dustoff - find what fills your disk and clear it out.

Bounded directory scanning plus file delete, move and trash operations.
"""

__version__ = "0.2.0"
