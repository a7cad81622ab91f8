"""
Support utilities (configuration through :class:`.UserOptions` and mixin classes).
"""

from orientations.utilities.options import UserOptions

__all__ = ["UserOptions"]
