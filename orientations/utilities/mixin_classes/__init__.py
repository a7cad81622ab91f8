"""
This package contains helpful mixin classes used by the rotation classes.
"""

from orientations.utilities.mixin_classes.attribute_printing import AttributePrinting
from orientations.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["AttributePrinting", "UserOptionConfigured"]
