"""
Error types raised while computing or formatting a relative distance.
"""


class IntlDistanceError(Exception):
    """Base class for distance errors"""


class InvalidInstantError(IntlDistanceError, ValueError):
    """An instant could not be resolved to a valid point in time"""


class InvalidOptionError(IntlDistanceError, ValueError):
    """An option value is not one the classifier or formatter accepts"""
