"""Exceptions raised while setting up a simulation"""


class PageSimError(Exception):
    """Base class for all simulator errors"""


class ConfigurationError(PageSimError, ValueError):
    """Invalid simulation parameters (frame count, page range, policy name)"""


class InputFormatError(PageSimError, ValueError):
    """Raw user text could not be read as the expected integers"""
