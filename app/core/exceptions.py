# app/core/exceptions.py


class ConfigurationError(Exception):
    """
    Raised when the game cannot run with the data it was given, e.g. no usable
    root words were supplied or a word file could not be read.
    The embedding application decides whether to abort or retry with other input.
    """
