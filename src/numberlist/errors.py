"""Exception classes for numberlist."""


class NumberListError(Exception):
    """Base exception for all numberlist errors."""


class ConfigurationError(NumberListError):
    """Raised when a configuration names an unsupported base or operation."""


class TopologyError(NumberListError):
    """Raised when a link operation is not available for the chain's topology."""


class MissingDigitError(NumberListError):
    """Raised when a digit argument is None or not an integer."""


class InvalidDigitError(NumberListError):
    """Raised when a digit lies outside [0, base) for the target list."""


class CursorStateError(NumberListError):
    """Raised when a cursor mutation has no last-returned digit to act on."""


class NoSuchDigitError(NumberListError):
    """Raised when a cursor is moved past the front of the list."""
