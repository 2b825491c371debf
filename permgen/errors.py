class PermgenError(Exception):
    """Base class for errors raised by permgen."""


class SizeExceededError(PermgenError, ValueError):
    """Input is longer than a generator's counters can index."""


class UnknownAlgorithmError(PermgenError, ValueError):
    """Algorithm selector does not name any generator."""
