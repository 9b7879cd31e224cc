"""A set of custom exceptions."""


class ValidationError(Exception):
    """An error indicating that data-object does not comply with the guidelines."""


class PreconditionError(ValueError):
    """An error indicating that a method was called in a way that violates its contract.

    The most common case is advancing an :class:`~imutrack.tracking.OrientationTracker` backwards in time.
    """
