class InvalidArgumentError(ValueError):
    """
    Raised when a caller passes a category the combat model does not know,
    such as an unrecognized stat name or status kind.

    These are programming errors on the caller's side; nothing in the
    combat model tries to recover from them.
    """
