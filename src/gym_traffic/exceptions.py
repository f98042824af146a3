class GymTrafficError(Exception):
    """Base exception for all gym traffic errors."""
    pass


class NotFoundError(GymTrafficError):
    """Raised when a facility id is not registered."""
    pass


class InvalidArgumentError(GymTrafficError, ValueError):
    """Raised when a date, hour or schedule argument is malformed."""
    pass
