class CalmathError(Exception):
    """Base error."""

class InvalidShapeError(CalmathError, TypeError):
    """Raised when a Month/Year/Week does not have the expected structure."""

class NonTerminatingScanError(CalmathError, RuntimeError):
    """Raised when a year scan keeps crossing zero-length years."""
