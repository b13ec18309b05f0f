"""
Review-related exceptions.
"""


class ReviewError(Exception):
    """Base exception for review errors."""
    pass


class ReviewValidationError(ReviewError):
    """Exception raised when a submitted review is invalid."""
    pass
