"""
Notification and sharing exceptions.
"""


class ShareUnavailableError(Exception):
    """Exception raised when the host cannot share natively."""
    pass
