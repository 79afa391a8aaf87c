"""
Errors raised by the finance core.
"""


class InvalidInputError(ValueError):
    """Caller-supplied input is malformed (e.g. a month that is not YYYY-MM)."""
