"""Exceptions raised by the search pipeline."""


class WegoError(Exception):
    """Base error for wego."""


class ValidationError(WegoError):
    """Raised when a keyword is empty, malformed or not a known location."""

    def __init__(self, message: str, *, clear_input: bool = False):
        super().__init__(message)
        self.clear_input = clear_input
