"""Exceptions raised by sample_stats."""


class InvalidArgumentError(ValueError):
    """Raised when a validated parameter is outside its accepted domain.

    Attributes:
        value: The offending value as passed by the caller
    """

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
