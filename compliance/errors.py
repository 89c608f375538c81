# compliance/errors.py


class TagHunterError(Exception):
    """Base class for fatal tag-check failures."""


class ConfigurationError(TagHunterError):
    """Rule configuration is missing or malformed."""


class EvaluationError(TagHunterError):
    """A resource's tags could not be evaluated to a concrete value."""

    def __init__(self, message, address=None):
        super().__init__(message)
        self.address = address
