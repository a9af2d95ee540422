class BookerError(Exception):
    """Base exception."""

class ConfigurationError(BookerError):
    """Invalid run configuration."""

class MissingArgument(ConfigurationError):
    """A required command line option was not given."""

class AuthenticationError(BookerError):
    """A login step failed."""

class SlotClaimError(BookerError):
    """Claiming a single reservation slot failed."""
    def __init__(self, label, message):
        super().__init__(f"could not claim slot {label!r}: {message}")
        self.label = label
