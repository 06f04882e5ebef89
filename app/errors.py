class TypingTestError(Exception):
    """Base class for application errors."""


class SettingsError(TypingTestError, ValueError):
    """Raised when a settings payload cannot be turned into a SessionConfig."""
