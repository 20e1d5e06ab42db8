class SkirmishError(Exception):
    """Base exception for the Skirmish project."""


class InvalidArgument(SkirmishError, ValueError):
    """Raised when a damage or heal amount is out of contract (e.g., negative)."""


class PreconditionViolation(SkirmishError, RuntimeError):
    """Raised when an operation is invoked in a state that does not allow it."""


class ConfigError(SkirmishError):
    """Raised when a scenario file cannot be loaded or is malformed."""
