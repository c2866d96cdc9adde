"""Exception hierarchy for selectorkit."""


class SelectorKitError(Exception):
    """Base exception for all selectorkit errors."""


class SelectorError(SelectorKitError):
    """Raised when a selector cannot be built as requested."""


class DuplicateError(SelectorError):
    """Raised when a single-occurrence selector part is set twice."""


class OrderError(SelectorError):
    """Raised when selector parts are added out of order."""


class SerializationError(SelectorKitError):
    """Raised when JSON encoding or decoding fails."""


class ConfigError(SelectorKitError):
    """Raised when configuration is invalid."""
