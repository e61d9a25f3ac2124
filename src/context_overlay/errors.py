"""Custom exceptions for context overlay loading."""


class ContextOverlayError(Exception):
    """Base exception for context overlay errors."""
    pass


class ContextError(ContextOverlayError, ValueError):
    """Raised when an application context name is invalid."""
    pass


class FragmentParseError(ContextOverlayError):
    """Raised when an existing configuration fragment cannot be parsed."""
    pass


class LoaderStateError(ContextOverlayError):
    """Raised when the loader is used after its load pass has run."""
    pass
