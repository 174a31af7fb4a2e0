"""Project-specific exception types."""

class AlembicBindingsNotAvailableError(ImportError):
    """Raised when the PyAlembic bindings are missing."""


class ArchiveUnavailableError(RuntimeError):
    """Raised when an archive cannot be opened or one of its objects cannot be read."""


class TraversalHalted(Exception):
    """Raised at a cancellation poll once the progress sink reports cancellation."""
