"""
Error kinds surfaced by the playlist analysis pipeline.
"""


class PlaylistAnalysisError(Exception):
    """Base class for every failure reported to the caller."""
    pass


class ValidationError(PlaylistAnalysisError):
    """Raised for missing or malformed user input."""
    pass


class RemoteError(PlaylistAnalysisError):
    """Raised when a backend response carries an error descriptor."""
    pass


class EmptyResultError(PlaylistAnalysisError):
    """Raised when a playlist resolves to zero videos."""
    pass
