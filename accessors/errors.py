"""Errors raised while fetching content from GitHub."""


class GitEventsError(Exception):
    """Base class for errors raised by the accessors."""


class MissingParametersError(GitEventsError, ValueError):
    """Raised when required arguments are missing, before any request is made."""

    def __init__(self, names):
        self.names = list(names)
        super().__init__(f"Missing required parameters: {', '.join(self.names)}")


class FetchError(GitEventsError):
    """Raised when fetching or processing content fails."""


class RepositoryFileNotFoundError(GitEventsError):
    """Raised when a path does not resolve to a file in the repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class BinaryFileError(GitEventsError):
    """Raised when a requested file is binary."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Binary files are not supported: {path}")


class InvalidJSONError(GitEventsError, ValueError):
    """Raised when a file requested as JSON does not parse."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to parse JSON from {path}: {reason}")


class InvalidLocationsError(GitEventsError, ValueError):
    """Raised when the locations file is not a list of locations."""
