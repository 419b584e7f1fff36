"""Custom exceptions for video sorting errors."""


class VidSortError(Exception):
    """Base class for all vidsort errors."""

    pass


class ProbeUnavailableError(VidSortError):
    """The probing tool is missing or cannot be executed."""

    pass


class ProbeFailedError(VidSortError):
    """Metadata could not be read from a single file."""

    pass


class RelocationError(VidSortError):
    """A file could not be moved to its destination directory."""

    pass


class RelocationConflictError(RelocationError):
    """A file with the same name already exists at the destination."""

    pass


class InvalidSourceDirectoryError(VidSortError):
    """The source directory is missing or is not a directory."""

    pass
