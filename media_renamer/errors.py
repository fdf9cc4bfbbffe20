class RenamerError(Exception):
    """Base error for the project."""


class DirectoryAccessError(RenamerError):
    """Target directory is missing, unreadable or not a directory. Fatal for the run."""


class EntropySourceError(RenamerError):
    """The secure random source could not supply bytes for an identifier."""


class FilesystemError(RenamerError):
    """A single rename failed at the filesystem boundary."""

    def __init__(self, source: str, cause: OSError):
        self.source = source
        self.cause = cause
        super().__init__(f"{source}: {cause}")
