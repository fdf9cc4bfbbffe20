import os
import stat
from typing import List

from ..errors import DirectoryAccessError
from ..models import DirectoryEntry

__all__ = ["LocalFileSystem"]


class LocalFileSystem:
    """Thin wrapper over the real filesystem. Every call blocks; nothing is retried."""

    def validate_directory(self, path: str) -> None:
        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            raise DirectoryAccessError(f"path inaccessible: {path}: {e}") from e
        if not stat.S_ISDIR(mode):
            raise DirectoryAccessError(f"path is not a directory: {path}")

    def list_entries(self, path: str) -> List[DirectoryEntry]:
        with os.scandir(path) as it:
            # anything that is not a regular file counts as a directory and is never touched
            return [DirectoryEntry(name=e.name, is_dir=not e.is_file()) for e in it]

    def rename(self, old_path: str, new_path: str) -> None:
        os.rename(old_path, new_path)
