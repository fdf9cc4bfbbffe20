__version__ = "1.0.0"

from .errors import DirectoryAccessError, EntropySourceError, FilesystemError, RenamerError
from .models import DirectoryEntry, RenameResult, RenameTask, RunState, RunSummary
from .modules.coordinator import BatchRenamer, OutcomeTally, rename_directory

__all__ = [
    "BatchRenamer",
    "DirectoryAccessError",
    "DirectoryEntry",
    "EntropySourceError",
    "FilesystemError",
    "OutcomeTally",
    "RenameResult",
    "RenameTask",
    "RenamerError",
    "RunState",
    "RunSummary",
    "rename_directory",
]
