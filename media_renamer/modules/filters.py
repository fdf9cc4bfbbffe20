import os
from typing import AbstractSet, Iterable, List

from ..models import DirectoryEntry
from ..settings import SUPPORTED_EXTENSIONS

__all__ = [
    "extension_of",
    "is_eligible",
    "filter_entries",
]


def extension_of(name: str) -> str:
    """'Photo.JPG' -> '.jpg'; '' when there is no extension."""
    return os.path.splitext(name)[1].lower()


def is_eligible(entry: DirectoryEntry, extensions: AbstractSet[str] = SUPPORTED_EXTENSIONS) -> bool:
    if entry.is_dir:
        return False
    return extension_of(entry.name) in extensions


def filter_entries(entries: Iterable[DirectoryEntry],
                   extensions: AbstractSet[str] = SUPPORTED_EXTENSIONS) -> List[DirectoryEntry]:
    return [e for e in entries if is_eligible(e, extensions)]
