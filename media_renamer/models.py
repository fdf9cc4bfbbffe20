from dataclasses import dataclass
from enum import Enum


class RunState(Enum):
    INIT = "init"
    LISTING = "listing"
    DISPATCHING = "dispatching"
    AWAITING = "awaiting"
    REPORTED = "reported"
    FAILED = "failed"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    is_dir: bool


@dataclass(frozen=True)
class RenameTask:
    directory: str
    entry: DirectoryEntry


@dataclass(frozen=True)
class RenameResult:
    old_name: str
    new_name: str
    performed: bool = True  # False on dry-run


@dataclass(frozen=True)
class RunSummary:
    success: int
    failure: int
    dispatched: int
    skipped: int
    state: RunState
