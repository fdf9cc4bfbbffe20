import os
from typing import Callable

from colorama import Fore

from ..errors import FilesystemError
from ..models import RenameResult, RenameTask
from ..settings import ID_BYTES
from .filters import extension_of
from .identifier import generate_identifier
from .logger import get_logger, log_info, log_success

__all__ = ["build_new_name", "rename_one"]


def build_new_name(identifier: str, old_name: str) -> str:
    return f"{identifier}{extension_of(old_name)}"


def rename_one(task: RenameTask, fs, num_bytes: int = ID_BYTES, dry_run: bool = False,
               generate: Callable[[int], str] = generate_identifier,
               logger=None) -> RenameResult:
    """
    Rename one eligible file in place to ``<identifier><.ext>``.

    One attempt only. EntropySourceError from the generator propagates as is;
    an OSError from the rename is raised as FilesystemError.
    """
    logger = logger or get_logger()
    old_name = task.entry.name

    identifier = generate(num_bytes)
    new_name = build_new_name(identifier, old_name)

    old_path = os.path.join(task.directory, old_name)
    new_path = os.path.join(task.directory, new_name)

    if dry_run:
        log_info(logger, f"Would rename: {old_name} -> {new_name}", Fore.CYAN)
        return RenameResult(old_name, new_name, performed=False)

    try:
        fs.rename(old_path, new_path)
    except OSError as e:
        raise FilesystemError(old_name, e) from e

    log_success(logger, f"Renamed: {old_name} -> {new_name}")
    return RenameResult(old_name, new_name)
