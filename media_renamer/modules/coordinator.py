from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List

from colorama import Fore
from tqdm import tqdm

from ..errors import DirectoryAccessError, RenamerError
from ..models import RenameTask, RunState, RunSummary
from ..settings import ID_BYTES, MAX_WORKERS
from .filters import filter_entries
from .fs import LocalFileSystem
from .identifier import generate_identifier
from .logger import get_logger, log_error, log_info
from .renamer import rename_one

__all__ = ["OutcomeTally", "BatchRenamer", "rename_directory"]


class OutcomeTally:
    """Success/failure counters shared by every task of one run."""

    def __init__(self):
        self._lock = threading.Lock()
        self.success = 0
        self.failure = 0

    def record_success(self) -> None:
        with self._lock:
            self.success += 1

    def record_failure(self) -> None:
        with self._lock:
            self.failure += 1

    def snapshot(self) -> tuple[int, int]:
        with self._lock:
            return self.success, self.failure


class BatchRenamer:
    """
    Renames every eligible file of one directory with at most ``max_workers``
    renames in flight.

    INIT -> LISTING -> DISPATCHING -> AWAITING -> REPORTED, or FAILED when the
    directory cannot be validated or listed. Per-file errors are counted, never
    raised.
    """

    def __init__(self, directory: str, fs=None, max_workers: int = MAX_WORKERS,
                 num_bytes: int = ID_BYTES, dry_run: bool = False,
                 show_progress: bool = False, generate=generate_identifier, logger=None):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.directory = directory
        self.fs = fs or LocalFileSystem()
        self.max_workers = max_workers
        self.num_bytes = num_bytes
        self.dry_run = dry_run
        self.show_progress = show_progress
        self.generate = generate
        self.logger = logger or get_logger()
        self.state = RunState.INIT
        self.tally = OutcomeTally()

    def _setup(self) -> list:
        try:
            self.fs.validate_directory(self.directory)
            self.state = RunState.LISTING
            try:
                return self.fs.list_entries(self.directory)
            except OSError as e:
                raise DirectoryAccessError(f"failed to read directory {self.directory}: {e}") from e
        except DirectoryAccessError:
            self.state = RunState.FAILED
            raise

    def _process(self, task: RenameTask, pbar: tqdm) -> None:
        try:
            rename_one(task, self.fs, num_bytes=self.num_bytes,
                       dry_run=self.dry_run, generate=self.generate,
                       logger=self.logger)
        except RenamerError as e:
            log_error(self.logger, f"Rename failed: {e}")
            self.tally.record_failure()
        except Exception as e:
            log_error(self.logger, f"Rename failed: {task.entry.name}: {e!r}")
            self.logger.debug("task error", exc_info=True)
            self.tally.record_failure()
        else:
            self.tally.record_success()
        finally:
            pbar.update(1)

    def run(self) -> RunSummary:
        self.state = RunState.INIT
        self.tally = OutcomeTally()
        entries = self._setup()
        eligible = filter_entries(entries)
        skipped = len(entries) - len(eligible)
        self.logger.debug(f"{len(eligible)} eligible of {len(entries)} entries in {self.directory}")

        self.state = RunState.DISPATCHING
        slots = threading.BoundedSemaphore(self.max_workers)
        futures: List = []

        with tqdm(total=len(eligible), desc="Renaming", unit="file",
                  ascii=True, disable=not self.show_progress) as pbar, \
                ThreadPoolExecutor(max_workers=self.max_workers) as ex:
            for entry in eligible:
                # blocks while max_workers tasks are in flight
                slots.acquire()
                task = RenameTask(self.directory, entry)
                fut = ex.submit(self._process, task, pbar)
                fut.add_done_callback(lambda _f: slots.release())
                futures.append(fut)

            self.state = RunState.AWAITING
            wait(futures)

        success, failure = self.tally.snapshot()
        self.state = RunState.REPORTED
        log_info(self.logger, f"Complete. Success: {success}, Failures: {failure}", Fore.YELLOW)
        return RunSummary(success=success, failure=failure, dispatched=len(futures),
                          skipped=skipped, state=self.state)


def rename_directory(directory: str, **kwargs) -> RunSummary:
    return BatchRenamer(directory, **kwargs).run()
