import argparse
import sys
from typing import List, Optional

from colorama import Fore, Style, deinit, init

from . import __version__
from .errors import DirectoryAccessError
from .modules.coordinator import BatchRenamer
from .modules.logger import log_error, setup_logger
from .settings import ALLOWED_ID_BYTES, DEFAULT_DIRECTORY, ID_BYTES, MAX_WORKERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-renamer",
        description="Rename every image/video in a directory to a random hex identifier (extension kept).",
    )
    parser.add_argument("directory", nargs="?", default=DEFAULT_DIRECTORY,
                        help="Directory to process (default: current directory)")
    parser.add_argument("-w", "--workers", type=int, default=MAX_WORKERS,
                        help=f"Maximum renames in flight (default: {MAX_WORKERS})")
    parser.add_argument("--id-bytes", type=int, choices=ALLOWED_ID_BYTES, default=ID_BYTES,
                        help=f"Random bytes per identifier (default: {ID_BYTES})")
    parser.add_argument("-n", "--dry-run", action="store_true",
                        help="Show what would be renamed without touching files")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--log-file", default=None, help="Also write a debug log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug output on console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be >= 1")

    init()
    logger = setup_logger(log_file=args.log_file, verbose=args.verbose)
    if args.dry_run:
        print(f"{Fore.MAGENTA}=== DRY RUN: no files will be renamed ==={Style.RESET_ALL}")

    try:
        BatchRenamer(
            args.directory,
            max_workers=args.workers,
            num_bytes=args.id_bytes,
            dry_run=args.dry_run,
            show_progress=not args.no_progress,
            logger=logger,
        ).run()
    except DirectoryAccessError as e:
        log_error(logger, f"Folder validation failed: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nCancelled by user.")
        return 130
    finally:
        deinit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
