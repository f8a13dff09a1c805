#!/usr/bin/env python3
"""
lsdup CLI: list files with duplicate contents.
Drives the same engine as the library API; never modifies the scanned files.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from typing import List, NoReturn, Optional

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from lsdup.aliases import ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT
from lsdup.commands import DuplicateScanCommand
from lsdup.core.errors import ScanError
from lsdup.core.models import ContentIdentity, DuplicateGroup, RunStats, ScanParams
from lsdup.core.observer import LoggingObserver
from lsdup.utils.convert_utils import ConvertUtils


def display_path(path: str) -> str:
    """Render undecodable file name bytes as U+FFFD instead of failing to print."""
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class ProgressObserver(LoggingObserver):
    """
    Logs like the default observer and, when enabled, keeps a one-line
    progress counter on stderr.
    """

    def __init__(self, enabled: bool, interval: int = 500, stream=None):
        self.enabled = enabled
        self.interval = interval
        self.stream = stream or sys.stderr
        self.visited = 0
        self.hashed = 0

    def on_file_visited(self, path: str, size: int) -> None:
        super().on_file_visited(path, size)
        self.visited += 1
        if self.enabled and self.visited % self.interval == 0:
            self._write()

    def on_file_hashed(self, path: str, identity: ContentIdentity) -> None:
        super().on_file_hashed(path, identity)
        self.hashed += 1

    def finish(self) -> None:
        if self.enabled and self.visited:
            self._write()
            self.stream.write("\n")
            self.stream.flush()

    def _write(self) -> None:
        self.stream.write(f"\r  [scanning] {self.visited} files processed, {self.hashed} hashed...")
        self.stream.flush()


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: int = 0
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="lsdup",
            description="lsdup: list files with duplicate contents",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "dirs",
            nargs="*",
            default=["."],
            metavar="DIR",
            help="Directories to scan. Default: current directory"
        )

        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="blake3",
            type=str.lower,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--chunk-size", "-c",
            default="64K",
            type=str,
            metavar='SIZE',
            help="Read buffer for files hashed without memory mapping (e.g., 64K, 1M). Default: 64K"
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Stop on unreadable directories instead of skipping them"
        )

        # Output options
        parser.add_argument(
            "--summary", "-s",
            action="store_true",
            help="Print totals after the duplicate groups"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress everything except the duplicate groups"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="count",
            default=0,
            help="Show progress and totals; repeat (-vv) for per-file debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet cannot be combined with --verbose")

        for root in args.dirs:
            if not os.path.exists(root):
                self.error_exit(f"Directory not found: {root}")

        try:
            ConvertUtils.human_to_bytes(args.chunk_size)
        except ValueError as e:
            self.error_exit(f"Invalid --chunk-size: {e}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                roots=args.dirs,
                chunk_size_str=args.chunk_size,
                algorithm=args.algorithm,
                strict=args.strict,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def configure_logging(self) -> None:
        level = logging.WARNING
        if self.quiet:
            level = logging.ERROR
        elif self.verbose == 1:
            level = logging.INFO
        elif self.verbose >= 2:
            level = logging.DEBUG
        logging.getLogger("lsdup").setLevel(level)

    def run_scan(self, params: ScanParams) -> tuple[List[DuplicateGroup], RunStats]:
        """Execute the scan workflow."""
        command = DuplicateScanCommand()
        # Progress line only for -v; -vv already logs every file
        observer = ProgressObserver(enabled=self.verbose == 1 and sys.stderr.isatty())

        if self.verbose:
            print(f"Analyzing {', '.join(params.roots)}...", file=sys.stderr)

        try:
            groups, stats = command.execute(params, observer=observer)
        except ScanError as e:
            self.error_exit(str(e))
        finally:
            observer.finish()

        return groups, stats

    @staticmethod
    def format_group(group: DuplicateGroup) -> List[str]:
        lines = [f"Size: {group.size}  Hash: {group.identity.to_hex()}"]
        lines.extend(display_path(path) for path in group.paths)
        return lines

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        """Output duplicate groups in reporting order, separated by blank lines."""
        for idx, group in enumerate(groups):
            if idx:
                print()
            print("\n".join(self.format_group(group)))

    def output_summary(self, groups: List[DuplicateGroup], stats: RunStats) -> None:
        wasted = sum(group.wasted_bytes for group in groups)
        print(
            f"\nProcessed {stats.files} files ({ConvertUtils.bytes_to_human(stats.bytes)}), "
            f"{len(groups)} duplicate groups, {ConvertUtils.bytes_to_human(wasted)} wasted",
            file=sys.stderr
        )
        if stats.errors:
            self.warning(f"{stats.errors} file(s) could not be read; see log for details")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        self.configure_logging()
        params = self.create_params(args)

        groups, stats = self.run_scan(params)
        self.output_results(groups)

        if (args.summary or self.verbose) and not self.quiet:
            self.output_summary(groups, stats)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
