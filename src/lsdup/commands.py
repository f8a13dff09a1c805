"""
Unified command orchestrator for duplicate scans.
This is the SINGLE source of truth for the scan workflow, used by the CLI and library callers.
No terminal dependencies, pure Python.
"""
from typing import List, Optional, Tuple

from lsdup.core.engine import Engine
from lsdup.core.hasher import ContentHasherImpl, get_algorithm
from lsdup.core.interfaces import EngineObserver
from lsdup.core.models import DuplicateGroup, RunStats, ScanParams
from lsdup.core.scanner import FileScannerImpl


class DuplicateScanCommand:
    """
    Orchestrates the entire scan workflow:
    1. Build the hasher from the selected algorithm
    2. Walk every root with the scanner
    3. Feed each regular file to the engine

    Usage:
        params = ScanParams(roots=["~/Downloads"])
        command = DuplicateScanCommand()
        groups, stats = command.execute(params, observer=cli_progress_observer)
    """

    def __init__(self):
        self.engine: Optional[Engine] = None
        self.scanner: Optional[FileScannerImpl] = None

    def execute(
            self,
            params: ScanParams,
            observer: Optional[EngineObserver] = None,
    ) -> Tuple[List[DuplicateGroup], RunStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            observer: Receives engine events; logs them when omitted

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            ScanError: If a root is missing, or a directory is unreadable in strict mode
        """
        hasher = ContentHasherImpl(
            algorithm=get_algorithm(params.algorithm),
            chunk_size=params.chunk_size,
            mmap_threshold=params.mmap_threshold,
        )
        self.engine = Engine(hasher=hasher, observer=observer)
        self.scanner = FileScannerImpl(roots=params.roots, strict=params.strict)

        self.engine.visit_all(self.scanner.scan())

        return self.engine.duplicates(), self.engine.stats()

    def get_engine(self) -> Engine:
        """Get the underlying engine (for advanced use cases)."""
        if not self.engine:
            raise RuntimeError("Command not executed yet")
        return self.engine
