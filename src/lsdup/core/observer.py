"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/observer.py
Observers receiving engine events.
"""

import logging
from typing import Optional

from lsdup.core.interfaces import EngineObserver
from lsdup.core.models import ContentIdentity

logger = logging.getLogger(__name__)


class NullObserver(EngineObserver):
    """Ignores every event."""

    def on_file_visited(self, path: str, size: int) -> None:
        pass

    def on_hardlink_suppressed(self, path: str, first_path: Optional[str]) -> None:
        pass

    def on_file_hashed(self, path: str, identity: ContentIdentity) -> None:
        pass

    def on_error(self, path: str, error: OSError) -> None:
        pass


class LoggingObserver(EngineObserver):
    """Default observer: routes engine events to the module logger."""

    def on_file_visited(self, path: str, size: int) -> None:
        logger.debug(f"File: {path} size: {size}")

    def on_hardlink_suppressed(self, path: str, first_path: Optional[str]) -> None:
        logger.debug(f"Skipping hard link: {path} (same data as {first_path})")

    def on_file_hashed(self, path: str, identity: ContentIdentity) -> None:
        logger.debug(f"\thash: {identity.to_hex()} ({path})")

    def on_error(self, path: str, error: OSError) -> None:
        logger.warning(f"Skipping {path}: {error}")
