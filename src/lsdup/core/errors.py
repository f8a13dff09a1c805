"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
"""


class LsdupError(Exception):
    """Base class for errors raised by lsdup."""


class ScanError(LsdupError):
    """A root or directory could not be read while scanning."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot scan {path}: {reason}")
