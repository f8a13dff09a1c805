"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Byte-count conversions for CLI input and report output.
"""

import re

_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]

# Binary multipliers accepted by --chunk-size: 4096, 512B, 64K, 64KB, 1.5M, 1G
_SIZE_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)\s*([KMG]?)B?$")
_MULTIPLIERS = {"": 1, "K": 1024, "M": 1024 ** 2, "G": 1024 ** 3}


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 512B, 1.50KB, 3.20MB).
        Plain byte counts are printed without decimals.
        """
        if size_bytes < 0:
            return "0B"
        if size_bytes < 1024:
            return f"{size_bytes}B"

        value = float(size_bytes)
        for unit in _UNITS:
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}EB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Parse a buffer size such as '64K', '1.5MB' or '4096' into bytes.
        Raises ValueError for negative sizes or anything else it cannot read.
        """
        match = _SIZE_PATTERN.match(size_str.strip().upper())
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str.strip()}'. "
                f"Expected a number with an optional K, M or G suffix (e.g. 64K, 1M)"
            )

        number, unit = match.groups()
        value = float(number)
        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str.strip()}'")
        return int(value * _MULTIPLIERS[unit])
