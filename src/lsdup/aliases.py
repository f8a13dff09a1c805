from lsdup.core.hasher import ALGORITHMS

ALGORITHM_CHOICES = sorted(ALGORITHMS.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest (both 256-bit):\n"
    "  blake3     : BLAKE3, fastest on modern CPUs (default)\n"
    "  sha256     : SHA-256 from the standard library\n"
)

EPILOG_TEXT = """
Examples:
  Basic usage - list duplicates under the current directory
  %(prog)s

  Scan several directories at once
  %(prog)s ~/Pictures /mnt/backup/Pictures

  Show progress and a summary line, fail on unreadable directories
  %(prog)s -v --strict ~/Downloads

  Use SHA-256 with 1MB read buffers and save the report
  %(prog)s --algorithm sha256 --chunk-size 1M ~/Downloads > ~/report.txt
"""
