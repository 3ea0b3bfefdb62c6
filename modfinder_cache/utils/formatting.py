"""
Helper functions for formatting data into human-readable strings.
"""

from pathlib import Path


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable size string (e.g., '145.3 MB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    while bytes_size >= 1024 and i < len(units) - 1:
        bytes_size /= 1024
        i += 1
    return f"{bytes_size:.1f} {units[i]}"


def directory_size(directory_path: Path) -> int:
    """Sums the size of every file below a directory. Missing dirs count as 0."""
    if not directory_path.is_dir():
        return 0
    return sum(p.stat().st_size for p in directory_path.rglob("*") if p.is_file())
