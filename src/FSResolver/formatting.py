"""Human-readable byte sizes and elapsed times."""

from __future__ import annotations

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: int) -> str:
    """Format a byte count with the largest unit that keeps the value >= 1.

    Example: 0 -> "0 B", 1536 -> "1.50 KB", 1048576 -> "1.00 MB".
    """
    if num_bytes <= 0:
        return "0 B"
    value = float(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {SIZE_UNITS[unit]}"


def format_elapsed(ms: int) -> str:
    """Format a duration in milliseconds, adapting to its magnitude.

    Example output:
        "250 (ms)"
        "3:042 (s:ms)"
        "02.05:000 (m.s:ms)"
        "01.00.00:001 (h.m.s:ms)"
    """
    hours, ms = divmod(int(ms), 3_600_000)
    minutes, ms = divmod(ms, 60_000)
    seconds, milliseconds = divmod(ms, 1000)

    if hours:
        return f"{hours:02d}.{minutes:02d}.{seconds:02d}:{milliseconds:03d} (h.m.s:ms)"
    if minutes:
        return f"{minutes:02d}.{seconds:02d}:{milliseconds:03d} (m.s:ms)"
    if seconds:
        return f"{seconds}:{milliseconds:03d} (s:ms)"
    return f"{milliseconds} (ms)"
