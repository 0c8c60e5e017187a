"""Human-readable formatting helpers."""

_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_file_size(size_in_bytes: float) -> str:
    """Format a byte count using 1024-based units.

    Sizes from MB upward keep one decimal place, smaller ones are rounded.

    Args:
        size_in_bytes: Size in bytes

    Returns:
        Formatted size, e.g. "512 B", "3 KB", "1.5 MB"
    """
    if size_in_bytes <= 0:
        return "0 B"

    size = float(size_in_bytes)
    unit = 0
    while size >= 1024 and unit < len(_UNITS) - 1:
        size /= 1024
        unit += 1

    if unit >= 2:
        return f"{size:.1f} {_UNITS[unit]}"
    # Halves round up
    return f"{int(size + 0.5)} {_UNITS[unit]}"


def format_kilobytes(size_in_kb: float) -> str:
    """Format a size estimated in KB."""
    return format_file_size(size_in_kb * 1024)
