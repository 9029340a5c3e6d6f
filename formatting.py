# formatting.py
# Turns raw result values into text for display.

from datetime import datetime

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_file_size(num_bytes):
    """Formats a byte count with two decimals, e.g. 1536 -> '1.50 KB'. Never goes past TB."""
    size = float(num_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.2f} {SIZE_UNITS[unit_index]}"


def format_timestamp(epoch_text):
    """Formats an epoch-seconds string as local date and time."""
    try:
        return datetime.fromtimestamp(int(epoch_text)).strftime("%Y-%m-%d %H:%M:%S")
    except (TypeError, ValueError, OverflowError, OSError):
        return "Unknown"
