import os

BYTES_PER_GB = 1024 * 1024 * 1024
ENCODING = "utf-8"


def gb_to_bytes(size_in_gb):
    """Convert gigabytes to a whole byte count (fraction truncated)"""
    return int(size_in_gb * BYTES_PER_GB)


def line_byte_length(line, newline=os.linesep):
    """Number of UTF-8 bytes a line takes on disk, terminator included"""
    return len((line + newline).encode(ENCODING))


def get_file_size(file_path):
    return os.path.getsize(file_path)


def format_size(num_bytes):
    """Human readable size, e.g. 1.50 GB"""
    size = float(num_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024 or unit == "GB":
            break
        size /= 1024
    if unit == "B":
        return f"{int(size)} B"
    return f"{size:.2f} {unit}"


def format_gb(size_in_gb):
    """Shortest text for a GB value, whole numbers without a trailing .0"""
    if size_in_gb.is_integer() and abs(size_in_gb) < 1e15:
        return str(int(size_in_gb))
    return repr(size_in_gb)
