# checksum_engine.py
# Reads a file once and computes its MD5, SHA-1, SHA-256 and SHA-512 digests.

import os
import sys
import math
import hashlib
import logging
import time
from concurrent.futures import ThreadPoolExecutor

from config import PARALLEL_HASH_MIN_BYTES, HASH_WORKERS
from data_models import (
    ChecksumError, ChecksumRequest, ChecksumResult,
    CREATED_FROM_BIRTHTIME, CREATED_FROM_CTIME,
)

# Digest constructors, keyed by the result field they fill.
HASH_ALGORITHMS = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


def read_file(path):
    """
    Reads the complete content of a file into memory.
    Returns (data, stat_result). Raises ChecksumError on any I/O failure.
    """
    try:
        with open(path, "rb") as f:
            # Stat the open handle so the metadata belongs to the file that was read.
            stat_info = os.fstat(f.fileno())
            data = f.read()
    except OSError as e:
        logging.error(f"Could not read the file {path}: {e}")
        raise ChecksumError(f"Could not read '{path}': {e.strerror or e}") from e

    if len(data) != stat_info.st_size:
        logging.warning(
            f"File size changed while reading {os.path.basename(path)}: "
            f"stat reported {stat_info.st_size} bytes, read {len(data)} bytes."
        )
    return data, stat_info


def to_epoch_seconds(value):
    """
    Converts a timestamp to whole seconds since the epoch as a decimal string.
    Values before the epoch, or values that are missing or not finite, become "0".
    """
    if value is None:
        return "0"
    try:
        value = float(value)
    except (TypeError, ValueError):
        return "0"
    if math.isnan(value) or math.isinf(value) or value < 0:
        return "0"
    return str(int(value))


def creation_time(stat_info):
    """
    Returns (timestamp, source) for the creation time of a file.
    Platforms without a birth time fall back to the inode change time,
    reported with source 'ctime'.
    """
    birthtime = getattr(stat_info, "st_birthtime", None)
    if birthtime is not None:
        return birthtime, CREATED_FROM_BIRTHTIME
    if sys.platform == "win32":
        # On Windows st_ctime is the creation time.
        return stat_info.st_ctime, CREATED_FROM_BIRTHTIME
    return stat_info.st_ctime, CREATED_FROM_CTIME


def _digest(name, view):
    return HASH_ALGORITHMS[name](view).digest()


def compute_digests(data):
    """
    Computes all four digests over the same buffer. Returns {name: raw digest bytes}.
    Large buffers are hashed on one thread per algorithm; hashlib releases the GIL
    while it works, so the four digests really run side by side.
    """
    view = memoryview(data).toreadonly()
    try:
        if len(view) < PARALLEL_HASH_MIN_BYTES:
            return {name: _digest(name, view) for name in HASH_ALGORITHMS}

        with ThreadPoolExecutor(max_workers=HASH_WORKERS) as executor:
            future_to_name = {executor.submit(_digest, name, view): name for name in HASH_ALGORITHMS}
            return {name: future.result() for future, name in future_to_name.items()}
    finally:
        view.release()


def encode_result(digests, file_size, modified, created, created_source=CREATED_FROM_BIRTHTIME):
    """Turns raw digests and file metadata into a ChecksumResult."""
    return ChecksumResult(
        md5=digests["md5"].hex(),
        sha1=digests["sha1"].hex(),
        sha256=digests["sha256"].hex(),
        sha512=digests["sha512"].hex(),
        file_size=file_size,
        modified=to_epoch_seconds(modified),
        created=to_epoch_seconds(created),
        created_source=created_source,
    )


def compute_checksums(path):
    """
    Reads the file at 'path' and returns a ChecksumResult with its four digests,
    size and timestamps. 'path' can be a string, a path-like object or a
    ChecksumRequest. Raises ChecksumError if the file cannot be processed.
    """
    request = path if isinstance(path, ChecksumRequest) else ChecksumRequest(os.fspath(path))
    file_name = os.path.basename(request.path)
    logging.info(f"Calculating checksums for: {request.path}")
    start_time = time.monotonic()

    data, stat_info = read_file(request.path)
    digests = compute_digests(data)
    created, created_source = creation_time(stat_info)
    if created_source == CREATED_FROM_CTIME:
        logging.debug(f"No birth time available for {file_name}, using inode change time.")

    result = encode_result(digests, len(data), stat_info.st_mtime, created, created_source)

    duration = time.monotonic() - start_time
    logging.info(f"Checksums for {file_name} ({result.file_size} bytes) completed in {duration:.2f} seconds.")
    return result
