# config.py

import os

# --- Application ---
APP_NAME = "Checksum Check"

# The base directory where the application keeps its own files (logs).
APP_DATA_DIR = os.path.join(os.path.expanduser("~"), ".checksum_check")

# --- Logging ---
# The subfolder for log files.
LOG_FOLDER = os.path.join(APP_DATA_DIR, "Logs")
# The main log file for the application's operations.
LOG_FILENAME = "checksum_check.log"
# The log file is moved to '.log.old' once it grows past this size. Default is 5 MB.
LOG_MAX_BYTES = 5 * 1024 * 1024

# --- Hashing ---
# Files of at least this size (in bytes) get their four digests computed on
# separate threads. Smaller files are hashed one digest after the other.
# Default is 1 MB.
PARALLEL_HASH_MIN_BYTES = 1 * 1024 * 1024
# One thread per digest algorithm.
HASH_WORKERS = 4

# --- Window ---
# Default window size, restored on reset.
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
# How long (in milliseconds) a copy button shows "Copied!" before reverting.
COPY_FEEDBACK_MS = 1000
