# logger_setup.py
import logging
import sys
from pathlib import Path
from config import LOG_FOLDER, LOG_FILENAME, LOG_MAX_BYTES


def setup_global_logger(log_folder=None, level=logging.INFO):
    """
    Configures a global logger that writes to both a file and the console.
    """
    log_path = Path(log_folder or LOG_FOLDER) / LOG_FILENAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Rotate the log file if it's too large
    try:
        if log_path.exists() and log_path.stat().st_size > LOG_MAX_BYTES:
            log_path.replace(log_path.with_suffix('.log.old'))
    except OSError as e:
        print(f"WARNING: Could not rotate log file {log_path}: {e}", file=sys.stderr)

    # Define format
    log_format = '%(asctime)s - %(levelname)s - %(module)s.%(funcName)s: %(message)s'
    formatter = logging.Formatter(log_format, '%Y-%m-%d %H:%M:%S')

    # Configure root logger
    logger = logging.getLogger()
    logger.setLevel(level)

    if logger.hasHandlers():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    # File handler
    file_handler = logging.FileHandler(str(log_path), encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Console handler (for debugging)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG)
    logger.addHandler(console_handler)

    logging.info("Logger initialized.")
    return logger
