# workers.py
import logging
import os
from PySide6.QtCore import QObject, Signal

from checksum_engine import compute_checksums
from data_models import ChecksumError, ChecksumRequest


class ChecksumWorker(QObject):
    """
    Worker to calculate the checksums of a single file in a separate thread.
    Both signals carry the request first, so the window can tell a stale
    worker's answer apart from the one it is waiting for.
    """
    finished = Signal(object, object)  # ChecksumRequest, ChecksumResult
    error_occurred = Signal(object, str)  # ChecksumRequest, message

    def __init__(self, file_path):
        super().__init__()
        self.request = ChecksumRequest(file_path)

    def run(self):
        try:
            result = compute_checksums(self.request)
        except ChecksumError as e:
            self.error_occurred.emit(self.request, str(e))
            return
        except Exception as e:
            logging.critical(f"A critical error occurred in the checksum thread: {e}", exc_info=True)
            self.error_occurred.emit(
                self.request,
                f"An error occurred while calculating checksums for {os.path.basename(self.request.path)}:\n\n{e}"
            )
            return
        self.finished.emit(self.request, result)
